# portfolio/content.py — fixed page copy + project registry
# ----------------------------------------------------------

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple


@dataclass(frozen=True)
class ProjectRecord:
    id: str
    title: str
    tagline: str
    description: str                  # "what it does"
    structure_notes: Tuple[str, ...]  # "how it is structured", authoring order
    lesson: str                       # "what it taught me"
    external_link: Optional[str] = None


@dataclass(frozen=True)
class Principle:
    title: str
    description: str


def build_registry(records: Iterable[ProjectRecord]) -> Tuple[ProjectRecord, ...]:
    """Freeze records into a tuple, rejecting duplicate ids."""
    frozen = tuple(records)
    seen = set()
    for r in frozen:
        if r.id in seen:
            raise ValueError(f"duplicate project id: {r.id!r}")
        seen.add(r.id)
    return frozen


# -----------------------------
# Page copy
# -----------------------------
SITE_OWNER = "Gaurav Singh"
OWNER_ROLE = "Developer focused on systems"

HERO_LINES: Tuple[str, ...] = (
    "Most software is built to function.",
    "I am learning to build it with structure.",
)

PRINCIPLES: Tuple[Principle, ...] = (
    Principle(
        "Structure Before Speed",
        "Quick solutions fix immediate problems. Structured systems prevent future ones.",
    ),
    Principle("Clarity Over Cleverness", "If it’s hard to understand, it’s hard to maintain."),
    Principle("Systems Over Scripts", "If behavior can be described, it should not be rewritten."),
)

DIRECTION_LINES: Tuple[str, ...] = (
    "I am moving from writing code to designing structure.",
    "From solving tasks to shaping systems.",
    "From making software work to giving it structure.",
)

# -----------------------------
# Projects
# -----------------------------
PROJECTS: Tuple[ProjectRecord, ...] = build_registry([
    ProjectRecord(
        id="metagrid",
        title="MetaGrid",
        tagline="Metadata-driven foundation for structured CRUD generation.",
        description=(
            "Inspects database schemas, stores table and column metadata, and dynamically "
            "generates CRUD operations through structured rule layers."
        ),
        structure_notes=(
            "Separation of validation, metadata resolution, and execution",
            "Compiler-like query builders",
            "Deterministic metadata sync strategy",
            "Operation rules isolated from SQL builders",
        ),
        lesson=(
            "Structure reduces accidental complexity. Clear responsibility boundaries "
            "create extensible systems."
        ),
    ),
    ProjectRecord(
        id="studentos",
        title="StudentOS",
        tagline="A modular academic productivity system designed with structured workflows.",
        description=(
            "A structured academic system combining notes, task planning, AI summaries, "
            "and workflow automation."
        ),
        structure_notes=(
            "Modular feature architecture",
            "Separation of processing and presentation layers",
            "Background task handling for heavy operations",
            "Structured data flow across modules.",
        ),
        lesson="Systems grow sustainable only when modules evolve independently.",
    ),
    ProjectRecord(
        id="keyforge",
        title="Keyforge Password Manager",
        tagline="A secure, client-side password manager built with encryption-first principles.",
        description=(
            "A password manager that encrypts credentials locally and manages secure storage "
            "without exposing raw secrets."
        ),
        structure_notes=(
            "Encryption-first design",
            "Clear separation between storage and cryptographic logic",
            "Deterministic password handling",
            "Minimal attack surface principles.",
        ),
        lesson="Security requires deliberate structure. Convenience must never override clarity.",
        external_link="https://github.com/gauravsinghcode/keyforge-password-manager",
    ),
])


def iter_projects() -> Iterator[ProjectRecord]:
    return iter(PROJECTS)


def get_project(project_id: str) -> Optional[ProjectRecord]:
    return next((p for p in PROJECTS if p.id == project_id), None)
