"""Tests for the fixed project registry and page copy."""

from __future__ import annotations

import dataclasses

import pytest

from portfolio.content import (
    DIRECTION_LINES,
    PRINCIPLES,
    PROJECTS,
    ProjectRecord,
    build_registry,
    get_project,
    iter_projects,
)


def test_ids_are_unique(registry) -> None:
    ids = [p.id for p in registry]
    assert len(ids) == len(set(ids))


def test_registry_order_matches_authoring_order() -> None:
    assert [p.id for p in iter_projects()] == ["metagrid", "studentos", "keyforge"]
    assert [p.title for p in PROJECTS] == ["MetaGrid", "StudentOS", "Keyforge Password Manager"]


def test_iteration_is_restartable() -> None:
    first = list(iter_projects())
    second = list(iter_projects())
    assert first == second
    assert len(first) == 3


def test_get_project_hit_and_miss() -> None:
    assert get_project("studentos") is PROJECTS[1]
    assert get_project("nonexistent") is None


def test_records_are_immutable() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        PROJECTS[0].title = "Changed"  # type: ignore[misc]


def test_structure_notes_keep_order_and_are_non_empty() -> None:
    for record in PROJECTS:
        assert isinstance(record.structure_notes, tuple)
        assert record.structure_notes
    assert PROJECTS[0].structure_notes[0] == "Separation of validation, metadata resolution, and execution"
    assert PROJECTS[0].structure_notes[-1] == "Operation rules isolated from SQL builders"


def test_only_keyforge_carries_external_link() -> None:
    linked = [p.id for p in PROJECTS if p.external_link]
    assert linked == ["keyforge"]
    assert get_project("keyforge").external_link.startswith("https://github.com/")


def test_build_registry_rejects_duplicate_ids(bare_record: ProjectRecord) -> None:
    with pytest.raises(ValueError, match="duplicate project id"):
        build_registry([bare_record, dataclasses.replace(bare_record, title="Again")])


def test_page_copy_counts() -> None:
    assert [p.title for p in PRINCIPLES] == [
        "Structure Before Speed",
        "Clarity Over Cleverness",
        "Systems Over Scripts",
    ]
    assert len(DIRECTION_LINES) == 3
