"""Shared fixtures for portfolio tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from portfolio.content import PROJECTS, ProjectRecord
from portfolio.page import PageController


@pytest.fixture
def controller() -> Iterator[PageController]:
    with PageController() as page:
        yield page


@pytest.fixture
def registry() -> tuple[ProjectRecord, ...]:
    return PROJECTS


@pytest.fixture
def bare_record() -> ProjectRecord:
    """A record with no structure notes and no external link."""
    return ProjectRecord(
        id="bare",
        title="Bare <System>",
        tagline="Tagline & more",
        description="Does little.",
        structure_notes=(),
        lesson="Less is less.",
    )
