"""Shared test fixtures."""

from pathlib import Path

import pytest

from todo_tree.core.note_store import NoteStore
from tests.unit.fakes import FakeEditor


@pytest.fixture
def editor() -> FakeEditor:
    return FakeEditor()


@pytest.fixture
def notes_dir(tmp_path: Path) -> Path:
    path = tmp_path / "notes"
    path.mkdir()
    return path


@pytest.fixture
def store(notes_dir: Path, editor: FakeEditor) -> NoteStore:
    """A note store over a temporary notes directory with a fake editor."""
    return NoteStore(notes_dir, editor)
