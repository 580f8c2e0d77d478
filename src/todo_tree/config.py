"""Configuration constants for todo-tree."""

import os
import sys
from pathlib import Path

# Directory holding the top-level todo file.
DEFAULT_DATA_DIR: Path = Path("~/.local/share/calcurse").expanduser()

# Notes and dependency sub-lists, one file per name.
DEFAULT_NOTES_DIR: Path = DEFAULT_DATA_DIR / "notes"

TODO_FILE_NAME = "todo"

# Scratch file the editor works on, inside the notes directory.
TEMP_NOTE_NAME = ".todo-tree-edit.tmp"

# Appended to a todo hash to name its dependency sub-list.
DEPENDENCY_SUFFIX = ".todo"

DATA_DIR_ENV = "TODO_TREE_DATA_DIR"
NOTES_DIR_ENV = "TODO_TREE_NOTES_DIR"


def resolve_data_directory() -> Path:
    """Return the data directory, honoring the environment override."""
    override = os.environ.get(DATA_DIR_ENV)
    if override:
        return Path(override).expanduser()
    return DEFAULT_DATA_DIR


def resolve_todo_file() -> Path:
    return resolve_data_directory() / TODO_FILE_NAME


def resolve_notes_dir() -> Path:
    """Return the notes directory.

    An explicit notes override wins; otherwise notes live below the data directory.
    """
    override = os.environ.get(NOTES_DIR_ENV)
    if override:
        return Path(override).expanduser()
    return resolve_data_directory() / "notes"


def resolve_editor() -> str:
    """Resolve the editor command once, at startup."""
    if sys.platform == "win32":
        return "notepad"
    return os.environ.get("EDITOR") or "vi"
