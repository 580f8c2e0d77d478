"""Content-addressed note storage and storage path resolution."""

from pathlib import Path

from loguru import logger

from todo_tree.config import TEMP_NOTE_NAME
from todo_tree.errors import NoteNotFound
from todo_tree.models.note import Note
from todo_tree.protocols import EditorProtocol


class NoteStore:
    """Map notes and dependency sub-lists to files in a single notes directory.

    Every name (a note hash or a dependency name) resolves to ``notes_dir / name``.
    The directory is the only storage the core touches besides the top-level todo file.
    """

    def __init__(self, notes_dir: str | Path, editor: EditorProtocol) -> None:
        self.notes_dir = Path(notes_dir)
        self.editor = editor

    def ensure_dir(self) -> None:
        self.notes_dir.mkdir(parents=True, exist_ok=True)

    def path_for(self, name: str) -> Path:
        """Return the storage path for a note hash or dependency name."""
        if not name or "/" in name or "\\" in name or name in (".", ".."):
            msg = f"Invalid storage name: {name!r}"
            raise ValueError(msg)
        return self.notes_dir / name

    def temp_path(self) -> Path:
        return self.notes_dir / TEMP_NOTE_NAME

    def exists(self, note_hash: str) -> bool:
        return self.path_for(note_hash).is_file()

    def save(self, note: Note) -> None:
        """Write the note under its hash. Saving identical content twice is a no-op in effect."""
        self.ensure_dir()
        path = self.path_for(note.hash)
        logger.debug("Saving note {}", note.hash)
        path.write_text(note.content, encoding="utf-8")

    def load(self, note_hash: str) -> Note:
        """Load the note stored under note_hash.

        Raises:
            NoteNotFound: No file exists for the hash.
        """
        path = self.path_for(note_hash)
        try:
            content = path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            msg = f"No note stored for {note_hash!r}"
            raise NoteNotFound(msg) from e
        return Note(content)

    def remove(self, note: Note | str) -> None:
        """Delete the backing file. A file that is already gone is not an error."""
        note_hash = note.hash if isinstance(note, Note) else note
        path = self.path_for(note_hash)
        if not path.exists():
            logger.debug("Note {} already removed", note_hash)
            return
        logger.debug("Removing note {}", note_hash)
        path.unlink(missing_ok=True)

    def edit(self, note: Note) -> Note:
        """Let the user edit note through the editor and return the edited note.

        Nothing is persisted or removed here: the caller saves the result under
        its new hash and drops the old one if it wants to.
        """
        self.ensure_dir()
        content = self.editor.edit(note.content, self.temp_path())
        return Note(content)

    def from_editor(self) -> Note:
        """Create a new note from scratch through the editor."""
        return self.edit(Note(""))
