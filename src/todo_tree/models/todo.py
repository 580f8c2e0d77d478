"""The todo entity: priority, done state, message and an optional attachment.

A todo is stored as one line of text::

    [<priority>]><name>.todo <message>    dependency sub-list
    [<priority>]><note-hash> <message>    note
    [<priority>] <message>                no attachment

The priority token carries a leading ``-`` when the todo is done.
"""

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

from todo_tree.config import DEPENDENCY_SUFFIX
from todo_tree.errors import AlreadyExists, DependencyCreationFailed, NoteNotFound, ReadFailed
from todo_tree.models.note import Note, sha1_hex

if TYPE_CHECKING:
    from todo_tree.core.note_store import NoteStore
    from todo_tree.core.todo_list import TodoList

UNSET_PRIORITY = 0
# Ordering value of an unset priority: after every priority 1-9.
UNSET_COMPARISON = 10

_DEPENDENCY_LINE = re.compile(r"\[(-?\d+)\]>(\S+?)" + re.escape(DEPENDENCY_SUFFIX) + r" (.*)")
_NOTE_LINE = re.compile(r"\[(-?\d+)\]>(\S+) (.*)")
_PLAIN_LINE = re.compile(r"\[(-?\d+)\] (.*)")


@dataclass(frozen=True)
class NoteRef:
    """Reference to a stored note by content hash."""

    hash: str


@dataclass
class DependencyRef:
    """A nested todo list owned by the todo, stored under ``name``."""

    name: str
    todos: "TodoList"


Attachment = NoteRef | DependencyRef | None


def fixed_priority(priority: int) -> int:
    """Clamp a requested priority into the stored range.

    10 and above mean unset, negatives become the most urgent priority.
    """
    if priority >= UNSET_COMPARISON:
        return UNSET_PRIORITY
    if priority < 0:
        return 1
    return priority


def dependency_name_for(stem: str) -> str:
    return f"{stem}{DEPENDENCY_SUFFIX}"


def _check_message(message: str) -> None:
    if "\n" in message or "\r" in message:
        msg = f"Todo message must be a single line: {message!r}"
        raise ValueError(msg)


@dataclass
class Todo:
    """One task record."""

    message: str
    priority: int = UNSET_PRIORITY
    done: bool = False
    attachment: Attachment = field(default=None)

    def __post_init__(self) -> None:
        _check_message(self.message)
        self.priority = fixed_priority(self.priority)

    # -------------------- line format --------------------

    @classmethod
    def from_line(cls, line: str, *, store: "NoteStore") -> "Todo":
        """Decode one stored line.

        A dependency line loads its nested list from the store right away.

        Raises:
            ReadFailed: The line matches none of the line forms.
        """
        attachment: Attachment = None
        if match := _DEPENDENCY_LINE.fullmatch(line):
            token, stem, message = match.groups()
            from todo_tree.core.todo_list import TodoList

            name = dependency_name_for(stem)
            try:
                path = store.path_for(name)
            except ValueError as e:
                raise ReadFailed(str(e)) from e
            attachment = DependencyRef(name, TodoList.read(path, store=store))
        elif match := _NOTE_LINE.fullmatch(line):
            token, note_hash, message = match.groups()
            try:
                store.path_for(note_hash)
            except ValueError as e:
                raise ReadFailed(str(e)) from e
            attachment = NoteRef(note_hash)
        elif match := _PLAIN_LINE.fullmatch(line):
            token, message = match.groups()
        else:
            msg = f"Not a todo line: {line!r}"
            raise ReadFailed(msg)

        done = token.startswith("-")
        priority = int(token)
        if done:
            priority = -priority

        todo = cls(message, done=done, attachment=attachment)
        # Stored values are kept as they are, only the mutators clamp.
        todo.priority = priority
        return todo

    def as_line(self) -> str:
        done_str = "-" if self.done else ""
        match self.attachment:
            case DependencyRef(name=name):
                marker = f">{name}"
            case NoteRef(hash=note_hash):
                marker = f">{note_hash}"
            case _:
                marker = ""
        return f"[{done_str}{self.priority}]{marker} {self.message}"

    def __str__(self) -> str:
        return self.as_line()

    def display(self) -> str:
        """Human-readable row: done box, priority, attachment marker, message."""
        done_str = "x" if self.effective_done() else " "
        if self.has_note():
            marker = ">"
        elif self.has_dependency():
            marker = "-"
        else:
            marker = " "
        return f"[{done_str}] [{self.priority}]{marker}{self.message}"

    # -------------------- state --------------------

    def hash(self) -> str:
        return sha1_hex(f"{self.priority} {self.message}")

    def set_message(self, message: str) -> None:
        _check_message(message)
        self.message = message

    def toggle_done(self) -> None:
        self.done = not self.done

    def effective_done(self) -> bool:
        """Done state, derived from the sub-list once any of its items is done.

        With a dependency whose list has at least one done item, the todo counts as
        done exactly when nothing in the sub-list is left undone. Otherwise the
        todo's own flag decides.
        """
        if isinstance(self.attachment, DependencyRef) and len(self.attachment.todos.done) != 0:
            return len(self.attachment.todos.undone) == 0
        return self.done

    # -------------------- priority --------------------

    def comparison_priority(self) -> int:
        """Priority used for ordering; unset sorts after every set priority."""
        return UNSET_COMPARISON if self.priority == UNSET_PRIORITY else self.priority

    def increase_priority(self) -> None:
        """Move one step towards the top. Unset jumps to 9, 1 stays at 1."""
        if self.comparison_priority() > 1:
            self.priority = self.comparison_priority() - 1
        else:
            self.priority = 1

    def decrease_priority(self) -> None:
        """Move one step towards the bottom. 9 wraps to unset, unset stays unset."""
        if self.comparison_priority() < 9:
            self.priority += 1
        else:
            self.priority = UNSET_PRIORITY

    def set_priority(self, priority: int) -> None:
        self.priority = fixed_priority(priority)

    # -------------------- attachments --------------------

    def has_note(self) -> bool:
        return isinstance(self.attachment, NoteRef)

    def has_dependency(self) -> bool:
        return isinstance(self.attachment, DependencyRef)

    @property
    def note_hash(self) -> str | None:
        return self.attachment.hash if isinstance(self.attachment, NoteRef) else None

    @property
    def dependency_name(self) -> str | None:
        return self.attachment.name if isinstance(self.attachment, DependencyRef) else None

    @property
    def dependencies(self) -> "TodoList":
        """The nested sub-list, or an empty list when there is no dependency.

        Without a dependency every access returns a new, unattached list: todos
        added to it are not kept. Call ``add_dependency`` first.
        """
        if isinstance(self.attachment, DependencyRef):
            return self.attachment.todos
        from todo_tree.core.todo_list import TodoList

        return TodoList()

    def dependency_path(self, store: "NoteStore") -> Path | None:
        if self.dependency_name is None:
            return None
        return store.path_for(self.dependency_name)

    def add_dependency(self, store: "NoteStore") -> None:
        """Attach a new, empty sub-list, replacing any note.

        Raises:
            AlreadyExists: A dependency is already attached.
            DependencyCreationFailed: The sub-list file could not be created.
        """
        if self.has_dependency():
            msg = f"Todo {self.message!r} already has a dependency"
            raise AlreadyExists(msg)
        self.remove_note(store)

        from todo_tree.core.todo_list import TodoList

        name = dependency_name_for(self.hash())
        path = store.path_for(name)
        try:
            store.ensure_dir()
            path.write_text("", encoding="utf-8")
        except OSError as e:
            msg = f"Cannot create dependency file {str(path)!r}"
            raise DependencyCreationFailed(msg) from e
        logger.debug("Created dependency {}", name)
        self.attachment = DependencyRef(name, TodoList.read(path, store=store))

    def remove_dependency(self, store: "NoteStore") -> None:
        """Delete the sub-list file and detach it. Safe to call without a dependency."""
        if isinstance(self.attachment, DependencyRef):
            path = store.path_for(self.attachment.name)
            logger.debug("Removing dependency {}", self.attachment.name)
            path.unlink(missing_ok=True)
            self.attachment = None

    def set_note(self, note: Note, store: "NoteStore") -> None:
        """Attach note, replacing a dependency or a previous note, and save it."""
        self.remove_dependency(store)
        previous = self.note_hash
        if previous is not None and previous != note.hash:
            store.remove(previous)
        self.attachment = NoteRef(note.hash)
        store.save(note)

    def add_note(self, store: "NoteStore") -> None:
        """Write a new note in the editor and attach it."""
        self.set_note(store.from_editor(), store)

    def edit_note(self, store: "NoteStore") -> None:
        """Edit the attached note in the editor and save it under its new hash.

        The file under the previous hash is left in place.

        Raises:
            NoteNotFound: The todo has no note, or its file is missing.
        """
        if self.note_hash is None:
            msg = f"Todo {self.message!r} has no note"
            raise NoteNotFound(msg)
        note = store.edit(store.load(self.note_hash))
        self.attachment = NoteRef(note.hash)
        store.save(note)

    def get_note(self, store: "NoteStore") -> str:
        """Return the note content, or an empty string when there is none."""
        if self.note_hash is None:
            return ""
        try:
            return store.load(self.note_hash).content
        except NoteNotFound:
            return ""

    def remove_note(self, store: "NoteStore") -> None:
        if self.note_hash is not None:
            store.remove(self.note_hash)
            self.attachment = None
