"""A todo list file: undone and done partitions, with nested sub-lists."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

from todo_tree.core.todo_array import TodoArray
from todo_tree.errors import ReadFailed
from todo_tree.models.todo import Todo

if TYPE_CHECKING:
    from todo_tree.core.note_store import NoteStore


@dataclass
class TodoList:
    """Two ordered arrays, ``undone`` and ``done``.

    Partition membership follows each todo's own done flag when read from disk.
    Toggling a flag in place does not move the todo; call ``fix_undone`` for that.
    """

    undone: TodoArray = field(default_factory=TodoArray)
    done: TodoArray = field(default_factory=TodoArray)

    def __len__(self) -> int:
        return len(self.undone) + len(self.done)

    def all_todos(self) -> Iterator[Todo]:
        yield from self.undone
        yield from self.done

    @classmethod
    def read(cls, path: Path, *, store: "NoteStore") -> "TodoList":
        """Load a list from path. A missing file gives an empty list.

        Lines that are not valid todo lines are skipped.
        """
        todo_list = cls()
        if not path.is_file():
            logger.debug("No todo file at {}, starting empty", path)
            return todo_list

        skipped = 0
        # Only "\n" ends a line; messages may contain other line-break characters.
        lines = path.read_text(encoding="utf-8").split("\n")
        if lines[-1] == "":
            lines.pop()
        for line in lines:
            try:
                todo = Todo.from_line(line, store=store)
            except ReadFailed:
                skipped += 1
                continue
            if todo.done:
                todo_list.done.push(todo)
            else:
                todo_list.undone.push(todo)
        logger.debug(
            "Read {} todos from {} ({} lines skipped)", len(todo_list), path, skipped
        )
        return todo_list

    def write(self, path: Path, *, store: "NoteStore") -> None:
        """Write undone then done todos to path, one line each.

        Sub-lists are written to their own files first; a sub-list that cannot be
        written is logged and does not stop the parent from being written.
        """
        for todo in self.all_todos():
            dependency_path = todo.dependency_path(store)
            if dependency_path is None:
                continue
            try:
                todo.dependencies.write(dependency_path, store=store)
            except OSError as e:
                logger.warning("Could not write dependency {}: {}", todo.dependency_name, e)

        lines = [todo.as_line() + "\n" for todo in self.all_todos()]
        path.parent.mkdir(parents=True, exist_ok=True)
        logger.debug("Writing {} todos to {}", len(lines), path)
        with open(path, "w", encoding="utf-8") as f:
            f.writelines(lines)

    def add(self, todo: Todo) -> None:
        self.undone.push(todo)

    def fix_undone(self) -> None:
        """Move every undone todo whose done flag is set over to ``done``."""
        still_undone: list[Todo] = []
        for todo in self.undone:
            if todo.done:
                self.done.push(todo)
            else:
                still_undone.append(todo)
        self.undone.todos = still_undone

    def display(self) -> list[str]:
        """Numbered rows, undone first."""
        rows = self.undone.display() + self.done.display()
        return [f"{i} - {row}" for i, row in enumerate(rows, 1)]
