"""CLI for todo-tree (list, add, prioritize, notes, sub-lists)."""

import subprocess
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger

from todo_tree.config import resolve_editor, resolve_notes_dir, resolve_todo_file
from todo_tree.core.note_store import NoteStore
from todo_tree.core.todo_array import TodoArray
from todo_tree.core.todo_list import TodoList
from todo_tree.editor import ExternalEditor
from todo_tree.errors import TodoError
from todo_tree.logging_config import configure_logging
from todo_tree.models.todo import Todo

app = typer.Typer(help="Priority-ordered todo lists with notes and nested sub-lists.")

FileOption = Annotated[
    Path | None,
    typer.Option("--file", "-f", help="Todo file to work on"),
]
NotesDirOption = Annotated[
    Path | None,
    typer.Option("--notes-dir", help="Directory for notes and sub-lists"),
]
IndexArgument = Annotated[int, typer.Argument(help="Todo number as shown by 'list'")]


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log warnings and errors"),
) -> None:
    configure_logging(verbose=verbose, quiet=quiet)


def _open(todo_file: Path | None, notes_dir: Path | None) -> tuple[TodoList, Path, NoteStore]:
    path = todo_file or resolve_todo_file()
    store = NoteStore(notes_dir or resolve_notes_dir(), ExternalEditor(resolve_editor()))
    return TodoList.read(path, store=store), path, store


def _locate(todo_list: TodoList, index: int) -> tuple[TodoArray, int]:
    """Map a 1-based listing number to (partition, index)."""
    position = index - 1
    if 0 <= position < len(todo_list.undone):
        return todo_list.undone, position
    position -= len(todo_list.undone)
    if 0 <= position < len(todo_list.done):
        return todo_list.done, position
    logger.error("No todo number {} (list has {})", index, len(todo_list))
    raise typer.Exit(1)


def _echo_tree(todo_list: TodoList, depth: int = 0) -> None:
    rows = todo_list.undone.display() + todo_list.done.display()
    for number, (todo, row) in enumerate(zip(todo_list.all_todos(), rows, strict=True), 1):
        typer.echo(f"{'    ' * depth}{number} - {row}")
        if todo.has_dependency():
            _echo_tree(todo.dependencies, depth + 1)


@app.command(name="list")
def list_cmd(todo_file: FileOption = None, notes_dir: NotesDirOption = None) -> None:
    """Show all todos, undone first."""
    todo_list, _, _ = _open(todo_file, notes_dir)
    if not len(todo_list):
        typer.echo("No todos.")
        return
    _echo_tree(todo_list)


@app.command()
def add(
    message: str = typer.Argument(..., help="Todo text"),
    priority: int = typer.Option(0, "--priority", "-p", help="1 (top) to 9, 0 for unset"),
    todo_file: FileOption = None,
    notes_dir: NotesDirOption = None,
) -> None:
    """Add a todo and sort it into place."""
    todo_list, path, store = _open(todo_file, notes_dir)
    try:
        todo = Todo(message, priority)
    except ValueError as e:
        logger.error("{}", e)
        raise typer.Exit(1) from e
    todo_list.add(todo)
    todo_list.undone.reorder(len(todo_list.undone) - 1)
    todo_list.write(path, store=store)


@app.command()
def done(
    index: IndexArgument, todo_file: FileOption = None, notes_dir: NotesDirOption = None
) -> None:
    """Toggle a todo between done and undone."""
    todo_list, path, store = _open(todo_file, notes_dir)
    array, position = _locate(todo_list, index)
    if array is todo_list.undone:
        array[position].toggle_done()
        todo_list.fix_undone()
    else:
        todo = array.remove(position)
        todo.toggle_done()
        todo_list.add(todo)
        todo_list.undone.reorder(len(todo_list.undone) - 1)
    todo_list.write(path, store=store)


def _shift_priority(
    index: int, todo_file: Path | None, notes_dir: Path | None, *, up: bool
) -> None:
    todo_list, path, store = _open(todo_file, notes_dir)
    array, position = _locate(todo_list, index)
    if up:
        array[position].increase_priority()
    else:
        array[position].decrease_priority()
    array.reorder(position)
    todo_list.write(path, store=store)


@app.command()
def up(
    index: IndexArgument, todo_file: FileOption = None, notes_dir: NotesDirOption = None
) -> None:
    """Raise a todo's priority by one step."""
    _shift_priority(index, todo_file, notes_dir, up=True)


@app.command()
def down(
    index: IndexArgument, todo_file: FileOption = None, notes_dir: NotesDirOption = None
) -> None:
    """Lower a todo's priority by one step."""
    _shift_priority(index, todo_file, notes_dir, up=False)


@app.command(name="rm")
def remove(
    index: IndexArgument, todo_file: FileOption = None, notes_dir: NotesDirOption = None
) -> None:
    """Remove a todo together with its note or sub-list."""
    todo_list, path, store = _open(todo_file, notes_dir)
    array, position = _locate(todo_list, index)
    todo = array.remove(position)
    todo.remove_note(store)
    todo.remove_dependency(store)
    todo_list.write(path, store=store)


@app.command()
def note(
    index: IndexArgument, todo_file: FileOption = None, notes_dir: NotesDirOption = None
) -> None:
    """Edit a todo's note in the editor, creating it if needed."""
    todo_list, path, store = _open(todo_file, notes_dir)
    array, position = _locate(todo_list, index)
    todo = array[position]
    try:
        if todo.has_note():
            todo.edit_note(store)
        else:
            todo.add_note(store)
    except TodoError as e:
        logger.error("{}", e)
        raise typer.Exit(1) from e
    except (OSError, subprocess.CalledProcessError) as e:
        logger.error("Editor failed: {}", e)
        raise typer.Exit(1) from e
    todo_list.write(path, store=store)


@app.command()
def dep(
    index: IndexArgument, todo_file: FileOption = None, notes_dir: NotesDirOption = None
) -> None:
    """Attach an empty sub-list to a todo."""
    todo_list, path, store = _open(todo_file, notes_dir)
    array, position = _locate(todo_list, index)
    try:
        array[position].add_dependency(store)
    except TodoError as e:
        logger.error("{}", e)
        raise typer.Exit(1) from e
    todo_list.write(path, store=store)
