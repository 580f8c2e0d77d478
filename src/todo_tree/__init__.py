"""Priority-ordered todo lists with notes and nested sub-lists."""

from todo_tree.core.note_store import NoteStore
from todo_tree.core.todo_array import TodoArray
from todo_tree.core.todo_list import TodoList
from todo_tree.editor import ExternalEditor
from todo_tree.models.note import Note
from todo_tree.models.todo import DependencyRef, NoteRef, Todo
from todo_tree.protocols import EditorProtocol

__all__ = [
    "DependencyRef",
    "EditorProtocol",
    "ExternalEditor",
    "Note",
    "NoteRef",
    "NoteStore",
    "Todo",
    "TodoArray",
    "TodoList",
]
