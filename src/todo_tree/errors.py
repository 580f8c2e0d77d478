"""Error taxonomy for todo-tree."""


class TodoError(Exception):
    """Base class for all todo-tree errors."""


class ReadFailed(TodoError, ValueError):
    """A stored line does not match any todo line form."""


class NoteEmpty(TodoError):
    """A note has no content."""


class AlreadyExists(TodoError):
    """The todo already has a dependency attached."""


class DependencyCreationFailed(TodoError):
    """The backing file for a new dependency could not be created."""


class NoteNotFound(TodoError, FileNotFoundError):
    """No note is stored under the requested hash."""
