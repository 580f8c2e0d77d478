"""Protocols for dependency injection in todo-tree."""

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class EditorProtocol(Protocol):
    """Protocol for the external editor collaborator."""

    def edit(self, content: str, path: Path) -> str:
        """Write content to path, let the user edit it, return the result.

        Blocks until the editing is finished. The file at path is removed afterwards.
        """
        ...
