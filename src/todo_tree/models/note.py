"""Note value object."""

import hashlib
from dataclasses import dataclass, field


def sha1_hex(text: str) -> str:
    """Lowercase hex SHA-1 of the UTF-8 encoded text."""
    return hashlib.sha1(text.encode("utf-8")).hexdigest()


@dataclass(frozen=True)
class Note:
    """Free text attached to a todo, identified only by its content hash."""

    content: str
    hash: str = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "hash", sha1_hex(self.content))
