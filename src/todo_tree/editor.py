"""External editor invocation."""

import shlex
import subprocess
from pathlib import Path

from loguru import logger


class ExternalEditor:
    """Run a configured editor program against a scratch file.

    The command is resolved once by the caller (see ``config.resolve_editor``)
    and may carry arguments, e.g. ``"code --wait"``.
    """

    def __init__(self, command: str) -> None:
        self.command = command

    def edit(self, content: str, path: Path) -> str:
        """Write content to path, block on the editor, read back and remove the file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        cmd = [*shlex.split(self.command), str(path)]
        logger.debug("Running: {}", " ".join(map(shlex.quote, cmd)))
        try:
            subprocess.run(cmd, check=True)
            return path.read_text(encoding="utf-8")
        finally:
            path.unlink(missing_ok=True)
