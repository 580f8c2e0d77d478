"""Logging configuration for todo-tree.

The core logs file reads and writes, note saves and removals and editor runs at
debug level. Skipped sub-list writes are warnings, and CLI failures are errors.
"""

import sys

from loguru import logger


def configure_logging(*, verbose: bool = False, quiet: bool = False) -> None:
    """Send loguru output to stderr.

    Verbose shows the storage trace; quiet keeps only warnings and errors.
    """
    logger.remove()
    if verbose:
        level = "DEBUG"
    elif quiet:
        level = "WARNING"
    else:
        level = "INFO"
    logger.add(sys.stderr, level=level, format="{level.icon} {message}")
