"""Tests for loguru configuration."""

import pytest
from loguru import logger

from todo_tree.logging_config import configure_logging


@pytest.mark.parametrize(
    ("verbose", "quiet", "shown", "hidden"),
    [
        (True, False, "debug line", None),
        (False, False, "info line", "debug line"),
        (False, True, "warning line", "info line"),
    ],
)
def test_configure_logging_levels(
    capsys: pytest.CaptureFixture[str],
    verbose: bool,
    quiet: bool,
    shown: str,
    hidden: str | None,
) -> None:
    configure_logging(verbose=verbose, quiet=quiet)

    logger.debug("debug line")
    logger.info("info line")
    logger.warning("warning line")

    err = capsys.readouterr().err
    assert shown in err
    if hidden is not None:
        assert hidden not in err
