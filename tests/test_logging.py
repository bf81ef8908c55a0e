"""Tests for alignscan.logging."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

from alignscan.logging import configure_logging, get_logger, level_for


def test_get_logger_nests_under_package_logger() -> None:
    assert get_logger().name == "alignscan"
    assert get_logger("engine").name == "alignscan.engine"


@pytest.mark.parametrize(
    ("verbose", "quiet", "level"),
    [
        (False, False, logging.INFO),
        (True, False, logging.DEBUG),
        (False, True, logging.WARNING),
        (True, True, logging.DEBUG),
    ],
)
def test_level_for(verbose: bool, quiet: bool, level: int) -> None:
    assert level_for(verbose=verbose, quiet=quiet) == level


def test_configure_logging_replaces_handlers_and_writes_to_stderr(tmp_path: Path) -> None:
    configure_logging(log_file=tmp_path / "first.log")
    logger = configure_logging(quiet=True)

    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1
    assert logger.handlers[0].stream is sys.stderr


def test_log_file_receives_component_records(tmp_path: Path) -> None:
    log_file = tmp_path / "alignscan.log"
    configure_logging(verbose=True, log_file=log_file)

    get_logger("scanner").debug("walked %d files", 3)

    assert "DEBUG alignscan.scanner: walked 3 files" in log_file.read_text(encoding="utf-8")
    configure_logging()
