"""Tests for package logging setup."""

import logging

import pytest
from rich.logging import RichHandler

from agent_studio.infra.logging_setup import PACKAGE_LOGGER, setup_logging


@pytest.fixture(autouse=True)
def restore_level():
    """Puts the package logger back at the default level."""
    yield
    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.WARNING)


def test_setup_logging_does_not_stack_handlers() -> None:
    """Adjusts the level on repeat calls and keeps a single handler."""
    setup_logging("INFO")
    logger = setup_logging("DEBUG")

    handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
    assert logger.name == PACKAGE_LOGGER
    assert logger.level == logging.DEBUG
    assert len(handlers) == 1
    assert handlers[0].console.stderr is True


def test_log_records_stay_off_stdout(capsys) -> None:
    """Writes package log records to stderr only."""
    setup_logging("DEBUG")

    logging.getLogger("agent_studio.engine").info("Toggled capability")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Toggled capability" in captured.err
