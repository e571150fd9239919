import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "agent_studio"


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """
    Sends package log records to stderr through a Rich handler.

    Stdout carries only command output such as prompts and manifest JSON, so
    it stays safe to pipe at any log level. Repeated calls adjust the level
    without stacking handlers.

    Args:
        level: Logging level name for the package logger.

    Returns:
        The package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            show_path=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        logger.addHandler(handler)
    return logger
