"""Logging configuration."""

import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DEFAULT_LEVEL = "WARNING"


def setup_logging(level: str | int = DEFAULT_LEVEL) -> None:
    """Configure the root logger once; later calls only adjust the level."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT)
    root.setLevel(level)


def setup_logging_from_env() -> None:
    """Configure logging from TERMLINE_LOG_LEVEL (default WARNING)."""
    setup_logging(os.environ.get("TERMLINE_LOG_LEVEL", DEFAULT_LEVEL))
