"""Logging configuration for the Trivia Snake launcher."""

import logging

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "WARNING") -> None:
    """Configure root logging once for the interactive game."""
    logging.basicConfig(format=LOG_FORMAT, level=level.upper())
    # pygame prints its own banner; keep its loggers quiet
    logging.getLogger("pygame").setLevel(logging.WARNING)
