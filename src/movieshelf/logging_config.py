"""Logging setup for the API process."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger with a single stream handler.

    Replaces any handlers left over from a previous call so a reloaded app
    does not log every line twice.

    Args:
        level: Log level name such as "DEBUG" or "info"
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        force=True,
    )
