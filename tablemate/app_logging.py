"""Logging configuration helpers."""

import logging


def configure_logging(level: int | str = logging.WARNING) -> None:
    """Configure tablemate logging with a single stream handler."""
    logger = logging.getLogger("tablemate")
    logger.setLevel(level)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
