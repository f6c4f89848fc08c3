"""Logging setup for the admin console."""

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str | int = logging.INFO) -> None:
    """Attach one stream handler to the package logger.

    Safe to call repeatedly (Streamlit re-runs its scripts on every
    interaction); later calls only adjust the level.
    """
    logger = logging.getLogger("cms_admin")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logger.setLevel(level)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
