"""Logging setup shared by all modules."""

import logging
import os

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Names handed out by setup_logger, so set_log_level can reach all of them
_logger_names: set[str] = set()
_level: str | None = None


def setup_logger(name: str) -> logging.Logger:
    """Return a logger with a single stream handler and the configured level."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(_level or os.getenv("LOG_LEVEL", "INFO").upper())
    _logger_names.add(name)
    return logger


def set_log_level(level: str) -> None:
    """Apply `level` to every logger from setup_logger, including later ones."""
    global _level
    _level = level.upper()
    for name in _logger_names:
        logging.getLogger(name).setLevel(_level)
