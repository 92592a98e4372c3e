"""
Logging Configuration
Library modules only create named loggers under 'bezedit'; the application
entry point calls setup_logging once to attach a handler.
"""
import logging
import os
import sys
from typing import Optional, TextIO, Union

LOG_LEVEL_ENV = "BEZEDIT_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def resolve_level(level: Union[int, str, None] = None) -> int:
    """
    Turns a level name ('debug', 'INFO') or number into a logging level.
    None reads BEZEDIT_LOG_LEVEL, defaulting to INFO.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "INFO")
    if isinstance(level, str):
        value = logging.getLevelName(level.strip().upper())
        if not isinstance(value, int):
            raise ValueError(f"Unknown log level: {level!r}")
        return value
    return level


def setup_logging(level: Union[int, str, None] = None, stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Configures the 'bezedit' logger with a single stream handler.

    Args:
        level: Level name or number; see resolve_level.
        stream: Where records go, stdout by default.
    """
    logger = logging.getLogger("bezedit")
    logger.setLevel(resolve_level(level))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S'))
    logger.addHandler(handler)
    logger.propagate = False

    logger.debug("Logging initialized at %s", logging.getLevelName(logger.level))
    return logger
