"""
Logging Configuration
Sets up the 'typefall' logger; modules log through child loggers (typefall.engine, ...).
"""
import logging
import sys
from typing import Union

FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """
    Send 'typefall' records to stdout at the given level.

    Args:
        level: a logging level number or name such as "DEBUG";
            unknown names fall back to INFO.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger("typefall")
    logger.setLevel(level)

    # main() can run more than once per process; keep a single handler
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(FORMAT, datefmt='%H:%M:%S'))
    logger.addHandler(console_handler)

    logger.debug("Logging initialized at %s", logging.getLevelName(level))
    return logger
