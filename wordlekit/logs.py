"""
Console logging setup for the CLI entry points.

Library modules only create their own `logging.getLogger(__name__)`; handlers
are installed here, once, by whoever runs the program.
"""

import logging


def setup_logging(level: str = "WARNING") -> logging.Logger:
    logger = logging.getLogger("wordlekit")
    logger.setLevel(level.upper())

    # Prevent duplicate handlers when called twice (tests, replays)
    if logger.handlers:
        logger.handlers.clear()

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(
        '%(asctime)s | %(levelname)s | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))
    logger.addHandler(handler)
    return logger
