"""
Logging Configuration
Sets up console and optional file logging for the maze modules.
"""
import logging
import sys
from typing import Optional

LOGGER_NAMES = ("maze_grid", "pathfinder", "maze_app", "visualizer")


def setup_logging(level: int = logging.WARNING, log_file: Optional[str] = None) -> None:
    """
    Attaches handlers to every maze module logger.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to also write the log to.
    """
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)

    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        # Avoid duplicate output when called more than once
        if logger.hasHandlers():
            logger.handlers.clear()
        for handler in handlers:
            logger.addHandler(handler)

    logging.getLogger("maze_app").debug("Logging initialized.")
