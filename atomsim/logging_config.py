"""
Logging Configuration
Sets up the package logger for command-line runs.
"""
import logging
import sys
from typing import Union


def setup_logging(level: Union[int, str] = logging.WARNING) -> None:
    """
    Configures the logger for the 'atomsim' namespace.

    Log records go to stderr so they never interleave with the snapshots
    printed on stdout.

    Args:
        level: Logging level (e.g. logging.DEBUG or "info").
    """
    if isinstance(level, str):
        level = level.upper()

    logger = logging.getLogger("atomsim")
    logger.setLevel(level)

    # Avoid duplicate output on repeated setup
    if logger.hasHandlers():
        logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    logger.addHandler(handler)
