"""Logging setup for the adapter"""

import logging
import sys

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

LEVELS = {
    "trace": TRACE,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def configure_logging(level: str = "info", stream=None):
    """Configures root logger using one of the `LEVELS` names"""
    try:
        numeric_level = LEVELS[level.lower()]
    except KeyError as e:
        raise ValueError(f"Unknown log level '{level}', expected one of: {', '.join(LEVELS)}") from e

    logging.basicConfig(
        level=numeric_level,
        stream=stream or sys.stdout,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=True,
    )
    return numeric_level
