"""Logging setup for the hull package and its command-line tools.

The console gets warnings by default. ``-v`` adds progress messages, ``-vv``
the per-circle debug trail, and ``-q`` leaves only errors. Console output
goes to stderr so it never mixes with the generator's printed summary. A log
file, when given, always records the full debug trail with timestamps.
"""
import logging
import sys
from typing import Optional, TextIO

CONSOLE_FORMAT = "%(levelname)s %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def verbosity_level(verbose: int = 0, quiet: bool = False) -> int:
    """Console level for a count of ``-v`` flags and a ``-q`` flag."""
    if quiet:
        return logging.ERROR
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return logging.WARNING


def setup_logging(level: int = logging.WARNING, log_file: Optional[str] = None,
                  stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Configures the logger for the 'hull' namespace.

    Args:
        level: Console level (e.g. from verbosity_level)
        log_file: Optional path for a DEBUG-level log, overwritten each run.
        stream: Console stream, stderr by default.
    """
    logger = logging.getLogger("hull")
    logger.setLevel(logging.DEBUG if log_file else level)

    # Repeated setup replaces handlers instead of stacking them
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%H:%M:%S'))
        logger.addHandler(file_handler)

    logger.debug("Logging initialized: console %s, file %s",
                 logging.getLevelName(level), log_file or "off")
    return logger
