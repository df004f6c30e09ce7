"""
Log output for the plotting scripts.

Plots go to stdout line by line, so diagnostics (grid errors, evaluation
timings at DEBUG) are routed to stderr and, on request, to a log file.
"""
import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach stderr (and optionally file) handlers to the package logger.

    Calling it again replaces the previous handlers, so scripts and tests can
    run main() repeatedly without duplicated messages.

    Args:
        level: threshold for both handlers, e.g. logging.DEBUG with --verbose
        log_file: path of a log file, truncated on each run
    """
    logger = logging.getLogger("mandelplot")
    logger.setLevel(level)
    for old in logger.handlers:
        old.close()
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("log level %s", logging.getLevelName(level))
    return logger
