"""
Logging Configuration
=====================
Every module logs through ``logging.getLogger(__name__)``, so all records of
the subsystem end up below the ``simprefs`` logger. A host application calls
``setup_logging`` once at startup; an embedding host that configures the root
logger itself may skip it, since records still propagate.
"""
import logging
import sys
from typing import Optional

PACKAGE_LOGGER_NAME = __name__.split(".")[0]

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Route the preference subsystem's log records to stdout and, optionally,
    to a file.

    Args:
        level: Logging level for the package logger and its handlers.
        log_file: Optional path of a log file, overwritten on each call.

    Returns:
        The configured ``simprefs`` logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    logger.setLevel(level)

    # Repeated calls replace the handlers of the previous call
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info(f"Logging initialized at level {logging.getLevelName(level)}.")
    return logger
