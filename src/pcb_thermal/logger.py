"""
Logging
=======

Package logger for the PCB Thermal Toolkit. Calculators log at DEBUG;
the UI logs caught exceptions. Call setup_logging() once from a launcher.
"""

import logging
import sys
from datetime import datetime
from typing import Optional


LOGGER_NAME = "pcb_thermal"


class ToolkitFormatter(logging.Formatter):
    """Console formatter: timestamp, level, module.function:line, message."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]
        formatted = (
            f"{timestamp} {record.levelname:8s} "
            f"[{record.module}.{record.funcName}:{record.lineno}] {record.getMessage()}"
        )
        if record.exc_info:
            formatted += "\n" + self.formatException(record.exc_info)
        return formatted


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get the package logger or one of its children."""
    if name is None:
        return logging.getLogger(LOGGER_NAME)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def setup_logging(level: int = logging.INFO, stream=None) -> logging.Logger:
    """
    Attach a console handler to the package logger.

    Safe to call more than once; existing handlers are replaced.

    Parameters:
    ----------
    level : int
        Logging level (logging.DEBUG shows every calculation)

    stream : file-like, optional
        Output stream, defaults to stderr

    Returns:
    -------
    logging.Logger
        The configured package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(ToolkitFormatter())
    handler.setLevel(level)
    logger.addHandler(handler)
    logger.propagate = False

    return logger
