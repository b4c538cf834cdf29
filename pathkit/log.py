"""Logging setup for the pathkit namespace.

Library modules only create loggers; applications call setup_logging once
to see transform skips and break outcomes.
"""
import logging
import sys
from typing import TextIO


def setup_logging(level: int = logging.INFO, log_file: str | None = None,
                  stream: TextIO | None = None) -> logging.Logger:
    """Send 'pathkit' records to stream (stderr by default) and optionally log_file.

    Handlers left by an earlier call are removed and closed first.
    """
    logger = logging.getLogger("pathkit")
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    logger.setLevel(level)

    handlers: list[logging.Handler] = [logging.StreamHandler(stream or sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    fmt = logging.Formatter("%(levelname)s %(name)s: %(message)s")
    for h in handlers:
        h.setFormatter(fmt)
        logger.addHandler(h)
    return logger
