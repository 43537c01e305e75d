"""Level-prefixed loggers writing timestamped lines to a text stream."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

DATE_FORMAT = "%Y/%m/%d %H:%M:%S"
_LINE_FORMAT = "%(levelname)s: %(asctime)s %(message)s"


def get_logger(prefix: str = "", stream: TextIO | None = None) -> logging.Logger:
    """Return the logger for ``prefix``, writing to ``stream`` (stdout by default).

    Lines look like ``INFO: 2024/01/02 03:04:05 message``. Calling this again
    for the same prefix rebinds the logger to the new stream instead of
    adding a second handler.
    """
    name = f"jobopenings.{prefix}" if prefix else "jobopenings"
    logger = logging.getLogger(name)
    handler = logging.StreamHandler(sys.stdout if stream is None else stream)
    handler.setFormatter(logging.Formatter(_LINE_FORMAT, DATE_FORMAT))
    for old in list(logger.handlers):
        logger.removeHandler(old)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    return logger