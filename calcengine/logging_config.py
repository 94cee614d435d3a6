"""Log routing for the ``calcengine`` package."""

import logging
import sys
from typing import Optional, TextIO, Union

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def setup_logging(level: Union[int, str] = logging.WARNING, log_file: Optional[str] = None,
                  stream: Optional[TextIO] = None) -> logging.Logger:
    """Send ``calcengine.*`` records to ``stream`` (stderr) and, if given, ``log_file``.

    A second call replaces the handlers installed by the first one.
    """
    logger = logging.getLogger("calcengine")
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler); handler.close()

    handlers = [logging.StreamHandler(stream or sys.stderr)]
    if log_file: handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    formatter = logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S")
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger
