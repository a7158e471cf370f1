"""Console logging for youtubemodules.

Status lines are written through ``tqdm.write`` so they print above the
publish progress bar instead of through it.
"""

import logging
import sys
from typing import Optional

from tqdm import tqdm

PACKAGE_LOGGER = "youtubemodules"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class TqdmHandler(logging.StreamHandler):
    """Stream handler that cooperates with active tqdm progress bars."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            tqdm.write(self.format(record), file=self.stream)
        except Exception:
            self.handleError(record)


def setup_logging(debug: bool = False) -> logging.Logger:
    """Configure the package logger.

    Safe to call more than once: the console handler is added only the first
    time, later calls just change the level.

    Args:
        debug: Log DEBUG records instead of INFO

    Returns:
        The package logger
    """
    level = logging.DEBUG if debug else logging.INFO
    logger = logging.getLogger(PACKAGE_LOGGER)

    handler = next((h for h in logger.handlers if isinstance(h, TqdmHandler)), None)
    if handler is None:
        handler = TqdmHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)

    handler.setLevel(level)
    logger.setLevel(level)
    logger.propagate = False
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get the package logger or one of its children.

    Module names are reduced to their last component, so ``__name__`` works
    whether the package is imported as ``youtubemodules`` or ``src.youtubemodules``.
    """
    if name:
        return logging.getLogger(f"{PACKAGE_LOGGER}.{name.rsplit('.', 1)[-1]}")
    return logging.getLogger(PACKAGE_LOGGER)
