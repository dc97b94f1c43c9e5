"""Error log wiring for the veil.* loggers."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FORMAT = "[%(asctime)s] %(levelname)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
ROOT_LOGGER = "veil"


class QuietFileHandler(logging.FileHandler):
    """Append-only file handler that never lets a log failure escape."""

    def __init__(self, log_path: Path) -> None:
        super().__init__(log_path, mode="a", encoding="utf-8", delay=True)

    def emit(self, record: logging.LogRecord) -> None:
        # The file is opened lazily here, outside FileHandler's own guard.
        try:
            super().emit(record)
        except OSError:
            self.handleError(record)

    def handleError(self, record: logging.LogRecord) -> None:
        # An unwritable log file must not break the command that is logging.
        return


def configure_logging(log_path: Path, verbose: bool = False) -> logging.Logger:
    """Attach the error log (WARNING+) and, if verbose, a stderr handler."""
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(logging.DEBUG)
    for handler in list(logger.handlers):
        if getattr(handler, "_veil_owned", False):
            logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    file_handler = QuietFileHandler(log_path)
    file_handler.setLevel(logging.WARNING)
    file_handler.setFormatter(formatter)
    file_handler._veil_owned = True  # type: ignore[attr-defined]
    logger.addHandler(file_handler)

    if verbose:
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setLevel(logging.DEBUG)
        stream_handler.setFormatter(formatter)
        stream_handler._veil_owned = True  # type: ignore[attr-defined]
        logger.addHandler(stream_handler)

    return logger
