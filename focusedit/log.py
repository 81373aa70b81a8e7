"""File-backed logging for the editor.

The terminal belongs to the TUI while it runs, so records go to a rotating
log file under the platform log directory instead of stderr.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from platformdirs import user_log_dir

from .config import APP_NAME

LOG_FILENAME = "focusedit.log"
DEFAULT_LOG_PATH = Path(user_log_dir(APP_NAME, appauthor=False)) / LOG_FILENAME
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
MAX_BYTES = 1024 * 1024
BACKUP_COUNT = 2

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}
_HANDLER_TAG_ATTR = "_focusedit_handler"


def parse_level(level: str | None) -> int:
    if not level:
        return logging.WARNING
    return _LEVELS.get(level.strip().upper(), logging.WARNING)


def configure_logging(level: str | None = None, log_file: Path | None = None) -> logging.Logger:
    """Attach one rotating file handler to the package logger.

    Calling again replaces the previous handler. If the log file cannot be
    opened, logging stays unconfigured rather than failing startup.
    """
    logger = logging.getLogger(APP_NAME)
    logger.setLevel(parse_level(level))
    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_TAG_ATTR, False):
            logger.removeHandler(handler)
            handler.close()

    target = DEFAULT_LOG_PATH if log_file is None else log_file
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(target, maxBytes=MAX_BYTES, backupCount=BACKUP_COUNT, encoding="utf-8")
    except OSError:
        return logger
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    setattr(handler, _HANDLER_TAG_ATTR, True)
    logger.addHandler(handler)
    logger.propagate = False
    return logger
