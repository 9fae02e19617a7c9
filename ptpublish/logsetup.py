"""Logging configuration with rotating log files."""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

DEFAULT_LOG_FORMAT = (
    "[%(asctime)s.%(msecs)03d] [%(levelname)s] [%(process)d:%(thread)d] "
    "[%(filename)s %(funcName)s:%(lineno)d] %(message)s"
)
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
MAX_BYTES = 5 * 1024 * 1024

_registered: dict[str, logging.Logger] = {}
_installed_handlers: list[logging.Handler] = []


def _formatter() -> logging.Formatter:
    return logging.Formatter(DEFAULT_LOG_FORMAT, DATE_FORMAT)


def _file_handler(filename: str, backups: int) -> RotatingFileHandler:
    path = Path(filename)
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        path, maxBytes=MAX_BYTES, backupCount=backups, encoding="utf-8"
    )
    handler.setFormatter(_formatter())
    return handler


def new_log(name: str, filename: str) -> logging.Logger:
    """Return the logger called ``name``, creating it with a rotating file on first use."""
    logger = _registered.get(name)
    if logger is None:
        logger = logging.getLogger(name)
        logger.setLevel(logging.DEBUG)
        logger.propagate = False
        logger.addHandler(_file_handler(filename, 10))
        _registered[name] = logger
    return logger


def init(name: str, filename: str) -> logging.Logger:
    """Send root logging to stdout and a rotating file; return the logger ``name``."""
    root = logging.getLogger()
    for handler in _installed_handlers:
        root.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(_formatter())
    handlers = [console, _file_handler(filename, 3)]
    for handler in handlers:
        root.addHandler(handler)
    _installed_handlers.extend(handlers)
    root.setLevel(logging.DEBUG)
    return logging.getLogger(name)