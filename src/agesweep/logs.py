"""Logging setup for the agesweep command.

User-facing output goes to stdout through ``print``. Diagnostics (unreadable
entries, failed deletions) go through the ``agesweep`` logger configured here.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOGGER_NAME = "agesweep"

_LEVEL_MAP: dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}
_HANDLER_TAG = "_agesweep_handler"
_CONFIGURED_FLAG = "_agesweep_configured"


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "WARNING"
    console: bool = True
    log_file: str | None = None

    max_bytes: int = 1024 * 1024
    backup_count: int = 2

    console_fmt: str = "%(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"


def parse_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    return _LEVEL_MAP.get(str(level).strip().upper(), logging.INFO)


def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """Attach handlers to the ``agesweep`` logger.

    Calling this twice is a no-op unless ``force`` is set, in which case the
    handlers installed by a previous call are replaced. Handlers added by
    anyone else (pytest's caplog, for instance) are left alone.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if getattr(logger, _CONFIGURED_FLAG, False) and not force:
        return logger

    level = parse_level(cfg.level)
    logger.setLevel(level)
    _remove_our_handlers(logger)

    if cfg.console:
        stream = logging.StreamHandler(sys.stderr)
        stream.setLevel(level)
        stream.setFormatter(logging.Formatter(cfg.console_fmt))
        _tag(stream)
        logger.addHandler(stream)

    if cfg.log_file:
        path = Path(cfg.log_file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        rotating = RotatingFileHandler(
            path,
            maxBytes=cfg.max_bytes,
            backupCount=cfg.backup_count,
            encoding="utf-8",
        )
        rotating.setLevel(level)
        rotating.setFormatter(logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt))
        _tag(rotating)
        logger.addHandler(rotating)

    setattr(logger, _CONFIGURED_FLAG, True)
    return logger


def _tag(handler: logging.Handler) -> None:
    setattr(handler, _HANDLER_TAG, True)


def _remove_our_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            logger.removeHandler(handler)
            handler.close()
