"""Logging setup for the markspell command line."""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import IO

__all__ = ["configure_logging"]

_PACKAGE_LOGGER = "markspell"
_HANDLER_NAME = "markspell-cli"


def configure_logging(
    level: int = logging.INFO,
    *,
    log_file: Path | str | None = None,
    stream: IO[str] | None = None,
    max_bytes: int = 1_000_000,
    backup_count: int = 3,
) -> list[logging.Handler]:
    """Send markspell's records to stderr and, when ``log_file`` is set, a rotating file.

    Handlers go on the ``markspell`` package logger rather than the root
    logger, and a repeated call replaces the handlers of the previous one.
    Nothing is written to disk unless ``log_file`` is given.
    """

    logger = logging.getLogger(_PACKAGE_LOGGER)
    for handler in [item for item in logger.handlers if item.get_name() == _HANDLER_NAME]:
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handlers: list[logging.Handler] = [logging.StreamHandler(stream)]
    if log_file is not None:
        path = Path(log_file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            logging.handlers.RotatingFileHandler(
                path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
            )
        )

    for handler in handlers:
        handler.set_name(_HANDLER_NAME)
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(level)
    return handlers
