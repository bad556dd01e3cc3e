"""Logger setup for the adrman CLI and service."""

from __future__ import annotations

import logging
from pathlib import Path

ROOT_LOGGER = "adrman"
CONSOLE_FORMAT = "[adrman] %(levelname)s %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``adrman`` or one of its children, e.g. ``adrman.collector``."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}" if name else ROOT_LOGGER)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Route adrman records to stderr and, when ``log_file`` is set, to that file.

    Calling it again replaces the handlers installed by the previous call, so
    repeated CLI invocations in one process do not duplicate output. The log
    file's parent directory is created when missing; the file is appended to.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    logger.propagate = False

    for previous in list(logger.handlers):
        logger.removeHandler(previous)
        previous.close()

    handlers: list[logging.Handler] = [_with_format(logging.StreamHandler(), CONSOLE_FORMAT)]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(_with_format(logging.FileHandler(log_file, encoding="utf-8"), FILE_FORMAT))

    for handler in handlers:
        handler.setLevel(level)
        logger.addHandler(handler)
    return logger


def _with_format(handler: logging.Handler, fmt: str) -> logging.Handler:
    handler.setFormatter(logging.Formatter(fmt))
    return handler


__all__ = ["configure_logging", "get_logger"]
