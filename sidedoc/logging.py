"""Logging utilities for sidedoc runs."""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "sidedoc"


class ConsoleFormatter(logging.Formatter):
    """Prefix console lines with the program name, and the level for problems."""

    def __init__(self) -> None:
        super().__init__("sidedoc: %(message)s")
        self._problem = logging.Formatter("sidedoc: %(levelname)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        if record.levelno >= logging.WARNING:
            return self._problem.format(record)
        return super().format(record)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the sidedoc hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Send sidedoc records to stderr and, optionally, to `log_file`.

    `verbose` lowers the level to DEBUG, which also makes `log_exception`
    attach tracebacks.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Reset handlers to avoid duplicate output when the CLI is invoked repeatedly.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.setFormatter(ConsoleFormatter())
    logger.addHandler(stream_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s [%(threadName)s]: %(message)s")
        )
        logger.addHandler(file_handler)

    return logger


def log_exception(logger: logging.Logger, message: str, exc: BaseException) -> None:
    """Log a per-file failure; the traceback is only shown at DEBUG."""
    if logger.isEnabledFor(logging.DEBUG):
        logger.error("%s: %s", message, exc, exc_info=exc)
    else:
        logger.error("%s: %s", message, exc)


__all__ = ["ConsoleFormatter", "configure_logging", "get_logger", "log_exception"]
