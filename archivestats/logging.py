"""Logging setup for archivestats runs.

Everything logs under the ``archivestats`` hierarchy. Per-file skips (missing
or malformed sidecars) go through the ``archivestats.skipped`` child, which
still reaches the console and can also be recorded as a tab-separated
``path<TAB>reason`` file for later cleanup of the archive.
"""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "archivestats"
SKIPPED_LOGGER = "skipped"
SKIPPED_FORMAT = "%(skipped_path)s\t%(skip_reason)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the archivestats hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def log_skip(logger: logging.Logger, path: str, reason: str, message: str, *args: object) -> None:
    """Emit a warning for a skipped content file with its path and reason attached."""
    logger.warning(message, *args, extra={"skipped_path": path, "skip_reason": reason})


class _SkipRecordFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return hasattr(record, "skipped_path") and hasattr(record, "skip_reason")


def _reset_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def configure_logging(
    *,
    verbose: bool = False,
    log_file: Path | None = None,
    skip_log: Path | None = None,
) -> logging.Logger:
    """Configure console output, an optional log file and an optional skip list."""
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False
    _reset_handlers(logger)

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.setFormatter(logging.Formatter("[archivestats] %(levelname)s %(message)s"))
    logger.addHandler(stream_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(file_handler)

    skipped = get_logger(SKIPPED_LOGGER)
    _reset_handlers(skipped)
    if skip_log is not None:
        # Truncated per run: the file lists the skips of the latest report only.
        skip_handler = logging.FileHandler(skip_log, mode="w", encoding="utf-8")
        skip_handler.setLevel(logging.WARNING)
        skip_handler.addFilter(_SkipRecordFilter())
        skip_handler.setFormatter(logging.Formatter(SKIPPED_FORMAT))
        skipped.addHandler(skip_handler)

    return logger


__all__ = ["SKIPPED_LOGGER", "configure_logging", "get_logger", "log_skip"]
