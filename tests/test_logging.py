"""Tests for archivestats.logging."""

from __future__ import annotations

import logging
from pathlib import Path

from archivestats.logging import SKIPPED_LOGGER, configure_logging, get_logger, log_skip


def test_get_logger_nests_under_package() -> None:
    assert get_logger().name == "archivestats"
    assert get_logger("builder").name == "archivestats.builder"


def test_configure_logging_replaces_handlers() -> None:
    configure_logging()
    logger = configure_logging(verbose=True)

    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
    assert logger.propagate is False


def test_skip_log_lists_only_skipped_files(tmp_path: Path) -> None:
    skip_log = tmp_path / "skipped.tsv"
    configure_logging(skip_log=skip_log)
    skipped = get_logger(SKIPPED_LOGGER)

    log_skip(skipped, "site/2021/01/04/a.md", "missing sidecar", "Missing metadata sidecar for %s", "a.md")
    skipped.warning("not tied to a file")
    get_logger("builder").warning("unrelated warning")
    log_skip(skipped, "site/2021/01/05/b.md", "date: Field required", "Skipping %s", "b.md")
    configure_logging()

    assert skip_log.read_text(encoding="utf-8").splitlines() == [
        "site/2021/01/04/a.md\tmissing sidecar",
        "site/2021/01/05/b.md\tdate: Field required",
    ]


def test_skip_log_is_detached_on_reconfigure(tmp_path: Path) -> None:
    configure_logging(skip_log=tmp_path / "skipped.tsv")
    configure_logging()

    assert get_logger(SKIPPED_LOGGER).handlers == []
