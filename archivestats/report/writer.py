"""Serialize reports to canonical JSON and persist them."""

from __future__ import annotations

import json
import os
import tempfile
from datetime import UTC
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Tuple

from ..errors import ReportWriteError
from ..logging import get_logger
from ..models import RankedEntry, Report

# JSON key for each report attribute, in output order.
REPORT_KEYS = (
    ("by_tag", "byTag"),
    ("by_category", "byCategory"),
    ("by_year", "byYear"),
    ("by_month", "byMonth"),
    ("by_day", "byDay"),
    ("by_hour", "byHour"),
    ("by_week", "byWeek"),
    ("by_year_and_month", "byYearAndMonth"),
)


def format_timestamp(report: Report) -> str:
    return report.timestamp.astimezone(UTC).isoformat().replace("+00:00", "Z")


def _entries(entries: List[RankedEntry]) -> List[Dict[str, object]]:
    return [{"name": entry.name, "value": entry.count} for entry in entries]


def report_to_dict(report: Report) -> Dict[str, object]:
    payload: Dict[str, object] = {"timestamp": format_timestamp(report)}
    for attribute, key in REPORT_KEYS:
        payload[key] = _entries(getattr(report, attribute))
    return payload


def serialize_report(report: Report) -> str:
    """Return the report as compact JSON with keys in schema order."""
    return json.dumps(report_to_dict(report), ensure_ascii=False, separators=(",", ":"))


class ReportWriter:
    """Writes report artefacts into a single output directory.

    Every artefact of a run is staged to a temporary file before any of them
    is moved into place. The JSON report is always replaced last, so its
    presence means every companion file was written.
    """

    def __init__(self, directory: str | Path, filename: str = "stats.json") -> None:
        self.directory = Path(directory)
        self.filename = filename
        self.logger = get_logger("writer")

    @property
    def report_path(self) -> Path:
        return self.directory / self.filename

    def write(self, report: Report, companions: Optional[Mapping[str, str]] = None) -> Path:
        """Persist the JSON report plus any ``companions`` and return the report path."""
        contents: Dict[str, str] = dict(companions or {})
        contents.pop(self.filename, None)
        contents[self.filename] = serialize_report(report)
        return self.write_files(contents)[self.filename]

    def write_text(self, filename: str, content: str) -> Path:
        """Atomically replace ``filename`` in the output directory with ``content``."""
        return self.write_files({filename: content})[filename]

    def write_files(self, contents: Mapping[str, str]) -> Dict[str, Path]:
        """Stage every file, then replace the targets in insertion order."""
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ReportWriteError(f"Cannot create output directory {self.directory}: {exc}") from exc

        staged: List[Tuple[str, Path]] = []
        written: Dict[str, Path] = {}
        target = self.directory
        try:
            for filename, content in contents.items():
                target = self.directory / filename
                fd, temp_name = tempfile.mkstemp(prefix=f".{filename}.", suffix=".tmp", dir=self.directory)
                staged.append((temp_name, target))
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(content)
            for filename, (temp_name, target) in zip(contents, staged):
                os.replace(temp_name, target)
                written[filename] = target
                self.logger.debug("Wrote %s (%d bytes)", target, len(contents[filename].encode("utf-8")))
        except OSError as exc:
            for temp_name, _ in staged:
                if os.path.exists(temp_name):
                    os.unlink(temp_name)
            raise ReportWriteError(f"Cannot write report {target}: {exc}") from exc
        return written


__all__ = ["REPORT_KEYS", "ReportWriter", "format_timestamp", "report_to_dict", "serialize_report"]
