"""Drive discovery, parsing and aggregation into a single report."""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor
from datetime import UTC, datetime
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from ..aggregation import FacetTally
from ..archive_scanner import ArchiveScanner
from ..config import ArchiveStatsConfig
from ..errors import MalformedSidecarError, ReportCancelled
from ..facets import DateDecomposer, weekday_labels
from ..logging import SKIPPED_LOGGER, get_logger, log_skip
from ..metadata import MetadataParser, MetadataResolver
from ..models import Report, ReportStats


def _utc_now() -> datetime:
    return datetime.now(UTC)


def _chunk(items: Sequence[str], count: int) -> List[Sequence[str]]:
    if count <= 1 or len(items) <= 1:
        return [items]
    size = -(-len(items) // count)
    return [items[start : start + size] for start in range(0, len(items), size)]


class ReportBuilder:
    """Builds a ``Report`` for every content file under an archive root."""

    def __init__(
        self,
        config: ArchiveStatsConfig | None = None,
        *,
        scanner: ArchiveScanner | None = None,
        resolver: MetadataResolver | None = None,
        parser: MetadataParser | None = None,
        decomposer: DateDecomposer | None = None,
        workers: int | None = None,
        clock: Callable[[], datetime] = _utc_now,
        cancel_event: Optional[threading.Event] = None,
    ) -> None:
        self.config = config or ArchiveStatsConfig(root=Path.cwd())
        self.scanner = scanner or ArchiveScanner(
            content_extension=self.config.content_extension,
            deny_list=self.config.deny_list,
        )
        self.resolver = resolver or MetadataResolver(self.config.sidecar_extension)
        self.parser = parser or MetadataParser()
        self.decomposer = decomposer or DateDecomposer(weekday_labels(self.config.weekday_language))
        self.workers = max(1, workers if workers is not None else self.config.workers)
        self.clock = clock
        self.cancel_event = cancel_event if cancel_event is not None else threading.Event()
        self.logger = get_logger("builder")
        self.skip_logger = get_logger(SKIPPED_LOGGER)

    def limits(self, now: datetime) -> Dict[str, int]:
        """Return the top-N size for every dimension at time ``now``."""
        year_limit = max(now.year - self.config.base_year, 0)
        configured = self.config.limits
        return {
            "tag": configured.tag,
            "category": configured.category,
            "year": year_limit,
            "month": configured.month,
            "day": configured.day,
            "hour": configured.hour,
            "week": configured.week,
            "year_month": year_limit * 12,
        }

    def build(self, root: str | Path) -> Report:
        """Scan ``root`` and return the assembled report."""
        self.logger.info("Scanning archive %s", root)
        files = self.scanner.scan(root)

        tally, stats = self._tally(files)
        stats.discovered = len(files)
        self._check_cancelled()

        timestamp = self.clock()
        ranked = tally.rank(self.limits(timestamp))
        self.logger.info(
            "Aggregated %d of %d files (%d missing sidecars, %d malformed)",
            stats.parsed,
            stats.discovered,
            stats.missing_sidecars,
            stats.malformed_sidecars,
        )
        return Report(
            timestamp=timestamp,
            by_tag=ranked["tag"],
            by_category=ranked["category"],
            by_year=ranked["year"],
            by_month=ranked["month"],
            by_day=ranked["day"],
            by_hour=ranked["hour"],
            by_week=ranked["week"],
            by_year_and_month=ranked["year_month"],
            stats=stats,
        )

    def _tally(self, files: Sequence[str]) -> Tuple[FacetTally, ReportStats]:
        chunks = _chunk(files, self.workers)
        if len(chunks) == 1:
            return self._tally_chunk(chunks[0])

        self.logger.debug("Processing %d files across %d workers", len(files), len(chunks))
        with ThreadPoolExecutor(max_workers=self.workers) as executor:
            futures = [executor.submit(self._tally_chunk, chunk) for chunk in chunks]
            try:
                partials = [future.result() for future in futures]
            except (KeyboardInterrupt, ReportCancelled):
                # Pending chunks never start; running ones stop at their next file.
                self.cancel_event.set()
                for future in futures:
                    future.cancel()
                raise

        tally = FacetTally()
        stats = ReportStats()
        for partial_tally, partial_stats in partials:
            tally.merge(partial_tally)
            stats.parsed += partial_stats.parsed
            stats.missing_sidecars += partial_stats.missing_sidecars
            stats.malformed_sidecars += partial_stats.malformed_sidecars
        return tally, stats

    def _tally_chunk(self, files: Sequence[str]) -> Tuple[FacetTally, ReportStats]:
        tally = FacetTally()
        stats = ReportStats()
        for path in files:
            self._check_cancelled()
            lookup = self.resolver.resolve(path)
            if not lookup.exists:
                log_skip(self.skip_logger, path, "missing sidecar", "Missing metadata sidecar for %s", path)
                stats.missing_sidecars += 1
                continue
            try:
                sidecar = self.parser.parse(lookup.sidecar_path)
                facets = self.decomposer.decompose(sidecar.date, sidecar.time)
            except MalformedSidecarError as exc:
                log_skip(self.skip_logger, path, exc.reason, "Skipping %s: %s", path, exc)
                stats.malformed_sidecars += 1
                continue
            tally.add_file(sidecar, facets)
            stats.parsed += 1
        return tally, stats

    def _check_cancelled(self) -> None:
        if self.cancel_event.is_set():
            raise ReportCancelled("Report generation cancelled")


__all__ = ["ReportBuilder"]
