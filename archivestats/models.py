"""Core data models shared across archivestats components."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List

# Dimension keys in report order.
DIMENSIONS = (
    "tag",
    "category",
    "year",
    "month",
    "day",
    "hour",
    "week",
    "year_month",
)


@dataclass(frozen=True)
class Category:
    """Category object attached to an article."""

    name: str
    slug: str = ""


@dataclass
class MetadataSidecar:
    """Parsed sidecar metadata for a single content file."""

    path: str
    date: str
    time: str
    tags: List[str] = field(default_factory=list)
    categories: List[Category] = field(default_factory=list)

    @property
    def category_names(self) -> List[str]:
        return [category.name for category in self.categories]


@dataclass(frozen=True)
class DateFacets:
    """Calendar facets derived from a sidecar publish date."""

    year: str
    month: str
    day: str
    hour: str
    year_month: str
    weekday: str


@dataclass(frozen=True)
class SidecarLookup:
    """Result of resolving the sidecar path for a content file."""

    content_path: str
    sidecar_path: str
    exists: bool


@dataclass(frozen=True)
class RankedEntry:
    """A distinct facet value and the number of times it was observed."""

    name: str
    count: int


@dataclass
class ReportStats:
    """Counters describing how many files contributed to a report."""

    discovered: int = 0
    parsed: int = 0
    missing_sidecars: int = 0
    malformed_sidecars: int = 0

    @property
    def skipped(self) -> int:
        return self.missing_sidecars + self.malformed_sidecars


@dataclass
class Report:
    """Generation timestamp plus one ranked result per dimension."""

    timestamp: datetime
    by_tag: List[RankedEntry] = field(default_factory=list)
    by_category: List[RankedEntry] = field(default_factory=list)
    by_year: List[RankedEntry] = field(default_factory=list)
    by_month: List[RankedEntry] = field(default_factory=list)
    by_day: List[RankedEntry] = field(default_factory=list)
    by_hour: List[RankedEntry] = field(default_factory=list)
    by_week: List[RankedEntry] = field(default_factory=list)
    by_year_and_month: List[RankedEntry] = field(default_factory=list)
    stats: ReportStats = field(default_factory=ReportStats)

    def dimension(self, name: str) -> List[RankedEntry]:
        """Return the ranked entries for a dimension key from ``DIMENSIONS``."""
        attribute = _DIMENSION_ATTRIBUTES.get(name)
        if attribute is None:
            raise KeyError(f"Unknown dimension: {name}")
        return getattr(self, attribute)


_DIMENSION_ATTRIBUTES = {
    "tag": "by_tag",
    "category": "by_category",
    "year": "by_year",
    "month": "by_month",
    "day": "by_day",
    "hour": "by_hour",
    "week": "by_week",
    "year_month": "by_year_and_month",
}
