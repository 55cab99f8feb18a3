"""Top-N frequency ranking over facet occurrences."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping

from .models import DIMENSIONS, DateFacets, MetadataSidecar, RankedEntry


def rank_counts(counts: Mapping[str, int], limit: int) -> List[RankedEntry]:
    """Rank a count map by descending count, ties by ascending name."""
    if limit <= 0:
        return []
    ordered = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return [RankedEntry(name=name, count=count) for name, count in ordered[:limit]]


def rank(keys: Iterable[str], limit: int) -> List[RankedEntry]:
    """Count ``keys`` and return at most ``limit`` ranked entries."""
    return rank_counts(Counter(keys), limit)


@dataclass
class FacetTally:
    """Independent per-dimension counters for a batch of sidecars."""

    counters: Dict[str, Counter] = field(
        default_factory=lambda: {name: Counter() for name in DIMENSIONS}
    )

    def add_file(self, sidecar: MetadataSidecar, facets: DateFacets) -> None:
        self.counters["tag"].update(sidecar.tags)
        self.counters["category"].update(sidecar.category_names)
        self.counters["year"][facets.year] += 1
        self.counters["month"][facets.month] += 1
        self.counters["day"][facets.day] += 1
        self.counters["hour"][facets.hour] += 1
        self.counters["week"][facets.weekday] += 1
        self.counters["year_month"][facets.year_month] += 1

    def merge(self, other: "FacetTally") -> "FacetTally":
        """Add ``other``'s counts into this tally and return it."""
        for name in DIMENSIONS:
            self.counters[name].update(other.counters[name])
        return self

    def rank(self, limits: Mapping[str, int]) -> Dict[str, List[RankedEntry]]:
        return {name: rank_counts(self.counters[name], limits.get(name, 0)) for name in DIMENSIONS}


__all__ = ["FacetTally", "rank", "rank_counts"]
