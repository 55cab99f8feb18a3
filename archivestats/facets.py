"""Decompose sidecar publish dates into calendar facets."""

from __future__ import annotations

import re
from datetime import datetime
from typing import Dict, Sequence, Tuple

from .errors import DecompositionError
from .models import DateFacets

# Labels are indexed by ``date.weekday()``, Monday first.
WEEKDAY_LABELS: Dict[str, Tuple[str, ...]] = {
    "zh": ("周一", "周二", "周三", "周四", "周五", "周六", "周日"),
    "en": ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"),
}

DEFAULT_WEEKDAY_LANGUAGE = "zh"

_YEAR = re.compile(r"[0-9]{4}")
_TWO_DIGITS = re.compile(r"[0-9]{2}")
_YEAR_MONTH = re.compile(r"^[0-9]{4}-[0-9]{2}")


def weekday_labels(language: str) -> Tuple[str, ...]:
    """Return the weekday label table for ``language``."""
    try:
        return WEEKDAY_LABELS[language.lower()]
    except KeyError:
        known = ", ".join(sorted(WEEKDAY_LABELS))
        raise ValueError(f"Unknown weekday language '{language}' (expected one of: {known})") from None


class DateDecomposer:
    """Splits `YYYY-MM-DD` / `HH:MM[:SS]` pairs into ``DateFacets``."""

    def __init__(self, labels: Sequence[str] = WEEKDAY_LABELS[DEFAULT_WEEKDAY_LANGUAGE]) -> None:
        if len(labels) != 7:
            raise ValueError("weekday label table must have exactly 7 entries")
        self.labels = tuple(labels)

    def decompose(self, date: str, time: str) -> DateFacets:
        parts = date.split("-")
        if len(parts) != 3:
            raise DecompositionError(date, "date must have year, month and day components")
        year, month, day = parts
        if not _YEAR.fullmatch(year):
            raise DecompositionError(date, f"year {year!r} is not four digits")
        if not _TWO_DIGITS.fullmatch(month):
            raise DecompositionError(date, f"month {month!r} is not two digits")
        if not _TWO_DIGITS.fullmatch(day):
            raise DecompositionError(date, f"day {day!r} is not two digits")

        match = _YEAR_MONTH.match(date)
        if match is None:
            raise DecompositionError(date, "date does not start with YYYY-MM")
        year_month = match.group(0)

        hour = time.split(":")[0]
        if not _TWO_DIGITS.fullmatch(hour):
            raise DecompositionError(time, f"hour {hour!r} is not two digits")

        try:
            calendar_date = datetime.strptime(date, "%Y-%m-%d").date()
        except ValueError as exc:
            raise DecompositionError(date, f"not a calendar date: {exc}") from exc

        return DateFacets(
            year=year,
            month=month,
            day=day,
            hour=hour,
            year_month=year_month,
            weekday=self.labels[calendar_date.weekday()],
        )


__all__ = ["DateDecomposer", "DEFAULT_WEEKDAY_LANGUAGE", "WEEKDAY_LABELS", "weekday_labels"]
