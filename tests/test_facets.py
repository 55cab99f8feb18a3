"""Tests for archivestats.facets."""

from __future__ import annotations

import pytest

from archivestats.errors import DecompositionError, MalformedSidecarError
from archivestats.facets import WEEKDAY_LABELS, DateDecomposer, weekday_labels


def test_decompose_splits_calendar_facets() -> None:
    facets = DateDecomposer().decompose("2021-01-15", "08:05:09")

    assert facets.year == "2021"
    assert facets.month == "01"
    assert facets.day == "15"
    assert facets.hour == "08"
    assert facets.year_month == "2021-01"


def test_decompose_maps_monday_to_first_label() -> None:
    facets = DateDecomposer().decompose("2021-01-04", "00:00")

    assert facets.weekday == "周一"


def test_decompose_uses_configured_label_table() -> None:
    decomposer = DateDecomposer(weekday_labels("en"))

    assert decomposer.decompose("2021-01-04", "12:00").weekday == "Monday"
    assert decomposer.decompose("2021-01-10", "12:00").weekday == "Sunday"


@pytest.mark.parametrize(
    ("date", "time"),
    [
        ("2021-1", "10:00"),
        ("2021-1-15", "10:00"),
        ("21-01-15", "10:00"),
        ("2021-01-5", "10:00"),
        ("2021-02-30", "10:00"),
        ("2021-01-15", "9:00"),
        ("2021-01-15", "ab:00"),
        ("２０２１-０１-０４", "10:00"),
        ("2021-01-04", "１０:00"),
    ],
)
def test_decompose_rejects_bad_shapes(date: str, time: str) -> None:
    with pytest.raises(DecompositionError) as excinfo:
        DateDecomposer().decompose(date, time)

    assert isinstance(excinfo.value, MalformedSidecarError)


def test_weekday_labels_rejects_unknown_language() -> None:
    with pytest.raises(ValueError):
        weekday_labels("fr")


def test_label_tables_have_seven_entries() -> None:
    for labels in WEEKDAY_LABELS.values():
        assert len(labels) == 7

    with pytest.raises(ValueError):
        DateDecomposer(("Mon", "Tue"))
