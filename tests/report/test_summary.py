"""Tests for archivestats.report.summary."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from archivestats.models import RankedEntry, Report, ReportStats
from archivestats.report.summary import SummaryRenderer


def _report() -> Report:
    return Report(
        timestamp=datetime(2021, 6, 1, tzinfo=timezone.utc),
        by_tag=[RankedEntry("python", 3), RankedEntry("a|b", 1)],
        stats=ReportStats(discovered=5, parsed=4, missing_sidecars=1),
    )


def test_render_lists_each_dimension() -> None:
    output = SummaryRenderer().render(_report())

    assert output.startswith("# Archive statistics")
    assert "Generated at 2021-06-01T00:00:00Z." in output
    assert "| 5 | 4 | 1 | 0 |" in output
    assert "## Top tags" in output
    assert "| python | 3 |" in output
    assert "| a\\|b | 1 |" in output
    assert "## By year and month" in output
    assert "_No data._" in output


def test_render_prefers_custom_templates(tmp_path: Path) -> None:
    (tmp_path / "summary.md.j2").write_text(
        "{{ sections | length }} sections, {{ stats.parsed }} parsed\n", encoding="utf-8"
    )

    output = SummaryRenderer(templates_dir=tmp_path).render(_report())

    assert output == "8 sections, 4 parsed\n"
