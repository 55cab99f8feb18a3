"""Markdown summary rendering for reports."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List

from jinja2 import Environment, FileSystemLoader

from ..models import DIMENSIONS, Report
from .writer import format_timestamp

SECTION_TITLES: Dict[str, tuple[str, str]] = {
    "tag": ("Top tags", "Tag"),
    "category": ("Top categories", "Category"),
    "year": ("By year", "Year"),
    "month": ("By month", "Month"),
    "day": ("By day of month", "Day"),
    "hour": ("By hour", "Hour"),
    "week": ("By weekday", "Weekday"),
    "year_month": ("By year and month", "Year-month"),
}


class SummaryRenderer:
    """Renders a ``Report`` as a Markdown document through jinja2 templates."""

    def __init__(self, templates_dir: Path | None = None, template_name: str = "summary.md.j2") -> None:
        self.template_name = template_name
        self._env = self._create_env(templates_dir)

    def render(self, report: Report) -> str:
        template = self._env.get_template(self.template_name)
        sections: List[Dict[str, object]] = []
        for name in DIMENSIONS:
            title, column = SECTION_TITLES[name]
            sections.append(
                {"title": title, "column": column, "entries": report.dimension(name)}
            )
        rendered = template.render(
            timestamp=format_timestamp(report),
            stats=report.stats,
            sections=sections,
        )
        return rendered.strip() + "\n"

    @staticmethod
    def _create_env(templates_dir: Path | None) -> Environment:
        directories = []
        if templates_dir:
            directories.append(str(templates_dir))
        directories.append(str(Path(__file__).with_name("templates")))
        loader = FileSystemLoader(directories)
        return Environment(loader=loader, autoescape=False, trim_blocks=True, lstrip_blocks=True)


__all__ = ["SECTION_TITLES", "SummaryRenderer"]
