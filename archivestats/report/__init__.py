"""Report assembly, serialization and rendering."""

from .builder import ReportBuilder
from .summary import SummaryRenderer
from .writer import ReportWriter, report_to_dict, serialize_report

__all__ = [
    "ReportBuilder",
    "ReportWriter",
    "SummaryRenderer",
    "report_to_dict",
    "serialize_report",
]
