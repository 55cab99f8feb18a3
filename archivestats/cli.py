"""CLI entrypoint for archivestats."""

from __future__ import annotations

import argparse
import sys
import threading
from pathlib import Path

from .config import CONFIG_FILENAME, ConfigError, load_config
from .errors import FatalIOError, ReportCancelled
from .logging import configure_logging, get_logger
from .report import ReportBuilder, ReportWriter, SummaryRenderer, serialize_report


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="archivestats",
        description="Build tag, category and publish-date statistics for a YYYY/MM/DD content archive.",
    )
    parser.add_argument(
        "path",
        help="Path to the archive root directory.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--config",
        default=None,
        help=f"Configuration file (defaults to {CONFIG_FILENAME} in the archive root).",
    )
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory receiving the report (defaults to ./report).",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Number of worker threads used to parse sidecars.",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        default=False,
        help="Also write a Markdown summary next to the JSON report.",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Append logs to this file in addition to stderr.",
    )
    parser.add_argument(
        "--skip-log",
        default=None,
        help="Write skipped content files as tab-separated path and reason lines.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for archivestats."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        verbose=bool(args.verbose),
        log_file=Path(args.log_file) if args.log_file else None,
        skip_log=Path(args.skip_log) if args.skip_log else None,
    )
    logger = get_logger("cli")

    if args.config and not Path(args.config).is_file():
        parser.exit(1, f"Configuration file not found: {args.config}\n")
    config_source = Path(args.config) if args.config else Path(args.path) / CONFIG_FILENAME
    try:
        config = load_config(config_source)
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    if args.output_dir:
        config.output.directory = Path(args.output_dir)
    if args.summary:
        config.output.summary = True
    if args.workers is not None and args.workers < 1:
        parser.exit(1, "--workers must be at least 1\n")

    cancel = threading.Event()
    builder = ReportBuilder(config, workers=args.workers, cancel_event=cancel)
    writer = ReportWriter(config.output.directory, config.output.filename)

    try:
        report = builder.build(args.path)
        companions = {}
        if config.output.summary:
            companions[config.output.summary_filename] = SummaryRenderer().render(report)
        report_path = writer.write(report, companions)
    except FatalIOError as exc:
        parser.exit(1, f"archivestats failed: {exc}\nRun with --verbose for more details.\n")
    except (KeyboardInterrupt, ReportCancelled):
        cancel.set()
        parser.exit(130, "Interrupted; no report written.\n")

    logger.info("Report written to %s", report_path)
    print(serialize_report(report))


if __name__ == "__main__":
    main(sys.argv[1:])
