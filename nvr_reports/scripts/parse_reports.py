#!/usr/bin/env python3
"""CLI entrypoint for the report parser."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from nvr_reports.report_parser import (
    charts,
    engine,
    export,
    renderer,
    sources,
)
from nvr_reports.report_parser.models import ParsedReport, summary_to_dict

logger = logging.getLogger("nvr_reports.report_parser.cli")

OUTPUT_FORMATS = ("json", "csv", "text")


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )


def resolve_input(path: str) -> Path:
    resolved = Path(path).expanduser().resolve()
    if not resolved.is_file():
        raise SystemExit(f"File not found: {resolved}")
    return resolved


def load_text(path: Path) -> str:
    try:
        return sources.read_document(path)
    except sources.DocumentReadError as exc:
        raise SystemExit(str(exc)) from exc


def render(report: ParsedReport, output_format: str) -> str:
    if output_format == "json":
        return export.report_to_json(report) + "\n"
    if output_format == "csv":
        return export.report_to_csv(report)
    return renderer.format_report(report)


def write_output(content: str, output: str | None) -> None:
    if not output:
        sys.stdout.write(content)
        return
    output_path = Path(output).expanduser()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(content, encoding="utf-8")
    logger.info("Wrote %s (%d characters)", output_path, len(content))


def command_identify(args: argparse.Namespace) -> None:
    for file_name in args.files:
        path = resolve_input(file_name)
        kind = engine.identify_report_type(load_text(path))
        print(f"{path}\t{kind}")


def command_parse(args: argparse.Namespace) -> None:
    path = resolve_input(args.file)
    logger.info("Parsing %s", path)
    report = engine.parse_report(load_text(path))
    if report.kind == "unknown" and not report.sections:
        logger.warning("Could not recognize the report in %s", path)
    write_output(render(report, args.format), args.output)


def command_summary(args: argparse.Namespace) -> None:
    path = resolve_input(args.file)
    report = engine.parse_report(load_text(path))
    payload = {
        "kind": report.kind,
        "title": report.title,
        "summary": summary_to_dict(report.summary),
        "statistics": [entry.to_dict() for entry in charts.extract_chart_data(report)],
    }
    print(json.dumps(payload, ensure_ascii=False, indent=2))


def build_parser() -> argparse.ArgumentParser:
    parser_obj = argparse.ArgumentParser(description="Parse NVR operational reports")
    parser_obj.add_argument("--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser_obj.add_subparsers(dest="command")

    identify_parser = subparsers.add_parser("identify", help="Print the kind of each report")
    identify_parser.add_argument("files", nargs="+", help="Report files")
    identify_parser.set_defaults(func=command_identify)

    parse_parser = subparsers.add_parser("parse", help="Parse a report and export it")
    parse_parser.add_argument("file", help="Report file")
    parse_parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default="json",
        help="Output format (default: json)",
    )
    parse_parser.add_argument("--output", help="Write to this path instead of stdout")
    parse_parser.set_defaults(func=command_parse)

    summary_parser = subparsers.add_parser("summary", help="Print summary and chart data")
    summary_parser.add_argument("file", help="Report file")
    summary_parser.set_defaults(func=command_summary)

    return parser_obj


def main(argv: list[str] | None = None) -> None:
    parser_obj = build_parser()
    args = parser_obj.parse_args(argv)
    if not getattr(args, "command", None):
        parser_obj.print_help()
        return
    configure_logging(args.verbose)
    args.func(args)


if __name__ == "__main__":
    main()
