"""Command line entry point for batch diagram generation."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pycircuitlessons.config import BatchConfig
from pycircuitlessons.project import BatchReport, process_batch

EXIT_OK = 0
EXIT_FAILURES = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pycircuitlessons",
        description="Generate step-by-step circuit diagrams for electronics lessons",
    )
    parser.add_argument("data_dir", type=Path, help="directory containing lesson shard files")
    parser.add_argument("output_dir", type=Path, help="directory to write diagram folders into")
    parser.add_argument(
        "--pattern", default="levels-*.json", help="glob selecting shard files (default: %(default)s)"
    )
    parser.add_argument("--max-shards", type=int, default=None, help="only process the first N shards")
    parser.add_argument(
        "--lesson",
        type=int,
        action="append",
        dest="lessons",
        metavar="ID",
        help="only generate this lesson id (repeatable)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def print_report(report: BatchReport) -> None:
    for lesson in report.lessons:
        status = "ok" if lesson.ok else f"FAILED: {lesson.error}"
        steps = ", ".join(str(n) for n in lesson.step_numbers) or "none"
        print(f"  Level {lesson.lesson_id}: {lesson.title} (steps: {steps}) {status}")
    for error in report.skipped:
        print(f"  Skipped: {error}")
    print(f"Lessons processed: {report.lesson_count}")
    print(f"Diagrams generated: {report.diagram_count}")


def main(argv: list[str] | None = None) -> int:
    """Run the generator and return a process exit code."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if not args.data_dir.is_dir():
        print(f"Data directory not found: {args.data_dir}", file=sys.stderr)
        return EXIT_USAGE

    config = BatchConfig(
        data_dir=args.data_dir,
        output_dir=args.output_dir,
        shard_pattern=args.pattern,
        max_shards=args.max_shards,
        lesson_ids=frozenset(args.lessons) if args.lessons else None,
    )
    report = process_batch(config)
    print_report(report)
    return EXIT_OK if report.ok else EXIT_FAILURES


def main_entry() -> None:
    sys.exit(main())
