"""CLI: draw a relation graph from Ory Keto relation tuple files."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from .config import load_profile
from .errors import KetodotError
from .graph.render import OUTPUT_FORMATS
from .logging_utils import configure_logging
from .pipeline import Pipeline
from .watch import SourceWatcher

logger = logging.getLogger("ketodot.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ketodot",
        description=(
            "Draws a relation graph from a file of relation tuples in Ory Keto syntax. "
            "Outputs Graphviz DOT text or renders an image file."
        ),
    )
    parser.add_argument("files", nargs="+", metavar="FILE", help="Tuple files to read; '-' reads stdin")
    parser.add_argument("-o", "--output", default=None, help="Output file (default: stdout)")
    parser.add_argument("-f", "--format", default=None, choices=OUTPUT_FORMATS, help="Output format (default: dot)")
    parser.add_argument(
        "-w",
        "--watch",
        action="store_true",
        help="Watch the source files for changes. Stop with keyboard interrupt",
    )
    parser.add_argument("--profile", default=None, help="Path to a ketodot profile YAML")
    parser.add_argument("--poll-seconds", type=float, default=None, help="Watch loop sleep in seconds")
    parser.add_argument("--log-file", default=None, help="Also write log records to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(
        level=logging.DEBUG if args.verbose else logging.INFO,
        log_paths=[args.log_file] if args.log_file else None,
    )
    try:
        profile = load_profile(Path(args.profile) if args.profile else None).with_overrides(
            output_format=args.format,
            output_path=args.output,
            poll_seconds=args.poll_seconds,
        )
        profile.validate_output()
        pipeline = Pipeline(
            sources=args.files,
            palette=profile.palette,
            output_format=profile.output.format,
            output_path=profile.output.path,
        )
        watcher = None
        if args.watch:
            watcher = SourceWatcher(args.files, pipeline.run_once, poll_seconds=profile.watch.poll_seconds)
    except KetodotError as exc:
        logger.error("%s", exc)
        return 1

    if watcher is None:
        try:
            pipeline.run_once()
        except KetodotError as exc:
            logger.error("%s", exc)
            return 1
        return 0

    print("Watching " + ", ".join(args.files))
    try:
        pipeline.run_once()
    except KetodotError as exc:
        logger.error("%s", exc)
    try:
        watcher.run_forever()
    except KeyboardInterrupt:
        logger.info("ketodot watch stopped")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
