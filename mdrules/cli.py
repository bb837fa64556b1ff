"""CLI entrypoints for mdrules commands."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from .artifacts import ArtifactWriteError
from .config import ConfigError
from .logging import configure_logging
from .pipeline import PipelineOptions, cache_stats, clear_cache, run_pipeline


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_path_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Root of the documentation tree (defaults to current directory).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdrules",
        description="Extract rules and reports from a tree of markdown documents.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only show warnings and errors on the console.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write logs to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser(
        "run",
        help="Process markdown files, reusing cached results for unchanged files.",
    )
    _add_verbose_option(run_parser, suppress_default=True)
    _add_path_argument(run_parser)
    run_parser.add_argument(
        "--generate-rules",
        action="store_true",
        help="Write one static rule file per extracted rule.",
    )
    run_parser.add_argument(
        "--include-internal",
        action="store_true",
        default=None,
        help="Include files under internal tooling directories.",
    )
    run_parser.add_argument(
        "--no-cache",
        action="store_true",
        help="Reprocess every file even when a cached result is current.",
    )

    clear_parser = subparsers.add_parser("clear-cache", help="Remove all cached results.")
    _add_verbose_option(clear_parser, suppress_default=True)
    _add_path_argument(clear_parser)

    stats_parser = subparsers.add_parser("cache-stats", help="Show cached entry counts.")
    _add_verbose_option(stats_parser, suppress_default=True)
    _add_path_argument(stats_parser)

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for mdrules commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        verbose=bool(args.verbose),
        quiet=args.quiet or args.command == "cache-stats",
        log_file=args.log_file,
    )

    if args.command == "run":
        options = PipelineOptions(
            root=args.path,
            generate_artifacts=bool(args.generate_rules),
            include_internal=args.include_internal,
            use_cache=not args.no_cache,
        )
        try:
            report = run_pipeline(options)
        except ArtifactWriteError as exc:
            parser.exit(1, f"mdrules run failed: {exc}\n")
        print(
            f"Processed {report.total_files} files: {report.successes} succeeded, "
            f"{report.failures} failed, {report.served_from_cache} served from cache"
        )
        if report.artifacts:
            print(f"Wrote {len(report.artifacts)} artifacts")
    elif args.command == "clear-cache":
        try:
            clear_cache(args.path)
        except (ConfigError, OSError) as exc:
            parser.exit(1, f"mdrules clear-cache failed: {exc}\n")
        print("Cache cleared")
    elif args.command == "cache-stats":
        try:
            stats = cache_stats(args.path)
        except ConfigError as exc:
            parser.exit(1, f"mdrules cache-stats failed: {exc}\n")
        print(json.dumps(stats, indent=2))
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


if __name__ == "__main__":
    main(sys.argv[1:])
