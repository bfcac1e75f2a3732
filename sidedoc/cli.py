"""CLI entrypoint for sidedoc."""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path

from .config import CONFIG_FILENAME, ConfigError, SidedocConfig, load_config
from .highlight import available_backends
from .logging import configure_logging
from .orchestrator import Orchestrator


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sidedoc",
        description="Generate side-by-side HTML documentation from commented source files.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Directory to write pages into (defaults to ./docs).",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help=f"Path to a {CONFIG_FILENAME} file or the directory holding it.",
    )
    parser.add_argument(
        "--highlighter",
        default=None,
        help=f"Highlighting backend ({', '.join(available_backends())}).",
    )
    parser.add_argument(
        "--fail-fast",
        action="store_true",
        default=None,
        help="Stop at the first file that fails instead of documenting the rest.",
    )
    parser.add_argument(
        "-j",
        "--jobs",
        type=int,
        default=None,
        help="Maximum number of files documented in parallel.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write logs to this file.",
    )
    parser.add_argument(
        "sources",
        nargs="*",
        help="Source files to document.",
    )
    return parser


def _apply_overrides(config: SidedocConfig, args: argparse.Namespace) -> SidedocConfig:
    if args.output is not None:
        config = replace(config, output_dir=args.output)
    if args.highlighter is not None:
        config = replace(config, highlighter=replace(config.highlighter, backend=args.highlighter))
    if args.fail_fast:
        config = replace(config, fail_fast=True)
    if args.jobs is not None:
        config = replace(config, max_workers=args.jobs)
    return config


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for sidedoc."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.jobs is not None and args.jobs < 1:
        parser.error("--jobs must be at least 1")

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    if not args.sources:
        return

    try:
        config = _apply_overrides(load_config(args.config or Path.cwd()), args)
        orchestrator = Orchestrator(config)
    except ConfigError as exc:
        parser.exit(2, f"sidedoc: configuration error: {exc}\n")

    try:
        result = orchestrator.run(args.sources)
    except Exception as exc:
        parser.exit(1, f"sidedoc: {exc}\nRun with --verbose for more details.\n")

    if not result.ok:
        lines = [f"sidedoc: {source}: {result.failures[source]}" for source in result.failed_sources()]
        parser.exit(1, "\n".join(lines) + "\n")


if __name__ == "__main__":
    main(sys.argv[1:])
