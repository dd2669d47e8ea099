"""Command line interface for scriptrun.

Usage:
    scriptrun doctor [--all]        Show installed runtimes per family
    scriptrun which FILE [--all]    Show the runtime chosen for FILE
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, NoReturn, Optional

from . import __version__
from .config import ScriptrunConfig, load_effective_config
from .diagnostics import build_report, format_report
from .errors import ConfigError, RuntimeNotFound, UnknownFileType
from .runtime import RuntimeFamily, RuntimeResolver

logger = logging.getLogger(__name__)


def fail(message: str) -> NoReturn:
    """Report a fatal error and exit."""
    print(f"error: {message}", file=sys.stderr)
    sys.exit(1)


def _add_common_options(parser: argparse.ArgumentParser, suppress: bool = False) -> None:
    """Add options accepted both before and after the subcommand.

    Subcommand copies default to SUPPRESS so they do not overwrite a value
    given before the subcommand.
    """
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=argparse.SUPPRESS if suppress else False,
        help="Log every runtime probe",
    )
    parser.add_argument(
        "--project",
        type=Path,
        default=argparse.SUPPRESS if suppress else None,
        help="Directory holding .scriptrun.toml and .env (default: cwd)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scriptrun",
        description="Pick an installed runtime for JavaScript, TypeScript and WebAssembly files",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    _add_common_options(parser)

    common = argparse.ArgumentParser(add_help=False)
    _add_common_options(common, suppress=True)

    subparsers = parser.add_subparsers(dest="command", required=True)

    doctor = subparsers.add_parser(
        "doctor", parents=[common], help="Show installed and missing runtimes"
    )
    doctor.add_argument("--all", action="store_true", help="Report every runtime family")
    doctor.add_argument("--no-color", action="store_true", help="Disable colored output")

    which = subparsers.add_parser(
        "which", parents=[common], help="Show the runtime chosen for a file"
    )
    which.add_argument("file", help="Script file to pick a runtime for")
    which.add_argument("--all", action="store_true", help="List every installed candidate in order")

    return parser


def setup_logging(config: ScriptrunConfig) -> None:
    """Send log output to stderr; stdout is reserved for results.

    The level is set on the package logger, so it also applies when the
    root logger was configured by someone else.
    """
    logging.basicConfig(
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger("scriptrun").setLevel(logging.DEBUG if config.verbose else logging.WARNING)


def cmd_doctor(args: argparse.Namespace, config: ScriptrunConfig) -> int:
    families = list(RuntimeFamily) if args.all else None
    results = build_report(config, families=families)
    color = config.color and not args.no_color and sys.stdout.isatty()
    for line in format_report(results, color=color):
        print(line)
    return 0


def cmd_which(args: argparse.Namespace, config: ScriptrunConfig) -> int:
    resolver = RuntimeResolver()
    try:
        if args.all:
            result = resolver.detect(args.file)
            if not result.available:
                raise RuntimeNotFound(result)
            for name in result.available:
                print(name)
        else:
            print(resolver.select(args.file, config))
    except (UnknownFileType, RuntimeNotFound) as e:
        fail(str(e))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_effective_config(args.project)
    except ConfigError as e:
        fail(f"invalid configuration: {e}")

    if args.verbose:
        config.verbose = True
    setup_logging(config)
    logger.debug("Loaded configuration from %s", config.project_root)

    if args.command == "doctor":
        return cmd_doctor(args, config)
    return cmd_which(args, config)


if __name__ == "__main__":
    sys.exit(main())
