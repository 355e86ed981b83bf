"""Entry point for running crashlyfix.

This module provides the command line interface. It handles:
- Argument parsing
- Configuration loading
- Logging setup
- Running the symbolication pipeline and writing its output
"""

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

import structlog
from pydantic import ValidationError

from crashlyfix._version import __version__
from crashlyfix.utils.logging import LogEventNames, bind_context, clear_context

log = structlog.get_logger()


def setup_logging(debug: bool = False, log_format: str = "console", level: str = "WARNING") -> None:
    """Configure structured logging.

    Args:
        debug: Enable debug logging if True, overriding level
        log_format: Output format ("json" or "console")
        level: Log level when not in debug mode
    """
    from crashlyfix.utils.logging import LogLevel, configure_logging

    configure_logging(
        level=LogLevel.DEBUG if debug else level,
        log_format=log_format,
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="crashlyfix",
        usage="%(prog)s <sourcemap.js.map> <stack_trace.txt> [options]",
        description=(
            "Crashlyfix is a simple tool for decrypting stack traces "
            "coming from the minified JS code."
        ),
    )

    parser.add_argument("source_map", nargs="?", type=Path, help="Source map of the bundle")
    parser.add_argument("stack_trace", nargs="?", type=Path, help="Crash report with the trace")

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "-l",
        "--long",
        action="store_true",
        help="Show full source paths instead of shortening the common prefix",
    )

    parser.add_argument(
        "-t",
        "--trace",
        type=Path,
        default=None,
        help="Accepted for compatibility; currently unused",
    )

    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Write the result to this file instead of stdout",
    )

    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="Path to an optional YAML configuration file",
    )

    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--log-format",
        choices=["json", "console"],
        default=None,
        help="Log output format (default: console)",
    )

    return parser


def run(args: argparse.Namespace) -> int:
    """Symbolicate the trace named by the arguments.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    from crashlyfix.config.loader import load_config
    from crashlyfix.core.pipeline import symbolicate
    from crashlyfix.core.resolver import PositionResolver
    from crashlyfix.utils.errors import CrashlyfixError

    try:
        config = load_config(args.config)
    except FileNotFoundError as e:
        log.error("configuration_file_not_found", path=str(args.config), error=str(e))
        return 1
    except (ValueError, ValidationError) as e:
        log.error("configuration_invalid", error=str(e))
        return 1

    setup_logging(
        debug=args.debug,
        log_format=args.log_format or config.logging.format,
        level=config.logging.level,
    )

    bind_context(source_map=str(args.source_map), stack_trace=str(args.stack_trace))
    log.debug(LogEventNames.RUN_STARTING, version=__version__)
    if args.trace is not None:
        log.debug(LogEventNames.OPTION_IGNORED, option="--trace", value=str(args.trace))

    try:
        resolver = PositionResolver.from_file(args.source_map)
        trace_text = args.stack_trace.read_text(encoding="utf-8", errors="replace")
        output = symbolicate(
            trace_text,
            resolver,
            shorten=config.format.shorten and not args.long,
            marker=config.trace.marker,
            separator=config.trace.block_separator,
            excluded_marker=config.format.excluded_prefix_marker,
        )
    except (OSError, CrashlyfixError) as e:
        log.error(LogEventNames.RUN_FAILED, error_type=type(e).__name__, error=str(e))
        return 1

    if args.output is not None:
        try:
            args.output.write_text(output + "\n", encoding="utf-8")
        except OSError as e:
            log.error(LogEventNames.RUN_FAILED, error_type=type(e).__name__, error=str(e))
            return 1
        log.debug(LogEventNames.OUTPUT_WRITTEN, path=str(args.output))
    else:
        sys.stdout.write(output)
        sys.stdout.write("\n")

    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.source_map is None:
        parser.print_help()
        return 0

    if args.stack_trace is None:
        parser.error("the following arguments are required: stack_trace")

    setup_logging(debug=args.debug, log_format=args.log_format or "console")

    try:
        return run(args)
    finally:
        clear_context()


if __name__ == "__main__":
    sys.exit(main())
