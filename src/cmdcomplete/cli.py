# cmdcomplete.cli - Command line interface
"""
CLI entry point for cmdcomplete.
"""
import argparse
import sys
from pathlib import Path
from typing import Optional

from cmdcomplete.version import __version__
from cmdcomplete.config import Config, load_config
from cmdcomplete.completion import CompletionContext, auto_complete
from cmdcomplete.logging_setup import init_logger
from cmdcomplete.repl import Repl, ShellCommandHandler


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog="cmdcomplete",
        description="Grammar-driven command completion demo shell",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"cmdcomplete {__version__}",
    )

    parser.add_argument(
        "-c", "--complete",
        metavar="LINE",
        help="Print the completions for LINE and exit",
    )

    parser.add_argument(
        "--cursor",
        type=int,
        help="Cursor offset for --complete (default: end of line)",
    )

    parser.add_argument(
        "--describe",
        action="store_true",
        help="Print the shell grammar and exit",
    )

    style = parser.add_mutually_exclusive_group()
    style.add_argument(
        "--unix",
        dest="unix_style",
        action="store_const",
        const=True,
        help="Use Unix quoting and listing",
    )
    style.add_argument(
        "--windows",
        dest="unix_style",
        action="store_const",
        const=False,
        help="Use Windows quoting and cycling",
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Path to config file",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug output",
    )

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Load config
    config = load_config(args.config)

    # Merge CLI args with config
    if args.unix_style is not None:
        config.unix_style = args.unix_style
    config.debug = config.debug or args.debug
    init_logger(config.debug)

    if args.describe:
        print(ShellCommandHandler(unix_style=config.unix_style).usage())
        return 0

    if args.complete is not None:
        return run_complete(args.complete, args.cursor, config)

    Repl(config).run()
    return 0


def run_complete(line: str, cursor: Optional[int], config: Config) -> int:
    """Print completions for a single line."""
    handler = ShellCommandHandler(unix_style=config.unix_style)
    context = CompletionContext(remote=handler.remote.context())
    if cursor is None:
        cursor = len(line)

    try:
        state = auto_complete(line, cursor, handler.grammar, config.unix_style, context)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for candidate in state.completions:
        print(candidate.text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
