"""Command-line front door for lazydu.

Parses CLI options, scans the requested directory, and hands the result to
the interactive session (or prints a single frame with ``--render``).
"""

from __future__ import annotations

import argparse
import logging
import sys
import termios
from pathlib import Path

from .config import load_binary_units, load_config, load_theme_name
from .errors import ScanIOError
from .runtime import render_snapshot, run_session
from .runtime.loop import current_terminal_size
from .scanner import scan
from .ui_theme import available_theme_names

USAGE = "Usage: lazydu <directory_path>"

log = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _setup_logging(verbosity: int, log_file: Path | None) -> None:
    # Logging to the terminal would corrupt the alternate screen.
    if log_file is None:
        return
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        filename=str(log_file),
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazydu",
        description="Rank files and folders by size and delete the ones you mark.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to scan.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--binary", action="store_true", help="Show sizes in KiB/MiB/GiB instead of kB/MB/GB.")
    parser.add_argument("--render", action="store_true", help="Print the initial files view and exit.")
    parser.add_argument(
        "--max-cols",
        type=_positive_int,
        default=None,
        help="Column width for --render output (default: terminal width).",
    )
    parser.add_argument(
        "--max-rows",
        type=_positive_int,
        default=None,
        help="Row count for --render output (default: terminal height).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (-v info, -vv debug); requires --log-file.",
    )
    parser.add_argument("--log-file", type=Path, default=None, help="Write log records to this file.")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse CLI arguments, scan the directory, and run the session.

    Returns the process exit code: 0 on a normal quit, 1 on a missing path,
    a scan failure, or a terminal runtime failure.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.path is None:
        print(USAGE)
        return 1
    if args.verbose and args.log_file is None:
        parser.error("-v/--verbose requires --log-file")

    _setup_logging(args.verbose, args.log_file)
    config = load_config()
    theme_name = args.theme if args.theme is not None else load_theme_name(config)
    binary_units = args.binary or load_binary_units(config)

    try:
        result = scan(Path(args.path))
    except ScanIOError as exc:
        print(f"Error initializing: {exc}")
        return 1

    if args.render:
        term_cols, term_rows = current_terminal_size()
        sys.stdout.write(
            render_snapshot(
                result,
                width=args.max_cols or term_cols,
                height=args.max_rows or term_rows,
                theme_name=theme_name,
                no_color=args.no_color,
                binary_units=binary_units,
            )
        )
        return 0

    try:
        run_session(
            result,
            theme_name=theme_name,
            no_color=args.no_color,
            binary_units=binary_units,
        )
    except (OSError, termios.error) as exc:
        log.error("terminal session failed: %s", exc)
        print(f"Error running program: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
