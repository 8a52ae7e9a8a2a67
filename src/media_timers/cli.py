"""
Command-line interface for the timers editor.

Usage:
    media-timers gui [--base-dir DIR] [--example]
    media-timers example
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import time
from pathlib import Path
from typing import List, Optional, Sequence

from .core import Timer, format_time
from .settings import base_dir as default_base_dir

Logger = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(message)s")


def example_timers() -> List[Timer]:
    return [
        Timer("Morning news", enabled=True, from_time=time(7, 0, 0), to_time=time(7, 30, 0)),
        Timer("Evening playlist", from_time=time(19, 0, 0), to_time=time(21, 0, 0)),
        Timer("Alarm", enabled=True, from_time=time(6, 45, 0)),
    ]


def summarize_timers(timers: Sequence[Timer]) -> str:
    lines = [f"Timers ({len(timers)}):"]
    for idx, timer in enumerate(timers):
        span = f"{format_time(timer.from_time) or '--:--:--'} - {format_time(timer.to_time) or '--:--:--'}"
        resource = timer.resource_path if timer.resource_path is not None else "<none>"
        lines.append(
            f"  {idx+1}. [{'x' if timer.enabled else ' '}] {timer.name} | {span} | {resource}"
        )
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="media-timers",
        description="Edit scheduled media playback timers.",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # gui command
    gui_parser = subparsers.add_parser(
        "gui",
        help="Open the timers editor dialog and print the accepted timers.",
    )
    gui_parser.add_argument(
        "--base-dir",
        type=Path,
        default=None,
        help="Folder the resource file dialog starts from (defaults to MEDIA_TIMERS_BASE_DIR or home).",
    )
    gui_parser.add_argument(
        "--example",
        action="store_true",
        help="Start with a few example timers instead of an empty list.",
    )

    # example command
    subparsers.add_parser(
        "example",
        help="Print the example timers without opening the GUI.",
    )

    return parser


def gui_command(args: argparse.Namespace) -> int:
    try:
        base_dir = args.base_dir if args.base_dir is not None else default_base_dir()
    except Exception as exc:  # noqa: BLE001
        Logger.error("Invalid settings: %s", exc)
        return 1

    if not Path(base_dir).is_dir():
        Logger.error("Base directory not found: %s", base_dir)
        return 2

    timers = example_timers() if args.example else []
    try:
        from .gui import run as run_gui  # Local import to avoid Qt initialization unless needed

        result = run_gui(Path(base_dir), timers)
    except Exception as exc:  # pylint: disable=broad-except
        Logger.error("Timer editor failed: %s", exc)
        if Logger.isEnabledFor(logging.DEBUG):
            Logger.exception("Stack trace")
        return 1

    if result is None:
        Logger.info("Editing cancelled; no changes.")
        return 0
    print(summarize_timers(result))
    return 0


def example_command(args: argparse.Namespace) -> int:
    print(summarize_timers(sorted(example_timers())))
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.command == "gui":
        return gui_command(args)
    if args.command == "example":
        return example_command(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
