#!/usr/bin/env python3
"""
Main CLI entry point with argument parser and command dispatch.
"""

from __future__ import annotations

import argparse

from dreamstats.__version__ import __version__
from dreamstats.interfaces.cli.commands.analyze import cmd_analyze


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    p = argparse.ArgumentParser(
        prog="dreamstats",
        description="dreamstats - personalized analytics for dream journals",
        epilog="Examples:\n"
        "  dreamstats analyze export.json                          # Tables for a combined export\n"
        "  dreamstats analyze dreams.json -i interpretations.json  # Separate interpretation file\n"
        "  dreamstats analyze export.json --json --timezone UTC    # JSON on stdout\n"
        "  dreamstats analyze export.json -o analytics.json        # JSON to a file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    sub = p.add_subparsers(
        dest="cmd",
        title="commands",
        description="Available commands (use 'dreamstats <command> --help' for command-specific help)",
    )

    # analyze: Compute analytics from a JSON export
    s = sub.add_parser("analyze", help="Compute dream analytics from a JSON export")
    s.add_argument("dreams", help="JSON file with a list of dreams or {dreams, interpretations}")
    s.add_argument("-i", "--interpretations", help="JSON file with interpretation rows")
    s.add_argument("-u", "--user-id", help="only use rows owned by this user (default: all rows)")
    s.add_argument("--timezone", help="IANA timezone for hour/day/date bucketing (default: host local)")
    s.add_argument(
        "--lucid-order",
        choices=["input", "calendar"],
        help="order of month groups in the lucid trend (default: input)",
    )
    s.add_argument("--top", type=int, help="length of symbol/tone/topic/location rankings (default: 10)")
    s.add_argument("--json", action="store_true", help="print analytics as JSON instead of tables")
    s.add_argument("-o", "--output", help="write analytics JSON to this file")
    s.add_argument("--log-level", help="logging level (default: INFO)")
    s.set_defaults(func=cmd_analyze)

    return p


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # If no command provided, show help
    if args.cmd is None:
        parser.print_help()
        return 0

    result: int = args.func(args)
    return result


if __name__ == "__main__":
    raise SystemExit(main())
