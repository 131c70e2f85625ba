"""Main CLI entry-point."""
from __future__ import annotations

import argparse
import sys
from typing import Optional

from core.logging.config import bootstrap_logging, shutdown_logging
from config import settings
from domain.enums import Region
from presentation.cli import COMMANDS

HELP_TEXT = """Available commands:
  lookup <username>      => returns account statistics
  game <username>        => returns data about current game
  history <username>     => returns match history"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rift-lookup",
        description="League of Legends player lookups.",
        epilog=HELP_TEXT,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--region",
        default=None,
        help=f"platform to query ({', '.join(r.friendly for r in Region.all_regions())})",
    )
    sub = parser.add_subparsers(dest="command", required=True)
    for name, summary in (
        ("lookup", "account statistics"),
        ("game", "data about the current game"),
        ("history", "recent match history"),
    ):
        cmd = sub.add_parser(name, help=summary)
        cmd.add_argument("username", nargs="+", help="summoner name (may contain spaces)")
    sub.add_parser("help", help="list the available commands")
    return parser


def _region(value: Optional[str]) -> Region:
    return Region.from_string(value) if value else settings.region()


def main(argv: list[str]) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "help":
        print(HELP_TEXT)
        return 0

    try:
        settings.validate()
        region = _region(args.region)
    except ValueError as exc:
        print(exc)
        return 2

    bootstrap_logging(level=settings.LOG_LEVEL, log_dir=settings.LOG_DIR)
    try:
        command = COMMANDS[args.command](settings.client_config(region))
        return command.run(" ".join(args.username))
    finally:
        shutdown_logging()


def _cli() -> int:
    return main(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(_cli())
