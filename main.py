"""Main CLI entry-point."""
from __future__ import annotations

import argparse
import asyncio
import sys

from core.logging.config import bootstrap_logging, shutdown_logging
from config import settings
from presentation.cli import COMMANDS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="faceit-export",
        description="Export FACEIT league standings, matches and player statistics to CSV",
    )
    sub = parser.add_subparsers(dest="command", required=True)
    for command in COMMANDS:
        cmd_parser = sub.add_parser(command.name, help=command.help)
        command.add_arguments(cmd_parser)
        cmd_parser.set_defaults(command_cls=command)
    return parser


def main(argv: list[str]) -> int:
    args = build_parser().parse_args(argv)
    bootstrap_logging(
        service="faceit-export",
        level=settings.LOG_LEVEL,
        log_dir=settings.LOG_DIR,
        log_file_name=f"{args.command}.jsonl",
    )
    try:
        return asyncio.run(args.command_cls(args).run())
    finally:
        shutdown_logging()


def cli() -> None:
    raise SystemExit(main(sys.argv[1:]))


if __name__ == "__main__":
    cli()
