from __future__ import annotations

import argparse
import asyncio

import os
import sys
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))
from core.logging.config import bootstrap_logging, shutdown_logging
from config import settings
from presentation.cli import InitCommand


def main(argv: list[str]) -> int:
    parser = argparse.ArgumentParser(description=InitCommand.help)
    InitCommand.add_arguments(parser)
    args = parser.parse_args(argv)
    bootstrap_logging(service="init", level=settings.LOG_LEVEL, log_dir=settings.LOG_DIR, log_file_name="init.jsonl")
    try:
        return asyncio.run(InitCommand(args).run())
    finally:
        shutdown_logging()


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
