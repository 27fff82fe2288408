from __future__ import annotations

import logging
import os
import sys
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path
from queue import Queue
from typing import Optional

from .formatter import ConsoleFormatter, JSONFormatter
from .levels import register_levels, to_level

_listener: QueueListener | None = None


class _ServiceFilter(logging.Filter):
    """Stamps records that carry no service with the bootstrap service name."""

    def __init__(self, service: str) -> None:
        super().__init__()
        self.service = service

    def filter(self, record: logging.LogRecord) -> bool:
        if getattr(record, "service", None) is None:
            record.service = self.service
        return True


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def bootstrap_logging(
    *,
    service: str = "faceit-export",
    level: str | int | None = None,
    log_dir: Optional[Path] = None,
    log_file_name: str = "export.log",
    max_bytes: int = 5_000_000,
    backup_count: int = 5,
) -> None:
    """
    Configure the root logger once per process.

    Console output goes to stderr (FACEIT_LOG_CONSOLE, on by default, with
    its own FACEIT_LOG_CONSOLE_LEVEL). With ``log_dir`` records are also
    written as JSON lines to a rotating file through a queue listener.
    """
    global _listener
    shutdown_logging()
    register_levels()

    root = logging.getLogger()
    root.handlers.clear()
    lvl = to_level(level or os.getenv("LOG_LEVEL", "INFO"))
    root.setLevel(lvl)
    service_filter = _ServiceFilter(service)

    if _env_flag("FACEIT_LOG_CONSOLE", True):
        console = logging.StreamHandler(sys.stderr)
        console.setLevel(to_level(os.getenv("FACEIT_LOG_CONSOLE_LEVEL"), default=lvl))
        console.setFormatter(ConsoleFormatter(use_color=sys.stderr.isatty()))
        console.addFilter(service_filter)
        root.addHandler(console)

    if log_dir:
        try:
            log_dir.mkdir(parents=True, exist_ok=True)
            json_handler = RotatingFileHandler(
                str(log_dir / log_file_name),
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding="utf-8",
            )
        except OSError as e:
            root.warning(f"File logging disabled, cannot open {log_dir / log_file_name}: {e}")
            return
        json_handler.setLevel(lvl)
        json_handler.setFormatter(JSONFormatter())
        q: Queue[logging.LogRecord] = Queue(-1)
        qh = QueueHandler(q)
        qh.addFilter(service_filter)
        root.addHandler(qh)
        _listener = QueueListener(q, json_handler, respect_handler_level=True)
        _listener.start()


def shutdown_logging() -> None:
    """Flush and stop the file listener, if any."""
    global _listener
    if _listener:
        _listener.stop()
        _listener = None
