"""Structured logging: bootstrap, per-run context and the StructuredLogger wrapper."""
from .config import bootstrap_logging, shutdown_logging
from .context import bind, context, get_context
from .levels import LogLevel
from .logger import StructuredLogger, get_logger

__all__ = [
    'bootstrap_logging',
    'shutdown_logging',
    'bind',
    'context',
    'get_context',
    'LogLevel',
    'StructuredLogger',
    'get_logger',
]
