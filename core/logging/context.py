"""
Per-run log context.

Fields bound here (championship id, match id, command) are attached to
every record formatted while they are in scope. ``None`` values are
never bound.
"""
from __future__ import annotations

import contextvars
from contextlib import contextmanager
from typing import Any, Dict, Iterator

_fields: contextvars.ContextVar[Dict[str, Any]] = contextvars.ContextVar("export_log_context", default={})


def _merged(values: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(_fields.get())
    merged.update((k, v) for k, v in values.items() if v is not None)
    return merged


def get_context() -> Dict[str, Any]:
    return dict(_fields.get())


def bind(**values: Any) -> None:
    """Add fields for the rest of the current context."""
    _fields.set(_merged(values))


@contextmanager
def context(**values: Any) -> Iterator[Dict[str, Any]]:
    """``with context(championship_id=...):`` scopes fields to a block."""
    token = _fields.set(_merged(values))
    try:
        yield get_context()
    finally:
        _fields.reset(token)
