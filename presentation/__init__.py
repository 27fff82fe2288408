"""Presentation layer - User interfaces."""
from .cli import ExportCommand, InitCommand, DiagnoseCommand

__all__ = [
    "ExportCommand",
    "InitCommand",
    "DiagnoseCommand",
]
