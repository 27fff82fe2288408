"""Presentation CLI exports."""
from .export_command import ExportCommand
from .init_command import InitCommand
from .diagnose_command import DiagnoseCommand

COMMANDS = (ExportCommand, InitCommand, DiagnoseCommand)

__all__ = [
    "ExportCommand",
    "InitCommand",
    "DiagnoseCommand",
    "COMMANDS",
]
