"""Configuration: process settings and per-run export options."""
from .settings import Settings, settings
from .export_options import ENV_KEYS, ExportOptions, load_config_file, save_config_file

__all__ = [
    'Settings',
    'settings',
    'ENV_KEYS',
    'ExportOptions',
    'load_config_file',
    'save_config_file',
]
