"""Command-line flags shared by the commands, and their merge into ExportOptions."""
from __future__ import annotations

import argparse
from typing import Any, Dict

from config import ENV_KEYS

_FLAGS = (
    ("org-id", "Organizer id"),
    ("org-name", "Organizer name (resolved to an id)"),
    ("champ-id", "Championship id"),
    ("champ-name", "Championship name (resolved to an id)"),
    ("lb-id", "Leaderboard id"),
    ("lb-name", "Leaderboard name"),
    ("lb-group", "Leaderboard group index"),
    ("lb-pattern", "Case-insensitive regex over leaderboard names"),
    ("game-id", "Game id used when matching championships (default cs2)"),
    ("out-dir", "Output directory for CSV files (default out)"),
    ("my-team-id", "Team id for the my_team_* tables"),
)
_SWITCHES = (
    ("skip-standings", "Do not fetch standings; infer division teams from matches"),
    ("debug", "Log the championship's leaderboard list"),
    ("clean-out", "Delete the output directory before writing"),
)


def add_config_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", default=None, help="JSON config file (default faceit.config.json)")


def add_export_arguments(parser: argparse.ArgumentParser) -> None:
    add_config_argument(parser)
    for flag, help_text in _FLAGS:
        parser.add_argument(f"--{flag}", default=None, help=help_text)
    for flag, help_text in _SWITCHES:
        # absent switches stay None, not False
        parser.add_argument(f"--{flag}", action="store_true", default=None, help=help_text)


def cli_values(args: argparse.Namespace) -> Dict[str, Any]:
    """Namespace → mapping keyed like the config file (``org-id`` ...)."""
    values: Dict[str, Any] = {}
    for key in ENV_KEYS:
        value = getattr(args, key.replace("-", "_"), None)
        if value is not None:
            values[key] = value
    return values
