"""Per-run export options merged from CLI flags, a JSON config file and the environment."""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

from domain.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_MAP_POOL = "anubis,ancient,mirage,inferno,nuke,dust2,vertigo"

# option key (as used in the config file and on the command line) -> env var
ENV_KEYS: Dict[str, str] = {
    "org-id":         "FACEIT_ORGANIZER_ID",
    "org-name":       "FACEIT_ORG_NAME",
    "champ-id":       "FACEIT_CHAMPIONSHIP_ID",
    "champ-name":     "FACEIT_CHAMP_NAME",
    "lb-id":          "FACEIT_LB_ID",
    "lb-name":        "FACEIT_LB_NAME",
    "lb-group":       "FACEIT_LB_GROUP",
    "lb-pattern":     "FACEIT_LB_PATTERN",
    "game-id":        "FACEIT_GAME_ID",
    "out-dir":        "FACEIT_OUT_DIR",
    "skip-standings": "FACEIT_SKIP_STANDINGS",
    "my-team-id":     "FACEIT_MY_TEAM_ID",
    "debug":          "FACEIT_DEBUG",
    "clean-out":      "FACEIT_CLEAN_OUT",
    "map-pool":       "FACEIT_MAP_POOL",
}

_TRUE = {"1", "true", "yes", "on"}


def load_config_file(path: Optional[str | Path]) -> Dict[str, Any]:
    """Read the JSON config file; a missing or unreadable file is an empty config."""
    candidate = Path(path) if path else Path("faceit.config.json")
    try:
        raw = candidate.read_text(encoding="utf-8")
    except OSError:
        return {}
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        logger.warning(f"Ignoring malformed config file {candidate}: {exc}")
        return {}
    return data if isinstance(data, dict) else {}


def save_config_file(path: str | Path, data: Mapping[str, Any]) -> None:
    Path(path).write_text(json.dumps(dict(data), indent=2, ensure_ascii=False) + "\n", encoding="utf-8")


def _blank(value: Any) -> bool:
    return value is None or value == "" or value is False


def _to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in _TRUE


def _to_group(value: Any) -> Optional[int]:
    if value is None or value == "" or isinstance(value, bool):
        return None
    try:
        return int(str(value).strip())
    except ValueError:
        raise ConfigurationError(f"lb-group must be an integer, got {value!r}")


@dataclass(frozen=True)
class ExportOptions:
    """Identifiers and switches for one export run."""

    org_id:         Optional[str] = None
    org_name:       Optional[str] = None
    champ_id:       Optional[str] = None
    champ_name:     Optional[str] = None
    lb_id:          Optional[str] = None
    lb_name:        Optional[str] = None
    lb_group:       Optional[int] = None
    lb_pattern:     Optional[str] = None
    game_id:        str = "cs2"
    out_dir:        str = "out"
    skip_standings: bool = False
    my_team_id:     Optional[str] = None
    debug:          bool = False
    clean_out:      bool = False
    map_pool:       Tuple[str, ...] = field(default_factory=lambda: tuple(DEFAULT_MAP_POOL.split(",")))

    @classmethod
    def resolve(
        cls,
        cli: Mapping[str, Any] | None = None,
        file_cfg: Mapping[str, Any] | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> "ExportOptions":
        """Merge sources with precedence CLI > config file > environment > default."""
        cli = cli or {}
        file_cfg = file_cfg or {}
        environ = os.environ if environ is None else environ

        def pick(key: str) -> Any:
            for source in (cli, file_cfg):
                value = source.get(key)
                if not _blank(value):
                    return value
            env_value = environ.get(ENV_KEYS[key])
            return env_value if env_value not in (None, "") else None

        def text(key: str) -> Optional[str]:
            value = pick(key)
            return str(value).strip() if value is not None else None

        map_pool_raw = pick("map-pool") or DEFAULT_MAP_POOL
        if isinstance(map_pool_raw, (list, tuple)):
            map_pool = tuple(str(m).strip() for m in map_pool_raw if str(m).strip())
        else:
            map_pool = tuple(m.strip() for m in str(map_pool_raw).split(",") if m.strip())

        return cls(
            org_id=text("org-id"),
            org_name=text("org-name"),
            champ_id=text("champ-id"),
            champ_name=text("champ-name"),
            lb_id=text("lb-id"),
            lb_name=text("lb-name"),
            lb_group=_to_group(pick("lb-group")),
            lb_pattern=text("lb-pattern"),
            game_id=text("game-id") or "cs2",
            out_dir=text("out-dir") or "out",
            skip_standings=_to_bool(pick("skip-standings")),
            my_team_id=text("my-team-id"),
            debug=_to_bool(pick("debug")),
            clean_out=_to_bool(pick("clean-out")),
            map_pool=map_pool,
        )

    def validate(self) -> None:
        if not self.org_id and not self.org_name:
            raise ConfigurationError(
                "Provide --org-id or --org-name (or FACEIT_ORGANIZER_ID / FACEIT_ORG_NAME)"
            )
        if not self.champ_id and not self.champ_name:
            raise ConfigurationError(
                "Provide --champ-id or --champ-name (or FACEIT_CHAMPIONSHIP_ID / FACEIT_CHAMP_NAME)"
            )
