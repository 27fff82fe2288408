from __future__ import annotations

import argparse
import re
import sys
from typing import Any, Dict, List, Optional

from config import load_config_file, save_config_file, settings
from core.logging.logger import get_logger
from domain.entities import LeaderboardDescriptor
from domain.exceptions import FaceitExportError
from infrastructure import ChampionshipRepository, FaceitAPIClient
from application.services.name_resolver import NameResolverService
from .options import add_config_argument


def choose_leaderboard(cfg: Dict[str, Any], leaderboards: List[LeaderboardDescriptor]) -> Optional[LeaderboardDescriptor]:
    """
    Leaderboard matching the config: ``lb-name`` (exact, then substring),
    ``lb-group``, ``lb-pattern``, else the only one listed.
    """
    chosen: Optional[LeaderboardDescriptor] = None
    name = cfg.get("lb-name")
    if name:
        chosen = next((lb for lb in leaderboards if lb.name.strip() == name), None) or next(
            (lb for lb in leaderboards if name in lb.name), None
        )
    group = cfg.get("lb-group")
    if chosen is None and group not in (None, ""):
        try:
            index = int(group)
        except (TypeError, ValueError):
            index = None
        if index is not None:
            chosen = next((lb for lb in leaderboards if lb.group_index == index), None)
    pattern = cfg.get("lb-pattern")
    if chosen is None and pattern:
        try:
            regex = re.compile(str(pattern), re.IGNORECASE)
        except re.error:
            regex = None
        if regex is not None:
            chosen = next((lb for lb in leaderboards if regex.search(lb.name)), None)
    if chosen is None and len(leaderboards) == 1:
        chosen = leaderboards[0]
    return chosen


class InitCommand:
    """Fills org-id, champ-id and lb-id in the config file from the names it holds."""

    name = "init"
    help = "Resolve names in the config file to ids and save them"

    def __init__(self, args: argparse.Namespace) -> None:
        self._args = args
        self._log = get_logger(__name__, service="init-cli")

    @staticmethod
    def add_arguments(parser: argparse.ArgumentParser) -> None:
        add_config_argument(parser)

    async def _fill(self, api: FaceitAPIClient, cfg: Dict[str, Any]) -> bool:
        resolver = NameResolverService(api)
        changed = False
        game_id = cfg.get("game-id") or "cs2"

        if not cfg.get("org-id") and cfg.get("org-name"):
            try:
                cfg["org-id"] = (await resolver.organizer_by_name(cfg["org-name"])).id
                changed = True
                print(f"Resolved org-id: {cfg['org-id']} ({cfg['org-name']})")
            except FaceitExportError as e:
                self._log.warning(lambda: f"org-id unresolved: {e}")
                print("Could not resolve org-id from org-name. Provide org-id explicitly.", file=sys.stderr)

        if not cfg.get("champ-id") and cfg.get("champ-name") and cfg.get("org-id"):
            try:
                cfg["champ-id"] = await resolver.championship_id_by_name(cfg["org-id"], cfg["champ-name"], game_id)
                changed = True
                print(f"Resolved champ-id: {cfg['champ-id']} ({cfg['champ-name']})")
            except FaceitExportError as e:
                self._log.warning(lambda: f"champ-id unresolved: {e}")
                print("Could not resolve champ-id from champ-name. Provide champ-id explicitly.", file=sys.stderr)

        if not cfg.get("lb-id") and cfg.get("champ-id"):
            try:
                leaderboards = await ChampionshipRepository(api).list_leaderboards(cfg["champ-id"])
            except FaceitExportError as e:
                self._log.warning(lambda: f"leaderboard listing failed: {e}")
                print("Failed to list championship leaderboards. Provide lb-id explicitly.", file=sys.stderr)
                return changed
            chosen = choose_leaderboard(cfg, leaderboards)
            if chosen is not None and chosen.leaderboard_id:
                cfg["lb-id"] = chosen.leaderboard_id
                if cfg.get("lb-group") in (None, "") and chosen.group_index is not None:
                    cfg["lb-group"] = chosen.group_index
                changed = True
                print(f"Resolved lb-id: {cfg['lb-id']} ({chosen.label})")
            else:
                print("Available leaderboards:")
                for lb in leaderboards:
                    print(f"  id={lb.leaderboard_id} group={lb.group_index} name={lb.name}")
                print(
                    "Could not determine lb-id automatically. Provide lb-id or lb-name/lb-group/lb-pattern.",
                    file=sys.stderr,
                )
        return changed

    async def run(self) -> int:
        path = self._args.config or settings.CONFIG_FILE
        try:
            settings.validate()
        except FaceitExportError as e:
            print(e.user_message, file=sys.stderr)
            return 1
        cfg = load_config_file(path)
        async with FaceitAPIClient(settings.FACEIT_API_KEY) as api:
            changed = await self._fill(api, cfg)
        if changed:
            save_config_file(path, cfg)
            self._log.success(lambda: f"config updated {path}")
            print(f"Saved updates → {path}")
        else:
            print("No changes needed. Config looks complete.")
        return 0
