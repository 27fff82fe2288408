from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Dict, List, Optional

import httpx

from config import ExportOptions, load_config_file, settings
from core.logging.logger import get_logger
from domain.exceptions import FaceitExportError
from infrastructure import FaceitAPIClient
from infrastructure.api import ProbeResult
from application.services.name_resolver import NameResolverService
from .options import add_export_arguments, cli_values

REPORTED_HEADERS = (
    "x-faceit-gateway",
    "ratelimit-limit",
    "ratelimit-remaining",
    "ratelimit-reset",
    "cache-control",
)
BODY_SNIPPET = 600


class DiagnoseCommand:
    """Probes the leaderboard and standings endpoints and prints the raw responses."""

    name = "diagnose"
    help = "Probe standings endpoints for a championship"

    def __init__(self, args: argparse.Namespace) -> None:
        self._args = args
        self._log = get_logger(__name__, service="diagnose-cli")

    @staticmethod
    def add_arguments(parser: argparse.ArgumentParser) -> None:
        add_export_arguments(parser)

    @staticmethod
    def _print(title: str, out: ProbeResult) -> None:
        head = {
            "status": out.status,
            "url": out.url,
            "headers": {h: out.headers.get(h) for h in REPORTED_HEADERS},
        }
        print(f"\n=== {title} ===")
        print(json.dumps(head, indent=2))
        print(out.body[:BODY_SNIPPET])

    async def _probe(self, api: FaceitAPIClient, title: str, path: str, params: Optional[Dict[str, Any]] = None) -> Optional[ProbeResult]:
        try:
            out = await api.probe(path, params)
        except httpx.HTTPError as e:
            self._log.warning(lambda: f"probe {path} failed: {e}")
            print(f"\n=== {title} ===\nrequest failed: {e}")
            return None
        self._print(title, out)
        return out

    async def _championship_id(self, api: FaceitAPIClient, options: ExportOptions) -> Optional[str]:
        if options.champ_id:
            return options.champ_id
        if options.org_id and options.champ_name:
            try:
                champ_id = await NameResolverService(api).championship_id_by_name(
                    options.org_id, options.champ_name, options.game_id
                )
            except FaceitExportError as e:
                self._log.warning(lambda: f"championship unresolved: {e}")
                print("Failed to resolve championship id from name. Provide champ-id in config or env.", file=sys.stderr)
                return None
            print(f'Resolved championship id: {champ_id} (from name "{options.champ_name}")')
            return champ_id
        return None

    async def run(self) -> int:
        try:
            settings.validate()
            file_cfg = load_config_file(self._args.config or settings.CONFIG_FILE)
            options = ExportOptions.resolve(cli=cli_values(self._args), file_cfg=file_cfg)
        except FaceitExportError as e:
            print(e.user_message, file=sys.stderr)
            return 1

        async with FaceitAPIClient(settings.FACEIT_API_KEY) as api:
            champ_id = await self._championship_id(api, options)
            if not champ_id:
                print(
                    "Missing championship id. Set champ-id in config or FACEIT_CHAMPIONSHIP_ID "
                    "(or ensure org-id + champ-name present).",
                    file=sys.stderr,
                )
                return 1

            listing = await self._probe(
                api,
                "leaderboards/championships/{championship_id}",
                f"/leaderboards/championships/{champ_id}",
                {"limit": 100, "offset": 0},
            )
            first_id, first_group = self._first_leaderboard(listing)

            groups: List[int] = []
            for g in (options.lb_group, first_group, 0, 1):
                if isinstance(g, int) and g not in groups:
                    groups.append(g)
            for g in groups:
                path = f"/leaderboards/championships/{champ_id}/groups/{g}"
                await self._probe(api, f"groups/{g} limit+offset", path, {"limit": 20, "offset": 0})
                await self._probe(api, f"groups/{g} no params", path)

            for lb_id in dict.fromkeys(i for i in (options.lb_id, first_id) if i):
                await self._probe(api, f"leaderboards/{lb_id}/standings limit+offset",
                                  f"/leaderboards/{lb_id}/standings", {"limit": 20, "offset": 0})
                await self._probe(api, f"leaderboards/{lb_id}/standings no params", f"/leaderboards/{lb_id}/standings")
                await self._probe(api, f"leaderboards/{lb_id} limit+offset",
                                  f"/leaderboards/{lb_id}", {"limit": 20, "offset": 0})
                await self._probe(api, f"leaderboards/{lb_id} no params", f"/leaderboards/{lb_id}")

        print("\nDiagnosis complete. Any 2xx above is a working standings route.")
        return 0

    @staticmethod
    def _first_leaderboard(listing: Optional[ProbeResult]):
        if listing is None:
            return None, None
        try:
            items = json.loads(listing.body).get("items") or []
        except (ValueError, AttributeError):
            return None, None
        first = items[0] if items and isinstance(items[0], dict) else {}
        group = first.get("group")
        return first.get("leaderboard_id"), group if isinstance(group, int) else None
