"""Use case turning configured names and ids into a fully resolved export target."""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import List, Optional

from config import ExportOptions
from core.logging.logger import get_logger
from domain.entities import Championship, LeaderboardDescriptor
from infrastructure import ChampionshipRepository, FaceitAPIClient
from application.services.leaderboard_selector import LeaderboardSelector
from application.services.name_resolver import NameResolverService


@dataclass(frozen=True)
class ResolvedTarget:
    organizer_id: str
    championship: Championship
    leaderboard: LeaderboardDescriptor
    leaderboards: List[LeaderboardDescriptor] = field(default_factory=list)

    @property
    def championship_id(self) -> str:
        return self.championship.id


class ResolveTargetUseCase:
    """
    Organizer → championship → leaderboard.

    Any step that cannot be resolved raises and aborts the run, since
    every later request depends on these ids.
    """

    def __init__(
        self,
        api_client: FaceitAPIClient,
        resolver: Optional[NameResolverService] = None,
        championships: Optional[ChampionshipRepository] = None,
    ):
        self.api_client = api_client
        self.resolver = resolver or NameResolverService(api_client)
        self.championships = championships or ChampionshipRepository(api_client)
        self.selector = LeaderboardSelector(self.resolver)
        self._log = get_logger(__name__, service="resolve")

    async def execute(self, options: ExportOptions) -> ResolvedTarget:
        if options.org_id:
            organizer_id = options.org_id
        else:
            organizer_id = (await self.resolver.organizer_by_name(options.org_name)).id

        if options.champ_id:
            championship_id = options.champ_id
        else:
            championship_id = await self.resolver.championship_id_by_name(
                organizer_id, options.champ_name, options.game_id
            )

        championship = await self.championships.get_championship(championship_id)
        self._log.info(lambda: f"championship {championship.name or '?'} ({championship_id})")

        leaderboards = await self.championships.list_leaderboards(championship_id)
        if options.debug:
            self._log.info(lambda: "leaderboards: " + json.dumps([lb.to_dict() for lb in leaderboards], indent=2))

        leaderboard = await self.selector.select(
            championship_id,
            leaderboards,
            lb_id=options.lb_id,
            lb_group=options.lb_group,
            lb_name=options.lb_name,
            lb_pattern=options.lb_pattern,
        )
        self._log.info(
            lambda: f"leaderboard {leaderboard.label} group={leaderboard.group_index} id={leaderboard.leaderboard_id}"
        )
        return ResolvedTarget(
            organizer_id=organizer_id,
            championship=championship,
            leaderboard=leaderboard,
            leaderboards=list(leaderboards),
        )
