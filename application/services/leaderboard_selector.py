"""Choice of the division (leaderboard) an export works on."""
from __future__ import annotations

import logging
import re
from typing import List, Optional, Sequence

from domain.entities import LeaderboardDescriptor
from domain.exceptions import ConfigurationError, FaceitExportError, NotFoundError
from .name_resolver import NameResolverService

logger = logging.getLogger(__name__)


class LeaderboardSelector:
    """
    Picks one leaderboard out of a championship's list.

    Order of preference:
      1. explicit leaderboard id (kept even when it is not listed)
      2. explicit group index
      3. name, through the group-by-name lookup, else exact then
         substring match over the loaded list
      4. case-insensitive regex over the leaderboard names
      5. the only leaderboard, when there is exactly one
    """

    def __init__(self, resolver: NameResolverService):
        self.resolver = resolver

    async def select(
        self,
        championship_id: str,
        leaderboards: Sequence[LeaderboardDescriptor],
        *,
        lb_id: Optional[str] = None,
        lb_group: Optional[int] = None,
        lb_name: Optional[str] = None,
        lb_pattern: Optional[str] = None,
    ) -> LeaderboardDescriptor:
        if lb_id:
            listed = next((lb for lb in leaderboards if lb.leaderboard_id == lb_id), None)
            return listed or LeaderboardDescriptor(leaderboard_id=lb_id)

        chosen: Optional[LeaderboardDescriptor] = None
        group: Optional[int] = None

        if lb_group is not None:
            group = lb_group
            chosen = self._by_group(leaderboards, group)
        elif lb_name:
            try:
                group = await self.resolver.leaderboard_group_by_name(championship_id, lb_name)
                chosen = self._by_group(leaderboards, group)
            except FaceitExportError as e:
                logger.debug(f"group lookup for '{lb_name}' failed: {e}")
                chosen = self._by_name(leaderboards, lb_name)
                group = chosen.group_index if chosen else None

        if group is None and lb_pattern:
            try:
                pattern = re.compile(lb_pattern, re.IGNORECASE)
            except re.error as e:
                raise ConfigurationError(f"Invalid leaderboard pattern {lb_pattern!r}: {e}")
            chosen = next((lb for lb in leaderboards if pattern.search(lb.name)), None)
            group = chosen.group_index if chosen else None

        if group is None and len(leaderboards) == 1:
            chosen = leaderboards[0]
            group = chosen.group_index

        if chosen is not None and (group is not None or chosen.leaderboard_id):
            return chosen
        if group is not None:
            return LeaderboardDescriptor(name=lb_name or "", group_index=group)

        available = ", ".join(f"{lb.name or '?'} (group {lb.group_index})" for lb in leaderboards)
        raise NotFoundError(
            "Leaderboard",
            lb_name or lb_pattern or "(none given)",
            championship_id,
            hint=(
                f"Available leaderboards: {available or 'none'}. "
                "Provide --lb-name or --lb-pattern (or FACEIT_LB_NAME / FACEIT_LB_PATTERN)."
            ),
        )

    @staticmethod
    def _by_group(leaderboards: Sequence[LeaderboardDescriptor], group: int) -> Optional[LeaderboardDescriptor]:
        return next((lb for lb in leaderboards if lb.group_index == group), None)

    @staticmethod
    def _by_name(leaderboards: Sequence[LeaderboardDescriptor], name: str) -> Optional[LeaderboardDescriptor]:
        exact: List[LeaderboardDescriptor] = [lb for lb in leaderboards if lb.name.strip() == name]
        if exact:
            return exact[0]
        return next((lb for lb in leaderboards if name in lb.name), None)
