"""Use case exporting one division of a championship to a record sink."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from config import ExportOptions
from core.logging.context import context
from core.logging.logger import get_logger
from domain.entities import MatchRecord, PlayerStatLine, RosterMember, StandingsRow
from domain.interfaces import IRecordSink
from infrastructure import ChampionshipRepository, FaceitAPIClient, MatchRepository, TeamRepository
from application.services.outcome_classifier import OutcomeClassifier
from application.services.record_builder import match_row, team_roster, veto_row
from application.services.stat_lines import flatten_matches, team_names_by_id
from application.services.stats_aggregator import (
    aggregate_opponents,
    aggregate_players,
    aggregate_roster,
    aggregate_team_maps,
    summarize_team,
)
from .resolve_target import ResolveTargetUseCase


@dataclass(frozen=True)
class ExportSummary:
    organizer_id: str
    championship_id: str
    championship_name: str
    leaderboard_label: str
    group_index: Optional[int]
    team_count: int
    match_count: int
    tables: List[str]
    skipped: int
    my_team_id: Optional[str] = None


def division_team_ids(standings: Sequence[StandingsRow]) -> List[str]:
    """Distinct team ids in standings order."""
    return list(dict.fromkeys(row.team_id for row in standings if row.team_id))


def division_matches(matches: Sequence[MatchRecord], team_ids: Sequence[str]) -> List[MatchRecord]:
    """
    Matches with at least two teams of the division.

    With no known division teams, every team seen in ``matches`` counts.
    """
    if team_ids:
        division = set(team_ids)
    else:
        division = {tid for m in matches for tid in m.team_ids}
    return [m for m in matches if len(set(m.team_ids) & division) >= 2]


class ExportLeagueUseCase:
    """
    Runs a full export: resolve, fetch, flatten, aggregate, write.

    Requests are strictly sequential. Failures of single team or match
    statistics fetches only drop that item.
    """

    def __init__(
        self,
        api_client: FaceitAPIClient,
        sink: IRecordSink,
        classifier: Optional[OutcomeClassifier] = None,
        team_delay_s: Optional[float] = None,
        stats_delay_s: Optional[float] = None,
    ):
        self.api_client = api_client
        self.sink = sink
        self.classifier = classifier or OutcomeClassifier()
        self.championships = ChampionshipRepository(api_client)
        self.teams = TeamRepository(api_client, delay_s=team_delay_s)
        self.matches = MatchRepository(api_client, delay_s=stats_delay_s)
        self.resolve = ResolveTargetUseCase(api_client, championships=self.championships)
        self._tables: List[str] = []
        self._log = get_logger(__name__, service="export")

    def _write(self, table: str, records: Sequence[dict]) -> None:
        self.sink.write(table, records)
        self._tables.append(table)
        self._log.trace(lambda: f"table {table} rows={len(records)}")

    async def execute(self, options: ExportOptions) -> ExportSummary:
        self._tables = []
        target = await self.resolve.execute(options)

        with context(championship_id=target.championship_id):
            if options.skip_standings:
                standings: List[StandingsRow] = []
            else:
                standings = await self.championships.get_standings(target.championship_id, target.leaderboard)
            team_ids = division_team_ids(standings)

            with self._log.timed("team details"):
                team_details = await self.teams.get_team_details(team_ids)
            players = [member for team in team_details for member in team.members]

            all_matches = await self.matches.list_matches(target.championship_id)
            if not team_ids:
                team_ids = list(dict.fromkeys(tid for m in all_matches for tid in m.team_ids))
                self._log.info(lambda: f"no standings teams; inferred {len(team_ids)} teams from matches")
            with self._log.timed("match stats"):
                matches = await self.matches.attach_stats(division_matches(all_matches, team_ids))

            team_names = team_names_by_id(matches)
            lines = flatten_matches(matches, team_names)

            self._write("standings", [row.to_dict() for row in standings])
            self._write("teams", [team.to_dict() for team in team_details])
            self._write("players", [p.to_dict() for p in players])
            self._write("matches", [match_row(m, team_names) for m in matches])
            self._write("match_players", [ln.to_dict() for ln in lines])
            self._write(
                "team_players_agg",
                [agg.to_dict() for agg in aggregate_players(lines, team_names).values()],
            )

            if options.my_team_id:
                self._export_my_team(options, matches, lines, players, team_names)

        skipped = self.championships.skipped + self.teams.skipped + self.matches.skipped
        summary = ExportSummary(
            organizer_id=target.organizer_id,
            championship_id=target.championship_id,
            championship_name=target.championship.name,
            leaderboard_label=target.leaderboard.label,
            group_index=target.leaderboard.group_index,
            team_count=len(team_ids),
            match_count=len(matches),
            tables=list(self._tables),
            skipped=skipped,
            my_team_id=options.my_team_id,
        )
        self._log.success(
            lambda: f"export done teams={summary.team_count} matches={summary.match_count} skipped={skipped}"
        )
        return summary

    def _export_my_team(
        self,
        options: ExportOptions,
        matches: Sequence[MatchRecord],
        lines: Sequence[PlayerStatLine],
        players: Sequence[RosterMember],
        team_names: Dict[str, str],
    ) -> None:
        my_team_id = options.my_team_id
        fallback_name = team_names.get(my_team_id, "")

        roster = team_roster(players, lines, my_team_id, team_names)
        mine = [m for m in matches if m.involves(my_team_id)]
        upcoming = [m for m in mine if not m.is_finished]
        finished = [m for m in mine if m.is_finished]

        nicknames = {p.nickname for p in roster}
        my_lines = [ln for ln in lines if ln.team_id == my_team_id or ln.nickname in nicknames]
        map_rows = list(aggregate_team_maps(my_lines, fallback_team_name=fallback_name).values())
        player_ids = {p.nickname: p.player_id for p in players if p.team_id == my_team_id}

        self._write("my_team_players", [p.to_dict() for p in roster])
        self._write("my_team_upcoming", [match_row(m, team_names, include_map=False) for m in upcoming])
        self._write("my_team_results", [
            {
                **match_row(m, team_names, include_map=False),
                'my_team_result': self.classifier.classify(m, my_team_id).value,
            }
            for m in finished
        ])
        self._write("my_team_match_players", [ln.to_dict() for ln in my_lines])
        self._write("my_team_map_stats", [row.to_dict() for row in map_rows])
        self._write("my_team_veto", [veto_row(m, options.map_pool) for m in mine])
        self._write("my_team_stats_overall", [
            summarize_team(my_team_id, map_rows, my_lines, matches, self.classifier).to_dict()
        ])
        self._write("my_team_players_agg", [
            agg.to_roster_dict()
            for agg in aggregate_roster(my_lines, my_team_id, player_ids, fallback_name).values()
        ])
        self._write("my_team_vs_opponents", [
            agg.to_dict() for agg in aggregate_opponents(matches, my_team_id, self.classifier).values()
        ])
