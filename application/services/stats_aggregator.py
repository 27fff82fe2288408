"""
Statistics aggregation over PlayerStatLine sequences.

Every aggregate is a single ordered pass over an immutable input and
returns a fresh dict (insertion order = first appearance of the key) of
frozen aggregate entities.

Rules shared by all folds:
  * counting fields (kills, deaths, assists, mvps, maps) sum every line
    of the key; an unparseable value counts as zero
  * ``kd = kills / deaths`` when deaths > 0, else ``kills``
  * ``kr_avg`` and ``hs_pct_avg`` average only the lines whose value
    parses as a finite number (``%`` suffix allowed for headshots)
  * ratios are rounded to 2 decimals, ties away from zero
  * the first non-empty team name seen for a key is kept, so lines must
    be folded in their original order
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Hashable, Iterable, Mapping, Optional, Sequence, Tuple

from domain.entities import (
    MatchRecord, OpponentAggregate, PlayerAggregate, PlayerStatLine,
    TeamMapAggregate, TeamOverall,
)
from domain.enums import MatchOutcome
from .numeric import as_count, parse_number, ratio, tidy
from .outcome_classifier import OutcomeClassifier

UNKNOWN_OPPONENT = "unknown"


@dataclass
class _Totals:
    team_id: str = ""
    team_name: str = ""
    nickname: str = ""
    maps: int = 0
    kills: float = 0.0
    deaths: float = 0.0
    assists: float = 0.0
    mvps: float = 0.0
    kr_sum: float = 0.0
    kr_n: int = 0
    hs_sum: float = 0.0
    hs_n: int = 0

    def add(self, line: PlayerStatLine) -> None:
        self.maps += 1
        self.kills += as_count(line.kills)
        self.deaths += as_count(line.deaths)
        self.assists += as_count(line.assists)
        self.mvps += as_count(line.mvps)
        kr = parse_number(line.kr)
        if kr is not None:
            self.kr_sum += kr
            self.kr_n += 1
        hs = parse_number(line.hs_pct, percent=True)
        if hs is not None:
            self.hs_sum += hs
            self.hs_n += 1
        if not self.team_name and line.team_name:
            self.team_name = line.team_name

    @property
    def kd(self) -> float:
        return ratio(self.kills / self.deaths if self.deaths > 0 else self.kills)

    @property
    def kr_avg(self) -> float:
        return ratio(self.kr_sum / self.kr_n) if self.kr_n else 0.0

    @property
    def hs_pct_avg(self) -> float:
        return ratio(self.hs_sum / self.hs_n) if self.hs_n else 0.0


def _fold(
    lines: Iterable[PlayerStatLine],
    key: Callable[[PlayerStatLine], Hashable],
) -> Dict[Hashable, _Totals]:
    totals: Dict[Hashable, _Totals] = {}
    for line in lines:
        k = key(line)
        if k not in totals:
            totals[k] = _Totals(team_id=line.team_id, nickname=line.nickname)
        totals[k].add(line)
    return totals


def aggregate_players(
    lines: Sequence[PlayerStatLine],
    team_names: Optional[Mapping[str, str]] = None,
) -> Dict[Tuple[str, str], PlayerAggregate]:
    """Per-player totals keyed by ``(team_id, nickname)``."""
    team_names = team_names or {}
    return {
        k: PlayerAggregate(
            team_id=t.team_id,
            team_name=t.team_name or team_names.get(t.team_id, ""),
            nickname=t.nickname,
            maps_played=t.maps,
            kills=tidy(t.kills),
            deaths=tidy(t.deaths),
            assists=tidy(t.assists),
            mvps=tidy(t.mvps),
            kd=t.kd,
            kr_avg=t.kr_avg,
            hs_pct_avg=t.hs_pct_avg,
        )
        for k, t in _fold(lines, lambda ln: (ln.team_id, ln.nickname)).items()
    }


def aggregate_roster(
    lines: Sequence[PlayerStatLine],
    team_id: str,
    player_ids: Optional[Mapping[str, str]] = None,
    fallback_team_name: str = "",
) -> Dict[str, PlayerAggregate]:
    """Per-player totals for one team's lines, keyed by nickname alone."""
    player_ids = player_ids or {}
    return {
        nickname: PlayerAggregate(
            team_id=team_id,
            team_name=t.team_name or fallback_team_name,
            nickname=nickname,
            maps_played=t.maps,
            kills=tidy(t.kills),
            deaths=tidy(t.deaths),
            assists=tidy(t.assists),
            mvps=tidy(t.mvps),
            kd=t.kd,
            kr_avg=t.kr_avg,
            hs_pct_avg=t.hs_pct_avg,
            player_id=player_ids.get(nickname),
        )
        for nickname, t in _fold(lines, lambda ln: ln.nickname).items()
    }


def aggregate_team_maps(
    lines: Sequence[PlayerStatLine],
    fallback_team_name: str = "",
) -> Dict[Tuple[str, str], TeamMapAggregate]:
    """Per-map totals keyed by ``(match_id, map)``; pass one team's lines only."""
    return {
        (match_id, map_name): TeamMapAggregate(
            match_id=match_id,
            map=map_name,
            team_name=t.team_name or fallback_team_name,
            kills=tidy(t.kills),
            deaths=tidy(t.deaths),
            assists=tidy(t.assists),
            mvps=tidy(t.mvps),
            kd=t.kd,
            kr_avg=t.kr_avg,
            hs_pct_avg=t.hs_pct_avg,
        )
        for (match_id, map_name), t in _fold(lines, lambda ln: (ln.match_id, ln.map or "")).items()
    }


def _tally(outcome: MatchOutcome, counts: Dict[MatchOutcome, int]) -> None:
    if outcome.is_decided:
        counts[outcome] = counts.get(outcome, 0) + 1


def aggregate_opponents(
    matches: Sequence[MatchRecord],
    team_id: str,
    classifier: OutcomeClassifier,
) -> Dict[str, OpponentAggregate]:
    """
    Head-to-head record per opponent over the matches involving ``team_id``.

    The key is the opponent id, else its name, else ``"unknown"``. Every
    such match counts as played; only decided outcomes are tallied.
    """
    played: Dict[str, int] = {}
    counts: Dict[str, Dict[MatchOutcome, int]] = {}
    names: Dict[str, Tuple[str, str]] = {}
    for match in matches:
        if not match.involves(team_id):
            continue
        opponent = next((t for t in match.teams if t.team_id != team_id), None)
        opp_id = (opponent.team_id if opponent else None) or ""
        opp_name = (opponent.name if opponent else None) or ""
        key = opp_id or opp_name or UNKNOWN_OPPONENT
        names.setdefault(key, (opp_id, opp_name))
        played[key] = played.get(key, 0) + 1
        _tally(classifier.classify(match, team_id), counts.setdefault(key, {}))

    return {
        key: OpponentAggregate(
            opponent_id=names[key][0],
            opponent_name=names[key][1],
            played=played[key],
            wins=counts[key].get(MatchOutcome.WIN, 0),
            losses=counts[key].get(MatchOutcome.LOSS, 0),
            draws=counts[key].get(MatchOutcome.DRAW, 0),
        )
        for key in played
    }


def summarize_team(
    team_id: str,
    map_rows: Sequence[TeamMapAggregate],
    lines: Sequence[PlayerStatLine],
    matches: Sequence[MatchRecord],
    classifier: OutcomeClassifier,
) -> TeamOverall:
    """Season totals for one team from its map rows, stat lines and matches."""
    kills = sum(as_count(r.kills) for r in map_rows)
    deaths = sum(as_count(r.deaths) for r in map_rows)
    team_name = next((r.team_name for r in map_rows if r.team_name), "")

    kr_values = [v for v in (parse_number(ln.kr) for ln in lines) if v is not None]

    mine = [m for m in matches if m.involves(team_id)]
    finished = [m for m in mine if m.is_finished]
    counts: Dict[MatchOutcome, int] = {}
    for match in finished:
        _tally(classifier.classify(match, team_id), counts)

    return TeamOverall(
        team_id=team_id,
        team_name=team_name,
        matches_total=len(mine),
        matches_finished=len(finished),
        maps_played=len(map_rows),
        wins=counts.get(MatchOutcome.WIN, 0),
        losses=counts.get(MatchOutcome.LOSS, 0),
        draws=counts.get(MatchOutcome.DRAW, 0),
        kills=tidy(kills),
        deaths=tidy(deaths),
        assists=tidy(sum(as_count(r.assists) for r in map_rows)),
        kd=ratio(kills / deaths if deaths > 0 else kills),
        kr_avg=ratio(sum(kr_values) / len(kr_values)) if kr_values else 0.0,
        mvps=tidy(sum(as_count(r.mvps) for r in map_rows)),
    )
