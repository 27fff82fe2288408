"""Application services root exports."""
from .name_resolver import NameResolverService
from .leaderboard_selector import LeaderboardSelector
from .outcome_classifier import OutcomeClassifier
from .stat_lines import flatten_match, flatten_matches, team_names_by_id
from .stats_aggregator import (
    aggregate_players,
    aggregate_roster,
    aggregate_team_maps,
    aggregate_opponents,
    summarize_team,
)
from .record_builder import match_row, veto_row, team_roster

__all__ = [
    "NameResolverService",
    "LeaderboardSelector",
    "OutcomeClassifier",
    "flatten_match",
    "flatten_matches",
    "team_names_by_id",
    "aggregate_players",
    "aggregate_roster",
    "aggregate_team_maps",
    "aggregate_opponents",
    "summarize_team",
    "match_row",
    "veto_row",
    "team_roster",
]
