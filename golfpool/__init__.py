from .models import ScoredPlayer, TeamResult
from .schemas import LeaderboardEntry, LeaderboardSnapshot, LeagueConfig, Roster
from .name_matcher import split_name
from .rounds import cut_penalty, extract_rounds, is_cut, parse_strokes
from .team_scorer import build_team_result, find_entry, rank_teams, score_team
from .scoreboard import (
    build_scoreboard,
    build_scoreboard_from_config,
    load_roster,
    load_snapshot,
)
from .data_fetcher import LeaderboardFetcher
from .renderer import render_scoreboard, save_scoreboard_json
from .validators import validate_roster, validate_scoreboard, validate_team_result

__all__ = [
    # Models
    'ScoredPlayer',
    'TeamResult',
    'LeaderboardEntry',
    'LeaderboardSnapshot',
    'LeagueConfig',
    'Roster',
    # Scoring
    'split_name',
    'parse_strokes',
    'cut_penalty',
    'is_cut',
    'extract_rounds',
    'find_entry',
    'score_team',
    'build_team_result',
    'rank_teams',
    # Scoreboard
    'load_snapshot',
    'load_roster',
    'build_scoreboard',
    'build_scoreboard_from_config',
    # Fetching and rendering
    'LeaderboardFetcher',
    'render_scoreboard',
    'save_scoreboard_json',
    # Validation
    'validate_roster',
    'validate_team_result',
    'validate_scoreboard',
]
