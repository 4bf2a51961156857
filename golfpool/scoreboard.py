"""Builds the full multi-team scoreboard for one refresh run."""

import logging
from pathlib import Path
from typing import Optional

from .constants import (
    DEFAULT_CUT_PENALTY_OFFSET,
    DEFAULT_SQUAD_SIZE,
    NAME_OVERRIDES,
    SNAPSHOT_FILENAME,
    TEAMS_DIRNAME,
)
from .models import TeamResult
from .rounds import cut_penalty
from .schemas import LeaderboardSnapshot, LeagueConfig, Roster
from .team_scorer import build_team_result
from .utils import load_json
from .validators import validate_roster

logger = logging.getLogger('golfpool.scoreboard')


def load_snapshot(snapshot_path: str | Path) -> LeaderboardSnapshot:
    """Load the current leaderboard snapshot (leaderboard.json).

    Raises:
        FileNotFoundError: If the snapshot doesn't exist
        json.JSONDecodeError: If the snapshot isn't valid JSON
        ValueError: If the snapshot doesn't match the expected structure
    """
    return load_json(snapshot_path, schema=LeaderboardSnapshot)


def roster_path(roster_dir: str | Path, team_id: str) -> Path:
    """Path of a team's roster file, e.g. teams/Matt.json."""
    return Path(roster_dir) / f'{team_id}.json'


def load_roster(roster_dir: str | Path, team_id: str) -> Roster:
    """Load a team's roster.

    Raises:
        FileNotFoundError: If the roster file doesn't exist
        json.JSONDecodeError: If the roster isn't valid JSON
        ValueError: If the roster doesn't match the expected structure
    """
    return load_json(roster_path(roster_dir, team_id), schema=Roster)


def build_scoreboard(
    team_ids: list[str],
    roster_dir: str | Path,
    snapshot_path: str | Path,
    squad_size: int = DEFAULT_SQUAD_SIZE,
    cut_penalty_offset: int = DEFAULT_CUT_PENALTY_OFFSET,
    name_overrides: Optional[dict[str, tuple[str, str]]] = None,
) -> list[TeamResult]:
    """Score every configured team against the shared leaderboard snapshot.

    Teams come back in the order given. Any snapshot or roster that can't
    be loaded aborts the whole build; no partial scoreboard is returned.

    Args:
        team_ids: Ordered team identifiers (roster file stems)
        roster_dir: Directory holding <team_id>.json roster files
        snapshot_path: Path to leaderboard.json
        squad_size: Number of counting players per team
        cut_penalty_offset: Strokes added to the cut line for cut players
        name_overrides: Extra full name -> (first, last) overrides

    Returns:
        List of TeamResult, one per team id
    """
    snapshot = load_snapshot(snapshot_path)
    penalty = cut_penalty(snapshot, cut_penalty_offset)
    logger.info(
        f'Loaded leaderboard with {len(snapshot.leaderboard_rows)} players '
        f'(cut line: {snapshot.cut_score or "none"}, cut penalty: {penalty})'
    )

    results = []
    for team_id in team_ids:
        roster = load_roster(roster_dir, team_id)
        for error in validate_roster(roster, name_overrides):
            logger.warning(error)

        result = build_team_result(
            team_id, roster, snapshot, squad_size, penalty, name_overrides
        )
        logger.info(
            f'Scored {result.team_name}: {len(result.scored_players)}/{len(roster.players)} '
            f'players found, total {result.total:+d}'
        )
        results.append(result)

    return results


def build_scoreboard_from_config(data_dir: str | Path, config: LeagueConfig) -> list[TeamResult]:
    """Build the scoreboard using the standard data directory layout.

    Args:
        data_dir: Directory holding leaderboard.json and teams/
        config: LeagueConfig with teams and scoring settings
    """
    data_dir = Path(data_dir)
    return build_scoreboard(
        team_ids=config.teams,
        roster_dir=data_dir / TEAMS_DIRNAME,
        snapshot_path=data_dir / SNAPSHOT_FILENAME,
        squad_size=config.squad_size,
        cut_penalty_offset=config.cut_penalty_offset,
        name_overrides={**NAME_OVERRIDES, **config.name_overrides},
    )
