"""Team scoring: best-K-of-roster selection and team totals."""

import logging
from typing import Optional

from .constants import DEFAULT_CUT_PENALTY_OFFSET, DEFAULT_SQUAD_SIZE, TOTAL_ROW_NAME
from .models import ScoredPlayer, TeamResult
from .name_matcher import split_name
from .rounds import cut_penalty, extract_rounds, is_cut
from .schemas import LeaderboardEntry, LeaderboardSnapshot, Roster

logger = logging.getLogger('golfpool.team_scorer')


def find_entry(
    snapshot: LeaderboardSnapshot, first_name: str, last_name: str
) -> Optional[LeaderboardEntry]:
    """
    Find a player on the leaderboard by exact first and last name.

    Matching is case-sensitive; if the feed lists the same name twice the
    first row wins.
    """
    for row in snapshot.leaderboard_rows:
        if row.first_name == first_name and row.last_name == last_name:
            return row
    return None


def score_player(name: str, entry: LeaderboardEntry, penalty: int) -> ScoredPlayer:
    """Build a ScoredPlayer for a matched leaderboard entry."""
    r1, r2, r3, r4 = extract_rounds(entry, penalty)
    return ScoredPlayer(name=name, r1=r1, r2=r2, r3=r3, r4=r4, missed_cut=is_cut(entry))


def total_row(players: list[ScoredPlayer]) -> ScoredPlayer:
    """Synthetic aggregate row summing the counting players round by round."""
    counting = [p for p in players if not p.excluded]
    return ScoredPlayer(
        name=TOTAL_ROW_NAME,
        r1=sum(p.r1 for p in counting),
        r2=sum(p.r2 for p in counting),
        r3=sum(p.r3 for p in counting),
        r4=sum(p.r4 for p in counting),
    )


def score_team(
    player_names: list[str],
    snapshot: LeaderboardSnapshot,
    squad_size: int = DEFAULT_SQUAD_SIZE,
    penalty: Optional[int] = None,
    overrides: Optional[dict[str, tuple[str, str]]] = None,
) -> list[ScoredPlayer]:
    """
    Score a roster against the leaderboard.

    Players that can't be split into first/last or aren't on the
    leaderboard are logged and left out. The rest are sorted by total
    (stable, so ties keep roster order); only the first squad_size count,
    everyone after is marked excluded. A "Total" row is appended last.

    Args:
        player_names: Full names in roster order
        snapshot: Current leaderboard
        squad_size: Number of counting players
        penalty: Cut penalty; computed from the snapshot when None
        overrides: Extra name overrides for split_name()

    Returns:
        Sorted ScoredPlayer list ending with the Total row
    """
    if penalty is None:
        penalty = cut_penalty(snapshot, DEFAULT_CUT_PENALTY_OFFSET)

    players = []
    for name in player_names:
        key = split_name(name, overrides)
        if key is None:
            continue

        entry = find_entry(snapshot, *key)
        if entry is None:
            logger.warning(f'Player not found in leaderboard: {name}')
            continue

        players.append(score_player(name, entry, penalty))

    players.sort(key=lambda p: p.total)

    for player in players[squad_size:]:
        player.excluded = True

    players.append(total_row(players))
    return players


def build_team_result(
    team_id: str,
    roster: Roster,
    snapshot: LeaderboardSnapshot,
    squad_size: int = DEFAULT_SQUAD_SIZE,
    penalty: Optional[int] = None,
    overrides: Optional[dict[str, tuple[str, str]]] = None,
) -> TeamResult:
    """Score a roster and wrap it with the team's identity."""
    players = score_team(roster.players, snapshot, squad_size, penalty, overrides)
    return TeamResult(
        team_id=team_id,
        team_name=roster.team_name,
        players=players,
        history=list(roster.history),
    )


def rank_teams(results: list[TeamResult]) -> list[TeamResult]:
    """Order teams for the standings, lowest total first (ties keep input order)."""
    return sorted(results, key=lambda t: t.total)
