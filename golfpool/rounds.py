"""Per-round score extraction from leaderboard entries."""

import logging

from .constants import (
    CUT_POSITION,
    DEFAULT_CUT_PENALTY_OFFSET,
    EVEN_PAR,
    ROUNDS_PER_TOURNAMENT,
    WEEKEND_ROUNDS,
)
from .schemas import LeaderboardEntry, LeaderboardSnapshot

logger = logging.getLogger('golfpool.rounds')


def parse_strokes(value: str | None) -> int:
    """
    Parse a score-to-par string ("-3", "+2", "E") into an int.

    Anything that isn't a plain signed integer counts as 0.
    """
    if value is None:
        return 0
    value = value.strip()
    if value.upper() == EVEN_PAR:
        return 0
    try:
        return int(value)
    except ValueError:
        if value:
            logger.debug(f'Unparseable score {value!r}, using 0')
        return 0


def parse_cut_score(value: str | None) -> int:
    """Magnitude of a cut line score ("+5" and "-5" both give 5)."""
    return abs(parse_strokes(value))


def cut_penalty(snapshot: LeaderboardSnapshot, offset: int = DEFAULT_CUT_PENALTY_OFFSET) -> int:
    """
    Score assigned to each unplayed weekend round of a player who missed the cut.

    Args:
        snapshot: Current leaderboard
        offset: Strokes added on top of the cut line

    Returns:
        abs(cut line) + offset, or 0 when the snapshot has no cut line yet
    """
    cut_score = snapshot.cut_score
    if cut_score is None:
        logger.debug('No cut line in snapshot, cut penalty is 0')
        return 0
    return parse_cut_score(cut_score) + offset


def is_cut(entry: LeaderboardEntry) -> bool:
    """True if the player missed the cut."""
    return entry.position.upper() == CUT_POSITION


def extract_rounds(entry: LeaderboardEntry, penalty: int) -> tuple[int, int, int, int]:
    """
    Derive R1..R4 relative to par for a leaderboard entry.

    Recorded rounds are used as-is. A player who missed the cut gets the
    cut penalty for rounds 3 and 4 instead. Rounds not played yet stay at
    0. An entry with no rounds at all (tournament not started, or the feed
    only carries a total) puts its total into R1.

    Args:
        entry: Matched leaderboard row
        penalty: Value from cut_penalty() for this snapshot

    Returns:
        Tuple of four round scores
    """
    cut = is_cut(entry)
    scores = [0] * ROUNDS_PER_TOURNAMENT

    for i in range(ROUNDS_PER_TOURNAMENT):
        if cut and i in WEEKEND_ROUNDS:
            scores[i] = penalty
        elif i < len(entry.rounds):
            scores[i] = parse_strokes(entry.rounds[i].score_to_par)

    if not entry.rounds:
        scores[0] = parse_strokes(entry.total)

    return scores[0], scores[1], scores[2], scores[3]
