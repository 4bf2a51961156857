"""Validation functions for rosters and scoring results."""

from .constants import DEFAULT_SQUAD_SIZE, NAME_OVERRIDES
from .models import TeamResult
from .schemas import Roster


def validate_roster(roster: Roster, overrides: dict[str, tuple[str, str]] | None = None) -> list[str]:
    """
    Validate a team's roster file.

    Checks:
    - No blank player names
    - No duplicate players
    - Every name can be split into first/last (or has an override)

    Args:
        roster: Roster to validate
        overrides: Extra name overrides to accept

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []
    table = {**NAME_OVERRIDES, **(overrides or {})}

    seen = set()
    duplicates = set()
    for name in roster.players:
        if not name or not name.strip():
            errors.append(f'{roster.team_name} has a blank player name')
            continue
        if name in seen:
            duplicates.add(name)
        seen.add(name)
        if name not in table and ' ' not in name:
            errors.append(f'{roster.team_name} has unsplittable name: {name}')

    if duplicates:
        errors.append(f'{roster.team_name} has duplicate players: {", ".join(sorted(duplicates))}')

    return errors


def validate_team_result(result: TeamResult, squad_size: int = DEFAULT_SQUAD_SIZE) -> list[str]:
    """
    Validate a scored team against the scoring rules.

    Checks:
    - Total row is present and last
    - Players are sorted by total
    - Exactly min(squad_size, players) count, and they are the first ones
    - Total row equals the round-by-round sum of the counting players

    Args:
        result: Scored team
        squad_size: Number of counting players

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []
    name = result.team_name

    total = result.total_row
    if total is None:
        return [f'{name} is missing its Total row']

    players = result.scored_players
    if len(players) != len(result.players) - 1:
        errors.append(f'{name} has a Total row before the last position')

    totals = [p.total for p in players]
    if totals != sorted(totals):
        errors.append(f'{name} players are not sorted by total: {totals}')

    expected_counting = min(squad_size, len(players))
    flags = [p.excluded for p in players]
    if flags != [False] * expected_counting + [True] * (len(players) - expected_counting):
        errors.append(
            f'{name} has {flags.count(False)} counting players (expected {expected_counting})'
        )

    counting = result.counting_players
    expected = tuple(sum(p.rounds[i] for p in counting) for i in range(4))
    if total.rounds != expected:
        errors.append(f'{name} Total rounds {total.rounds} != counting sum {expected}')
    if total.excluded:
        errors.append(f'{name} Total row is marked excluded')

    return errors


def validate_scoreboard(results: list[TeamResult], squad_size: int = DEFAULT_SQUAD_SIZE) -> list[str]:
    """
    Run validate_team_result() over every team.

    Returns:
        List of all validation error messages
    """
    errors = []
    for result in results:
        errors.extend(validate_team_result(result, squad_size))
    return errors
