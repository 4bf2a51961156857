"""Roster name to leaderboard (first, last) key resolution."""

import logging
from typing import Optional

from .constants import NAME_OVERRIDES

logger = logging.getLogger('golfpool.name_matcher')


def split_name(
    full_name: str,
    overrides: Optional[dict[str, tuple[str, str]]] = None,
) -> tuple[str, str] | None:
    """
    Split a roster name into the (first, last) pair used on the leaderboard.

    Names listed in the override table win over the generic split. Otherwise
    the name is split on the first space, so "Ludvig Aberg Jr" becomes
    ("Ludvig", "Aberg Jr").

    Args:
        full_name: Player name as written on the roster
        overrides: Extra full name -> (first, last) entries; these take
            precedence over the built-in NAME_OVERRIDES

    Returns:
        (first_name, last_name), or None if the name has no space
    """
    table = {**NAME_OVERRIDES, **overrides} if overrides else NAME_OVERRIDES
    if full_name in table:
        first, last = table[full_name]
        return first, last

    first, sep, last = full_name.partition(' ')
    if not sep:
        logger.warning(f'Skipping invalid name: {full_name!r}')
        return None
    return first, last
