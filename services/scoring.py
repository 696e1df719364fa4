"""Period score aggregation and leaderboard ordering."""

from typing import Callable, Iterable, Optional

from schemas.fpl import GameweekRecord, Team


def period_score(
    history: Iterable[GameweekRecord],
    start: int,
    end: int,
    current_gameweek: int,
) -> int:
    """
    Sum an entry's points for gameweeks ``start`` through ``end``.

    Gameweeks after ``current_gameweek`` are not counted. Gameweeks in range
    but missing from the history count as zero. Each event is assumed to
    appear once; duplicates are summed.
    """
    last = min(end, current_gameweek)
    return sum(record.points for record in history if start <= record.event <= last)


def sort_ascending(teams: Iterable[Team], key: Callable[[Team], Optional[int]]) -> list[Team]:
    """
    Order teams lowest score first, so position 0 holds the forfeit.

    The sort is stable: ties keep league standings order.
    """
    return sorted(teams, key=lambda team: key(team) or 0)


def loser_of(leaderboard: list[Team]) -> Optional[str]:
    """Manager name at the bottom of an ascending leaderboard."""
    if not leaderboard:
        return None
    return leaderboard[0].player_name
