"""
Forfeit periods.

The 38-gameweek season is split into nine fixed windows: eight of four
gameweeks and a final one of six (33-38). Each window has one forfeit.
"""

from types import MappingProxyType
from typing import Mapping, Optional

from schemas.fpl import Forfeit, Period

SEASON_GAMEWEEKS = 38
PERIOD_LENGTH = 4

PERIODS: tuple[Period, ...] = (
    Period(start=1, end=4),
    Period(start=5, end=8),
    Period(start=9, end=12),
    Period(start=13, end=16),
    Period(start=17, end=20),
    Period(start=21, end=24),
    Period(start=25, end=28),
    Period(start=29, end=32),
    Period(start=33, end=38),
)

_FORFEIT_DESCRIPTIONS = (
    "Stare at wall for 30 minutes without music",
    "Ghost Chilli, or teaspoon of Carolina Reaper sauce",
    "Presentation on why you lost, 5 minute PowerPoint live with us",
    "Ball to balls (lie down, spread legs, someone drops it)",
    "Ice bucket Outside (no towel for 1 min)",
    "Chug 2l of milk in 2 min (if fail then add 20 GBP to prize pool)",
    "Makeup Tutorial (3 min vid, solo, serious and real makeup)",
    "Raw egg (1 egg in a glass to be swallowed, if fail then 20 GBP)",
    "Depressing Meal (Others pick from a list of food)",
)

# Keyed by period start
FORFEITS: Mapping[int, Forfeit] = MappingProxyType({
    period.start: Forfeit(weeks=period.label, description=description)
    for period, description in zip(PERIODS, _FORFEIT_DESCRIPTIONS, strict=True)
})


def current_period(gameweek: int) -> Period:
    """
    Return the period containing ``gameweek``.

    Gameweeks below 1 fall into the first period and anything past 38
    into the last, so the result is defined for every integer.
    """
    for period in PERIODS:
        if gameweek <= period.end:
            return period
    return PERIODS[-1]


def forfeit_for_period(period: Period) -> Forfeit:
    """
    Look up the forfeit for ``period``.

    The slot is ``(start - 1) // 4``; a period that is not one of the nine
    season periods raises ValueError.
    """
    index = (period.start - 1) // PERIOD_LENGTH
    if not 0 <= index < len(PERIODS) or PERIODS[index] != period:
        raise ValueError(f"Unknown period {period.label}")
    return FORFEITS[period.start]


def previous_period(period: Period) -> Optional[Period]:
    """Period ending the gameweek before ``period`` starts, None for the first."""
    if period.start <= 1:
        return None
    return current_period(period.start - 1)


def completed_periods(gameweek: int) -> list[Period]:
    """Periods that finished before the one containing ``gameweek``."""
    start = current_period(gameweek).start
    return [period for period in PERIODS if period.end < start]
