"""
Static sample league shown by the pages when live FPL data is unavailable
(off-season, FPL outage, league not configured).
"""

from schemas.fpl import FPLData, ForfeitHistoryEntry, Team
from services.periods import current_period, forfeit_for_period
from services.scoring import loser_of, sort_ascending

SAMPLE_GAMEWEEK = 7

_CURRENT = [
    Team(id=1, name="Paul's XI", player_name="Paul", total_score=850, current_period_score=120),
    Team(id=2, name="Ro's Squad", player_name="Ro", total_score=820, current_period_score=140),
    Team(id=3, name="John FC", player_name="John", total_score=900, current_period_score=180),
    Team(id=4, name="Mike United", player_name="Mike", total_score=880, current_period_score=165),
]

_LAST = [
    Team(id=1, name="Paul's XI", player_name="Paul", total_score=730, last_period_score=100),
    Team(id=2, name="David's Squad", player_name="David", total_score=680, last_period_score=150),
    Team(id=3, name="John FC", player_name="John", total_score=720, last_period_score=130),
    Team(id=4, name="Mike United", player_name="Mike", total_score=715, last_period_score=125),
]


def sample_fpl_data() -> FPLData:
    """A fresh copy of the sample payload, shaped like a live period-scores response."""
    period = current_period(SAMPLE_GAMEWEEK)
    first_period = current_period(1)
    last_leaderboard = sort_ascending(
        [team.model_copy() for team in _LAST], key=lambda team: team.last_period_score
    )
    return FPLData(
        current_gameweek=SAMPLE_GAMEWEEK,
        current_period=period,
        current_forfeit=forfeit_for_period(period),
        current_period_leaderboard=sort_ascending(
            [team.model_copy() for team in _CURRENT], key=lambda team: team.current_period_score
        ),
        last_period_leaderboard=last_leaderboard,
        last_loser=loser_of(last_leaderboard),
        league_name="Sample League",
        forfeit_history=[
            ForfeitHistoryEntry(
                period=first_period,
                forfeit=forfeit_for_period(first_period).description,
                loser=loser_of(last_leaderboard),
            ),
        ],
    )
