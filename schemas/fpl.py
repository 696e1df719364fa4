"""
FPL Response Schemas

Pydantic models for periods, forfeits, team leaderboards and the payloads
served by /api/fpl. Fields are snake_case in Python and camelCase on the
wire.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Period(CamelModel):
    """Inclusive gameweek window used as the forfeit cadence."""

    model_config = ConfigDict(frozen=True)

    start: int
    end: int

    @property
    def label(self) -> str:
        return f"{self.start}-{self.end}"


class Forfeit(CamelModel):
    """Penalty handed to the lowest scorer of a period."""

    model_config = ConfigDict(frozen=True)

    weeks: str  # "start-end"
    description: str


class GameweekRecord(BaseModel):
    """One row of an entry's gameweek history (extra FPL fields ignored)."""

    event: int
    points: int


class Team(CamelModel):
    """League entry annotated with period scores."""

    id: int
    name: str
    player_name: str
    total_score: int
    current_period_score: Optional[int] = None
    last_period_score: Optional[int] = None


class ForfeitHistoryEntry(CamelModel):
    """Loser of a completed period."""

    period: Period
    forfeit: str
    loser: Optional[str] = None


class FPLData(CamelModel):
    """Payload for action=period-scores."""

    current_gameweek: int
    current_period: Period
    current_forfeit: Optional[Forfeit] = None
    current_period_leaderboard: list[Team]
    last_period_leaderboard: list[Team]
    last_loser: Optional[str] = None
    league_name: Optional[str] = None
    forfeit_history: list[ForfeitHistoryEntry] = Field(default_factory=list)


class CurrentGameweekResponse(CamelModel):
    """Payload for action=current-gameweek."""

    gameweek: int


class LeagueStandingsResponse(CamelModel):
    """Payload for action=league-standings. Standings rows are passed through raw."""

    current_gameweek: int
    standings: list[dict[str, Any]]
    league_name: Optional[str] = None
