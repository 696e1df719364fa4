"""
League Service

Builds the league payloads served by /api/fpl from live FPL data:
current gameweek, raw standings, and period leaderboards with the
forfeit history. Nothing is cached; every call re-fetches.
"""

import asyncio
from operator import itemgetter
from typing import Any, Optional

from core.exceptions import LeagueNotConfiguredError, StandingsUnavailableError
from core.logging import get_logger
from core.resilience import UPSTREAM_ERRORS
from extractors.fpl import FPLExtractor
from schemas.fpl import (
    CurrentGameweekResponse,
    FPLData,
    ForfeitHistoryEntry,
    GameweekRecord,
    LeagueStandingsResponse,
    Period,
    Team,
)
from services.periods import (
    completed_periods,
    current_period,
    forfeit_for_period,
    previous_period,
)
from services.scoring import loser_of, period_score, sort_ascending

# (standings row, gameweek history) for an entry whose history was fetched
EntryHistory = tuple[dict[str, Any], list[GameweekRecord]]


def _standings_rows(standings: dict) -> list[dict[str, Any]]:
    return (standings.get("standings") or {}).get("results") or []


def _league_name(standings: dict) -> Optional[str]:
    return (standings.get("league") or {}).get("name")


class LeagueService:
    """
    Read-only view of one classic league.

    Args:
        extractor: FPL API extractor (a default one is built from settings)
        league_id: Classic league id; None means not configured
    """

    def __init__(
        self,
        extractor: Optional[FPLExtractor] = None,
        league_id: Optional[int] = None,
    ):
        self.extractor = extractor or FPLExtractor()
        self.league_id = league_id
        self.log = get_logger("league_service")

    def _require_league_id(self) -> int:
        if not self.league_id:
            raise LeagueNotConfiguredError()
        return self.league_id

    async def _current_gameweek(self) -> int:
        return await asyncio.to_thread(self.extractor.get_current_gameweek)

    async def get_current_gameweek(self) -> CurrentGameweekResponse:
        """Current gameweek only."""
        return CurrentGameweekResponse(gameweek=await self._current_gameweek())

    async def get_league_standings(self) -> LeagueStandingsResponse:
        """Raw standings rows with the current gameweek attached. No scoring."""
        league_id = self._require_league_id()
        gameweek = await self._current_gameweek()
        standings = await asyncio.to_thread(self.extractor.get_league_standings, league_id)

        return LeagueStandingsResponse(
            current_gameweek=gameweek,
            standings=_standings_rows(standings),
            league_name=_league_name(standings),
        )

    async def get_period_scores(self) -> FPLData:
        """
        Current and previous period leaderboards, lowest score first.

        A failed standings fetch fails the whole call with
        StandingsUnavailableError. A failed history fetch only drops that
        entry from the leaderboards.
        """
        league_id = self._require_league_id()
        gameweek = await self._current_gameweek()
        period = current_period(gameweek)
        last_period = previous_period(period)
        log = self.log.bind(league_id=league_id, gameweek=gameweek, period=period.label)

        try:
            standings = await asyncio.to_thread(self.extractor.get_league_standings, league_id)
        except UPSTREAM_ERRORS as e:
            log.error("league_standings_failed", error=str(e), error_type=type(e).__name__)
            raise StandingsUnavailableError(str(e)) from e

        rows = _standings_rows(standings)
        fetched = await self._fetch_histories(rows)

        teams = [
            self._score_team(row, history, period, last_period, gameweek)
            for row, history in fetched
        ]

        current_leaderboard = sort_ascending(teams, key=lambda team: team.current_period_score)
        last_leaderboard = (
            sort_ascending(teams, key=lambda team: team.last_period_score)
            if last_period
            else []
        )

        log.info(
            "period_scores_complete",
            entries=len(rows),
            scored=len(teams),
            dropped=len(rows) - len(teams),
        )

        return FPLData(
            current_gameweek=gameweek,
            current_period=period,
            current_forfeit=forfeit_for_period(period),
            current_period_leaderboard=current_leaderboard,
            last_period_leaderboard=last_leaderboard,
            last_loser=loser_of(last_leaderboard),
            league_name=_league_name(standings),
            forfeit_history=self._forfeit_history(fetched, gameweek),
        )

    async def _fetch_histories(self, rows: list[dict[str, Any]]) -> list[EntryHistory]:
        """
        Fetch every entry's history concurrently and wait for all to settle.

        Failures are logged and left out of the result; the rest keep
        standings order.
        """
        results = await asyncio.gather(
            *(asyncio.to_thread(self.extractor.get_entry_history, row["entry"]) for row in rows),
            return_exceptions=True,
        )

        fetched: list[EntryHistory] = []
        for row, result in zip(rows, results):
            if isinstance(result, Exception):
                self.log.warning(
                    "entry_history_failed",
                    entry_id=row.get("entry"),
                    error=str(result),
                    error_type=type(result).__name__,
                )
            elif isinstance(result, BaseException):
                raise result
            else:
                fetched.append((row, result))
        return fetched

    @staticmethod
    def _score_team(
        row: dict[str, Any],
        history: list[GameweekRecord],
        period: Period,
        last_period: Optional[Period],
        gameweek: int,
    ) -> Team:
        last_score = (
            period_score(history, last_period.start, last_period.end, gameweek)
            if last_period
            else 0
        )
        return Team(
            id=row["entry"],
            name=row.get("entry_name", ""),
            player_name=row.get("player_name", ""),
            total_score=row.get("total", 0),
            current_period_score=period_score(history, period.start, period.end, gameweek),
            last_period_score=last_score,
        )

    @staticmethod
    def _forfeit_history(fetched: list[EntryHistory], gameweek: int) -> list[ForfeitHistoryEntry]:
        """Lowest scorer of each finished period, oldest first."""
        entries = []
        for period in completed_periods(gameweek):
            scores = [
                (row.get("player_name"), period_score(history, period.start, period.end, gameweek))
                for row, history in fetched
            ]
            # min() keeps the first of equal scores, matching the stable leaderboard sort
            loser = min(scores, key=itemgetter(1))[0] if scores else None
            entries.append(
                ForfeitHistoryEntry(
                    period=period,
                    forfeit=forfeit_for_period(period).description,
                    loser=loser,
                )
            )
        return entries
