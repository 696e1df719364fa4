"""
FPL Extractor

Fetches data from the public Fantasy Premier League API.
"""

from typing import Any, Callable, Optional

import requests

from core.resilience import (
    InvalidResponseError,
    ResilientHTTPClient,
    fpl_api_circuit,
    fpl_history_circuit,
)
from core.settings import settings
from extractors.base import BaseExtractor
from schemas.fpl import GameweekRecord


class FPLExtractor(BaseExtractor):
    """
    Extractor for the Fantasy Premier League API.

    Provides methods to fetch:
    - Bootstrap data (gameweek events with the is_current flag)
    - Classic league standings
    - Per-entry gameweek history

    All requests send a browser-like User-Agent; FPL rejects the default
    python-requests one. Entry history goes through its own client and
    circuit breaker so a run of failing entries cannot block the bootstrap
    and standings calls.
    """

    def __init__(
        self,
        client: Optional[ResilientHTTPClient] = None,
        base_url: Optional[str] = None,
        history_client: Optional[ResilientHTTPClient] = None,
    ):
        super().__init__("fpl")
        self.base_url = (base_url or settings.fpl_base_url).rstrip("/")
        self.client = client or _default_client(fpl_api_circuit)
        self.history_client = history_client or client or _default_client(fpl_history_circuit)

    def extract(self, **kwargs: Any) -> Any:
        """Not used directly - use the specific methods below."""
        raise NotImplementedError(
            "Use get_current_gameweek, get_league_standings or get_entry_history"
        )

    def _get_json(self, path: str, client: Optional[ResilientHTTPClient] = None) -> Any:
        url = f"{self.base_url}/{path.lstrip('/')}"
        response = (client or self.client).get(url)
        try:
            return response.json()
        except requests.exceptions.JSONDecodeError as e:
            # FPL serves an HTML holding page with a 200 while the game updates
            self.log.warning("invalid_json_response", url=url, error=str(e))
            raise InvalidResponseError(f"Invalid JSON from {url}") from e

    def get_bootstrap(self) -> dict:
        """Fetch bootstrap-static (events, teams, elements)."""
        return self._get_json("bootstrap-static/")

    def get_current_gameweek(self) -> int:
        """
        Return the id of the event flagged is_current.

        Before the season starts no event is flagged; that reads as
        gameweek 1.
        """
        data = self.get_bootstrap()
        events = data.get("events") or []
        current = next((event for event in events if event.get("is_current")), None)
        gameweek = current["id"] if current and current.get("id") else 1

        self.log.debug("current_gameweek", gameweek=gameweek, flagged=current is not None)
        return gameweek

    def get_league_standings(self, league_id: int) -> dict:
        """
        Fetch classic league standings.

        Returns:
            Raw FPL payload with ``league`` and ``standings.results``
        """
        data = self._get_json(f"leagues-classic/{league_id}/standings/")
        results = data.get("standings", {}).get("results", [])
        self.log.info("league_standings_fetched", league_id=league_id, entries=len(results))
        return data

    def get_entry_history(self, entry_id: int) -> list[GameweekRecord]:
        """Fetch the gameweek-by-gameweek history for one league entry."""
        data = self._get_json(f"entry/{entry_id}/history/", client=self.history_client)
        history = [GameweekRecord.model_validate(row) for row in data.get("current", [])]
        self.log.debug("entry_history_fetched", entry_id=entry_id, gameweeks=len(history))
        return history


def _default_client(circuit_breaker: Callable) -> ResilientHTTPClient:
    return ResilientHTTPClient(
        max_retries=settings.retry_max_attempts,
        base_delay=settings.retry_base_delay,
        max_delay=settings.retry_max_delay,
        timeout=settings.http_timeout,
        headers={"User-Agent": settings.fpl_user_agent},
        circuit_breaker=circuit_breaker,
    )
