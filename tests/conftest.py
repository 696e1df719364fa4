"""Shared fixtures: a fake FPL extractor and an API client wired to it."""

from typing import Optional

import pytest
from fastapi.testclient import TestClient

from api.v1.fpl import get_league_service
from core.resilience import ClientError, NetworkError
from main import app
from schemas.fpl import GameweekRecord
from services.league_service import LeagueService


def history(points_by_gameweek: dict[int, int]) -> list[GameweekRecord]:
    """Build an entry history from {gameweek: points}."""
    return [GameweekRecord(event=gw, points=pts) for gw, pts in points_by_gameweek.items()]


def standings_row(entry: int, player_name: str, total: int = 0, entry_name: Optional[str] = None) -> dict:
    return {
        'entry': entry,
        'entry_name': entry_name or f"{player_name}'s XI",
        'player_name': player_name,
        'total': total,
        'rank': entry,
    }


class FakeFPLExtractor:
    """Stands in for FPLExtractor; records which endpoints were hit."""

    def __init__(self, gameweek=1, rows=None, histories=None, league_name='Test League', standings_error=None):
        self.gameweek = gameweek
        self.rows = rows or []
        self.histories = histories or {}
        self.league_name = league_name
        self.standings_error = standings_error
        self.calls: list[str] = []

    def get_current_gameweek(self) -> int:
        self.calls.append('bootstrap')
        return self.gameweek

    def get_league_standings(self, league_id: int) -> dict:
        self.calls.append(f'standings:{league_id}')
        if self.standings_error:
            raise self.standings_error
        return {
            'league': {'id': league_id, 'name': self.league_name},
            'standings': {'has_next': False, 'page': 1, 'results': self.rows},
        }

    def get_entry_history(self, entry_id: int) -> list[GameweekRecord]:
        self.calls.append(f'history:{entry_id}')
        result = self.histories.get(entry_id, [])
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def four_team_extractor():
    """Gameweek 7 (period 5-8), four entries with full histories."""
    rows = [
        standings_row(1, 'Paul', total=850),
        standings_row(2, 'Ro', total=820),
        standings_row(3, 'John', total=900),
        standings_row(4, 'Mike', total=880),
    ]
    histories = {
        1: history({1: 20, 2: 20, 3: 20, 4: 20, 5: 40, 6: 40, 7: 40}),   # P1 80, current 120
        2: history({1: 30, 2: 30, 3: 30, 4: 30, 5: 50, 6: 50, 7: 40}),   # P1 120, current 140
        3: history({1: 10, 2: 10, 3: 10, 4: 10, 5: 60, 6: 60, 7: 60}),   # P1 40, current 180
        4: history({1: 25, 2: 25, 3: 25, 4: 25, 5: 55, 6: 55, 7: 55}),   # P1 100, current 165
    }
    return FakeFPLExtractor(gameweek=7, rows=rows, histories=histories)


@pytest.fixture
def failing_entry_extractor(four_team_extractor):
    four_team_extractor.histories[3] = NetworkError('Connection failed')
    return four_team_extractor


@pytest.fixture
def missing_standings_extractor():
    return FakeFPLExtractor(gameweek=7, standings_error=ClientError('Client error: 404', status_code=404))


@pytest.fixture
def api_client():
    """
    TestClient factory; pass the extractor and league id the service should use.

    Dependency overrides are cleared after the test.
    """
    def _make(extractor, league_id: Optional[int] = 314):
        app.dependency_overrides[get_league_service] = lambda: LeagueService(
            extractor=extractor, league_id=league_id
        )
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()
