"""Tests for the /api/fpl boundary and health endpoints."""

from fastapi.testclient import TestClient

from api.v1.fpl import get_league_service
from conftest import FakeFPLExtractor, history, standings_row
from core.resilience import InvalidResponseError
from main import app


class TestActions:

    def test_current_gameweek(self, api_client):
        client = api_client(FakeFPLExtractor(gameweek=14))
        resp = client.get('/api/fpl', params={'action': 'current-gameweek'})

        assert resp.status_code == 200
        assert resp.json() == {'gameweek': 14}

    def test_league_standings(self, api_client):
        rows = [standings_row(1, 'Paul', total=850)]
        client = api_client(FakeFPLExtractor(gameweek=3, rows=rows, league_name='Lads'))
        resp = client.get('/api/fpl', params={'action': 'league-standings'})

        assert resp.status_code == 200
        assert resp.json() == {'currentGameweek': 3, 'standings': rows, 'leagueName': 'Lads'}

    def test_period_scores_payload(self, api_client, four_team_extractor):
        client = api_client(four_team_extractor)
        resp = client.get('/api/fpl', params={'action': 'period-scores'})

        assert resp.status_code == 200
        body = resp.json()
        assert body['currentGameweek'] == 7
        assert body['currentPeriod'] == {'start': 5, 'end': 8}
        assert body['leagueName'] == 'Test League'
        assert body['lastLoser'] == 'John'
        assert body['currentForfeit']['weeks'] == '5-8'

        first = body['currentPeriodLeaderboard'][0]
        assert first == {
            'id': 1,
            'name': "Paul's XI",
            'playerName': 'Paul',
            'totalScore': 850,
            'currentPeriodScore': 120,
            'lastPeriodScore': 80,
        }
        assert [t['currentPeriodScore'] for t in body['currentPeriodLeaderboard']] == [120, 140, 165, 180]
        assert body['forfeitHistory'][0]['period'] == {'start': 1, 'end': 4}

    def test_period_scores_partial_failure_still_200(self, api_client, failing_entry_extractor):
        client = api_client(failing_entry_extractor)
        resp = client.get('/api/fpl', params={'action': 'period-scores'})

        assert resp.status_code == 200
        assert len(resp.json()['currentPeriodLeaderboard']) == 3

    def test_first_period_payload(self, api_client):
        extractor = FakeFPLExtractor(
            gameweek=1,
            rows=[standings_row(1, 'Paul')],
            histories={1: history({1: 77})},
        )
        body = api_client(extractor).get('/api/fpl?action=period-scores').json()

        assert body['lastPeriodLeaderboard'] == []
        assert body['lastLoser'] is None
        assert body['forfeitHistory'] == []


class TestErrors:

    def test_invalid_action(self, api_client):
        extractor = FakeFPLExtractor()
        resp = api_client(extractor).get('/api/fpl', params={'action': 'transfers'})

        assert resp.status_code == 400
        body = resp.json()
        assert body['error_code'] == 'INVALID_ACTION'
        assert body['error'] == 'Invalid action'
        assert extractor.calls == []

    def test_missing_action(self, api_client):
        resp = api_client(FakeFPLExtractor()).get('/api/fpl')
        assert resp.status_code == 400

    def test_league_not_configured(self, api_client):
        extractor = FakeFPLExtractor()
        resp = api_client(extractor, league_id=None).get('/api/fpl?action=league-standings')

        assert resp.status_code == 500
        assert resp.json()['error_code'] == 'LEAGUE_NOT_CONFIGURED'
        assert resp.json()['status'] == 'not_configured'
        assert extractor.calls == []

    def test_standings_unavailable_for_period_scores(self, api_client, missing_standings_extractor):
        resp = api_client(missing_standings_extractor).get('/api/fpl?action=period-scores')

        assert resp.status_code == 502
        body = resp.json()
        assert body['error_code'] == 'STANDINGS_UNAVAILABLE'
        assert body['message'] == 'Failed to fetch league standings'

    def test_standings_failure_is_generic_for_league_standings(self, api_client, missing_standings_extractor):
        resp = api_client(missing_standings_extractor).get('/api/fpl?action=league-standings')

        assert resp.status_code == 500
        assert resp.json()['error_code'] == 'FETCH_FAILED'
        assert resp.json()['error'] == 'Failed to fetch FPL data'

    def test_unexpected_error_does_not_leak(self, api_client):
        class Exploding(FakeFPLExtractor):
            def get_current_gameweek(self):
                raise RuntimeError('secret internals')

        resp = api_client(Exploding()).get('/api/fpl?action=current-gameweek')

        assert resp.status_code == 500
        assert 'secret' not in resp.text
        assert resp.json()['message'] == 'Failed to fetch FPL data'

    def test_invalid_json_standings_is_upstream_error(self, api_client):
        extractor = FakeFPLExtractor(standings_error=InvalidResponseError('Invalid JSON from standings'))
        resp = api_client(extractor).get('/api/fpl?action=period-scores')

        assert resp.status_code == 502
        assert resp.json()['error_code'] == 'STANDINGS_UNAVAILABLE'


class TestLeagueServiceDependency:
    """Requests without an override build the service from the environment."""

    def test_league_id_read_per_call(self, monkeypatch):
        monkeypatch.setenv('FPL_LEAGUE_ID', '4242')
        assert get_league_service().league_id == 4242

        monkeypatch.setenv('FPL_LEAGUE_ID', '777')
        assert get_league_service().league_id == 777

    def test_blank_league_id_is_not_configured(self, monkeypatch):
        monkeypatch.setenv('FPL_LEAGUE_ID', '')
        app.dependency_overrides.clear()

        resp = TestClient(app).get('/api/fpl?action=league-standings')

        assert resp.status_code == 500
        assert resp.json()['error_code'] == 'LEAGUE_NOT_CONFIGURED'

    def test_invalid_league_id_is_generic_error(self, monkeypatch):
        monkeypatch.setenv('FPL_LEAGUE_ID', 'not-a-number')
        app.dependency_overrides.clear()

        resp = TestClient(app).get('/api/fpl?action=league-standings')

        assert resp.status_code == 500
        body = resp.json()
        assert body['error_code'] == 'FETCH_FAILED'
        assert 'not-a-number' not in resp.text


class TestServiceEndpoints:

    def test_health(self, api_client):
        resp = api_client(FakeFPLExtractor()).get('/health')
        assert resp.status_code == 200
        body = resp.json()
        assert body['status'] == 'healthy'
        assert body['fpl_circuit_open'] is False

    def test_ping(self, api_client):
        assert api_client(FakeFPLExtractor()).get('/ping').json() == {'message': 'Pong!'}

    def test_correlation_id_echoed(self, api_client):
        resp = api_client(FakeFPLExtractor()).get('/ping', headers={'X-Correlation-ID': 'abc-123'})
        assert resp.headers['X-Correlation-ID'] == 'abc-123'
