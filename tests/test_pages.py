"""Tests for the rendered leaderboard and forfeit pages."""

from conftest import FakeFPLExtractor
from services.sample_data import sample_fpl_data


class TestLeaderboardPage:

    def test_renders_live_data(self, api_client, four_team_extractor):
        resp = api_client(four_team_extractor).get('/')

        assert resp.status_code == 200
        assert 'text/html' in resp.headers['content-type']
        html = resp.text
        assert 'Test League' in html
        assert 'Gameweek 7' in html
        assert 'Ghost Chilli' in html
        assert 'Showing sample data' not in html
        # Lowest scorer is listed first
        positions = [html.index(f'<td>{name}</td>') for name in ('Paul', 'Ro', 'Mike', 'John')]
        assert positions == sorted(positions)

    def test_auto_refresh(self, api_client, four_team_extractor):
        html = api_client(four_team_extractor).get('/').text
        assert 'http-equiv="refresh" content="300"' in html

    def test_falls_back_to_sample_data(self, api_client, missing_standings_extractor):
        resp = api_client(missing_standings_extractor).get('/')

        assert resp.status_code == 200
        assert 'Unable to fetch live FPL data' in resp.text
        assert 'Sample League' in resp.text

    def test_not_configured_falls_back(self, api_client):
        resp = api_client(FakeFPLExtractor(), league_id=None).get('/')
        assert resp.status_code == 200
        assert 'Showing sample data' in resp.text


class TestForfeitsPage:

    def test_lists_all_forfeits_and_history(self, api_client, four_team_extractor):
        resp = api_client(four_team_extractor).get('/forfeits')

        assert resp.status_code == 200
        html = resp.text
        assert 'Stare at wall' in html
        assert 'Depressing Meal' in html
        assert '33-38' in html
        assert 'John' in html

    def test_no_history_in_first_period(self, api_client):
        resp = api_client(FakeFPLExtractor(gameweek=2)).get('/forfeits')
        assert 'No periods completed yet.' in resp.text


class TestSampleData:

    def test_sample_leaderboards_are_ascending(self):
        data = sample_fpl_data()
        current = [t.current_period_score for t in data.current_period_leaderboard]
        last = [t.last_period_score for t in data.last_period_leaderboard]
        assert current == sorted(current)
        assert last == sorted(last)
        assert data.last_loser == data.last_period_leaderboard[0].player_name == 'Paul'

    def test_sample_is_a_fresh_copy(self):
        first = sample_fpl_data()
        first.current_period_leaderboard[0].current_period_score = 999
        assert sample_fpl_data().current_period_leaderboard[0].current_period_score == 120
