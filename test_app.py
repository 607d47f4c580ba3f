#!/usr/bin/env python3

import gzip

import pytest

from app import create_app


def write_gz(path, lines):
    with gzip.open(path, 'wt', encoding='utf-8') as f:
        f.write('\n'.join(lines) + '\n')


@pytest.fixture
def log_dir(tmp_path):
    logs = tmp_path / "logs"
    logs.mkdir()
    write_gz(logs / "2022-03-29-1.log.gz", [
        "[10:00:00] [Server]: Alice joined the game",
        "[10:30:00] [Server]: Alice left the game",
        "[11:00:00] [Server]: Alice joined the game",
        "[11:05:00] [Server]: Alice left the game",
        "[12:00:00] [Server]: Bob joined the game",
    ])
    return logs


@pytest.fixture
def client(log_dir):
    app = create_app('testing', toml_config={'logs': {'directory': str(log_dir), 'workers': 2}})
    return app.test_client()


def test_players_api(client):
    response = client.get('/api/players')
    assert response.status_code == 200

    data = response.get_json()
    assert data['player_count'] == 2
    alice = data['players'][0]
    assert alice['name'] == 'Alice'
    assert alice['total_time'] == '00:35:00'
    assert [s['duration'] for s in alice['days'][0]['sessions']] == ['00:30:00', '00:05:00']


def test_single_player_and_unknown_player(client):
    response = client.get('/api/players/Bob')
    assert response.status_code == 200
    assert response.get_json()['session_count'] == 0

    response = client.get('/api/players/Nobody')
    assert response.status_code == 404
    assert response.get_json()['success'] is False


def test_text_report(client):
    response = client.get('/api/report')
    assert response.status_code == 200
    assert response.mimetype == 'text/plain'
    assert "Alice: total time = 00:35:00" in response.get_data(as_text=True)


def test_index_page(client):
    response = client.get('/')
    assert response.status_code == 200
    assert b"Alice" in response.data


def test_rescan_picks_up_new_files(client, log_dir):
    assert client.get('/api/players').get_json()['player_count'] == 2

    write_gz(log_dir / "2022-03-30-1.log.gz", [
        "[09:00:00] [Server]: Carol joined the game",
        "[09:10:00] [Server]: Carol left the game",
    ])
    response = client.post('/api/rescan')
    assert response.status_code == 200
    assert response.get_json()['player_count'] == 3


def test_missing_log_directory_is_reported(tmp_path):
    app = create_app('testing', toml_config={'logs': {'directory': str(tmp_path / 'missing')}})
    response = app.test_client().get('/api/players')

    assert response.status_code == 500
    assert 'does not exist' in response.get_json()['error']


def test_unknown_api_route_returns_json(client):
    response = client.get('/api/nothing-here')
    assert response.status_code == 404
    assert response.get_json() == {'error': 'Not found'}
