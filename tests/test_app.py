import pytest

import queens.app as app_module
from queens.history_manager import GameHistory


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr(app_module, "history", GameHistory())
    app_module.app.config['TESTING'] = True
    with app_module.app.test_client() as client:
        yield client


def test_new_puzzle(client):
    response = client.get('/api/new_puzzle?size=6&seed=5')
    assert response.status_code == 200
    data = response.get_json()
    assert data['size'] == 6
    assert data['seed'] == 5
    assert len(data['regionGrid']) == 6
    assert len(data['fingerprint']) == 12
    assert client.get('/api/new_puzzle?size=6&seed=5').get_json() == data


def test_new_puzzle_defaults_to_eight(client):
    data = client.get('/api/new_puzzle?seed=1').get_json()
    assert data['size'] == 8
    assert data['difficulty'] == 'normal'


@pytest.mark.parametrize("query", ["size=99", "size=0", "size=abc", "size=6&strategy=voronoi", "size=6&difficulty=easy"])
def test_new_puzzle_bad_request(client, query):
    response = client.get(f'/api/new_puzzle?{query}')
    assert response.status_code == 400
    assert 'error' in response.get_json()


def test_new_puzzle_exhausted(client, monkeypatch):
    monkeypatch.setitem(app_module.app.config, 'MAX_GENERATION_ATTEMPTS', 5)
    response = client.get('/api/new_puzzle?size=3&seed=1')
    assert response.status_code == 503
    data = response.get_json()
    assert data['attempts'] == 5
    assert data['rejections'] == {'unsolvable': 5}


def test_check_winning_board(client, row_regions):
    player = [[0] * 6 for _ in range(6)]
    for r, c in enumerate([1, 3, 5, 0, 2, 4]):
        player[r][c] = 1
    response = client.post('/api/check', json={'regionGrid': row_regions(6), 'playerGrid': player})
    assert response.status_code == 200
    assert response.get_json() == {'isCorrect': True, 'conflicts': []}


def test_check_reports_conflicts(client, row_regions):
    player = [[0] * 4 for _ in range(4)]
    player[0][0] = player[1][1] = 1
    player[3][3] = 2
    data = client.post('/api/check', json={'regionGrid': row_regions(4), 'playerGrid': player}).get_json()
    assert data['isCorrect'] is False
    assert data['conflicts'] == [[0, 0], [1, 1]]


@pytest.mark.parametrize("payload", [
    {},
    {'regionGrid': [[0, 0], [0, 0]], 'playerGrid': [[0, 0], [0, 0]]},
    {'regionGrid': [[0, 0], [1, 1]], 'playerGrid': [[0, 0]]},
    {'regionGrid': [[0, 0], [1, 1]], 'playerGrid': [[0, 0], [0, 5]]},
])
def test_check_bad_request(client, payload):
    assert client.post('/api/check', json=payload).status_code == 400


def test_solve_unique_board(client, unique_4x4):
    data = client.post('/api/solve', json={'regionGrid': unique_4x4}).get_json()
    assert data['isUnique'] is True
    assert data['solution'] == [[0, 1, 0, 0], [0, 0, 0, 1], [1, 0, 0, 0], [0, 0, 1, 0]]


def test_solve_unsolvable_board(client, unsolvable_4x4):
    data = client.post('/api/solve', json={'regionGrid': unsolvable_4x4}).get_json()
    assert data == {'solution': None, 'isUnique': False}


def test_solve_bad_request(client):
    assert client.post('/api/solve', json={}).status_code == 400
    assert client.post('/api/solve', json={'regionGrid': [[0, 1], [0, 1], [0, 1]]}).status_code == 400


def test_history_round_trip(client):
    first = client.post('/api/history', json={'size': 6, 'elapsedSeconds': 40, 'fingerprint': 'ABCDEF012345', 'seed': 3})
    assert first.status_code == 200
    assert first.get_json()['previousGame'] is None
    assert first.get_json()['result']['gameNumber'] == 1

    second = client.post('/api/history', json={'size': 6, 'elapsedSeconds': 25.5, 'fingerprint': 'ABCDEF012345'})
    data = second.get_json()
    assert data['result']['gameNumber'] == 2
    assert data['previousGame']['gameNumber'] == 1

    results = client.get('/api/history?size=6').get_json()['results']
    assert [result['elapsedSeconds'] for result in results] == [25.5, 40]
    assert client.get('/api/history?size=7').get_json()['results'] == []


@pytest.mark.parametrize("payload", [
    {'size': 6, 'elapsedSeconds': 10},
    {'size': 6, 'elapsedSeconds': -1, 'fingerprint': 'ABCDEF012345'},
    {'elapsedSeconds': 10, 'fingerprint': 'ABCDEF012345'},
    {'size': 6, 'fingerprint': 'ABCDEF012345'},
    {'size': 6, 'elapsedSeconds': 'nan', 'fingerprint': 'ABCDEF012345'},
    {'size': 6, 'elapsedSeconds': 'inf', 'fingerprint': 'ABCDEF012345'},
    {'size': 6, 'elapsedSeconds': 'Infinity', 'fingerprint': 'ABCDEF012345'},
])
def test_history_bad_request(client, payload):
    assert client.post('/api/history', json=payload).status_code == 400


def test_history_rejected_times_are_not_stored(client):
    client.post('/api/history', json={'size': 6, 'elapsedSeconds': 'nan', 'fingerprint': 'ABCDEF012345'})
    client.post('/api/history', json={'size': 6, 'elapsedSeconds': 30, 'fingerprint': 'ABCDEF012345'})
    client.post('/api/history', json={'size': 6, 'elapsedSeconds': 10, 'fingerprint': 'ABCDEF012345'})
    results = client.get('/api/history?size=6').get_json()['results']
    assert [result['elapsedSeconds'] for result in results] == [10, 30]


def test_history_listing_internal_error(client, monkeypatch):
    def broken(size):
        raise RuntimeError("ledger unavailable")
    monkeypatch.setattr(app_module.history, "get_history", broken)
    response = client.get('/api/history?size=6')
    assert response.status_code == 500
    assert response.get_json() == {'error': 'An internal error occurred'}
