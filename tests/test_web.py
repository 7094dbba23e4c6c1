"""
tests/test_web.py

Тесты Flask API (web/app.py).
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from web.app import app
from solvers import solve


@pytest.fixture
def client():
    app.config['TESTING'] = True
    with app.test_client() as client:
        yield client


def test_layout(client):
    response = client.get('/api/layout')

    assert response.status_code == 200
    assert response.get_json()['rows'][0] == [11, 12, 13, 14, 15]
    assert response.get_json()['rows'][-1] == [1]


def test_solve(client):
    response = client.post('/api/solve', json={'empty': 1})
    data = response.get_json()

    assert response.status_code == 200
    assert data['success'] is True
    assert data['move_count'] == 13
    assert len(data['sequence']) == 26
    assert data['moves'][0] == {'from': 4, 'over': 2, 'to': 1, 'direction': 'down-right'}
    assert data['solver'] == 'backtracking'


def test_solve_snapshot(client):
    response = client.post('/api/solve', json={'empty': 5, 'solver': 'snapshot'})
    data = response.get_json()

    assert data['success'] is True
    assert data['sequence'] == solve(5)


@pytest.mark.parametrize("payload", [{'empty': 0}, {'empty': 16}, {'empty': 'abc'}, {}])
def test_solve_invalid_input(client, payload):
    response = client.post('/api/solve', json=payload)

    assert response.status_code == 400
    assert response.get_json() == {'success': False, 'error': 'Invalid Input'}


def test_solve_unknown_solver(client):
    response = client.post('/api/solve', json={'empty': 1, 'solver': 'astar'})
    assert response.status_code == 400
    assert response.get_json()['success'] is False


def test_validate(client):
    sequence = solve(3)
    response = client.post('/api/validate', json={'empty': 3, 'sequence': sequence})
    data = response.get_json()

    assert data['valid'] is True
    assert data['error'] is None
    assert data['peg_count'] == 1


def test_validate_incomplete(client):
    response = client.post('/api/validate', json={'empty': 1, 'sequence': [4, 1]})
    data = response.get_json()

    assert data['valid'] is False
    assert data['peg_count'] == 13


def test_validate_illegal(client):
    response = client.post('/api/validate', json={'empty': 1, 'sequence': [1, 4]})
    data = response.get_json()

    assert data['valid'] is False
    assert 'illegal' in data['error']


def test_validate_invalid_start(client):
    response = client.post('/api/validate', json={'empty': 20, 'sequence': []})
    assert response.status_code == 400


def test_validate_sequence_not_list(client):
    response = client.post('/api/validate', json={'empty': 1, 'sequence': 'abc'})
    assert response.status_code == 400
