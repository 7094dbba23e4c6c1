"""
tests/test_verify.py

Тесты для проверки решений (solutions/verify.py).
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from solutions.verify import sequence_to_moves, hop_direction, replay, verify_sequence
from solvers import solve
from utils.error_handling import ValidationError, InvalidInputError


def test_sequence_to_moves():
    assert sequence_to_moves([4, 1, 6, 4]) == [(4, 1), (6, 4)]
    assert sequence_to_moves([]) == []


def test_sequence_to_moves_odd_length():
    with pytest.raises(ValidationError):
        sequence_to_moves([4, 1, 6])


def test_hop_direction():
    """Направление восстанавливается через координаты, а не разность номеров."""
    assert hop_direction(4, 1) == (2, 0)      # вниз-вправо
    assert hop_direction(1, 4) == (-2, 0)     # вверх-влево
    assert hop_direction(6, 1) == (2, -2)     # вниз-влево
    assert hop_direction(11, 13) == (0, 2)    # вправо
    assert hop_direction(6, 15) == (-2, 2)    # вверх-вправо
    assert hop_direction(4, 6) == (0, 2)      # вправо


@pytest.mark.parametrize("source,destination", [
    (2, 3),    # соседние лунки
    (1, 5),    # не по прямой
    (4, 12),   # два ряда вверх, но со сдвигом на одну лунку
])
def test_hop_direction_rejects_non_hops(source, destination):
    with pytest.raises(ValidationError):
        hop_direction(source, destination)


@pytest.mark.parametrize("source,destination", [(0, 4), (4, 16), ("4", 1)])
def test_hop_direction_out_of_range(source, destination):
    with pytest.raises(ValidationError):
        hop_direction(source, destination)


def test_replay_partial():
    board = replay(1, [4, 1, 6, 4])
    assert board.peg_count() == 12
    assert sorted(board.occupied_positions()) == [1, 3, 4, 7, 8, 9, 10, 11, 12, 13, 14, 15]


def test_replay_illegal_hop():
    """Прыжок в занятую лунку — ошибка с номером хода."""
    with pytest.raises(ValidationError, match="Hop 2"):
        replay(1, [4, 1, 4, 1])


def test_replay_invalid_start():
    with pytest.raises(InvalidInputError):
        replay(0, [])


def test_verify_valid_solution():
    sequence = solve(7)
    assert verify_sequence(7, sequence) is True


def test_verify_rejects_wrong_start():
    """Решение для одной стартовой лунки не подходит для другой."""
    sequence = solve(1)
    assert verify_sequence(11, sequence) is False


def test_verify_rejects_tampered_solution():
    sequence = solve(1)
    tampered = sequence[:]
    tampered[0], tampered[1] = tampered[1], tampered[0]
    assert verify_sequence(1, tampered) is False


def test_verify_rejects_incomplete_solution():
    """Неполная последовательность оставляет больше одного колышка."""
    sequence = solve(1)
    assert verify_sequence(1, sequence[:-2]) is False
    assert verify_sequence(1, []) is False


def test_verify_rejects_garbage():
    assert verify_sequence(1, [4, 1, 99, 2]) is False
    assert verify_sequence(1, [4]) is False
    assert verify_sequence(16, []) is False
