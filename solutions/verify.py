"""
solutions/verify.py

Проверка последовательности ходов повтором на свежей доске.
"""

from typing import List, Tuple

from core.board import TriangleBoard
from core.utils import DIRECTIONS, coords_of, is_valid_position
from utils.error_handling import InvalidInputError, ValidationError


Move = Tuple[int, int]


def sequence_to_moves(sequence: List[int]) -> List[Move]:
    """[11, 4, 2, 7, ...] → [(11, 4), (2, 7), ...]."""
    if len(sequence) % 2:
        raise ValidationError(f"Sequence has odd length {len(sequence)}")
    return list(zip(sequence[0::2], sequence[1::2]))


def hop_direction(source: int, destination: int) -> Tuple[int, int]:
    """
    Восстанавливает направление прыжка по номерам лунок через координаты.

    Raises:
        ValidationError: если лунки не разделены ровно одним прыжком
    """
    for position in (source, destination):
        if not isinstance(position, int) or not is_valid_position(position):
            raise ValidationError(f"Position out of range: {position!r}")

    src_r, src_c = coords_of(source)
    dst_r, dst_c = coords_of(destination)
    delta = (dst_r - src_r, dst_c - src_c)
    if delta not in DIRECTIONS:
        raise ValidationError(f"{source} -> {destination} is not a two-step hop")
    return delta


def replay(empty_position: int, sequence: List[int]) -> TriangleBoard:
    """
    Повторяет ходы на доске с пустой лункой empty_position.

    Returns:
        Доска после последнего хода

    Raises:
        InvalidInputError: если empty_position вне 1..15
        ValidationError: на первом недопустимом ходе
    """
    board = TriangleBoard.initialize(empty_position)

    for step, (source, destination) in enumerate(sequence_to_moves(sequence), 1):
        dr, dc = hop_direction(source, destination)
        row, col = coords_of(source)
        if not board.can_hop(row, col, dr, dc):
            raise ValidationError(f"Hop {step} ({source} -> {destination}) is illegal")
        board.apply_hop(row, col, dr, dc)

    return board


def verify_sequence(empty_position: int, sequence: List[int]) -> bool:
    """
    Проверяет решение.

    Правила:
    - каждый ход — прыжок в одном из шести направлений;
    - из занятой лунки через занятую в пустую;
    - после всех ходов остаётся ровно один колышек.
    """
    try:
        board = replay(empty_position, sequence)
    except (ValidationError, InvalidInputError):
        return False
    return board.peg_count() == 1
