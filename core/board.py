"""
core/board.py

Изменяемая треугольная доска на 15 лунок.
"""

from typing import List, Tuple

from .utils import (
    ROWS, DIRECTIONS, PEG, HOLE, Coords,
    row_length, is_on_board, position_of, coords_of, all_coords, midpoint
)
from utils.error_handling import validate_position

Hop = Tuple[int, int, int, int]


class TriangleBoard:
    """
    Занятость лунок треугольника: ряды длиной 5, 4, 3, 2, 1.

    True — колышек, False — пусто. Доска меняется на месте:
    apply_hop() и revert_hop() строго обратны друг другу, поэтому
    поиск с возвратом работает с одним экземпляром без копирования.
    """
    __slots__ = ('rows',)

    def __init__(self, rows: List[List[bool]]):
        if len(rows) != ROWS or any(len(row) != row_length(r) for r, row in enumerate(rows)):
            raise ValueError("Board must have rows of lengths 5, 4, 3, 2, 1")
        self.rows = rows

    @classmethod
    def full(cls) -> 'TriangleBoard':
        """Все 15 лунок заняты."""
        return cls([[True] * row_length(r) for r in range(ROWS)])

    @classmethod
    def initialize(cls, empty_position: int) -> 'TriangleBoard':
        """
        Стартовая позиция: 14 колышков и одна пустая лунка.

        Raises:
            InvalidInputError: если empty_position вне 1..15
        """
        validate_position(empty_position)
        board = cls.full()
        row, col = coords_of(empty_position)
        board.set_occupied(row, col, False)
        return board

    @classmethod
    def from_positions(cls, positions) -> 'TriangleBoard':
        """Доска, где колышки стоят ровно в перечисленных лунках."""
        board = cls([[False] * row_length(r) for r in range(ROWS)])
        for position in positions:
            row, col = coords_of(position)
            board.set_occupied(row, col, True)
        return board

    def is_occupied(self, row: int, col: int) -> bool:
        return self.rows[row][col]

    def set_occupied(self, row: int, col: int, value: bool) -> None:
        self.rows[row][col] = value

    @staticmethod
    def position_of(row: int, col: int) -> int:
        return position_of(row, col)

    def occupied_holes(self) -> List[Coords]:
        """Координаты всех колышков в порядке обхода (каждый вызов — новый список)."""
        return [(r, c) for r, c in all_coords() if self.rows[r][c]]

    def occupied_positions(self) -> List[int]:
        return [position_of(r, c) for r, c in self.occupied_holes()]

    def peg_count(self) -> int:
        return sum(sum(row) for row in self.rows)

    def can_hop(self, row: int, col: int, dr: int, dc: int) -> bool:
        """Допустим ли прыжок из (row, col) со смещением (dr, dc)."""
        to_r, to_c = row + dr, col + dc
        if not is_on_board(to_r, to_c):
            return False
        mid_r, mid_c = midpoint(row, col, dr, dc)
        return (
            self.rows[row][col] and
            self.rows[mid_r][mid_c] and
            not self.rows[to_r][to_c]
        )

    def apply_hop(self, row: int, col: int, dr: int, dc: int) -> None:
        """Делает прыжок: цель занята, середина и источник освобождены."""
        mid_r, mid_c = midpoint(row, col, dr, dc)
        self.rows[row + dr][col + dc] = True
        self.rows[mid_r][mid_c] = False
        self.rows[row][col] = False

    def revert_hop(self, row: int, col: int, dr: int, dc: int) -> None:
        """Отменяет apply_hop() с теми же аргументами."""
        mid_r, mid_c = midpoint(row, col, dr, dc)
        self.rows[row + dr][col + dc] = False
        self.rows[mid_r][mid_c] = True
        self.rows[row][col] = True

    def legal_hops(self) -> List[Hop]:
        """Все допустимые прыжки (row, col, dr, dc) в порядке перебора решателя."""
        return [
            (r, c, dr, dc)
            for r, c in self.occupied_holes()
            for dr, dc in DIRECTIONS
            if self.can_hop(r, c, dr, dc)
        ]

    def copy(self) -> 'TriangleBoard':
        return TriangleBoard([list(row) for row in self.rows])

    def to_matrix(self) -> List[List[str]]:
        """Ряды символов PEG/HOLE для вывода."""
        return [[PEG if cell else HOLE for cell in row] for row in self.rows]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TriangleBoard):
            return NotImplemented
        return self.rows == other.rows

    def __repr__(self) -> str:
        return f"TriangleBoard({self.peg_count()} pegs)"
