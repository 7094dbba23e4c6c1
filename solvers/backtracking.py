"""
solvers/backtracking.py

Поиск в глубину с возвратом на одной изменяемой доске.
"""

import time
from typing import Optional

from .base import BaseSolver, SolverStats, Sequence
from core.board import TriangleBoard
from core.utils import DIRECTIONS, SEQUENCE_LENGTH
from utils.error_handling import validate_position


class BacktrackingSolver(BaseSolver):
    """
    Полный перебор прыжков с откатом.

    Особенности:
    - одна доска на весь поиск, ход делается и откатывается на месте
    - колышки перебираются в порядке обхода, направления — в порядке DIRECTIONS
    - возвращается первое найденное решение
    - без мемоизации и эвристик
    """

    name = 'backtracking'

    def solve(self, empty_position: int) -> Optional[Sequence]:
        """
        Ищет последовательность из 13 прыжков до одного колышка.

        Returns:
            Список из 26 номеров лунок (откуда, куда, откуда, куда, ...)
            или None, если перебор исчерпан

        Raises:
            InvalidInputError: если empty_position вне 1..15
        """
        validate_position(empty_position)
        self.stats = SolverStats()

        board = TriangleBoard.initialize(empty_position)
        self._log(f"Starting backtracking search (empty={empty_position})")

        start = time.perf_counter()
        sequence = self.search(board, [])
        self.stats.time_elapsed = time.perf_counter() - start

        if len(sequence) != SEQUENCE_LENGTH:
            self._log(f"No solution found. Stats: {self.stats}")
            return None

        self.stats.solution_length = len(sequence) // 2
        self._log(f"Solution found: {self.stats.solution_length} hops. Stats: {self.stats}")
        return sequence

    def search(self, board: TriangleBoard, sequence: Sequence) -> Sequence:
        """
        Рекурсивный шаг поиска.

        Дописывает ходы в sequence и возвращает его. Если решение не
        найдено, sequence и board возвращаются в исходное состояние.
        """
        self.stats.nodes_visited += 1
        self.stats.max_depth = max(self.stats.max_depth, len(sequence) // 2)

        if len(sequence) == SEQUENCE_LENGTH:
            return sequence

        # Снимок колышков на входе: ниже доска меняется
        for row, col in board.occupied_holes():
            for dr, dc in DIRECTIONS:
                if not board.can_hop(row, col, dr, dc):
                    continue

                self.stats.hops_tried += 1
                board.apply_hop(row, col, dr, dc)
                sequence.append(board.position_of(row, col))
                sequence.append(board.position_of(row + dr, col + dc))

                self.search(board, sequence)
                if len(sequence) == SEQUENCE_LENGTH:
                    return sequence

                board.revert_hop(row, col, dr, dc)
                del sequence[-2:]
                self.stats.backtracks += 1

        return sequence


def solve(empty_position: int) -> Optional[Sequence]:
    """Решает доску с пустой лункой empty_position."""
    return BacktrackingSolver().solve(empty_position)
