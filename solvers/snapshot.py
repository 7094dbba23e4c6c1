"""
solvers/snapshot.py

DFS с копией доски на каждом уровне.
Медленнее BacktrackingSolver, зато ничего не откатывает.
"""

import time
from typing import Optional

from .base import BaseSolver, SolverStats, Sequence
from core.board import TriangleBoard
from core.utils import SEQUENCE_LENGTH
from utils.error_handling import validate_position


class SnapshotSolver(BaseSolver):
    """
    Простой DFS без отката: каждый ход применяется к копии доски.

    Порядок перебора тот же, что у BacktrackingSolver (legal_hops()),
    поэтому первое найденное решение совпадает.
    """

    name = 'snapshot'

    def solve(self, empty_position: int) -> Optional[Sequence]:
        validate_position(empty_position)
        self.stats = SolverStats()

        board = TriangleBoard.initialize(empty_position)
        self._log(f"Starting snapshot DFS (empty={empty_position})")

        start = time.perf_counter()
        result = self._dfs(board, [])
        self.stats.time_elapsed = time.perf_counter() - start

        if result is None:
            self._log(f"No solution found. Stats: {self.stats}")
            return None

        self.stats.solution_length = len(result) // 2
        self._log(f"Solution found: {self.stats.solution_length} hops")
        return result

    def _dfs(self, board: TriangleBoard, path: Sequence) -> Optional[Sequence]:
        self.stats.nodes_visited += 1
        self.stats.max_depth = max(self.stats.max_depth, len(path) // 2)

        if len(path) == SEQUENCE_LENGTH:
            return path

        for row, col, dr, dc in board.legal_hops():
            self.stats.hops_tried += 1
            new_board = board.copy()
            new_board.apply_hop(row, col, dr, dc)
            move = [board.position_of(row, col), board.position_of(row + dr, col + dc)]
            result = self._dfs(new_board, path + move)
            if result is not None:
                return result
            self.stats.backtracks += 1

        return None
