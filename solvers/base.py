"""
solvers/base.py

Базовый класс для всех решателей.
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional
from dataclasses import dataclass

from utils.logging import get_logger

Sequence = List[int]


@dataclass
class SolverStats:
    """Статистика работы решателя."""
    nodes_visited: int = 0
    hops_tried: int = 0
    backtracks: int = 0
    max_depth: int = 0
    time_elapsed: float = 0.0
    solution_length: int = 0

    def __str__(self) -> str:
        return (
            f"Nodes: {self.nodes_visited}, "
            f"Hops: {self.hops_tried}, "
            f"Backtracks: {self.backtracks}, "
            f"Depth: {self.max_depth}, "
            f"Time: {self.time_elapsed:.3f}s"
        )


class BaseSolver(ABC):
    """
    Базовый класс решателя.

    Все решатели наследуют от него и реализуют метод solve().
    """

    name = 'base'

    def __init__(self, verbose: bool = False):
        self.verbose = verbose
        self.stats = SolverStats()
        self.logger = get_logger()

    @abstractmethod
    def solve(self, empty_position: int) -> Optional[Sequence]:
        """
        Решает головоломку.

        Args:
            empty_position: номер пустой лунки 1..15

        Returns:
            26 чисел (13 пар откуда/куда) или None, если решения нет

        Raises:
            InvalidInputError: если empty_position вне 1..15
        """
        pass

    def _log(self, message: str) -> None:
        """При verbose=True пишет в INFO, иначе в DEBUG."""
        level = logging.INFO if self.verbose else logging.DEBUG
        self.logger.logger.log(level, f"[{self.__class__.__name__}] {message}")
