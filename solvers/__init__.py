"""
solvers - Решатели треугольной доски

Экспортирует:
- BacktrackingSolver: DFS с откатом на одной доске (основной)
- SnapshotSolver: DFS с копией доски на каждом уровне
- solve: решение для одной стартовой позиции
- solve_all: решения для всех 15 стартовых позиций
"""

from typing import Dict, Optional

from .base import BaseSolver, SolverStats, Sequence
from .backtracking import BacktrackingSolver, solve
from .snapshot import SnapshotSolver
from core.utils import NUM_HOLES

SOLVERS = {
    'backtracking': BacktrackingSolver,
    'snapshot': SnapshotSolver,
}


def get_solver(name: str = 'backtracking', verbose: bool = False) -> BaseSolver:
    """Создаёт решатель по имени из SOLVERS."""
    try:
        solver_class = SOLVERS[name]
    except KeyError:
        raise ValueError(f"Unknown solver: {name!r}, expected one of {sorted(SOLVERS)}") from None
    return solver_class(verbose=verbose)


def solve_all(solver_name: str = 'backtracking') -> Dict[int, Optional[Sequence]]:
    """Решает доску для каждой стартовой пустой лунки 1..15."""
    solver = get_solver(solver_name)
    return {n: solver.solve(n) for n in range(1, NUM_HOLES + 1)}


__all__ = [
    'BaseSolver',
    'SolverStats',
    'BacktrackingSolver',
    'SnapshotSolver',
    'SOLVERS',
    'get_solver',
    'solve',
    'solve_all',
]
