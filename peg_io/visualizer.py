"""
peg_io/visualizer.py

Визуализация доски и решений.
"""

from typing import List, Optional

from core.board import TriangleBoard
from core.utils import ROWS, row_length, position_of
from solutions.verify import sequence_to_moves

SEPARATOR = "-" * 12


def _render_rows(rows: List[List[str]]) -> str:
    """Ряды ячеек → треугольник, каждый следующий ряд сдвинут на 2 пробела."""
    lines = []
    for r, row in enumerate(rows):
        cells = "  ".join(f"{cell:<2}" for cell in row)
        lines.append((" " * (2 * r) + cells).rstrip())
    return "\n".join(lines)


def format_layout() -> str:
    """
    Схема нумерации лунок:

        11  12  13  14  15
          7   8   9   10
            4   5   6
              2   3
                1
    """
    return _render_rows([
        [str(position_of(r, c)) for c in range(row_length(r))]
        for r in range(ROWS)
    ])


def display_board(board: TriangleBoard) -> str:
    """Та же схема, но с символами колышков и пустых лунок."""
    return _render_rows(board.to_matrix())


def format_sequence(sequence: List[int]) -> str:
    """
    Форматирует решение рамкой:

        ------------
        | 4  ->  1 |
        ------------
    """
    lines = [SEPARATOR]
    for source, destination in sequence_to_moves(sequence):
        lines.append(f"| {source:<2} -> {destination:>2} |")
        lines.append(SEPARATOR)
    return "\n".join(lines)


def format_result(sequence: Optional[List[int]], empty_position: Optional[int] = None) -> str:
    """Рамка с ходами или сообщение об отсутствии решения."""
    if not sequence:
        if empty_position is None:
            return "❌ Решение не найдено"
        return f"❌ Решение не найдено (пустая лунка {empty_position})"
    return format_sequence(sequence)
