"""
core/utils.py

Геометрия треугольной доски: константы и перевод координат.

Нумерация лунок:

    11 12 13 14 15
      7  8  9 10
        4  5  6
          2  3
            1

Ряд 0 — дальний край (5 лунок), ряд 4 — вершина (1 лунка).
"""

from typing import List, Tuple

from utils.error_handling import InvalidInputError

Coords = Tuple[int, int]

ROWS = 5
NUM_HOLES = 15
SOLUTION_MOVES = NUM_HOLES - 2           # 14 колышков -> 1
SEQUENCE_LENGTH = 2 * SOLUTION_MOVES     # пары (откуда, куда) подряд

# Номер первой лунки каждого ряда
ROW_OFFSETS: Tuple[int, ...] = (11, 7, 4, 2, 1)

# Вверх-влево, вверх-вправо, вниз-вправо, вниз-влево, влево, вправо.
# Смещение цели прыжка; середина — половина смещения.
DIRECTIONS: List[Coords] = [(-2, 0), (-2, 2), (2, 0), (2, -2), (0, -2), (0, 2)]
DIRECTION_NAMES = ('up-left', 'up-right', 'down-right', 'down-left', 'left', 'right')

# Символы для отображения
PEG = '●'
HOLE = '○'


def row_length(row: int) -> int:
    return ROWS - row


def is_on_board(row: int, col: int) -> bool:
    """Проверяет, что (row, col) лежит внутри треугольника."""
    return 0 <= row < ROWS and 0 <= col < ROWS - row


def is_valid_position(position: int) -> bool:
    return 1 <= position <= NUM_HOLES


def position_of(row: int, col: int) -> int:
    """(row, col) → номер лунки 1..15."""
    if row == ROWS - 1:
        return 1
    return ROW_OFFSETS[row] + col


def coords_of(position: int) -> Coords:
    """Номер лунки 1..15 → (row, col)."""
    if not isinstance(position, int) or not is_valid_position(position):
        raise InvalidInputError(position)
    for row, offset in enumerate(ROW_OFFSETS):
        if position >= offset:
            return row, position - offset
    raise AssertionError("unreachable")


def all_coords() -> List[Coords]:
    """Все лунки в порядке обхода: ряды 0→4, внутри ряда слева направо."""
    return [(r, c) for r in range(ROWS) for c in range(row_length(r))]


def midpoint(row: int, col: int, dr: int, dc: int) -> Coords:
    """Лунка, через которую прыгает колышек из (row, col) на (dr, dc)."""
    return row + dr // 2, col + dc // 2
