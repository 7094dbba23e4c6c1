"""
core - Треугольная доска Cracker Barrel

Базовые структуры данных и геометрия.
"""

from .board import TriangleBoard
from .utils import (
    ROWS, NUM_HOLES, SOLUTION_MOVES, SEQUENCE_LENGTH, ROW_OFFSETS,
    DIRECTIONS, DIRECTION_NAMES, PEG, HOLE,
    is_on_board, is_valid_position, position_of, coords_of, all_coords, midpoint
)

__all__ = [
    'TriangleBoard',
    'ROWS', 'NUM_HOLES', 'SOLUTION_MOVES', 'SEQUENCE_LENGTH', 'ROW_OFFSETS',
    'DIRECTIONS', 'DIRECTION_NAMES', 'PEG', 'HOLE',
    'is_on_board', 'is_valid_position', 'position_of', 'coords_of',
    'all_coords', 'midpoint'
]
