"""
peg_io - Ввод/вывод для треугольной доски

Экспортирует:
- Парсинг номера пустой лунки
- Схему доски и форматирование решения
"""

from .parser import parse_position
from .visualizer import format_layout, display_board, format_sequence, format_result

__all__ = [
    'parse_position',
    'format_layout',
    'display_board',
    'format_sequence',
    'format_result',
]
