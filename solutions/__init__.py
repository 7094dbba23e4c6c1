"""
solutions - Проверка решений.
"""

from .verify import sequence_to_moves, hop_direction, replay, verify_sequence

__all__ = [
    'sequence_to_moves',
    'hop_direction',
    'replay',
    'verify_sequence',
]
