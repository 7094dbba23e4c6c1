"""
utils/error_handling.py

Исключения решателя и обработка ошибок.
"""

from typing import Any

from .logging import get_logger


class SolverError(Exception):
    """Базовое исключение для решателей."""
    pass


class InvalidInputError(SolverError, ValueError):
    """Номер пустой лунки вне диапазона 1..15 (или вовсе не число)."""

    def __init__(self, value: Any = None, message: str = "Invalid Input"):
        self.value = value
        if value is not None:
            message = f"{message}: {value!r}"
        super().__init__(message)


class ValidationError(SolverError):
    """Последовательность ходов не проходит проверку."""
    pass


def validate_position(position: Any, low: int = 1, high: int = 15) -> int:
    """
    Проверяет номер лунки.

    Args:
        position: номер лунки
        low, high: допустимый диапазон (включительно)

    Returns:
        position как int

    Raises:
        InvalidInputError: если это не целое число или оно вне диапазона
    """
    # bool — подкласс int, но номером лунки не является
    if isinstance(position, bool) or not isinstance(position, int):
        raise InvalidInputError(position)
    if not low <= position <= high:
        raise InvalidInputError(position)
    return position


def safe_solve(solver, empty_position: Any, default: Any = None):
    """
    Выполняет solver.solve() и возвращает default вместо SolverError.

    Args:
        solver: решатель
        empty_position: номер пустой лунки
        default: значение при ошибке

    Returns:
        Решение или default
    """
    try:
        return solver.solve(empty_position)
    except SolverError as e:
        get_logger().error(f"Ошибка решателя {solver.__class__.__name__}: {e}")
        return default
