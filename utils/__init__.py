"""
utils - Логирование и обработка ошибок.
"""

from .logging import SolverLogger, get_logger, configure_logging
from .error_handling import (
    SolverError, InvalidInputError, ValidationError,
    validate_position, safe_solve
)

__all__ = [
    'SolverLogger', 'get_logger', 'configure_logging',
    'SolverError', 'InvalidInputError', 'ValidationError',
    'validate_position', 'safe_solve',
]
