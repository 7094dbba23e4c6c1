"""
peg_io/parser.py

Разбор ввода пользователя.
"""

import re

from utils.error_handling import InvalidInputError, validate_position

_NUMBER_RE = re.compile(r'^[+-]?\d+$')


def parse_position(text: str) -> int:
    """
    Парсит номер пустой лунки.

    Args:
        text: строка ввода, например " 5\\n"

    Returns:
        Номер лунки 1..15

    Raises:
        InvalidInputError: если это не целое число или оно вне 1..15
    """
    if text is None:
        raise InvalidInputError(text)

    text = text.strip()
    if not _NUMBER_RE.match(text):
        raise InvalidInputError(text)

    return validate_position(int(text))
