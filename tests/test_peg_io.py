"""
tests/test_peg_io.py

Тесты для парсинга ввода и вывода доски/решения.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from core.board import TriangleBoard
from peg_io import parse_position, format_layout, display_board, format_sequence, format_result
from utils.error_handling import InvalidInputError


def test_format_layout():
    assert format_layout() == "\n".join([
        "11  12  13  14  15",
        "  7   8   9   10",
        "    4   5   6",
        "      2   3",
        "        1",
    ])


def test_display_board():
    text = display_board(TriangleBoard.initialize(1))
    lines = text.split("\n")

    assert lines[0] == "●   ●   ●   ●   ●"
    assert lines[4] == "        ○"
    assert text.count("○") == 1


def test_format_sequence():
    assert format_sequence([4, 1, 13, 4]) == "\n".join([
        "------------",
        "| 4  ->  1 |",
        "------------",
        "| 13 ->  4 |",
        "------------",
    ])


def test_format_result_no_solution():
    assert "не найдено" in format_result(None)
    assert "5" in format_result(None, 5)


def test_format_result_solution():
    assert format_result([4, 1]).startswith("------------")


@pytest.mark.parametrize("text,expected", [
    ("1", 1),
    (" 15\n", 15),
    ("+7", 7),
])
def test_parse_position(text, expected):
    assert parse_position(text) == expected


@pytest.mark.parametrize("text", ["0", "16", "-1", "abc", "", "4.5", "1 2", None])
def test_parse_position_invalid(text):
    with pytest.raises(InvalidInputError):
        parse_position(text)
