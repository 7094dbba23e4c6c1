"""
tests/test_main.py

Тесты CLI (main.py).
"""

import io
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import main


def test_main_solves_position(capsys):
    assert main.main(['1']) == 0

    out = capsys.readouterr().out
    assert "| 4  ->  1 |" in out
    assert out.count("| ") == 13


def test_main_invalid_input(capsys):
    assert main.main(['0']) == 1
    assert "Invalid Input!" in capsys.readouterr().out

    assert main.main(['abc']) == 1
    assert "Invalid Input!" in capsys.readouterr().out


def test_main_interactive(monkeypatch, capsys):
    """Без аргумента печатается схема и номер читается из stdin."""
    monkeypatch.setattr(sys, 'stdin', io.StringIO("5\n"))

    assert main.main([]) == 0

    out = capsys.readouterr().out
    assert "11  12  13  14  15" in out
    assert "Please enter the number where the peg is missing." in out
    assert "------------" in out


def test_main_interactive_invalid(monkeypatch, capsys):
    monkeypatch.setattr(sys, 'stdin', io.StringIO("\n"))

    assert main.main([]) == 1
    assert "Invalid Input!" in capsys.readouterr().out


def test_main_board_and_solver(capsys):
    assert main.main(['13', '--board', '--solver', 'snapshot']) == 0

    out = capsys.readouterr().out
    assert "○" in out
    assert "------------" in out


def test_main_unsolvable(monkeypatch, capsys):
    """Исчерпанный перебор — сообщение и код 1."""
    from core.board import TriangleBoard
    monkeypatch.setattr(
        TriangleBoard, 'initialize',
        classmethod(lambda cls, n: cls.from_positions([1, 2, 15]))
    )

    assert main.main(['1']) == 1
    assert "не найдено" in capsys.readouterr().out


def test_main_all(capsys):
    assert main.main(['--all']) == 0

    out = capsys.readouterr().out
    assert "решено 15 из 15" in out


def test_main_log_file(tmp_path, capsys):
    log_file = tmp_path / "solver.log"

    assert main.main(['2', '--log-file', str(log_file)]) == 0
    assert log_file.exists()
