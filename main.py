#!/usr/bin/env python3
"""
main.py

Точка входа для решателя Cracker Barrel.

Использование:
    python main.py                  # спросить номер пустой лунки
    python main.py 5                # пустая лунка 5
    python main.py 5 --board        # показать стартовую доску
    python main.py --all            # все 15 стартовых позиций
    python main.py 1 -s snapshot    # выбор решателя
"""

import sys
import argparse
import logging
import time

from core.board import TriangleBoard
from core.utils import NUM_HOLES
from peg_io import parse_position, format_layout, display_board, format_result
from solutions.verify import verify_sequence
from solvers import SOLVERS, get_solver, solve_all
from utils.error_handling import InvalidInputError
from utils.logging import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Cracker Barrel Peg Solitaire Solver',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"Нумерация лунок:\n\n{format_layout()}\n"
    )
    parser.add_argument(
        'position', nargs='?',
        help='Номер пустой лунки (1-15). Если не указан, будет запрошен'
    )
    parser.add_argument(
        '--solver', '-s', choices=list(SOLVERS.keys()),
        default='backtracking', help='Выбор решателя (default: backtracking)'
    )
    parser.add_argument(
        '--all', action='store_true',
        help='Решить для каждой стартовой позиции'
    )
    parser.add_argument(
        '--board', action='store_true',
        help='Показать стартовую доску'
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true',
        help='Подробный лог (DEBUG)'
    )
    parser.add_argument(
        '--log-file',
        help='Дополнительно писать лог в файл'
    )
    return parser


def read_position(stream=None) -> str:
    """Печатает схему и читает номер пустой лунки."""
    stream = stream or sys.stdin
    print(format_layout())
    print("\nPlease enter the number where the peg is missing.")
    return stream.readline()


def run_single(text: str, solver_name: str, show_board: bool, verbose: bool) -> int:
    try:
        position = parse_position(text)
    except InvalidInputError:
        print("Invalid Input!")
        return 1

    if show_board:
        print(display_board(TriangleBoard.initialize(position)))
        print()

    solver = get_solver(solver_name, verbose=verbose)
    sequence = solver.solve(position)
    print(format_result(sequence, position))

    if verbose:
        print(f"\n📊 Статистика: {solver.stats}")

    return 0 if sequence else 1


def run_all(solver_name: str) -> int:
    start = time.perf_counter()
    results = solve_all(solver_name)
    elapsed = time.perf_counter() - start

    print(f"{'Пусто':>5} | {'Статус':<8} | Первый ход")
    print("-" * 32)
    failed = 0
    for position in range(1, NUM_HOLES + 1):
        sequence = results[position]
        if sequence and verify_sequence(position, sequence):
            print(f"{position:>5} | {'OK':<8} | {sequence[0]} -> {sequence[1]}")
        else:
            failed += 1
            print(f"{position:>5} | {'НЕТ':<8} |")

    print(f"\n⏱ Время: {elapsed:.3f}с, решено {NUM_HOLES - failed} из {NUM_HOLES}")
    return 0 if failed == 0 else 1


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING, args.log_file)

    if args.all:
        return run_all(args.solver)

    text = args.position if args.position is not None else read_position()
    return run_single(text, args.solver, args.board, args.verbose)


if __name__ == "__main__":
    sys.exit(main())
