"""
web/app.py

Flask JSON API для решателя Cracker Barrel.
"""

import os
import sys
import time
from flask import Flask, request, jsonify

# Добавляем корень проекта в path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.utils import ROWS, DIRECTIONS, DIRECTION_NAMES, row_length, position_of, coords_of, midpoint
from solutions.verify import replay, sequence_to_moves, hop_direction
from solvers import SOLVERS, get_solver
from utils.error_handling import InvalidInputError, ValidationError
from utils.logging import get_logger

app = Flask(__name__)
logger = get_logger()


def move_to_dict(source: int, destination: int) -> dict:
    """Ход → {'from', 'over', 'to', 'direction'}."""
    dr, dc = hop_direction(source, destination)
    row, col = coords_of(source)
    return {
        'from': source,
        'over': position_of(*midpoint(row, col, dr, dc)),
        'to': destination,
        'direction': DIRECTION_NAMES[DIRECTIONS.index((dr, dc))],
    }


@app.route('/api/layout', methods=['GET'])
def layout():
    """Номера лунок по рядам, от дальнего края к вершине."""
    return jsonify({
        'rows': [[position_of(r, c) for c in range(row_length(r))] for r in range(ROWS)]
    })


@app.route('/api/solve', methods=['POST'])
def solve():
    """
    API для решения головоломки.

    Входные данные:
    {
        "empty": 5,                // номер пустой лунки
        "solver": "backtracking"   // тип решателя
    }
    """
    data = request.get_json(silent=True) or {}
    empty = data.get('empty')
    solver_type = data.get('solver', 'backtracking')

    if solver_type not in SOLVERS:
        return jsonify({'success': False, 'error': f'Unknown solver: {solver_type}'}), 400

    logger.info(f"Solve request: solver={solver_type}, empty={empty!r}")

    solver = get_solver(solver_type)
    start_time = time.time()
    try:
        sequence = solver.solve(empty)
    except InvalidInputError:
        return jsonify({'success': False, 'error': 'Invalid Input'}), 400
    elapsed = time.time() - start_time

    if sequence is None:
        return jsonify({
            'success': False,
            'error': 'Решение не найдено',
            'time': round(elapsed, 3),
            'solver': solver_type
        })

    moves = [move_to_dict(source, destination) for source, destination in sequence_to_moves(sequence)]

    return jsonify({
        'success': True,
        'sequence': sequence,
        'moves': moves,
        'move_count': len(moves),
        'time': round(elapsed, 3),
        'solver': solver_type
    })


@app.route('/api/validate', methods=['POST'])
def validate():
    """Проверка присланной последовательности ходов."""
    data = request.get_json(silent=True) or {}
    empty = data.get('empty')
    sequence = data.get('sequence') or []
    if not isinstance(sequence, list):
        return jsonify({'valid': False, 'error': 'sequence must be a list'}), 400

    try:
        board = replay(empty, sequence)
    except InvalidInputError:
        return jsonify({'valid': False, 'error': 'Invalid Input'}), 400
    except ValidationError as e:
        return jsonify({'valid': False, 'error': str(e), 'peg_count': None})

    peg_count = board.peg_count()
    return jsonify({
        'valid': peg_count == 1,
        'error': None if peg_count == 1 else f'{peg_count} pegs left',
        'peg_count': peg_count
    })


if __name__ == '__main__':
    print("=" * 50)
    print("Cracker Barrel Solver - JSON API")
    print("=" * 50)
    print("\nOpen http://localhost:5000/api/layout in your browser")
    print()

    app.run(debug=True, host='0.0.0.0', port=5000)
