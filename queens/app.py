# --- File: queens/app.py ---
import logging

from flask import Flask, jsonify, request
from flask_cors import CORS

# Use absolute imports from the 'queens' package.
from queens import constants as const
from queens import puzzle_handler as pz
from queens.errors import GenerationExhausted, InvalidPartition, OutOfRange
from queens.game_state import PuzzleGameState
from queens.history_manager import GameHistory
from queens.partition import RegionPartition
from queens.z3_solver import Z3QueensSolver, format_duration

app = Flask(__name__)
CORS(app)

app.config.update(
    DIFFICULTY_MODE=const.DEFAULT_DIFFICULTY_MODE,
    STRATEGY=const.DEFAULT_STRATEGY,
    MAX_GENERATION_ATTEMPTS=const.MAX_GENERATION_ATTEMPTS,
    REQUIRE_UNIQUE=False,
)
# QUEENS_DIFFICULTY_MODE, QUEENS_MAX_GENERATION_ATTEMPTS, ... override the defaults.
app.config.from_prefixed_env("QUEENS")

history = GameHistory()


def _bad_request(message):
    return jsonify({'error': message}), 400


def _parse_size(value):
    size = int(value)
    if not const.MIN_BOARD_SIZE <= size <= const.MAX_BOARD_SIZE:
        raise ValueError(f"Board size must be between {const.MIN_BOARD_SIZE} and {const.MAX_BOARD_SIZE}.")
    return size


@app.route('/api/new_puzzle', methods=['GET'])
def get_new_puzzle():
    try:
        size = _parse_size(request.args.get('size', const.DEFAULT_BOARD_SIZE))
        seed = request.args.get('seed')
        puzzle = pz.generate_puzzle(
            size,
            seed=int(seed) if seed not in (None, '') else None,
            strategy=request.args.get('strategy', app.config['STRATEGY']),
            difficulty_mode=request.args.get('difficulty', app.config['DIFFICULTY_MODE']),
            max_attempts=int(app.config['MAX_GENERATION_ATTEMPTS']),
            require_unique=bool(app.config['REQUIRE_UNIQUE']),
        )
        return jsonify(puzzle.to_dict())
    except GenerationExhausted as e:
        return jsonify({'error': str(e), 'attempts': e.attempts, 'rejections': dict(e.rejections)}), 503
    except ValueError as e:
        return _bad_request(str(e))
    except Exception:
        logging.exception("Error in /api/new_puzzle")
        return jsonify({'error': 'An internal error occurred'}), 500


@app.route('/api/check', methods=['POST'])
def check_solution():
    try:
        data = request.get_json(silent=True) or {}
        region_grid, player_grid = data.get('regionGrid'), data.get('playerGrid')
        if not region_grid or not player_grid:
            return _bad_request('Missing regionGrid or playerGrid in request')
        state = PuzzleGameState(region_grid)
        if len(player_grid) != state.board_size:
            return _bad_request('playerGrid does not match the size of regionGrid')
        for r, row in enumerate(player_grid):
            if len(row) != state.board_size:
                return _bad_request('playerGrid does not match the size of regionGrid')
            for c, cell in enumerate(row):
                state.set_cell(r, c, cell)
        return jsonify({
            'isCorrect': state.check_win(),
            'conflicts': [[r, c] for r, c in state.conflicting_queens()],
        })
    except (InvalidPartition, OutOfRange, ValueError, TypeError) as e:
        return _bad_request(str(e))
    except Exception:
        logging.exception("Error in /api/check")
        return jsonify({'error': 'An internal error occurred'}), 500


@app.route('/api/solve', methods=['POST'])
def find_solution():
    try:
        data = request.get_json(silent=True) or {}
        region_grid = data.get('regionGrid')
        if not region_grid:
            return _bad_request('Missing regionGrid in request')
        solutions, stats = Z3QueensSolver(RegionPartition(region_grid)).solve(max_solutions=2)
        logging.info(f"Z3 solve time: {format_duration(stats['solve_time'])}")
        return jsonify({
            'solution': solutions[0] if solutions else None,
            'isUnique': len(solutions) == 1,
        })
    except (InvalidPartition, TypeError) as e:
        return _bad_request(str(e))
    except Exception:
        logging.exception("Error in /api/solve")
        return jsonify({'error': 'An internal error occurred'}), 500


@app.route('/api/history', methods=['POST'])
def record_game():
    try:
        data = request.get_json(silent=True) or {}
        size = _parse_size(data.get('size'))
        fingerprint = data.get('fingerprint')
        if not fingerprint:
            return _bad_request('Missing fingerprint in request')
        elapsed = float(data.get('elapsedSeconds'))
        # Look the board up before this completion is appended.
        previous = history.find_previous_game_by_fingerprint(size, fingerprint)
        result = history.record_completion(size, elapsed, fingerprint, data.get('seed'))
        return jsonify({
            'result': result.to_dict(),
            'previousGame': previous.to_dict() if previous else None,
        })
    except (ValueError, TypeError) as e:
        return _bad_request(str(e))
    except Exception:
        logging.exception("Error in POST /api/history")
        return jsonify({'error': 'An internal error occurred'}), 500


@app.route('/api/history', methods=['GET'])
def get_history():
    try:
        size = _parse_size(request.args.get('size', const.DEFAULT_BOARD_SIZE))
        return jsonify({'size': size, 'results': [result.to_dict() for result in history.get_history(size)]})
    except ValueError as e:
        return _bad_request(str(e))
    except Exception:
        logging.exception("Error in GET /api/history")
        return jsonify({'error': 'An internal error occurred'}), 500
