"""**********************************************************************************
 * Title: history_manager.py
 *
 * @version 1.0.0
 * -------------------------------------------------------------------------------
 * Description:
 * This file defines the GameHistory class, a small in-memory ledger of
 * completed games kept per board size. Every completion is stored as an
 * immutable GameResult carrying a per-size game number, the elapsed time
 * reported by the client, the board fingerprint and the generation seed.
 * Results are listed fastest first, and the fingerprint lookup lets the
 * player be told that they have solved this exact board before. Persisting
 * the ledger is left to its host.
 **********************************************************************************"""

# --- IMPORTS ---
import math
import threading
from collections import namedtuple


class GameResult(namedtuple('GameResult', ['game_number', 'elapsed_seconds', 'fingerprint', 'seed'])):
    """One completed game. Never mutated after it is recorded."""
    __slots__ = ()

    def to_dict(self):
        return {
            'gameNumber': self.game_number,
            'elapsedSeconds': self.elapsed_seconds,
            'fingerprint': self.fingerprint,
            'seed': self.seed,
        }


def _check_elapsed(elapsed_seconds):
    if not math.isfinite(elapsed_seconds) or elapsed_seconds < 0:
        raise ValueError(f"Elapsed time must be a finite, non-negative number; got {elapsed_seconds}.")


# --- CLASS DEFINITION ---
class GameHistory:
    """Completion records grouped by board size."""
    def __init__(self):
        self._history = {}
        self._game_counters = {}
        self._lock = threading.Lock()

    def has_history(self, board_size):
        with self._lock:
            return bool(self._history.get(board_size))

    def get_history(self, board_size):
        """
        Returns the results for one board size, fastest first.

        :param int board_size: The board dimension.
        :rtype: list[GameResult]
        """
        with self._lock:
            return sorted(self._history.get(board_size, []), key=lambda result: result.elapsed_seconds)

    def next_game_number(self, board_size):
        """Hands out the next game number for a board size, starting at 1."""
        with self._lock:
            return self._next_game_number(board_size)

    def _next_game_number(self, board_size):
        self._game_counters[board_size] = self._game_counters.get(board_size, 0) + 1
        return self._game_counters[board_size]

    def add_result(self, board_size, game_number, elapsed_seconds, fingerprint, seed=None):
        """
        Appends a result under a game number the caller already obtained.

        :param int board_size: The board dimension.
        :param int game_number: The number from next_game_number.
        :param float elapsed_seconds: How long the game took.
        :param str fingerprint: The board fingerprint.
        :param int | None seed: The generation seed, if known.
        :returns: The stored record.
        :rtype: GameResult
        """
        _check_elapsed(elapsed_seconds)
        result = GameResult(game_number, elapsed_seconds, fingerprint, seed)
        with self._lock:
            self._history.setdefault(board_size, []).append(result)
        return result

    def record_completion(self, board_size, elapsed_seconds, fingerprint, seed=None):
        """Assigns the next game number and appends the result in one step."""
        _check_elapsed(elapsed_seconds)
        with self._lock:
            result = GameResult(self._next_game_number(board_size), elapsed_seconds, fingerprint, seed)
            self._history.setdefault(board_size, []).append(result)
        return result

    def find_previous_game_by_fingerprint(self, board_size, fingerprint):
        """
        Finds the first recorded game played on the same board.

        :returns: The earliest matching result, or None.
        :rtype: GameResult | None
        """
        with self._lock:
            return next((result for result in self._history.get(board_size, [])
                         if result.fingerprint == fingerprint), None)
