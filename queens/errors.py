"""**********************************************************************************
 * Title: errors.py
 *
 * @version 1.0.0
 * -------------------------------------------------------------------------------
 * Description:
 * Exception types raised by the Queens core. Malformed region partitions and
 * out-of-bounds board access are contract violations and are reported as
 * InvalidPartition and OutOfRange. GenerationExhausted is the only failure a
 * puzzle request can surface, raised when the accept/retry loop runs out of
 * attempts.
 **********************************************************************************"""

from collections import Counter


class QueensError(Exception):
    """Base class for every error raised by the Queens core."""


class InvalidPartition(QueensError, ValueError):
    """A region grid broke a partition invariant (shape, id range, coverage or connectivity)."""


class OutOfRange(QueensError, IndexError):
    """A cell coordinate fell outside the board."""

    def __init__(self, row, col, board_size):
        super().__init__(f"Cell ({row}, {col}) is outside the {board_size}x{board_size} board.")
        self.row = row
        self.col = col
        self.board_size = board_size


class GenerationExhausted(QueensError, RuntimeError):
    """
    Raised when no candidate board was accepted within the attempt budget.

    :param int attempts: The number of candidates generated and rejected.
    :param Counter rejections: Rejection counts keyed by reason.
    """

    def __init__(self, board_size, attempts, rejections=None):
        self.board_size = board_size
        self.attempts = attempts
        self.rejections = Counter(rejections or {})
        reasons = ", ".join(f"{reason}={count}" for reason, count in sorted(self.rejections.items()))
        super().__init__(
            f"No {board_size}x{board_size} board accepted after {attempts} attempts"
            + (f" ({reasons})." if reasons else ".")
        )
