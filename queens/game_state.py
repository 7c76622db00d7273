"""**********************************************************************************
 * Title: game_state.py
 *
 * @version 1.0.0
 * -------------------------------------------------------------------------------
 * Description:
 * This module defines the PuzzleGameState class, the live model behind one
 * play session. It holds the player's marks (empty, cross or queen) over a
 * fixed region partition together with a separate layer of advisory
 * auto-marks for cells that a placed queen rules out. Mutations never
 * propagate on their own: the presentation layer decides when to call
 * auto_mark_invalid_squares and remove_auto_marks_from_queen, so the
 * interaction policy stays outside the core. Conflict detection and the win
 * check scan the whole board, which is plenty fast for the board sizes the
 * game uses.
 **********************************************************************************"""

# --- IMPORTS ---
from queens.constants import STATE_EMPTY, STATE_QUEEN, VALID_STATES
from queens.errors import OutOfRange
from queens.partition import RegionPartition


# --- GAMESTATE CLASS DEFINITION ---
class PuzzleGameState:
    """
    Tracks the marks and auto-marks of one puzzle session.

    Invariant: a cell is only ever auto-marked while its mark is empty.
    """
    def __init__(self, partition):
        """
        Initializes an empty board over a region partition.

        :param RegionPartition | list[list[int]] partition: The puzzle's regions.
        :raises InvalidPartition: If a raw grid is malformed.
        """
        self.partition = RegionPartition.coerce(partition)
        self.board_size = self.partition.size
        self._regions = self.partition.rows
        self._board = None
        self._auto_marks = None
        self.reset_board()

    # --- ACCESSORS ---
    @property
    def regions(self):
        return self._regions

    @property
    def board(self):
        """A snapshot of the player's marks."""
        return [row[:] for row in self._board]

    @property
    def auto_marks(self):
        """A snapshot of the auto-mark layer."""
        return [row[:] for row in self._auto_marks]

    def _check_bounds(self, row, col):
        if not (0 <= row < self.board_size and 0 <= col < self.board_size):
            raise OutOfRange(row, col, self.board_size)

    def get_cell(self, row, col):
        self._check_bounds(row, col)
        return self._board[row][col]

    def get_auto_mark(self, row, col):
        self._check_bounds(row, col)
        return self._auto_marks[row][col]

    def queens(self):
        """Returns the coordinates of every queen in row-major order."""
        return [(r, c) for r in range(self.board_size) for c in range(self.board_size)
                if self._board[r][c] == STATE_QUEEN]

    # --- MUTATORS ---
    def reset_board(self):
        """Clears every mark and auto-mark. The region partition is kept."""
        self._board = [[STATE_EMPTY] * self.board_size for _ in range(self.board_size)]
        self._auto_marks = [[False] * self.board_size for _ in range(self.board_size)]

    def set_cell(self, row, col, state):
        """
        Sets the mark of one cell. Other cells are never touched.

        Placing a cross or a queen clears that cell's own auto-mark so an
        auto-mark never sits under an explicit mark.

        :param int row: The row index.
        :param int col: The column index.
        :param int state: STATE_EMPTY, STATE_QUEEN or STATE_CROSS.
        :raises OutOfRange: If the cell is outside the board.
        :raises ValueError: If `state` is not a known mark.
        """
        self._check_bounds(row, col)
        if state not in VALID_STATES:
            raise ValueError(f"Unknown cell state {state!r}.")
        self._board[row][col] = state
        if state != STATE_EMPTY:
            self._auto_marks[row][col] = False

    def set_auto_mark(self, row, col, value):
        """
        Sets or clears one auto-mark directly, e.g. before turning it into a manual cross.

        :raises ValueError: If asked to auto-mark a cell that holds a mark.
        """
        self._check_bounds(row, col)
        if value and self._board[row][col] != STATE_EMPTY:
            raise ValueError(f"Cell ({row}, {col}) holds a mark and cannot be auto-marked.")
        self._auto_marks[row][col] = bool(value)

    # --- RULE CHECKS ---
    def _attacks(self, qr, qc, r, c):
        """True if a queen at (qr, qc) rules out a queen at (r, c), for two distinct cells."""
        return (r == qr or c == qc
                or self._regions[r][c] == self._regions[qr][qc]
                or (abs(r - qr) == 1 and abs(c - qc) == 1))

    def has_conflict(self, row, col):
        """
        Checks whether the queen at a cell clashes with any other queen.

        :returns: True if the cell holds a queen and another queen shares its
                  row, column or region, or touches it diagonally.
        :rtype: bool
        """
        self._check_bounds(row, col)
        if self._board[row][col] != STATE_QUEEN:
            return False
        for r, c in self.queens():
            if (r, c) != (row, col) and self._attacks(row, col, r, c):
                return True
        return False

    def conflicting_queens(self):
        return [(r, c) for r, c in self.queens() if self.has_conflict(r, c)]

    def check_win(self):
        """
        Checks whether the board is solved.

        Region counts are checked independently of conflicts: a region can
        hold exactly one queen that still clashes with a queen elsewhere.

        :returns: True if every region holds exactly one queen and no queen conflicts.
        :rtype: bool
        """
        queens_per_region = [0] * self.board_size
        for r, c in self.queens():
            queens_per_region[self._regions[r][c]] += 1
            if self.has_conflict(r, c):
                return False
        return all(count == 1 for count in queens_per_region)

    # --- AUTO-MARKING ---
    def auto_mark_invalid_squares(self, queen_row, queen_col):
        """
        Auto-marks every empty cell that a queen at (queen_row, queen_col) rules out.

        Cells in the same row, column or region, and the four diagonal
        neighbours, are marked. Cells holding a cross or a queen are left alone.

        :returns None:
        """
        self._check_bounds(queen_row, queen_col)
        for r in range(self.board_size):
            for c in range(self.board_size):
                if (r, c) == (queen_row, queen_col) or self._board[r][c] != STATE_EMPTY:
                    continue
                if self._attacks(queen_row, queen_col, r, c):
                    self._auto_marks[r][c] = True

    def remove_auto_marks_from_queen(self, queen_row, queen_col):
        """
        Retracts the auto-marks a removed queen no longer justifies.

        Every auto-marked empty cell the queen ruled out is re-checked against
        all remaining queens, and its auto-mark is cleared only if none of them
        still rules it out. The queen's own cell is never counted as remaining,
        so this may be called before or after the queen is taken off the board.

        :returns None:
        """
        self._check_bounds(queen_row, queen_col)
        remaining = [(r, c) for r, c in self.queens() if (r, c) != (queen_row, queen_col)]
        for r in range(self.board_size):
            for c in range(self.board_size):
                if not self._auto_marks[r][c] or self._board[r][c] != STATE_EMPTY:
                    continue
                if not self._attacks(queen_row, queen_col, r, c):
                    continue
                still_invalid = any((qr, qc) != (r, c) and self._attacks(qr, qc, r, c) for qr, qc in remaining)
                if not still_invalid:
                    self._auto_marks[r][c] = False
