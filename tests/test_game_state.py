import pytest

from queens.constants import STATE_CROSS, STATE_EMPTY, STATE_QUEEN
from queens.errors import InvalidPartition, OutOfRange
from queens.game_state import PuzzleGameState

WINNING_COLUMNS = [1, 3, 5, 0, 2, 4]


@pytest.fixture
def state(row_regions):
    return PuzzleGameState(row_regions(6))


def _place(state, cells):
    for r, c in cells:
        state.set_cell(r, c, STATE_QUEEN)


def test_new_state_is_empty(state):
    assert state.board_size == 6
    assert state.board == [[STATE_EMPTY] * 6 for _ in range(6)]
    assert state.auto_marks == [[False] * 6 for _ in range(6)]
    assert state.queens() == []
    assert not state.check_win()


def test_rejects_malformed_partition():
    with pytest.raises(InvalidPartition):
        PuzzleGameState([[0, 1], [2, 3]])


def test_set_and_get_cell(state):
    state.set_cell(2, 3, STATE_CROSS)
    assert state.get_cell(2, 3) == STATE_CROSS
    state.set_cell(2, 3, STATE_EMPTY)
    assert state.get_cell(2, 3) == STATE_EMPTY


def test_unknown_state_is_rejected(state):
    with pytest.raises(ValueError):
        state.set_cell(0, 0, 7)


@pytest.mark.parametrize("row, col", [(6, 0), (0, 6), (-1, 2), (3, -1)])
def test_out_of_range_access(state, row, col):
    with pytest.raises(OutOfRange):
        state.get_cell(row, col)
    with pytest.raises(OutOfRange):
        state.set_cell(row, col, STATE_QUEEN)
    with pytest.raises(OutOfRange):
        state.has_conflict(row, col)


def test_snapshots_are_copies(state):
    snapshot = state.board
    snapshot[0][0] = STATE_QUEEN
    assert state.get_cell(0, 0) == STATE_EMPTY


def test_diagonal_neighbours_conflict(state):
    _place(state, [(0, 0), (1, 1)])
    assert state.has_conflict(0, 0)
    assert state.has_conflict(1, 1)
    assert not state.check_win()


def test_same_column_conflicts(state):
    _place(state, [(0, 2), (4, 2)])
    assert state.conflicting_queens() == [(0, 2), (4, 2)]


def test_same_region_conflicts(unsolvable_4x4):
    state = PuzzleGameState(unsolvable_4x4)
    _place(state, [(0, 0), (2, 1)])
    assert state.has_conflict(0, 0)
    assert state.has_conflict(2, 1)


def test_distant_queens_do_not_conflict(state):
    _place(state, [(0, 0), (2, 3)])
    assert not state.has_conflict(0, 0)
    assert state.conflicting_queens() == []


def test_empty_or_crossed_cell_never_conflicts(state):
    state.set_cell(0, 0, STATE_QUEEN)
    state.set_cell(0, 1, STATE_CROSS)
    assert not state.has_conflict(0, 1)
    assert not state.has_conflict(1, 1)


def test_winning_board(state):
    _place(state, enumerate(WINNING_COLUMNS))
    state.set_cell(5, 0, STATE_CROSS)
    assert state.check_win()
    assert state.conflicting_queens() == []


def test_missing_queen_is_not_a_win(state):
    _place(state, list(enumerate(WINNING_COLUMNS))[:5])
    assert not state.check_win()


def test_extra_queen_is_not_a_win(state):
    _place(state, enumerate(WINNING_COLUMNS))
    state.set_cell(5, 1, STATE_QUEEN)
    assert not state.check_win()


def test_auto_mark_marks_every_ruled_out_cell(state):
    state.set_cell(2, 2, STATE_QUEEN)
    state.set_cell(2, 5, STATE_CROSS)
    state.auto_mark_invalid_squares(2, 2)

    marks = state.auto_marks
    assert not marks[2][2]
    assert not marks[2][5]
    for c in (0, 1, 3, 4):
        assert marks[2][c]
    for r in (0, 1, 3, 4, 5):
        assert marks[r][2]
    for r, c in [(1, 1), (1, 3), (3, 1), (3, 3)]:
        assert marks[r][c]
    assert not marks[0][0]
    assert not marks[4][4]
    assert sum(cell for row in marks for cell in row) == 13


def test_removing_a_queen_keeps_marks_other_queens_justify(state):
    state.set_cell(2, 2, STATE_QUEEN)
    state.auto_mark_invalid_squares(2, 2)
    state.set_cell(4, 4, STATE_QUEEN)
    state.auto_mark_invalid_squares(4, 4)

    state.set_cell(2, 2, STATE_EMPTY)
    state.remove_auto_marks_from_queen(2, 2)

    assert state.get_auto_mark(2, 4)      # column of (4, 4)
    assert state.get_auto_mark(3, 3)      # touches (4, 4)
    assert state.get_auto_mark(4, 0)      # row of (4, 4)
    assert not state.get_auto_mark(2, 0)
    assert not state.get_auto_mark(0, 2)
    assert not state.get_auto_mark(1, 1)


def test_remove_works_before_the_queen_is_lifted(state):
    state.set_cell(2, 2, STATE_QUEEN)
    state.auto_mark_invalid_squares(2, 2)
    state.remove_auto_marks_from_queen(2, 2)
    assert state.auto_marks == [[False] * 6 for _ in range(6)]


def test_explicit_mark_clears_its_auto_mark(state):
    state.set_cell(0, 0, STATE_QUEEN)
    state.auto_mark_invalid_squares(0, 0)
    assert state.get_auto_mark(0, 3)
    state.set_cell(0, 3, STATE_CROSS)
    assert not state.get_auto_mark(0, 3)
    # The crossed cell keeps its cross when the queen goes away.
    state.set_cell(0, 0, STATE_EMPTY)
    state.remove_auto_marks_from_queen(0, 0)
    assert state.get_cell(0, 3) == STATE_CROSS


def test_set_auto_mark(state):
    state.set_auto_mark(3, 3, True)
    assert state.get_auto_mark(3, 3)
    state.set_auto_mark(3, 3, False)
    assert not state.get_auto_mark(3, 3)
    state.set_cell(1, 1, STATE_QUEEN)
    with pytest.raises(ValueError):
        state.set_auto_mark(1, 1, True)


def test_reset_board(state):
    state.set_cell(0, 0, STATE_QUEEN)
    state.auto_mark_invalid_squares(0, 0)
    state.reset_board()
    assert state.queens() == []
    assert not any(cell for row in state.auto_marks for cell in row)
    assert state.regions[5][0] == 5


@pytest.mark.parametrize("first, second, expected", [
    ((2, 1), (2, 4), True),     # same row
    ((0, 0), (2, 2), False),    # same diagonal, not touching
    ((2, 2), (3, 3), True),     # touching diagonally
])
def test_conflict_is_symmetric(state, first, second, expected):
    _place(state, [first, second])
    assert state.has_conflict(*first) is expected
    assert state.has_conflict(*second) is expected
