import pytest


def make_row_regions(n):
    """Region i is row i."""
    return [[r] * n for r in range(n)]


def assert_valid_solution(grid, queens):
    """Checks one queen per region, row and column, with no two queens touching."""
    n = len(grid)
    assert len(queens) == n
    assert sorted(grid[r][c] for r, c in queens) == list(range(n))
    assert sorted(r for r, _ in queens) == list(range(n))
    assert sorted(c for _, c in queens) == list(range(n))
    for i, (r1, c1) in enumerate(queens):
        for r2, c2 in queens[i + 1:]:
            assert max(abs(r1 - r2), abs(c1 - c2)) > 1


@pytest.fixture
def row_regions():
    return make_row_regions


@pytest.fixture
def unsolvable_4x4():
    # Region 0 covers two queens of both 4x4 placements.
    return [
        [0, 0, 1, 2],
        [0, 0, 1, 2],
        [0, 0, 1, 3],
        [0, 0, 1, 3],
    ]


@pytest.fixture
def unique_4x4():
    # Only the placement (0,1) (1,3) (2,0) (3,2) fits these regions.
    return [
        [0, 0, 0, 0],
        [0, 1, 1, 1],
        [2, 2, 2, 2],
        [3, 3, 3, 3],
    ]
