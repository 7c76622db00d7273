"""**********************************************************************************
 * Title: constraint_solver.py
 *
 * @version 1.0.0
 * -------------------------------------------------------------------------------
 * Description:
 * This module decides whether a region partition can be played and how
 * hard it is likely to be. The solvability check is a depth-first search
 * that places one queen per region, in region order, on the first legal
 * cell of that region (row-major) and backtracks on dead ends. The
 * constraint-density heuristic measures how strongly placements in
 * different regions interfere with each other. High density means many
 * forced moves and an easy puzzle, so a generated board is only accepted
 * when it is solvable and its density is strictly below a size-dependent
 * threshold taken from the selected difficulty table.
 **********************************************************************************"""

from queens.constants import (
    DIAGONAL_STEPS, DENSITY_THRESHOLDS, DEFAULT_DENSITY_THRESHOLDS, DIFFICULTY_MODES,
    DEFAULT_DIFFICULTY_MODE, REJECT_UNSOLVABLE, REJECT_TOO_EASY
)
from queens.partition import RegionPartition


def is_diagonally_adjacent(r1, c1, r2, c2):
    """True when two cells touch corner to corner (Chebyshev distance 1 on both axes)."""
    return abs(r1 - r2) == 1 and abs(c1 - c2) == 1


def can_place_queen(row, col, placed, dim):
    """
    Checks a queen at (row, col) against the queens already on the test board.

    :param int row: Candidate row.
    :param int col: Candidate column.
    :param list[list[bool]] placed: The test board, True where a queen sits.
    :param int dim: The board dimension.
    :returns: True if no placed queen shares the row or column or touches diagonally.
    :rtype: bool
    """
    if any(placed[row]):
        return False
    if any(placed[r][col] for r in range(dim)):
        return False
    for dr, dc in DIAGONAL_STEPS:
        nr, nc = row + dr, col + dc
        if 0 <= nr < dim and 0 <= nc < dim and placed[nr][nc]:
            return False
    return True


def find_solution(partition):
    """
    Searches for one placement of a queen per region.

    Regions are handled in id order and each region's cells in row-major
    order, so the result is deterministic for a given partition.

    :param RegionPartition | list[list[int]] partition: The board to solve.
    :returns: The queen coordinates indexed by region id, or None if no placement exists.
    :rtype: list[tuple[int, int]] | None
    :raises InvalidPartition: If a raw grid is malformed.
    """
    partition = RegionPartition.coerce(partition)
    dim = partition.size
    placed = [[False] * dim for _ in range(dim)]
    queens = []

    def solve_backtrack(region_id):
        if region_id == dim:
            return True
        for row, col in partition.cells_of(region_id):
            if not can_place_queen(row, col, placed, dim):
                continue
            placed[row][col] = True
            queens.append((row, col))
            if solve_backtrack(region_id + 1):
                return True
            placed[row][col] = False
            queens.pop()
        return False

    return list(queens) if solve_backtrack(0) else None


def is_solvable(partition):
    return find_solution(partition) is not None


def constraint_density(partition):
    """
    Measures how much queen placements in different regions interfere.

    For every cell, counts the cells of other regions that a queen there would
    rule out (same row, same column, or diagonally adjacent), and divides the
    total by the number of other-region cells examined.

    :param RegionPartition | list[list[int]] partition: The board to score.
    :returns: The density in [0.0, 1.0]; 0.0 when nothing can be examined.
    :rtype: float
    """
    partition = RegionPartition.coerce(partition)
    dim = partition.size
    grid = partition.rows
    total_constraints = 0
    total_possible = 0

    for region_id in range(dim):
        region_cells = partition.cells_of(region_id)
        for row, col in region_cells:
            conflicts = 0
            for r in range(dim):
                for c in range(dim):
                    if grid[r][c] == region_id:
                        continue
                    if r == row or c == col or is_diagonally_adjacent(r, c, row, col):
                        conflicts += 1
            total_constraints += conflicts
            total_possible += dim * dim - len(region_cells)

    return total_constraints / total_possible if total_possible > 0 else 0.0


def density_threshold(board_size, difficulty_mode=DEFAULT_DIFFICULTY_MODE):
    """
    Looks up the acceptance threshold for a board size in one difficulty table.

    :param int board_size: The board dimension.
    :param str difficulty_mode: 'normal' or 'hard'.
    :rtype: float
    """
    if difficulty_mode not in DIFFICULTY_MODES:
        raise ValueError(f"Unknown difficulty mode '{difficulty_mode}'. Choose one of: {', '.join(DIFFICULTY_MODES)}.")
    return DENSITY_THRESHOLDS[difficulty_mode].get(board_size, DEFAULT_DENSITY_THRESHOLDS[difficulty_mode])


def evaluate_candidate(partition, difficulty_mode=DEFAULT_DIFFICULTY_MODE):
    """
    Applies the acceptance rule to a candidate board.

    :returns: (accepted, rejection reason or None, density). The density is
              None when the board was rejected as unsolvable before scoring.
    :rtype: tuple[bool, str | None, float | None]
    """
    partition = RegionPartition.coerce(partition)
    threshold = density_threshold(partition.size, difficulty_mode)
    if not is_solvable(partition):
        return False, REJECT_UNSOLVABLE, None
    density = constraint_density(partition)
    if density >= threshold:
        return False, REJECT_TOO_EASY, density
    return True, None, density
