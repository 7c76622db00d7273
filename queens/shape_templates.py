"""**********************************************************************************
 * Title: shape_templates.py
 *
 * @version 1.0.0
 * -------------------------------------------------------------------------------
 * Description:
 * This module provides the ShapeTemplate generation strategy. Instead of
 * growing regions, it tiles the board with a fixed catalog of small
 * polyominoes (lines, L, T, Z/S, squares, plus, stairs, rectangles, U and H
 * shapes), each dropped at a random anchor in one of four rotations. When
 * the board gets too crowded for the full catalog, the seven smallest shapes
 * are tried, and then leftover cells become single-cell regions. Any cells
 * still unassigned are handed to the shared repair pass by the dispatcher.
 **********************************************************************************"""

from queens.constants import (
    SHAPE_MAX_FAILED_PLACEMENTS, SHAPE_FILL_ATTEMPTS, SHAPE_SMALL_TEMPLATE_COUNT
)

# --- SHAPE CATALOG ---
# Cell offsets relative to the shape's origin. The first seven entries are the
# small shapes used to fill gaps once the board is crowded.
TEMPLATES = (
    # Small shapes (3-4 cells)
    ((0, 0), (0, 1), (1, 0)),                                   # L (3)
    ((0, 0), (0, 1), (0, 2)),                                   # horizontal line (3)
    ((0, 0), (1, 0), (2, 0)),                                   # vertical line (3)
    ((0, 0), (0, 1), (1, 0), (1, 1)),                           # square (4)
    ((0, 0), (0, 1), (0, 2), (1, 1)),                           # T (4)
    ((0, 0), (0, 1), (1, 1), (1, 2)),                           # Z (4)
    ((0, 0), (1, 0), (1, 1), (2, 0)),                           # vertical T (4)
    # Medium shapes (4-5 cells)
    ((0, 0), (0, 1), (0, 2), (1, 0)),                           # L (4)
    ((0, 0), (0, 1), (1, 0), (2, 0), (2, 1)),                   # large L (5)
    ((0, 0), (0, 1), (0, 2), (0, 3)),                           # long horizontal (4)
    ((0, 0), (1, 0), (2, 0), (3, 0)),                           # long vertical (4)
    ((0, 0), (0, 1), (0, 2), (1, 0), (1, 1)),                   # P (5)
    ((0, 0), (0, 1), (0, 2), (1, 1), (2, 1)),                   # T with stem (5)
    ((0, 1), (1, 0), (1, 1), (1, 2), (2, 1)),                   # plus (5)
    ((0, 0), (0, 1), (1, 1), (1, 2), (2, 2)),                   # stairs (5)
    ((0, 0), (1, 0), (1, 1), (2, 1), (2, 2)),                   # S (5)
    # Larger shapes (5-7 cells)
    ((0, 0), (0, 1), (1, 0), (1, 1), (2, 0), (2, 1)),           # rectangle 3x2 (6)
    ((0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2)),           # rectangle 2x3 (6)
    ((0, 0), (0, 1), (0, 2), (1, 0), (1, 2)),                   # U (5)
    ((0, 0), (0, 1), (0, 2), (1, 1), (2, 0), (2, 1), (2, 2)),   # H (7)
)


def rotate_shape(shape, rotation):
    """
    Rotates a shape by `rotation` quarter turns and moves it back to the origin.

    Each quarter turn maps (r, c) to (c, -r). Afterwards the offsets are
    translated so the smallest row and column are both 0.

    :param tuple shape: The cell offsets of the shape.
    :param int rotation: Number of quarter turns, 0-3.
    :returns: The rotated offsets.
    :rtype: list[tuple[int, int]]
    """
    rotated = list(shape)
    for _ in range(rotation % 4):
        rotated = [(c, -r) for r, c in rotated]
    min_row = min(r for r, _ in rotated)
    min_col = min(c for _, c in rotated)
    return [(r - min_row, c - min_col) for r, c in rotated]


def can_place_shape(shape, start_row, start_col, grid):
    dim = len(grid)
    for dr, dc in shape:
        r, c = start_row + dr, start_col + dc
        if not (0 <= r < dim and 0 <= c < dim) or grid[r][c] is not None:
            return False
    return True


def place_shape(shape, start_row, start_col, region_id, grid):
    for dr, dc in shape:
        grid[start_row + dr][start_col + dc] = region_id


class ShapeTemplatePartitioner:
    """Best-effort polyomino packing; the dispatcher's repair pass completes the grid."""

    def __init__(self, templates=TEMPLATES):
        self.templates = templates

    def _try_place(self, grid, region_id, templates, rng):
        dim = len(grid)
        shape = rotate_shape(rng.choice(templates), rng.randrange(4))
        start_row, start_col = rng.randrange(dim), rng.randrange(dim)
        if can_place_shape(shape, start_row, start_col, grid):
            place_shape(shape, start_row, start_col, region_id, grid)
            return True
        return False

    def generate(self, board_size, rng):
        """
        Packs shapes onto an empty board until N regions exist or space runs out.

        :param int board_size: The board dimension N.
        :param random.Random rng: The generator every random choice is drawn from.
        :returns: The working grid; cells no shape covered are left as None.
        :rtype: list[list[int | None]]
        """
        grid = [[None] * board_size for _ in range(board_size)]
        region_id = 0

        # Full catalog until too many consecutive placements fail.
        failures = 0
        while region_id < board_size and failures < SHAPE_MAX_FAILED_PLACEMENTS:
            if self._try_place(grid, region_id, self.templates, rng):
                region_id += 1
                failures = 0
            else:
                failures += 1

        # Then only the small shapes, to fill the gaps.
        small = self.templates[:SHAPE_SMALL_TEMPLATE_COUNT]
        for _ in range(SHAPE_FILL_ATTEMPTS):
            if region_id >= board_size:
                break
            if self._try_place(grid, region_id, small, rng):
                region_id += 1

        # Then single cells, in shuffled order.
        if region_id < board_size:
            free_cells = [(r, c) for r in range(board_size) for c in range(board_size) if grid[r][c] is None]
            rng.shuffle(free_cells)
            for r, c in free_cells:
                if region_id >= board_size:
                    break
                grid[r][c] = region_id
                region_id += 1
        return grid
