"""**********************************************************************************
 * Title: partition.py
 *
 * @version 1.0.0
 * -------------------------------------------------------------------------------
 * Description:
 * This module defines RegionPartition, the immutable N x N assignment of
 * board cells to N regions that every other component consumes. A partition
 * can only be built through its validating constructor, which checks the
 * grid is square, that every cell holds an id in [0, N), that all N ids are
 * present and that each region is a single 4-connected block. Generators
 * build their working grids with None for unassigned cells, so a forgotten
 * cell is rejected here instead of surviving as a sentinel value.
 **********************************************************************************"""

from collections import deque

from queens.constants import ORTHOGONAL_STEPS
from queens.errors import InvalidPartition, OutOfRange


def _find_disconnected_region(grid, dim):
    """
    Flood-fills every region from its first cell and returns the id of the
    first region whose cells were not all reached, or None.
    """
    visited = [[False] * dim for _ in range(dim)]
    seen_regions = set()
    for r_start in range(dim):
        for c_start in range(dim):
            if visited[r_start][c_start]:
                continue
            region_id = grid[r_start][c_start]
            if region_id in seen_regions:
                # A second, unconnected block of an id already flood-filled.
                return region_id
            seen_regions.add(region_id)
            q = deque([(r_start, c_start)])
            visited[r_start][c_start] = True
            while q:
                r, c = q.popleft()
                for dr, dc in ORTHOGONAL_STEPS:
                    nr, nc = r + dr, c + dc
                    if 0 <= nr < dim and 0 <= nc < dim and not visited[nr][nc] and grid[nr][nc] == region_id:
                        visited[nr][nc] = True
                        q.append((nr, nc))
    return None


def validate_grid(grid):
    """
    Checks a raw region grid against every partition invariant.

    :param list[list[int]] grid: The candidate region grid.
    :returns: The grid as a tuple of row tuples.
    :rtype: tuple[tuple[int, ...], ...]
    :raises InvalidPartition: If any invariant is violated.
    """
    if not grid:
        raise InvalidPartition("Region grid is empty.")
    try:
        rows = tuple(tuple(row) for row in grid)
    except TypeError as e:
        raise InvalidPartition(f"Region grid is not a list of rows: {e}") from e

    dim = len(rows)
    for r, row in enumerate(rows):
        if len(row) != dim:
            raise InvalidPartition(f"Row {r} has {len(row)} cells; expected {dim}.")
        for c, region_id in enumerate(row):
            if region_id is None:
                raise InvalidPartition(f"Cell ({r}, {c}) was never assigned a region.")
            if isinstance(region_id, bool) or not isinstance(region_id, int):
                raise InvalidPartition(f"Cell ({r}, {c}) holds a non-integer region id {region_id!r}.")
            if not 0 <= region_id < dim:
                raise InvalidPartition(f"Cell ({r}, {c}) holds region id {region_id} outside [0, {dim}).")

    present = {region_id for row in rows for region_id in row}
    if len(present) != dim:
        missing = sorted(set(range(dim)) - present)
        raise InvalidPartition(f"Expected {dim} regions; missing ids {missing}.")

    broken = _find_disconnected_region(rows, dim)
    if broken is not None:
        raise InvalidPartition(f"Region {broken} is not 4-connected.")
    return rows


class RegionPartition:
    """An immutable, validated assignment of every cell to one of N connected regions."""

    __slots__ = ('_rows', '_cells_by_region')

    def __init__(self, grid):
        """
        :param list[list[int]] grid: N rows of N region ids in [0, N).
        :raises InvalidPartition: If the grid breaks any partition invariant.
        """
        self._rows = validate_grid(grid)
        cells_by_region = [[] for _ in range(len(self._rows))]
        for r, row in enumerate(self._rows):
            for c, region_id in enumerate(row):
                cells_by_region[region_id].append((r, c))
        self._cells_by_region = tuple(tuple(cells) for cells in cells_by_region)

    @classmethod
    def coerce(cls, value):
        """Returns `value` unchanged if it is already a partition, otherwise validates it as a raw grid."""
        if isinstance(value, cls):
            return value
        return cls(value)

    @property
    def size(self):
        return len(self._rows)

    @property
    def rows(self):
        return self._rows

    def region_at(self, row, col):
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise OutOfRange(row, col, self.size)
        return self._rows[row][col]

    def cells_of(self, region_id):
        """Returns the cells of one region in row-major order."""
        return self._cells_by_region[region_id]

    def region_sizes(self):
        return [len(cells) for cells in self._cells_by_region]

    def to_lists(self):
        """Returns a mutable copy of the grid, as used by JSON responses."""
        return [list(row) for row in self._rows]

    def __iter__(self):
        return iter(self._rows)

    def __len__(self):
        return len(self._rows)

    def __eq__(self, other):
        if not isinstance(other, RegionPartition):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self):
        return hash(self._rows)

    def __repr__(self):
        return f"RegionPartition(size={self.size}, rows={self.to_lists()!r})"
