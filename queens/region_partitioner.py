"""**********************************************************************************
 * Title: region_partitioner.py
 *
 * @version 1.0.0
 * -------------------------------------------------------------------------------
 * Description:
 * This module turns a board size and a seed into a RegionPartition. Each
 * generation strategy is an object with a single `generate(board_size, rng)`
 * method that returns a working grid in which unassigned cells are None;
 * the strategies are registered by tag so new ones can be added without
 * touching the solver or the hasher. The dispatcher then runs the shared
 * repair pass and the validating RegionPartition constructor, so whatever a
 * strategy produces, callers always receive exactly N connected regions.
 *
 * The Organic strategy lives here. It grows N randomly placed seeds through
 * a shared worklist and, most of the time, prefers a candidate that keeps
 * moving in the direction it arrived from, which produces long winding
 * regions rather than round blobs.
 **********************************************************************************"""

# --- IMPORTS ---
import random
from collections import deque

from queens.constants import (
    ORTHOGONAL_STEPS, STRATEGY_ORGANIC, STRATEGY_SHAPE_TEMPLATE, DEFAULT_STRATEGY,
    ORGANIC_MOMENTUM_BIAS, ORGANIC_MOMENTUM_PROBES, MIN_BOARD_SIZE
)
from queens.partition import RegionPartition
from queens.shape_templates import ShapeTemplatePartitioner


# --- ORGANIC STRATEGY ---
class OrganicPartitioner:
    """Seeded flood fill with directional momentum."""

    def __init__(self, bias=ORGANIC_MOMENTUM_BIAS, probes=ORGANIC_MOMENTUM_PROBES):
        self.bias = bias
        self.probes = probes

    def generate(self, board_size, rng):
        """
        Grows N regions from N distinct random seed cells.

        :param int board_size: The board dimension N.
        :param random.Random rng: The generator every random choice is drawn from.
        :returns: The working grid, with every cell assigned.
        :rtype: list[list[int | None]]
        """
        grid = [[None] * board_size for _ in range(board_size)]

        # Seeds by rejection sampling, so they are distinct cells.
        seeds = []
        while len(seeds) < board_size:
            r, c = rng.randrange(board_size), rng.randrange(board_size)
            if grid[r][c] is None:
                grid[r][c] = len(seeds)
                seeds.append((r, c))

        # Worklist entries are (row, col, region, (dr, dc)) where (dr, dc) is the
        # step that led from the owning region into the cell.
        worklist = []
        for region_id, (r, c) in enumerate(seeds):
            self._push_neighbors(worklist, grid, r, c, region_id)

        while worklist:
            index = self._pick_candidate(worklist, grid, rng)
            # Swap-remove keeps each pop O(1); worklist order carries no meaning.
            worklist[index], worklist[-1] = worklist[-1], worklist[index]
            r, c, region_id, _ = worklist.pop()
            if grid[r][c] is not None:
                continue
            grid[r][c] = region_id
            self._push_neighbors(worklist, grid, r, c, region_id)
        return grid

    @staticmethod
    def _push_neighbors(worklist, grid, r, c, region_id):
        dim = len(grid)
        for dr, dc in ORTHOGONAL_STEPS:
            nr, nc = r + dr, c + dc
            if 0 <= nr < dim and 0 <= nc < dim and grid[nr][nc] is None:
                worklist.append((nr, nc, region_id, (dr, dc)))

    def _pick_candidate(self, worklist, grid, rng):
        """
        Chooses the index of the next worklist entry to expand.

        With probability `bias`, up to `probes` random entries are inspected and
        one whose straight continuation lands on an unassigned cell is chosen.
        Otherwise, or when no probed entry qualifies, the pick is uniform.
        """
        if rng.random() < self.bias:
            dim = len(grid)
            straight = []
            for _ in range(min(self.probes, len(worklist))):
                index = rng.randrange(len(worklist))
                r, c, _, (dr, dc) = worklist[index]
                nr, nc = r + dr, c + dc
                if 0 <= nr < dim and 0 <= nc < dim and grid[nr][nc] is None:
                    straight.append(index)
            if straight:
                return rng.choice(straight)
        return rng.randrange(len(worklist))


# --- REPAIR PASS ---
def _fill_unassigned_cells(grid):
    """
    Gives every unassigned cell the region of an assigned 4-neighbour.

    Sweeps the board in row-major order until no unassigned cell is left.
    A cell is only ever attached to a neighbouring region, so connectivity is
    kept. If nothing at all is assigned, the first cell defaults to region 0.
    """
    dim = len(grid)
    while True:
        remaining, progressed = 0, False
        for r in range(dim):
            for c in range(dim):
                if grid[r][c] is not None:
                    continue
                for dr, dc in ORTHOGONAL_STEPS:
                    nr, nc = r + dr, c + dc
                    if 0 <= nr < dim and 0 <= nc < dim and grid[nr][nc] is not None:
                        grid[r][c] = grid[nr][nc]
                        progressed = True
                        break
                else:
                    remaining += 1
        if remaining == 0:
            return
        if not progressed:
            first = next((r, c) for r in range(dim) for c in range(dim) if grid[r][c] is None)
            grid[first[0]][first[1]] = 0


def _bfs_order(grid, start):
    dim = len(grid)
    region_id = grid[start[0]][start[1]]
    order, seen = [start], {start}
    q = deque([start])
    while q:
        r, c = q.popleft()
        for dr, dc in ORTHOGONAL_STEPS:
            nr, nc = r + dr, c + dc
            if 0 <= nr < dim and 0 <= nc < dim and (nr, nc) not in seen and grid[nr][nc] == region_id:
                seen.add((nr, nc))
                order.append((nr, nc))
                q.append((nr, nc))
    return order


def _create_missing_regions(grid):
    """
    Splits cells off the largest regions until every id in [0, N) exists.

    The cell split off is the last one reached by a BFS of its region. That
    cell is a leaf of the BFS spanning tree, so the rest of the region stays
    connected and the new single-cell region is trivially connected.
    """
    dim = len(grid)
    while True:
        cells = {}
        for r in range(dim):
            for c in range(dim):
                cells.setdefault(grid[r][c], []).append((r, c))
        missing = [region_id for region_id in range(dim) if region_id not in cells]
        if not missing:
            return
        largest = max(cells, key=lambda region_id: (len(cells[region_id]), -region_id))
        leaf = _bfs_order(grid, cells[largest][0])[-1]
        grid[leaf[0]][leaf[1]] = missing[0]


def repair_grid(grid):
    """
    Restores the partition invariants on a working grid, in place.

    :param list[list[int | None]] grid: A strategy's working grid.
    :returns: The same grid with every cell assigned and every id present.
    :rtype: list[list[int]]
    """
    _fill_unassigned_cells(grid)
    _create_missing_regions(grid)
    return grid


# --- STRATEGY DISPATCH ---
PARTITIONERS = {
    STRATEGY_ORGANIC: OrganicPartitioner(),
    STRATEGY_SHAPE_TEMPLATE: ShapeTemplatePartitioner(),
}


def get_partitioner(strategy):
    try:
        return PARTITIONERS[strategy]
    except KeyError:
        raise ValueError(f"Unknown generation strategy '{strategy}'. Choose one of: {', '.join(PARTITIONERS)}.") from None


def partition_with_rng(board_size, rng, strategy=DEFAULT_STRATEGY):
    """
    Builds a partition drawing every random choice from `rng`.

    :param int board_size: The board dimension N.
    :param random.Random rng: The seeded generator to thread through the strategy.
    :param str strategy: A registered strategy tag.
    :returns: A validated partition with exactly N connected regions.
    :rtype: RegionPartition
    """
    if board_size < MIN_BOARD_SIZE:
        raise ValueError(f"Board size must be at least {MIN_BOARD_SIZE}; got {board_size}.")
    grid = get_partitioner(strategy).generate(board_size, rng)
    return RegionPartition(repair_grid(grid))


def generate_regions(board_size, seed=None, strategy=DEFAULT_STRATEGY):
    """Builds a partition from a seed. The same seed and strategy always give the same partition."""
    return partition_with_rng(board_size, random.Random(seed), strategy)
