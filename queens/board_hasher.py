"""**********************************************************************************
 * Title: board_hasher.py
 *
 * @version 1.0.0
 * -------------------------------------------------------------------------------
 * Description:
 * This module computes a short identifier for a region partition that does
 * not change when the board is rotated or when its regions are numbered
 * differently. All four rotations are renumbered by order of first
 * appearance, the lexicographically smallest one is taken as canonical, and
 * its row-major serialization is hashed with SHA-256. The first twelve hex
 * characters (48 bits) of the digest are kept, which is short enough to show
 * to a player and long enough to tell previously seen boards apart.
 **********************************************************************************"""

# --- IMPORTS ---
import hashlib

from queens.constants import FINGERPRINT_LENGTH
from queens.partition import RegionPartition


# --- GRID TRANSFORMATION FUNCTIONS ---
def rotate_grid_90_clockwise(grid):
    """Rotates a square grid 90 degrees clockwise: cell (r, c) moves to (c, N-1-r)."""
    if not grid or not grid[0]:
        return [list(row) for row in grid]
    return [list(reversed(row)) for row in zip(*grid)]


def rotations(grid):
    """Returns the grid rotated by 0, 90, 180 and 270 degrees, in that order."""
    current = [list(row) for row in grid]
    result = []
    for _ in range(4):
        result.append(current)
        current = rotate_grid_90_clockwise(current)
    return result


def normalize_region_ids(grid):
    """
    Renumbers regions in the order they first appear in a row-major scan.

    Two grids with the same region shapes produce the same output no matter
    which ids their regions originally carried.

    :param list[list[int]] grid: A region grid.
    :returns: The renumbered grid.
    :rtype: list[list[int]]
    """
    mapping = {}
    normalized = []
    for row in grid:
        new_row = []
        for region_id in row:
            if region_id not in mapping:
                mapping[region_id] = len(mapping)
            new_row.append(mapping[region_id])
        normalized.append(new_row)
    return normalized


def canonical_grid(grid):
    """Returns the lexicographically smallest renumbered rotation of the grid, compared cell by cell."""
    candidates = [normalize_region_ids(rotated) for rotated in rotations(grid)]
    return min(candidates, key=lambda candidate: [cell for row in candidate for cell in row])


def serialize_grid(grid):
    return "".join(f"{cell}," for row in grid for cell in row)


def fingerprint(partition):
    """
    Computes the rotation-invariant fingerprint of a partition.

    :param RegionPartition | list[list[int]] partition: The board to identify.
    :returns: Twelve upper-case hex characters.
    :rtype: str
    :raises InvalidPartition: If a raw grid is malformed.
    """
    partition = RegionPartition.coerce(partition)
    canonical = canonical_grid(partition.rows)
    digest = hashlib.sha256(serialize_grid(canonical).encode('utf-8')).hexdigest()
    return digest[:FINGERPRINT_LENGTH].upper()
