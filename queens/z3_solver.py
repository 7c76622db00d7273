"""**********************************************************************************
 * Title: z3_solver.py
 *
 * @version 1.0.0
 * -------------------------------------------------------------------------------
 * Description:
 * This module counts the solutions of a Queens board with the Z3 theorem
 * prover. The Z3QueensSolver class translates the rules of the game (one
 * queen per row, column and region, and no two queens touching) into
 * pseudo-boolean constraints. Each model found is blocked so that Z3 is
 * asked for a different one, which makes it cheap to tell a board with a
 * unique solution from one with several. The backtracking solver only proves
 * that a solution exists; this one is used when uniqueness is required.
 **********************************************************************************"""

# --- IMPORTS ---
import time

from z3 import Solver, Bool, PbEq, Implies, And, Not, Or, sat

from queens.partition import RegionPartition


# --- HELPER FUNCTIONS ---
def format_duration(seconds):
    """
    Formats a time duration in seconds into a more human-readable string.

    :param float seconds: The duration in seconds to format.
    :returns: The formatted time string (e.g., "1.234 s", "5.67 ms", "1 min 30.00 s").
    :rtype: str
    """
    if seconds >= 60: return f"{int(seconds//60)} min {seconds%60:.2f} s"
    if seconds >= 1: return f"{seconds:.3f} s"
    return f"{seconds*1000:.2f} ms"


# --- SOLVER CLASS ---
class Z3QueensSolver:
    """A class to solve Queens boards using the Z3 SMT solver."""
    def __init__(self, partition):
        """
        :param RegionPartition | list[list[int]] partition: The board to solve.
        :raises InvalidPartition: If a raw grid is malformed.
        """
        self.partition = RegionPartition.coerce(partition)
        self.dim = self.partition.size

    def _add_constraints(self, s, grid_vars):
        # Rule: one queen per row and per column
        for i in range(self.dim):
            s.add(PbEq([(grid_vars[i][c], 1) for c in range(self.dim)], 1))
            s.add(PbEq([(grid_vars[r][i], 1) for r in range(self.dim)], 1))

        # Rule: one queen per region
        for region_id in range(self.dim):
            cells = self.partition.cells_of(region_id)
            s.add(PbEq([(grid_vars[r][c], 1) for r, c in cells], 1))

        # Rule: queens cannot touch, including diagonally
        for r in range(self.dim):
            for c in range(self.dim):
                neighbors = []
                for dr in [-1, 0, 1]:
                    for dc in [-1, 0, 1]:
                        if dr == 0 and dc == 0: continue
                        nr, nc = r + dr, c + dc
                        if 0 <= nr < self.dim and 0 <= nc < self.dim:
                            neighbors.append(Not(grid_vars[nr][nc]))
                if neighbors:
                    s.add(Implies(grid_vars[r][c], And(neighbors)))

    def solve(self, max_solutions=2):
        """
        Finds up to `max_solutions` distinct solutions.

        :param int max_solutions: Stop after this many solutions; two is enough to test uniqueness.
        :returns: A tuple of the solutions found, each a 2D grid of 0s and 1s,
                  and a stats dictionary with the solve time in seconds.
        :rtype: tuple[list[list[list[int]]], dict]
        """
        s = Solver()
        grid_vars = [[Bool(f"q_{r}_{c}") for c in range(self.dim)] for r in range(self.dim)]
        self._add_constraints(s, grid_vars)

        solutions, start_time = [], time.monotonic()
        while len(solutions) < max_solutions and s.check() == sat:
            model = s.model()
            solution = [[(1 if model.evaluate(grid_vars[r][c], model_completion=True) else 0) for c in range(self.dim)] for r in range(self.dim)]
            solutions.append(solution)
            # Block this solution so the next check must find a different one
            s.add(Or([Not(v) if solution[r][c] else v for r, row in enumerate(grid_vars) for c, v in enumerate(row)]))
        return solutions, {'solve_time': time.monotonic() - start_time}


def count_solutions(partition, limit=2):
    solutions, _ = Z3QueensSolver(partition).solve(max_solutions=limit)
    return len(solutions)


def has_unique_solution(partition):
    return count_solutions(partition, limit=2) == 1
