# generator.py
#
# Description:
# A command-line tool for generating batches of Queens puzzles.
# Each board is built by one of the region generation strategies, accepted
# only if the backtracking solver finds a placement and its constraint density
# is below the threshold of the chosen difficulty table, and optionally checked
# for a unique solution with the Z3 SMT solver. Boards are deduplicated by
# their rotation-invariant fingerprint, so a batch never contains the same
# board twice, even rotated.
#
# Usage:
# python generator.py [size] [--count K] [--seed S] [--strategy organic|shape_template]
#                     [--difficulty normal|hard] [--max-attempts M] [--unique] [--debug]
#
# Example:
# python generator.py 8 --count 5 --seed 42 --difficulty hard
#
# If no arguments are provided, it generates a single 8x8 board.

import argparse
import logging
import random
import sys
import time

from tqdm import tqdm

from queens import constants as const
from queens.constraint_solver import find_solution
from queens.errors import GenerationExhausted
from queens.puzzle_handler import generate_puzzle
from queens.z3_solver import format_duration


# --- EXPORT AND DISPLAY ---
def display_terminal_grid(grid, title, queens=None):
    """Prints a colorized representation of the grid to the terminal."""
    if not grid: return
    RESET = "\033[0m"; print(f"\n--- {title} ---")
    queens = set(queens or [])
    for r, row in enumerate(grid):
        colored_chars = []
        for c, region_num in enumerate(row):
            color_ansi = const.UNIFIED_COLORS_BG[region_num % len(const.UNIFIED_COLORS_BG)][2]
            symbol = 'Q' if (r, c) in queens else const.DISPLAY_ALPHABET[region_num % len(const.DISPLAY_ALPHABET)]
            colored_chars.append(f"{color_ansi} {symbol} {RESET}")
        print("".join(colored_chars))
    print("-" * (len(grid) * 3))


def generate_batch(size, count, seed, strategy, difficulty, max_attempts, unique):
    """
    Generates `count` boards that are pairwise distinct by fingerprint.

    :returns: The accepted puzzles in generation order.
    :rtype: list[GeneratedPuzzle]
    """
    master = random.Random(seed)
    seen, puzzles = set(), []
    for _ in tqdm(range(count), desc="Generating boards", disable=count < 2):
        puzzle = generate_puzzle(
            size,
            seed=master.getrandbits(const.SEED_BITS),
            strategy=strategy,
            difficulty_mode=difficulty,
            max_attempts=max_attempts,
            require_unique=unique,
            seen_fingerprints=seen,
        )
        seen.add(puzzle.fingerprint)
        puzzles.append(puzzle)
    return puzzles


def build_parser():
    parser = argparse.ArgumentParser(description="Generate Queens puzzles with unique fingerprints.")
    parser.add_argument("size", nargs="?", type=int, default=const.DEFAULT_BOARD_SIZE, help="Board dimension N (default: %(default)s).")
    parser.add_argument("--count", type=int, default=1, help="Number of distinct boards to generate.")
    parser.add_argument("--seed", type=int, default=None, help="Master seed for a reproducible batch.")
    parser.add_argument("--strategy", choices=const.STRATEGIES, default=const.DEFAULT_STRATEGY, help="Region generation strategy.")
    parser.add_argument("--difficulty", choices=const.DIFFICULTY_MODES, default=const.DEFAULT_DIFFICULTY_MODE, help="Density threshold table.")
    parser.add_argument("--max-attempts", type=int, default=const.MAX_GENERATION_ATTEMPTS, help="Candidate boards tried per puzzle before giving up.")
    parser.add_argument("--unique", action="store_true", help="Only accept boards with exactly one solution (uses Z3).")
    parser.add_argument("--debug", action="store_true", help="Log every rejected candidate.")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING, format="%(levelname)s %(message)s")
    if not const.MIN_BOARD_SIZE <= args.size <= const.MAX_BOARD_SIZE:
        print(f"Board size must be between {const.MIN_BOARD_SIZE} and {const.MAX_BOARD_SIZE}."); return 2
    if args.count < 1:
        print("--count must be at least 1."); return 2

    start_time = time.monotonic()
    try:
        puzzles = generate_batch(args.size, args.count, args.seed, args.strategy,
                                 args.difficulty, args.max_attempts, args.unique)
    except GenerationExhausted as e:
        print(f"Generation failed: {e}")
        return 1

    for index, puzzle in enumerate(puzzles, start=1):
        grid = puzzle.partition.to_lists()
        display_terminal_grid(grid, f"Board #{index} ({puzzle.fingerprint})")
        display_terminal_grid(grid, "Solution", queens=find_solution(puzzle.partition))
        print(f"Seed: {puzzle.seed}   Density: {puzzle.density:.3f}   Attempts: {puzzle.attempts}")
        print(f"Task String: {','.join(str(cell) for row in grid for cell in row)}")
    print(f"\nGenerated {len(puzzles)} board(s) in {format_duration(time.monotonic() - start_time)}.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
