"""**********************************************************************************
 * Title: puzzle_handler.py
 *
 * @version 1.0.0
 * -------------------------------------------------------------------------------
 * Description:
 * This module serves as the entry point for creating new Queens puzzles. It
 * runs the accept/retry loop: a master generator seeded from the request
 * hands out a fresh seed per attempt, the selected strategy builds a
 * candidate partition, and the candidate is rejected if it is unsolvable,
 * too easy for the selected difficulty table, not unique (when uniqueness is
 * required) or a board the caller has already seen. Each rejection reason is
 * counted and logged. The loop is capped, and running out of attempts raises
 * GenerationExhausted instead of spinning forever. An accepted board is
 * returned with its fingerprint and the seed that reproduces it.
 **********************************************************************************"""

# --- IMPORTS ---
import logging
import random
import secrets
import time
from collections import Counter

from queens.board_hasher import fingerprint as compute_fingerprint
from queens.constants import (
    DEFAULT_STRATEGY, DEFAULT_DIFFICULTY_MODE, MAX_GENERATION_ATTEMPTS, SEED_BITS,
    REJECT_NOT_UNIQUE, REJECT_DUPLICATE
)
from queens.constraint_solver import density_threshold, evaluate_candidate
from queens.errors import GenerationExhausted
from queens.game_state import PuzzleGameState
from queens.region_partitioner import get_partitioner, partition_with_rng
from queens.z3_solver import has_unique_solution


class GeneratedPuzzle:
    """An accepted board together with everything needed to reproduce and identify it."""

    def __init__(self, partition, fingerprint, seed, strategy, difficulty_mode, attempts, density):
        self.partition = partition
        self.fingerprint = fingerprint
        self.seed = seed
        self.strategy = strategy
        self.difficulty_mode = difficulty_mode
        self.attempts = attempts
        self.density = density

    @property
    def board_size(self):
        return self.partition.size

    def to_dict(self):
        return {
            'regionGrid': self.partition.to_lists(),
            'size': self.board_size,
            'fingerprint': self.fingerprint,
            'seed': self.seed,
            'strategy': self.strategy,
            'difficulty': self.difficulty_mode,
            'attempts': self.attempts,
            'density': self.density,
        }

    def __repr__(self):
        return (f"GeneratedPuzzle(size={self.board_size}, fingerprint={self.fingerprint!r}, "
                f"seed={self.seed}, attempts={self.attempts})")


def new_seed():
    """Draws an unpredictable seed for requests that did not supply one."""
    return secrets.randbits(SEED_BITS)


def generate_puzzle(board_size, seed=None, strategy=DEFAULT_STRATEGY, difficulty_mode=DEFAULT_DIFFICULTY_MODE,
                    max_attempts=MAX_GENERATION_ATTEMPTS, require_unique=False, seen_fingerprints=None):
    """
    Generates candidate boards until one is accepted.

    :param int board_size: The board dimension N.
    :param int | None seed: Master seed. The same seed and options always yield
                            the same puzzle. A fresh seed is drawn when None.
    :param str strategy: Region generation strategy tag.
    :param str difficulty_mode: Which density threshold table to apply.
    :param int max_attempts: Upper bound on candidates generated.
    :param bool require_unique: Also require exactly one solution (checked with Z3).
    :param set[str] | None seen_fingerprints: Fingerprints to reject as duplicates.
    :returns: The accepted puzzle.
    :rtype: GeneratedPuzzle
    :raises GenerationExhausted: If no candidate is accepted within `max_attempts`.
    :raises ValueError: If the size, strategy or difficulty mode is invalid.
    """
    # Fail fast on bad options rather than after the first candidate.
    get_partitioner(strategy)
    threshold = density_threshold(board_size, difficulty_mode)
    if seed is None:
        seed = new_seed()
    seen_fingerprints = seen_fingerprints if seen_fingerprints is not None else set()

    master = random.Random(seed)
    rejections = Counter()
    start_time = time.monotonic()
    logging.info(f"Generating a {board_size}x{board_size} board (seed={seed}, strategy={strategy}, "
                 f"difficulty={difficulty_mode}, threshold={threshold:.2f}).")

    for attempt in range(1, max_attempts + 1):
        candidate_rng = random.Random(master.getrandbits(SEED_BITS))
        partition = partition_with_rng(board_size, candidate_rng, strategy)

        accepted, reason, density = evaluate_candidate(partition, difficulty_mode)
        board_fingerprint = None
        if accepted:
            board_fingerprint = compute_fingerprint(partition)
            if board_fingerprint in seen_fingerprints:
                accepted, reason = False, REJECT_DUPLICATE
        if accepted and require_unique and not has_unique_solution(partition):
            accepted, reason = False, REJECT_NOT_UNIQUE

        if not accepted:
            rejections[reason] += 1
            density_note = f", density={density:.3f}" if density is not None else ""
            logging.debug(f"Attempt #{attempt} rejected: {reason}{density_note}.")
            continue

        logging.info(f"Accepted board {board_fingerprint} after {attempt} attempts "
                     f"(density={density:.3f}, {time.monotonic() - start_time:.2f} s).")
        return GeneratedPuzzle(partition, board_fingerprint, seed, strategy, difficulty_mode, attempt, density)

    error = GenerationExhausted(board_size, max_attempts, rejections)
    logging.warning(str(error))
    raise error


def generate(board_size, seed=None, strategy=DEFAULT_STRATEGY, difficulty_mode=DEFAULT_DIFFICULTY_MODE):
    """Generates a puzzle and returns just its (partition, fingerprint) pair."""
    puzzle = generate_puzzle(board_size, seed=seed, strategy=strategy, difficulty_mode=difficulty_mode)
    return puzzle.partition, puzzle.fingerprint


def new_game_state(partition):
    return PuzzleGameState(partition)
