"""Core of the Queens puzzle lab: region generation, solving, fingerprinting and game state."""

from queens.board_hasher import fingerprint
from queens.constraint_solver import constraint_density, is_solvable
from queens.errors import GenerationExhausted, InvalidPartition, OutOfRange, QueensError
from queens.game_state import PuzzleGameState
from queens.partition import RegionPartition
from queens.puzzle_handler import GeneratedPuzzle, generate, generate_puzzle, new_game_state
from queens.region_partitioner import generate_regions

__version__ = "1.0.0"

__all__ = [
    "GeneratedPuzzle",
    "GenerationExhausted",
    "InvalidPartition",
    "OutOfRange",
    "PuzzleGameState",
    "QueensError",
    "RegionPartition",
    "constraint_density",
    "fingerprint",
    "generate",
    "generate_puzzle",
    "generate_regions",
    "is_solvable",
    "new_game_state",
]
