"""**********************************************************************************
 * Title: constants.py
 *
 * @version 1.0.0
 * -------------------------------------------------------------------------------
 * Description:
 * This file contains all the static data and constants for the Queens
 * puzzle application. It centralizes configuration defaults and definitions,
 * such as the cell state identifiers shared with the client, the names of
 * the region generation strategies, the two difficulty threshold tables used
 * by the constraint-density heuristic, and the caps that keep the random
 * generation loops bounded.
 **********************************************************************************"""

# --- GAME STATE CONSTANTS ---
# Defines the possible marks for a single cell on the puzzle grid.
STATE_EMPTY = 0
STATE_QUEEN = 1
STATE_CROSS = 2
VALID_STATES = (STATE_EMPTY, STATE_QUEEN, STATE_CROSS)

# --- GRID GEOMETRY ---
# Orthogonal steps (up, down, left, right) used by flood fills and region growth.
ORTHOGONAL_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))
# The four immediate diagonal neighbours. Queens may not touch along these.
DIAGONAL_STEPS = ((-1, -1), (-1, 1), (1, -1), (1, 1))

# --- REGION GENERATION STRATEGIES ---
STRATEGY_ORGANIC = 'organic'
STRATEGY_SHAPE_TEMPLATE = 'shape_template'
STRATEGIES = (STRATEGY_ORGANIC, STRATEGY_SHAPE_TEMPLATE)

# Organic growth: probability of preferring a candidate that keeps moving in a
# straight line, and how many worklist entries are probed to find one.
ORGANIC_MOMENTUM_BIAS = 0.8
ORGANIC_MOMENTUM_PROBES = 10

# Shape template packing: consecutive failed placements tolerated with the full
# catalog, placements attempted with the small shapes afterwards, and how many
# of the smallest templates count as "small".
SHAPE_MAX_FAILED_PLACEMENTS = 1000
SHAPE_FILL_ATTEMPTS = 500
SHAPE_SMALL_TEMPLATE_COUNT = 7

# --- DIFFICULTY ---
# A candidate board is accepted only when its constraint density is strictly
# below the threshold for its size. Lower thresholds demand harder boards.
DIFFICULTY_NORMAL = 'normal'
DIFFICULTY_HARD = 'hard'
DIFFICULTY_MODES = (DIFFICULTY_NORMAL, DIFFICULTY_HARD)

DENSITY_THRESHOLDS = {
    DIFFICULTY_HARD:   {5: 0.38, 6: 0.34},
    DIFFICULTY_NORMAL: {5: 0.50, 6: 0.45},
}
DEFAULT_DENSITY_THRESHOLDS = {
    DIFFICULTY_HARD: 0.30,
    DIFFICULTY_NORMAL: 0.40,
}

# --- GENERATION DEFAULTS ---
DEFAULT_BOARD_SIZE = 8
DEFAULT_STRATEGY = STRATEGY_ORGANIC
DEFAULT_DIFFICULTY_MODE = DIFFICULTY_NORMAL
MAX_GENERATION_ATTEMPTS = 1000
MIN_BOARD_SIZE = 1
MAX_BOARD_SIZE = 12
SEED_BITS = 31

# Rejection reasons reported by the accept/retry loop.
REJECT_UNSOLVABLE = 'unsolvable'
REJECT_TOO_EASY = 'too_easy'
REJECT_NOT_UNIQUE = 'not_unique'
REJECT_DUPLICATE = 'duplicate'

# --- FINGERPRINT ---
FINGERPRINT_LENGTH = 12

# --- TERMINAL DISPLAY ---
UNIFIED_COLORS_BG = [
    ("Bright Red",(255,204,204),"\033[48;2;255;204;204m\033[38;2;0;0;0m"),("Bright Green",(204,255,204),"\033[48;2;204;255;204m\033[38;2;0;0;0m"),
    ("Bright Yellow",(255,255,204),"\033[48;2;255;255;204m\033[38;2;0;0;0m"),("Bright Blue",(204,229,255),"\033[48;2;204;229;255m\033[38;2;0;0;0m"),
    ("Bright Magenta",(255,204,255),"\033[48;2;255;204;255m\033[38;2;0;0;0m"),("Bright Cyan",(204,255,255),"\033[48;2;204;255;255m\033[38;2;0;0;0m"),
    ("Light Orange",(255,229,204),"\033[48;2;255;229;204m\033[38;2;0;0;0m"),("Light Purple",(229,204,255),"\033[48;2;229;204;255m\033[38;2;0;0;0m"),
    ("Light Gray",(224,224,224),"\033[48;2;224;224;224m\033[38;2;0;0;0m"),("Mint",(210,240,210),"\033[48;2;210;240;210m\033[38;2;0;0;0m"),
    ("Peach",(255,218,185),"\033[48;2;255;218;185m\033[38;2;0;0;0m"),("Sky Blue",(173,216,230),"\033[48;2;173;216;230m\033[38;2;0;0;0m"),
]
DISPLAY_ALPHABET = '0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz-_'
