import os

# Classic fleet: carrier, battleship, cruiser, submarine, destroyer
CLASSIC_FLEET = (5, 4, 3, 3, 2)
MAX_SHIP_SIZE = 5
MIN_SHIP_SIZE = 2

HORIZONTAL = "horizontal"
VERTICAL = "vertical"

# Up, right, down, left
ADJACENT_DIRECTIONS = ((-1, 0), (0, 1), (1, 0), (0, -1))

MODE_NORMAL = "normal"
MODE_HUNTING = "hunting"
MODE_TARGETING = "targeting"
MODE_SUPER_AGGRESSIVE = "aggressive"
MODE_OPTIMIZED = "optimized"

MODE_ORDER = [MODE_NORMAL, MODE_HUNTING, MODE_TARGETING, MODE_SUPER_AGGRESSIVE, MODE_OPTIMIZED]

# Multipliers applied on top of the placement density.
ADJACENCY_FACTOR = 3.0
ALIGNMENT_FACTOR = 4.0
COMPLETION_FACTOR = 5.0

SUPER_ADJACENCY_FACTOR = 5.0
SUPER_ALIGNMENT_FACTOR = 8.0
SUPER_COMPLETION_FACTOR = 10.0
SUPER_CORNER_FACTOR = 1.5

OPTIMIZED_ADJACENCY_FACTOR = 10.0
OPTIMIZED_ALIGNMENT_FACTOR = 15.0
OPTIMIZED_COMPLETION_FACTOR = 20.0
OPTIMIZED_CROSS_FACTOR = 2.0
OPTIMIZED_PATTERN_FACTOR = 5.0

CHECKERBOARD_DAMPING = 0.5

# Opening pattern used by the optimized mode before any live hit.
GRID_PATTERN_FACTOR = 2.0
CORNER_DAMPING = 0.5
CENTER_BOOST = 1.25
OPENING_BOARD_SIZE = 10

# final = (1 - w) * probability + w * entropy
ENTROPY_WEIGHT = 0.3

NORMALIZATION_TOLERANCE = 1e-9

# Debug logging (see fleetprob.utils.debug)
DEBUG_ENV_VAR = "FLEETPROB_DEBUG"
DEBUG_LOG_ENV_VAR = "FLEETPROB_DEBUG_LOG"
DEFAULT_DEBUG_LOG_PATH = "fleetprob_debug.log"


def env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return str(raw).strip().lower() in {"1", "true", "yes", "on"}


def env_str(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()
