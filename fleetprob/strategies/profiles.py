from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from fleetprob.domain import config
from fleetprob.domain.config import (
    MODE_HUNTING,
    MODE_NORMAL,
    MODE_OPTIMIZED,
    MODE_ORDER,
    MODE_SUPER_AGGRESSIVE,
    MODE_TARGETING,
)
from fleetprob.domain.types import Cell

HUNT_CHECKERBOARD = "checkerboard"
HUNT_GRID = "grid"

ADJACENT_ALL = "all"            # every hit, regardless of alignment
ADJACENT_FALLBACK = "fallback"  # every hit, only when no aligned group exists
ADJACENT_ISOLATED = "isolated"  # only hits outside aligned groups


@dataclass(frozen=True)
class ModeProfile:
    """Factor constants for one probability mode. A factor of 0 disables that pass."""

    key: str
    name: str
    description: str
    hunt_pattern: Optional[str] = None
    hunt_always: bool = False
    use_active_hits: bool = False
    adjacency_factor: float = 0.0
    adjacency_scope: str = ADJACENT_ALL
    adjacency_cap: Optional[float] = None
    alignment_factor: float = 0.0
    completion_factor: float = 0.0
    completion_with_alignment: bool = True
    cross_factor: float = 0.0
    corner_factor: float = 0.0
    entropy_weight: float = 0.0


MODE_PROFILES: Dict[str, ModeProfile] = {
    MODE_NORMAL: ModeProfile(
        key=MODE_NORMAL,
        name="Normal",
        description="Placement density with a capped bonus next to hits.",
        adjacency_factor=config.ADJACENCY_FACTOR,
        adjacency_scope=ADJACENT_ALL,
        adjacency_cap=1.0,
    ),
    MODE_HUNTING: ModeProfile(
        key=MODE_HUNTING,
        name="Hunting",
        description="Halves odd-parity cells so the search sweeps a checkerboard.",
        hunt_pattern=HUNT_CHECKERBOARD,
        hunt_always=True,
    ),
    MODE_TARGETING: ModeProfile(
        key=MODE_TARGETING,
        name="Targeting",
        description=(
            "Extends aligned hits; otherwise favours the cells around each hit. "
            "Completion only runs without aligned groups, so it never boosts a cell."
        ),
        adjacency_factor=config.ADJACENCY_FACTOR,
        adjacency_scope=ADJACENT_FALLBACK,
        alignment_factor=config.ALIGNMENT_FACTOR,
        # Completions come from aligned groups, which this branch never has.
        completion_factor=config.COMPLETION_FACTOR,
        completion_with_alignment=False,
    ),
    MODE_SUPER_AGGRESSIVE: ModeProfile(
        key=MODE_SUPER_AGGRESSIVE,
        name="Super Aggressive",
        description="Heavier targeting weights plus corner patterns; checkerboard while hunting.",
        hunt_pattern=HUNT_CHECKERBOARD,
        adjacency_factor=config.SUPER_ADJACENCY_FACTOR,
        adjacency_scope=ADJACENT_FALLBACK,
        alignment_factor=config.SUPER_ALIGNMENT_FACTOR,
        completion_factor=config.SUPER_COMPLETION_FACTOR,
        corner_factor=config.SUPER_CORNER_FACTOR,
    ),
    MODE_OPTIMIZED: ModeProfile(
        key=MODE_OPTIMIZED,
        name="Optimized",
        description="Spaced opening grid, strong targeting on live hits, blended with an entropy score.",
        hunt_pattern=HUNT_GRID,
        use_active_hits=True,
        adjacency_factor=config.OPTIMIZED_ADJACENCY_FACTOR,
        adjacency_scope=ADJACENT_ISOLATED,
        alignment_factor=config.OPTIMIZED_ALIGNMENT_FACTOR,
        completion_factor=config.OPTIMIZED_COMPLETION_FACTOR,
        cross_factor=config.OPTIMIZED_CROSS_FACTOR,
        corner_factor=config.OPTIMIZED_PATTERN_FACTOR,
        entropy_weight=config.ENTROPY_WEIGHT,
    ),
}


def mode_keys() -> List[str]:
    return list(MODE_ORDER)


def get_profile(mode: str) -> ModeProfile:
    key = (mode or "").strip().lower()
    profile = MODE_PROFILES.get(key)
    if profile is None:
        raise ValueError(f"Unknown mode '{mode}'. Use one of: {', '.join(MODE_ORDER)}.")
    return profile


def resolve_mode(mode: str, hits: Sequence[Cell]) -> str:
    """
    Mode actually used for one computation.

    "normal" is upgraded to "targeting" as soon as any hit is on the board.
    The upgrade applies to that call only; nothing is written back.
    """
    key = get_profile(mode).key
    if key == MODE_NORMAL and len(hits) > 0:
        return MODE_TARGETING
    return key
