from dataclasses import dataclass
from typing import Iterable, List, Sequence, Set, Tuple

from fleetprob.domain import config
from fleetprob.domain.alignment import (
    estimate_smallest_ship,
    extension_points,
    find_aligned_groups,
    find_completions,
    isolated_hits,
)
from fleetprob.domain.board import copy_grid, in_bounds, neighbors4
from fleetprob.domain.types import Cell, ProbabilityMap
from fleetprob.strategies.entropy import blend_entropy, entropy_scores
from fleetprob.strategies.profiles import (
    ADJACENT_ALL,
    ADJACENT_FALLBACK,
    HUNT_CHECKERBOARD,
    HUNT_GRID,
    ModeProfile,
)


@dataclass(frozen=True)
class HeuristicContext:
    height: int
    width: int
    hits: Tuple[Cell, ...]
    misses: Tuple[Cell, ...]
    active_hits: Tuple[Cell, ...]
    ship_lengths: Tuple[int, ...]


def _boost(grid: ProbabilityMap, cells: Iterable[Cell], factor: float) -> None:
    for r, c in cells:
        if grid[r][c] > 0:
            grid[r][c] *= factor


def adjacent_cells(hits: Sequence[Cell], misses: Iterable[Cell], height: int, width: int) -> List[Cell]:
    """Distinct 4-neighbours of the hits that are neither hit nor miss, in discovery order."""
    known: Set[Cell] = set(hits) | set(misses)
    seen: Set[Cell] = set()
    cells: List[Cell] = []
    for r, c in hits:
        for cell in neighbors4(r, c, height, width):
            if cell in known or cell in seen:
                continue
            seen.add(cell)
            cells.append(cell)
    return cells


def apply_checkerboard(grid: ProbabilityMap) -> None:
    for r, row in enumerate(grid):
        for c, value in enumerate(row):
            if (r + c) % 2 == 1 and value > 0:
                row[c] = value * config.CHECKERBOARD_DAMPING


def apply_opening_grid(grid: ProbabilityMap, ship_lengths: Sequence[int]) -> None:
    """
    Opening pattern for the optimized mode.

    Cells on a diagonal lattice spaced by the smallest remaining ship get
    doubled. On a 10x10 board the three cells at each corner are halved and
    the 3x3 centre gets a mild boost.
    """
    height = len(grid)
    width = len(grid[0]) if height else 0
    smallest = min(ship_lengths) if ship_lengths else config.MIN_SHIP_SIZE
    spacing = max(2, smallest - 1)

    for r in range(height):
        for c in range(width):
            on_lattice = (r % spacing == 0 and c % spacing == 0) or (r % spacing == 1 and c % spacing == 1)
            if on_lattice:
                grid[r][c] *= config.GRID_PATTERN_FACTOR

    if height != config.OPENING_BOARD_SIZE or width != config.OPENING_BOARD_SIZE:
        return

    corners = [
        (0, 0), (0, 1), (1, 0),
        (0, width - 1), (0, width - 2), (1, width - 1),
        (height - 1, 0), (height - 2, 0), (height - 1, 1),
        (height - 1, width - 1), (height - 1, width - 2), (height - 2, width - 1),
    ]
    _boost(grid, corners, config.CORNER_DAMPING)

    center_r = height // 2
    center_c = width // 2
    center = [
        (r, c)
        for r in range(center_r - 1, center_r + 2)
        for c in range(center_c - 1, center_c + 2)
        if in_bounds(r, c, height, width)
    ]
    _boost(grid, center, config.CENTER_BOOST)


def apply_corner_pattern(
    grid: ProbabilityMap,
    hits: Sequence[Cell],
    misses: Iterable[Cell],
    factor: float,
) -> None:
    """
    Boost the cells that would close an L or T shape between two hits.

    Every ordered pair of hits that shares neither a row nor a column is
    visited, so each unordered pair boosts its two corner cells twice.
    """
    height = len(grid)
    width = len(grid[0]) if height else 0
    known: Set[Cell] = set(hits) | set(misses)

    for r1, c1 in hits:
        for r2, c2 in hits:
            if r1 == r2 or c1 == c2:
                continue
            for r, c in ((r1, c2), (r2, c1)):
                if in_bounds(r, c, height, width) and (r, c) not in known:
                    grid[r][c] *= factor


def apply_cross_pattern(grid: ProbabilityMap, hits: Sequence[Cell], misses: Iterable[Cell], factor: float) -> None:
    height = len(grid)
    width = len(grid[0]) if height else 0
    known: Set[Cell] = set(hits) | set(misses)
    for r, c in hits:
        _boost(grid, [cell for cell in neighbors4(r, c, height, width) if cell not in known], factor)


def apply_profile(
    grid: Sequence[Sequence[float]],
    ctx: HeuristicContext,
    profile: ModeProfile,
) -> ProbabilityMap:
    """
    Re-weight a base probability map with one mode's factors.

    Returns a new grid; the result is not normalized.
    """
    out = copy_grid(grid)
    hits = list(ctx.active_hits if profile.use_active_hits else ctx.hits)

    if profile.hunt_pattern and (profile.hunt_always or not hits):
        if profile.hunt_pattern == HUNT_CHECKERBOARD:
            apply_checkerboard(out)
        elif profile.hunt_pattern == HUNT_GRID:
            apply_opening_grid(out, ctx.ship_lengths)
        return out

    if not hits:
        return out

    groups = find_aligned_groups(hits)
    extended = bool(profile.alignment_factor) and bool(groups)
    if extended:
        for group in groups:
            _boost(out, extension_points(group, ctx.height, ctx.width, ctx.misses), profile.alignment_factor)

    if profile.adjacency_factor:
        if profile.adjacency_scope == ADJACENT_ALL:
            targets = hits
        elif profile.adjacency_scope == ADJACENT_FALLBACK:
            targets = [] if extended else hits
        else:
            targets = isolated_hits(hits, groups)
        for r, c in adjacent_cells(targets, ctx.misses, ctx.height, ctx.width):
            if out[r][c] <= 0:
                continue
            value = out[r][c] * profile.adjacency_factor
            if profile.adjacency_cap is not None:
                value = min(profile.adjacency_cap, value)
            out[r][c] = value

    if profile.completion_factor and (profile.completion_with_alignment or not extended):
        ship_size = estimate_smallest_ship(out)
        completions = find_completions(groups, ship_size, ctx.height, ctx.width, ctx.misses)
        _boost(out, completions, profile.completion_factor)

    if profile.cross_factor:
        apply_cross_pattern(out, hits, ctx.misses, profile.cross_factor)

    if profile.corner_factor:
        apply_corner_pattern(out, hits, ctx.misses, profile.corner_factor)

    # A second aligned group means alignment already dominates the choice.
    # Groups here come from live hits only; hits on sunk ships never count.
    if profile.entropy_weight and len(groups) < 2:
        scores = entropy_scores(out, ctx.misses, ctx.ship_lengths)
        out = blend_entropy(out, scores, profile.entropy_weight)

    return out
