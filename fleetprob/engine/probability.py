from typing import Iterable, List, Sequence

from fleetprob.domain.alignment import active_hits
from fleetprob.domain.board import as_cells, create_grid
from fleetprob.domain.config import MODE_NORMAL
from fleetprob.domain.density import (
    base_probability_map,
    coverage_counts,
    normalize_map,
    unexplained_hits,
)
from fleetprob.domain.types import Cell, ProbabilityMap, SunkShip
from fleetprob.strategies.heuristics import HeuristicContext, apply_profile
from fleetprob.strategies.profiles import get_profile, resolve_mode
from fleetprob.utils.debug import debug_event


def _copy_sunk(sunk_ships: Iterable[SunkShip]) -> tuple:
    return tuple(SunkShip(int(ship.length), as_cells(ship.positions)) for ship in sunk_ships)


def compute_probabilities(
    height: int,
    width: int,
    hits: Iterable[Sequence[int]],
    misses: Iterable[Sequence[int]],
    remaining_ship_lengths: Iterable[int],
    mode: str = MODE_NORMAL,
    sunk_ships: Iterable[SunkShip] = (),
) -> ProbabilityMap:
    """
    Probability that a hidden ship occupies each cell.

    The map counts every consistent placement of each remaining ship, re-weights
    it with the mode's heuristics and normalizes so the positive cells sum to 1.
    Hit and miss cells are always 0.

    Returns an all-zero map when no ships remain, when no placement is legal, or
    when a live hit cannot be covered by any remaining ship. Raises ValueError
    only for an unknown mode key. Caller containers are copied, never mutated.
    """
    hit_cells = as_cells(hits)
    miss_cells = as_cells(misses)
    lengths = tuple(int(length) for length in remaining_ship_lengths)
    sunk = _copy_sunk(sunk_ships)

    effective_mode = resolve_mode(mode, hit_cells)
    if effective_mode != get_profile(mode).key:
        debug_event("mode", f"{mode} upgraded to {effective_mode}", f"hits={len(hit_cells)}")

    if not lengths:
        return create_grid(height, width)

    coverage = coverage_counts(height, width, hit_cells, miss_cells, lengths)
    if coverage.total == 0:
        debug_event(
            "no placements",
            "no consistent placement for the remaining ships",
            f"lengths={list(lengths)} hits={list(hit_cells)} misses={list(miss_cells)}",
            level="warning",
        )
        return create_grid(height, width)

    live_hits = tuple(active_hits(hit_cells, sunk))
    orphans = unexplained_hits(coverage, live_hits)
    if orphans:
        debug_event(
            "contradiction",
            "live hits cannot be covered by any remaining ship",
            f"orphans={orphans} lengths={list(lengths)}",
            level="warning",
        )
        return create_grid(height, width)

    base = base_probability_map(height, width, coverage, hit_cells, miss_cells)
    ctx = HeuristicContext(height, width, hit_cells, miss_cells, live_hits, lengths)
    weighted = apply_profile(base, ctx, get_profile(effective_mode))
    return normalize_map(weighted)


def best_cells(grid: Sequence[Sequence[float]], limit: int = 1) -> List[Cell]:
    """
    The highest-valued cells, best first and row-major among equal values.

    At least `limit` cells are returned when that many are positive; cells tied
    with the last one returned are included as well.
    """
    ranked = sorted(
        ((value, r, c) for r, row in enumerate(grid) for c, value in enumerate(row) if value > 0),
        key=lambda item: (-item[0], item[1], item[2]),
    )
    if not ranked or limit <= 0:
        return []

    cutoff = ranked[min(limit, len(ranked)) - 1][0]
    return [(r, c) for value, r, c in ranked if value >= cutoff - 1e-12]
