from typing import Iterable, List, Sequence, Tuple

from .alignment import active_hits, find_aligned_groups
from .types import Cell, SunkShip


def remaining_ship_lengths(fleet: Iterable[int], sunk_ships: Iterable[SunkShip] = ()) -> List[int]:
    """Remove each confirmed sunk ship's length from the fleet, once per ship."""
    remaining = list(fleet)
    for ship in sunk_ships:
        if ship.length in remaining:
            remaining.remove(ship.length)
    return remaining


def propose_sunk_candidates(
    hits: Sequence[Cell],
    sunk_ships: Sequence[SunkShip],
    remaining_lengths: Sequence[int],
) -> List[SunkShip]:
    """
    Aligned runs of live hits whose length matches a ship still afloat.

    These are proposals only: two ships of the same length, or two ships lying
    end to end, make this guess unreliable, so the caller must confirm each
    candidate (see `confirm_sunk`) before it is treated as sunk.
    """
    lengths = set(remaining_lengths)
    live = active_hits(hits, sunk_ships)
    candidates: List[SunkShip] = []
    for group in find_aligned_groups(live):
        if len(group) in lengths:
            candidates.append(SunkShip(len(group), group.cells))
    return candidates


def confirm_sunk(sunk_ships: Sequence[SunkShip], candidate: SunkShip) -> Tuple[SunkShip, ...]:
    if candidate.length <= 0 or len(candidate.positions) != candidate.length:
        raise ValueError(
            f"sunk ship of length {candidate.length} must list exactly {candidate.length} positions"
        )
    if candidate in sunk_ships:
        return tuple(sunk_ships)
    return tuple(sunk_ships) + (candidate,)
