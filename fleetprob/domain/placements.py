from typing import Iterable, List, Set

from .board import make_mask
from .config import HORIZONTAL, VERTICAL
from .types import Cell, Placement


def _line_cells(r0: int, c0: int, length: int, orientation: str):
    if orientation == HORIZONTAL:
        return tuple((r0, c0 + i) for i in range(length))
    return tuple((r0 + i, c0) for i in range(length))


def enumerate_placements(
    height: int,
    width: int,
    length: int,
    misses: Iterable[Cell] = (),
) -> List[Placement]:
    """
    Every in-bounds placement of a ship of `length` that avoids known misses.

    Horizontal placements come first in row-major order of their first cell,
    followed by vertical placements in the same order.
    """
    if length <= 0:
        return []

    miss_mask = make_mask(misses, width)
    placements: List[Placement] = []

    # horizontal
    for r0 in range(height):
        for c0 in range(width - length + 1):
            cells = _line_cells(r0, c0, length, HORIZONTAL)
            mask = make_mask(cells, width)
            if mask & miss_mask:
                continue
            placements.append(Placement(length, HORIZONTAL, cells, mask))

    # vertical
    for r0 in range(height - length + 1):
        for c0 in range(width):
            cells = _line_cells(r0, c0, length, VERTICAL)
            mask = make_mask(cells, width)
            if mask & miss_mask:
                continue
            placements.append(Placement(length, VERTICAL, cells, mask))

    return placements


def is_consistent(placement: Placement, hits: Set[Cell]) -> bool:
    """
    A placement is consistent when the hits it covers form one unbroken run
    along the ship's body (or when it covers no hit at all).
    """
    indices = [i for i, cell in enumerate(placement.cells) if cell in hits]
    if not indices:
        return True
    return indices[-1] - indices[0] + 1 == len(indices)


def valid_placements(
    height: int,
    width: int,
    length: int,
    hits: Iterable[Cell],
    misses: Iterable[Cell],
) -> List[Placement]:
    hit_set = set(hits)
    return [
        p
        for p in enumerate_placements(height, width, length, misses)
        if is_consistent(p, hit_set)
    ]
