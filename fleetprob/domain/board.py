from typing import Iterable, Iterator, Sequence, Tuple

from .config import ADJACENT_DIRECTIONS
from .types import Cell, ProbabilityMap


def cell_index(r: int, c: int, width: int) -> int:
    return r * width + c


def make_mask(cells: Iterable[Cell], width: int) -> int:
    m = 0
    for r, c in cells:
        m |= 1 << cell_index(r, c, width)
    return m


def in_bounds(r: int, c: int, height: int, width: int) -> bool:
    return 0 <= r < height and 0 <= c < width


def neighbors4(r: int, c: int, height: int, width: int) -> Iterator[Cell]:
    for dr, dc in ADJACENT_DIRECTIONS:
        nr, nc = r + dr, c + dc
        if in_bounds(nr, nc, height, width):
            yield nr, nc


def as_cells(coords: Iterable[Sequence[int]]) -> Tuple[Cell, ...]:
    """Copy caller coordinates (lists, tuples) into a tuple of (row, col) pairs."""
    return tuple((int(coord[0]), int(coord[1])) for coord in coords)


def create_grid(height: int, width: int, fill: float = 0.0) -> ProbabilityMap:
    return [[fill for _ in range(width)] for _ in range(height)]


def copy_grid(grid: Sequence[Sequence[float]]) -> ProbabilityMap:
    return [list(row) for row in grid]
