from dataclasses import dataclass
from typing import Iterable, List, Sequence

from .board import create_grid
from .placements import valid_placements
from .types import Cell, ProbabilityMap


@dataclass
class Coverage:
    counts: List[List[int]]
    total: int


def coverage_counts(
    height: int,
    width: int,
    hits: Sequence[Cell],
    misses: Sequence[Cell],
    ship_lengths: Iterable[int],
) -> Coverage:
    """Tally, per cell, how many consistent placements of the remaining ships cover it."""
    counts = [[0 for _ in range(width)] for _ in range(height)]
    total = 0
    for length in ship_lengths:
        placements = valid_placements(height, width, length, hits, misses)
        total += len(placements)
        for p in placements:
            for r, c in p.cells:
                counts[r][c] += 1
    return Coverage(counts, total)


def unexplained_hits(coverage: Coverage, hits: Iterable[Cell]) -> List[Cell]:
    return [(r, c) for r, c in hits if coverage.counts[r][c] == 0]


def base_probability_map(
    height: int,
    width: int,
    coverage: Coverage,
    hits: Iterable[Cell],
    misses: Iterable[Cell],
) -> ProbabilityMap:
    grid = create_grid(height, width)
    if coverage.total <= 0:
        return grid

    known = set(hits) | set(misses)
    for r in range(height):
        for c in range(width):
            if (r, c) in known:
                continue
            grid[r][c] = coverage.counts[r][c] / coverage.total
    return grid


def normalize_map(grid: Sequence[Sequence[float]]) -> ProbabilityMap:
    """Scale positive cells so they sum to 1; zero cells stay zero."""
    total = 0.0
    for row in grid:
        for value in row:
            if value > 0:
                total += value

    if total <= 0:
        return [[0.0 for _ in row] for row in grid]

    return [[value / total if value > 0 else 0.0 for value in row] for row in grid]
