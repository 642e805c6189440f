from typing import Iterable, Sequence

from fleetprob.domain.board import create_grid
from fleetprob.domain.types import Cell, ProbabilityMap


def _window_count(pos: int, span: int, length: int, blocked) -> int:
    # Windows [start, start + length) along one axis that contain `pos`.
    count = 0
    for start in range(max(0, pos - length + 1), min(pos, span - length) + 1):
        if not any(blocked(i) for i in range(start, start + length) if i != pos):
            count += 1
    return count


def entropy_scores(
    grid: Sequence[Sequence[float]],
    misses: Iterable[Cell],
    ship_lengths: Iterable[int],
) -> ProbabilityMap:
    """
    Score each live cell by how many ship windows pass through it.

    A window counts when every other cell in it is free of misses; the scored
    cell itself is not checked. Scores are divided by the board maximum, so
    the best cell scores 1.0 and dead cells score 0.0.
    """
    height = len(grid)
    width = len(grid[0]) if height else 0
    miss_set = set(misses)
    lengths = [length for length in ship_lengths if length > 0]
    scores = create_grid(height, width)

    best = 0.0
    for r in range(height):
        for c in range(width):
            if grid[r][c] <= 0:
                continue
            gain = 0
            for length in lengths:
                gain += _window_count(c, width, length, lambda j: (r, j) in miss_set)
                gain += _window_count(r, height, length, lambda i: (i, c) in miss_set)
            scores[r][c] = float(gain)
            best = max(best, scores[r][c])

    if best > 0:
        for r in range(height):
            for c in range(width):
                scores[r][c] /= best
    return scores


def blend_entropy(
    grid: Sequence[Sequence[float]],
    scores: Sequence[Sequence[float]],
    weight: float,
) -> ProbabilityMap:
    """Mix entropy into live cells: (1 - weight) * p + weight * score."""
    return [
        [
            (1.0 - weight) * p + weight * s if p > 0 else p
            for p, s in zip(row, score_row)
        ]
        for row, score_row in zip(grid, scores)
    ]
