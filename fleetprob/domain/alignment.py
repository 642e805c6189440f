from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence, Set, Tuple

from .board import in_bounds
from .config import HORIZONTAL, MAX_SHIP_SIZE, MIN_SHIP_SIZE, VERTICAL
from .types import AlignedGroup, Cell, SunkShip


@dataclass(frozen=True)
class HitPatterns:
    aligned_groups: Tuple[AlignedGroup, ...]
    isolated_hits: Tuple[Cell, ...]


def active_hits(hits: Iterable[Cell], sunk_ships: Iterable[SunkShip] = ()) -> List[Cell]:
    """Hits that are not already attributed to a confirmed sunk ship."""
    sunk_positions: Set[Cell] = set()
    for ship in sunk_ships:
        sunk_positions.update(ship.positions)
    return [hit for hit in hits if hit not in sunk_positions]


def _runs(sorted_cells: List[Cell], axis: int) -> List[Tuple[Cell, ...]]:
    runs: List[Tuple[Cell, ...]] = []
    start = 0
    for i in range(1, len(sorted_cells) + 1):
        if i == len(sorted_cells) or sorted_cells[i][axis] > sorted_cells[i - 1][axis] + 1:
            if i - start >= 2:
                runs.append(tuple(sorted_cells[start:i]))
            start = i
    return runs


def find_aligned_groups(hits: Iterable[Cell]) -> List[AlignedGroup]:
    """
    Maximal runs of two or more consecutive hits.

    Row runs are listed first (rows ascending), then column runs (columns
    ascending). A hit may belong to one row run and one column run.
    """
    by_row: Dict[int, List[Cell]] = {}
    by_col: Dict[int, List[Cell]] = {}
    for r, c in dict.fromkeys(hits):
        by_row.setdefault(r, []).append((r, c))
        by_col.setdefault(c, []).append((r, c))

    groups: List[AlignedGroup] = []
    for r in sorted(by_row):
        row_hits = sorted(by_row[r], key=lambda cell: cell[1])
        for run in _runs(row_hits, 1):
            groups.append(AlignedGroup(HORIZONTAL, run))
    for c in sorted(by_col):
        col_hits = sorted(by_col[c], key=lambda cell: cell[0])
        for run in _runs(col_hits, 0):
            groups.append(AlignedGroup(VERTICAL, run))
    return groups


def extension_points(
    group: AlignedGroup,
    height: int,
    width: int,
    misses: Iterable[Cell] = (),
) -> List[Cell]:
    miss_set = set(misses)
    first = group.cells[0]
    last = group.cells[-1]
    if group.direction == HORIZONTAL:
        candidates = [(first[0], first[1] - 1), (last[0], last[1] + 1)]
    else:
        candidates = [(first[0] - 1, first[1]), (last[0] + 1, last[1])]
    return [
        (r, c)
        for r, c in candidates
        if in_bounds(r, c, height, width) and (r, c) not in miss_set
    ]


def isolated_hits(hits: Iterable[Cell], groups: Sequence[AlignedGroup]) -> List[Cell]:
    grouped: Set[Cell] = set()
    for group in groups:
        grouped.update(group.cells)
    return [hit for hit in hits if hit not in grouped]


def analyze_hit_patterns(hits: Iterable[Cell], sunk_ships: Iterable[SunkShip] = ()) -> HitPatterns:
    live = active_hits(hits, sunk_ships)
    groups = find_aligned_groups(live)
    return HitPatterns(tuple(groups), tuple(isolated_hits(live, groups)))


def estimate_smallest_ship(grid: Sequence[Sequence[float]]) -> int:
    """
    Guess the smallest plausible ship size from the longest run of live
    (positive) cells in any row or column, clamped to [2, 5].
    """
    longest = 0
    height = len(grid)
    width = len(grid[0]) if height else 0

    for r in range(height):
        run = 0
        for c in range(width):
            run = run + 1 if grid[r][c] > 0 else 0
            longest = max(longest, run)

    for c in range(width):
        run = 0
        for r in range(height):
            run = run + 1 if grid[r][c] > 0 else 0
            longest = max(longest, run)

    if longest > MIN_SHIP_SIZE:
        return min(longest, MAX_SHIP_SIZE)
    return MIN_SHIP_SIZE


def find_completions(
    groups: Sequence[AlignedGroup],
    ship_size: int,
    height: int,
    width: int,
    misses: Iterable[Cell] = (),
) -> List[Cell]:
    """Extension points of groups that are exactly one cell short of `ship_size`."""
    miss_set = set(misses)
    completions: List[Cell] = []
    for group in groups:
        if len(group) == ship_size - 1:
            completions.extend(extension_points(group, height, width, miss_set))
    return completions
