from typing import Sequence


def visualize_probability_map(grid: Sequence[Sequence[float]]) -> str:
    """
    Render a probability map as a fixed-width text grid.

    The first line holds the column numbers; each row is prefixed with its
    row number and every cell shows a percentage with one decimal place.
    Rows are separated by dashed lines.
    """
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    separator = "   " + "------" * cols + "\n"

    out = "   "
    for c in range(cols):
        out += f" {c:>4} "
    out += "\n"
    out += separator

    for r in range(rows):
        out += f"{r:>2} |"
        for c in range(cols):
            pct = f"{grid[r][c] * 100:.1f}"
            out += f" {pct:>4}% |"
        out += "\n"
        out += separator

    return out
