from fleetprob.engine.probability import best_cells, compute_probabilities
from fleetprob.scenarios import worked_example


def main() -> None:
    scenario = worked_example()
    grid = compute_probabilities(
        scenario.height,
        scenario.width,
        scenario.hits,
        scenario.misses,
        scenario.remaining,
        mode=scenario.mode,
    )
    total = sum(v for row in grid for v in row if v > 0)
    print(f"Smoke OK: best={best_cells(grid, 2)} total={total:.6f}")


if __name__ == "__main__":
    main()
