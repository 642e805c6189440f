#!/usr/bin/env python3
import argparse
import os
from typing import Iterable

from fleetprob.engine.probability import best_cells, compute_probabilities
from fleetprob.engine.render import visualize_probability_map
from fleetprob.scenarios import Scenario, builtin_scenarios, load_scenario, validate_scenario
from fleetprob.strategies.profiles import mode_keys, resolve_mode
from fleetprob.utils import debug


def _resolve_scenario(name: str) -> Scenario:
    name = (name or "worked").strip()
    for scenario in builtin_scenarios():
        if scenario.scenario_id == name.lower():
            return scenario
    if name.endswith(".json") or os.path.exists(name):
        return load_scenario(name)
    ids = ", ".join(s.scenario_id for s in builtin_scenarios())
    raise ValueError(f"Unknown scenario '{name}'. Use one of {ids} or a JSON file path.")


def main(argv: Iterable[str] = None) -> int:
    parser = argparse.ArgumentParser(description="Print the ship probability map for a board position.")
    parser.add_argument("--scenario", default="worked", help="Built-in scenario id or path to a JSON scenario")
    parser.add_argument("--mode", choices=mode_keys(), default=None, help="Override the scenario's mode")
    parser.add_argument("--top", type=int, default=3, help="Number of best cells to list")
    parser.add_argument("--debug", action="store_true", help="Append engine debug events to the log file")
    args = parser.parse_args(list(argv) if argv is not None else None)

    debug.configure_from_env()
    if args.debug:
        debug.DEBUG_ENABLED = True

    try:
        scenario = _resolve_scenario(args.scenario)
    except ValueError as exc:
        print(f"error: {exc}")
        return 2

    if args.mode:
        scenario = scenario.with_mode(args.mode)

    errors = validate_scenario(scenario)
    if errors:
        print(f"Scenario '{scenario.scenario_id}' is invalid:")
        for err in errors:
            print(f"  - {err}")
        return 2

    grid = compute_probabilities(
        scenario.height,
        scenario.width,
        scenario.hits,
        scenario.misses,
        scenario.remaining,
        mode=scenario.mode,
        sunk_ships=scenario.sunk_ships,
    )

    effective = resolve_mode(scenario.mode, scenario.hits)
    print(f"Scenario: {scenario.name} ({scenario.height}x{scenario.width}) [{scenario.scenario_hash}]")
    mode_note = f" -> {effective}" if effective != scenario.mode else ""
    print(f"Mode: {scenario.mode}{mode_note}, remaining ships: {list(scenario.remaining)}")
    print()
    print(visualize_probability_map(grid))

    top = best_cells(grid, args.top)
    if not top:
        print("No valid move: the recorded shots are inconsistent with the remaining ships.")
        return 0

    print("Best cells:")
    for r, c in top:
        print(f"  ({r}, {c})  {grid[r][c] * 100:.1f}%")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
