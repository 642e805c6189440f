from typing import List, Set

from fleetprob.domain.board import in_bounds
from fleetprob.domain.types import Cell, SunkShip
from fleetprob.strategies.profiles import MODE_PROFILES

from .definition import Scenario


def validate_scenario(scenario: Scenario) -> List[str]:
    errors: List[str] = []

    if scenario.height <= 0 or scenario.width <= 0:
        errors.append("height and width must be positive")

    if scenario.mode not in MODE_PROFILES:
        errors.append(f"unknown mode: {scenario.mode}")

    for length in scenario.remaining:
        if length <= 0:
            errors.append(f"remaining ship length must be > 0, got {length}")

    _validate_cells("hit", scenario.hits, scenario, errors)
    _validate_cells("miss", scenario.misses, scenario, errors)

    overlap = sorted(set(scenario.hits) & set(scenario.misses))
    for r, c in overlap:
        errors.append(f"cell ({r}, {c}) is both a hit and a miss")

    hit_set: Set[Cell] = set(scenario.hits)
    for i, ship in enumerate(scenario.sunk_ships):
        _validate_sunk(i, ship, hit_set, scenario, errors)

    return errors


def _validate_cells(label: str, cells, scenario: Scenario, errors: List[str]) -> None:
    for r, c in cells:
        if not in_bounds(r, c, scenario.height, scenario.width):
            errors.append(f"{label} ({r}, {c}) is outside the {scenario.height}x{scenario.width} board")


def _validate_sunk(i: int, ship: SunkShip, hit_set: Set[Cell], scenario: Scenario, errors: List[str]) -> None:
    if ship.length <= 0:
        errors.append(f"sunk ship {i} must have length > 0")
    elif len(ship.positions) != ship.length:
        errors.append(
            f"sunk ship {i} has length {ship.length} but {len(ship.positions)} positions"
        )
    for r, c in ship.positions:
        if not in_bounds(r, c, scenario.height, scenario.width):
            errors.append(f"sunk ship {i} position ({r}, {c}) is outside the board")
        elif (r, c) not in hit_set:
            errors.append(f"sunk ship {i} position ({r}, {c}) is not a recorded hit")
