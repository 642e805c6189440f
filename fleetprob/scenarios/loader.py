import json
import os
from typing import Any, Dict, List, Tuple

from fleetprob.domain.config import MODE_NORMAL
from fleetprob.domain.types import Cell, SunkShip

from .definition import Scenario


def _cells(raw: Any, field: str) -> Tuple[Cell, ...]:
    if raw is None:
        return tuple()
    if not isinstance(raw, list):
        raise ValueError(f"'{field}' must be a list of [row, col] pairs")
    cells: List[Cell] = []
    for item in raw:
        if not isinstance(item, (list, tuple)) or len(item) != 2:
            raise ValueError(f"'{field}' entries must be [row, col] pairs, got {item!r}")
        try:
            cells.append((int(item[0]), int(item[1])))
        except (TypeError, ValueError):
            raise ValueError(f"'{field}' entries must be integers, got {item!r}")
    return tuple(cells)


def _int(raw: Any, field: str) -> int:
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise ValueError(f"'{field}' must be an integer, got {raw!r}")


def scenario_from_dict(data: Dict[str, Any], default_id: str = "custom") -> Scenario:
    if not isinstance(data, dict):
        raise ValueError("scenario must be a JSON object")
    for key in ("height", "width", "remaining"):
        if key not in data:
            raise ValueError(f"scenario is missing '{key}'")

    remaining_raw = data.get("remaining")
    if not isinstance(remaining_raw, list):
        raise ValueError("'remaining' must be a list of ship lengths")

    sunk: List[SunkShip] = []
    for i, ship in enumerate(data.get("sunk_ships") or []):
        if not isinstance(ship, dict):
            raise ValueError(f"sunk_ships[{i}] must be an object")
        sunk.append(
            SunkShip(
                _int(ship.get("length"), f"sunk_ships[{i}].length"),
                _cells(ship.get("positions"), f"sunk_ships[{i}].positions"),
            )
        )

    return Scenario(
        scenario_id=str(data.get("scenario_id") or default_id),
        name=str(data.get("name") or default_id),
        height=_int(data.get("height"), "height"),
        width=_int(data.get("width"), "width"),
        hits=_cells(data.get("hits"), "hits"),
        misses=_cells(data.get("misses"), "misses"),
        remaining=tuple(_int(v, "remaining") for v in remaining_raw),
        mode=str(data.get("mode") or MODE_NORMAL).strip().lower(),
        sunk_ships=tuple(sunk),
    )


def load_scenario(path: str) -> Scenario:
    if not os.path.exists(path):
        raise ValueError(f"scenario file not found: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        raise ValueError(f"could not read scenario {path}: {exc}")
    default_id = os.path.splitext(os.path.basename(path))[0]
    return scenario_from_dict(data, default_id=default_id)
