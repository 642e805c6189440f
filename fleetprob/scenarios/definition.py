import hashlib
import json
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from fleetprob.domain.config import MODE_NORMAL
from fleetprob.domain.types import Cell, SunkShip


@dataclass(frozen=True)
class Scenario:
    """A snapshot of the engine inputs: board size, shots taken and ships still afloat."""

    scenario_id: str
    name: str
    height: int
    width: int
    hits: Tuple[Cell, ...] = tuple()
    misses: Tuple[Cell, ...] = tuple()
    remaining: Tuple[int, ...] = tuple()
    mode: str = MODE_NORMAL
    sunk_ships: Tuple[SunkShip, ...] = tuple()

    def normalized(self) -> Dict[str, Any]:
        return {
            "scenario_id": self.scenario_id,
            "name": self.name,
            "height": int(self.height),
            "width": int(self.width),
            "hits": sorted([list(cell) for cell in self.hits]),
            "misses": sorted([list(cell) for cell in self.misses]),
            "remaining": sorted(int(length) for length in self.remaining),
            "mode": self.mode,
            "sunk_ships": [
                {"length": int(ship.length), "positions": [list(p) for p in ship.positions]}
                for ship in self.sunk_ships
            ],
        }

    @property
    def scenario_hash(self) -> str:
        payload = json.dumps(self.normalized(), sort_keys=True, separators=(",", ":"))
        return hashlib.sha256(payload.encode("utf-8")).hexdigest()[:16]

    def with_mode(self, mode: str) -> "Scenario":
        return Scenario(
            self.scenario_id,
            self.name,
            self.height,
            self.width,
            self.hits,
            self.misses,
            self.remaining,
            mode,
            self.sunk_ships,
        )
