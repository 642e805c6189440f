from dataclasses import dataclass
from typing import List, Tuple


Cell = Tuple[int, int]
ProbabilityMap = List[List[float]]


@dataclass(frozen=True)
class Placement:
    length: int
    orientation: str  # "horizontal" or "vertical"
    cells: Tuple[Cell, ...]
    mask: int


@dataclass(frozen=True)
class SunkShip:
    length: int
    positions: Tuple[Cell, ...]


@dataclass(frozen=True)
class AlignedGroup:
    direction: str  # "horizontal" or "vertical"
    cells: Tuple[Cell, ...]

    def __len__(self) -> int:
        return len(self.cells)
