"""Movement surface and carried load supplied alongside a metrics query."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Union

from ..config.constants import MOVE_COST_PLAIN, MOVE_COST_ROAD, MOVE_COST_SWAMP
from ..config.settings import current_settings


class Terrain(str, Enum):
    """Tile kinds; road is cheapest and swamp the most expensive."""

    ROAD = "road"
    PLAIN = "plain"
    SWAMP = "swamp"

    @property
    def move_cost(self) -> int:
        return _MOVE_COSTS[self]


_MOVE_COSTS = {
    Terrain.ROAD: MOVE_COST_ROAD,
    Terrain.PLAIN: MOVE_COST_PLAIN,
    Terrain.SWAMP: MOVE_COST_SWAMP,
}


@dataclass(frozen=True)
class TerrainLoad:
    """Terrain (or a raw per-tile multiplier) plus the resources currently carried."""

    terrain: Union[Terrain, float] = Terrain.PLAIN
    carried_load: int = 0

    def __post_init__(self) -> None:
        terrain = self.terrain
        if isinstance(terrain, str):
            object.__setattr__(self, "terrain", Terrain(terrain))
        elif isinstance(terrain, bool) or not isinstance(terrain, (int, float)):
            raise ValueError(f"Terrain must be a Terrain or a numeric multiplier, got {terrain!r}")
        elif not math.isfinite(terrain) or not terrain > 0:
            raise ValueError(f"Terrain multiplier must be a finite number > 0, got {terrain}")
        if isinstance(self.carried_load, bool) or not isinstance(self.carried_load, int):
            raise ValueError(f"Carried load must be an integer, got {self.carried_load!r}")
        if self.carried_load < 0:
            raise ValueError(f"Carried load must be >= 0, got {self.carried_load}")

    @classmethod
    def road(cls, carried_load: int = 0) -> "TerrainLoad":
        return cls(Terrain.ROAD, carried_load)

    @classmethod
    def plain(cls, carried_load: int = 0) -> "TerrainLoad":
        return cls(Terrain.PLAIN, carried_load)

    @classmethod
    def swamp(cls, carried_load: int = 0) -> "TerrainLoad":
        return cls(Terrain.SWAMP, carried_load)

    def cost_multiplier(self) -> float:
        if isinstance(self.terrain, Terrain):
            return float(self.terrain.move_cost)
        return float(self.terrain)


TerrainInput = Union[TerrainLoad, Terrain, str, float, None]


def as_terrain_load(value: TerrainInput = None) -> TerrainLoad:
    """Normalise the terrain argument accepted by every movement query.

    ``None`` falls back to the ``DEFAULT_TERRAIN`` runtime setting with no load.
    """

    if isinstance(value, TerrainLoad):
        return value
    if value is None:
        value = current_settings().DEFAULT_TERRAIN
    return TerrainLoad(value)
