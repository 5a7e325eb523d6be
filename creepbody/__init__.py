"""Package initializer for the creep body metrics library."""

from __future__ import annotations

from .config import settings as settings
from .parts import PartAction, PartCategory
from .boost import BoostCompound
from .body import Body, BodyPart
from .metrics import Terrain, TerrainLoad, calculator

__all__ = [
    "settings",
    "PartAction",
    "PartCategory",
    "BoostCompound",
    "Body",
    "BodyPart",
    "Terrain",
    "TerrainLoad",
    "calculator",
]
