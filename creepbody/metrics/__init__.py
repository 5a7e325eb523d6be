"""Metric queries: cost, hits, action power and movement."""

from .terrain import Terrain, TerrainLoad, as_terrain_load
from .movement import (
    MoveReport,
    effective_fatigue_per_tick,
    fatigue_generated,
    fatigue_reduction,
    move_capable,
    move_report,
    ticks_until_arrival,
)
from . import calculator
from .calculator import BodyMetrics, PartBreakdown, summarize

__all__ = [
    "Terrain",
    "TerrainLoad",
    "as_terrain_load",
    "MoveReport",
    "effective_fatigue_per_tick",
    "fatigue_generated",
    "fatigue_reduction",
    "move_capable",
    "move_report",
    "ticks_until_arrival",
    "calculator",
    "BodyMetrics",
    "PartBreakdown",
    "summarize",
]
