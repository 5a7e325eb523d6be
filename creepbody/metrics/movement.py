"""Fatigue bookkeeping and movement timing for a body on a given terrain.

Fatigue is summed as exact fractions and truncated toward zero once, after
summation, so the result never depends on the order in which parts are visited
or on platform float rounding.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from fractions import Fraction
from typing import TYPE_CHECKING, Optional

from ..boost.compounds import action_multiplier
from ..config.constants import FATIGUE_PER_PART
from ..parts import PartAction, PartCategory, action_base_power, lookup
from .terrain import TerrainInput, as_terrain_load

if TYPE_CHECKING:
    from ..body.body import Body


@dataclass(frozen=True)
class MoveReport:
    """Outcome of one move attempt.

    ``ticks_per_tile`` is ``None`` when the body can never move (no alive Move part).
    """

    fatigue_generated: int
    fatigue_reduction: int
    net_fatigue: int
    ticks_per_tile: Optional[int]
    blocked: bool


def _exact(value: float) -> Fraction:
    return Fraction(str(value))


def fatigue_generated(body: "Body", terrain: TerrainInput = None) -> int:
    """Fatigue one move attempt adds on ``terrain``.

    Alive parts that generate fatigue each weigh ``FATIGUE_PER_PART`` times the
    terrain multiplier. Carry parts only weigh anything while laden: the carried
    load fills alive Carry parts in body order, each up to its boosted capacity.
    """

    load = as_terrain_load(terrain)
    weight = FATIGUE_PER_PART * _exact(load.cost_multiplier())
    remaining = Fraction(load.carried_load)
    carry_power = action_base_power(PartAction.CARRY)

    total = Fraction(0)
    for part in body.parts():
        if not part.alive or not lookup(part.category).generates_fatigue:
            continue
        if part.category is PartCategory.CARRY:
            if remaining <= 0:
                continue
            remaining -= _exact(carry_power * action_multiplier(part.boost, PartAction.CARRY))
        total += weight
    return int(total)


def fatigue_reduction(body: "Body") -> int:
    """Fatigue removed per tick by alive Move parts."""

    move_power = action_base_power(PartAction.MOVE)
    total = sum(
        (
            _exact(move_power * action_multiplier(part.boost, PartAction.MOVE))
            for part in body.parts()
            if part.alive and part.category is PartCategory.MOVE
        ),
        Fraction(0),
    )
    return int(total)


def move_report(body: "Body", terrain: TerrainInput = None) -> MoveReport:
    generated = fatigue_generated(body, terrain)
    reduction = fatigue_reduction(body)
    # Every alive Move part reduces fatigue, so a zero reduction means no Move part is left.
    blocked = reduction == 0
    ticks_per_tile = None if blocked else max(1, math.ceil(Fraction(generated, reduction)))
    return MoveReport(
        fatigue_generated=generated,
        fatigue_reduction=reduction,
        net_fatigue=max(0, generated - reduction),
        ticks_per_tile=ticks_per_tile,
        blocked=blocked,
    )


def move_capable(body: "Body", terrain: TerrainInput = None) -> bool:
    """True when the body moves every tick: an alive Move part offsets all fatigue."""

    report = move_report(body, terrain)
    return not report.blocked and report.fatigue_generated <= report.fatigue_reduction


def effective_fatigue_per_tick(body: "Body", terrain: TerrainInput = None) -> int:
    return move_report(body, terrain).net_fatigue


def ticks_until_arrival(body: "Body", terrain: TerrainInput, distance: int) -> Optional[int]:
    """Ticks needed to cover ``distance`` tiles, or ``None`` when the body never arrives."""

    if isinstance(distance, bool) or not isinstance(distance, int):
        raise ValueError(f"Distance must be an integer, got {distance!r}")
    if distance < 0:
        raise ValueError(f"Distance must be >= 0, got {distance}")
    if distance == 0:
        return 0
    report = move_report(body, terrain)
    if report.ticks_per_tile is None:
        return None
    return distance * report.ticks_per_tile
