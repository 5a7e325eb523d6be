"""Metric queries over a :class:`~creepbody.body.body.Body`.

Every function here is pure: it reads the body and returns a value, never
touching part state. Construction-time metrics (cost, spawn ticks, max hits)
count every part; runtime metrics only count parts that are still alive.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from fractions import Fraction
from typing import TYPE_CHECKING, Dict, Optional, Tuple

from .. import parts as catalog
from ..boost.compounds import BoostCompound, action_multiplier, damage_factor
from ..boost.requirements import BoostRequirements, boost_requirements
from ..config.constants import CREEP_CLAIM_LIFE_TIME, CREEP_LIFE_TIME
from ..config.settings import RuntimeSettings, current_settings
from ..parts import PartAction, PartCategory
from .movement import (
    MoveReport,
    effective_fatigue_per_tick,
    fatigue_generated,
    fatigue_reduction,
    move_capable,
    move_report,
    ticks_until_arrival,
)
from .terrain import TerrainInput

if TYPE_CHECKING:
    from ..body.body import Body, BodyPart

logger = logging.getLogger(__name__)

__all__ = [
    "BodyMetrics",
    "MoveReport",
    "PartBreakdown",
    "action_power",
    "attack_power",
    "build_cost",
    "build_power",
    "can_claim",
    "carry_capacity",
    "current_hits",
    "dismantle_power",
    "effective_fatigue_per_tick",
    "effective_hits",
    "fatigue_generated",
    "fatigue_reduction",
    "harvest_deposit",
    "harvest_energy",
    "harvest_mineral",
    "heal_power",
    "lifetime_ticks",
    "max_hits",
    "move_capable",
    "move_report",
    "ranged_attack_power",
    "ranged_heal_power",
    "ranged_mass_attack_power",
    "repair_power",
    "reserve_power",
    "spawn_ticks",
    "summarize",
    "ticks_until_arrival",
    "upgrade_controller_power",
    "within_spawn_cap",
]


# ---------------------------------------------------------------------------
# Construction-time metrics


def build_cost(body: "Body") -> int:
    """Energy needed to spawn ``body``; boosts are paid for separately."""

    return sum(catalog.lookup(part.category).base_cost for part in body.parts())


def spawn_ticks(body: "Body") -> int:
    return sum(catalog.lookup(part.category).base_spawn_ticks for part in body.parts())


def within_spawn_cap(body: "Body", settings: Optional[RuntimeSettings] = None) -> bool:
    """Compare :func:`spawn_ticks` against the configured ``SPAWN_TICK_CAP``."""

    settings = settings or current_settings()
    ticks = spawn_ticks(body)
    if ticks > settings.SPAWN_TICK_CAP:
        logger.debug("Body needs %d spawn ticks, cap is %d", ticks, settings.SPAWN_TICK_CAP)
        return False
    return True


def max_hits(body: "Body") -> int:
    return sum(catalog.lookup(part.category).base_hits for part in body.parts())


def lifetime_ticks(body: "Body") -> int:
    """Ticks a spawned unit lives; any Claim part shortens the lifetime."""

    if body.count(PartCategory.CLAIM, alive_only=False):
        return CREEP_CLAIM_LIFE_TIME
    return CREEP_LIFE_TIME


# ---------------------------------------------------------------------------
# Runtime metrics (alive parts only)


def current_hits(body: "Body") -> int:
    return sum(catalog.lookup(part.category).base_hits for part in body.parts() if part.alive)


def effective_hits(body: "Body") -> int:
    """Damage the alive parts can soak, with boosted Tough parts scaled by their damage factor."""

    total = Fraction(0)
    for part in body.parts():
        if not part.alive:
            continue
        hits = Fraction(catalog.lookup(part.category).base_hits)
        if part.category is PartCategory.TOUGH:
            hits /= Fraction(str(damage_factor(part.boost)))
        total += hits
    return int(total)


def _resolve_action(category: PartCategory, action: Optional[PartAction]) -> Tuple[PartAction, float]:
    entry = catalog.lookup(category)
    if action is None:
        return entry.primary_action, entry.base_power
    action = PartAction(action)
    if catalog.action_category(action) is not category:
        raise ValueError(
            f"Action '{action.value}' is performed by {catalog.action_category(action).value} parts, "
            f"not {category.value}"
        )
    return action, catalog.action_base_power(action)


def _part_power(part: "BodyPart", action: PartAction, base_power: float) -> float:
    return base_power * action_multiplier(part.boost, action)


def action_power(body: "Body", category: PartCategory, action: Optional[PartAction] = None) -> float:
    """Per-tick power of ``action`` summed over alive parts of ``category``.

    Without ``action`` the category's catalog power is used. Move, Tough and
    Claim have no catalog power and report 0.0 there; ask for
    ``PartAction.MOVE``, ``PartAction.ABSORB_DAMAGE`` or
    ``PartAction.RESERVE_CONTROLLER`` explicitly, or use
    :func:`fatigue_reduction` and :func:`reserve_power`.
    """

    category = PartCategory(category)
    action, base_power = _resolve_action(category, action)
    return float(
        sum(
            _part_power(part, action, base_power)
            for part in body.parts()
            if part.alive and part.category is category
        )
    )


def carry_capacity(body: "Body") -> float:
    return action_power(body, PartCategory.CARRY)


def harvest_energy(body: "Body") -> float:
    return action_power(body, PartCategory.WORK, PartAction.HARVEST_ENERGY)


def harvest_mineral(body: "Body") -> float:
    return action_power(body, PartCategory.WORK, PartAction.HARVEST_MINERAL)


def harvest_deposit(body: "Body") -> float:
    return action_power(body, PartCategory.WORK, PartAction.HARVEST_DEPOSIT)


def build_power(body: "Body") -> float:
    return action_power(body, PartCategory.WORK, PartAction.BUILD)


def repair_power(body: "Body") -> float:
    return action_power(body, PartCategory.WORK, PartAction.REPAIR)


def dismantle_power(body: "Body") -> float:
    return action_power(body, PartCategory.WORK, PartAction.DISMANTLE)


def upgrade_controller_power(body: "Body") -> float:
    return action_power(body, PartCategory.WORK, PartAction.UPGRADE_CONTROLLER)


def attack_power(body: "Body") -> float:
    return action_power(body, PartCategory.ATTACK)


def ranged_attack_power(body: "Body") -> float:
    return action_power(body, PartCategory.RANGED_ATTACK, PartAction.RANGED_ATTACK)


def ranged_mass_attack_power(body: "Body", distance: int = 1) -> float:
    """Mass attack damage dealt to one target ``distance`` tiles away (zero beyond 3)."""

    base_power = catalog.ranged_mass_attack_power(distance)
    return float(
        sum(
            _part_power(part, PartAction.RANGED_MASS_ATTACK, base_power)
            for part in body.parts()
            if part.alive and part.category is PartCategory.RANGED_ATTACK
        )
    )


def heal_power(body: "Body") -> float:
    return action_power(body, PartCategory.HEAL, PartAction.HEAL)


def ranged_heal_power(body: "Body") -> float:
    return action_power(body, PartCategory.HEAL, PartAction.RANGED_HEAL)


def reserve_power(body: "Body") -> float:
    return action_power(body, PartCategory.CLAIM, PartAction.RESERVE_CONTROLLER)


def can_claim(body: "Body") -> bool:
    return body.count(PartCategory.CLAIM) > 0


# ---------------------------------------------------------------------------
# Snapshot


@dataclass(frozen=True)
class PartBreakdown:
    """What a single part contributes; ``power`` is its primary action power."""

    index: int
    category: PartCategory
    boost: Optional[BoostCompound]
    alive: bool
    cost: int
    hits: int
    power: float


@dataclass(frozen=True)
class BodyMetrics:
    """All metrics of a body at one point in time."""

    part_count: int
    alive_count: int
    build_cost: int
    spawn_ticks: int
    lifetime_ticks: int
    max_hits: int
    current_hits: int
    effective_hits: int
    carry_capacity: float
    action_power: Dict[PartAction, float]
    fatigue_reduction: int
    can_claim: bool
    movement: MoveReport
    boosts: BoostRequirements
    parts: Tuple[PartBreakdown, ...]


def _breakdown(index: int, part: "BodyPart") -> PartBreakdown:
    entry = catalog.lookup(part.category)
    power = _part_power(part, entry.primary_action, entry.base_power) if part.alive else 0.0
    return PartBreakdown(
        index=index,
        category=part.category,
        boost=part.boost,
        alive=part.alive,
        cost=entry.base_cost,
        hits=entry.base_hits,
        power=power,
    )


def summarize(body: "Body", terrain: TerrainInput = None) -> BodyMetrics:
    """Collect every metric of ``body`` into one :class:`BodyMetrics` snapshot."""

    snapshot = body.parts()
    powers: Dict[PartAction, float] = {}
    for action, spec in catalog.ACTIONS.items():
        if action in (PartAction.MOVE, PartAction.ABSORB_DAMAGE):
            continue
        if action is PartAction.RANGED_MASS_ATTACK:
            powers[action] = ranged_mass_attack_power(body, 1)
        else:
            powers[action] = action_power(body, spec.category, action)

    return BodyMetrics(
        part_count=len(snapshot),
        alive_count=sum(1 for part in snapshot if part.alive),
        build_cost=build_cost(body),
        spawn_ticks=spawn_ticks(body),
        lifetime_ticks=lifetime_ticks(body),
        max_hits=max_hits(body),
        current_hits=current_hits(body),
        effective_hits=effective_hits(body),
        carry_capacity=carry_capacity(body),
        action_power=powers,
        fatigue_reduction=fatigue_reduction(body),
        can_claim=can_claim(body),
        movement=move_report(body, terrain),
        boosts=boost_requirements(body),
        parts=tuple(_breakdown(index, part) for index, part in enumerate(snapshot)),
    )
