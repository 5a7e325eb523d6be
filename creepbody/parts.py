"""Part catalog: the static attributes of every body part category."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

from .config import constants as C


class PartCategory(str, Enum):
    """Closed set of body part types known to the host simulation."""

    MOVE = "move"
    WORK = "work"
    CARRY = "carry"
    ATTACK = "attack"
    RANGED_ATTACK = "ranged_attack"
    HEAL = "heal"
    TOUGH = "tough"
    CLAIM = "claim"


class PartAction(str, Enum):
    """Actions a part contributes power to."""

    HARVEST_ENERGY = "harvest_energy"
    HARVEST_MINERAL = "harvest_mineral"
    HARVEST_DEPOSIT = "harvest_deposit"
    BUILD = "build"
    REPAIR = "repair"
    DISMANTLE = "dismantle"
    UPGRADE_CONTROLLER = "upgrade_controller"
    ATTACK = "attack"
    RANGED_ATTACK = "ranged_attack"
    RANGED_MASS_ATTACK = "ranged_mass_attack"
    HEAL = "heal"
    RANGED_HEAL = "ranged_heal"
    CARRY = "carry"
    MOVE = "move"
    RESERVE_CONTROLLER = "reserve_controller"
    ABSORB_DAMAGE = "absorb_damage"


@dataclass(frozen=True)
class ActionDef:
    """Which category performs an action and how much one unboosted part yields."""

    action: PartAction
    category: PartCategory
    base_power: float


@dataclass(frozen=True)
class PartCatalogEntry:
    """
    Static row of the part catalog.

    Notes:
    - base_power is the power of ``primary_action`` for a single unboosted part.
      Move, Tough and Claim carry 0: their contribution is fatigue reduction,
      damage absorption or a capability flag, not a scalar action power.
    - generates_fatigue is False for Move and Tough; Carry only generates
      fatigue while laden, which the metrics layer decides per query.
    """

    category: PartCategory
    base_hits: int
    base_cost: int
    base_spawn_ticks: int
    base_power: float
    primary_action: PartAction
    generates_fatigue: bool


ACTIONS: Dict[PartAction, ActionDef] = {
    PartAction.HARVEST_ENERGY: ActionDef(PartAction.HARVEST_ENERGY, PartCategory.WORK, C.HARVEST_POWER),
    PartAction.HARVEST_MINERAL: ActionDef(PartAction.HARVEST_MINERAL, PartCategory.WORK, C.HARVEST_MINERAL_POWER),
    PartAction.HARVEST_DEPOSIT: ActionDef(PartAction.HARVEST_DEPOSIT, PartCategory.WORK, C.HARVEST_DEPOSIT_POWER),
    PartAction.BUILD: ActionDef(PartAction.BUILD, PartCategory.WORK, C.BUILD_POWER),
    PartAction.REPAIR: ActionDef(PartAction.REPAIR, PartCategory.WORK, C.REPAIR_POWER),
    PartAction.DISMANTLE: ActionDef(PartAction.DISMANTLE, PartCategory.WORK, C.DISMANTLE_POWER),
    PartAction.UPGRADE_CONTROLLER: ActionDef(
        PartAction.UPGRADE_CONTROLLER, PartCategory.WORK, C.UPGRADE_CONTROLLER_POWER
    ),
    PartAction.ATTACK: ActionDef(PartAction.ATTACK, PartCategory.ATTACK, C.ATTACK_POWER),
    PartAction.RANGED_ATTACK: ActionDef(PartAction.RANGED_ATTACK, PartCategory.RANGED_ATTACK, C.RANGED_ATTACK_POWER),
    PartAction.RANGED_MASS_ATTACK: ActionDef(
        PartAction.RANGED_MASS_ATTACK, PartCategory.RANGED_ATTACK, C.RANGED_MASS_ATTACK_POWER[1]
    ),
    PartAction.HEAL: ActionDef(PartAction.HEAL, PartCategory.HEAL, C.HEAL_POWER),
    PartAction.RANGED_HEAL: ActionDef(PartAction.RANGED_HEAL, PartCategory.HEAL, C.RANGED_HEAL_POWER),
    PartAction.CARRY: ActionDef(PartAction.CARRY, PartCategory.CARRY, C.CARRY_CAPACITY),
    PartAction.MOVE: ActionDef(PartAction.MOVE, PartCategory.MOVE, C.MOVE_POWER),
    PartAction.RESERVE_CONTROLLER: ActionDef(PartAction.RESERVE_CONTROLLER, PartCategory.CLAIM, C.CONTROLLER_RESERVE),
    PartAction.ABSORB_DAMAGE: ActionDef(PartAction.ABSORB_DAMAGE, PartCategory.TOUGH, C.CREEP_HITS_PER_PART),
}


_NO_SCALAR_POWER = frozenset({PartCategory.MOVE, PartCategory.TOUGH, PartCategory.CLAIM})


def _entry(category: PartCategory, primary: PartAction, generates_fatigue: bool = True) -> PartCatalogEntry:
    base_power = 0.0 if category in _NO_SCALAR_POWER else float(ACTIONS[primary].base_power)
    return PartCatalogEntry(
        category=category,
        base_hits=C.CREEP_HITS_PER_PART,
        base_cost=C.BODYPART_COST[category.value],
        base_spawn_ticks=C.CREEP_SPAWN_TIME,
        base_power=base_power,
        primary_action=primary,
        generates_fatigue=generates_fatigue,
    )


PART_CATALOG: Dict[PartCategory, PartCatalogEntry] = {
    PartCategory.MOVE: _entry(PartCategory.MOVE, PartAction.MOVE, generates_fatigue=False),
    PartCategory.WORK: _entry(PartCategory.WORK, PartAction.HARVEST_ENERGY),
    PartCategory.CARRY: _entry(PartCategory.CARRY, PartAction.CARRY),
    PartCategory.ATTACK: _entry(PartCategory.ATTACK, PartAction.ATTACK),
    PartCategory.RANGED_ATTACK: _entry(PartCategory.RANGED_ATTACK, PartAction.RANGED_ATTACK),
    PartCategory.HEAL: _entry(PartCategory.HEAL, PartAction.HEAL),
    PartCategory.TOUGH: _entry(PartCategory.TOUGH, PartAction.ABSORB_DAMAGE, generates_fatigue=False),
    PartCategory.CLAIM: _entry(PartCategory.CLAIM, PartAction.RESERVE_CONTROLLER),
}


def lookup(category: PartCategory) -> PartCatalogEntry:
    return PART_CATALOG[PartCategory(category)]


def action_category(action: PartAction) -> PartCategory:
    return ACTIONS[PartAction(action)].category


def action_base_power(action: PartAction) -> float:
    return float(ACTIONS[PartAction(action)].base_power)


def actions_for(category: PartCategory) -> Tuple[PartAction, ...]:
    """Return every action performed by ``category`` in declaration order."""

    category = PartCategory(category)
    return tuple(action for action, spec in ACTIONS.items() if spec.category is category)


def ranged_mass_attack_power(distance: int) -> int:
    """Single-target damage of one unboosted ranged part at ``distance`` tiles."""

    return C.RANGED_MASS_ATTACK_POWER.get(int(distance), 0)


# ----------------------------
# Validation (fail loudly)
# ----------------------------

def _validate_catalog() -> None:
    for category in PartCategory:
        entry = PART_CATALOG.get(category)
        if entry is None:
            raise ValueError(f"Part catalog has no row for {category.value}")
        if entry.category is not category:
            raise ValueError(f"Catalog key '{category.value}' must match entry category '{entry.category.value}'")
        if ACTIONS[entry.primary_action].category is not category:
            raise ValueError(f"{category.value}: primary action {entry.primary_action.value} belongs elsewhere")
        if entry.base_cost <= 0 or entry.base_hits <= 0 or entry.base_spawn_ticks <= 0:
            raise ValueError(f"{category.value}: cost, hits and spawn ticks must be > 0")
    for action, spec in ACTIONS.items():
        if spec.action is not action:
            raise ValueError(f"Action key '{action.value}' must match ActionDef.action '{spec.action.value}'")


_validate_catalog()
