"""Boost table: which compounds scale which part categories, and by how much."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Optional, Tuple

from ..parts import PartAction, PartCategory, action_category


class BoostCompound(str, Enum):
    """Mineral compounds that can boost a part, keyed by resource symbol."""

    UTRIUM_HYDRIDE = "UH"
    UTRIUM_ACID = "UH2O"
    CATALYZED_UTRIUM_ACID = "XUH2O"
    UTRIUM_OXIDE = "UO"
    UTRIUM_ALKALIDE = "UHO2"
    CATALYZED_UTRIUM_ALKALIDE = "XUHO2"
    KEANIUM_HYDRIDE = "KH"
    KEANIUM_ACID = "KH2O"
    CATALYZED_KEANIUM_ACID = "XKH2O"
    KEANIUM_OXIDE = "KO"
    KEANIUM_ALKALIDE = "KHO2"
    CATALYZED_KEANIUM_ALKALIDE = "XKHO2"
    LEMERGIUM_HYDRIDE = "LH"
    LEMERGIUM_ACID = "LH2O"
    CATALYZED_LEMERGIUM_ACID = "XLH2O"
    LEMERGIUM_OXIDE = "LO"
    LEMERGIUM_ALKALIDE = "LHO2"
    CATALYZED_LEMERGIUM_ALKALIDE = "XLHO2"
    ZYNTHIUM_HYDRIDE = "ZH"
    ZYNTHIUM_ACID = "ZH2O"
    CATALYZED_ZYNTHIUM_ACID = "XZH2O"
    ZYNTHIUM_OXIDE = "ZO"
    ZYNTHIUM_ALKALIDE = "ZHO2"
    CATALYZED_ZYNTHIUM_ALKALIDE = "XZHO2"
    GHODIUM_HYDRIDE = "GH"
    GHODIUM_ACID = "GH2O"
    CATALYZED_GHODIUM_ACID = "XGH2O"
    GHODIUM_OXIDE = "GO"
    GHODIUM_ALKALIDE = "GHO2"
    CATALYZED_GHODIUM_ALKALIDE = "XGHO2"


@dataclass(frozen=True)
class BoostTableEntry:
    """
    One (category, compound) pairing.

    Notes:
    - multiplier scales every action in ``actions``; it is never below 1.0.
    - damage_factor is the fraction of incoming damage a boosted part takes.
      Only Tough compounds set it below 1.0, and they leave multiplier at 1.0.
    """

    category: PartCategory
    compound: BoostCompound
    multiplier: float
    actions: FrozenSet[PartAction]
    tier: int
    damage_factor: float = 1.0


_HARVEST = frozenset({PartAction.HARVEST_ENERGY, PartAction.HARVEST_MINERAL, PartAction.HARVEST_DEPOSIT})
_BUILD_REPAIR = frozenset({PartAction.BUILD, PartAction.REPAIR})
_RANGED = frozenset({PartAction.RANGED_ATTACK, PartAction.RANGED_MASS_ATTACK})
_HEALING = frozenset({PartAction.HEAL, PartAction.RANGED_HEAL})


def _family(
    category: PartCategory,
    compounds: Tuple[BoostCompound, BoostCompound, BoostCompound],
    actions: FrozenSet[PartAction],
    multipliers: Tuple[float, float, float] = (1.0, 1.0, 1.0),
    damage_factors: Tuple[float, float, float] = (1.0, 1.0, 1.0),
) -> Dict[BoostCompound, BoostTableEntry]:
    rows: Dict[BoostCompound, BoostTableEntry] = {}
    for tier, (compound, multiplier, factor) in enumerate(zip(compounds, multipliers, damage_factors), start=1):
        rows[compound] = BoostTableEntry(
            category=category,
            compound=compound,
            multiplier=float(multiplier),
            actions=actions,
            tier=tier,
            damage_factor=float(factor),
        )
    return rows


B = BoostCompound

BOOST_TABLE: Dict[BoostCompound, BoostTableEntry] = {
    # --- Work ---
    **_family(PartCategory.WORK, (B.UTRIUM_OXIDE, B.UTRIUM_ALKALIDE, B.CATALYZED_UTRIUM_ALKALIDE), _HARVEST, (3, 5, 7)),
    **_family(
        PartCategory.WORK,
        (B.LEMERGIUM_HYDRIDE, B.LEMERGIUM_ACID, B.CATALYZED_LEMERGIUM_ACID),
        _BUILD_REPAIR,
        (1.5, 1.8, 2.0),
    ),
    **_family(
        PartCategory.WORK,
        (B.ZYNTHIUM_HYDRIDE, B.ZYNTHIUM_ACID, B.CATALYZED_ZYNTHIUM_ACID),
        frozenset({PartAction.DISMANTLE}),
        (2, 3, 4),
    ),
    **_family(
        PartCategory.WORK,
        (B.GHODIUM_HYDRIDE, B.GHODIUM_ACID, B.CATALYZED_GHODIUM_ACID),
        frozenset({PartAction.UPGRADE_CONTROLLER}),
        (1.5, 1.8, 2.0),
    ),
    # --- Combat ---
    **_family(
        PartCategory.ATTACK,
        (B.UTRIUM_HYDRIDE, B.UTRIUM_ACID, B.CATALYZED_UTRIUM_ACID),
        frozenset({PartAction.ATTACK}),
        (2, 3, 4),
    ),
    **_family(
        PartCategory.RANGED_ATTACK,
        (B.KEANIUM_OXIDE, B.KEANIUM_ALKALIDE, B.CATALYZED_KEANIUM_ALKALIDE),
        _RANGED,
        (2, 3, 4),
    ),
    **_family(
        PartCategory.HEAL,
        (B.LEMERGIUM_OXIDE, B.LEMERGIUM_ALKALIDE, B.CATALYZED_LEMERGIUM_ALKALIDE),
        _HEALING,
        (2, 3, 4),
    ),
    # --- Logistics ---
    **_family(
        PartCategory.CARRY,
        (B.KEANIUM_HYDRIDE, B.KEANIUM_ACID, B.CATALYZED_KEANIUM_ACID),
        frozenset({PartAction.CARRY}),
        (2, 3, 4),
    ),
    **_family(
        PartCategory.MOVE,
        (B.ZYNTHIUM_OXIDE, B.ZYNTHIUM_ALKALIDE, B.CATALYZED_ZYNTHIUM_ALKALIDE),
        frozenset({PartAction.MOVE}),
        (2, 3, 4),
    ),
    # --- Defense ---
    **_family(
        PartCategory.TOUGH,
        (B.GHODIUM_OXIDE, B.GHODIUM_ALKALIDE, B.CATALYZED_GHODIUM_ALKALIDE),
        frozenset({PartAction.ABSORB_DAMAGE}),
        damage_factors=(0.7, 0.5, 0.3),
    ),
}

del B


def entry(category: PartCategory, compound: BoostCompound) -> Optional[BoostTableEntry]:
    """Return the table row for the pairing, or ``None`` when it does not exist."""

    row = BOOST_TABLE.get(BoostCompound(compound))
    if row is None or row.category is not PartCategory(category):
        return None
    return row


def lookup(category: PartCategory, compound: BoostCompound) -> Optional[float]:
    """Multiplier ``compound`` applies to ``category``; ``None`` means no effect."""

    row = entry(category, compound)
    return None if row is None else row.multiplier


def is_compatible(category: PartCategory, compound: BoostCompound) -> bool:
    return entry(category, compound) is not None


def action_multiplier(compound: Optional[BoostCompound], action: PartAction) -> float:
    """Multiplier a (possibly absent) compound gives to ``action``.

    Damage absorption scales with the inverse of the damage factor: a part
    taking 30% of incoming damage absorbs 1/0.3 times its hits.
    """

    if compound is None:
        return 1.0
    row = BOOST_TABLE[BoostCompound(compound)]
    action = PartAction(action)
    if action not in row.actions or row.category is not action_category(action):
        return 1.0
    if action is PartAction.ABSORB_DAMAGE:
        return 1.0 / row.damage_factor
    return row.multiplier


def damage_factor(compound: Optional[BoostCompound]) -> float:
    if compound is None:
        return 1.0
    return BOOST_TABLE[BoostCompound(compound)].damage_factor


def tier(compound: BoostCompound) -> int:
    return BOOST_TABLE[BoostCompound(compound)].tier


def category_for(compound: BoostCompound) -> PartCategory:
    return BOOST_TABLE[BoostCompound(compound)].category


def compounds_for(category: PartCategory, tier: Optional[int] = None) -> Tuple[BoostCompound, ...]:
    """All compounds valid on ``category``, ordered by tier then declaration."""

    category = PartCategory(category)
    rows = [row for row in BOOST_TABLE.values() if row.category is category]
    if tier is not None:
        rows = [row for row in rows if row.tier == tier]
    rows.sort(key=lambda row: row.tier)
    return tuple(row.compound for row in rows)


def compounds_for_action(action: PartAction) -> Tuple[BoostCompound, BoostCompound, BoostCompound]:
    """The tier 1, 2 and 3 compounds boosting ``action``."""

    action = PartAction(action)
    rows = sorted((row for row in BOOST_TABLE.values() if action in row.actions), key=lambda row: row.tier)
    if len(rows) != 3:
        raise ValueError(f"No boost family covers action '{action.value}'")
    return rows[0].compound, rows[1].compound, rows[2].compound


# ----------------------------
# Validation (fail loudly)
# ----------------------------

def _validate_boosts() -> None:
    for compound in BoostCompound:
        row = BOOST_TABLE.get(compound)
        if row is None:
            raise ValueError(f"Boost table has no row for {compound.value}")
        if row.compound is not compound:
            raise ValueError(f"Boost key '{compound.value}' must match entry compound '{row.compound.value}'")
        if row.multiplier < 1.0:
            raise ValueError(f"{compound.value}: multiplier must be >= 1.0")
        if not (0.0 < row.damage_factor <= 1.0):
            raise ValueError(f"{compound.value}: damage_factor must be in (0, 1]")
        if row.tier not in (1, 2, 3):
            raise ValueError(f"{compound.value}: tier must be 1, 2 or 3")
        for action in row.actions:
            if action_category(action) is not row.category:
                raise ValueError(f"{compound.value}: action {action.value} is not performed by {row.category.value}")


_validate_boosts()
