"""Work out how many parts, and which boost tiers, reach a target per-tick power."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from fractions import Fraction
from typing import TYPE_CHECKING, List, Optional, Tuple, Union

from ..boost.compounds import BoostCompound, action_multiplier, compounds_for_action
from ..config.constants import FATIGUE_PER_PART, MAX_CREEP_SIZE
from ..metrics.terrain import TerrainInput, as_terrain_load
from ..parts import PartAction, PartCategory, action_base_power, action_category, lookup

if TYPE_CHECKING:
    from ..body.body import Body

logger = logging.getLogger(__name__)


class TooManyNeededParts(RuntimeError):
    """Raised when reaching the requested amount takes more parts than a body can hold."""


class BoostTierChoice(str, Enum):
    """Which boost tiers the planner may pick."""

    NO_BOOSTS = "no_boosts"
    T1_ONLY = "t1_only"
    T2_ONLY = "t2_only"
    T3_ONLY = "t3_only"
    UP_TO_T1 = "up_to_t1"
    UP_TO_T2 = "up_to_t2"
    UP_TO_T3 = "up_to_t3"

    @property
    def fixed_tier(self) -> Optional[int]:
        return _FIXED_TIERS.get(self)

    @property
    def max_tier(self) -> int:
        return _MAX_TIERS.get(self, 0)


_FIXED_TIERS = {
    BoostTierChoice.NO_BOOSTS: 0,
    BoostTierChoice.T1_ONLY: 1,
    BoostTierChoice.T2_ONLY: 2,
    BoostTierChoice.T3_ONLY: 3,
}
_MAX_TIERS = {
    BoostTierChoice.UP_TO_T1: 1,
    BoostTierChoice.UP_TO_T2: 2,
    BoostTierChoice.UP_TO_T3: 3,
}


@dataclass(frozen=True)
class BoostSelectionConfig:
    """Boost policy for the planner.

    ``allow_partial_boosts`` only matters for the ``UP_TO_*`` choices; fixed
    tiers always boost every part.
    """

    choice: BoostTierChoice = BoostTierChoice.NO_BOOSTS
    allow_partial_boosts: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "choice", BoostTierChoice(self.choice))


@dataclass(frozen=True)
class PartsSummary:
    """Part count and how many of those parts carry each boost tier."""

    num_parts: int
    t1: int = 0
    t2: int = 0
    t3: int = 0

    def __post_init__(self) -> None:
        if min(self.num_parts, self.t1, self.t2, self.t3) < 0:
            raise ValueError("Part and boost counts must be >= 0")
        if self.num_parts > MAX_CREEP_SIZE:
            raise ValueError(f"A body holds at most {MAX_CREEP_SIZE} parts, got {self.num_parts}")
        if self.t1 + self.t2 + self.t3 > self.num_parts:
            raise ValueError("Boost count cannot exceed the number of parts")

    @property
    def num_unboosted(self) -> int:
        return self.num_parts - (self.t1 + self.t2 + self.t3)

    def to_parts(self, action: PartAction) -> List[Tuple[PartCategory, Optional[BoostCompound]]]:
        """Expand into ``(category, boost)`` pairs for :class:`~creepbody.body.body.Body`.

        Unboosted parts come first so the strongest parts are the last to be destroyed.
        """

        action = PartAction(action)
        category = action_category(action)
        parts: List[Tuple[PartCategory, Optional[BoostCompound]]] = [(category, None)] * self.num_unboosted
        if self.t1 or self.t2 or self.t3:
            t1, t2, t3 = compounds_for_action(action)
            parts += [(category, t1)] * self.t1 + [(category, t2)] * self.t2 + [(category, t3)] * self.t3
        return parts


def _tier_powers(action: PartAction) -> List[Optional[Fraction]]:
    """Single-part power for the unboosted part and each boost tier (``None`` when unboostable)."""

    base = action_base_power(action)
    powers: List[Optional[Fraction]] = [Fraction(str(base))]
    try:
        compounds = compounds_for_action(action)
    except ValueError:
        return powers + [None, None, None]
    for compound in compounds:
        powers.append(Fraction(str(base * action_multiplier(compound, action))))
    return powers


def _parts_for(amount: Fraction, power: Optional[Fraction], action: PartAction, tier: int) -> int:
    if power is None:
        raise ValueError(f"Action '{action.value}' cannot be boosted to tier {tier}")
    return math.ceil(amount / power)


def _escalate(amount: Fraction, powers: List[Optional[Fraction]], action: PartAction, max_tier: int) -> PartsSummary:
    for tier in range(max_tier + 1):
        if powers[tier] is None:
            break
        needed = _parts_for(amount, powers[tier], action, tier)
        if needed <= MAX_CREEP_SIZE:
            if tier:
                logger.debug("Escalated %s to tier %d boosts (%d parts)", action.value, tier, needed)
            return _summary(needed, tier)
    raise TooManyNeededParts(f"{action.value} needs more than {MAX_CREEP_SIZE} parts up to tier {max_tier}")


def _iterate(amount: Fraction, powers: List[Optional[Fraction]], action: PartAction, max_tier: int) -> PartsSummary:
    """Upgrade one existing part a tier at a time, adding a part only when none can be upgraded."""

    max_tier = max((tier for tier in range(max_tier + 1) if powers[tier] is not None), default=0)
    counts = [0, 0, 0, 0]
    total = 0

    def current() -> Fraction:
        return sum((powers[tier] * counts[tier] for tier in range(max_tier + 1)), Fraction(0))

    while current() < amount:
        for tier in range(max_tier):
            if counts[tier]:
                counts[tier] -= 1
                counts[tier + 1] += 1
                break
        else:
            counts[0] += 1
            total += 1
            if total > MAX_CREEP_SIZE:
                raise TooManyNeededParts(f"{action.value} needs more than {MAX_CREEP_SIZE} parts")
    return PartsSummary(total, counts[1], counts[2], counts[3])


def _summary(num_parts: int, tier: int) -> PartsSummary:
    boosted = [0, 0, 0, 0]
    boosted[tier] = num_parts
    return PartsSummary(num_parts, boosted[1], boosted[2], boosted[3])


def parts_needed(
    action: PartAction,
    amount: Union[int, float],
    config: Optional[BoostSelectionConfig] = None,
) -> PartsSummary:
    """Fewest parts (and their boost tiers) whose combined ``action`` power reaches ``amount``.

    Fixed-tier choices divide directly. ``UP_TO_*`` without partial boosts uses
    the lowest tier that fits in a body; with partial boosts each existing part
    is upgraded before another unboosted part is added.
    """

    action = PartAction(action)
    config = config or BoostSelectionConfig()
    if isinstance(amount, bool) or not isinstance(amount, (int, float)) or amount < 0:
        raise ValueError(f"Amount must be a number >= 0, got {amount!r}")
    target = Fraction(str(amount))
    if target == 0:
        return PartsSummary(0)

    powers = _tier_powers(action)
    choice = config.choice
    if choice.fixed_tier is not None:
        tier = choice.fixed_tier
        needed = _parts_for(target, powers[tier], action, tier)
        if needed > MAX_CREEP_SIZE:
            raise TooManyNeededParts(f"{action.value} at tier {tier} needs {needed} parts")
        return _summary(needed, tier)
    if config.allow_partial_boosts:
        return _iterate(target, powers, action, choice.max_tier)
    return _escalate(target, powers, action, choice.max_tier)


def parts_to_harvest_energy(amount: int, config: Optional[BoostSelectionConfig] = None) -> PartsSummary:
    return parts_needed(PartAction.HARVEST_ENERGY, amount, config)


def parts_to_harvest_mineral(amount: int, config: Optional[BoostSelectionConfig] = None) -> PartsSummary:
    return parts_needed(PartAction.HARVEST_MINERAL, amount, config)


def parts_to_harvest_deposit(amount: int, config: Optional[BoostSelectionConfig] = None) -> PartsSummary:
    return parts_needed(PartAction.HARVEST_DEPOSIT, amount, config)


def parts_to_build(amount: float, config: Optional[BoostSelectionConfig] = None) -> PartsSummary:
    return parts_needed(PartAction.BUILD, amount, config)


def parts_to_repair(amount: float, config: Optional[BoostSelectionConfig] = None) -> PartsSummary:
    return parts_needed(PartAction.REPAIR, amount, config)


def parts_to_dismantle(amount: int, config: Optional[BoostSelectionConfig] = None) -> PartsSummary:
    return parts_needed(PartAction.DISMANTLE, amount, config)


def parts_to_upgrade_controller(amount: float, config: Optional[BoostSelectionConfig] = None) -> PartsSummary:
    return parts_needed(PartAction.UPGRADE_CONTROLLER, amount, config)


def parts_to_attack(amount: int, config: Optional[BoostSelectionConfig] = None) -> PartsSummary:
    return parts_needed(PartAction.ATTACK, amount, config)


def parts_to_ranged_attack(amount: int, config: Optional[BoostSelectionConfig] = None) -> PartsSummary:
    return parts_needed(PartAction.RANGED_ATTACK, amount, config)


def parts_to_ranged_mass_attack(amount: int, config: Optional[BoostSelectionConfig] = None) -> PartsSummary:
    """Parts for ``amount`` of mass attack damage on a single adjacent target."""

    return parts_needed(PartAction.RANGED_MASS_ATTACK, amount, config)


def parts_to_heal(amount: int, config: Optional[BoostSelectionConfig] = None) -> PartsSummary:
    return parts_needed(PartAction.HEAL, amount, config)


def parts_to_ranged_heal(amount: int, config: Optional[BoostSelectionConfig] = None) -> PartsSummary:
    return parts_needed(PartAction.RANGED_HEAL, amount, config)


def parts_to_carry(amount: int, config: Optional[BoostSelectionConfig] = None) -> PartsSummary:
    return parts_needed(PartAction.CARRY, amount, config)


def parts_to_reduce_fatigue(amount: int, config: Optional[BoostSelectionConfig] = None) -> PartsSummary:
    return parts_needed(PartAction.MOVE, amount, config)


def parts_to_absorb_damage(amount: float, config: Optional[BoostSelectionConfig] = None) -> PartsSummary:
    return parts_needed(PartAction.ABSORB_DAMAGE, amount, config)


def parts_to_move(
    body_or_count: Union["Body", int],
    terrain: TerrainInput = None,
    config: Optional[BoostSelectionConfig] = None,
) -> PartsSummary:
    """Move parts that let a body move every tick on ``terrain``.

    Given a body, every part that can generate fatigue is counted, dead or
    alive, with Carry parts assumed laden. An integer is taken as that count.
    """

    if isinstance(body_or_count, bool):
        raise ValueError("Part count must be an integer")
    if isinstance(body_or_count, int):
        if body_or_count < 0:
            raise ValueError(f"Part count must be >= 0, got {body_or_count}")
        heavy_parts = body_or_count
    else:
        heavy_parts = sum(1 for category in body_or_count.categories() if lookup(category).generates_fatigue)
    load = as_terrain_load(terrain)
    fatigue = math.ceil(heavy_parts * FATIGUE_PER_PART * Fraction(str(load.cost_multiplier())))
    return parts_to_reduce_fatigue(fatigue, config)
