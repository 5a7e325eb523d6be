"""Lab materials needed to apply a body's boosts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Iterator, Tuple

from ..config.constants import LAB_BOOST_ENERGY, LAB_BOOST_MINERAL
from .compounds import BoostCompound

if TYPE_CHECKING:
    from ..body.body import Body


@dataclass
class BoostRequirements:
    """Compound amounts and lab energy consumed when boosting a body."""

    minerals: Dict[BoostCompound, int] = field(default_factory=dict)
    energy: int = 0

    @property
    def total_mineral(self) -> int:
        return sum(self.minerals.values())

    def amount(self, compound: BoostCompound) -> int:
        return self.minerals.get(BoostCompound(compound), 0)

    def add_part(self, compound: BoostCompound) -> None:
        compound = BoostCompound(compound)
        self.minerals[compound] = self.minerals.get(compound, 0) + LAB_BOOST_MINERAL
        self.energy += LAB_BOOST_ENERGY

    def merge(self, other: "BoostRequirements") -> "BoostRequirements":
        merged = BoostRequirements(dict(self.minerals), self.energy + other.energy)
        for compound, amount in other.minerals.items():
            merged.minerals[compound] = merged.minerals.get(compound, 0) + amount
        return merged

    def __iter__(self) -> Iterator[Tuple[BoostCompound, int]]:
        return iter(sorted(self.minerals.items(), key=lambda item: item[0].value))


def boost_requirements(body: "Body") -> BoostRequirements:
    """Count materials for every boosted part, destroyed ones included.

    Boosts are applied in the lab before the unit ever takes damage, so the
    current alive/dead state has no bearing on what was spent.
    """

    requirements = BoostRequirements()
    for part in body.parts():
        if part.boost is not None:
            requirements.add_part(part.boost)
    return requirements
