"""Ordered body model with per-part boost and destruction state."""

from __future__ import annotations

import logging
import operator
from dataclasses import dataclass, replace
from typing import Iterable, Iterator, Optional, Tuple, Union

from ..boost import compounds
from ..boost.compounds import BoostCompound
from ..config.constants import MAX_CREEP_SIZE
from ..parts import PartCategory
from .errors import EmptyBody, IncompatibleBoost, IndexOutOfRange, TooManyParts

logger = logging.getLogger(__name__)


@dataclass
class BodyPart:
    """A single part; ``alive`` is only toggled through :meth:`Body.destroy_part`."""

    category: PartCategory
    boost: Optional[BoostCompound] = None
    alive: bool = True

    @property
    def boosted(self) -> bool:
        return self.boost is not None


PartInput = Union[PartCategory, str, BodyPart, Tuple[PartCategory, Optional[BoostCompound]]]


def _coerce_part(value: PartInput, index: int) -> BodyPart:
    if isinstance(value, BodyPart):
        category, boost = value.category, value.boost
    elif isinstance(value, tuple):
        if len(value) != 2:
            raise ValueError(f"Part {index} must be a (category, boost) pair, got {value!r}")
        category, boost = value
    else:
        category, boost = value, None

    category = PartCategory(category)
    if boost is not None:
        boost = BoostCompound(boost)
        if not compounds.is_compatible(category, boost):
            raise IncompatibleBoost(
                f"Part {index}: compound {boost.value} cannot boost a {category.value} part"
            )
    return BodyPart(category=category, boost=boost)


class Body:
    """Ordered, bounded sequence of parts.

    Order is the destruction order used by the host simulation: the part at
    index 0 is the first to lose its function when the unit takes damage.
    """

    __slots__ = ("_parts",)

    def __init__(self, parts: Iterable[PartInput]) -> None:
        built = [_coerce_part(value, index) for index, value in enumerate(parts)]
        if not built:
            raise EmptyBody("A body needs at least one part")
        if len(built) > MAX_CREEP_SIZE:
            raise TooManyParts(f"A body may have at most {MAX_CREEP_SIZE} parts, got {len(built)}")
        self._parts = built
        logger.debug("Assembled body with %d parts (%d boosted)", len(built), len(self.boosted_parts()))

    @classmethod
    def from_notation(cls, text: str) -> "Body":
        """Build an unboosted body from compact notation such as ``"6W3M"``."""

        from .notation import parse_body

        return parse_body(text)

    # ------------------------------------------------------------------
    # State transitions

    def destroy_part(self, index: int) -> None:
        """Mark the part at ``index`` as destroyed; already-dead parts are left alone."""

        message = f"Part index {index!r} is outside 0..{len(self._parts) - 1}"
        if isinstance(index, bool):
            raise IndexOutOfRange(message)
        try:
            index = operator.index(index)
        except TypeError as exc:
            raise IndexOutOfRange(message) from exc
        if not (0 <= index < len(self._parts)):
            raise IndexOutOfRange(message)
        part = self._parts[index]
        if not part.alive:
            return
        part.alive = False
        logger.debug("Destroyed %s part at index %d", part.category.value, index)

    # ------------------------------------------------------------------
    # Queries

    def parts(self) -> Tuple[BodyPart, ...]:
        """Read-only view of the parts; the returned values are copies."""

        return tuple(replace(part) for part in self._parts)

    def count(self, category: PartCategory, alive_only: bool = True) -> int:
        category = PartCategory(category)
        return sum(
            1 for part in self._parts if part.category is category and (part.alive or not alive_only)
        )

    def categories(self) -> Tuple[PartCategory, ...]:
        return tuple(part.category for part in self._parts)

    def boosted_parts(self) -> Tuple[BodyPart, ...]:
        return tuple(replace(part) for part in self._parts if part.boost is not None)

    def next_alive_index(self) -> Optional[int]:
        """Index of the next part to lose its function, or ``None`` when all are dead."""

        for index, part in enumerate(self._parts):
            if part.alive:
                return index
        return None

    def is_destroyed(self) -> bool:
        return self.next_alive_index() is None

    def copy(self) -> "Body":
        clone = Body.__new__(Body)
        clone._parts = [replace(part) for part in self._parts]
        return clone

    def __len__(self) -> int:
        return len(self._parts)

    def __iter__(self) -> Iterator[BodyPart]:
        return iter(self.parts())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Body):
            return NotImplemented
        return self._parts == other._parts

    def __repr__(self) -> str:
        alive = sum(1 for part in self._parts if part.alive)
        return f"Body(parts={len(self._parts)}, alive={alive})"
