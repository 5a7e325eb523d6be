"""Boost compounds and the materials needed to apply them."""

from .compounds import BOOST_TABLE, BoostCompound, BoostTableEntry
from .requirements import BoostRequirements, boost_requirements

__all__ = [
    "BOOST_TABLE",
    "BoostCompound",
    "BoostTableEntry",
    "BoostRequirements",
    "boost_requirements",
]
