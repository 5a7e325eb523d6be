"""Tests for boost material requirements."""

from __future__ import annotations

from creepbody.body import Body, PartCategory
from creepbody.boost import BoostCompound, BoostRequirements, boost_requirements

W, M, C = PartCategory.WORK, PartCategory.MOVE, PartCategory.CARRY


def test_minerals_and_energy_per_boosted_part():
    body = Body([(W, "UO"), (W, "UO"), (M, "ZO"), C])
    requirements = boost_requirements(body)
    assert requirements.amount(BoostCompound.UTRIUM_OXIDE) == 60
    assert requirements.amount("ZO") == 30
    assert requirements.amount(BoostCompound.KEANIUM_HYDRIDE) == 0
    assert requirements.total_mineral == 90
    assert requirements.energy == 60
    assert list(requirements) == [(BoostCompound.UTRIUM_OXIDE, 60), (BoostCompound.ZYNTHIUM_OXIDE, 30)]


def test_destroyed_parts_still_count():
    body = Body([(W, "UO"), M])
    body.destroy_part(0)
    assert boost_requirements(body).total_mineral == 30


def test_unboosted_body_needs_nothing():
    requirements = boost_requirements(Body.from_notation("3W3M"))
    assert requirements == BoostRequirements()


def test_merge_adds_both_sides():
    first = boost_requirements(Body([(W, "UO"), M]))
    second = boost_requirements(Body([(W, "UO"), (C, "KH"), M]))
    merged = first.merge(second)
    assert merged.amount("UO") == 60
    assert merged.amount("KH") == 30
    assert merged.energy == 60
    assert first.amount("UO") == 30
