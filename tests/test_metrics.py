"""Tests for the metric calculator."""

from __future__ import annotations

import pytest

from creepbody.body import Body, PartAction, PartCategory
from creepbody.boost import BoostCompound
from creepbody.metrics import calculator
from creepbody.metrics.terrain import Terrain

M, W, C = PartCategory.MOVE, PartCategory.WORK, PartCategory.CARRY
A, R, H = PartCategory.ATTACK, PartCategory.RANGED_ATTACK, PartCategory.HEAL
T, L = PartCategory.TOUGH, PartCategory.CLAIM


@pytest.fixture()
def worker() -> Body:
    return Body([M, M, W, W, C])


def test_worker_scenario(worker):
    assert calculator.build_cost(worker) == 2 * 50 + 2 * 100 + 50
    assert calculator.spawn_ticks(worker) == 15
    assert calculator.max_hits(worker) == 500
    assert calculator.carry_capacity(worker) == pytest.approx(50.0)
    assert calculator.fatigue_generated(worker, Terrain.PLAIN) == 4
    assert calculator.can_claim(worker) is False


def test_destroying_moves_blocks_the_worker(worker):
    worker.destroy_part(0)
    worker.destroy_part(1)
    assert calculator.fatigue_generated(worker, Terrain.PLAIN) > 0
    assert calculator.move_capable(worker, Terrain.PLAIN) is False
    assert calculator.move_report(worker, Terrain.PLAIN).blocked


def test_construction_metrics_ignore_destruction(worker):
    for index in range(len(worker)):
        worker.destroy_part(index)
    assert calculator.build_cost(worker) == 350
    assert calculator.spawn_ticks(worker) == 15
    assert calculator.max_hits(worker) == 500
    assert calculator.current_hits(worker) == 0
    assert calculator.effective_hits(worker) == 0
    assert calculator.carry_capacity(worker) == 0.0
    assert calculator.harvest_energy(worker) == 0.0
    assert calculator.fatigue_generated(worker, Terrain.SWAMP) == 0
    assert calculator.fatigue_reduction(worker) == 0


def test_work_actions(worker):
    assert calculator.harvest_energy(worker) == pytest.approx(4.0)
    assert calculator.harvest_mineral(worker) == pytest.approx(2.0)
    assert calculator.harvest_deposit(worker) == pytest.approx(2.0)
    assert calculator.build_power(worker) == pytest.approx(10.0)
    assert calculator.repair_power(worker) == pytest.approx(200.0)
    assert calculator.dismantle_power(worker) == pytest.approx(100.0)
    assert calculator.upgrade_controller_power(worker) == pytest.approx(2.0)


def test_boosts_only_scale_their_own_actions():
    body = Body([(W, BoostCompound.CATALYZED_UTRIUM_ALKALIDE), W, M])
    assert calculator.harvest_energy(body) == pytest.approx(16.0)
    assert calculator.build_power(body) == pytest.approx(10.0)
    builder = Body([(W, "LH2O"), M])
    assert calculator.build_power(builder) == pytest.approx(9.0)
    assert calculator.repair_power(builder) == pytest.approx(180.0)


def test_action_power_defaults_to_primary_action(worker):
    assert calculator.action_power(worker, PartCategory.WORK) == pytest.approx(4.0)
    assert calculator.action_power(worker, "carry") == pytest.approx(50.0)


def test_action_power_rejects_foreign_action(worker):
    with pytest.raises(ValueError, match="performed by attack parts"):
        calculator.action_power(worker, PartCategory.WORK, PartAction.ATTACK)


def test_move_and_tough_bodies_have_no_action_power():
    body = Body([T, T, M, M])
    for category in (W, C, A, R, H, T):
        assert calculator.action_power(body, category) == 0.0


def test_combat_powers():
    body = Body([A, (A, "XUH2O"), R, (R, "KHO2"), H, (H, "LO")])
    assert calculator.attack_power(body) == pytest.approx(30 + 120)
    assert calculator.ranged_attack_power(body) == pytest.approx(10 + 30)
    assert calculator.heal_power(body) == pytest.approx(12 + 24)
    assert calculator.ranged_heal_power(body) == pytest.approx(4 + 8)


@pytest.mark.parametrize(("distance", "expected"), [(1, 50.0), (2, 20.0), (3, 5.0), (4, 0.0)])
def test_ranged_mass_attack_by_distance(distance, expected):
    body = Body([(R, BoostCompound.CATALYZED_KEANIUM_ALKALIDE), R, M])
    assert calculator.ranged_mass_attack_power(body, distance) == pytest.approx(expected)


def test_power_is_linear_in_boosted_parts():
    single = Body([(A, "UH2O"), M])
    double = Body([(A, "UH2O"), (A, "UH2O"), M])
    assert calculator.attack_power(double) == pytest.approx(2 * calculator.attack_power(single))


def test_power_never_increases_when_parts_die():
    body = Body.from_notation("4W2M")
    previous = calculator.harvest_energy(body)
    for index in range(4):
        body.destroy_part(index)
        current = calculator.harvest_energy(body)
        assert current <= previous
        previous = current
    assert previous == 0.0


def test_claim_parts():
    body = Body([L, L, M])
    assert calculator.can_claim(body)
    assert calculator.reserve_power(body) == pytest.approx(2.0)
    assert calculator.lifetime_ticks(body) == 600
    body.destroy_part(0)
    body.destroy_part(1)
    assert not calculator.can_claim(body)
    assert calculator.lifetime_ticks(body) == 600
    assert calculator.lifetime_ticks(Body([M])) == 1500


def test_effective_hits_counts_tough_damage_factor():
    body = Body([(T, BoostCompound.CATALYZED_GHODIUM_ALKALIDE), T, M])
    assert calculator.current_hits(body) == 300
    assert calculator.effective_hits(body) == 533
    body.destroy_part(0)
    assert calculator.effective_hits(body) == 200


def test_summarize_snapshot(worker):
    worker.destroy_part(4)
    metrics = calculator.summarize(worker, Terrain.ROAD)
    assert metrics.part_count == 5
    assert metrics.alive_count == 4
    assert metrics.build_cost == 350
    assert metrics.current_hits == 400
    assert metrics.carry_capacity == 0.0
    assert metrics.action_power[PartAction.HARVEST_ENERGY] == pytest.approx(4.0)
    assert PartAction.MOVE not in metrics.action_power
    assert metrics.movement.fatigue_generated == 2
    assert metrics.movement.ticks_per_tile == 1
    assert metrics.fatigue_reduction == 4
    assert metrics.boosts.total_mineral == 0
    assert [part.power for part in metrics.parts] == [0.0, 0.0, 2.0, 2.0, 0.0]
    assert metrics.parts[4].alive is False


def test_summarize_uses_default_terrain(worker):
    assert calculator.summarize(worker).movement.fatigue_generated == 4


@pytest.mark.parametrize("destroyed", [(), (0,), (1, 4), (0, 1, 2, 3, 4, 5)])
def test_construction_metrics_ignore_part_order(destroyed):
    parts = [M, (W, "UO"), C, T, (A, "UH"), L]
    forward = Body(parts)
    backward = Body(list(reversed(parts)))
    for index in destroyed:
        forward.destroy_part(index)
        backward.destroy_part(len(parts) - 1 - index)
    for metric in (calculator.build_cost, calculator.max_hits, calculator.spawn_ticks):
        assert metric(forward) == metric(backward)
    assert calculator.current_hits(forward) == calculator.current_hits(backward)


def test_categories_without_scalar_power_report_zero():
    body = Body([L, M, (M, "XZHO2"), T])
    assert calculator.action_power(body, L) == 0.0
    assert calculator.action_power(body, M) == 0.0
    assert calculator.reserve_power(body) == pytest.approx(1.0)
    assert calculator.action_power(body, M, PartAction.MOVE) == pytest.approx(10.0)
    assert calculator.fatigue_reduction(body) == 10
