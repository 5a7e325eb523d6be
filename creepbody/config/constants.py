"""Constant values mirrored from the host simulation."""

from __future__ import annotations

MAX_CREEP_SIZE = 50
CREEP_HITS_PER_PART = 100
CREEP_SPAWN_TIME = 3
CREEP_LIFE_TIME = 1500
CREEP_CLAIM_LIFE_TIME = 600

BODYPART_COST = {
    "move": 50,
    "work": 100,
    "carry": 50,
    "attack": 80,
    "ranged_attack": 150,
    "heal": 250,
    "claim": 600,
    "tough": 10,
}

HARVEST_POWER = 2
HARVEST_MINERAL_POWER = 1
HARVEST_DEPOSIT_POWER = 1
BUILD_POWER = 5
REPAIR_POWER = 100
DISMANTLE_POWER = 50
UPGRADE_CONTROLLER_POWER = 1
ATTACK_POWER = 30
RANGED_ATTACK_POWER = 10
HEAL_POWER = 12
RANGED_HEAL_POWER = 4
CARRY_CAPACITY = 50
MOVE_POWER = 2
CONTROLLER_RESERVE = 1

# Single-target ranged mass attack damage keyed by distance.
RANGED_MASS_ATTACK_POWER = {1: 10, 2: 4, 3: 1}

MOVE_COST_ROAD = 1
MOVE_COST_PLAIN = 2
MOVE_COST_SWAMP = 10
FATIGUE_PER_PART = 1

LAB_BOOST_MINERAL = 30
LAB_BOOST_ENERGY = 20

DEFAULTS = {
    "DEBUG_LOG_LEVEL": "INFO",
    "SPAWN_TICK_CAP": MAX_CREEP_SIZE * CREEP_SPAWN_TIME,
    "DEFAULT_TERRAIN": "plain",
}
