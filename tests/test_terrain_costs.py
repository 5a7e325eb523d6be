"""Tests for terrain move costs and carried load."""

import unittest
from creepbody.metrics.terrain import (
    Terrain,
    TerrainLoad,
)


class TestTerrainCosts(unittest.TestCase):
    """Test per-tile cost multipliers."""

    def test_road_is_cheapest(self):
        """Road tiles cost 1."""
        self.assertEqual(Terrain.ROAD.move_cost, 1)

    def test_plain_cost(self):
        """Plain tiles cost 2."""
        self.assertEqual(Terrain.PLAIN.move_cost, 2)

    def test_swamp_cost(self):
        """Swamp tiles cost 10."""
        self.assertEqual(Terrain.SWAMP.move_cost, 10)

    def test_numeric_multiplier(self):
        """A raw multiplier is used as-is."""
        load = TerrainLoad(3.5)
        self.assertEqual(load.cost_multiplier(), 3.5)

    def test_string_terrain_is_converted(self):
        """Terrain names become Terrain members."""
        load = TerrainLoad("road", 20)
        self.assertIs(load.terrain, Terrain.ROAD)
        self.assertEqual(load.carried_load, 20)

    def test_constructors(self):
        self.assertEqual(TerrainLoad.road().cost_multiplier(), 1.0)
        self.assertEqual(TerrainLoad.plain(5).carried_load, 5)
        self.assertIs(TerrainLoad.swamp().terrain, Terrain.SWAMP)


class TestTerrainLoadValidation(unittest.TestCase):
    """Invalid loads and multipliers are rejected."""

    def test_negative_load(self):
        with self.assertRaises(ValueError):
            TerrainLoad(Terrain.ROAD, -5)

    def test_fractional_load(self):
        with self.assertRaises(ValueError):
            TerrainLoad(Terrain.ROAD, 2.5)

    def test_negative_multiplier(self):
        with self.assertRaises(ValueError):
            TerrainLoad(-2.0)

    def test_boolean_multiplier(self):
        with self.assertRaises(ValueError):
            TerrainLoad(True)


if __name__ == "__main__":
    unittest.main()
