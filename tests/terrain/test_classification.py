"""Tests for biome classification."""

import numpy as np
import pytest

from realmgen.terrain.classification import classify_terrain, determine_biome
from realmgen.terrain.config import BiomeThresholds
from realmgen.terrain_types import TerrainType, terrain_from_value, terrain_value


@pytest.fixture
def thresholds() -> BiomeThresholds:
    return BiomeThresholds()


class TestDetermineBiome:
    """Tests for the ordered threshold rules."""

    def test_low_is_water(self, thresholds):
        """Water wins regardless of climate."""
        assert determine_biome(0.1, 0.9, 0.1, thresholds) == TerrainType.WATER
        assert determine_biome(0.1, 0.0, 1.0, thresholds) == TerrainType.WATER

    def test_high_is_mountains(self, thresholds):
        """Mountains win over cold."""
        assert determine_biome(0.9, 0.0, 0.5, thresholds) == TerrainType.MOUNTAINS

    def test_cold_before_moisture(self, thresholds):
        """Snow regardless of moisture."""
        for moisture in (0.0, 0.5, 1.0):
            assert determine_biome(0.5, 0.1, moisture, thresholds) == TerrainType.SNOW

    def test_hot_dry_is_desert(self, thresholds):
        assert determine_biome(0.5, 0.8, 0.1, thresholds) == TerrainType.DESERT

    def test_hot_wet_is_jungle(self, thresholds):
        assert determine_biome(0.5, 0.8, 0.9, thresholds) == TerrainType.JUNGLE

    def test_moisture_bands(self, thresholds):
        """Temperate cells fall into plains, forest, swamp by moisture."""
        assert determine_biome(0.5, 0.4, 0.2, thresholds) == TerrainType.PLAINS
        assert determine_biome(0.5, 0.4, 0.5, thresholds) == TerrainType.FOREST
        assert determine_biome(0.5, 0.4, 0.8, thresholds) == TerrainType.SWAMP

    def test_hot_medium_moisture_uses_bands(self, thresholds):
        """Hot cells between dry and wet fall through to moisture bands."""
        assert determine_biome(0.5, 0.8, 0.35, thresholds) == TerrainType.PLAINS
        assert determine_biome(0.5, 0.8, 0.5, thresholds) == TerrainType.FOREST


class TestClassifyTerrain:
    """Tests for the vectorized classifier."""

    def test_matches_scalar_rules(self, thresholds):
        """Vectorized output agrees with determine_biome on every cell."""
        rng = np.random.default_rng(0)
        elevation = rng.random((24, 24)).astype(np.float32)
        temperature = rng.random((24, 24)).astype(np.float32)
        moisture = rng.random((24, 24)).astype(np.float32)

        terrain = classify_terrain(elevation, temperature, moisture, thresholds)

        assert terrain.dtype == np.uint8
        assert terrain.shape == (24, 24)
        for y in range(24):
            for x in range(24):
                expected = determine_biome(
                    float(elevation[y, x]),
                    float(temperature[y, x]),
                    float(moisture[y, x]),
                    thresholds,
                )
                assert terrain_from_value(terrain[y, x]) == expected

    def test_all_water_below_ocean(self, thresholds):
        elevation = np.full((4, 4), 0.2, dtype=np.float32)
        other = np.full((4, 4), 0.5, dtype=np.float32)
        terrain = classify_terrain(elevation, other, other, thresholds)
        np.testing.assert_array_equal(terrain, terrain_value(TerrainType.WATER))

    def test_custom_thresholds(self):
        """Raising the ocean threshold floods more cells."""
        elevation = np.full((2, 2), 0.55, dtype=np.float32)
        other = np.full((2, 2), 0.4, dtype=np.float32)
        dry = classify_terrain(elevation, other, other, BiomeThresholds())
        wet = classify_terrain(elevation, other, other, BiomeThresholds(ocean=0.6))
        assert not np.any(dry == terrain_value(TerrainType.WATER))
        assert np.all(wet == terrain_value(TerrainType.WATER))
