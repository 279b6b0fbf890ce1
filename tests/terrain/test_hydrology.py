"""Tests for river carving."""

import numpy as np
import pytest

from realmgen.terrain.config import RiverConfig
from realmgen.terrain.hydrology import (
    carve_rivers,
    count_river_segments,
    extract_river_mask,
)
from realmgen.terrain_types import TerrainType, terrain_value
from realmgen.types import Position

WATER = terrain_value(TerrainType.WATER)
PLAINS = terrain_value(TerrainType.PLAINS)
MOUNTAINS = terrain_value(TerrainType.MOUNTAINS)


class TestRiverMask:
    """Tests for ridge thresholding."""

    def test_threshold_strict(self):
        """Only values strictly above the threshold become river."""
        ridges = np.array([[0.5, 0.65, 0.66]], dtype=np.float32)
        mask = extract_river_mask(ridges, 0.65)
        np.testing.assert_array_equal(mask, [[False, False, True]])


class TestSegments:
    """Tests for connected segment counting."""

    def test_empty(self):
        assert count_river_segments(np.zeros((5, 5), dtype=bool)) == 0

    def test_diagonal_steps_join(self):
        """Diagonal neighbours belong to the same segment."""
        mask = np.eye(6, dtype=bool)
        assert count_river_segments(mask) == 1

    def test_separate_segments(self):
        mask = np.zeros((6, 6), dtype=bool)
        mask[0, :] = True
        mask[5, :] = True
        assert count_river_segments(mask) == 2


class TestCarveRivers:
    """Tests for carve_rivers."""

    @pytest.fixture
    def terrain(self) -> np.ndarray:
        terrain = np.full((5, 5), PLAINS, dtype=np.uint8)
        terrain[0, 0] = WATER
        terrain[4, 4] = MOUNTAINS
        return terrain

    @pytest.fixture
    def ridges(self) -> np.ndarray:
        ridges = np.zeros((5, 5), dtype=np.float32)
        ridges[2, :] = 0.9  # horizontal channel
        ridges[0, 0] = 0.9  # already water
        ridges[4, 4] = 0.9  # mountain peak
        return ridges

    def test_ridge_cells_become_water(self, terrain, ridges):
        """Cells above threshold are forced to water regardless of biome."""
        result = carve_rivers(terrain, ridges, RiverConfig(threshold=0.65))
        assert np.all(result.terrain[2, :] == WATER)
        assert result.terrain[4, 4] == WATER

    def test_input_not_mutated(self, terrain, ridges):
        before = terrain.copy()
        carve_rivers(terrain, ridges, RiverConfig(threshold=0.65))
        np.testing.assert_array_equal(terrain, before)

    def test_river_cells_exclude_existing_water(self, terrain, ridges):
        """Only land that changed is reported, in raster order."""
        result = carve_rivers(terrain, ridges, RiverConfig(threshold=0.65))
        expected = [Position(x=x, y=2) for x in range(5)] + [Position(x=4, y=4)]
        assert result.river_cells == expected
        assert not result.river_mask[0, 0]

    def test_segment_count(self, terrain, ridges):
        result = carve_rivers(terrain, ridges, RiverConfig(threshold=0.65))
        assert result.segment_count == 2

    def test_nothing_above_threshold(self, terrain):
        ridges = np.zeros((5, 5), dtype=np.float32)
        result = carve_rivers(terrain, ridges, RiverConfig())
        np.testing.assert_array_equal(result.terrain, terrain)
        assert result.river_cells == []
        assert result.segment_count == 0
