"""Biome classification: ordered threshold rules over continuous fields."""

import numpy as np
from numpy.typing import NDArray

from ..terrain_types import TerrainType, terrain_value
from .config import BiomeThresholds


def determine_biome(
    height: float,
    temperature: float,
    moisture: float,
    thresholds: BiomeThresholds,
) -> TerrainType:
    """Classify a single cell.

    Height checks come first, then temperature, then moisture. Bands
    overlap, so the order of the checks is the tie-break.
    """
    if height < thresholds.ocean:
        return TerrainType.WATER
    if height > thresholds.mountain:
        return TerrainType.MOUNTAINS
    if temperature < thresholds.cold:
        return TerrainType.SNOW
    if temperature > thresholds.hot and moisture < thresholds.dry:
        return TerrainType.DESERT
    if temperature > thresholds.hot and moisture > thresholds.wet:
        return TerrainType.JUNGLE
    if moisture < thresholds.plains_max:
        return TerrainType.PLAINS
    if moisture < thresholds.forest_max:
        return TerrainType.FOREST
    return TerrainType.SWAMP


def classify_terrain(
    elevation: NDArray[np.float32],
    temperature: NDArray[np.float32],
    moisture: NDArray[np.float32],
    thresholds: BiomeThresholds,
) -> NDArray[np.uint8]:
    """Classify every cell into a terrain code.

    Vectorized equivalent of determine_biome(): np.select picks the first
    matching condition, preserving rule precedence.

    Args:
        elevation: Elevation field [0, 1].
        temperature: Temperature field [0, 1].
        moisture: Moisture field [0, 1].
        thresholds: Classification thresholds.

    Returns:
        2D array of terrain codes as uint8.
    """
    hot = temperature > thresholds.hot

    conditions = [
        elevation < thresholds.ocean,
        elevation > thresholds.mountain,
        temperature < thresholds.cold,
        hot & (moisture < thresholds.dry),
        hot & (moisture > thresholds.wet),
        moisture < thresholds.plains_max,
        moisture < thresholds.forest_max,
    ]
    choices = [
        terrain_value(TerrainType.WATER),
        terrain_value(TerrainType.MOUNTAINS),
        terrain_value(TerrainType.SNOW),
        terrain_value(TerrainType.DESERT),
        terrain_value(TerrainType.JUNGLE),
        terrain_value(TerrainType.PLAINS),
        terrain_value(TerrainType.FOREST),
    ]

    terrain = np.select(
        conditions, choices, default=terrain_value(TerrainType.SWAMP)
    )
    return terrain.astype(np.uint8)
