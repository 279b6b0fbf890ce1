"""Hydrology: river channels traced from ridged noise."""

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray
from scipy import ndimage

from ..terrain_types import TerrainType, terrain_value
from ..types import Position
from .config import RiverConfig

# 8-connectivity so diagonal channel steps stay one segment
_EIGHT_CONNECTED = np.ones((3, 3), dtype=bool)


@dataclass
class RiverResult:
    """Outcome of river carving."""

    terrain: NDArray[np.uint8]
    river_mask: NDArray[np.bool_]
    river_cells: list[Position]
    segment_count: int


def extract_river_mask(
    ridges: NDArray[np.float32],
    threshold: float,
) -> NDArray[np.bool_]:
    """Cells whose ridged value exceeds the threshold."""
    return ridges > threshold


def count_river_segments(river_mask: NDArray[np.bool_]) -> int:
    """Count connected river segments."""
    if not np.any(river_mask):
        return 0
    _, count = ndimage.label(river_mask, structure=_EIGHT_CONNECTED)
    return int(count)


def carve_rivers(
    terrain: NDArray[np.uint8],
    ridges: NDArray[np.float32],
    config: RiverConfig,
) -> RiverResult:
    """Force ridge cells to water regardless of their biome.

    Args:
        terrain: Classified terrain codes, shape (height, width).
        ridges: Ridged noise in [0, 1].
        config: River parameters.

    Returns:
        RiverResult with the carved terrain (a new array), the mask of
        carved cells, the carved cells in raster order, and the number of
        connected segments.
    """
    water = terrain_value(TerrainType.WATER)
    carved = terrain.copy()

    # Only land that actually changes counts as river
    river_mask = extract_river_mask(ridges, config.threshold) & (terrain != water)
    carved[river_mask] = water

    ys, xs = np.nonzero(river_mask)
    river_cells = [Position(x=int(x), y=int(y)) for y, x in zip(ys, xs)]

    return RiverResult(
        terrain=carved,
        river_mask=river_mask,
        river_cells=river_cells,
        segment_count=count_river_segments(river_mask),
    )
