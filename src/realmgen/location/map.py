"""Local map state for one settlement interior."""

import numpy as np
import structlog
from numpy.typing import NDArray
from pydantic import BaseModel, PrivateAttr

from ..exceptions import InvalidDimensionsError, InvalidPositionError
from ..terrain_types import TerrainType
from ..types import Position
from .types import (
    Feature,
    LocationTile,
    LocationTileType,
    PointOfInterest,
    tile_from_value,
    tile_value,
)

logger = structlog.get_logger()

# Last-resort spawn when no tile is walkable; may sit inside a wall
FALLBACK_SPAWN = Position(x=1, y=1)
DEFAULT_SPAWN_RADIUS = 5


class LocationMap(BaseModel):
    """
    Mutable local grid for a settlement.

    Tile types live in a flat (height, width) uint8 array; features are
    indexed by position and mirrored in points_of_interest in placement
    order.
    """

    width: int
    height: int
    base_terrain: TerrainType = TerrainType.PLAINS

    _tiles: NDArray[np.uint8] = PrivateAttr()
    _features: dict[Position, Feature] = PrivateAttr(default_factory=dict)
    _points_of_interest: list[PointOfInterest] = PrivateAttr(default_factory=list)

    def __init__(self, width: int, height: int, **data) -> None:
        # Checked before validation so the error is not wrapped by pydantic
        if width <= 0 or height <= 0:
            raise InvalidDimensionsError(
                f"Location dimensions must be positive, got {width}x{height}"
            )
        super().__init__(width=width, height=height, **data)

    def model_post_init(self, __context) -> None:
        self._tiles = np.full(
            (self.height, self.width),
            tile_value(LocationTileType.GROUND),
            dtype=np.uint8,
        )

    # --- Tile operations ---

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if (x, y) is within map bounds."""
        return 0 <= x < self.width and 0 <= y < self.height

    def _check_bounds(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise InvalidPositionError(
                f"({x}, {y}) outside location map {self.width}x{self.height}"
            )

    def get_tile_type(self, x: int, y: int) -> LocationTileType:
        """Get tile type at (x, y).

        Raises:
            InvalidPositionError: If (x, y) is out of bounds.
        """
        self._check_bounds(x, y)
        return tile_from_value(self._tiles[y, x])

    def set_tile_type(self, x: int, y: int, tile_type: LocationTileType) -> None:
        """Set tile type at (x, y).

        Raises:
            InvalidPositionError: If (x, y) is out of bounds.
        """
        self._check_bounds(x, y)
        self._tiles[y, x] = tile_value(tile_type)

    def get_tile(self, x: int, y: int) -> LocationTile:
        """Get an immutable view of the tile at (x, y).

        Raises:
            InvalidPositionError: If (x, y) is out of bounds.
        """
        position = Position(x=x, y=y)
        return LocationTile(
            position=position,
            tile_type=self.get_tile_type(x, y),
            feature=self._features.get(position),
        )

    def tile_mask(self, tile_type: LocationTileType) -> NDArray[np.bool_]:
        """Boolean mask of cells with the given tile type."""
        return self._tiles == tile_value(tile_type)

    def walkable_mask(self) -> NDArray[np.bool_]:
        """Boolean mask of walkable cells."""
        blocked_codes = [tile_value(t) for t in LocationTileType if not t.walkable]
        return ~np.isin(self._tiles, blocked_codes)

    # --- Features ---

    def add_feature(self, position: Position, feature: Feature) -> bool:
        """Attach a feature to a tile and record it as a point of interest.

        Positions outside the map are ignored.

        Returns:
            True if the feature was placed.
        """
        if not self.in_bounds(position.x, position.y):
            return False
        self._features[position] = feature
        self._points_of_interest.append(
            PointOfInterest(position=position, feature=feature)
        )
        return True

    def feature_mask(self) -> NDArray[np.bool_]:
        """Boolean mask of cells carrying a feature."""
        mask = np.zeros((self.height, self.width), dtype=bool)
        for position in self._features:
            mask[position.y, position.x] = True
        return mask

    @property
    def points_of_interest(self) -> list[PointOfInterest]:
        """Placed features in placement order."""
        return list(self._points_of_interest)

    def is_near_feature(self, position: Position, distance: int) -> bool:
        """Whether any point of interest lies within Chebyshev distance."""
        return any(
            poi.position.chebyshev(position) <= distance
            for poi in self._points_of_interest
        )

    # --- Movement ---

    def is_walkable(self, x: int, y: int) -> bool:
        """Check if (x, y) can be walked on. Out-of-bounds is not walkable."""
        if not self.in_bounds(x, y):
            return False
        return tile_from_value(self._tiles[y, x]).walkable

    def find_spawn_position(self, search_radius: int = DEFAULT_SPAWN_RADIUS) -> Position:
        """Find where the player appears on entering the settlement.

        Searches square rings of growing radius around the center, then
        scans the whole map in raster order. If nothing is walkable,
        returns FALLBACK_SPAWN.
        """
        center_x = self.width // 2
        center_y = self.height // 2

        for radius in range(search_radius):
            for dy in range(-radius, radius + 1):
                for dx in range(-radius, radius + 1):
                    x = min(max(center_x + dx, 0), self.width - 1)
                    y = min(max(center_y + dy, 0), self.height - 1)
                    if self.is_walkable(x, y):
                        return Position(x=x, y=y)

        walkable_ys, walkable_xs = np.nonzero(self.walkable_mask())
        if walkable_ys.size > 0:
            return Position(x=int(walkable_xs[0]), y=int(walkable_ys[0]))

        logger.warning(
            "spawn_fallback_used",
            width=self.width,
            height=self.height,
            position=str(FALLBACK_SPAWN),
        )
        return FALLBACK_SPAWN

    def render(self) -> list[str]:
        """Rows of glyphs, features shown as their type's initial."""
        rows = []
        for y in range(self.height):
            row = []
            for x in range(self.width):
                feature = self._features.get(Position(x=x, y=y))
                if feature is not None:
                    row.append(feature.feature_type.value[0].upper())
                else:
                    row.append(tile_from_value(self._tiles[y, x]).glyph)
            rows.append("".join(row))
        return rows
