"""World state: the terrain grid, wraparound coordinates and fog of war."""

from typing import TYPE_CHECKING, Mapping

import numpy as np
import structlog
from numpy.typing import NDArray
from pydantic import BaseModel, PrivateAttr

from .settlement import Settlement, Species
from .terrain_types import TerrainType, terrain_from_value
from .types import Position

if TYPE_CHECKING:
    from .terrain.config import WorldGenConfig

logger = structlog.get_logger()

FOG_RADIUS = 4


class Tile(BaseModel, frozen=True):
    """Immutable view of one world cell."""

    position: Position
    height: float = 0.0
    terrain: TerrainType = TerrainType.PLAINS
    settlement: Settlement | None = None
    seen: bool = False

    @property
    def blocked(self) -> bool:
        """Derived from terrain: water and mountains block movement."""
        return self.terrain.blocked

    def appearance(self) -> str:
        """Map symbol: settlement species first, then terrain."""
        if self.settlement is not None:
            return self.settlement.species.glyph
        return self.terrain.glyph


def local_seed(global_seed: int, x: int, y: int) -> int:
    """Mix a world seed with tile coordinates into a per-tile u64 seed."""
    return (global_seed ^ ((x << 32) | y)) & 0xFFFFFFFFFFFFFFFF


class World(BaseModel):
    """
    Mutable world state container.

    Terrain, heights and the seen overlay live in flat (height, width)
    arrays; Tile objects are built on demand. Settlements are indexed by
    position in raster order.
    """

    seed: int
    width: int
    height: int
    wraparound: bool = True

    _terrain: NDArray[np.uint8] | None = PrivateAttr(default=None)
    _heights: NDArray[np.float32] | None = PrivateAttr(default=None)
    _seen: NDArray[np.bool_] | None = PrivateAttr(default=None)
    _settlements: dict[Position, Settlement] = PrivateAttr(default_factory=dict)
    _river_cells: list[Position] = PrivateAttr(default_factory=list)

    @classmethod
    def new(
        cls,
        seed: int,
        width: int,
        height: int,
        config: "WorldGenConfig | None" = None,
    ) -> "World":
        """Generate a fully populated world.

        Raises:
            InvalidDimensionsError: If width or height is not positive.
        """
        from .terrain.generator import WorldGenerator

        return WorldGenerator(seed, width, height, config).generate()

    # --- Grid setup ---

    def set_grid(
        self,
        terrain: NDArray[np.uint8],
        heights: NDArray[np.float32],
        settlements: Mapping[Position, Settlement] | None = None,
        river_cells: list[Position] | None = None,
    ) -> None:
        """Install generated grid data.

        Args:
            terrain: Terrain codes, shape (height, width).
            heights: Elevation values in [0, 1], shape (height, width).
            settlements: Settlement per position.
            river_cells: Cells carved into rivers.
        """
        expected = (self.height, self.width)
        for name, array in (("terrain", terrain), ("heights", heights)):
            if array.shape != expected:
                raise ValueError(
                    f"{name} array shape {array.shape} doesn't match "
                    f"world dimensions {expected}"
                )
        self._terrain = terrain
        self._heights = heights
        self._seen = np.zeros(expected, dtype=bool)
        self._settlements = dict(settlements or {})
        self._river_cells = list(river_cells or [])

    # --- Coordinates ---

    def in_bounds(self, position: Position) -> bool:
        """Check if position is within world bounds."""
        return 0 <= position.x < self.width and 0 <= position.y < self.height

    def get_wrapped_coordinates(self, position: Position) -> Position:
        """Normalize a position onto the grid.

        Wraps modulo width/height on a toroidal world, clamps otherwise.
        """
        if self.wraparound:
            return Position(x=position.x % self.width, y=position.y % self.height)
        return Position(
            x=min(max(position.x, 0), self.width - 1),
            y=min(max(position.y, 0), self.height - 1),
        )

    # --- Tile access ---

    def get_tile(self, position: Position) -> Tile:
        """Get tile at position (normalized first)."""
        pos = self.get_wrapped_coordinates(position)
        if self._terrain is None:
            return Tile(position=pos)

        return Tile(
            position=pos,
            height=float(self._heights[pos.y, pos.x]),
            terrain=terrain_from_value(self._terrain[pos.y, pos.x]),
            settlement=self._settlements.get(pos),
            seen=bool(self._seen[pos.y, pos.x]),
        )

    def is_blocked(self, position: Position) -> bool:
        """Check if position blocks movement, without building a Tile."""
        pos = self.get_wrapped_coordinates(position)
        if self._terrain is None:
            return False
        return terrain_from_value(self._terrain[pos.y, pos.x]).blocked

    def terrain_array(self) -> NDArray[np.uint8]:
        """Read-only view of the terrain codes."""
        if self._terrain is None:
            raise ValueError("World has no terrain grid")
        view = self._terrain.view()
        view.flags.writeable = False
        return view

    def settlements(self) -> Mapping[Position, Settlement]:
        """Return read-only view of all settlements, in raster order."""
        return self._settlements

    def settlement_count(self) -> int:
        return len(self._settlements)

    @property
    def river_cells(self) -> list[Position]:
        """Cells carved into rivers, in raster order."""
        return list(self._river_cells)

    def location_seed(self, position: Position) -> int:
        """Seed for the location generator of the settlement at position."""
        pos = self.get_wrapped_coordinates(position)
        return local_seed(self.seed, pos.x, pos.y)

    # --- Visibility ---

    def update(self, player_position: Position) -> None:
        """Refresh the fog-of-war overlay around the player."""
        self.update_visibility(player_position, FOG_RADIUS)

    def update_visibility(self, position: Position, radius: int) -> None:
        """Mark every cell with dx*dx + dy*dy <= radius*radius as seen.

        Cells off the grid wrap on a toroidal world and are skipped
        otherwise. Seen cells are never reset.
        """
        if self._seen is None:
            return

        for dy in range(-radius, radius + 1):
            for dx in range(-radius, radius + 1):
                if dx * dx + dy * dy > radius * radius:
                    continue
                target = Position(x=position.x + dx, y=position.y + dy)
                if self.wraparound:
                    target = self.get_wrapped_coordinates(target)
                elif not self.in_bounds(target):
                    continue
                self._seen[target.y, target.x] = True

    def is_seen(self, position: Position) -> bool:
        pos = self.get_wrapped_coordinates(position)
        return self._seen is not None and bool(self._seen[pos.y, pos.x])

    def seen_count(self) -> int:
        """Number of cells revealed so far."""
        return 0 if self._seen is None else int(np.count_nonzero(self._seen))

    # --- Queries ---

    def find_nearest_species(
        self,
        start: Position,
        species: Species,
    ) -> Position | None:
        """Find the settlement of a species closest to start.

        Uses Manhattan distance without wrapping. Ties go to the settlement
        found first in raster order.
        """
        closest: Position | None = None
        best_dist = 0

        for position, settlement in self._settlements.items():
            if settlement.species != species:
                continue
            dist = start.manhattan(position)
            if closest is None or dist < best_dist:
                closest = position
                best_dist = dist

        return closest

    def get_interaction_prompt(self, tile: Tile) -> str | None:
        """Description of the settlement on a tile, if any."""
        if tile.settlement is None:
            return None
        return tile.settlement.describe()
