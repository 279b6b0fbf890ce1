"""Settlement interior generation.

Expands one settlement into a walkable LocationMap. The layout is a pure
function of (seed, base terrain, settlement): all randomness comes from a
single generator seeded at construction and drawn in a fixed order.
"""

import math
from typing import Callable

import numpy as np
import structlog
from scipy import ndimage

from ..settlement import Settlement, Species
from ..terrain.noise import NoiseField
from ..terrain_types import TerrainType
from ..types import Position
from .config import LocationGenConfig
from .map import LocationMap
from .types import FEATURE_NAMES, Feature, FeatureType, LocationTileType

logger = structlog.get_logger()

SHRINE_NAME = "Forest Shrine"

# 8-neighbourhood, diagonals included
_NEIGHBOURHOOD = np.ones((3, 3), dtype=bool)


class LocationGenerator:
    """Builds the local map for a settlement."""

    def __init__(
        self,
        seed: int,
        base_terrain: TerrainType,
        settlement: Settlement,
        config: LocationGenConfig | None = None,
    ):
        self.seed = seed
        self.base_terrain = base_terrain
        self.settlement = settlement
        self.config = config or LocationGenConfig()
        self.rng = np.random.default_rng(seed)

    def generate(self) -> LocationMap:
        """Generate the settlement's local map."""
        width, height = self.determine_map_size()
        location_map = LocationMap(
            width=width, height=height, base_terrain=self.base_terrain
        )

        layouts: dict[Species, Callable[[LocationMap], None]] = {
            Species.HUMAN: self._generate_human_settlement,
            Species.ELF: self._generate_elf_settlement,
        }
        layout = layouts.get(self.settlement.species, self._generate_basic_settlement)
        layout(location_map)

        logger.debug(
            "location_generated",
            name=self.settlement.name,
            species=self.settlement.species.value,
            width=width,
            height=height,
            points_of_interest=len(location_map.points_of_interest),
        )
        return location_map

    def determine_map_size(self) -> tuple[int, int]:
        """Square map sized from sqrt(settlement size) with random variance."""
        variance = self.config.size_variance
        base_size = int(math.sqrt(self.settlement.size))
        size_variance = int(self.rng.integers(-variance, variance + 1))
        size = max(base_size + size_variance, self.config.min_half_size)
        return size * 2, size * 2

    # --- Species layouts ---

    def _generate_human_settlement(self, location_map: LocationMap) -> None:
        self.generate_road_network(location_map)
        self.place_central_features(location_map)
        self.place_houses(location_map)
        if self.settlement.size > self.config.wall_size_threshold:
            self.add_walls(location_map)

    def _generate_elf_settlement(self, location_map: LocationMap) -> None:
        self.generate_natural_paths(location_map)
        self.place_treehouses(location_map)
        self.place_nature_features(location_map)

    def _generate_basic_settlement(self, location_map: LocationMap) -> None:
        self.generate_road_network(location_map)
        self.place_central_features(location_map)

    # --- Roads ---

    def generate_road_network(self, location_map: LocationMap) -> None:
        """Two crossing roads through the center plus random branches."""
        mid_x = location_map.width // 2
        mid_y = location_map.height // 2

        for x in range(location_map.width):
            location_map.set_tile_type(x, mid_y, LocationTileType.HUMAN_ROAD)
        for y in range(location_map.height):
            location_map.set_tile_type(mid_x, y, LocationTileType.HUMAN_ROAD)

        num_branches = int(
            self.rng.integers(self.config.branch_roads_min, self.config.branch_roads_max + 1)
        )
        for _ in range(num_branches):
            start_x = int(self.rng.integers(0, location_map.width))
            start_y = 0 if self.rng.random() < 0.5 else location_map.height - 1
            self.create_branching_road(location_map, Position(x=start_x, y=start_y))

    def create_branching_road(self, location_map: LocationMap, start: Position) -> None:
        """Random walk from start toward the map center, laying road.

        Each step moves along x with probability road_bias, otherwise
        along y. A step on an axis already aligned with the center is a
        no-op, so the walk always terminates.
        """
        target_x = location_map.width // 2
        target_y = location_map.height // 2
        x, y = start.x, start.y

        while x != target_x or y != target_y:
            location_map.set_tile_type(x, y, LocationTileType.HUMAN_ROAD)
            if self.rng.random() < self.config.road_bias:
                if x < target_x:
                    x += 1
                elif x > target_x:
                    x -= 1
            else:
                if y < target_y:
                    y += 1
                elif y > target_y:
                    y -= 1

    # --- Features ---

    def place_central_features(self, location_map: LocationMap) -> None:
        """Market at the center, temple and tavern close by."""
        center_x = location_map.width // 2
        center_y = location_map.height // 2

        self.place_feature(
            location_map, Position(x=center_x, y=center_y), FeatureType.MARKET
        )
        temple = self._offset_position(
            location_map, center_x, center_y, self.config.temple_offset
        )
        self.place_feature(location_map, temple, FeatureType.TEMPLE)
        tavern = self._offset_position(
            location_map, center_x, center_y, self.config.tavern_offset
        )
        self.place_feature(location_map, tavern, FeatureType.TAVERN)

    def place_feature(
        self,
        location_map: LocationMap,
        position: Position,
        feature_type: FeatureType,
        name: str | None = None,
    ) -> bool:
        feature = Feature(
            name=name or FEATURE_NAMES[feature_type], feature_type=feature_type
        )
        return location_map.add_feature(position, feature)

    def _offset_position(
        self,
        location_map: LocationMap,
        center_x: int,
        center_y: int,
        max_offset: int,
    ) -> Position:
        dx = int(self.rng.integers(-max_offset, max_offset + 1))
        dy = int(self.rng.integers(-max_offset, max_offset + 1))
        return Position(
            x=min(max(center_x + dx, 0), location_map.width - 1),
            y=min(max(center_y + dy, 0), location_map.height - 1),
        )

    # --- Housing and walls ---

    def place_houses(self, location_map: LocationMap) -> None:
        """Scatter houses on free interior ground tiles touching a road."""
        roads = location_map.tile_mask(LocationTileType.HUMAN_ROAD)
        near_road = ndimage.binary_dilation(roads, structure=_NEIGHBOURHOOD)
        occupied = location_map.feature_mask()

        for y in range(1, location_map.height - 1):
            for x in range(1, location_map.width - 1):
                if location_map.get_tile_type(x, y) != LocationTileType.GROUND:
                    continue
                if not near_road[y, x] or occupied[y, x]:
                    continue
                if self.rng.random() >= self.config.house_chance:
                    continue

                location_map.set_tile_type(x, y, LocationTileType.HUMAN_HOUSE)
                if self.rng.random() < self.config.workshop_chance:
                    feature_type = (
                        FeatureType.BLACKSMITH
                        if self.rng.random() < 0.5
                        else FeatureType.STORAGE
                    )
                    self.place_feature(location_map, Position(x=x, y=y), feature_type)

    def add_walls(self, location_map: LocationMap) -> None:
        """Ring the settlement with a wall, leaving gates where roads cross.

        Tiles carrying a feature are left standing in the wall line.
        """
        inset = self.config.wall_inset
        width, height = location_map.width, location_map.height
        if width - 2 * inset < 1 or height - 2 * inset < 1:
            return

        open_cells = location_map.tile_mask(LocationTileType.HUMAN_ROAD)
        open_cells |= location_map.feature_mask()

        ring = np.zeros((height, width), dtype=bool)
        ring[inset, inset : width - inset] = True
        ring[height - inset - 1, inset : width - inset] = True
        ring[inset : height - inset, inset] = True
        ring[inset : height - inset, width - inset - 1] = True

        wall_ys, wall_xs = np.nonzero(ring & ~open_cells)
        for y, x in zip(wall_ys, wall_xs):
            location_map.set_tile_type(int(x), int(y), LocationTileType.WALL)

    # --- Elf layouts ---

    def generate_natural_paths(self, location_map: LocationMap) -> None:
        """Winding paths along the near-zero band of a noise field."""
        noise = NoiseField(int(self.rng.integers(0, 2**32)))
        scale = self.config.path_scale
        values = noise.sample_grid(
            np.arange(location_map.width, dtype=np.float64) * scale,
            np.arange(location_map.height, dtype=np.float64) * scale,
        )

        path_ys, path_xs = np.nonzero(np.abs(values) < self.config.path_band)
        for y, x in zip(path_ys, path_xs):
            location_map.set_tile_type(int(x), int(y), LocationTileType.ELF_PATH)

    def place_treehouses(self, location_map: LocationMap) -> None:
        """Clusters of treehouses around random centers."""
        config = self.config
        num_clusters = int(self.rng.integers(config.clusters_min, config.clusters_max + 1))

        for _ in range(num_clusters):
            center_x = self._cluster_coordinate(location_map.width)
            center_y = self._cluster_coordinate(location_map.height)

            num_houses = int(
                self.rng.integers(config.cluster_houses_min, config.cluster_houses_max + 1)
            )
            for _ in range(num_houses):
                house = self._offset_position(
                    location_map, center_x, center_y, config.cluster_radius
                )
                location_map.set_tile_type(house.x, house.y, LocationTileType.ELF_TREEHOUSE)

    def _cluster_coordinate(self, extent: int) -> int:
        """Cluster center along one axis, kept away from the edges."""
        low = min(self.config.cluster_margin, (extent - 1) // 2)
        high = max(low + 1, extent - self.config.cluster_margin)
        return int(self.rng.integers(low, high))

    def place_nature_features(self, location_map: LocationMap) -> None:
        """Gardens anywhere, shrines only away from other features."""
        config = self.config

        num_gardens = int(self.rng.integers(config.gardens_min, config.gardens_max + 1))
        for _ in range(num_gardens):
            x = int(self.rng.integers(0, location_map.width))
            y = int(self.rng.integers(0, location_map.height))
            self.place_feature(location_map, Position(x=x, y=y), FeatureType.GARDEN)

        num_shrines = int(self.rng.integers(config.shrines_min, config.shrines_max + 1))
        for _ in range(num_shrines):
            x = int(self.rng.integers(0, location_map.width))
            y = int(self.rng.integers(0, location_map.height))
            position = Position(x=x, y=y)
            if location_map.is_near_feature(position, config.shrine_spacing):
                continue
            location_map.set_tile_type(x, y, LocationTileType.SHRINE)
            self.place_feature(location_map, position, FeatureType.TEMPLE, name=SHRINE_NAME)
