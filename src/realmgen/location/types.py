"""Local map tile types, features and points of interest."""

from enum import Enum

from pydantic import BaseModel

from ..types import Position


class LocationTileType(str, Enum):
    """Tile types inside a settlement."""

    # Base tiles
    GROUND = "ground"
    WALL = "wall"
    WATER = "water"

    # Species-specific paths
    HUMAN_ROAD = "human_road"
    ELF_PATH = "elf_path"
    ORC_TRAIL = "orc_trail"

    # Buildings
    HUMAN_HOUSE = "human_house"
    ELF_TREEHOUSE = "elf_treehouse"
    ORC_HUT = "orc_hut"
    TRADING = "trading"
    SHRINE = "shrine"

    @property
    def walkable(self) -> bool:
        """The one walkability rule for local maps.

        Spawn search, movement and LocationTile.blocked all defer to this.
        """
        return self not in _UNWALKABLE_TYPES

    @property
    def glyph(self) -> str:
        return _TILE_GLYPHS[self]


_UNWALKABLE_TYPES = frozenset({
    LocationTileType.WALL,
    LocationTileType.HUMAN_HOUSE,
    LocationTileType.ELF_TREEHOUSE,
    LocationTileType.ORC_HUT,
})

_TILE_GLYPHS: dict[LocationTileType, str] = {
    LocationTileType.GROUND: ".",
    LocationTileType.WALL: "#",
    LocationTileType.WATER: "~",
    LocationTileType.HUMAN_ROAD: "=",
    LocationTileType.ELF_PATH: ":",
    LocationTileType.ORC_TRAIL: "-",
    LocationTileType.HUMAN_HOUSE: "h",
    LocationTileType.ELF_TREEHOUSE: "t",
    LocationTileType.ORC_HUT: "o",
    LocationTileType.TRADING: "$",
    LocationTileType.SHRINE: "+",
}

# uint8 storage codes for the location grid, in declaration order
_TILE_CODES: dict[LocationTileType, int] = {
    tile_type: index for index, tile_type in enumerate(LocationTileType)
}
_CODE_TILES: dict[int, LocationTileType] = {v: k for k, v in _TILE_CODES.items()}


def tile_value(tile_type: LocationTileType) -> int:
    """Convert LocationTileType to its uint8 storage code."""
    return _TILE_CODES[tile_type]


def tile_from_value(value: int) -> LocationTileType:
    """Convert a uint8 storage code back to LocationTileType."""
    return _CODE_TILES[int(value)]


class FeatureType(str, Enum):
    """Notable features placed inside a settlement."""

    MARKET = "market"
    TEMPLE = "temple"
    TAVERN = "tavern"
    BLACKSMITH = "blacksmith"
    GARDEN = "garden"
    TRAINING_GROUND = "training_ground"
    STORAGE = "storage"


FEATURE_NAMES: dict[FeatureType, str] = {
    FeatureType.MARKET: "Town Market",
    FeatureType.TEMPLE: "Sacred Temple",
    FeatureType.TAVERN: "The Wanderer's Rest",
    FeatureType.BLACKSMITH: "Blacksmith's Forge",
    FeatureType.GARDEN: "Natural Garden",
    FeatureType.TRAINING_GROUND: "Training Ground",
    FeatureType.STORAGE: "Storehouse",
}


class Feature(BaseModel, frozen=True):
    """A named feature on a local tile."""

    name: str
    feature_type: FeatureType


class PointOfInterest(BaseModel, frozen=True):
    """A feature and where it was placed."""

    position: Position
    feature: Feature


class LocationTile(BaseModel, frozen=True):
    """Immutable view of one local map cell."""

    position: Position
    tile_type: LocationTileType = LocationTileType.GROUND
    feature: Feature | None = None

    @property
    def blocked(self) -> bool:
        return not self.tile_type.walkable
