"""World terrain types and their properties."""

from enum import Enum


class TerrainType(str, Enum):
    """Terrain classifications with derived movement blocking."""

    WATER = "water"
    PLAINS = "plains"
    FOREST = "forest"
    MOUNTAINS = "mountains"
    DESERT = "desert"
    SNOW = "snow"
    JUNGLE = "jungle"
    SWAMP = "swamp"

    @property
    def blocked(self) -> bool:
        """Whether the player cannot walk onto this terrain."""
        return self in _BLOCKED_TYPES

    @property
    def glyph(self) -> str:
        """Single-character map symbol."""
        return _GLYPHS[self]


_BLOCKED_TYPES = frozenset({
    TerrainType.WATER,
    TerrainType.MOUNTAINS,
})

_GLYPHS: dict[TerrainType, str] = {
    TerrainType.WATER: "~",
    TerrainType.PLAINS: ",",
    TerrainType.FOREST: "p",
    TerrainType.MOUNTAINS: "^",
    TerrainType.DESERT: ".",
    TerrainType.SNOW: "*",
    TerrainType.JUNGLE: "d",
    TerrainType.SWAMP: "s",
}


# Compact uint8 storage codes for the world's terrain array
_TERRAIN_CODES: dict[TerrainType, int] = {
    TerrainType.WATER: 0,
    TerrainType.PLAINS: 1,
    TerrainType.FOREST: 2,
    TerrainType.MOUNTAINS: 3,
    TerrainType.DESERT: 4,
    TerrainType.SNOW: 5,
    TerrainType.JUNGLE: 6,
    TerrainType.SWAMP: 7,
}

_CODE_TERRAINS: dict[int, TerrainType] = {v: k for k, v in _TERRAIN_CODES.items()}


def terrain_value(terrain: TerrainType) -> int:
    """Convert TerrainType to its uint8 storage code."""
    return _TERRAIN_CODES[terrain]


def terrain_from_value(value: int) -> TerrainType:
    """Convert a uint8 storage code back to TerrainType.

    Raises:
        ValueError: If the code is unknown.
    """
    try:
        return _CODE_TERRAINS[int(value)]
    except KeyError:
        raise ValueError(f"Unknown terrain code: {value}") from None


BLOCKED_CODES: tuple[int, ...] = tuple(
    sorted(_TERRAIN_CODES[t] for t in _BLOCKED_TYPES)
)
