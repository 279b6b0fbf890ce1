"""Settlement interior generation package."""

from .config import LocationGenConfig
from .generator import LocationGenerator
from .map import LocationMap
from .types import (
    Feature,
    FeatureType,
    LocationTile,
    LocationTileType,
    PointOfInterest,
)

__all__ = [
    "Feature",
    "FeatureType",
    "LocationGenConfig",
    "LocationGenerator",
    "LocationMap",
    "LocationTile",
    "LocationTileType",
    "PointOfInterest",
]
