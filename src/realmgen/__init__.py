"""Seeded world and settlement generation."""

from .exceptions import (
    InvalidDimensionsError,
    InvalidPositionError,
    NoSettlementError,
    RealmError,
)
from .settlement import Governance, Industry, LocationState, Settlement, Species
from .state import FOG_RADIUS, Tile, World
from .terrain_types import TerrainType
from .types import DIRECTION_DELTAS, Direction, Position
from .config import Config, find_config, list_configs, load_config
from .game import Game, GamePhase

__all__ = [
    # Types
    "Direction",
    "Position",
    "DIRECTION_DELTAS",
    "TerrainType",
    # Settlements
    "Species",
    "LocationState",
    "Governance",
    "Industry",
    "Settlement",
    # State
    "World",
    "Tile",
    "FOG_RADIUS",
    # Config
    "Config",
    "load_config",
    "find_config",
    "list_configs",
    # Session
    "Game",
    "GamePhase",
    # Exceptions
    "RealmError",
    "InvalidDimensionsError",
    "InvalidPositionError",
    "NoSettlementError",
]
