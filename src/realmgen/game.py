"""Game session: the active world, the player and the current location."""

from enum import Enum

import structlog

from .config import Config
from .exceptions import NoSettlementError
from .location.generator import LocationGenerator
from .location.map import LocationMap
from .settlement import LocationState, Species
from .state import World
from .terrain.generator import WorldGenerator
from .types import Direction, Position

logger = structlog.get_logger()


class GamePhase(str, Enum):
    """Which map the player is currently on."""

    PLAYING_WORLD = "playing_world"
    PLAYING_LOCATION = "playing_location"
    GAME_OVER = "game_over"


class Game:
    """Owns the world, the player's positions and the active location map.

    The location map exists only while the player is inside a settlement.
    It is discarded on exit and regenerated from the same seed on re-entry.
    """

    def __init__(
        self,
        world: World,
        player_position: Position,
        config: Config | None = None,
    ):
        self.world = world
        self.config = config or Config()
        self.player_position = world.get_wrapped_coordinates(player_position)
        self.local_position = Position(x=0, y=0)
        self.location_map: LocationMap | None = None
        self.phase = GamePhase.PLAYING_WORLD
        self.current_message: str | None = None

        self.world.update(self.player_position)
        self.update_interaction_prompt()

    @classmethod
    def new(
        cls,
        seed: int,
        width: int,
        height: int,
        species: Species = Species.HUMAN,
        config: Config | None = None,
    ) -> "Game":
        """Generate a world and start the player beside their own kind.

        The player starts on the settlement of the given species nearest
        the world center, or at the center if there is none.
        """
        config = config or Config()
        world = WorldGenerator(seed, width, height, config.world).generate()

        center = Position(x=width // 2, y=height // 2)
        start = world.find_nearest_species(center, species) or center

        logger.info("game_started", seed=seed, species=species.value, start=str(start))
        return cls(world, start, config)

    # --- Movement ---

    def move(self, direction: Direction) -> bool:
        """Step the player one tile on the current map.

        Returns:
            True if the player moved, False if the target is blocked.
        """
        if self.phase == GamePhase.PLAYING_LOCATION:
            return self._move_local(direction)
        if self.phase == GamePhase.PLAYING_WORLD:
            return self._move_world(direction)
        return False

    def _move_world(self, direction: Direction) -> bool:
        target = self.world.get_wrapped_coordinates(self.player_position.offset(direction))
        if self.world.is_blocked(target):
            logger.debug("move_rejected_blocked", to_pos=str(target))
            return False

        self.player_position = target
        self.world.update(target)
        self.update_interaction_prompt()
        return True

    def _move_local(self, direction: Direction) -> bool:
        if self.location_map is None:
            return False
        target = self.local_position.offset(direction)
        if not self.location_map.is_walkable(target.x, target.y):
            logger.debug("move_rejected_not_walkable", to_pos=str(target))
            return False

        self.local_position = target
        return True

    # --- Locations ---

    def enter_location(self) -> LocationMap:
        """Generate the settlement under the player and step inside.

        Raises:
            NoSettlementError: If the player's tile has no settlement.
        """
        tile = self.world.get_tile(self.player_position)
        if tile.settlement is None:
            raise NoSettlementError(f"No settlement at {tile.position}")

        generator = LocationGenerator(
            self.world.location_seed(tile.position),
            tile.terrain,
            tile.settlement,
            self.config.location,
        )
        location_map = generator.generate()
        spawn = location_map.find_spawn_position(self.config.location.spawn_search_radius)

        self.location_map = location_map
        self.local_position = spawn
        self.phase = GamePhase.PLAYING_LOCATION

        logger.info(
            "location_entered",
            name=tile.settlement.name,
            position=str(tile.position),
            spawn=str(spawn),
        )
        return location_map

    def exit_location(self) -> None:
        """Leave the current settlement and return to the world map."""
        if self.phase != GamePhase.PLAYING_LOCATION:
            return
        self.location_map = None
        self.phase = GamePhase.PLAYING_WORLD
        self.update_interaction_prompt()
        logger.info("location_exited", position=str(self.player_position))

    # --- Messages ---

    def update_interaction_prompt(self) -> None:
        """Describe the settlement under the player, or clear the message."""
        tile = self.world.get_tile(self.player_position)
        self.current_message = self.world.get_interaction_prompt(tile)

    def interaction_message(self) -> str | None:
        """Flavour text for interacting with the settlement under the player."""
        settlement = self.world.get_tile(self.player_position).settlement
        if settlement is None:
            return None

        species = settlement.species.value
        state = settlement.state
        if state in (LocationState.THRIVING, LocationState.STRUGGLING):
            message = f"Entering the {state.value} settlement of {species}s"
        elif state in (LocationState.ABANDONED, LocationState.RUINS):
            message = f"Exploring the {species} ruins"
        elif state == LocationState.SACRED:
            message = f"You pray at the sacred site of the {species}"
        elif state == LocationState.CURSED:
            message = "You attempt to cleanse this cursed place"
        else:
            message = "You investigate the hidden location"

        self.current_message = message
        return message
