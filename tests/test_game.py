"""Tests for the game session."""

import pytest

from realmgen.config import Config
from realmgen.exceptions import NoSettlementError
from realmgen.game import Game, GamePhase
from realmgen.settlement import Species
from realmgen.state import World
from realmgen.types import Direction, Position


@pytest.fixture
def game(settled_world: World) -> Game:
    """Game with the player on the human settlement at (2, 2)."""
    return Game(settled_world, Position(x=2, y=2), Config())


class TestWorldMovement:
    """Tests for movement on the world map."""

    def test_start_reveals_surroundings(self, game: Game):
        """Starting a game reveals the fog around the player."""
        assert game.world.is_seen(Position(x=2, y=2))
        assert game.world.is_seen(Position(x=2, y=6))
        assert not game.world.is_seen(Position(x=10, y=10))

    def test_move(self, game: Game):
        assert game.move(Direction.EAST) is True
        assert game.player_position == Position(x=3, y=2)

    def test_move_into_water_blocked(self, settled_world: World):
        """Water and mountains stop the player."""
        game = Game(settled_world, Position(x=5, y=4))
        assert game.move(Direction.SOUTH) is False
        assert game.player_position == Position(x=5, y=4)

        game = Game(settled_world, Position(x=6, y=6))
        assert game.move(Direction.NORTH) is False

    def test_move_wraps(self, settled_world: World):
        """Walking off the west edge arrives on the east edge."""
        game = Game(settled_world, Position(x=0, y=0))
        assert game.move(Direction.WEST) is True
        assert game.player_position == Position(x=19, y=0)
        assert game.world.is_seen(Position(x=19, y=0))

    def test_prompt_follows_player(self, game: Game):
        """Prompt is set on a settlement and cleared off it."""
        assert game.current_message is not None
        game.move(Direction.EAST)
        assert game.current_message is None
        game.move(Direction.WEST)
        assert game.current_message == game.world.get_tile(Position(x=2, y=2)).settlement.describe()


class TestLocations:
    """Tests for entering and leaving settlements."""

    def test_enter_location(self, game: Game):
        location_map = game.enter_location()
        assert game.phase == GamePhase.PLAYING_LOCATION
        assert game.location_map is location_map
        assert location_map.is_walkable(game.local_position.x, game.local_position.y)

    def test_enter_without_settlement(self, settled_world: World):
        game = Game(settled_world, Position(x=3, y=3))
        with pytest.raises(NoSettlementError):
            game.enter_location()
        assert game.phase == GamePhase.PLAYING_WORLD

    def test_reentry_regenerates_same_layout(self, game: Game):
        """Leaving and re-entering gives the identical map and spawn."""
        first = game.enter_location()
        first_spawn = game.local_position
        game.exit_location()
        second = game.enter_location()
        assert second is not first
        assert second.render() == first.render()
        assert second.points_of_interest == first.points_of_interest
        assert game.local_position == first_spawn

    def test_exit_location(self, game: Game):
        game.enter_location()
        game.exit_location()
        assert game.phase == GamePhase.PLAYING_WORLD
        assert game.location_map is None
        assert game.player_position == Position(x=2, y=2)
        assert game.current_message is not None

    def test_local_moves_stay_walkable(self, game: Game):
        """Local movement never lands on an unwalkable tile."""
        location_map = game.enter_location()
        for direction in list(Direction) * 5:
            before = game.local_position
            moved = game.move(direction)
            pos = game.local_position
            assert location_map.is_walkable(pos.x, pos.y)
            if not moved:
                assert pos == before

    def test_local_moves_do_not_touch_world(self, game: Game):
        game.enter_location()
        game.move(Direction.EAST)
        assert game.player_position == Position(x=2, y=2)


class TestMessages:
    """Tests for interaction messages."""

    def test_thriving_message(self, game: Game):
        assert game.interaction_message() == "Entering the thriving settlement of humans"
        assert game.current_message == "Entering the thriving settlement of humans"

    def test_sacred_message(self, settled_world: World):
        game = Game(settled_world, Position(x=10, y=2))
        assert game.interaction_message() == "You pray at the sacred site of the elf"

    def test_ruins_message(self, settled_world: World):
        game = Game(settled_world, Position(x=15, y=15))
        assert game.interaction_message() == "Exploring the human ruins"

    def test_no_message_off_settlement(self, settled_world: World):
        game = Game(settled_world, Position(x=3, y=3))
        assert game.interaction_message() is None


class TestNewGame:
    """Tests for Game.new."""

    def test_starts_near_species(self):
        """Player starts on the nearest settlement of their species, if any."""
        game = Game.new(7, 48, 32, species=Species.HUMAN)
        assert game.phase == GamePhase.PLAYING_WORLD
        assert game.world.in_bounds(game.player_position)

        center = Position(x=24, y=16)
        expected = game.world.find_nearest_species(center, Species.HUMAN)
        assert game.player_position == (expected or center)
