"""Shared test fixtures for realmgen tests."""

import numpy as np
import pytest

from realmgen.settlement import Governance, Industry, LocationState, Settlement, Species
from realmgen.state import World
from realmgen.terrain.generator import WorldGenerator
from realmgen.terrain_types import TerrainType, terrain_value
from realmgen.types import Position


def make_settlement(
    species: Species = Species.HUMAN,
    state: LocationState = LocationState.THRIVING,
    size: int = 80,
    name: str = "Ashford",
) -> Settlement:
    return Settlement(
        name=name,
        species=species,
        state=state,
        size=size,
        governance=Governance.MONARCHY,
        industry=Industry.FARMING,
    )


@pytest.fixture
def plains_world() -> World:
    """20x20 all-plains world with no settlements."""
    world = World(seed=99, width=20, height=20)
    world.set_grid(
        np.full((20, 20), terrain_value(TerrainType.PLAINS), dtype=np.uint8),
        np.full((20, 20), 0.5, dtype=np.float32),
    )
    return world


@pytest.fixture
def settled_world() -> World:
    """20x20 plains world with a lake and four settlements.

    Layout:
        water at (5, 5)
        mountains at (6, 5)
        human at (2, 2) and (15, 15), elf at (10, 2), orc at (2, 10)
    """
    terrain = np.full((20, 20), terrain_value(TerrainType.PLAINS), dtype=np.uint8)
    terrain[5, 5] = terrain_value(TerrainType.WATER)
    terrain[5, 6] = terrain_value(TerrainType.MOUNTAINS)

    settlements = {
        Position(x=2, y=2): make_settlement(Species.HUMAN, name="Ashford"),
        Position(x=10, y=2): make_settlement(
            Species.ELF, LocationState.SACRED, 30, name="Silvale"
        ),
        Position(x=2, y=10): make_settlement(
            Species.ORC, LocationState.STRUGGLING, 40, name="Grakholm"
        ),
        Position(x=15, y=15): make_settlement(
            Species.HUMAN, LocationState.RUINS, 20, name="Dunmere"
        ),
    }

    world = World(seed=1234, width=20, height=20)
    world.set_grid(
        terrain,
        np.full((20, 20), 0.5, dtype=np.float32),
        settlements,
    )
    return world


@pytest.fixture(scope="session")
def generated_world() -> World:
    """Small generated world shared across tests; do not mutate."""
    return WorldGenerator(seed=7, width=48, height=32).generate()


@pytest.fixture
def human_settlement() -> Settlement:
    """Thriving human settlement large enough for walls."""
    return make_settlement(Species.HUMAN, LocationState.THRIVING, 80)


@pytest.fixture
def elf_settlement() -> Settlement:
    return make_settlement(Species.ELF, LocationState.SACRED, 30, name="Lithvale")


@pytest.fixture
def settlement_factory():
    """Build settlements with chosen species, state and size."""
    return make_settlement
