"""Settlement seeding: species, state, size, industry, governance, names."""

from typing import Sequence, TypeVar

import numpy as np
from numpy.typing import NDArray

from ..settlement import (
    SIZE_BANDS,
    Governance,
    Industry,
    LocationState,
    Settlement,
    Species,
)
from ..terrain_types import BLOCKED_CODES, TerrainType, terrain_from_value
from ..types import Position
from .config import SettlementConfig

T = TypeVar("T")

WeightedTable = Sequence[tuple[T, float]]


SPECIES_BY_TERRAIN: dict[TerrainType, WeightedTable] = {
    TerrainType.PLAINS: ((Species.HUMAN, 0.5), (Species.ELF, 0.5)),
    TerrainType.FOREST: ((Species.HUMAN, 0.5), (Species.ELF, 0.5)),
    TerrainType.MOUNTAINS: ((Species.BEAR, 0.5), (Species.GHOST, 0.5)),
    TerrainType.DESERT: ((Species.CAT, 0.5), (Species.RAT, 0.5)),
    TerrainType.JUNGLE: ((Species.BEE, 1.0),),
    TerrainType.SNOW: ((Species.GHOST, 1.0),),
    TerrainType.SWAMP: ((Species.RAT, 1.0),),
}

INDUSTRY_BY_TERRAIN: dict[TerrainType, WeightedTable] = {
    TerrainType.PLAINS: ((Industry.FARMING, 0.7), (Industry.TRADING, 0.3)),
    TerrainType.FOREST: ((Industry.LUMBER, 0.6), (Industry.HUNTING, 0.4)),
    TerrainType.MOUNTAINS: ((Industry.MINING, 0.8), (Industry.CRAFTING, 0.2)),
    TerrainType.DESERT: ((Industry.TRADING, 0.7), (Industry.MINING, 0.3)),
    TerrainType.JUNGLE: ((Industry.HUNTING, 0.6), (Industry.FORAGING, 0.4)),
    TerrainType.SNOW: ((Industry.HUNTING, 0.7), (Industry.CRAFTING, 0.3)),
    TerrainType.SWAMP: ((Industry.FORAGING, 0.6), (Industry.FISHING, 0.4)),
}

GOVERNANCE_BY_SPECIES: dict[Species, WeightedTable] = {
    Species.HUMAN: (
        (Governance.MONARCHY, 0.4),
        (Governance.DEMOCRACY, 0.4),
        (Governance.COUNCIL, 0.2),
    ),
    Species.ORC: ((Governance.MONARCHY, 0.6), (Governance.ANARCHY, 0.4)),
    Species.ELF: ((Governance.COUNCIL, 0.6), (Governance.THEOCRACY, 0.4)),
    Species.CAT: ((Governance.MONARCHY, 0.5), (Governance.ANARCHY, 0.5)),
    Species.RAT: ((Governance.ANARCHY, 0.5), (Governance.COUNCIL, 0.5)),
    Species.BEE: ((Governance.HIVEMIND, 1.0),),
    Species.BEAR: ((Governance.MONARCHY, 0.7), (Governance.COUNCIL, 0.3)),
    Species.GHOST: ((Governance.THEOCRACY, 0.6), (Governance.ANARCHY, 0.4)),
}

# Upper bound (inclusive) of each band for a roll in [0, 100)
STATE_BANDS: tuple[tuple[int, LocationState], ...] = (
    (10, LocationState.RUINS),
    (20, LocationState.ABANDONED),
    (30, LocationState.CURSED),
    (40, LocationState.HIDDEN),
    (60, LocationState.STRUGGLING),
    (80, LocationState.SACRED),
    (99, LocationState.THRIVING),
)

NAME_ROOTS: dict[Species, tuple[str, ...]] = {
    Species.HUMAN: ("Ash", "Bram", "Cald", "Dun", "Eld", "Hal", "Mar", "Wick"),
    Species.ORC: ("Grak", "Mog", "Urz", "Dur", "Krag"),
    Species.ELF: ("Aure", "Lith", "Sil", "Thal", "Vey", "Ela"),
    Species.CAT: ("Mew", "Pur", "Sha", "Tabb", "Whis"),
    Species.RAT: ("Gnaw", "Skit", "Scrab", "Rum", "Sniv"),
    Species.BEE: ("Buzz", "Hon", "Comb", "Wax", "Nect"),
    Species.BEAR: ("Ursa", "Bru", "Gro", "Honn", "Tund"),
    Species.GHOST: ("Wail", "Mourn", "Pall", "Shade", "Hollow"),
}

NAME_SUFFIXES: tuple[str, ...] = (
    "ford", "holm", "wick", "ton", "mere", "vale", "reach", "hollow", "stead", "burrow",
)


def weighted_choice(rng: np.random.Generator, table: WeightedTable) -> T:
    """Pick an item from a weighted table using a single uniform draw."""
    total = sum(weight for _, weight in table)
    roll = rng.random() * total
    cumulative = 0.0
    for item, weight in table:
        cumulative += weight
        if roll < cumulative:
            return item
    return table[-1][0]


def roll_state(rng: np.random.Generator) -> LocationState:
    """Pick a lifecycle state from the fixed percentage bands."""
    roll = int(rng.integers(0, 100))
    for upper, state in STATE_BANDS:
        if roll <= upper:
            return state
    return LocationState.THRIVING


def roll_size(rng: np.random.Generator, state: LocationState) -> int:
    """Draw a size from the band allowed for the state."""
    low, high = SIZE_BANDS[state]
    return int(rng.integers(low, high))


def generate_name(rng: np.random.Generator, species: Species) -> str:
    """Compose a settlement name from a species root and a suffix."""
    roots = NAME_ROOTS[species]
    root = roots[int(rng.integers(0, len(roots)))]
    suffix = NAME_SUFFIXES[int(rng.integers(0, len(NAME_SUFFIXES)))]
    return f"{root}{suffix}"


def generate_settlement(
    terrain: TerrainType,
    rng: np.random.Generator,
) -> Settlement:
    """Generate settlement metadata for a tile of the given terrain.

    Draw order from rng is fixed: species, state, size, industry,
    governance, name.
    """
    species = weighted_choice(
        rng, SPECIES_BY_TERRAIN.get(terrain, ((Species.HUMAN, 1.0),))
    )
    state = roll_state(rng)
    size = roll_size(rng, state)
    industry = weighted_choice(
        rng, INDUSTRY_BY_TERRAIN.get(terrain, ((Industry.TRADING, 1.0),))
    )
    governance = weighted_choice(rng, GOVERNANCE_BY_SPECIES[species])
    name = generate_name(rng, species)

    return Settlement(
        name=name,
        species=species,
        state=state,
        size=size,
        governance=governance,
        industry=industry,
    )


def place_settlements(
    terrain: NDArray[np.uint8],
    rng: np.random.Generator,
    config: SettlementConfig,
) -> dict[Position, Settlement]:
    """Roll for a settlement on every unblocked cell in raster order.

    Args:
        terrain: Terrain codes, shape (height, width).
        rng: The world's single random stream.
        config: Settlement parameters.

    Returns:
        Mapping of position to settlement, in raster order.
    """
    height, width = terrain.shape
    settlements: dict[Position, Settlement] = {}
    blocked = np.isin(terrain, BLOCKED_CODES)

    for y in range(height):
        for x in range(width):
            if blocked[y, x]:
                continue
            if rng.random() < config.chance:
                tile_terrain = terrain_from_value(terrain[y, x])
                settlements[Position(x=x, y=y)] = generate_settlement(tile_terrain, rng)

    return settlements
