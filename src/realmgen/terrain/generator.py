"""Main world generation orchestration."""

import numpy as np
import structlog
from numpy.typing import NDArray

from ..exceptions import InvalidDimensionsError
from ..settlement import Settlement
from ..state import World
from ..terrain_types import TerrainType, terrain_value
from ..types import Position
from .classification import classify_terrain
from .config import WorldGenConfig
from .fields import make_elevation, make_moisture, make_ridges, make_temperature
from .hydrology import carve_rivers
from .settlements import place_settlements

logger = structlog.get_logger()

U64_LIMIT = 2**64


class GenerationResult:
    """Result of world generation with all intermediate data."""

    def __init__(
        self,
        world: World,
        config: WorldGenConfig,
        elevation: NDArray[np.float32],
        temperature: NDArray[np.float32],
        moisture: NDArray[np.float32],
        ridges: NDArray[np.float32] | None,
    ):
        self.world = world
        self.config = config
        self.elevation = elevation
        self.temperature = temperature
        self.moisture = moisture
        self.ridges = ridges


class WorldGenerator:
    """Derives terrain, rivers and settlements from a seed.

    Terrain depends only on the constructor seed. Settlement rolls and the
    world's output seed come from one random stream, drawn in a fixed order.
    """

    def __init__(
        self,
        seed: int,
        width: int,
        height: int,
        config: WorldGenConfig | None = None,
    ):
        if width <= 0 or height <= 0:
            raise InvalidDimensionsError(
                f"World dimensions must be positive, got {width}x{height}"
            )
        base = config or WorldGenConfig()
        self.config = base.model_copy(
            update={"seed": seed, "width": width, "height": height}
        )
        self.seed = seed
        self.width = width
        self.height = height
        self.rng = np.random.default_rng(seed)

    def generate(self) -> World:
        """Generate a fully populated world."""
        return self.generate_with_fields().world

    def generate_with_fields(self) -> GenerationResult:
        """Generate a world and keep the intermediate fields."""
        config = self.config
        width, height, seed = self.width, self.height, self.seed

        logger.info("world_generation_started", seed=seed, width=width, height=height)

        # Stage A: Continuous fields
        elevation = make_elevation(width, height, seed, config.elevation)
        temperature = make_temperature(width, height, seed, config.temperature)
        moisture = make_moisture(width, height, seed, config.moisture)

        # Stage B: Biome classification
        terrain = classify_terrain(elevation, temperature, moisture, config.biomes)

        # Stage C: Rivers
        ridges = None
        river_cells: list[Position] = []
        if config.rivers.enabled:
            ridges = make_ridges(width, height, seed, config.rivers)
            rivers = carve_rivers(terrain, ridges, config.rivers)
            terrain = rivers.terrain
            river_cells = rivers.river_cells
            logger.info(
                "rivers_carved",
                cells=len(river_cells),
                segments=rivers.segment_count,
            )

        # Stage D: Settlements
        settlements = place_settlements(terrain, self.rng, config.settlements)

        # Output seed for the location stage, drawn after all settlement rolls
        output_seed = int(self.rng.integers(0, U64_LIMIT, dtype=np.uint64))

        world = World(seed=output_seed, width=width, height=height, wraparound=True)
        world.set_grid(terrain, elevation, settlements, river_cells)

        _log_world_stats(terrain, settlements)
        logger.info(
            "world_generated",
            seed=seed,
            output_seed=output_seed,
            width=width,
            height=height,
            settlements=len(settlements),
        )

        return GenerationResult(
            world=world,
            config=config,
            elevation=elevation,
            temperature=temperature,
            moisture=moisture,
            ridges=ridges,
        )


def generate_world(config: WorldGenConfig) -> GenerationResult:
    """Generate a world from a complete configuration."""
    generator = WorldGenerator(config.seed, config.width, config.height, config)
    return generator.generate_with_fields()


def terrain_distribution(terrain: NDArray[np.uint8]) -> dict[TerrainType, int]:
    """Count cells of each terrain type."""
    return {t: int(np.sum(terrain == terrain_value(t))) for t in TerrainType}


def _log_world_stats(
    terrain: NDArray[np.uint8],
    settlements: dict[Position, Settlement],
) -> None:
    """Log terrain and settlement statistics."""
    total = terrain.size
    for terrain_type, count in terrain_distribution(terrain).items():
        logger.debug(
            "terrain_share",
            terrain=terrain_type.value,
            cells=count,
            percent=round(count / total * 100, 1),
        )

    species_counts: dict[str, int] = {}
    for settlement in settlements.values():
        key = settlement.species.value
        species_counts[key] = species_counts.get(key, 0) + 1
    logger.debug("settlement_species", **species_counts)
