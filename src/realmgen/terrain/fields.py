"""Field generation for terrain: elevation, temperature, moisture, ridges."""

import numpy as np
from numpy.typing import NDArray

from .config import NoiseConfig, RiverConfig, TemperatureConfig
from .noise import NoiseField

# Seed offsets keep the fields correlated to the world seed but distinct
ELEVATION_SEED_OFFSET = 0
TEMPERATURE_SEED_OFFSET = 2
MOISTURE_SEED_OFFSET = 3
RIDGE_SEED_OFFSET = 4


def _axes(width: int, height: int, frequency: float) -> tuple[NDArray, NDArray]:
    """Sample coordinates along each axis, scaled by frequency."""
    xs = np.arange(width, dtype=np.float64) * frequency
    ys = np.arange(height, dtype=np.float64) * frequency
    return xs, ys


def make_elevation(
    width: int,
    height: int,
    seed: int,
    config: NoiseConfig,
) -> NDArray[np.float32]:
    """Generate elevation field.

    Args:
        width: World width in tiles.
        height: World height in tiles.
        seed: World seed.
        config: Layered noise parameters.

    Returns:
        2D elevation array in range [0, 1], shape (height, width).
    """
    field = NoiseField(seed + ELEVATION_SEED_OFFSET)
    xs, ys = _axes(width, height, config.frequency)
    return field.layered_grid(
        xs,
        ys,
        octaves=config.octaves,
        persistence=config.persistence,
        lacunarity=config.lacunarity,
    )


def make_temperature(
    width: int,
    height: int,
    seed: int,
    config: TemperatureConfig,
) -> NDArray[np.float32]:
    """Generate temperature field.

    Blends latitude (warmest on the middle row, coldest at the top and
    bottom edges) with a noise field.

    Args:
        width: World width in tiles.
        height: World height in tiles.
        seed: World seed.
        config: Temperature parameters.

    Returns:
        2D temperature array in range [0, 1].
    """
    rows = np.arange(height, dtype=np.float64)
    latitude = 1.0 - np.abs(2.0 * (rows / height - 0.5))

    field = NoiseField(seed + TEMPERATURE_SEED_OFFSET)
    xs, ys = _axes(width, height, config.frequency)
    noise = (field.sample_grid(xs, ys) + 1.0) / 2.0

    weight = config.latitude_weight
    temperature = weight * latitude[:, np.newaxis] + (1.0 - weight) * noise
    return np.clip(temperature, 0.0, 1.0).astype(np.float32)


def make_moisture(
    width: int,
    height: int,
    seed: int,
    config: NoiseConfig,
) -> NDArray[np.float32]:
    """Generate moisture field from an independent layered noise.

    Returns:
        2D moisture array in range [0, 1].
    """
    field = NoiseField(seed + MOISTURE_SEED_OFFSET)
    xs, ys = _axes(width, height, config.frequency)
    return field.layered_grid(
        xs,
        ys,
        octaves=config.octaves,
        persistence=config.persistence,
        lacunarity=config.lacunarity,
    )


def make_ridges(
    width: int,
    height: int,
    seed: int,
    config: RiverConfig,
) -> NDArray[np.float32]:
    """Generate ridged noise used to trace river channels.

    Returns:
        2D ridge array in range [0, 1].
    """
    field = NoiseField(seed + RIDGE_SEED_OFFSET)
    xs, ys = _axes(width, height, config.frequency)
    return field.ridged_grid(
        xs,
        ys,
        octaves=config.octaves,
        persistence=config.persistence,
        lacunarity=config.lacunarity,
        sharpness=config.sharpness,
    )
