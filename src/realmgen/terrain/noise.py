"""Coherent noise sampling for terrain generation.

Provides a seeded OpenSimplex field with scalar sampling, layered (fractal)
sums and a ridged transform used to trace river networks.
"""

import numpy as np
from numpy.typing import NDArray
from opensimplex import OpenSimplex


class NoiseField:
    """Seed-deterministic scalar noise over the plane.

    All methods are pure functions of (seed, coordinates, parameters).
    """

    def __init__(self, seed: int):
        self.seed = seed
        self._simplex = OpenSimplex(seed)

    def sample(self, x: float, y: float) -> float:
        """Raw field value at (x, y), in [-1, 1]."""
        value = self._simplex.noise2(x, y)
        return float(min(1.0, max(-1.0, value)))

    def sample_grid(
        self,
        xs: NDArray[np.float64],
        ys: NDArray[np.float64],
    ) -> NDArray[np.float64]:
        """Sample the field on the grid spanned by xs and ys.

        Args:
            xs: 1D array of x coordinates.
            ys: 1D array of y coordinates.

        Returns:
            Array of shape (len(ys), len(xs)) in [-1, 1].
        """
        values = self._simplex.noise2array(
            np.asarray(xs, dtype=np.float64), np.asarray(ys, dtype=np.float64)
        )
        return np.clip(values, -1.0, 1.0)

    def layered(
        self,
        x: float,
        y: float,
        octaves: int,
        persistence: float,
        lacunarity: float,
    ) -> float:
        """Fractal sum of octaves at a single point, remapped to [0, 1]."""
        total = 0.0
        frequency = 1.0
        amplitude = 1.0
        max_amplitude = 0.0

        for _ in range(octaves):
            total += self.sample(x * frequency, y * frequency) * amplitude
            max_amplitude += amplitude
            frequency *= lacunarity
            amplitude *= persistence

        return (total / max_amplitude + 1.0) / 2.0

    def layered_grid(
        self,
        xs: NDArray[np.float64],
        ys: NDArray[np.float64],
        octaves: int,
        persistence: float,
        lacunarity: float,
    ) -> NDArray[np.float32]:
        """Vectorized form of layered() over a grid.

        Args:
            xs: 1D array of x coordinates.
            ys: 1D array of y coordinates.
            octaves: Number of noise layers to sum.
            persistence: Amplitude multiplier between octaves.
            lacunarity: Frequency multiplier between octaves.

        Returns:
            Array of shape (len(ys), len(xs)) in [0, 1].
        """
        xs = np.asarray(xs, dtype=np.float64)
        ys = np.asarray(ys, dtype=np.float64)
        total = np.zeros((ys.size, xs.size), dtype=np.float64)

        frequency = 1.0
        amplitude = 1.0
        max_amplitude = 0.0

        for _ in range(octaves):
            total += self.sample_grid(xs * frequency, ys * frequency) * amplitude
            max_amplitude += amplitude
            frequency *= lacunarity
            amplitude *= persistence

        result = (total / max_amplitude + 1.0) / 2.0
        return result.astype(np.float32)

    def ridged_grid(
        self,
        xs: NDArray[np.float64],
        ys: NDArray[np.float64],
        octaves: int,
        persistence: float,
        lacunarity: float,
        sharpness: float = 2.0,
    ) -> NDArray[np.float32]:
        """Ridged fractal: sharp maxima along the zero set of the base field.

        Each octave contributes (1 - |noise|) ** sharpness, so values peak
        in thin winding lines.

        Returns:
            Array of shape (len(ys), len(xs)) in [0, 1].
        """
        xs = np.asarray(xs, dtype=np.float64)
        ys = np.asarray(ys, dtype=np.float64)
        total = np.zeros((ys.size, xs.size), dtype=np.float64)

        frequency = 1.0
        amplitude = 1.0
        max_amplitude = 0.0

        for _ in range(octaves):
            raw = self.sample_grid(xs * frequency, ys * frequency)
            signal = (1.0 - np.abs(raw)) ** sharpness
            total += signal * amplitude
            max_amplitude += amplitude
            frequency *= lacunarity
            amplitude *= persistence

        result = total / max_amplitude
        return np.clip(result, 0.0, 1.0).astype(np.float32)

