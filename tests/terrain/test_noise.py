"""Tests for noise sampling."""

import numpy as np
import pytest

from realmgen.terrain.noise import NoiseField


@pytest.fixture
def field() -> NoiseField:
    return NoiseField(42)


@pytest.fixture
def axes() -> tuple[np.ndarray, np.ndarray]:
    xs = np.arange(40, dtype=np.float64) * 0.05
    ys = np.arange(30, dtype=np.float64) * 0.05
    return xs, ys


class TestSample:
    """Tests for point and grid sampling."""

    def test_sample_in_range(self, field: NoiseField):
        """Raw samples stay inside [-1, 1]."""
        for i in range(200):
            value = field.sample(i * 0.37, i * -0.21)
            assert -1.0 <= value <= 1.0

    def test_sample_deterministic(self):
        """Same seed and coordinates give the same value."""
        assert NoiseField(7).sample(1.5, 2.5) == NoiseField(7).sample(1.5, 2.5)

    def test_different_seed_different_output(self, axes):
        xs, ys = axes
        a = NoiseField(1).sample_grid(xs, ys)
        b = NoiseField(2).sample_grid(xs, ys)
        assert not np.allclose(a, b)

    def test_grid_shape(self, field: NoiseField, axes):
        """Grid output is (len(ys), len(xs))."""
        xs, ys = axes
        assert field.sample_grid(xs, ys).shape == (30, 40)

    def test_grid_matches_point_samples(self, field: NoiseField, axes):
        """sample_grid agrees with sample at each cell."""
        xs, ys = axes
        grid = field.sample_grid(xs, ys)
        for j in (0, 7, 29):
            for i in (0, 13, 39):
                assert grid[j, i] == pytest.approx(field.sample(xs[i], ys[j]), abs=1e-9)


class TestLayered:
    """Tests for fractal layering."""

    def test_layered_range(self, field: NoiseField):
        """Layered values are remapped to [0, 1]."""
        for i in range(100):
            value = field.layered(i * 0.13, i * 0.07, octaves=4, persistence=0.5, lacunarity=2.0)
            assert 0.0 <= value <= 1.0

    def test_layered_grid_matches_scalar(self, field: NoiseField, axes):
        xs, ys = axes
        grid = field.layered_grid(xs, ys, octaves=3, persistence=0.5, lacunarity=2.0)
        assert grid.dtype == np.float32
        expected = field.layered(xs[5], ys[9], octaves=3, persistence=0.5, lacunarity=2.0)
        assert grid[9, 5] == pytest.approx(expected, abs=1e-5)

    def test_single_octave_is_remapped_sample(self, field: NoiseField):
        value = field.layered(0.3, 0.8, octaves=1, persistence=0.5, lacunarity=2.0)
        assert value == pytest.approx((field.sample(0.3, 0.8) + 1.0) / 2.0)

    def test_more_octaves_more_detail(self, field: NoiseField):
        """More octaves adds higher frequency detail."""
        xs = np.arange(64, dtype=np.float64) * 0.03
        low = field.layered_grid(xs, xs, octaves=1, persistence=0.5, lacunarity=2.0)
        high = field.layered_grid(xs, xs, octaves=6, persistence=0.5, lacunarity=2.0)
        grad_low = np.abs(np.diff(low, axis=0)).mean()
        grad_high = np.abs(np.diff(high, axis=0)).mean()
        assert grad_high > grad_low


class TestRidged:
    """Tests for ridged noise."""

    def test_ridged_range_and_dtype(self, field: NoiseField, axes):
        xs, ys = axes
        ridges = field.ridged_grid(xs, ys, octaves=3, persistence=0.35, lacunarity=2.0, sharpness=6.0)
        assert ridges.dtype == np.float32
        assert ridges.min() >= 0.0
        assert ridges.max() <= 1.0

    def test_sharpness_thins_ridges(self, field: NoiseField, axes):
        """Higher sharpness lowers the mean, concentrating mass on ridges."""
        xs, ys = axes
        soft = field.ridged_grid(xs, ys, octaves=1, persistence=0.5, lacunarity=2.0, sharpness=1.0)
        sharp = field.ridged_grid(xs, ys, octaves=1, persistence=0.5, lacunarity=2.0, sharpness=6.0)
        assert sharp.mean() < soft.mean()

    def test_single_octave_formula(self, field: NoiseField, axes):
        """One octave is (1 - |noise|) ** sharpness."""
        xs, ys = axes
        ridges = field.ridged_grid(xs, ys, octaves=1, persistence=0.5, lacunarity=2.0, sharpness=2.0)
        expected = (1.0 - np.abs(field.sample_grid(xs, ys))) ** 2.0
        np.testing.assert_allclose(ridges, expected, atol=1e-6)
