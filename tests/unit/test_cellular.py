"""
Unit tests for cellular noise.

Author: B.G.
"""
import pytest

from pyfastnoise.enums import CellularDistanceMetric, CellularReturnMode, NoiseFamily
from pyfastnoise.general_algorithms.hashing import hash_2d, hash_3d, val_coord_2d, val_coord_3d
from pyfastnoise.general_algorithms.tables import CELL_2D_LUT, CELL_3D_LUT
from pyfastnoise.noise.cellular_noise import (
    cellular_distances_2d,
    cellular_distances_3d,
    cellular_nearest_2d,
    cellular_nearest_3d,
    single_cellular_2d,
    single_cellular_3d,
)
from pyfastnoise.noise.config import NoiseConfig
from pyfastnoise.noise.dispatch import evaluate_2d, evaluate_3d

METRICS = list(CellularDistanceMetric)


def _cellular(return_type, metric=CellularDistanceMetric.EUCLIDEAN, **kw):
    return NoiseConfig(
        noise_type=NoiseFamily.CELLULAR,
        cellular_return_type=return_type,
        cellular_distance_function=metric,
        **kw,
    )


class TestSearch:

    @pytest.mark.unit
    @pytest.mark.parametrize("metric", METRICS)
    def test_second_distance_never_below_first(self, metric, sample_points_2d, sample_points_3d):
        config = _cellular(CellularReturnMode.DISTANCE2, metric)
        for x, y in sample_points_2d:
            d, d2 = cellular_distances_2d(config, x * 0.05, y * 0.05)
            assert 0.0 <= d <= d2
        for x, y, z in sample_points_3d[:50]:
            d, d2 = cellular_distances_3d(config, x * 0.05, y * 0.05, z * 0.05)
            assert 0.0 <= d <= d2

    @pytest.mark.unit
    @pytest.mark.parametrize("metric", METRICS)
    def test_nearest_matches_two_edge_first_distance(self, metric, sample_points_2d):
        config = _cellular(CellularReturnMode.DISTANCE, metric)
        for x, y in sample_points_2d[:100]:
            nearest, _, _ = cellular_nearest_2d(config, x * 0.05, y * 0.05)
            d, _ = cellular_distances_2d(config, x * 0.05, y * 0.05)
            assert nearest == d

    @pytest.mark.unit
    def test_nearest_cell_is_adjacent(self, sample_points_2d):
        config = _cellular(CellularReturnMode.CELL_VALUE)
        for x, y in sample_points_2d[:100]:
            sx, sy = x * 0.05, y * 0.05
            _, xc, yc = cellular_nearest_2d(config, sx, sy)
            assert abs(xc - sx) <= 1.5
            assert abs(yc - sy) <= 1.5

    @pytest.mark.unit
    def test_nearest_distance_is_euclidean_square(self):
        config = _cellular(CellularReturnMode.DISTANCE)
        d, xc, yc = cellular_nearest_2d(config, 3.3, -2.7)
        vx, vy = CELL_2D_LUT[hash_2d(config.seed, xc, yc) & 255]
        dx = xc - 3.3 + vx
        dy = yc + 2.7 + vy
        assert d == pytest.approx(dx * dx + dy * dy)


class TestReturnModes:

    @pytest.mark.unit
    def test_cell_value_uses_seed_zero(self):
        config = _cellular(CellularReturnMode.CELL_VALUE, seed=99)
        _, xc, yc = cellular_nearest_2d(config, 4.2, 7.9)
        assert single_cellular_2d(config, 4.2, 7.9) == val_coord_2d(0, xc, yc)
        _, xc, yc, zc = cellular_nearest_3d(config, 4.2, 7.9, 1.1)
        assert single_cellular_3d(config, 4.2, 7.9, 1.1) == val_coord_3d(0, xc, yc, zc)

    @pytest.mark.unit
    def test_distance_mode(self):
        config = _cellular(CellularReturnMode.DISTANCE)
        d, _, _ = cellular_nearest_2d(config, 0.3, 0.6)
        assert single_cellular_2d(config, 0.3, 0.6) == d - 1

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "mode, combine",
        [
            (CellularReturnMode.DISTANCE2, lambda d, d2: d2 - 1),
            (CellularReturnMode.DISTANCE2_ADD, lambda d, d2: d2 + d - 1),
            (CellularReturnMode.DISTANCE2_SUB, lambda d, d2: d2 - d - 1),
            (CellularReturnMode.DISTANCE2_MUL, lambda d, d2: d2 * d - 1),
            (CellularReturnMode.DISTANCE2_DIV, lambda d, d2: d / d2 - 1),
        ],
    )
    def test_two_edge_modes(self, mode, combine):
        config = _cellular(mode)
        d, d2 = cellular_distances_2d(config, 12.25, -3.5)
        assert single_cellular_2d(config, 12.25, -3.5) == pytest.approx(combine(d, d2))
        d, d2 = cellular_distances_3d(config, 12.25, -3.5, 0.75)
        assert single_cellular_3d(config, 12.25, -3.5, 0.75) == pytest.approx(combine(d, d2))

    @pytest.mark.unit
    def test_noise_lookup_requires_config(self):
        config = _cellular(CellularReturnMode.NOISE_LOOKUP)
        with pytest.raises(RuntimeError):
            single_cellular_2d(config, 1.0, 1.0)
        with pytest.raises(RuntimeError):
            single_cellular_3d(config, 1.0, 1.0, 1.0)

    @pytest.mark.unit
    def test_noise_lookup_samples_feature_point(self):
        lookup = NoiseConfig(seed=5, frequency=0.2, noise_type=NoiseFamily.PERLIN)
        config = _cellular(CellularReturnMode.NOISE_LOOKUP, cellular_noise_lookup=lookup)

        _, xc, yc = cellular_nearest_2d(config, 6.6, 2.2)
        vx, vy = CELL_2D_LUT[hash_2d(config.seed, xc, yc) & 255]
        assert single_cellular_2d(config, 6.6, 2.2) == evaluate_2d(lookup, xc + vx, yc + vy)

        _, xc, yc, zc = cellular_nearest_3d(config, 6.6, 2.2, -4.4)
        vx, vy, vz = CELL_3D_LUT[hash_3d(config.seed, xc, yc, zc) & 255]
        assert single_cellular_3d(config, 6.6, 2.2, -4.4) == evaluate_3d(
            lookup, xc + vx, yc + vy, zc + vz
        )

    @pytest.mark.unit
    def test_noise_lookup_chain(self):
        inner = NoiseConfig(noise_type=NoiseFamily.VALUE, frequency=0.5)
        middle = _cellular(CellularReturnMode.NOISE_LOOKUP, cellular_noise_lookup=inner)
        outer = _cellular(CellularReturnMode.NOISE_LOOKUP, cellular_noise_lookup=middle)
        value = evaluate_2d(outer, 100.0, 200.0)
        assert -1.0 <= value <= 1.0

