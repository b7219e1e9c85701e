"""
Unit tests for family dispatch and the per-family accessors.

Author: B.G.
"""
import math

import pytest

from pyfastnoise.enums import CellularReturnMode, FractalPolicy, NoiseFamily
from pyfastnoise.noise import dispatch
from pyfastnoise.noise.config import NoiseConfig
from pyfastnoise.noise.cubic_noise import single_cubic_2d
from pyfastnoise.noise.fractal import fractal_billow, fractal_rigid_multi
from pyfastnoise.noise.perlin_noise import single_perlin_2d
from pyfastnoise.noise.perturb import gradient_perturb_fractal_2d
from pyfastnoise.noise.white_noise import white_noise_2d, white_noise_3d

POINT_2D = (123.4, -56.7)
POINT_3D = (123.4, -56.7, 8.9)

ACCESSORS = [
    (NoiseFamily.VALUE, dispatch.get_value_2d, dispatch.get_value_3d),
    (NoiseFamily.VALUE_FRACTAL, dispatch.get_value_fractal_2d, dispatch.get_value_fractal_3d),
    (NoiseFamily.PERLIN, dispatch.get_perlin_2d, dispatch.get_perlin_3d),
    (NoiseFamily.PERLIN_FRACTAL, dispatch.get_perlin_fractal_2d, dispatch.get_perlin_fractal_3d),
    (NoiseFamily.SIMPLEX, dispatch.get_simplex_2d, dispatch.get_simplex_3d),
    (NoiseFamily.SIMPLEX_FRACTAL, dispatch.get_simplex_fractal_2d, dispatch.get_simplex_fractal_3d),
    (NoiseFamily.CUBIC_FRACTAL, dispatch.get_cubic_fractal_2d, dispatch.get_cubic_fractal_3d),
    (NoiseFamily.CELLULAR, dispatch.get_cellular_2d, dispatch.get_cellular_3d),
]


class TestRouting:

    @pytest.mark.unit
    @pytest.mark.parametrize("family, accessor_2d, accessor_3d", ACCESSORS)
    def test_family_matches_accessor(self, family, accessor_2d, accessor_3d):
        config = NoiseConfig(seed=77, frequency=0.03, noise_type=family)
        assert dispatch.evaluate_2d(config, *POINT_2D) == accessor_2d(config, *POINT_2D)
        assert dispatch.evaluate_3d(config, *POINT_3D) == accessor_3d(config, *POINT_3D)

    @pytest.mark.unit
    def test_cubic_dispatch_uses_config_seed(self):
        config = NoiseConfig(seed=77, frequency=0.03, noise_type=NoiseFamily.CUBIC)
        x, y = POINT_2D
        assert dispatch.evaluate_2d(config, x, y) == single_cubic_2d(77, x * 0.03, y * 0.03)
        assert dispatch.get_cubic_2d(config, x, y) == single_cubic_2d(0, x * 0.03, y * 0.03)
        assert dispatch.evaluate_3d(config, *POINT_3D) == dispatch.get_cubic_3d(config, *POINT_3D)

    @pytest.mark.unit
    def test_white_noise_dispatch_scales_frequency(self):
        config = NoiseConfig(seed=3, frequency=0.5, noise_type=NoiseFamily.WHITE_NOISE)
        x, y, z = POINT_3D
        assert dispatch.evaluate_2d(config, x, y) == white_noise_2d(3, x * 0.5, y * 0.5)
        assert dispatch.evaluate_3d(config, x, y, z) == white_noise_3d(3, x * 0.5, y * 0.5, z * 0.5)

    @pytest.mark.unit
    def test_white_noise_accessors_unscaled(self):
        config = NoiseConfig(seed=3, frequency=0.5)
        assert dispatch.get_white_noise_2d(config, 1.5, 2.5) == white_noise_2d(3, 1.5, 2.5)
        assert dispatch.get_white_noise_int_2d(config, 4, 9) == dispatch.get_white_noise_int_2d(config, 4, 9)
        assert -1.0 <= dispatch.get_white_noise_4d(config, 1.0, 2.0, 3.0, 4.0) < 1.0
        assert -1.0 <= dispatch.get_white_noise_int_4d(config, 1, 2, 3, 4) < 1.0

    @pytest.mark.unit
    def test_interp_forwarded(self):
        from pyfastnoise.enums import InterpolationKernel

        config = NoiseConfig(frequency=0.1, noise_type=NoiseFamily.PERLIN,
                             interp=InterpolationKernel.LINEAR)
        x, y = POINT_2D
        expected = single_perlin_2d(config.seed, x * 0.1, y * 0.1, InterpolationKernel.LINEAR)
        assert dispatch.evaluate_2d(config, x, y) == expected

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "policy, combinator",
        [(FractalPolicy.BILLOW, fractal_billow), (FractalPolicy.RIGID_MULTI, fractal_rigid_multi)],
    )
    def test_fractal_policy_routing(self, policy, combinator):
        config = NoiseConfig(frequency=0.1, noise_type=NoiseFamily.PERLIN_FRACTAL,
                             fractal_type=policy)
        x, y = POINT_2D
        sampler = dispatch._sampler_2d(config, NoiseFamily.PERLIN)
        assert dispatch.evaluate_2d(config, x, y) == combinator(sampler, config, x * 0.1, y * 0.1)

    @pytest.mark.unit
    def test_cellular_family_has_no_lattice_sampler(self, default_config):
        with pytest.raises(ValueError):
            dispatch._sampler_2d(default_config, NoiseFamily.CELLULAR)


class TestScenarios:

    @pytest.mark.unit
    def test_default_simplex_origin(self, default_config):
        assert dispatch.evaluate_2d(default_config, 0.0, 0.0) == 0.0
        assert dispatch.evaluate_2d(default_config, 0.0, 0.0) == 0.0

    @pytest.mark.unit
    def test_default_simplex_repeatable(self, default_config):
        first = dispatch.evaluate_2d(default_config, 100.0, 0.0)
        assert dispatch.evaluate_2d(NoiseConfig(), 100.0, 0.0) == first
        assert math.isfinite(first)
        # One 1/frequency step away is not a period of the field
        assert dispatch.evaluate_2d(default_config, 0.0, 0.0) != first

    @pytest.mark.unit
    def test_simplex_4d(self, default_config):
        value = dispatch.get_simplex_4d(default_config, 10.0, 20.0, 30.0, 40.0)
        assert math.isfinite(value)
        assert value == dispatch.get_simplex_4d(default_config, 10.0, 20.0, 30.0, 40.0)

    @pytest.mark.unit
    @pytest.mark.parametrize("family", list(NoiseFamily))
    @pytest.mark.parametrize("policy", list(FractalPolicy))
    def test_every_family_finite(self, family, policy, sample_points_3d):
        config = NoiseConfig(noise_type=family, fractal_type=policy, frequency=0.05,
                             cellular_return_type=CellularReturnMode.DISTANCE2_ADD)
        for x, y, z in sample_points_3d[:20]:
            assert math.isfinite(dispatch.evaluate_2d(config, x, y))
            assert math.isfinite(dispatch.evaluate_3d(config, x, y, z))

    @pytest.mark.unit
    @pytest.mark.parametrize("family", [
        NoiseFamily.VALUE, NoiseFamily.VALUE_FRACTAL,
        NoiseFamily.PERLIN, NoiseFamily.PERLIN_FRACTAL,
        NoiseFamily.SIMPLEX, NoiseFamily.SIMPLEX_FRACTAL,
        NoiseFamily.CUBIC, NoiseFamily.CUBIC_FRACTAL,
    ])
    def test_nan_coordinate_propagates(self, family):
        config = NoiseConfig(noise_type=family)
        nan = float("nan")
        assert math.isnan(dispatch.evaluate_2d(config, nan, 0.0))
        assert math.isnan(dispatch.evaluate_3d(config, 0.0, nan, 0.0))

    @pytest.mark.unit
    def test_infinite_coordinate_propagates(self):
        config = NoiseConfig(noise_type=NoiseFamily.VALUE)
        assert not math.isfinite(dispatch.evaluate_2d(config, float("inf"), 0.0))
        assert not math.isfinite(dispatch.evaluate_3d(config, 0.0, 0.0, float("-inf")))

    @pytest.mark.unit
    @pytest.mark.parametrize("family", list(NoiseFamily))
    def test_non_finite_coordinate_never_raises(self, family):
        config = NoiseConfig(noise_type=family,
                             cellular_return_type=CellularReturnMode.DISTANCE2_DIV)
        for value in (float("nan"), float("inf"), float("-inf")):
            dispatch.evaluate_2d(config, value, 1.0)
            dispatch.evaluate_3d(config, 1.0, value, 1.0)
            dispatch.get_simplex_4d(config, 1.0, 1.0, value, 1.0)
            coord = [value, 1.0]
            gradient_perturb_fractal_2d(config, coord)
