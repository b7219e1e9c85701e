"""
Unit tests for NoiseConfig.

Author: B.G.
"""
import logging

import pytest

from pyfastnoise import constants as cte
from pyfastnoise.enums import (
    CellularReturnMode,
    FractalPolicy,
    InterpolationKernel,
    NoiseFamily,
)
from pyfastnoise.noise.config import NoiseConfig, compute_fractal_bound


class TestDefaults:

    @pytest.mark.unit
    def test_default_values(self, default_config):
        assert default_config.seed == 1337
        assert default_config.frequency == 0.01
        assert default_config.noise_type is NoiseFamily.SIMPLEX
        assert default_config.interp is InterpolationKernel.QUINTIC
        assert default_config.octaves == 3
        assert default_config.gain == 0.5
        assert default_config.lacunarity == 2.0
        assert default_config.fractal_type is FractalPolicy.FBM
        assert default_config.cellular_return_type is CellularReturnMode.CELL_VALUE
        assert default_config.cellular_noise_lookup is None
        assert default_config.gradient_perturb_amp == pytest.approx(1 / 0.45)

    @pytest.mark.unit
    def test_default_fractal_bound(self, default_config):
        assert default_config.fractal_bound == pytest.approx(1 / 1.75)


class TestFractalBound:

    @pytest.mark.unit
    def test_single_octave(self, default_config):
        default_config.octaves = 1
        assert default_config.fractal_bound == 1.0

    @pytest.mark.unit
    def test_four_octaves_half_gain(self, default_config):
        default_config.gain = 0.5
        default_config.octaves = 4
        assert default_config.fractal_bound == pytest.approx(1 / (1 + 0.5 + 0.25 + 0.125))

    @pytest.mark.unit
    def test_recomputed_on_gain_change(self, default_config):
        default_config.octaves = 2
        default_config.set_fractal_gain(0.25)
        assert default_config.fractal_bound == pytest.approx(1 / 1.25)

    @pytest.mark.unit
    def test_setter_aliases(self, default_config):
        default_config.set_fractal_octaves(4)
        assert default_config.octaves == 4
        assert default_config.fractal_bound == pytest.approx(compute_fractal_bound(4, 0.5))

    @pytest.mark.unit
    def test_degenerate_octaves(self):
        assert compute_fractal_bound(0, 0.5) == 1.0
        assert compute_fractal_bound(-3, 0.5) == 1.0

    @pytest.mark.unit
    def test_fractal_bound_is_read_only(self, default_config):
        with pytest.raises(AttributeError):
            default_config.fractal_bound = 2.0

    @pytest.mark.unit
    def test_other_setters_do_not_touch_bound(self, default_config):
        before = default_config.fractal_bound
        default_config.lacunarity = 3.0
        default_config.seed = 5
        default_config.frequency = 0.5
        assert default_config.fractal_bound == before

    @pytest.mark.unit
    def test_recompute_logged(self, default_config, caplog):
        with caplog.at_level(logging.DEBUG, logger="pyfastnoise.noise.config"):
            default_config.octaves = 5
        assert "fractal_bound" in caplog.text


class TestValidation:

    @pytest.mark.unit
    def test_seed_wrapped_to_int32(self):
        config = NoiseConfig(seed=2**31)
        assert config.seed == -(2**31)

    @pytest.mark.unit
    def test_enum_fields_type_checked(self, default_config):
        with pytest.raises(TypeError):
            default_config.noise_type = "simplex"
        with pytest.raises(TypeError):
            default_config.fractal_type = NoiseFamily.VALUE

    @pytest.mark.unit
    def test_lookup_cannot_be_self(self, default_config):
        with pytest.raises(ValueError):
            default_config.cellular_noise_lookup = default_config

    @pytest.mark.unit
    def test_lookup_cycle_rejected(self):
        a = NoiseConfig()
        b = NoiseConfig()
        c = NoiseConfig()
        a.cellular_noise_lookup = b
        b.cellular_noise_lookup = c
        with pytest.raises(ValueError):
            c.cellular_noise_lookup = a

    @pytest.mark.unit
    def test_lookup_must_be_config(self, default_config):
        with pytest.raises(TypeError):
            default_config.cellular_noise_lookup = object()

    @pytest.mark.unit
    def test_lookup_can_be_cleared(self, default_config):
        default_config.cellular_noise_lookup = NoiseConfig()
        default_config.cellular_noise_lookup = None
        assert default_config.cellular_noise_lookup is None


class TestCopy:

    @pytest.mark.unit
    def test_copy_is_independent(self, default_config):
        lookup = NoiseConfig(seed=9)
        default_config.cellular_noise_lookup = lookup
        default_config.octaves = 6
        clone = default_config.copy()
        clone.seed = 1
        clone.octaves = 2
        assert default_config.seed == cte.DEFAULT_SEED
        assert default_config.octaves == 6
        assert clone.fractal_bound == pytest.approx(1 / 1.5)
        assert clone.cellular_noise_lookup is lookup
