"""
Evaluation entry points for PyFastNoise.

``evaluate_2d`` / ``evaluate_3d`` scale the coordinate by
``config.frequency`` and route it to the evaluator selected by
``config.noise_type`` (and ``config.fractal_type`` for the fractal
families). The route is resolved once per call into a single callable,
so the octave loop never re-branches on configuration.

The ``get_*`` accessors bypass family dispatch and call one family
directly, still applying the frequency (white noise excepted: it hashes
the raw coordinate).

Author: B.G.
"""

from __future__ import annotations

from functools import partial
from typing import Callable

from ..enums import FRACTAL_FAMILIES, NoiseFamily
from .cellular_noise import single_cellular_2d, single_cellular_3d
from .config import NoiseConfig
from .cubic_noise import single_cubic_2d, single_cubic_3d
from .fractal import FRACTAL_COMBINATORS
from .perlin_noise import single_perlin_2d, single_perlin_3d
from .simplex_noise import single_simplex_2d, single_simplex_3d, single_simplex_4d
from .value_noise import single_value_2d, single_value_3d
from .white_noise import (
    white_noise_2d,
    white_noise_3d,
    white_noise_4d,
    white_noise_int_2d,
    white_noise_int_3d,
    white_noise_int_4d,
)

# Fractal family -> single-octave family it sums
_BASE_FAMILY = {
    NoiseFamily.VALUE_FRACTAL: NoiseFamily.VALUE,
    NoiseFamily.PERLIN_FRACTAL: NoiseFamily.PERLIN,
    NoiseFamily.SIMPLEX_FRACTAL: NoiseFamily.SIMPLEX,
    NoiseFamily.CUBIC_FRACTAL: NoiseFamily.CUBIC,
}


def _sampler_2d(config: NoiseConfig, family: NoiseFamily) -> Callable[..., float]:
    """Single-octave evaluator ``sample(seed, x, y)`` of a lattice family."""
    if family is NoiseFamily.VALUE:
        return partial(single_value_2d, interp=config.interp)
    if family is NoiseFamily.PERLIN:
        return partial(single_perlin_2d, interp=config.interp)
    if family is NoiseFamily.SIMPLEX:
        return single_simplex_2d
    if family is NoiseFamily.CUBIC:
        return single_cubic_2d
    raise ValueError(f"{family} has no single-octave lattice evaluator")


def _sampler_3d(config: NoiseConfig, family: NoiseFamily) -> Callable[..., float]:
    """Single-octave evaluator ``sample(seed, x, y, z)`` of a lattice family."""
    if family is NoiseFamily.VALUE:
        return partial(single_value_3d, interp=config.interp)
    if family is NoiseFamily.PERLIN:
        return partial(single_perlin_3d, interp=config.interp)
    if family is NoiseFamily.SIMPLEX:
        return single_simplex_3d
    if family is NoiseFamily.CUBIC:
        return single_cubic_3d
    raise ValueError(f"{family} has no single-octave lattice evaluator")


def resolve_2d(config: NoiseConfig) -> Callable[[float, float], float]:
    """
    Resolve the evaluator of ``config`` for frequency-scaled 2D coordinates.

    Args:
        config: NoiseConfig to read noise_type and fractal_type from

    Returns:
        callable: ``f(x, y) -> float`` over scaled coordinates
    """
    family = config.noise_type
    if family is NoiseFamily.CELLULAR:
        return partial(single_cellular_2d, config)
    if family is NoiseFamily.WHITE_NOISE:
        return partial(white_noise_2d, config.seed)
    if family in FRACTAL_FAMILIES:
        combinator = FRACTAL_COMBINATORS[config.fractal_type]
        return partial(combinator, _sampler_2d(config, _BASE_FAMILY[family]), config)
    return partial(_sampler_2d(config, family), config.seed)


def resolve_3d(config: NoiseConfig) -> Callable[[float, float, float], float]:
    """Resolve the evaluator of ``config`` for frequency-scaled 3D coordinates."""
    family = config.noise_type
    if family is NoiseFamily.CELLULAR:
        return partial(single_cellular_3d, config)
    if family is NoiseFamily.WHITE_NOISE:
        return partial(white_noise_3d, config.seed)
    if family in FRACTAL_FAMILIES:
        combinator = FRACTAL_COMBINATORS[config.fractal_type]
        return partial(combinator, _sampler_3d(config, _BASE_FAMILY[family]), config)
    return partial(_sampler_3d(config, family), config.seed)


def evaluate_2d(config: NoiseConfig, x: float, y: float) -> float:
    """
    Sample the noise configured by ``config`` at (x, y).

    Args:
        config: NoiseConfig
        x, y: Unscaled coordinates

    Returns:
        float: Noise value, about [-1, 1] for the lattice families
    """
    f = config.frequency
    return resolve_2d(config)(x * f, y * f)


def evaluate_3d(config: NoiseConfig, x: float, y: float, z: float) -> float:
    """Sample the noise configured by ``config`` at (x, y, z). See ``evaluate_2d``."""
    f = config.frequency
    return resolve_3d(config)(x * f, y * f, z * f)


# ----------------------------------------------------------------------
# Per-family accessors
# ----------------------------------------------------------------------


def _fractal_2d(config: NoiseConfig, family: NoiseFamily, x: float, y: float) -> float:
    f = config.frequency
    combinator = FRACTAL_COMBINATORS[config.fractal_type]
    return combinator(_sampler_2d(config, family), config, x * f, y * f)


def _fractal_3d(config: NoiseConfig, family: NoiseFamily, x: float, y: float, z: float) -> float:
    f = config.frequency
    combinator = FRACTAL_COMBINATORS[config.fractal_type]
    return combinator(_sampler_3d(config, family), config, x * f, y * f, z * f)


def get_value_2d(config: NoiseConfig, x: float, y: float) -> float:
    f = config.frequency
    return single_value_2d(config.seed, x * f, y * f, config.interp)


def get_value_3d(config: NoiseConfig, x: float, y: float, z: float) -> float:
    f = config.frequency
    return single_value_3d(config.seed, x * f, y * f, z * f, config.interp)


def get_value_fractal_2d(config: NoiseConfig, x: float, y: float) -> float:
    return _fractal_2d(config, NoiseFamily.VALUE, x, y)


def get_value_fractal_3d(config: NoiseConfig, x: float, y: float, z: float) -> float:
    return _fractal_3d(config, NoiseFamily.VALUE, x, y, z)


def get_perlin_2d(config: NoiseConfig, x: float, y: float) -> float:
    f = config.frequency
    return single_perlin_2d(config.seed, x * f, y * f, config.interp)


def get_perlin_3d(config: NoiseConfig, x: float, y: float, z: float) -> float:
    f = config.frequency
    return single_perlin_3d(config.seed, x * f, y * f, z * f, config.interp)


def get_perlin_fractal_2d(config: NoiseConfig, x: float, y: float) -> float:
    return _fractal_2d(config, NoiseFamily.PERLIN, x, y)


def get_perlin_fractal_3d(config: NoiseConfig, x: float, y: float, z: float) -> float:
    return _fractal_3d(config, NoiseFamily.PERLIN, x, y, z)


def get_simplex_2d(config: NoiseConfig, x: float, y: float) -> float:
    f = config.frequency
    return single_simplex_2d(config.seed, x * f, y * f)


def get_simplex_3d(config: NoiseConfig, x: float, y: float, z: float) -> float:
    f = config.frequency
    return single_simplex_3d(config.seed, x * f, y * f, z * f)


def get_simplex_4d(config: NoiseConfig, x: float, y: float, z: float, w: float) -> float:
    """4D simplex noise; there is no 4D family dispatch."""
    f = config.frequency
    return single_simplex_4d(config.seed, x * f, y * f, z * f, w * f)


def get_simplex_fractal_2d(config: NoiseConfig, x: float, y: float) -> float:
    return _fractal_2d(config, NoiseFamily.SIMPLEX, x, y)


def get_simplex_fractal_3d(config: NoiseConfig, x: float, y: float, z: float) -> float:
    return _fractal_3d(config, NoiseFamily.SIMPLEX, x, y, z)


def get_cubic_2d(config: NoiseConfig, x: float, y: float) -> float:
    """2D cubic noise, sampled with seed 0 regardless of ``config.seed``."""
    f = config.frequency
    return single_cubic_2d(0, x * f, y * f)


def get_cubic_3d(config: NoiseConfig, x: float, y: float, z: float) -> float:
    f = config.frequency
    return single_cubic_3d(config.seed, x * f, y * f, z * f)


def get_cubic_fractal_2d(config: NoiseConfig, x: float, y: float) -> float:
    return _fractal_2d(config, NoiseFamily.CUBIC, x, y)


def get_cubic_fractal_3d(config: NoiseConfig, x: float, y: float, z: float) -> float:
    return _fractal_3d(config, NoiseFamily.CUBIC, x, y, z)


def get_cellular_2d(config: NoiseConfig, x: float, y: float) -> float:
    f = config.frequency
    return single_cellular_2d(config, x * f, y * f)


def get_cellular_3d(config: NoiseConfig, x: float, y: float, z: float) -> float:
    f = config.frequency
    return single_cellular_3d(config, x * f, y * f, z * f)


def get_white_noise_2d(config: NoiseConfig, x: float, y: float) -> float:
    return white_noise_2d(config.seed, x, y)


def get_white_noise_3d(config: NoiseConfig, x: float, y: float, z: float) -> float:
    return white_noise_3d(config.seed, x, y, z)


def get_white_noise_4d(config: NoiseConfig, x: float, y: float, z: float, w: float) -> float:
    return white_noise_4d(config.seed, x, y, z, w)


def get_white_noise_int_2d(config: NoiseConfig, x: int, y: int) -> float:
    return white_noise_int_2d(config.seed, x, y)


def get_white_noise_int_3d(config: NoiseConfig, x: int, y: int, z: int) -> float:
    return white_noise_int_3d(config.seed, x, y, z)


def get_white_noise_int_4d(config: NoiseConfig, x: int, y: int, z: int, w: int) -> float:
    return white_noise_int_4d(config.seed, x, y, z, w)
