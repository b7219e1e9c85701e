"""
Fractal combination of single-octave noise for PyFastNoise.

A fractal sample walks ``octaves`` bands. Octave 0 samples the
single-octave evaluator at the base seed and coordinate with amplitude 1.
Every following octave multiplies the running coordinate by
``lacunarity``, the amplitude by ``gain``, and increments the seed by one
so bands stay decorrelated.

Policies:

- FBM: ``sum(sample * amp) * fractal_bound``
- BILLOW: ``sum((|sample| * 2 - 1) * amp) * fractal_bound``
- RIGID_MULTI: ``(1 - |s0|) - sum((1 - |s_i|) * amp_i)`` for i > 0, unscaled

The single-octave evaluator is any callable ``sample(seed, *coords)``.

Author: B.G.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from ..enums import FractalPolicy
from ..general_algorithms.math_utils import int32

if TYPE_CHECKING:
    from .config import NoiseConfig


def _octaves(config: NoiseConfig, coords):
    """
    Yield ``(octave, seed, amplitude, coords)`` for every octave of ``config``.

    Coordinates are scaled incrementally, one lacunarity step per octave.
    """
    seed = config.seed
    amp = 1.0
    coords = tuple(coords)
    for octave in range(config.octaves):
        if octave:
            coords = tuple(c * config.lacunarity for c in coords)
            amp *= config.gain
            seed = int32(seed + 1)
        yield octave, seed, amp, coords


def fractal_fbm(sample: Callable[..., float], config: NoiseConfig, *coords: float) -> float:
    """
    Fractal Brownian motion over ``config.octaves`` bands.

    Args:
        sample: Single-octave evaluator ``sample(seed, *coords)``
        config: NoiseConfig providing seed, octaves, gain, lacunarity
        *coords: Frequency-scaled coordinates

    Returns:
        float: Normalised sum, 0.0 when ``octaves <= 0``
    """
    total = 0.0
    for _, seed, amp, octave_coords in _octaves(config, coords):
        total += sample(seed, *octave_coords) * amp
    return total * config.fractal_bound


def fractal_billow(sample: Callable[..., float], config: NoiseConfig, *coords: float) -> float:
    """Billow: folded octaves (``|n| * 2 - 1``), normalised like FBM."""
    total = 0.0
    for _, seed, amp, octave_coords in _octaves(config, coords):
        total += (abs(sample(seed, *octave_coords)) * 2 - 1) * amp
    return total * config.fractal_bound


def fractal_rigid_multi(sample: Callable[..., float], config: NoiseConfig, *coords: float) -> float:
    """
    Rigid multifractal: ridged first octave minus ridged higher octaves.

    Not multiplied by ``fractal_bound``.
    """
    total = 0.0
    for octave, seed, amp, octave_coords in _octaves(config, coords):
        ridge = 1 - abs(sample(seed, *octave_coords))
        if octave:
            total -= ridge * amp
        else:
            total = ridge
    return total


FRACTAL_COMBINATORS = {
    FractalPolicy.FBM: fractal_fbm,
    FractalPolicy.BILLOW: fractal_billow,
    FractalPolicy.RIGID_MULTI: fractal_rigid_multi,
}


def fractal(sample: Callable[..., float], config: NoiseConfig, *coords: float) -> float:
    """Combine ``sample`` over octaves with the policy selected by ``config.fractal_type``."""
    return FRACTAL_COMBINATORS[config.fractal_type](sample, config, *coords)
