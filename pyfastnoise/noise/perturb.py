"""
Gradient perturbation (domain warp) for PyFastNoise.

Displaces a coordinate in place by a smooth vector field. The field is
built like value noise, except each lattice corner carries a
``CELL_2D``/``CELL_3D`` jitter vector instead of a scalar; the corner
vectors are blended with the configured interpolation kernel and the
result, times the perturb amplitude, is added to the coordinate.

Coordinates are mutable sequences (``list`` or ``numpy.ndarray``) of
length 2 or 3 and are modified in place.

Author: B.G.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, MutableSequence

from ..general_algorithms.hashing import hash_2d, hash_3d
from ..general_algorithms.interpolation import interp_delta, lerp
from ..general_algorithms.math_utils import fast_floor, int32
from ..general_algorithms.tables import CELL_2D_LUT, CELL_3D_LUT

if TYPE_CHECKING:
    from .config import NoiseConfig


def perturb_offset_2d(config: NoiseConfig, seed: int, frequency: float, x: float, y: float):
    """
    Warp vector of one octave at an unscaled 2D coordinate.

    Args:
        config: NoiseConfig providing the interpolation kernel
        seed: Octave seed
        frequency: Octave frequency
        x, y: Unscaled coordinates

    Returns:
        tuple: ``(dx, dy)`` before amplitude scaling
    """
    xf = x * frequency
    yf = y * frequency
    x0 = fast_floor(xf)
    y0 = fast_floor(yf)
    x1 = x0 + 1
    y1 = y0 + 1

    xs = interp_delta(config.interp, xf - x0)
    ys = interp_delta(config.interp, yf - y0)

    v0 = CELL_2D_LUT[hash_2d(seed, x0, y0) & 255]
    v1 = CELL_2D_LUT[hash_2d(seed, x1, y0) & 255]
    lx0x = lerp(v0[0], v1[0], xs)
    ly0x = lerp(v0[1], v1[1], xs)

    v0 = CELL_2D_LUT[hash_2d(seed, x0, y1) & 255]
    v1 = CELL_2D_LUT[hash_2d(seed, x1, y1) & 255]
    lx1x = lerp(v0[0], v1[0], xs)
    ly1x = lerp(v0[1], v1[1], xs)

    return lerp(lx0x, lx1x, ys), lerp(ly0x, ly1x, ys)


def perturb_offset_3d(
    config: NoiseConfig, seed: int, frequency: float, x: float, y: float, z: float
):
    """Warp vector of one octave at an unscaled 3D coordinate. See ``perturb_offset_2d``."""
    xf = x * frequency
    yf = y * frequency
    zf = z * frequency
    x0 = fast_floor(xf)
    y0 = fast_floor(yf)
    z0 = fast_floor(zf)
    x1 = x0 + 1
    y1 = y0 + 1
    z1 = z0 + 1

    xs = interp_delta(config.interp, xf - x0)
    ys = interp_delta(config.interp, yf - y0)
    zs = interp_delta(config.interp, zf - z0)

    def _blend_x(yi, zi):
        v0 = CELL_3D_LUT[hash_3d(seed, x0, yi, zi) & 255]
        v1 = CELL_3D_LUT[hash_3d(seed, x1, yi, zi) & 255]
        return tuple(lerp(a, b, xs) for a, b in zip(v0, v1))

    def _blend_y(zi):
        low = _blend_x(y0, zi)
        high = _blend_x(y1, zi)
        return tuple(lerp(a, b, ys) for a, b in zip(low, high))

    near = _blend_y(z0)
    far = _blend_y(z1)
    return tuple(lerp(a, b, zs) for a, b in zip(near, far))


def gradient_perturb_2d(config: NoiseConfig, coord: MutableSequence[float]):
    """
    Single-octave domain warp of a 2D coordinate, in place.

    Uses ``config.seed``, ``config.frequency`` and
    ``config.gradient_perturb_amp``.
    """
    dx, dy = perturb_offset_2d(config, config.seed, config.frequency, coord[0], coord[1])
    amp = config.gradient_perturb_amp
    coord[0] += dx * amp
    coord[1] += dy * amp


def gradient_perturb_3d(config: NoiseConfig, coord: MutableSequence[float]):
    """Single-octave domain warp of a 3D coordinate, in place."""
    dx, dy, dz = perturb_offset_3d(
        config, config.seed, config.frequency, coord[0], coord[1], coord[2]
    )
    amp = config.gradient_perturb_amp
    coord[0] += dx * amp
    coord[1] += dy * amp
    coord[2] += dz * amp


def _fractal_octaves(config: NoiseConfig):
    """Yield ``(seed, amplitude, frequency)`` per warp octave."""
    seed = config.seed
    amp = config.gradient_perturb_amp * config.fractal_bound
    freq = config.frequency
    for octave in range(config.octaves):
        if octave:
            freq *= config.lacunarity
            amp *= config.gain
            seed = int32(seed + 1)
        yield seed, amp, freq


def gradient_perturb_fractal_2d(config: NoiseConfig, coord: MutableSequence[float]):
    """
    Fractal domain warp of a 2D coordinate, in place.

    Every octave samples the field at the coordinate as it was on entry,
    scaled by that octave's frequency, and adds its displacement to
    ``coord`` straight away. Amplitude starts at
    ``gradient_perturb_amp * fractal_bound``.
    """
    x, y = coord[0], coord[1]
    for seed, amp, freq in _fractal_octaves(config):
        dx, dy = perturb_offset_2d(config, seed, freq, x, y)
        coord[0] += dx * amp
        coord[1] += dy * amp


def gradient_perturb_fractal_3d(config: NoiseConfig, coord: MutableSequence[float]):
    """Fractal domain warp of a 3D coordinate, in place. See ``gradient_perturb_fractal_2d``."""
    x, y, z = coord[0], coord[1], coord[2]
    for seed, amp, freq in _fractal_octaves(config):
        dx, dy, dz = perturb_offset_3d(config, seed, freq, x, y, z)
        coord[0] += dx * amp
        coord[1] += dy * amp
        coord[2] += dz * amp
