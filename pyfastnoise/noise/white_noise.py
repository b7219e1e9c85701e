"""
White noise for PyFastNoise.

Spatially uncorrelated values: the coordinate itself is hashed, with no
lattice and no interpolation. Float coordinates are first reinterpreted
bitwise (``float_cast_to_int``) so nearby but distinct floats still land
on unrelated hashes; the ``*_int`` variants hash integer coordinates
directly.

Author: B.G.
"""

from ..general_algorithms.hashing import val_coord_2d, val_coord_3d, val_coord_4d
from ..general_algorithms.math_utils import float_cast_to_int


def white_noise_2d(seed: int, x: float, y: float) -> float:
    """
    White noise at a float coordinate.

    Args:
        seed: Noise seed
        x, y: Coordinates (bit-reinterpreted, not floored)

    Returns:
        float: Value in [-1, 1)
    """
    return val_coord_2d(seed, float_cast_to_int(x), float_cast_to_int(y))


def white_noise_3d(seed: int, x: float, y: float, z: float) -> float:
    return val_coord_3d(seed, float_cast_to_int(x), float_cast_to_int(y), float_cast_to_int(z))


def white_noise_4d(seed: int, x: float, y: float, z: float, w: float) -> float:
    return val_coord_4d(
        seed,
        float_cast_to_int(x),
        float_cast_to_int(y),
        float_cast_to_int(z),
        float_cast_to_int(w),
    )


def white_noise_int_2d(seed: int, x: int, y: int) -> float:
    """White noise at an integer coordinate, no bit reinterpretation."""
    return val_coord_2d(seed, x, y)


def white_noise_int_3d(seed: int, x: int, y: int, z: int) -> float:
    return val_coord_3d(seed, x, y, z)


def white_noise_int_4d(seed: int, x: int, y: int, z: int, w: int) -> float:
    return val_coord_4d(seed, x, y, z, w)
