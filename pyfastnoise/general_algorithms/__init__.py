"""
Leaf algorithms for PyFastNoise.

- math_utils: 32-bit wrapping, truncating floor/round, float bit casts
- hashing: Lattice hashes, lattice values and gradient dot products
- interpolation: Linear, Hermite, quintic and four-point cubic kernels
- tables: Gradient, cell jitter and 4D simplex lookup tables

Author: B.G.
"""

from . import hashing, interpolation, math_utils, tables
from .hashing import (
    grad_coord_2d,
    grad_coord_3d,
    grad_coord_4d,
    hash_2d,
    hash_3d,
    hash_4d,
    val_coord_2d,
    val_coord_3d,
    val_coord_4d,
)
from .interpolation import cubic_lerp, interp_delta, interp_hermite, interp_quintic, lerp
from .math_utils import fast_floor, fast_round, float_cast_to_int, int32, truncate

__all__ = [
    "hashing", "interpolation", "math_utils", "tables",
    "hash_2d", "hash_3d", "hash_4d",
    "val_coord_2d", "val_coord_3d", "val_coord_4d",
    "grad_coord_2d", "grad_coord_3d", "grad_coord_4d",
    "lerp", "interp_hermite", "interp_quintic", "cubic_lerp", "interp_delta",
    "int32", "truncate", "fast_floor", "fast_round", "float_cast_to_int",
]
