"""
Value noise for PyFastNoise.

Each lattice corner carries a pseudo-random scalar (``val_coord_*``); a
sample blends the 4 (2D) or 8 (3D) surrounding corners with the selected
interpolation kernel. Output lies in [-1, 1].

Author: B.G.
"""

from ..enums import InterpolationKernel
from ..general_algorithms.hashing import val_coord_2d, val_coord_3d
from ..general_algorithms.interpolation import interp_delta, lerp
from ..general_algorithms.math_utils import fast_floor


def single_value_2d(
    seed: int, x: float, y: float, interp: InterpolationKernel = InterpolationKernel.QUINTIC
) -> float:
    """
    Single-octave 2D value noise at an already frequency-scaled point.

    Args:
        seed: Octave seed
        x, y: Scaled coordinates
        interp: Interpolation kernel

    Returns:
        float: Noise value in [-1, 1]
    """
    x0 = fast_floor(x)
    y0 = fast_floor(y)
    x1 = x0 + 1
    y1 = y0 + 1

    xs = interp_delta(interp, x - x0)
    ys = interp_delta(interp, y - y0)

    xf0 = lerp(val_coord_2d(seed, x0, y0), val_coord_2d(seed, x1, y0), xs)
    xf1 = lerp(val_coord_2d(seed, x0, y1), val_coord_2d(seed, x1, y1), xs)
    return lerp(xf0, xf1, ys)


def single_value_3d(
    seed: int,
    x: float,
    y: float,
    z: float,
    interp: InterpolationKernel = InterpolationKernel.QUINTIC,
) -> float:
    """Single-octave 3D value noise. See ``single_value_2d``."""
    x0 = fast_floor(x)
    y0 = fast_floor(y)
    z0 = fast_floor(z)
    x1 = x0 + 1
    y1 = y0 + 1
    z1 = z0 + 1

    xs = interp_delta(interp, x - x0)
    ys = interp_delta(interp, y - y0)
    zs = interp_delta(interp, z - z0)

    xf00 = lerp(val_coord_3d(seed, x0, y0, z0), val_coord_3d(seed, x1, y0, z0), xs)
    xf10 = lerp(val_coord_3d(seed, x0, y1, z0), val_coord_3d(seed, x1, y1, z0), xs)
    xf01 = lerp(val_coord_3d(seed, x0, y0, z1), val_coord_3d(seed, x1, y0, z1), xs)
    xf11 = lerp(val_coord_3d(seed, x0, y1, z1), val_coord_3d(seed, x1, y1, z1), xs)

    yf0 = lerp(xf00, xf10, ys)
    yf1 = lerp(xf01, xf11, ys)
    return lerp(yf0, yf1, zs)
