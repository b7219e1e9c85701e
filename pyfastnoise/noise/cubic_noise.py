"""
Cubic noise for PyFastNoise.

Value noise sampled on a 4x4 (2D) or 4x4x4 (3D) stencil around the
point and blended with nested four-point cubic interpolation, one axis at
a time. The cubic blend overshoots its inputs, so the result is scaled by
``1 / 1.5^dimension``.

Author: B.G.
"""

from .. import constants as cte
from ..general_algorithms.hashing import val_coord_2d, val_coord_3d
from ..general_algorithms.interpolation import cubic_lerp
from ..general_algorithms.math_utils import fast_floor


def single_cubic_2d(seed: int, x: float, y: float) -> float:
    """
    Single-octave 2D cubic noise at an already frequency-scaled point.

    Args:
        seed: Octave seed
        x, y: Scaled coordinates

    Returns:
        float: Noise value in [-1, 1]
    """
    x1 = fast_floor(x)
    y1 = fast_floor(y)
    xs = x - x1
    ys = y - y1

    xi = (x1 - 1, x1, x1 + 1, x1 + 2)
    rows = [
        cubic_lerp(*(val_coord_2d(seed, cx, cy) for cx in xi), xs)
        for cy in (y1 - 1, y1, y1 + 1, y1 + 2)
    ]
    return cubic_lerp(*rows, ys) * cte.CUBIC_2D_BOUNDING


def single_cubic_3d(seed: int, x: float, y: float, z: float) -> float:
    """Single-octave 3D cubic noise. See ``single_cubic_2d``."""
    x1 = fast_floor(x)
    y1 = fast_floor(y)
    z1 = fast_floor(z)
    xs = x - x1
    ys = y - y1
    zs = z - z1

    xi = (x1 - 1, x1, x1 + 1, x1 + 2)
    yi = (y1 - 1, y1, y1 + 1, y1 + 2)
    slices = []
    for cz in (z1 - 1, z1, z1 + 1, z1 + 2):
        rows = [
            cubic_lerp(*(val_coord_3d(seed, cx, cy, cz) for cx in xi), xs)
            for cy in yi
        ]
        slices.append(cubic_lerp(*rows, ys))
    return cubic_lerp(*slices, zs) * cte.CUBIC_3D_BOUNDING
