"""
Perlin (gradient) noise for PyFastNoise.

Each lattice corner carries a gradient vector picked from a fixed table by
the corner hash. A sample takes the dot product of every corner gradient
with the offset from that corner, then blends the dot products with the
selected interpolation kernel. Values vanish on lattice points.

Author: B.G.
"""

from ..enums import InterpolationKernel
from ..general_algorithms.hashing import grad_coord_2d, grad_coord_3d
from ..general_algorithms.interpolation import interp_delta, lerp
from ..general_algorithms.math_utils import fast_floor


def single_perlin_2d(
    seed: int, x: float, y: float, interp: InterpolationKernel = InterpolationKernel.QUINTIC
) -> float:
    """
    Single-octave 2D Perlin noise at an already frequency-scaled point.

    Args:
        seed: Octave seed
        x, y: Scaled coordinates
        interp: Interpolation kernel

    Returns:
        float: Noise value in approximately [-1, 1]
    """
    # Find unit grid cell containing point
    x0 = fast_floor(x)
    y0 = fast_floor(y)
    x1 = x0 + 1
    y1 = y0 + 1

    xs = interp_delta(interp, x - x0)
    ys = interp_delta(interp, y - y0)

    # Offsets from the low and high corners
    xd0 = x - x0
    yd0 = y - y0
    xd1 = xd0 - 1
    yd1 = yd0 - 1

    xf0 = lerp(grad_coord_2d(seed, x0, y0, xd0, yd0), grad_coord_2d(seed, x1, y0, xd1, yd0), xs)
    xf1 = lerp(grad_coord_2d(seed, x0, y1, xd0, yd1), grad_coord_2d(seed, x1, y1, xd1, yd1), xs)
    return lerp(xf0, xf1, ys)


def single_perlin_3d(
    seed: int,
    x: float,
    y: float,
    z: float,
    interp: InterpolationKernel = InterpolationKernel.QUINTIC,
) -> float:
    """Single-octave 3D Perlin noise. See ``single_perlin_2d``."""
    x0 = fast_floor(x)
    y0 = fast_floor(y)
    z0 = fast_floor(z)
    x1 = x0 + 1
    y1 = y0 + 1
    z1 = z0 + 1

    xs = interp_delta(interp, x - x0)
    ys = interp_delta(interp, y - y0)
    zs = interp_delta(interp, z - z0)

    xd0 = x - x0
    yd0 = y - y0
    zd0 = z - z0
    xd1 = xd0 - 1
    yd1 = yd0 - 1
    zd1 = zd0 - 1

    xf00 = lerp(
        grad_coord_3d(seed, x0, y0, z0, xd0, yd0, zd0),
        grad_coord_3d(seed, x1, y0, z0, xd1, yd0, zd0),
        xs,
    )
    xf10 = lerp(
        grad_coord_3d(seed, x0, y1, z0, xd0, yd1, zd0),
        grad_coord_3d(seed, x1, y1, z0, xd1, yd1, zd0),
        xs,
    )
    xf01 = lerp(
        grad_coord_3d(seed, x0, y0, z1, xd0, yd0, zd1),
        grad_coord_3d(seed, x1, y0, z1, xd1, yd0, zd1),
        xs,
    )
    xf11 = lerp(
        grad_coord_3d(seed, x0, y1, z1, xd0, yd1, zd1),
        grad_coord_3d(seed, x1, y1, z1, xd1, yd1, zd1),
        xs,
    )

    yf0 = lerp(xf00, xf10, ys)
    yf1 = lerp(xf01, xf11, ys)
    return lerp(yf0, yf1, zs)
