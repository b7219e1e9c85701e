"""
Simplex noise for PyFastNoise.

The input is skewed onto a lattice of simplices (triangles in 2D,
tetrahedra in 3D, pentachora in 4D). Each simplex vertex contributes
``(r^2 - d^2)^4 * (gradient . offset)`` when inside radius ``r``; the
contributions are summed and scaled to about [-1, 1].

Vertex traversal order is decided from pairwise comparisons of the
unskewed offsets; in 4D a 6-bit comparison code indexes ``SIMPLEX_4D``.

Author: B.G.
"""

from .. import constants as cte
from ..general_algorithms.hashing import grad_coord_2d, grad_coord_3d, grad_coord_4d
from ..general_algorithms.math_utils import fast_floor
from ..general_algorithms.tables import SIMPLEX_4D_LUT


def single_simplex_2d(seed: int, x: float, y: float) -> float:
    """
    Single-octave 2D simplex noise at an already frequency-scaled point.

    Args:
        seed: Octave seed
        x, y: Scaled coordinates

    Returns:
        float: Noise value in approximately [-1, 1]
    """
    t = (x + y) * cte.F2
    i = fast_floor(x + t)
    j = fast_floor(y + t)

    t = (i + j) * cte.G2
    x0 = x - (i - t)
    y0 = y - (j - t)

    # Lower or upper triangle of the skewed cell
    if x0 > y0:
        i1, j1 = 1, 0
    else:
        i1, j1 = 0, 1

    x1 = x0 - i1 + cte.G2
    y1 = y0 - j1 + cte.G2
    x2 = x0 - 1 + cte.F2
    y2 = y0 - 1 + cte.F2

    r2 = cte.SIMPLEX_2D_RADIUS

    t = r2 - x0 * x0 - y0 * y0
    if t < 0:
        n0 = 0.0
    else:
        t *= t
        n0 = t * t * grad_coord_2d(seed, i, j, x0, y0)

    t = r2 - x1 * x1 - y1 * y1
    if t < 0:
        n1 = 0.0
    else:
        t *= t
        n1 = t * t * grad_coord_2d(seed, i + i1, j + j1, x1, y1)

    t = r2 - x2 * x2 - y2 * y2
    if t < 0:
        n2 = 0.0
    else:
        t *= t
        n2 = t * t * grad_coord_2d(seed, i + 1, j + 1, x2, y2)

    return cte.SIMPLEX_2D_SCALE * (n0 + n1 + n2)


def single_simplex_3d(seed: int, x: float, y: float, z: float) -> float:
    """Single-octave 3D simplex noise. See ``single_simplex_2d``."""
    t = (x + y + z) * cte.F3
    i = fast_floor(x + t)
    j = fast_floor(y + t)
    k = fast_floor(z + t)

    t = (i + j + k) * cte.G3
    x0 = x - (i - t)
    y0 = y - (j - t)
    z0 = z - (k - t)

    # Six orderings of (x0, y0, z0) pick the two intermediate corners
    if x0 >= y0:
        if y0 >= z0:
            i1, j1, k1, i2, j2, k2 = 1, 0, 0, 1, 1, 0
        elif x0 >= z0:
            i1, j1, k1, i2, j2, k2 = 1, 0, 0, 1, 0, 1
        else:
            i1, j1, k1, i2, j2, k2 = 0, 0, 1, 1, 0, 1
    else:
        if y0 < z0:
            i1, j1, k1, i2, j2, k2 = 0, 0, 1, 0, 1, 1
        elif x0 < z0:
            i1, j1, k1, i2, j2, k2 = 0, 1, 0, 0, 1, 1
        else:
            i1, j1, k1, i2, j2, k2 = 0, 1, 0, 1, 1, 0

    x1 = x0 - i1 + cte.G3
    y1 = y0 - j1 + cte.G3
    z1 = z0 - k1 + cte.G3
    x2 = x0 - i2 + cte.F3
    y2 = y0 - j2 + cte.F3
    z2 = z0 - k2 + cte.F3
    x3 = x0 + cte.G33
    y3 = y0 + cte.G33
    z3 = z0 + cte.G33

    r2 = cte.SIMPLEX_3D_RADIUS

    t = r2 - x0 * x0 - y0 * y0 - z0 * z0
    if t < 0:
        n0 = 0.0
    else:
        t *= t
        n0 = t * t * grad_coord_3d(seed, i, j, k, x0, y0, z0)

    t = r2 - x1 * x1 - y1 * y1 - z1 * z1
    if t < 0:
        n1 = 0.0
    else:
        t *= t
        n1 = t * t * grad_coord_3d(seed, i + i1, j + j1, k + k1, x1, y1, z1)

    t = r2 - x2 * x2 - y2 * y2 - z2 * z2
    if t < 0:
        n2 = 0.0
    else:
        t *= t
        n2 = t * t * grad_coord_3d(seed, i + i2, j + j2, k + k2, x2, y2, z2)

    t = r2 - x3 * x3 - y3 * y3 - z3 * z3
    if t < 0:
        n3 = 0.0
    else:
        t *= t
        n3 = t * t * grad_coord_3d(seed, i + 1, j + 1, k + 1, x3, y3, z3)

    return cte.SIMPLEX_3D_SCALE * (n0 + n1 + n2 + n3)


def simplex_4d_offsets(x0: float, y0: float, z0: float, w0: float):
    """
    Decode the three intermediate lattice offsets of a 4D simplex.

    Args:
        x0, y0, z0, w0: Unskewed offsets from the base corner

    Returns:
        tuple: Three ``(i, j, k, l)`` unit offsets, visited in order
    """
    c = 32 if x0 > y0 else 0
    c += 16 if x0 > z0 else 0
    c += 8 if y0 > z0 else 0
    c += 4 if x0 > w0 else 0
    c += 2 if y0 > w0 else 0
    c += 1 if z0 > w0 else 0
    c <<= 2

    ranks = SIMPLEX_4D_LUT[c:c + 4]
    return tuple(
        tuple(1 if rank >= threshold else 0 for rank in ranks)
        for threshold in (3, 2, 1)
    )


def single_simplex_4d(seed: int, x: float, y: float, z: float, w: float) -> float:
    """Single-octave 4D simplex noise. See ``single_simplex_2d``."""
    t = (x + y + z + w) * cte.F4
    i = fast_floor(x + t)
    j = fast_floor(y + t)
    k = fast_floor(z + t)
    l = fast_floor(w + t)  # noqa: E741

    t = (i + j + k + l) * cte.G4
    x0 = x - (i - t)
    y0 = y - (j - t)
    z0 = z - (k - t)
    w0 = w - (l - t)

    (i1, j1, k1, l1), (i2, j2, k2, l2), (i3, j3, k3, l3) = simplex_4d_offsets(x0, y0, z0, w0)

    g4 = cte.G4
    x1 = x0 - i1 + g4
    y1 = y0 - j1 + g4
    z1 = z0 - k1 + g4
    w1 = w0 - l1 + g4
    x2 = x0 - i2 + 2 * g4
    y2 = y0 - j2 + 2 * g4
    z2 = z0 - k2 + 2 * g4
    w2 = w0 - l2 + 2 * g4
    x3 = x0 - i3 + 3 * g4
    y3 = y0 - j3 + 3 * g4
    z3 = z0 - k3 + 3 * g4
    w3 = w0 - l3 + 3 * g4
    x4 = x0 - 1 + 4 * g4
    y4 = y0 - 1 + 4 * g4
    z4 = z0 - 1 + 4 * g4
    w4 = w0 - 1 + 4 * g4

    r2 = cte.SIMPLEX_4D_RADIUS
    corners = (
        (i, j, k, l, x0, y0, z0, w0),
        (i + i1, j + j1, k + k1, l + l1, x1, y1, z1, w1),
        (i + i2, j + j2, k + k2, l + l2, x2, y2, z2, w2),
        (i + i3, j + j3, k + k3, l + l3, x3, y3, z3, w3),
        (i + 1, j + 1, k + 1, l + 1, x4, y4, z4, w4),
    )

    total = 0.0
    for ci, cj, ck, cl, xd, yd, zd, wd in corners:
        t = r2 - xd * xd - yd * yd - zd * zd - wd * wd
        if t < 0:
            continue
        t *= t
        total += t * t * grad_coord_4d(seed, ci, cj, ck, cl, xd, yd, zd, wd)

    return cte.SIMPLEX_4D_SCALE * total
