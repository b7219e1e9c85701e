"""
Integer lattice hashing for PyFastNoise.

Every noise family anchors its randomness on integer lattice points. A
lattice point is folded into one 32-bit integer by XOR-ing the seed with
each axis coordinate times a per-axis prime, then mixed with
``n * n * n * 60493`` (wrapping at 32 bits). The mixed value either feeds
a gradient/cell table lookup (``hash_*``) or is scaled to a pseudo-random
scalar in about [-1, 1] (``val_coord_*``).

All functions are pure and total: any integer seed or coordinate is valid.

Author: B.G.
"""

from .. import constants as cte
from .math_utils import int32
from .tables import GRAD_2D_LUT, GRAD_3D_LUT


def _mix(n: int) -> int:
    """Cube-and-multiply mixing step, wrapped to 32 bits."""
    return int32(n * n * n * cte.HASH_MULTIPLIER)


def _fold(n: int) -> int:
    """Final avalanche, ``(n >> 13) ^ n`` on the signed 32-bit value."""
    return (n >> 13) ^ n


def hash_2d(seed: int, x: int, y: int) -> int:
    """
    Hash a 2D lattice point.

    Args:
        seed: Noise seed (any integer, wrapped to 32 bits)
        x, y: Lattice coordinates

    Returns:
        int: Signed 32-bit hash, used as ``hash & mask`` for table indexing
    """
    n = int32(seed ^ (cte.X_PRIME * x) ^ (cte.Y_PRIME * y))
    return _fold(_mix(n))


def hash_3d(seed: int, x: int, y: int, z: int) -> int:
    """Hash a 3D lattice point. See ``hash_2d``."""
    n = int32(seed ^ (cte.X_PRIME * x) ^ (cte.Y_PRIME * y) ^ (cte.Z_PRIME * z))
    return _fold(_mix(n))


def hash_4d(seed: int, x: int, y: int, z: int, w: int) -> int:
    """Hash a 4D lattice point. See ``hash_2d``."""
    n = int32(
        seed
        ^ (cte.X_PRIME * x)
        ^ (cte.Y_PRIME * y)
        ^ (cte.Z_PRIME * z)
        ^ (cte.W_PRIME * w)
    )
    return _fold(_mix(n))


def val_coord_2d(seed: int, x: int, y: int) -> float:
    """
    Pseudo-random scalar attached to a 2D lattice point.

    Args:
        seed: Noise seed
        x, y: Lattice coordinates

    Returns:
        float: Value in [-1, 1)
    """
    n = int32(seed ^ (cte.X_PRIME * x) ^ (cte.Y_PRIME * y))
    return _mix(n) / cte.VALUE_SCALE


def val_coord_3d(seed: int, x: int, y: int, z: int) -> float:
    """Pseudo-random scalar attached to a 3D lattice point."""
    n = int32(seed ^ (cte.X_PRIME * x) ^ (cte.Y_PRIME * y) ^ (cte.Z_PRIME * z))
    return _mix(n) / cte.VALUE_SCALE


def val_coord_4d(seed: int, x: int, y: int, z: int, w: int) -> float:
    """Pseudo-random scalar attached to a 4D lattice point."""
    n = int32(
        seed
        ^ (cte.X_PRIME * x)
        ^ (cte.Y_PRIME * y)
        ^ (cte.Z_PRIME * z)
        ^ (cte.W_PRIME * w)
    )
    return _mix(n) / cte.VALUE_SCALE


# ----------------------------------------------------------------------
# Gradient dot products
# ----------------------------------------------------------------------


def grad_coord_2d(seed: int, x: int, y: int, xd: float, yd: float) -> float:
    """Dot product of the lattice gradient at (x, y) with the offset (xd, yd)."""
    gx, gy = GRAD_2D_LUT[hash_2d(seed, x, y) & 7]
    return xd * gx + yd * gy


def grad_coord_3d(
    seed: int, x: int, y: int, z: int, xd: float, yd: float, zd: float
) -> float:
    """Dot product of the lattice gradient at (x, y, z) with the offset."""
    gx, gy, gz = GRAD_3D_LUT[hash_3d(seed, x, y, z) & 15]
    return xd * gx + yd * gy + zd * gz


def grad_coord_4d(
    seed: int,
    x: int,
    y: int,
    z: int,
    w: int,
    xd: float,
    yd: float,
    zd: float,
    wd: float,
) -> float:
    """
    Dot product with a 4D gradient decoded from 5 hash bits.

    No table is involved: bits 3-4 select which three axes carry the
    gradient, bits 0-2 select their signs. The resulting 32 gradients
    are the edge midpoints of the 4D hypercube.
    """
    h = hash_4d(seed, x, y, z, w) & 31
    rotation = h >> 3
    if rotation == 1:
        a, b, c = wd, xd, yd
    elif rotation == 2:
        a, b, c = zd, wd, xd
    else:
        a, b, c = yd, zd, wd
    return (a if h & 4 else -a) + (b if h & 2 else -b) + (c if h & 1 else -c)
