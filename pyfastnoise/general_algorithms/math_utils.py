"""
Scalar integer helpers shared by every noise evaluator.

Python integers never overflow, so the 32-bit wraparound the lattice hash
depends on is applied explicitly with ``int32``. Flooring and rounding
reproduce the truncation-based behaviour the hash tables were tuned with.

Author: B.G.
"""

import math

import numpy as np

_MASK_32 = 0xFFFFFFFF
_SIGN_32 = 0x80000000
_INT32_MAX = 0x7FFFFFFF
_INT32_MIN = -0x80000000


def int32(value: int) -> int:
    """Wrap an arbitrary Python integer to a signed 32-bit value."""
    value &= _MASK_32
    return value - 0x100000000 if value & _SIGN_32 else value


def truncate(f: float) -> int:
    """
    Truncate toward zero into the signed 32-bit range.

    NaN maps to 0 and out-of-range values saturate, so non-finite
    coordinates reach the fractional offsets and come out as NaN or
    infinity instead of raising.
    """
    if math.isnan(f):
        return 0
    if f >= _INT32_MAX:
        return _INT32_MAX
    if f <= _INT32_MIN:
        return _INT32_MIN
    return int(f)


def fast_floor(f: float) -> int:
    """
    Floor via truncation.

    Negative integral inputs land one cell lower (``fast_floor(-1.0) == -2``).
    Interpolated families stay continuous because the fractional offset
    then reads 1.0 instead of 0.0. NaN floors to -1.
    """
    return truncate(f) if f >= 0 else int32(truncate(f) - 1)


def fast_round(f: float) -> int:
    """Round half away from zero."""
    return truncate(f + 0.5) if f >= 0 else truncate(f - 0.5)


def float_cast_to_int(f: float) -> int:
    """
    Reinterpret ``f`` as IEEE-754 single precision bits and fold the high
    half onto the low half.

    Args:
        f: Coordinate to reinterpret

    Returns:
        int: Signed 32-bit integer suitable for lattice hashing
    """
    i = int(np.array(f, dtype=np.float32).view(np.int32))
    return i ^ (i >> 16)
