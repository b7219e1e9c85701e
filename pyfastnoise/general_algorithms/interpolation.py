"""
Interpolation kernels shared by the lattice noise families.

None of the kernels clamp ``t``; values outside [0, 1] extrapolate.

Author: B.G.
"""

from ..enums import InterpolationKernel


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation between a and b by factor t"""
    return a + t * (b - a)


def interp_hermite(t: float) -> float:
    """Cubic smoothstep: 3t^2 - 2t^3"""
    return t * t * (3 - 2 * t)


def interp_quintic(t: float) -> float:
    """Quintic smoothstep: 6t^5 - 15t^4 + 10t^3"""
    return t * t * t * (t * (t * 6 - 15) + 10)


def cubic_lerp(a: float, b: float, c: float, d: float, t: float) -> float:
    """
    Four-point cubic interpolation between b and c.

    a and d are the outer neighbours and only shape the tangents. At t=0
    the result is b, at t=1 it is c.
    """
    p = (d - c) - (a - b)
    tt = t * t
    return t * tt * p + tt * ((a - b) - p) + t * (c - a) + b


def interp_delta(kernel: InterpolationKernel, t: float) -> float:
    """
    Apply the selected kernel to a fractional lattice offset.

    Args:
        kernel: InterpolationKernel member
        t: Fractional offset, normally in [0, 1]

    Returns:
        float: Blend weight
    """
    if kernel is InterpolationKernel.QUINTIC:
        return interp_quintic(t)
    if kernel is InterpolationKernel.HERMITE:
        return interp_hermite(t)
    return t
