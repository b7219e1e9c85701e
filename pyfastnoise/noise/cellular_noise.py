"""
Cellular (Worley) noise for PyFastNoise.

Every lattice cell owns one feature point, jittered from the cell corner by
a ``CELL_2D``/``CELL_3D`` offset picked by the cell hash. A sample scans the
3x3 (2D) or 3x3x3 (3D) cells around the rounded coordinate, always all of
them, and keeps the nearest distance (and for the two-edge modes the
second nearest).

Return modes:

- CELL_VALUE: ``val_coord`` of the nearest cell, hashed with seed 0
- NOISE_LOOKUP: another NoiseConfig sampled at the nearest feature point
- DISTANCE: ``distance - 1``
- DISTANCE2*: arithmetic combinations of ``distance`` and ``distance2``

Author: B.G.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .. import constants as cte
from ..enums import TWO_EDGE_RETURN_MODES, CellularDistanceMetric, CellularReturnMode
from ..general_algorithms.hashing import hash_2d, hash_3d, val_coord_2d, val_coord_3d
from ..general_algorithms.math_utils import fast_round
from ..general_algorithms.tables import CELL_2D_LUT, CELL_3D_LUT

if TYPE_CHECKING:
    from .config import NoiseConfig


def _metric_2d(metric: CellularDistanceMetric, dx: float, dy: float) -> float:
    if metric is CellularDistanceMetric.EUCLIDEAN:
        return dx * dx + dy * dy
    if metric is CellularDistanceMetric.MANHATTAN:
        return abs(dx) + abs(dy)
    return abs(dx) + abs(dy) + (dx * dx + dy * dy)


def _metric_3d(metric: CellularDistanceMetric, dx: float, dy: float, dz: float) -> float:
    if metric is CellularDistanceMetric.EUCLIDEAN:
        return dx * dx + dy * dy + dz * dz
    if metric is CellularDistanceMetric.MANHATTAN:
        return abs(dx) + abs(dy) + abs(dz)
    return abs(dx) + abs(dy) + abs(dz) + (dx * dx + dy * dy + dz * dz)


def _combine_two_edge(mode: CellularReturnMode, distance: float, distance2: float) -> float:
    if mode is CellularReturnMode.DISTANCE2:
        return distance2 - 1
    if mode is CellularReturnMode.DISTANCE2_ADD:
        return distance2 + distance - 1
    if mode is CellularReturnMode.DISTANCE2_SUB:
        return distance2 - distance - 1
    if mode is CellularReturnMode.DISTANCE2_MUL:
        return distance2 * distance - 1
    if mode is CellularReturnMode.DISTANCE2_DIV:
        return distance / distance2 - 1
    return 0.0


def _missing_lookup_error() -> RuntimeError:
    return RuntimeError(
        "cellular_return_type is NOISE_LOOKUP but no cellular_noise_lookup config is set"
    )


# ----------------------------------------------------------------------
# 2D
# ----------------------------------------------------------------------


def cellular_nearest_2d(config: NoiseConfig, x: float, y: float):
    """
    Nearest feature point search around a scaled 2D coordinate.

    Args:
        config: NoiseConfig providing seed and distance metric
        x, y: Scaled coordinates

    Returns:
        tuple: ``(distance, xc, yc)`` with the lattice cell owning the
        nearest feature point
    """
    seed = config.seed
    metric = config.cellular_distance_function
    xr = fast_round(x)
    yr = fast_round(y)

    distance = cte.CELLULAR_MAX_DISTANCE
    xc = yc = 0
    for xi in range(xr - 1, xr + 2):
        for yi in range(yr - 1, yr + 2):
            vx, vy = CELL_2D_LUT[hash_2d(seed, xi, yi) & 255]
            new_distance = _metric_2d(metric, xi - x + vx, yi - y + vy)
            if new_distance < distance:
                distance = new_distance
                xc, yc = xi, yi
    return distance, xc, yc


def cellular_distances_2d(config: NoiseConfig, x: float, y: float):
    """
    Nearest and second nearest feature distances around a scaled 2D coordinate.

    Returns:
        tuple: ``(distance, distance2)`` with ``distance <= distance2``
    """
    seed = config.seed
    metric = config.cellular_distance_function
    xr = fast_round(x)
    yr = fast_round(y)

    distance = distance2 = cte.CELLULAR_MAX_DISTANCE
    for xi in range(xr - 1, xr + 2):
        for yi in range(yr - 1, yr + 2):
            vx, vy = CELL_2D_LUT[hash_2d(seed, xi, yi) & 255]
            new_distance = _metric_2d(metric, xi - x + vx, yi - y + vy)
            distance2 = max(min(distance2, new_distance), distance)
            distance = min(distance, new_distance)
    return distance, distance2


def single_cellular_2d(config: NoiseConfig, x: float, y: float) -> float:
    """
    Cellular noise at a scaled 2D coordinate, shaped by the return mode.

    Raises:
        RuntimeError: NOISE_LOOKUP mode without a lookup config
    """
    mode = config.cellular_return_type
    if mode not in TWO_EDGE_RETURN_MODES:
        distance, xc, yc = cellular_nearest_2d(config, x, y)
        if mode is CellularReturnMode.CELL_VALUE:
            # Seed 0, not config.seed: cell identity ignores the noise seed
            return val_coord_2d(0, xc, yc)
        if mode is CellularReturnMode.NOISE_LOOKUP:
            lookup = config.cellular_noise_lookup
            if lookup is None:
                raise _missing_lookup_error()
            # Deferred: dispatch imports this module
            from .dispatch import evaluate_2d

            vx, vy = CELL_2D_LUT[hash_2d(config.seed, xc, yc) & 255]
            return evaluate_2d(lookup, xc + vx, yc + vy)
        return distance - 1

    distance, distance2 = cellular_distances_2d(config, x, y)
    return _combine_two_edge(mode, distance, distance2)


# ----------------------------------------------------------------------
# 3D
# ----------------------------------------------------------------------


def cellular_nearest_3d(config: NoiseConfig, x: float, y: float, z: float):
    """Nearest feature point search in 3D. Returns ``(distance, xc, yc, zc)``."""
    seed = config.seed
    metric = config.cellular_distance_function
    xr = fast_round(x)
    yr = fast_round(y)
    zr = fast_round(z)

    distance = cte.CELLULAR_MAX_DISTANCE
    xc = yc = zc = 0
    for xi in range(xr - 1, xr + 2):
        for yi in range(yr - 1, yr + 2):
            for zi in range(zr - 1, zr + 2):
                vx, vy, vz = CELL_3D_LUT[hash_3d(seed, xi, yi, zi) & 255]
                new_distance = _metric_3d(metric, xi - x + vx, yi - y + vy, zi - z + vz)
                if new_distance < distance:
                    distance = new_distance
                    xc, yc, zc = xi, yi, zi
    return distance, xc, yc, zc


def cellular_distances_3d(config: NoiseConfig, x: float, y: float, z: float):
    """Nearest and second nearest feature distances in 3D."""
    seed = config.seed
    metric = config.cellular_distance_function
    xr = fast_round(x)
    yr = fast_round(y)
    zr = fast_round(z)

    distance = distance2 = cte.CELLULAR_MAX_DISTANCE
    for xi in range(xr - 1, xr + 2):
        for yi in range(yr - 1, yr + 2):
            for zi in range(zr - 1, zr + 2):
                vx, vy, vz = CELL_3D_LUT[hash_3d(seed, xi, yi, zi) & 255]
                new_distance = _metric_3d(metric, xi - x + vx, yi - y + vy, zi - z + vz)
                distance2 = max(min(distance2, new_distance), distance)
                distance = min(distance, new_distance)
    return distance, distance2


def single_cellular_3d(config: NoiseConfig, x: float, y: float, z: float) -> float:
    """Cellular noise at a scaled 3D coordinate. See ``single_cellular_2d``."""
    mode = config.cellular_return_type
    if mode not in TWO_EDGE_RETURN_MODES:
        distance, xc, yc, zc = cellular_nearest_3d(config, x, y, z)
        if mode is CellularReturnMode.CELL_VALUE:
            return val_coord_3d(0, xc, yc, zc)
        if mode is CellularReturnMode.NOISE_LOOKUP:
            lookup = config.cellular_noise_lookup
            if lookup is None:
                raise _missing_lookup_error()
            # Deferred: dispatch imports this module
            from .dispatch import evaluate_3d

            vx, vy, vz = CELL_3D_LUT[hash_3d(config.seed, xc, yc, zc) & 255]
            return evaluate_3d(lookup, xc + vx, yc + vy, zc + vz)
        return distance - 1

    distance, distance2 = cellular_distances_3d(config, x, y, z)
    return _combine_two_edge(mode, distance, distance2)
