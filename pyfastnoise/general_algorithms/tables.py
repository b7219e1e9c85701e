"""
Gradient and cell lookup tables for PyFastNoise.

All tables are indexed by ``hash & (size - 1)``:

- ``GRAD_2D``: 8 gradients (4 diagonals, 4 axes), mask 7
- ``GRAD_3D``: 16 diagonal gradients, mask 15
- ``CELL_2D`` / ``CELL_3D``: 256 jitter offsets of radius 0.45, mask 255
- ``SIMPLEX_4D``: 256-entry traversal table for the 4D simplex

The numpy arrays are the canonical, read-only tables. The ``*_LUT`` tuples
mirror them as plain Python floats for the scalar hot path.

Author: B.G.
"""

import numpy as np

from .. import constants as cte


def _freeze(table: np.ndarray) -> np.ndarray:
    table.setflags(write=False)
    return table


# 8-direction 2D gradient vectors
GRAD_2D = _freeze(np.array([
    [-1, -1], [1, -1], [-1, 1], [1, 1],  # Diagonal gradients
    [0, -1], [-1, 0], [0, 1], [1, 0],    # Axis-aligned gradients
], dtype=np.float64))

# 16 cube-diagonal 3D gradients; (1, 1, 1) appears four times and
# (-1, -1, -1) never, both kept as-is since every 3D sample depends on them
GRAD_3D = _freeze(np.array([
    [1, 1, 1], [-1, 1, 1], [1, -1, 1], [-1, -1, 1],
    [1, 1, 1], [-1, 1, 1], [1, 1, -1], [-1, 1, -1],
    [1, 1, 1], [1, -1, 1], [1, 1, -1], [1, -1, -1],
    [1, 1, 1], [1, -1, 1], [-1, 1, 1], [1, -1, -1],
], dtype=np.float64))


def build_cell_2d(size: int = 256, radius: float = cte.CELLULAR_JITTER) -> np.ndarray:
    """
    Build 2D cell jitter offsets on a golden-angle sequence.

    Consecutive entries are spread by the golden angle so any run of
    indices covers the circle evenly.

    Args:
        size: Number of offsets
        radius: Length of every offset

    Returns:
        numpy.ndarray: (size, 2) offsets
    """
    golden_angle = np.pi * (3.0 - np.sqrt(5.0))
    theta = np.arange(size, dtype=np.float64) * golden_angle
    return np.stack([np.cos(theta), np.sin(theta)], axis=1) * radius


def build_cell_3d(size: int = 256, radius: float = cte.CELLULAR_JITTER) -> np.ndarray:
    """
    Build 3D cell jitter offsets on a Fibonacci sphere.

    Args:
        size: Number of offsets
        radius: Length of every offset

    Returns:
        numpy.ndarray: (size, 3) offsets
    """
    golden_angle = np.pi * (3.0 - np.sqrt(5.0))
    i = np.arange(size, dtype=np.float64)
    z = 1.0 - (2.0 * i + 1.0) / size
    r = np.sqrt(1.0 - z * z)
    theta = i * golden_angle
    return np.stack([r * np.cos(theta), r * np.sin(theta), z], axis=1) * radius


CELL_2D = _freeze(build_cell_2d())
CELL_3D = _freeze(build_cell_3d())

# Simplex 4D traversal: a 6-bit comparison code c selects entries
# [4c, 4c+4). Each entry is the rank of its axis, decoding into the three
# intermediate lattice offsets visited between the base and far corners.
SIMPLEX_4D = _freeze(np.array([
    0, 1, 2, 3, 0, 1, 3, 2, 0, 0, 0, 0, 0, 2, 3, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 2, 3, 0,
    0, 2, 1, 3, 0, 0, 0, 0, 0, 3, 1, 2, 0, 3, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 3, 2, 0,
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
    1, 2, 0, 3, 0, 0, 0, 0, 1, 3, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 3, 0, 1, 2, 3, 1, 0,
    1, 0, 2, 3, 1, 0, 3, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 3, 1, 0, 0, 0, 0, 2, 1, 3, 0,
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
    2, 0, 1, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 3, 0, 1, 2, 3, 0, 2, 1, 0, 0, 0, 0, 3, 1, 2, 0,
    2, 1, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 3, 1, 0, 2, 0, 0, 0, 0, 3, 2, 0, 1, 3, 2, 1, 0,
], dtype=np.int8))

# Plain-Python mirrors for scalar evaluation
GRAD_2D_LUT = tuple(tuple(v) for v in GRAD_2D.tolist())
GRAD_3D_LUT = tuple(tuple(v) for v in GRAD_3D.tolist())
CELL_2D_LUT = tuple(tuple(v) for v in CELL_2D.tolist())
CELL_3D_LUT = tuple(tuple(v) for v in CELL_3D.tolist())
SIMPLEX_4D_LUT = tuple(SIMPLEX_4D.tolist())
