"""
Configuration vocabulary for PyFastNoise.

Closed sets of options selecting the noise family, fractal combination,
interpolation kernel and cellular behaviour of a NoiseConfig.

Author: B.G.
"""

from enum import Enum


class NoiseFamily(Enum):
    VALUE = 0
    VALUE_FRACTAL = 1
    PERLIN = 2
    PERLIN_FRACTAL = 3
    SIMPLEX = 4
    SIMPLEX_FRACTAL = 5
    CELLULAR = 6
    WHITE_NOISE = 7
    CUBIC = 8
    CUBIC_FRACTAL = 9


class FractalPolicy(Enum):
    FBM = 0
    BILLOW = 1
    RIGID_MULTI = 2


class InterpolationKernel(Enum):
    LINEAR = 0
    HERMITE = 1
    QUINTIC = 2


class CellularDistanceMetric(Enum):
    EUCLIDEAN = 0
    MANHATTAN = 1
    NATURAL = 2


class CellularReturnMode(Enum):
    CELL_VALUE = 0
    NOISE_LOOKUP = 1
    DISTANCE = 2
    DISTANCE2 = 3
    DISTANCE2_ADD = 4
    DISTANCE2_SUB = 5
    DISTANCE2_MUL = 6
    DISTANCE2_DIV = 7


# Return modes that need the second-nearest distance
TWO_EDGE_RETURN_MODES = frozenset(
    {
        CellularReturnMode.DISTANCE2,
        CellularReturnMode.DISTANCE2_ADD,
        CellularReturnMode.DISTANCE2_SUB,
        CellularReturnMode.DISTANCE2_MUL,
        CellularReturnMode.DISTANCE2_DIV,
    }
)

# Families summed over octaves by the fractal combinator
FRACTAL_FAMILIES = frozenset(
    {
        NoiseFamily.VALUE_FRACTAL,
        NoiseFamily.PERLIN_FRACTAL,
        NoiseFamily.SIMPLEX_FRACTAL,
        NoiseFamily.CUBIC_FRACTAL,
    }
)
