"""
PyFastNoise: deterministic procedural noise for Python.

Evaluates seeded, spatially coherent scalar fields at arbitrary 2D, 3D and
4D coordinates for procedural textures, terrain and fields.

Submodules:
- noise: Evaluators, fractal combinators, domain warp and NoiseConfig
- general_algorithms: Lattice hashing, interpolation kernels, lookup tables
- enums: Configuration vocabulary
- constants: Primes, skew factors and defaults

Usage:
    import pyfastnoise as pn

    config = pn.NoiseConfig(seed=1337)
    config.noise_type = pn.NoiseFamily.PERLIN_FRACTAL
    value = pn.noise.evaluate_3d(config, 10.0, 20.0, 30.0)

Author: B.G.
"""

from . import constants, enums, general_algorithms, noise
from .enums import (
    CellularDistanceMetric,
    CellularReturnMode,
    FractalPolicy,
    InterpolationKernel,
    NoiseFamily,
)
from .noise import NoiseConfig, evaluate_2d, evaluate_3d

__version__ = "0.0.1"

__all__ = [
    "constants", "enums", "general_algorithms", "noise",
    "NoiseConfig", "evaluate_2d", "evaluate_3d",
    "NoiseFamily", "FractalPolicy", "InterpolationKernel",
    "CellularDistanceMetric", "CellularReturnMode",
]
