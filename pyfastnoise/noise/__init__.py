"""
Noise evaluation module for PyFastNoise.

Provides deterministic, seeded, spatially coherent noise evaluated one point
at a time. Every function is a pure function of a NoiseConfig and a
coordinate; the only mutation is the in-place coordinate update of the
gradient perturbation functions.

Noise Types:
- Value Noise: Random lattice values blended with a smoothstep kernel
- Perlin Noise: Lattice gradients dotted with corner offsets
- Simplex Noise: Gradient noise on a simplex lattice (2D, 3D, 4D)
- Cubic Noise: Lattice values blended with four-point cubic interpolation
- Cellular Noise: Distances to jittered feature points (Worley)
- White Noise: Uncorrelated hash of the coordinate itself

Core Features:
- FBM, Billow and Rigid-Multi fractal sums for the lattice families
- Single-octave and fractal domain warp (gradient perturbation)
- Cellular distance metrics and eight return modes
- Reproducible results for any 32-bit seed

Usage:
    import pyfastnoise as pn

    config = pn.NoiseConfig(seed=42, frequency=0.02)
    config.noise_type = pn.NoiseFamily.SIMPLEX_FRACTAL
    config.octaves = 5

    height = pn.noise.evaluate_2d(config, 120.0, 64.0)

    # Warp a coordinate before sampling
    coord = [120.0, 64.0]
    pn.noise.gradient_perturb_fractal_2d(config, coord)
    warped = pn.noise.evaluate_2d(config, *coord)

Author: B.G.
"""

from .cellular_noise import (
    cellular_distances_2d,
    cellular_distances_3d,
    cellular_nearest_2d,
    cellular_nearest_3d,
    single_cellular_2d,
    single_cellular_3d,
)
from .config import NoiseConfig, compute_fractal_bound
from .cubic_noise import single_cubic_2d, single_cubic_3d
from .dispatch import (
    evaluate_2d,
    evaluate_3d,
    get_cellular_2d,
    get_cellular_3d,
    get_cubic_2d,
    get_cubic_3d,
    get_cubic_fractal_2d,
    get_cubic_fractal_3d,
    get_perlin_2d,
    get_perlin_3d,
    get_perlin_fractal_2d,
    get_perlin_fractal_3d,
    get_simplex_2d,
    get_simplex_3d,
    get_simplex_4d,
    get_simplex_fractal_2d,
    get_simplex_fractal_3d,
    get_value_2d,
    get_value_3d,
    get_value_fractal_2d,
    get_value_fractal_3d,
    get_white_noise_2d,
    get_white_noise_3d,
    get_white_noise_4d,
    get_white_noise_int_2d,
    get_white_noise_int_3d,
    get_white_noise_int_4d,
    resolve_2d,
    resolve_3d,
)
from .fractal import fractal, fractal_billow, fractal_fbm, fractal_rigid_multi
from .perlin_noise import single_perlin_2d, single_perlin_3d
from .perturb import (
    gradient_perturb_2d,
    gradient_perturb_3d,
    gradient_perturb_fractal_2d,
    gradient_perturb_fractal_3d,
)
from .simplex_noise import single_simplex_2d, single_simplex_3d, single_simplex_4d
from .value_noise import single_value_2d, single_value_3d
from .white_noise import (
    white_noise_2d,
    white_noise_3d,
    white_noise_4d,
    white_noise_int_2d,
    white_noise_int_3d,
    white_noise_int_4d,
)

# Export all noise evaluation functions
__all__ = [
    "NoiseConfig", "compute_fractal_bound",
    "evaluate_2d", "evaluate_3d", "resolve_2d", "resolve_3d",
    "get_value_2d", "get_value_3d", "get_value_fractal_2d", "get_value_fractal_3d",
    "get_perlin_2d", "get_perlin_3d", "get_perlin_fractal_2d", "get_perlin_fractal_3d",
    "get_simplex_2d", "get_simplex_3d", "get_simplex_4d",
    "get_simplex_fractal_2d", "get_simplex_fractal_3d",
    "get_cubic_2d", "get_cubic_3d", "get_cubic_fractal_2d", "get_cubic_fractal_3d",
    "get_cellular_2d", "get_cellular_3d",
    "get_white_noise_2d", "get_white_noise_3d", "get_white_noise_4d",
    "get_white_noise_int_2d", "get_white_noise_int_3d", "get_white_noise_int_4d",
    "single_value_2d", "single_value_3d",
    "single_perlin_2d", "single_perlin_3d",
    "single_simplex_2d", "single_simplex_3d", "single_simplex_4d",
    "single_cubic_2d", "single_cubic_3d",
    "single_cellular_2d", "single_cellular_3d",
    "cellular_nearest_2d", "cellular_nearest_3d",
    "cellular_distances_2d", "cellular_distances_3d",
    "white_noise_2d", "white_noise_3d", "white_noise_4d",
    "white_noise_int_2d", "white_noise_int_3d", "white_noise_int_4d",
    "fractal", "fractal_fbm", "fractal_billow", "fractal_rigid_multi",
    "gradient_perturb_2d", "gradient_perturb_3d",
    "gradient_perturb_fractal_2d", "gradient_perturb_fractal_3d",
]
