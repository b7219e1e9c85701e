"""
Global constants for PyFastNoise.

Holds the lattice hashing primes, the simplex skew/unskew factors, the
normalisation constants of each noise family and the default values used
by NoiseConfig. Everything here is read-only at runtime.

Author: B.G.
"""

# Lattice hashing primes, one per axis
X_PRIME = 1619
Y_PRIME = 31337
Z_PRIME = 6971
W_PRIME = 1013

# Cubic mixing multiplier applied after the axis XOR
HASH_MULTIPLIER = 60493

# 2^31, maps the mixed 32-bit integer to roughly [-1, 1]
VALUE_SCALE = 2147483648.0

# Simplex skew (F) and unskew (G) factors
F2 = 1.0 / 2.0
G2 = 1.0 / 4.0
F3 = 1.0 / 3.0
G3 = 1.0 / 6.0
G33 = G3 * 3.0 - 1.0
F4 = (2.23606797 - 1.0) / 4.0
G4 = (5.0 - 2.23606797) / 20.0

# Simplex kernel radii (squared) and output scaling
SIMPLEX_2D_RADIUS = 0.5
SIMPLEX_3D_RADIUS = 0.6
SIMPLEX_4D_RADIUS = 0.6
SIMPLEX_2D_SCALE = 50.0
SIMPLEX_3D_SCALE = 32.0
SIMPLEX_4D_SCALE = 27.0

# Cubic noise amplitude bounding, 1 / 1.5^dimension
CUBIC_2D_BOUNDING = 1.0 / (1.5 * 1.5)
CUBIC_3D_BOUNDING = 1.0 / (1.5 * 1.5 * 1.5)

# Cellular search
CELLULAR_JITTER = 0.45
CELLULAR_MAX_DISTANCE = 999999.0

# NoiseConfig defaults
DEFAULT_SEED = 1337
DEFAULT_FREQUENCY = 0.01
DEFAULT_OCTAVES = 3
DEFAULT_GAIN = 0.5
DEFAULT_LACUNARITY = 2.0
DEFAULT_PERTURB_AMP = 1.0 / CELLULAR_JITTER
