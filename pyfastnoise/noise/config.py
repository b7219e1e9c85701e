"""
Noise configuration object.

NoiseConfig holds every parameter the evaluators read: seed, frequency,
noise family, interpolation kernel, fractal parameters, cellular
parameters and the domain warp amplitude. It is created once by the caller
and mutated between evaluations; evaluators only read it.

``fractal_bound`` is the one cached derived value,
``1 / sum(gain**i for i in range(octaves))``. It is re-derived whenever
``octaves`` or ``gain`` is assigned and is never recomputed during
evaluation.

Author: B.G.
"""

from __future__ import annotations

import logging
from typing import Optional

from .. import constants as cte
from ..enums import (
    CellularDistanceMetric,
    CellularReturnMode,
    FractalPolicy,
    InterpolationKernel,
    NoiseFamily,
)
from ..general_algorithms.math_utils import int32

logger = logging.getLogger(__name__)

_ENUM_FIELDS = {
    "noise_type": NoiseFamily,
    "interp": InterpolationKernel,
    "fractal_type": FractalPolicy,
    "cellular_distance_function": CellularDistanceMetric,
    "cellular_return_type": CellularReturnMode,
}


def compute_fractal_bound(octaves: int, gain: float) -> float:
    """
    Normalisation factor of a fractal sum.

    Args:
        octaves: Number of octaves
        gain: Amplitude multiplier between octaves

    Returns:
        float: ``1 / (1 + gain + gain^2 + ...)`` over ``octaves`` terms,
        1.0 when ``octaves <= 1``
    """
    amp = gain
    amp_fractal = 1.0
    for _ in range(1, octaves):
        amp_fractal += amp
        amp *= gain
    return 1.0 / amp_fractal


class NoiseConfig:
    """
    Mutable, caller-owned noise configuration.

    Plain attributes can be assigned directly. ``octaves`` and ``gain`` are
    properties so ``fractal_bound`` can never be read stale.

    The engine takes no locks: evaluating from several threads is safe as
    long as no thread mutates the config at the same time.

    Author: B.G.
    """

    def __init__(
        self,
        seed: int = cte.DEFAULT_SEED,
        frequency: float = cte.DEFAULT_FREQUENCY,
        noise_type: NoiseFamily = NoiseFamily.SIMPLEX,
        interp: InterpolationKernel = InterpolationKernel.QUINTIC,
        octaves: int = cte.DEFAULT_OCTAVES,
        gain: float = cte.DEFAULT_GAIN,
        lacunarity: float = cte.DEFAULT_LACUNARITY,
        fractal_type: FractalPolicy = FractalPolicy.FBM,
        cellular_distance_function: CellularDistanceMetric = CellularDistanceMetric.EUCLIDEAN,
        cellular_return_type: CellularReturnMode = CellularReturnMode.CELL_VALUE,
        cellular_noise_lookup: Optional[NoiseConfig] = None,
        gradient_perturb_amp: float = cte.DEFAULT_PERTURB_AMP,
    ):
        self._octaves = octaves
        self._gain = gain
        self._fractal_bound = compute_fractal_bound(octaves, gain)
        self._cellular_noise_lookup = None

        self.seed = seed
        self.frequency = frequency
        self.noise_type = noise_type
        self.interp = interp
        self.lacunarity = lacunarity
        self.fractal_type = fractal_type
        self.cellular_distance_function = cellular_distance_function
        self.cellular_return_type = cellular_return_type
        self.cellular_noise_lookup = cellular_noise_lookup
        self.gradient_perturb_amp = gradient_perturb_amp

    def __setattr__(self, name, value):
        expected = _ENUM_FIELDS.get(name)
        if expected is not None and not isinstance(value, expected):
            raise TypeError(f"{name} must be a {expected.__name__}, got {value!r}")
        if name == "seed":
            value = int32(int(value))
        super().__setattr__(name, value)

    def __repr__(self):
        return (
            f"NoiseConfig(seed={self.seed}, frequency={self.frequency}, "
            f"noise_type={self.noise_type.name}, octaves={self._octaves}, "
            f"gain={self._gain}, lacunarity={self.lacunarity}, "
            f"fractal_type={self.fractal_type.name})"
        )

    # ------------------------------------------------------------------
    # Fractal parameters
    # ------------------------------------------------------------------
    @property
    def octaves(self) -> int:
        return self._octaves

    @octaves.setter
    def octaves(self, value: int):
        self._octaves = int(value)
        self._update_fractal_bound()

    @property
    def gain(self) -> float:
        return self._gain

    @gain.setter
    def gain(self, value: float):
        self._gain = float(value)
        self._update_fractal_bound()

    @property
    def fractal_bound(self) -> float:
        """Cached ``1 / sum(gain**i)`` over the configured octaves."""
        return self._fractal_bound

    def set_fractal_octaves(self, octaves: int):
        """Set the octave count of all fractal noise types. Default: 3"""
        self.octaves = octaves

    def set_fractal_gain(self, gain: float):
        """Set the octave gain of all fractal noise types. Default: 0.5"""
        self.gain = gain

    def _update_fractal_bound(self):
        self._fractal_bound = compute_fractal_bound(self._octaves, self._gain)
        logger.debug(
            "fractal_bound=%s (octaves=%s, gain=%s)",
            self._fractal_bound,
            self._octaves,
            self._gain,
        )

    # ------------------------------------------------------------------
    # Cellular lookup
    # ------------------------------------------------------------------
    @property
    def cellular_noise_lookup(self) -> Optional[NoiseConfig]:
        """Config sampled at the nearest feature point in NOISE_LOOKUP mode."""
        return self._cellular_noise_lookup

    @cellular_noise_lookup.setter
    def cellular_noise_lookup(self, lookup: Optional[NoiseConfig]):
        if lookup is not None:
            if not isinstance(lookup, NoiseConfig):
                raise TypeError(f"cellular_noise_lookup must be a NoiseConfig, got {lookup!r}")
            node = lookup
            while node is not None:
                if node is self:
                    raise ValueError("cellular_noise_lookup cannot reference its own config")
                node = node.cellular_noise_lookup
            logger.debug("cellular lookup wired to %r", lookup)
        self._cellular_noise_lookup = lookup

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def copy(self) -> NoiseConfig:
        """
        Independent snapshot of this config.

        The lookup config, if any, is shared rather than copied.
        """
        return NoiseConfig(
            seed=self.seed,
            frequency=self.frequency,
            noise_type=self.noise_type,
            interp=self.interp,
            octaves=self._octaves,
            gain=self._gain,
            lacunarity=self.lacunarity,
            fractal_type=self.fractal_type,
            cellular_distance_function=self.cellular_distance_function,
            cellular_return_type=self.cellular_return_type,
            cellular_noise_lookup=self._cellular_noise_lookup,
            gradient_perturb_amp=self.gradient_perturb_amp,
        )
