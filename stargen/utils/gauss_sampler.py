import numpy as np
from typing import Optional


class GaussSampler:
    """
    Standard normal random numbers from the Box-Muller transform.

    Each sampler owns its own numpy Generator, so two samplers built with the
    same seed produce the same sequence regardless of what else is drawing
    random numbers in the process.
    """

    def __init__(self, seed: Optional[int] = None):
        """
        Args:
            seed: Integer seed for a reproducible sequence. None seeds from OS entropy.
        """
        self.seed = seed
        self.rng = np.random.default_rng(seed)

    def _box_muller(self, uniforms):
        # uniforms in [0, 1) -> (0, 1], keeps log() away from 0
        u1 = 1.0 - uniforms[0::2]
        u2 = 1.0 - uniforms[1::2]
        # only the sine variate is used
        return np.sqrt(-2.0 * np.log(u1)) * np.sin(2.0 * np.pi * u2)

    def sample(self) -> float:
        """Return one standard normal value."""
        return float(self._box_muller(self.rng.random(2))[0])

    def sample_n(self, k: int) -> np.ndarray:
        """
        Return k standard normal values.

        Draws the uniform pairs in the same order as k calls to sample(), so
        both produce the same numbers for the same seed.
        """
        if k < 0:
            raise ValueError(f"k must be non-negative, got {k}")
        return self._box_muller(self.rng.random(2 * k))
