import logging
import time
import numpy as np
from typing import Optional

from .generators import generate_unconstrained, generate_small, generate_large
from .utils.config import GeneratorConfig
from .utils.stats import GenerationStats

logger = logging.getLogger(__name__)


class Galaxy_Wrapper:
    def __init__(self, config: Optional[GeneratorConfig] = None, config_file: Optional[str] = None):
        """
        Initialize generator wrapper.

        Args:
            config: GeneratorConfig object to use (if provided)
            config_file: Path to JSON config file (if provided, config is ignored)
        """
        if config_file:
            self.config = GeneratorConfig.from_json(config_file)
        elif config:
            self.config = config
        else:
            # Default config
            self.config = GeneratorConfig()
        self.config.validate()

        self.positions = None
        self.stats = None
        self.elapsed = 0.0

    def generate(self):
        """Run the configured strategy and keep the result."""
        c = self.config
        stats = GenerationStats()
        logger.info("Generating %d stars with the '%s' strategy", c.count, c.strategy)

        t1 = time.time()
        if c.strategy == "unconstrained":
            positions = generate_unconstrained(c.count, c.size, c.thickness, seed=c.seed)
            stats.accepted = stats.candidates = c.count
        elif c.strategy == "small":
            positions = generate_small(c.count, c.min_distance, c.min_center_distance, c.size, c.thickness,
                                       seed=c.seed, max_attempts=c.max_attempts,
                                       backend=c.backend, device=c.device, stats=stats)
        elif c.strategy == "large":
            positions = generate_large(c.count, c.min_distance, c.min_center_distance, c.size, c.thickness,
                                       seed=c.seed, max_attempts=c.max_attempts,
                                       backend=c.backend, device=c.device, stats=stats)
        else:
            raise ValueError(f"Unknown strategy: {c.strategy}. Must be one of: 'unconstrained', 'small', 'large'")
        t2 = time.time()

        self.positions = positions
        self.stats = stats
        self.elapsed = t2 - t1
        return positions

    def get_positions(self):
        if self.positions is None:
            return self.generate()
        return self.positions

    def get_stats(self):
        return self.stats

    def summary(self):
        """Basic figures about the last run, for reporting."""
        positions = self.get_positions()
        if len(positions) == 0:
            return {"count": 0, "elapsed": self.elapsed}
        radii = np.linalg.norm(positions, axis=1)
        return {
            "count": len(positions),
            "min_radius": float(radii.min()),
            "max_radius": float(radii.max()),
            "xy_std": float(positions[:, :2].std()),
            "z_std": float(positions[:, 2].std()),
            "elapsed": self.elapsed,
        }
