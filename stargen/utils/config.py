"""
Generator configuration: the parameter set for one star-field run, with JSON loading and saving.
"""
import json
from typing import Dict, Optional

STRATEGIES = ("unconstrained", "small", "large")
BACKENDS = ("numpy", "warp")


def validate_parameters(count: int, size: float, min_distance: Optional[float] = None,
                        backend: str = "numpy", max_attempts: Optional[int] = None):
    """
    Check generator parameters, raising ValueError on values the generators cannot work with.

    Args:
        count: Number of points requested.
        size: Standard deviation of the distribution.
        min_distance: Minimum pairwise distance, None for the unconstrained strategy.
        backend: Nearest-distance backend name.
        max_attempts: Optional cap on candidates per accepted point.
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    if size <= 0:
        raise ValueError(f"size must be positive, got {size}")
    if min_distance is not None and min_distance <= 0:
        raise ValueError(f"min_distance must be positive for constrained strategies, got {min_distance}")
    if backend not in BACKENDS:
        raise ValueError(f"Unknown backend: {backend}. Must be one of: {', '.join(BACKENDS)}")
    if max_attempts is not None and max_attempts < 1:
        raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")


class GeneratorConfig:
    """Parameters of a single generation run."""

    def __init__(self, strategy: str = "large", count: int = 1000,
                 min_distance: float = 1.0, min_center_distance: float = 0.0,
                 size: float = 10.0, thickness: float = 0.2,
                 seed: Optional[int] = None,
                 max_attempts: Optional[int] = None,
                 backend: str = "numpy",
                 device: str = "cpu"):
        """
        Initialize a generator configuration.

        Args:
            strategy: One of "unconstrained", "small", "large"
            count: Number of stars to generate
            min_distance: Minimum distance between stars (ignored by "unconstrained")
            min_center_distance: Minimum distance between stars and the origin (ignored by "unconstrained")
            size: Standard deviation of the distribution
            thickness: Axial compression along the z-axis
            seed: Random seed, None for a non-deterministic run
            max_attempts: Candidates allowed per star before giving up, None for no limit
            backend: Nearest-distance backend, "numpy" or "warp"
            device: Warp device used by the "warp" backend
        """
        self.strategy = strategy
        self.count = count
        self.min_distance = min_distance
        self.min_center_distance = min_center_distance
        self.size = size
        self.thickness = thickness
        self.seed = seed
        self.max_attempts = max_attempts
        self.backend = backend
        self.device = device

    def __repr__(self):
        fields = ", ".join(f"{key}={value!r}" for key, value in self.to_dict().items())
        return f"GeneratorConfig({fields})"

    def __eq__(self, other):
        if not isinstance(other, GeneratorConfig):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    @property
    def constrained(self) -> bool:
        return self.strategy != "unconstrained"

    def validate(self):
        """Raise ValueError if the configuration cannot be run."""
        if self.strategy not in STRATEGIES:
            raise ValueError(f"Unknown strategy: {self.strategy}. Must be one of: {', '.join(STRATEGIES)}")
        validate_parameters(
            self.count,
            self.size,
            self.min_distance if self.constrained else None,
            self.backend,
            self.max_attempts,
        )

    def to_dict(self) -> Dict:
        """Convert config to dictionary for JSON serialization."""
        return {
            "strategy": self.strategy,
            "count": self.count,
            "min_distance": self.min_distance,
            "min_center_distance": self.min_center_distance,
            "size": self.size,
            "thickness": self.thickness,
            "seed": self.seed,
            "max_attempts": self.max_attempts,
            "backend": self.backend,
            "device": self.device,
        }

    @classmethod
    def from_dict(cls, data: Dict) -> 'GeneratorConfig':
        """Create config from dictionary, using defaults for missing keys."""
        return cls(
            strategy=data.get("strategy", "large"),
            count=data.get("count", 1000),
            min_distance=data.get("min_distance", 1.0),
            min_center_distance=data.get("min_center_distance", 0.0),
            size=data.get("size", 10.0),
            thickness=data.get("thickness", 0.2),
            seed=data.get("seed", None),
            max_attempts=data.get("max_attempts", None),
            backend=data.get("backend", "numpy"),
            device=data.get("device", "cpu"),
        )

    @classmethod
    def from_json(cls, filepath: str) -> 'GeneratorConfig':
        """Load config from JSON file."""
        with open(filepath, 'r') as f:
            data = json.load(f)
        return cls.from_dict(data)

    def to_json(self, filepath: str):
        """Save config to JSON file."""
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)
