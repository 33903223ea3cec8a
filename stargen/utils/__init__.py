"""
Utils package for random sampling, configuration and point storage.
"""
from .gauss_sampler import GaussSampler
from .config import GeneratorConfig, validate_parameters
from .errors import ConstraintsUnsatisfiable
from .nearest_distance import nearest_distance
from .radial_bins import PointBuffer, RadialBins
from .stats import GenerationStats
from .logging_config import setup_logging

__all__ = [
    'GaussSampler',
    'GeneratorConfig',
    'validate_parameters',
    'ConstraintsUnsatisfiable',
    'nearest_distance',
    'PointBuffer',
    'RadialBins',
    'GenerationStats',
    'setup_logging',
]
