"""
Gaussian galactic-disk star position generator.
"""
from .generators import generate_unconstrained, generate_small, generate_large
from .galaxy_wrapper import Galaxy_Wrapper
from .utils import (
    GaussSampler,
    GeneratorConfig,
    GenerationStats,
    ConstraintsUnsatisfiable,
)

__all__ = [
    'generate_unconstrained',
    'generate_small',
    'generate_large',
    'Galaxy_Wrapper',
    'GaussSampler',
    'GeneratorConfig',
    'GenerationStats',
    'ConstraintsUnsatisfiable',
]
