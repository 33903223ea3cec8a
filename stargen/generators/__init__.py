"""
Star position generators: unconstrained, small-scale and large-scale rejection sampling.
"""
from .generate_unconstrained import generate_unconstrained
from .generate_small import generate_small
from .generate_large import generate_large
from .candidate import draw_candidate, find_candidate

__all__ = [
    'generate_unconstrained',
    'generate_small',
    'generate_large',
    'draw_candidate',
    'find_candidate',
]
