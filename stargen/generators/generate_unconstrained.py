import logging
import numpy as np

from ..utils.config import validate_parameters
from ..utils.gauss_sampler import GaussSampler

logger = logging.getLogger(__name__)


def generate_unconstrained(count, size, thickness, seed=None, sampler=None):
    """
    Generate stars with no distance constraints at all.

    Args:
        count (int): The number of stars to generate.
        size (float): Standard deviation used for distribution.
        thickness (float): Axial compression along the z-axis.
        seed (int or None): Seed for a new GaussSampler, ignored when sampler is given.
        sampler (GaussSampler or None): Sampler to draw from.

    Returns:
        np.ndarray: Array of shape (count, 3) of star positions.
    """
    validate_parameters(count, size)
    if sampler is None:
        sampler = GaussSampler(seed)

    # same draw order as one candidate at a time
    positions = sampler.sample_n(3 * count).reshape(count, 3) * size
    positions[:, 2] *= thickness

    logger.info("unconstrained: %d stars", count)
    return positions
