import logging

from ..utils.config import validate_parameters
from ..utils.gauss_sampler import GaussSampler
from ..utils.radial_bins import RadialBins
from ..utils.stats import GenerationStats
from .candidate import find_candidate

logger = logging.getLogger(__name__)


def generate_large(count, min_distance, min_center_distance, size, thickness,
                   seed=None, sampler=None, max_attempts=None,
                   backend="numpy", device="cpu", stats=None):
    """
    Generate stars sorted into radial shells of width min_distance.

    A candidate is only checked against the stars in its own shell and the
    two adjacent shells. Much cheaper than generate_small for large counts,
    but two stars in shells further apart are never compared, so the minimum
    distance only holds between stars whose shells are within one of each other.

    Args:
        count (int): The number of stars to generate.
        min_distance (float): Minimum distance between stars.
        min_center_distance (float): Minimum distance between stars and (0,0,0).
        size (float): Standard deviation used for distribution.
        thickness (float): Axial compression along the z-axis.
        seed (int or None): Seed for a new GaussSampler, ignored when sampler is given.
        sampler (GaussSampler or None): Sampler to draw from.
        max_attempts (int or None): Candidates allowed per star, None for no limit.
        backend (str): Nearest-distance backend, "numpy" or "warp".
        device (str): Warp device for the "warp" backend.
        stats (GenerationStats or None): Filled in with the run counters.

    Returns:
        np.ndarray: Array of shape (count, 3) of star positions, innermost shell first.
    """
    validate_parameters(count, size, min_distance, backend, max_attempts)
    if sampler is None:
        sampler = GaussSampler(seed)
    if stats is None:
        stats = GenerationStats()

    bins = RadialBins(size, min_distance, min_center_distance)
    logger.debug("large: %d radial shells of width %g", bins.layers, min_distance)

    def nearest(point, radius):
        return bins.nearest(point, bins.index(radius), backend, device)

    while len(bins) < count:
        point, radius = find_candidate(
            sampler, size, thickness, min_center_distance, min_distance,
            nearest, stats, max_attempts,
        )
        bins.add(point, bins.index(radius))
        stats.log_progress(count)

    stats.log_summary("large")
    return bins.to_array()
