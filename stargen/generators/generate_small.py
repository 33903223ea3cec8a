import logging

from ..utils.config import validate_parameters
from ..utils.gauss_sampler import GaussSampler
from ..utils.nearest_distance import nearest_distance
from ..utils.radial_bins import PointBuffer
from ..utils.stats import GenerationStats
from .candidate import find_candidate

logger = logging.getLogger(__name__)


def generate_small(count, min_distance, min_center_distance, size, thickness,
                   seed=None, sampler=None, max_attempts=None,
                   backend="numpy", device="cpu", stats=None):
    """
    Generate stars checking every candidate against every accepted star.

    O(count^2) overall, meant for small counts. With the "numpy" backend every
    pair of returned stars is at least min_distance apart. The "warp" backend
    compares in float32, so a pair within float32 rounding of min_distance
    can be accepted.

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
        np.ndarray: Array of shape (count, 3) of star positions in acceptance order.
    """
    validate_parameters(count, size, min_distance, backend, max_attempts)
    if sampler is None:
        sampler = GaussSampler(seed)
    if stats is None:
        stats = GenerationStats()

    accepted = PointBuffer(capacity=count)
    logger.debug("small: %d stars, %s backend", count, backend)

    def nearest(point, radius):
        return nearest_distance(accepted.points, point, backend, device)

    while len(accepted) < count:
        point, _ = find_candidate(
            sampler, size, thickness, min_center_distance, min_distance,
            nearest, stats, max_attempts,
        )
        accepted.append(point)
        stats.log_progress(count)

    stats.log_summary("small")
    return accepted.points.copy()
