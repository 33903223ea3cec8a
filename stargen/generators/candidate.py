import numpy as np

from ..utils.errors import ConstraintsUnsatisfiable


def draw_candidate(sampler, size, thickness):
    """Three normal draws scaled by size, with z compressed by thickness."""
    point = sampler.sample_n(3) * size
    point[2] *= thickness
    return point


def find_candidate(sampler, size, thickness, min_center_distance, min_distance,
                   nearest, stats, max_attempts=None):
    """
    Draw candidates until one satisfies both distance constraints.

    Args:
        sampler (GaussSampler): Source of normal draws.
        size (float): Standard deviation used for distribution.
        thickness (float): Axial compression along the z-axis.
        min_center_distance (float): Minimum distance between the point and (0,0,0).
        min_distance (float): Minimum distance to the already accepted points.
        nearest (callable): nearest(point, radius) -> distance to the closest accepted
            point that should be checked, inf if there is none.
        stats (GenerationStats): Counters updated in place.
        max_attempts (int or None): Candidates allowed before raising
            ConstraintsUnsatisfiable. None loops until a candidate fits.

    Returns:
        tuple: (point, radius) of the accepted candidate.
    """
    attempts = 0
    while True:
        if max_attempts is not None and attempts >= max_attempts:
            raise ConstraintsUnsatisfiable(stats.accepted, attempts)
        attempts += 1
        stats.candidates += 1

        point = draw_candidate(sampler, size, thickness)
        radius = float(np.linalg.norm(point))
        if radius < min_center_distance:
            stats.center_rejections += 1
            continue
        if nearest(point, radius) < min_distance:
            stats.distance_rejections += 1
            continue

        stats.accepted += 1
        return point, radius
