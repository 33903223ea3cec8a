import numpy as np
import warp as wp

_warp_ready = False


@wp.kernel
def min_distance_to_candidate(
    points: wp.array(dtype=wp.vec3),
    candidate: wp.vec3,
    result: wp.array(dtype=float),
):
    """
    Fold the distances from every point to the candidate into result[0].

    One thread per point (p = wp.tid()). atomic_min makes the reduction
    independent of thread order.
    """
    p = wp.tid()
    d = wp.length(points[p] - candidate)
    wp.atomic_min(result, 0, d)


def _init_warp():
    global _warp_ready
    if not _warp_ready:
        wp.init()
        _warp_ready = True


def nearest_distance_numpy(points, candidate):
    if len(points) == 0:
        return np.inf
    diff = points - candidate
    return float(np.sqrt(np.einsum("ij,ij->i", diff, diff)).min())


def nearest_distance_warp(points, candidate, device="cpu"):
    if len(points) == 0:
        return np.inf
    _init_warp()
    points_wp = wp.from_numpy(np.asarray(points, dtype=np.float32), dtype=wp.vec3, device=device)
    result = wp.from_numpy(np.array([np.inf], dtype=np.float32), dtype=float, device=device)
    wp.launch(
        kernel=min_distance_to_candidate,
        dim=len(points),
        inputs=[points_wp, wp.vec3(float(candidate[0]), float(candidate[1]), float(candidate[2])), result],
        device=device,
    )
    return float(result.numpy()[0])


def nearest_distance(points, candidate, backend="numpy", device="cpu"):
    """
    Smallest Euclidean distance between a candidate and a set of points.

    Args:
        points (np.ndarray, shape (m, 3)): Points to compare against.
        candidate (array-like, shape (3,)): Candidate position.
        backend (str): "numpy" for a vectorized scan, "warp" for a parallel kernel.
        device (str): Warp device, only used by the "warp" backend.

    Returns:
        float: The minimum distance, or inf when points is empty.
    """
    if backend == "numpy":
        return nearest_distance_numpy(points, candidate)
    elif backend == "warp":
        return nearest_distance_warp(points, candidate, device)
    else:
        raise ValueError(f"Unknown backend: {backend}. Must be one of: 'numpy', 'warp'")
