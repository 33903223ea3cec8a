import time

import numpy as np
import pytest

from stargen import (
    ConstraintsUnsatisfiable,
    GaussSampler,
    GenerationStats,
    generate_large,
    generate_small,
    generate_unconstrained,
)
from stargen.utils.radial_bins import bin_index, layer_count


def pairwise_distances(points):
    d = np.linalg.norm(points[:, None, :] - points[None, :, :], axis=-1)
    np.fill_diagonal(d, np.inf)
    return d


def test_zero_count_is_empty():
    assert generate_unconstrained(0, 1.0, 1.0, seed=0).shape == (0, 3)
    assert generate_small(0, 1.0, 0.0, 10.0, 1.0, seed=0).shape == (0, 3)
    assert generate_large(0, 1.0, 0.0, 10.0, 1.0, seed=0).shape == (0, 3)


def test_unconstrained_count_and_thickness():
    points = generate_unconstrained(1000, 1.0, 0.5, seed=11)
    assert points.shape == (1000, 3)
    assert abs(points[:, 0].std() - 1.0) < 0.15
    assert abs(points[:, 1].std() - 1.0) < 0.15
    assert abs(points[:, 2].std() - 0.5) < 0.1


def test_unconstrained_uses_draws_in_order():
    points = generate_unconstrained(4, 2.0, 0.25, seed=3)
    expected = GaussSampler(seed=3).sample_n(12).reshape(4, 3) * 2.0
    expected[:, 2] *= 0.25
    np.testing.assert_allclose(points, expected)


def test_small_is_reproducible():
    a = generate_small(5, 1.0, 0.0, 10.0, 1.0, seed=42)
    b = generate_small(5, 1.0, 0.0, 10.0, 1.0, seed=42)
    assert a.shape == (5, 3)
    np.testing.assert_array_equal(a, b)
    # nothing to compare the first candidate against, so it is always kept
    np.testing.assert_allclose(a[0], GaussSampler(seed=42).sample_n(3) * 10.0)


def test_small_respects_both_distances():
    points = generate_small(200, 1.0, 2.0, 10.0, 0.5, seed=8)
    assert points.shape == (200, 3)
    assert np.all(np.linalg.norm(points, axis=1) >= 2.0)
    assert pairwise_distances(points).min() >= 1.0


def test_small_never_compares_against_origin():
    # every candidate lies well within min_distance of the origin
    points = generate_small(1, 5.0, 0.0, 0.5, 1.0, seed=1, max_attempts=1)
    assert points.shape == (1, 3)


def test_large_respects_adjacent_shells():
    min_distance, min_center_distance, size = 1.0, 2.0, 10.0
    points = generate_large(500, min_distance, min_center_distance, size, 0.5, seed=21)
    assert points.shape == (500, 3)

    radii = np.array([np.linalg.norm(p) for p in points])
    assert np.all(radii >= min_center_distance)

    layers = layer_count(size, min_distance, min_center_distance)
    shells = np.array([bin_index(r, min_distance, min_center_distance, layers) for r in radii])
    close_shells = np.abs(shells[:, None] - shells[None, :]) <= 1
    assert pairwise_distances(points)[close_shells].min() >= min_distance
    # returned innermost shell first
    assert np.all(np.diff(shells) >= 0)


def test_large_is_reproducible():
    a = generate_large(50, 0.5, 1.0, 5.0, 0.3, seed=9)
    b = generate_large(50, 0.5, 1.0, 5.0, 0.3, seed=9)
    np.testing.assert_array_equal(a, b)


def test_injected_sampler_is_used():
    a = generate_small(10, 1.0, 0.0, 10.0, 1.0, sampler=GaussSampler(seed=77))
    b = generate_small(10, 1.0, 0.0, 10.0, 1.0, seed=77)
    np.testing.assert_array_equal(a, b)


def test_stats_are_filled_in():
    stats = GenerationStats()
    generate_small(50, 1.0, 3.0, 5.0, 0.5, seed=4, stats=stats)
    assert stats.accepted == 50
    assert stats.candidates == stats.accepted + stats.rejections
    assert stats.center_rejections > 0


def test_max_attempts_on_pairwise_distance():
    with pytest.raises(ConstraintsUnsatisfiable) as excinfo:
        generate_small(10, 100.0, 0.0, 1.0, 1.0, seed=0, max_attempts=50)
    assert excinfo.value.accepted == 1
    assert excinfo.value.attempts == 50

    with pytest.raises(ConstraintsUnsatisfiable):
        generate_large(10, 100.0, 0.0, 1.0, 1.0, seed=0, max_attempts=50)


def test_max_attempts_on_center_distance():
    with pytest.raises(ConstraintsUnsatisfiable) as excinfo:
        generate_large(1, 1.0, 1000.0, 1.0, 1.0, seed=0, max_attempts=10)
    assert excinfo.value.accepted == 0


@pytest.mark.parametrize("generate", [generate_small, generate_large])
def test_invalid_parameters(generate):
    with pytest.raises(ValueError):
        generate(10, 0.0, 0.0, 10.0, 1.0)
    with pytest.raises(ValueError):
        generate(10, 1.0, 0.0, 0.0, 1.0)
    with pytest.raises(ValueError):
        generate(-1, 1.0, 0.0, 10.0, 1.0)
    with pytest.raises(ValueError):
        generate(10, 1.0, 0.0, 10.0, 1.0, backend="torch")
    with pytest.raises(ValueError):
        generate(10, 1.0, 0.0, 10.0, 1.0, max_attempts=0)


def test_unconstrained_invalid_size():
    with pytest.raises(ValueError):
        generate_unconstrained(10, -1.0, 1.0)


@pytest.mark.parametrize("generate", [generate_small, generate_large])
def test_warp_backend_accepts_same_points(generate):
    expected = generate(30, 1.0, 1.0, 5.0, 0.5, seed=13, backend="numpy")
    points = generate(30, 1.0, 1.0, 5.0, 0.5, seed=13, backend="warp", device="cpu")
    np.testing.assert_allclose(points, expected)


def test_large_cost_does_not_scale_with_shell_count():
    # 500000 shells, only a few hundred of them ever hold a star
    t1 = time.perf_counter()
    points = generate_large(500, 1.0, 0.0, 100000.0, 0.2, seed=1)
    elapsed = time.perf_counter() - t1
    assert points.shape == (500, 3)
    assert elapsed < 10.0
