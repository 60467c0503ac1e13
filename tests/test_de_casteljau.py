import itertools

import numpy as np
import pytest

from bezier_blossom.constants import DEFAULT_TOLERANCE
from bezier_blossom import (
    Vector3D,
    blossom,
    clear_matrix_cache,
    de_casteljau_split_matrices,
    evaluate,
    get_cache_info,
    segment_matrices_equal_params,
    split,
    subdivide,
    subdivide_point,
    subdivision_matrix,
)


def _cubic():
    return [
        Vector3D(0, 0, 0),
        Vector3D(1, 0, 0),
        Vector3D(1, 1, 0),
        Vector3D(1, 1, 1),
    ]


def _arr(p):
    return np.asarray(list(p) if isinstance(p, Vector3D) else p, dtype=float)


def _close(a, b, tol=DEFAULT_TOLERANCE):
    assert np.allclose(_arr(a), _arr(b), atol=tol), f"{a} != {b}"


def _close_polygons(A, B, tol=DEFAULT_TOLERANCE):
    assert len(A) == len(B)
    for a, b in zip(A, B):
        _close(a, b, tol)


def _random_polygon(n, dim=3, seed=0):
    rng = np.random.default_rng(seed)
    return list(rng.uniform(-5, 5, size=(n, dim)))


# Concrete cubic scenario

def test_cubic_endpoints():
    P = _cubic()
    _close(evaluate(P, 0), (0, 0, 0))
    _close(evaluate(P, 1), (1, 1, 1))


def test_cubic_interior_points():
    P = _cubic()
    _close(evaluate(P, 0.25), (37 / 64, 10 / 64, 1 / 64))
    _close(evaluate(P, 0.5), (0.875, 0.5, 0.125))


def test_cubic_blossom_corners():
    P = _cubic()
    _close(blossom(P, [0, 0, 0]), (0, 0, 0))
    _close(blossom(P, [0, 0, 1]), (1, 0, 0))
    _close(blossom(P, [0, 1, 1]), (1, 1, 0))
    _close(blossom(P, [1, 1, 1]), (1, 1, 1))


def test_cubic_subdivision_matches_blossom():
    P = _cubic()
    expected = [
        blossom(P, [0, 0, 0]),
        blossom(P, [0, 0, 0.5]),
        blossom(P, [0, 0.5, 0.5]),
        blossom(P, [0.5, 0.5, 0.5]),
    ]
    result = subdivide(P, 0, 0.5)
    _close_polygons(result, expected)
    _close_polygons(result, [(0, 0, 0), (0.5, 0, 0), (0.75, 0.25, 0), (0.875, 0.5, 0.125)])


def test_cubic_subdivided_curve_extrapolates():
    half = subdivide(_cubic(), 0, 0.5)
    for s in (0.0, 0.5, 1.4, 2.0):
        _close(evaluate(half, s), evaluate(_cubic(), 0.5 * s))


# Evaluation

@pytest.mark.parametrize("n", [1, 2, 3, 5, 8])
def test_endpoint_property(n):
    P = _random_polygon(n, seed=n)
    _close(evaluate(P, 0), P[0])
    _close(evaluate(P, 1), P[-1])


def test_single_point_ignores_parameter():
    P = [Vector3D(3, -1, 2)]
    for t in (-2.0, 0.0, 0.4, 7.5):
        _close(evaluate(P, t), (3, -1, 2))
    assert blossom([4.0], []) == 4.0


def test_scalar_points():
    assert evaluate([1.0, 3.0], 0.5) == 2.0
    assert evaluate([0.0, 0.0, 1.0], 0.5) == pytest.approx(0.25)
    # extrapolation is not clamped
    assert evaluate([1.0, 3.0], 2.0) == 5.0


def test_inputs_are_not_mutated():
    P = _random_polygon(5)
    snapshot = [p.copy() for p in P]
    evaluate(P, 0.3)
    blossom(P, [0.1, 0.2, 0.3, 0.4])
    subdivide_point(P, 2, 0.2, 0.9)
    subdivide(P, 0.2, 0.9)
    split(P, 0.4)
    assert len(P) == 5
    for p, q in zip(P, snapshot):
        assert np.array_equal(p, q)


# Blossom

@pytest.mark.parametrize("t", [-0.5, 0.0, 0.3, 1.0, 1.25])
def test_blossom_diagonal(t):
    P = _random_polygon(6, seed=1)
    _close(blossom(P, [t] * 5), evaluate(P, t))


@pytest.mark.parametrize("n", [1, 2, 4, 7])
def test_blossom_corners(n):
    P = _random_polygon(n, seed=2)
    for k in range(n):
        _close(blossom(P, [0] * (n - 1 - k) + [1] * k), P[k])


def test_blossom_symmetry():
    P = _random_polygon(5, seed=4)
    params = [0.1, -0.7, 0.45, 1.3]
    reference = blossom(P, params)
    for perm in itertools.permutations(params):
        _close(blossom(P, perm), reference)


def test_blossom_accepts_numpy_params():
    P = _cubic()
    _close(blossom(P, np.array([0.0, 0.0, 1.0])), (1, 0, 0))


@pytest.mark.parametrize("params", [[], [0.5], [0.1, 0.2, 0.3, 0.4]])
def test_blossom_parameter_count(params):
    with pytest.raises(ValueError):
        blossom(_cubic(), params)


# Subdivision

@pytest.mark.parametrize("t0, t1", [(0.0, 0.5), (0.25, 0.75), (0.8, 0.1), (-0.5, 1.5), (0.3, 0.3)])
def test_subdivision_consistency(t0, t1):
    P = _random_polygon(6, seed=5)
    polygon = subdivide(P, t0, t1)
    assert len(polygon) == 6
    for idx in range(6):
        _close(subdivide_point(P, idx, t0, t1), polygon[idx])
        _close(polygon[idx], blossom(P, [t0] * (5 - idx) + [t1] * idx))


def test_subdivide_point_edges():
    P = _random_polygon(4, seed=6)
    _close(subdivide_point(P, 0, 0.3, 0.9), evaluate(P, 0.3))
    _close(subdivide_point(P, 3, 0.3, 0.9), evaluate(P, 0.9))


@pytest.mark.parametrize("idx", [-1, 4, 10])
def test_subdivide_point_index_range(idx):
    with pytest.raises(ValueError):
        subdivide_point(_cubic(), idx, 0.0, 1.0)


@pytest.mark.parametrize("n", [1, 2, 5, 9])
def test_subdivision_identity(n):
    P = _random_polygon(n, seed=n)
    _close_polygons(subdivide(P, 0, 1), P)


@pytest.mark.parametrize("t0, t1", [(0.2, 0.6), (0.9, 0.1), (-1.0, 2.0)])
def test_curve_invariance_after_subdivision(t0, t1):
    P = _random_polygon(7, seed=8)
    Q = subdivide(P, t0, t1)
    for s in np.linspace(0, 1, 11):
        _close(evaluate(Q, s), evaluate(P, t0 + s * (t1 - t0)), tol=1e-7)


def test_resubdivision_composes():
    P = _random_polygon(5, seed=9)
    twice = subdivide(subdivide(P, 0.2, 0.8), 0.5, 1.0)
    _close_polygons(twice, subdivide(P, 0.5, 0.8), tol=1e-9)


def test_split_halves():
    P = _random_polygon(5, seed=10)
    left, right = split(P, 0.35)
    _close_polygons(left, subdivide(P, 0.0, 0.35))
    _close_polygons(right, subdivide(P, 0.35, 1.0))
    _close(left[-1], right[0])


def test_empty_polygon_rejected():
    for call in (lambda: evaluate([], 0.5),
                 lambda: blossom([], []),
                 lambda: subdivide_point([], 0, 0.0, 1.0),
                 lambda: subdivide([], 0.0, 1.0)):
        with pytest.raises(ValueError):
            call()


# Matrix forms

def test_subdivision_matrix_applies_to_polygon():
    P = np.array(_random_polygon(5, seed=11))
    S = subdivision_matrix(5, 0.2, 0.7)
    assert S.shape == (5, 5)
    _close_polygons(list(S @ P), subdivide(list(P), 0.2, 0.7))
    # every new point is an affine combination
    assert np.allclose(S.sum(axis=1), 1.0)


def test_subdivision_matrix_is_cached_and_read_only():
    clear_matrix_cache()
    S1 = subdivision_matrix(4, 0.0, 0.5)
    S2 = subdivision_matrix(4, 0, 0.5)
    assert S1 is S2
    info = get_cache_info()
    assert info['cached_matrices'] == 1
    assert info['hits'] == 1
    assert not S1.flags.writeable
    with pytest.raises(ValueError):
        S1[0, 0] = 2.0


def test_subdivision_matrix_size():
    with pytest.raises(ValueError):
        subdivision_matrix(0, 0.0, 1.0)
    assert np.allclose(subdivision_matrix(3, 0.0, 1.0), np.eye(3))


def test_split_matrices():
    P = np.array(_random_polygon(4, seed=12))
    S_left, S_right = de_casteljau_split_matrices(4, 0.4)
    left, right = split(list(P), 0.4)
    _close_polygons(list(S_left @ P), left)
    _close_polygons(list(S_right @ P), right)


def test_segment_matrices_equal_params():
    P = np.array(_random_polygon(4, seed=13))
    assert np.allclose(segment_matrices_equal_params(4, 1)[0], np.eye(4))
    mats = segment_matrices_equal_params(4, 3)
    assert len(mats) == 3
    pieces = [A @ P for A in mats]
    for a, b in zip(pieces, pieces[1:]):
        _close(a[-1], b[0])
    _close(pieces[0][0], P[0])
    _close(pieces[-1][-1], P[-1])
    _close(evaluate(list(pieces[1]), 0.5), evaluate(list(P), 0.5))
    with pytest.raises(ValueError):
        segment_matrices_equal_params(4, 0)
