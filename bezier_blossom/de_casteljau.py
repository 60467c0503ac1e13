"""
De Casteljau evaluation, blossoming and subdivision of Bézier control polygons.

Points may be any affine values (floats, numpy arrays, Vector3D); the only
operation used on them is p + t * (q - p). Inputs are never mutated: every
function works on a private copy or a private TriangularScheme.
"""

from functools import lru_cache
from itertools import repeat

import numpy as np

from .constants import MATRIX_CACHE_SIZE
from .points import as_params, as_polygon, as_scalar, lerp
from .scheme import TriangularScheme


def _reduce(W, params):
    """
    Run the triangular recurrence in place on scratch list W.

    Iteration k (1-based) uses the k-th value of `params` for every row.
    """
    N = len(W)
    for iteration, t in enumerate(params, start=1):
        for i in range(N - iteration):
            W[i] = lerp(W[i], W[i + 1], t)
    return W[0]


def evaluate(points, t):
    """
    Evaluate the Bézier curve of a control polygon at parameter t.

    t is not clamped; values outside [0, 1] extrapolate the curve.

    Args:
        points: Control polygon, N >= 1 affine points
        t: Curve parameter

    Returns:
        Point on the degree N-1 curve at t
    """
    W = as_polygon(points)
    return _reduce(W, repeat(as_scalar(t), len(W) - 1))


def blossom(points, params):
    """
    Evaluate the blossom of a control polygon.

    The blossom is the symmetric multiaffine function whose diagonal is the
    curve: blossom(P, [t] * (N-1)) == evaluate(P, t), and
    blossom(P, [0] * (N-1-k) + [1] * k) == P[k].

    Args:
        points: Control polygon, N >= 1 affine points
        params: Exactly N-1 parameters, one per recurrence column

    Returns:
        Blossom value at the given parameter tuple

    Raises:
        ValueError: If len(params) != N - 1
    """
    W = as_polygon(points)
    params = as_params(params)
    if len(params) != len(W) - 1:
        raise ValueError(
            f"blossom of {len(W)} points takes {len(W) - 1} parameters, got {len(params)}"
        )
    return _reduce(W, params)


def _check_index(idx, num_points):
    if not 0 <= idx < num_points:
        raise ValueError(f"idx must be in [0, {num_points}), got {idx}")


def subdivide_point(points, idx, t0, t1):
    """
    Compute one control point of the polygon reparameterized to [t0, t1].

    Equivalent to blossom(points, [t0] * (N-1-idx) + [t1] * idx): the new
    polygon's curve over [0, 1] traces the original curve over [t0, t1].

    Args:
        points: Control polygon, N >= 1 affine points
        idx: Index of the requested control point, 0 <= idx < N
        t0, t1: Ends of the original parameter interval

    Returns:
        The idx-th control point of the reparameterized polygon
    """
    W = as_polygon(points)
    N = len(W)
    _check_index(idx, N)
    t0, t1 = as_scalar(t0), as_scalar(t1)
    params = [t0] * (N - 1 - idx) + [t1] * idx
    return _reduce(W, params)


def de_casteljau_scheme(points, t):
    """Build the complete triangular scheme of `points` for parameter t."""
    scheme = TriangularScheme(points)
    t = as_scalar(t)
    for column in range(1, scheme.num_points):
        scheme.fill_column(column, t)
    return scheme


def subdivide(points, t0, t1):
    """
    Compute the whole control polygon reparameterized to [t0, t1].

    All output points share one triangular scheme. The scheme is first filled
    with t0 (its last entry is output 0). Output k needs its last k columns
    computed with t1, so for each k only columns N-k .. N-1 are recomputed in
    place; columns before N-k keep their t0 values. That is about N^3/6
    interpolations in total, against N^3/2 for N separate subdivide_point
    calls, at the cost of N(N+1)/2 stored points.

    Args:
        points: Control polygon, N >= 1 affine points
        t0, t1: Ends of the original parameter interval

    Returns:
        list: N new control points; subdivide(P, 0, 1) reproduces P
    """
    t1 = as_scalar(t1)
    scheme = de_casteljau_scheme(points, t0)
    N = scheme.num_points

    new_points = [scheme.last]
    for k in range(1, N):
        for column in range(N - k, N):
            scheme.fill_column(column, t1)
        new_points.append(scheme.last)
    return new_points


def split(points, tau):
    """
    Split a control polygon at tau into the polygons over [0, tau] and [tau, 1].

    Both halves are read off a single scheme: the left polygon is the first
    entry of every column, the right polygon the last entry of every column
    taken from the apex back to column 0.

    Returns:
        tuple: (left, right) lists of N points each
    """
    scheme = de_casteljau_scheme(points, tau)
    N = scheme.num_points
    left = [scheme[c, 0] for c in range(N)]
    right = [scheme[N - 1 - i, i] for i in range(N)]
    return left, right


@lru_cache(maxsize=MATRIX_CACHE_SIZE)
def _subdivision_matrix(num_points, t0, t1):
    basis = list(np.eye(num_points))
    S = np.vstack(subdivide(basis, t0, t1))
    S.setflags(write=False)
    return S


def subdivision_matrix(num_points, t0, t1):
    """
    Matrix form of subdivide for polygons of `num_points` points.

    Row k holds the weights of the original control points in the k-th new
    control point, so subdivide(P, t0, t1) == S @ P for an (N, dim) array P.
    Obtained by subdividing the standard basis vectors. Results are cached and
    read-only.

    Args:
        num_points: Number of control points N (degree + 1)
        t0, t1: Ends of the original parameter interval

    Returns:
        np.ndarray: (N, N) subdivision matrix
    """
    if num_points < 1:
        raise ValueError("num_points must be >= 1")
    return _subdivision_matrix(int(num_points), as_scalar(t0), as_scalar(t1))


def de_casteljau_split_matrices(num_points, tau):
    """Compute subdivision matrices S_left and S_right for a split at tau."""
    S_left = subdivision_matrix(num_points, 0.0, tau)
    S_right = subdivision_matrix(num_points, tau, 1.0)
    return S_left, S_right


def segment_matrices_equal_params(num_points, n_seg):
    """
    Generate segment matrices for equal-parameter splitting.
    Returns list of (N, N) matrices, one per segment [i/n_seg, (i+1)/n_seg].
    """
    if n_seg < 1:
        raise ValueError("n_seg must be >= 1")
    if n_seg == 1:
        return [np.eye(num_points)]

    return [
        subdivision_matrix(num_points, i / n_seg, (i + 1) / n_seg)
        for i in range(n_seg)
    ]


def clear_matrix_cache():
    """Drop every cached subdivision matrix."""
    _subdivision_matrix.cache_clear()


def get_cache_info() -> dict:
    """Cache statistics for subdivision matrices."""
    info = _subdivision_matrix.cache_info()
    return {
        'cached_matrices': info.currsize,
        'hits': info.hits,
        'misses': info.misses,
        'maxsize': info.maxsize,
    }
