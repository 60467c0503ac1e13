"""
Bézier curve object over numpy control points.
"""

import warnings

import numpy as np
from scipy.special import comb

from . import de_casteljau


class BezierCurve:
    """
    Bézier curve defined by an (N, dim) array of control points.

    Evaluation, blossoming and subdivision go through the de Casteljau
    functions; point_bernstein gives an independent Bernstein-form evaluation.
    """

    def __init__(self, control_points):
        P = np.array(control_points, dtype=float)
        if P.ndim == 1:
            P = P.reshape(-1, 1)
        if P.ndim != 2:
            raise ValueError("control_points must be (N, dim)")
        if P.shape[0] == 0:
            raise ValueError("control_points must contain at least one point")
        P.setflags(write=False)
        self.control_points = P
        self.num_points = P.shape[0]
        self.degree = self.num_points - 1
        self.dimension = P.shape[1]

    def __len__(self):
        return self.num_points

    def __repr__(self):
        return f"BezierCurve(degree={self.degree}, dimension={self.dimension})"

    def _rows(self):
        return list(self.control_points)

    def point(self, tau):
        """Evaluate curve at parameter tau using the de Casteljau recurrence."""
        return de_casteljau.evaluate(self._rows(), tau)

    def evaluate(self, taus):
        """
        Evaluate the curve at several parameters.

        Args:
            taus: Scalar or 1-D array of parameters (not clamped to [0, 1])

        Returns:
            np.ndarray: (len(taus), dim) array of curve points
        """
        taus = np.atleast_1d(np.asarray(taus, dtype=float))
        out = np.zeros((len(taus), self.dimension))
        for i, tau in enumerate(taus):
            out[i] = self.point(tau)
        return out

    def point_bernstein(self, tau):
        """Evaluate curve at parameter tau using Bernstein basis."""
        N, d = self.degree, self.dimension
        out = np.zeros(d)
        for i in range(N + 1):
            b = comb(N, i) * (tau ** i) * ((1 - tau) ** (N - i))
            out += b * self.control_points[i]
        return out

    def blossom(self, params):
        """Blossom value for N-1 parameters."""
        return de_casteljau.blossom(self._rows(), params)

    def subdivide_point(self, idx, t0, t1):
        """idx-th control point of the curve reparameterized to [t0, t1]."""
        return de_casteljau.subdivide_point(self._rows(), idx, t0, t1)

    def subdivide(self, t0, t1):
        """
        Curve whose [0, 1] domain traces this curve over [t0, t1].

        Args:
            t0, t1: Ends of the interval; t1 < t0 reverses direction and values
                outside [0, 1] extrapolate

        Returns:
            BezierCurve: New curve of the same degree
        """
        if t0 == t1:
            warnings.warn(
                f"degenerate subdivision interval [{t0}, {t1}]; all control points coincide"
            )
        return BezierCurve(np.vstack(de_casteljau.subdivide(self._rows(), t0, t1)))

    def split(self, tau):
        """Split the curve at tau into curves over [0, tau] and [tau, 1]."""
        left, right = de_casteljau.split(self._rows(), tau)
        return BezierCurve(np.vstack(left)), BezierCurve(np.vstack(right))

    def segments(self, n_seg):
        """
        Split the curve into n_seg equal-parameter pieces.

        Returns:
            list of BezierCurve, the i-th covering [i/n_seg, (i+1)/n_seg]
        """
        mats = de_casteljau.segment_matrices_equal_params(self.num_points, n_seg)
        return [BezierCurve(A @ self.control_points) for A in mats]
