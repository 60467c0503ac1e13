#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
De Casteljau blossoming example: evaluation, blossom corners and subdivision
of a cubic control polygon.
"""

import argparse
import os
import sys

import numpy as np

# Add the package root to the Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from bezier_blossom import (
    BezierCurve,
    Vector3D,
    blossom,
    evaluate,
    subdivide,
)


def cubic_polygon():
    return [
        Vector3D(0, 0, 0),
        Vector3D(1, 0, 0),
        Vector3D(1, 1, 0),
        Vector3D(1, 1, 1),
    ]


def _print_points(points):
    for p in points:
        print(p)


def run_example(verbose=True):
    """Reproduce evaluation, blossoming and subdivision on the cubic polygon."""
    points = cubic_polygon()

    if verbose:
        print("Original points:")
        _print_points(points)

        print("deCasteljau on original points with t = 0.0, 0.25, 0.7, 1.0")
        _print_points(evaluate(points, t) for t in (0.0, 0.25, 0.7, 1.0))

        print("Blossoming test: the output must match the original points...")
        _print_points(blossom(points, params) for params in
                      ([0, 0, 0], [0, 0, 1], [0, 1, 1], [1, 1, 1]))

    by_blossom = [
        blossom(points, [0, 0, 0]),
        blossom(points, [0, 0, 0.5]),
        blossom(points, [0, 0.5, 0.5]),
        blossom(points, [0.5, 0.5, 0.5]),
    ]
    reparameterized = subdivide(points, 0, 0.5)

    if verbose:
        print("Subdivision using blossoming...")
        _print_points(by_blossom)
        print("The same subdivision using subdivide()...")
        _print_points(reparameterized)

        print("deCasteljau with new curve at t = 0.0, 0.5, 1.4, 2.0")
        _print_points(evaluate(reparameterized, t) for t in (0.0, 0.5, 1.4, 2.0))

    return reparameterized


def plot_example():
    """Plot the cubic, its control polygon and the [0, 0.5] sub-polygon."""
    import plotly.graph_objects as go

    points = np.array([list(p) for p in cubic_polygon()])
    curve = BezierCurve(points)
    half = curve.subdivide(0.0, 0.5)
    samples = curve.evaluate(np.linspace(0, 1, 100))

    fig = go.Figure()
    fig.add_trace(go.Scatter3d(
        x=samples[:, 0], y=samples[:, 1], z=samples[:, 2],
        mode='lines', name='Bézier curve',
        line=dict(color='blue', width=5)
    ))
    for P, name, color in ((curve.control_points, 'control polygon', 'red'),
                           (half.control_points, '[0, 0.5] polygon', 'green')):
        fig.add_trace(go.Scatter3d(
            x=P[:, 0], y=P[:, 1], z=P[:, 2],
            mode='markers+lines', name=name,
            line=dict(color=color, dash='dash'),
            marker=dict(color=color, size=5)
        ))
    fig.update_layout(title="Cubic Bézier subdivision", showlegend=True)
    fig.show()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--quiet", action="store_true", help="suppress printed output")
    parser.add_argument("--plot", action="store_true", help="show a plotly figure")
    args = parser.parse_args()

    run_example(verbose=not args.quiet)
    if args.plot:
        plot_example()
