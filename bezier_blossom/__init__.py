"""
De Casteljau Blossoming for Bézier Curves

This package evaluates and re-parameterizes Bézier curves given by a control
polygon of affine points. Point evaluation, blossoming and subdivision all run
the same triangular de Casteljau recurrence; batch subdivision keeps the whole
recurrence in one flat triangular scheme and reuses its shared columns.
"""

from .points import AffinePoint, Vector3D, lerp, as_polygon
from .scheme import TriangularScheme, column_offset, scheme_size
from .de_casteljau import (
    evaluate,
    blossom,
    subdivide_point,
    subdivide,
    de_casteljau_scheme,
    split,
    subdivision_matrix,
    de_casteljau_split_matrices,
    segment_matrices_equal_params,
    clear_matrix_cache,
    get_cache_info
)
from .bezier import BezierCurve
from .utils import format_number, format_point
from . import constants

__all__ = [
    # Core classes
    'BezierCurve',
    'TriangularScheme',
    'Vector3D',
    'AffinePoint',

    # De Casteljau functions
    'evaluate',
    'blossom',
    'subdivide_point',
    'subdivide',
    'de_casteljau_scheme',
    'split',

    # Matrix functions
    'subdivision_matrix',
    'de_casteljau_split_matrices',
    'segment_matrices_equal_params',
    'clear_matrix_cache',
    'get_cache_info',

    # Scheme addressing
    'column_offset',
    'scheme_size',

    # Utility functions
    'lerp',
    'as_polygon',
    'format_number',
    'format_point',

    # Constants module
    'constants',
]

__version__ = "1.0.0"
