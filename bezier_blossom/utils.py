"""
Utility functions for number and point formatting.
"""

import numpy as np


def format_number(value, format_spec='.4g'):
    """
    Format a number with proper Unicode minus sign for better rendering.

    Args:
        value: Numeric value to format
        format_spec: Format specification (e.g., '.1f', '.4g')

    Returns:
        str: Formatted string with proper minus sign
    """
    if isinstance(value, (int, float, np.floating, np.integer)):
        if value < 0:
            # Use Unicode minus sign (U+2212) instead of hyphen-minus (U+002D)
            return '−' + format(abs(value), format_spec)
        else:
            return format(value, format_spec)
    return str(value)


def format_point(point, format_spec='.4g'):
    """
    Format a point as '(x, y, ...)'.

    Scalars are formatted as a bare number; anything iterable is formatted
    coordinate by coordinate.
    """
    if isinstance(point, (int, float, np.floating, np.integer)):
        return format_number(point, format_spec)
    coords = np.ravel(np.asarray(list(point), dtype=float))
    return "(" + ", ".join(format_number(float(c), format_spec) for c in coords) + ")"
