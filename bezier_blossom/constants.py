"""
Numerical defaults for the de Casteljau kernel.
"""

# All parameters are coerced to this one scalar type before any arithmetic
SCALAR_TYPE = float

# Absolute tolerance used when comparing points produced by different
# evaluation paths (de Casteljau vs. Bernstein, blossom vs. subdivision)
DEFAULT_TOLERANCE = 1e-9

# Upper bound on cached subdivision matrices (keyed by size and parameters)
MATRIX_CACHE_SIZE = 128
