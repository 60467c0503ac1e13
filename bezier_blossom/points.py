"""
Affine point contract and a small concrete point type.

Every algorithm in this package only ever forms ``p + t * (q - p)``, so any
value supporting addition, subtraction and multiplication by a float works as
a point: plain floats, numpy arrays, or :class:`Vector3D`.
"""

from typing import Iterable, List, Protocol, TypeVar

from .constants import SCALAR_TYPE
from .utils import format_point


class AffinePoint(Protocol):
    """Structural type for values drawn from an affine space."""

    def __add__(self, other): ...

    def __sub__(self, other): ...

    def __rmul__(self, scalar: float): ...


P = TypeVar("P", bound=AffinePoint)


def lerp(p, q, t):
    """Affine combination p + t·(q − p)."""
    return p + t * (q - p)


def as_scalar(t) -> float:
    """Coerce a parameter to the package scalar type."""
    return SCALAR_TYPE(t)


def as_params(params: Iterable) -> List[float]:
    """Coerce a parameter sequence to a list of package scalars."""
    return [as_scalar(t) for t in params]


def as_polygon(points: Iterable[P]) -> List[P]:
    """
    Copy a control polygon into a private scratch list.

    Args:
        points: Ordered control points (any iterable)

    Returns:
        list: New list holding the same points, safe to overwrite

    Raises:
        ValueError: If the polygon is empty
    """
    polygon = list(points)
    if len(polygon) == 0:
        raise ValueError("control polygon must contain at least one point")
    return polygon


class Vector3D:
    """
    Minimal 3D affine point with value semantics.

    Supports ``a + b``, ``a - b``, ``s * a`` and ``a * s``; operations always
    return a new vector.
    """

    __slots__ = ("x", "y", "z")

    def __init__(self, x, y, z):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    def __add__(self, other):
        return Vector3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        return self + other * -1

    def __mul__(self, scalar):
        return Vector3D(scalar * self.x, scalar * self.y, scalar * self.z)

    __rmul__ = __mul__

    def __neg__(self):
        return self * -1

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    def __repr__(self):
        return f"Vector3D({self.x!r}, {self.y!r}, {self.z!r})"

    def __str__(self):
        return format_point(self)
