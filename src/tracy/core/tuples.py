"""Homogeneous 4-component tuples used as points and vectors.

A tuple with ``w == 1`` is a point, one with ``w == 0`` is a vector. Tuples
are immutable values; equality is approximate within ``EPSILON`` so that
results of floating-point transforms compare as expected.

Example:
    >>> from tracy.core.tuples import point, vector
    >>> p = point(1.0, 2.0, 3.0)
    >>> v = vector(0.0, 0.0, 1.0)
    >>> p + v * 2.0
    Tuple4(x=1.0, y=2.0, z=5.0, w=1.0)
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass

from tracy.core.settings import EPSILON


@dataclass(frozen=True, slots=True, eq=False)
class Tuple4:
    """A homogeneous coordinate tuple.

    Attributes:
        x: The x component.
        y: The y component.
        z: The z component.
        w: 1.0 for points, 0.0 for vectors.
    """

    x: float
    y: float
    z: float
    w: float

    @property
    def is_point(self) -> bool:
        return self.w == 1.0

    @property
    def is_vector(self) -> bool:
        return self.w == 0.0

    def to_point(self) -> Tuple4:
        """Return the same coordinates with ``w`` forced to 1."""
        return Tuple4(self.x, self.y, self.z, 1.0)

    def to_vector(self) -> Tuple4:
        """Return the same coordinates with ``w`` forced to 0."""
        return Tuple4(self.x, self.y, self.z, 0.0)

    def __add__(self, other: Tuple4) -> Tuple4:
        if not isinstance(other, Tuple4):
            return NotImplemented
        return Tuple4(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: Tuple4) -> Tuple4:
        if not isinstance(other, Tuple4):
            return NotImplemented
        return Tuple4(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __neg__(self) -> Tuple4:
        return Tuple4(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, scalar: float) -> Tuple4:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return Tuple4(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Tuple4:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return Tuple4(self.x / scalar, self.y / scalar, self.z / scalar, self.w / scalar)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tuple4):
            return NotImplemented
        return self.abs_diff_eq(other, EPSILON)

    __hash__ = None  # type: ignore[assignment]

    def abs_diff_eq(self, other: Tuple4, max_abs_diff: float = EPSILON) -> bool:
        """Check that every component differs by less than ``max_abs_diff``."""
        return (
            abs(self.x - other.x) < max_abs_diff
            and abs(self.y - other.y) < max_abs_diff
            and abs(self.z - other.z) < max_abs_diff
            and abs(self.w - other.w) < max_abs_diff
        )

    def dot(self, other: Tuple4) -> float:
        """Dot product over all four components."""
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def cross(self, other: Tuple4) -> Tuple4:
        """Cross product of the xyz parts; always returns a vector."""
        return Tuple4(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
            0.0,
        )

    def magnitude(self) -> float:
        return math.sqrt(self.dot(self))

    def normalize(self) -> Tuple4:
        """Scale to unit length. A zero tuple is returned unchanged."""
        length = self.magnitude()
        if length == 0.0:
            return self
        return self / length

    def reflect(self, normal: Tuple4) -> Tuple4:
        """Reflect this vector about ``normal`` (which should be unit length)."""
        return self - normal * (2.0 * self.dot(normal))


def point(x: float, y: float, z: float) -> Tuple4:
    """Create a point (w = 1)."""
    return Tuple4(float(x), float(y), float(z), 1.0)


def vector(x: float, y: float, z: float) -> Tuple4:
    """Create a vector (w = 0)."""
    return Tuple4(float(x), float(y), float(z), 0.0)


ORIGIN = point(0.0, 0.0, 0.0)
UNIT_Y = vector(0.0, 1.0, 0.0)
