"""Rays and their transformation between coordinate frames.

A ray always carries a true point as origin and a true vector as direction:
the constructor forces ``w`` to 1 and 0 respectively, whatever the caller
passed in.

Example:
    >>> from tracy.core.ray import Ray
    >>> from tracy.core.tuples import point, vector
    >>> ray = Ray(point(2, 3, 4), vector(1, 0, 0))
    >>> ray.point_at(2.5)
    Tuple4(x=4.5, y=3.0, z=4.0, w=1.0)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from tracy.core.tuples import Tuple4

if TYPE_CHECKING:
    from tracy.core.matrix import Matrix


@dataclass(frozen=True, slots=True)
class Ray:
    """A half-line starting at ``origin`` and travelling along ``direction``.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction vector. It is not normalized here because
            object-space rays are deliberately left scaled.
    """

    origin: Tuple4
    direction: Tuple4

    def __post_init__(self) -> None:
        object.__setattr__(self, "origin", self.origin.to_point())
        object.__setattr__(self, "direction", self.direction.to_vector())

    def point_at(self, t: float) -> Tuple4:
        """Return ``origin + t * direction``."""
        return self.origin + self.direction * t

    def transform(self, m: Matrix) -> Ray:
        """Carry this ray through ``m`` (origin as a point, direction as a vector)."""
        return Ray(m * self.origin, m * self.direction)
