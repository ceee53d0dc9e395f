"""The ray intersection protocol shared by all shapes.

Every shape lives in its own canonical local frame (a unit sphere at the
origin, the ``xz`` plane, ...). Placement in the world is the job of
:class:`~tracy.scene.object.Object`, which carries the transform; a shape only
answers two local-space questions:

    intersect_local(ray) -> list of LocalIntersection
    normal_at_local(point) -> vector

New shape kinds only need to subclass :class:`Shape`; nothing in the world,
object or camera code has to change.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from tracy.core.ray import Ray
from tracy.core.tuples import Tuple4


@dataclass(frozen=True, slots=True)
class LocalIntersection:
    """A ray hit reported by a shape.

    Attributes:
        toi: Time of impact along the ray. May be negative (behind the origin).
        normal: Surface normal at the hit, in the frame of the ray that
            produced it.
    """

    toi: float
    normal: Tuple4


class Shape(ABC):
    """Abstract base class for geometric primitives."""

    @abstractmethod
    def intersect_local(self, ray: Ray) -> list[LocalIntersection]:
        """Intersect a ray given in this shape's local frame.

        The result is in discovery order, not necessarily sorted by time of
        impact. A ray parallel to a surface produces no intersection.
        """

    @abstractmethod
    def normal_at_local(self, point: Tuple4) -> Tuple4:
        """Return the (unnormalized) surface normal at a local-space point.

        ``point`` is expected to lie on the surface; other points give an
        arbitrary but well-defined vector.
        """

    def _hit(self, ray: Ray, toi: float) -> LocalIntersection:
        return LocalIntersection(toi, self.normal_at_local(ray.point_at(toi)))
