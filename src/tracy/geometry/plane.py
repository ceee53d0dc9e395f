"""The infinite ``xz`` plane."""

from tracy.core.ray import Ray
from tracy.core.settings import EPSILON
from tracy.core.tuples import UNIT_Y, Tuple4
from tracy.geometry.shape import LocalIntersection, Shape


class Plane(Shape):
    """The plane ``y = 0`` with its normal pointing along ``+y``."""

    def intersect_local(self, ray: Ray) -> list[LocalIntersection]:
        # Parallel or coplanar rays never hit
        if abs(ray.direction.y) < EPSILON:
            return []

        t = -ray.origin.y / ray.direction.y
        return [LocalIntersection(t, UNIT_Y)]

    def normal_at_local(self, point: Tuple4) -> Tuple4:
        return UNIT_Y

    def __repr__(self) -> str:
        return "Plane()"
