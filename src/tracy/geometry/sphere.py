"""Unit sphere centered at the local origin."""

import math

from tracy.core.ray import Ray
from tracy.core.tuples import Tuple4
from tracy.geometry.shape import LocalIntersection, Shape


class Sphere(Shape):
    """A sphere of radius 1 centered at the origin.

    The intersection solves ``|O + tD|^2 = 1`` for ``t``. A negative
    discriminant means a miss; a tangent ray reports the same time twice.
    """

    def intersect_local(self, ray: Ray) -> list[LocalIntersection]:
        # Vector from the sphere center (the origin) to the ray origin
        oc = ray.origin.to_vector()
        d = ray.direction

        a = d.dot(d)
        b = 2.0 * d.dot(oc)
        c = oc.dot(oc) - 1.0

        # A zero-length direction cannot hit anything
        if a == 0.0:
            return []

        discriminant = b * b - 4.0 * a * c
        if discriminant < 0.0:
            return []

        sqrt_d = math.sqrt(discriminant)
        t0 = (-b - sqrt_d) / (2.0 * a)
        t1 = (-b + sqrt_d) / (2.0 * a)

        return [self._hit(ray, t0), self._hit(ray, t1)]

    def normal_at_local(self, point: Tuple4) -> Tuple4:
        return point.to_vector()

    def __repr__(self) -> str:
        return "Sphere()"
