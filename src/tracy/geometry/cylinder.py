"""Unit-radius cylinder around the ``y`` axis, optionally truncated and capped."""

import math

from tracy.core.ray import Ray
from tracy.core.settings import EPSILON
from tracy.core.tuples import Tuple4, vector
from tracy.geometry.shape import LocalIntersection, Shape


class Cylinder(Shape):
    """A cylinder of radius 1 extending along ``y``.

    By default the cylinder is infinite. ``bottom`` and ``top`` truncate it
    (both bounds are exclusive for the side wall) and ``closed`` adds flat
    caps at the truncation planes.

    Args:
        bottom: Lower ``y`` bound.
        top: Upper ``y`` bound.
        closed: Whether the ends are capped.
    """

    def __init__(
        self,
        bottom: float = -math.inf,
        top: float = math.inf,
        closed: bool = False,
    ) -> None:
        if bottom > top:
            bottom, top = top, bottom
        self._bottom = float(bottom)
        self._top = float(top)
        self.closed = closed

    @property
    def bottom(self) -> float:
        return self._bottom

    @bottom.setter
    def bottom(self, y: float) -> None:
        # Keep bottom <= top by swapping when needed
        if y > self._top:
            self._bottom = self._top
            self._top = float(y)
        else:
            self._bottom = float(y)

    @property
    def top(self) -> float:
        return self._top

    @top.setter
    def top(self, y: float) -> None:
        if y < self._bottom:
            self._top = self._bottom
            self._bottom = float(y)
        else:
            self._top = float(y)

    def intersect_local(self, ray: Ray) -> list[LocalIntersection]:
        xs: list[LocalIntersection] = []
        o, d = ray.origin, ray.direction

        a = d.x * d.x + d.z * d.z

        # A ray parallel to the y axis cannot hit the side wall
        if a > EPSILON:
            b = 2.0 * o.x * d.x + 2.0 * o.z * d.z
            c = o.x * o.x + o.z * o.z - 1.0

            discriminant = b * b - 4.0 * a * c
            if discriminant >= 0.0:
                sqrt_d = math.sqrt(discriminant)
                t0 = (-b - sqrt_d) / (2.0 * a)
                t1 = (-b + sqrt_d) / (2.0 * a)

                for t in (t0, t1):
                    y = o.y + t * d.y
                    if self._bottom < y < self._top:
                        xs.append(self._hit(ray, t))

        self._intersect_caps(ray, xs)
        return xs

    def _intersect_caps(self, ray: Ray, xs: list[LocalIntersection]) -> None:
        if not self.closed or abs(ray.direction.y) <= EPSILON:
            return

        for y in (self._bottom, self._top):
            if math.isinf(y):
                continue
            t = (y - ray.origin.y) / ray.direction.y
            if _within_cap(ray, t):
                xs.append(self._hit(ray, t))

    def normal_at_local(self, point: Tuple4) -> Tuple4:
        dist = point.x * point.x + point.z * point.z

        if dist < 1.0 and point.y >= self._top - EPSILON:
            return vector(0.0, 1.0, 0.0)
        if dist < 1.0 and point.y <= self._bottom + EPSILON:
            return vector(0.0, -1.0, 0.0)
        return vector(point.x, 0.0, point.z)

    def __repr__(self) -> str:
        return f"Cylinder(bottom={self._bottom}, top={self._top}, closed={self.closed})"


def _within_cap(ray: Ray, t: float) -> bool:
    """Check that the hit at ``t`` lies within the unit radius of the axis."""
    x = ray.origin.x + t * ray.direction.x
    z = ray.origin.z + t * ray.direction.z
    return x * x + z * z <= 1.0
