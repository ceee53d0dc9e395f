"""Axis-aligned unit cube with faces at +/-1 on every axis."""

import math

from tracy.core.ray import Ray
from tracy.core.tuples import Tuple4, vector
from tracy.geometry.shape import LocalIntersection, Shape


def _check_axis(origin: float, direction: float) -> tuple[float, float]:
    """Return the entry and exit times of the slab ``-1 <= v <= 1`` on one axis.

    A zero direction component yields signed infinities: both times share the
    same sign when the origin lies outside the slab, so the ray misses.
    """
    tmin_numerator = -1.0 - origin
    tmax_numerator = 1.0 - origin

    if direction != 0.0:
        tmin = tmin_numerator / direction
        tmax = tmax_numerator / direction
    else:
        tmin = math.copysign(math.inf, tmin_numerator) if tmin_numerator else -math.inf
        tmax = math.copysign(math.inf, tmax_numerator) if tmax_numerator else math.inf

    if tmin > tmax:
        tmin, tmax = tmax, tmin
    return tmin, tmax


class Cube(Shape):
    """The cube spanning ``[-1, 1]`` on each axis, intersected with the slab method."""

    def intersect_local(self, ray: Ray) -> list[LocalIntersection]:
        xtmin, xtmax = _check_axis(ray.origin.x, ray.direction.x)
        ytmin, ytmax = _check_axis(ray.origin.y, ray.direction.y)
        ztmin, ztmax = _check_axis(ray.origin.z, ray.direction.z)

        tmin = max(xtmin, ytmin, ztmin)
        tmax = min(xtmax, ytmax, ztmax)

        if tmin > tmax:
            return []

        return [self._hit(ray, tmin), self._hit(ray, tmax)]

    def normal_at_local(self, point: Tuple4) -> Tuple4:
        # The face is the axis with the largest absolute coordinate
        ax, ay, az = abs(point.x), abs(point.y), abs(point.z)
        maxc = max(ax, ay, az)

        if maxc == ax:
            return vector(point.x, 0.0, 0.0)
        if maxc == ay:
            return vector(0.0, point.y, 0.0)
        return vector(0.0, 0.0, point.z)

    def __repr__(self) -> str:
        return "Cube()"
