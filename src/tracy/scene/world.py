"""The scene container: objects, lights, intersection and shading.

A :class:`World` holds an ordered list of objects and any number of point
lights. Insertion order matters: it is the traversal order when gathering
intersections and breaks ties between hits at the same time of impact.

Shading is recursive. :meth:`World.color_at` finds the nearest hit and shades
it; :meth:`World.shade_hit` adds the Phong contribution of every light and
then the reflected color, which casts another ray through
:meth:`World.color_at` with one bounce fewer. The recursion stops when the
remaining bounce count reaches zero.

Example:
    >>> from tracy.core.ray import Ray
    >>> from tracy.core.tuples import point, vector
    >>> from tracy.geometry import Sphere
    >>> from tracy.materials import PointLight
    >>> from tracy.scene import Object, World
    >>> world = World()
    >>> world.add(Object(Sphere()))
    0
    >>> world.add_light(PointLight(point(-10, 10, -10)))
    >>> color = world.color_at(Ray(point(0, 0, -5), vector(0, 0, 1)))
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import NewType

from tracy.core.color import BLACK, Color
from tracy.core.ray import Ray
from tracy.core.settings import DEFAULT_RECURSION_DEPTH, EPSILON
from tracy.core.tuples import Tuple4
from tracy.geometry.shape import LocalIntersection
from tracy.materials.light import PointLight, phong_lighting
from tracy.scene.object import Object

# Index of an object in its world, in insertion order
ObjectHandle = NewType("ObjectHandle", int)

# Refractive index of empty space
VACUUM_INDEX = 1.0


@dataclass(frozen=True, slots=True)
class Interference:
    """Everything shading needs to know about one ray/object hit.

    Attributes:
        handle: The object that was hit.
        toi: Time of impact along the ray.
        point: World-space hit point.
        over_point: ``point`` nudged along the normal; origin for shadow and
            reflection rays.
        under_point: ``point`` nudged against the normal; reserved for
            refraction.
        eye: Unit vector from the hit toward the ray origin.
        normal: World-space unit normal, flipped to face the eye.
        reflect: Incoming direction reflected about ``normal``.
        inside: True when the hit is on the inside of the surface.
        n1: Refractive index on the incoming side.
        n2: Refractive index on the outgoing side.
    """

    handle: ObjectHandle
    toi: float
    point: Tuple4
    over_point: Tuple4
    under_point: Tuple4
    eye: Tuple4
    normal: Tuple4
    reflect: Tuple4
    inside: bool
    n1: float = VACUUM_INDEX
    n2: float = VACUUM_INDEX


class Interferences(Iterator[Interference]):
    """The hits of one ray against a world, in ascending time of impact.

    Records are built lazily as the iterator is consumed. Each step also
    updates the stack of objects the ray is currently inside, which is where
    ``n1`` and ``n2`` come from, so the sequence can only be consumed once and
    in order.
    """

    def __init__(
        self,
        world: World,
        ray: Ray,
        hits: Iterable[tuple[ObjectHandle, LocalIntersection]],
    ) -> None:
        self._world = world
        self._ray = ray
        # Stable: equal times keep the order they were given in
        self._hits = iter(sorted(hits, key=lambda pair: pair[1].toi))
        self._containers: list[ObjectHandle] = []

    def __iter__(self) -> Interferences:
        return self

    def __next__(self) -> Interference:
        handle, intersection = next(self._hits)
        return self._resolve(handle, intersection)

    def hit(self) -> Interference | None:
        """Consume the sequence up to the nearest hit with a non-negative time."""
        for interference in self:
            if interference.toi >= 0.0:
                return interference
        return None

    def _resolve(self, handle: ObjectHandle, intersection: LocalIntersection) -> Interference:
        ray = self._ray
        toi = intersection.toi
        eye = -ray.direction
        normal = intersection.normal

        inside = normal.dot(eye) < 0.0
        if inside:
            normal = -normal

        point = ray.point_at(toi)
        n1, n2 = self._cross_boundary(handle)

        return Interference(
            handle=handle,
            toi=toi,
            point=point,
            over_point=point + normal * EPSILON,
            under_point=point - normal * EPSILON,
            eye=eye,
            normal=normal,
            reflect=ray.direction.reflect(normal),
            inside=inside,
            n1=n1,
            n2=n2,
        )

    def _cross_boundary(self, handle: ObjectHandle) -> tuple[float, float]:
        # Entering an object pushes it, leaving one removes it
        n1 = self._current_index()
        if handle in self._containers:
            self._containers.remove(handle)
        else:
            self._containers.append(handle)
        return n1, self._current_index()

    def _current_index(self) -> float:
        if not self._containers:
            return VACUUM_INDEX
        obj = self._world.get(self._containers[-1])
        return obj.material.refractive_index if obj is not None else VACUUM_INDEX


class World:
    """An ordered collection of objects lit by point lights."""

    def __init__(self) -> None:
        self._objects: list[Object] = []
        self._lights: list[PointLight] = []

    # -------------------------------------------------------------------------
    # Scene graph
    # -------------------------------------------------------------------------

    def add(self, obj: Object) -> ObjectHandle:
        """Append an object and return its handle."""
        self._objects.append(obj)
        return ObjectHandle(len(self._objects) - 1)

    def get(self, handle: ObjectHandle) -> Object | None:
        """Return the object for a handle, or None if there is no such object."""
        if 0 <= handle < len(self._objects):
            return self._objects[handle]
        return None

    @property
    def objects(self) -> list[Object]:
        return self._objects

    @property
    def lights(self) -> list[PointLight]:
        return self._lights

    @property
    def light(self) -> PointLight | None:
        """The first light, if any."""
        return self._lights[0] if self._lights else None

    def add_light(self, light: PointLight) -> None:
        self._lights.append(light)

    def set_light(self, light: PointLight) -> None:
        """Replace all lights with a single one."""
        self._lights = [light]

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def interferences_with_ray(self, ray: Ray) -> Interferences:
        """Intersect a ray with every object.

        Hits are sorted by time of impact; equal times keep insertion order.
        """
        hits = [
            (ObjectHandle(handle), intersection)
            for handle, obj in enumerate(self._objects)
            for intersection in obj.intersect_in_world(ray)
        ]
        return Interferences(self, ray, hits)

    def is_in_shadow(self, point: Tuple4, light: PointLight | None = None) -> bool:
        """Check whether anything lies between ``point`` and a light.

        Args:
            point: World-space point, usually an interference's ``over_point``.
            light: The light to test against. Defaults to the first light.

        Returns:
            True if an object is hit closer than the light. False when the
            world has no light.
        """
        if light is None:
            light = self.light
            if light is None:
                return False

        v = light.position - point
        distance = v.magnitude()
        # A point at the light cannot be occluded from it
        if distance < EPSILON:
            return False

        hit = self.interferences_with_ray(Ray(point, v.normalize())).hit()
        return hit is not None and hit.toi < distance

    # -------------------------------------------------------------------------
    # Shading
    # -------------------------------------------------------------------------

    def shade_hit(
        self,
        interference: Interference,
        remaining_depth: int = DEFAULT_RECURSION_DEPTH,
    ) -> Color | None:
        """Compute the color leaving a hit toward the eye.

        Returns:
            The summed Phong contribution of every light plus the reflected
            color, or None if the handle is stale or the world has no light.
        """
        obj = self.get(interference.handle)
        if obj is None or not self._lights:
            return None

        surface = BLACK
        for light in self._lights:
            surface = surface + phong_lighting(
                obj.material,
                light,
                interference.over_point,
                interference.eye,
                interference.normal,
                self.is_in_shadow(interference.over_point, light),
                obj.inverse_transform,
            )

        return surface + self.reflected_color(interference, remaining_depth)

    def color_at(self, ray: Ray, remaining_depth: int = DEFAULT_RECURSION_DEPTH) -> Color:
        """Return the color seen along a ray; black if nothing is hit."""
        hit = self.interferences_with_ray(ray).hit()
        if hit is None:
            return BLACK

        color = self.shade_hit(hit, remaining_depth)
        return color if color is not None else BLACK

    def reflected_color(
        self,
        interference: Interference,
        remaining_depth: int = DEFAULT_RECURSION_DEPTH,
    ) -> Color:
        """Return the color reflected at a hit, scaled by the material's reflectivity.

        Black when no bounces remain or the surface is not reflective;
        no ray is cast in either case.
        """
        if remaining_depth <= 0:
            return BLACK

        obj = self.get(interference.handle)
        if obj is None or obj.material.reflective == 0.0:
            return BLACK

        reflect_ray = Ray(interference.over_point, interference.reflect)
        color = self.color_at(reflect_ray, remaining_depth - 1)
        return color * obj.material.reflective

    def __repr__(self) -> str:
        return f"World(objects={len(self._objects)}, lights={len(self._lights)})"
