"""Objects: a shape placed in the world with a material."""

from __future__ import annotations

import logging

from tracy.core.color import Color
from tracy.core.matrix import Matrix
from tracy.core.ray import Ray
from tracy.core.tuples import Tuple4
from tracy.geometry.shape import LocalIntersection, Shape
from tracy.materials.material import Material

logger = logging.getLogger(__name__)


class Object:
    """A shape with a placement transform and its own material.

    The inverse transform and its transpose are computed once, when the
    transform is assigned. A transform that cannot be inverted is logged once
    and makes the object invisible: ray queries return no intersections
    rather than garbage geometry.

    Several objects may share one shape instance; shapes are not mutated by
    rendering.

    Args:
        shape: The local-space geometry.
        transform: Object-to-world transform. Defaults to identity.
        material: Surface material. Defaults to ``Material()``.
    """

    def __init__(
        self,
        shape: Shape,
        transform: Matrix | None = None,
        material: Material | None = None,
    ) -> None:
        self.shape = shape
        self.material = material if material is not None else Material()
        self.transform = transform if transform is not None else Matrix.identity()

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, m: Matrix) -> None:
        self._transform = m
        self._inverse = m.inverse()
        if self._inverse is None:
            self._normal_matrix = None
            logger.warning("Object transform is not invertible; %r will not be rendered", self.shape)
        else:
            self._normal_matrix = self._inverse.transpose()

    @property
    def inverse_transform(self) -> Matrix | None:
        """Inverse of :attr:`transform`, or None if it is singular."""
        return self._inverse

    def intersect_in_world(self, ray: Ray) -> list[LocalIntersection]:
        """Intersect a world-space ray with this object.

        Returns:
            Intersections in discovery order with world-space unit normals.
            Empty if the transform is not invertible.
        """
        if self._inverse is None:
            return []

        local_ray = ray.transform(self._inverse)
        return [
            LocalIntersection(i.toi, self._to_world_normal(i.normal))
            for i in self.shape.intersect_local(local_ray)
        ]

    def normal_at(self, world_point: Tuple4) -> Tuple4 | None:
        """Return the world-space unit normal at a point on the surface."""
        if self._inverse is None:
            return None
        local_normal = self.shape.normal_at_local(self._inverse * world_point)
        return self._to_world_normal(local_normal)

    def color_at(self, world_point: Tuple4) -> Color:
        """Return the material color at a world-space point."""
        return self.material.color_at(world_point, self._inverse)

    def _to_world_normal(self, local_normal: Tuple4) -> Tuple4:
        # Normals transform by the inverse transpose; w is reset afterwards
        return (self._normal_matrix * local_normal).to_vector().normalize()

    def __repr__(self) -> str:
        return f"Object(shape={self.shape!r}, material={self.material!r})"
