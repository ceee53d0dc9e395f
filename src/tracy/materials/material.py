"""Surface reflectance parameters consumed by the Phong model."""

from __future__ import annotations

from dataclasses import dataclass, field

from tracy.core.color import WHITE, Color
from tracy.core.matrix import Matrix
from tracy.core.tuples import Tuple4
from tracy.materials.pattern import Pattern


def _white() -> Pattern:
    return Pattern.solid(WHITE)


@dataclass
class Material:
    """Surface properties of an object.

    Every object owns its own material, so mutating one never affects another
    object even when both share a shape.

    Attributes:
        pattern: Color rule, evaluated in object space.
        ambient: Fraction of the light color reflected regardless of geometry.
        diffuse: Lambertian reflectance.
        specular: Strength of the specular highlight.
        shininess: Phong exponent; larger values give smaller highlights.
        reflective: Mirror reflectance in [0, 1]. Zero disables reflection rays.
        transparency: Reserved for refracted light; not rendered.
        refractive_index: Index of refraction used for n1/n2 bookkeeping.
    """

    pattern: Pattern = field(default_factory=_white)
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0
    reflective: float = 0.0
    transparency: float = 0.0
    refractive_index: float = 1.0

    @classmethod
    def from_color(cls, color: Color, **kwargs) -> Material:
        """Create a material with a solid pattern of the given color."""
        return cls(pattern=Pattern.solid(color), **kwargs)

    def color_at(self, point: Tuple4, object_inverse: Matrix | None = None) -> Color:
        """Return the surface color at a world-space point.

        Args:
            point: World-space point on the surface.
            object_inverse: Inverse of the owning object's transform, which
                brings ``point`` into object space. ``None`` means identity.
        """
        if object_inverse is not None:
            point = object_inverse * point
        return self.pattern.color_at(point)
