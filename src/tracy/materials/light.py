"""Point lights and the Phong reflection model."""

from __future__ import annotations

from dataclasses import dataclass, field

from tracy.core.color import BLACK, WHITE, Color
from tracy.core.matrix import Matrix
from tracy.core.tuples import ORIGIN, Tuple4
from tracy.materials.material import Material


@dataclass
class PointLight:
    """A light with no size, emitting equally in every direction.

    Attributes:
        position: World-space position.
        color: Emitted color.
        intensity: Scalar multiplier on ``color``.
    """

    position: Tuple4 = field(default_factory=lambda: ORIGIN)
    color: Color = field(default_factory=lambda: WHITE)
    intensity: float = 1.0

    @property
    def radiance(self) -> Color:
        return self.color * self.intensity


def phong_lighting(
    material: Material,
    light: PointLight,
    point: Tuple4,
    eye: Tuple4,
    normal: Tuple4,
    in_shadow: bool = False,
    object_inverse: Matrix | None = None,
) -> Color:
    """Shade a surface point with ambient, diffuse and specular terms.

    Args:
        material: Surface material.
        light: The light to shade against.
        point: World-space surface point.
        eye: Unit vector from the point toward the viewer.
        normal: Unit surface normal facing the eye.
        in_shadow: If True only the ambient term contributes.
        object_inverse: Inverse object transform used for the pattern lookup.

    Returns:
        The color contributed by this light.
    """
    radiance = light.radiance
    effective_color = material.color_at(point, object_inverse) * radiance
    ambient = effective_color * material.ambient

    if in_shadow:
        return ambient

    lightv = (light.position - point).normalize()

    # Cosine between the light and the normal; negative means the light is behind the surface
    light_dot_normal = lightv.dot(normal)
    if light_dot_normal < 0.0:
        return ambient

    diffuse = effective_color * (material.diffuse * light_dot_normal)

    # Cosine between the reflection and the eye; negative means it reflects away
    reflect_dot_eye = (-lightv).reflect(normal).dot(eye)
    if reflect_dot_eye <= 0.0:
        specular = BLACK
    else:
        factor = reflect_dot_eye**material.shininess
        specular = radiance * (material.specular * factor)

    return ambient + diffuse + specular
