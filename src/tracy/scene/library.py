"""Named example scenes.

Each entry maps a name to a builder taking the image size and returning a
``(World, Camera)`` pair. The registry is filled once at import time and is
what the command-line scripts list and render.

Example:
    >>> from tracy.scene.library import get_scene, list_scenes
    >>> list_scenes()
    ['cube-room', 'cylinders', 'patterns', 'reflections', 'shaded-sphere', 'shadows']
    >>> world, camera = get_scene("shadows")(320, 160)
"""

from __future__ import annotations

import math
from collections.abc import Callable

from tracy.camera.camera import Camera
from tracy.core.color import Color
from tracy.core.matrix import chain, rotation_x, rotation_y, rotation_z, scaling, translation
from tracy.core.tuples import point, vector
from tracy.geometry import Cube, Cylinder, Plane, Sphere
from tracy.materials.light import PointLight
from tracy.materials.material import Material
from tracy.materials.pattern import (
    Blended,
    Checkers,
    LinearGradient,
    Pattern,
    RadialGradient,
    Rings,
    Stripes,
)
from tracy.scene.object import Object
from tracy.scene.world import World

# Builder signature: (width, height) -> (world, camera)
SceneBuilder = Callable[[int, int], tuple[World, Camera]]

_SCENES: dict[str, SceneBuilder] = {}


def _register(name: str) -> Callable[[SceneBuilder], SceneBuilder]:
    def decorator(builder: SceneBuilder) -> SceneBuilder:
        _SCENES[name] = builder
        return builder

    return decorator


def get_scene(name: str) -> SceneBuilder:
    """Return the builder registered under ``name``.

    Raises:
        KeyError: If no scene has that name; the message lists the known ones.
    """
    try:
        return _SCENES[name]
    except KeyError:
        raise KeyError(f"Unknown scene {name!r}; available: {', '.join(list_scenes())}") from None


def list_scenes() -> list[str]:
    """Return the registered scene names, sorted."""
    return sorted(_SCENES)


def describe_scene(name: str) -> str:
    """Return the first line of a scene builder's docstring."""
    doc = get_scene(name).__doc__ or ""
    return doc.strip().splitlines()[0] if doc.strip() else ""


def _solid(r: float, g: float, b: float) -> Pattern:
    return Pattern.solid(Color(r, g, b))


def _floor_material(**kwargs) -> Material:
    return Material.from_color(Color(1.0, 0.9, 0.9), specular=0.0, **kwargs)


# =============================================================================
# Scenes
# =============================================================================


@_register("shaded-sphere")
def shaded_sphere(width: int, height: int) -> tuple[World, Camera]:
    """A single purple sphere lit from the upper left."""
    world = World()
    world.add(Object(Sphere(), material=Material.from_color(Color(1.0, 0.2, 1.0))))
    world.add_light(PointLight(point(-10.0, 10.0, -10.0)))

    camera = Camera.look_at(width, height, 40.0, point(0.0, 0.0, -5.0), point(0.0, 0.0, 0.0), vector(0.0, 1.0, 0.0))
    return world, camera


@_register("shadows")
def three_spheres(width: int, height: int) -> tuple[World, Camera]:
    """Three spheres in a room built from flattened spheres, casting shadows."""
    world = World()

    # Floor and walls are spheres squashed flat
    world.add(Object(Sphere(), scaling(10.0, 0.01, 10.0), _floor_material()))
    world.add(
        Object(
            Sphere(),
            chain(scaling(10.0, 0.01, 10.0), rotation_x(math.pi / 2), rotation_y(-math.pi / 4), translation(0.0, 0.0, 5.0)),
            _floor_material(),
        )
    )
    world.add(
        Object(
            Sphere(),
            chain(scaling(10.0, 0.01, 10.0), rotation_x(math.pi / 2), rotation_y(math.pi / 4), translation(0.0, 0.0, 5.0)),
            _floor_material(),
        )
    )

    world.add(
        Object(
            Sphere(),
            translation(-0.5, 1.0, 0.5),
            Material.from_color(Color(0.1, 1.0, 0.5), diffuse=0.7, specular=0.3),
        )
    )
    world.add(
        Object(
            Sphere(),
            chain(scaling(0.5, 0.5, 0.5), translation(1.5, 0.5, -0.5)),
            Material.from_color(Color(0.5, 1.0, 0.1), diffuse=0.7, specular=0.3),
        )
    )
    world.add(
        Object(
            Sphere(),
            chain(scaling(0.33, 0.33, 0.33), translation(-1.5, 0.33, -0.75)),
            Material.from_color(Color(1.0, 0.8, 0.1), diffuse=0.7, specular=0.3),
        )
    )

    world.add_light(PointLight(point(-10.0, 10.0, -10.0)))

    camera = Camera.look_at(width, height, 60.0, point(0.0, 1.5, -5.0), point(0.0, 1.0, 0.0), vector(0.0, 1.0, 0.0))
    return world, camera


@_register("patterns")
def patterns(width: int, height: int) -> tuple[World, Camera]:
    """Checkered floor, striped wall and spheres with rings and gradients."""
    world = World()
    grey_a = _solid(0.5, 0.5, 0.5)
    grey_b = _solid(0.2, 0.2, 0.2)

    world.add(
        Object(
            Plane(),
            material=Material(pattern=Pattern(Checkers(grey_a, grey_b), translation(0.0, 0.01, 0.0)), specular=0.0),
        )
    )
    world.add(
        Object(
            Plane(),
            chain(rotation_x(math.pi / 2), translation(0.0, 0.0, 2.0)),
            Material(
                pattern=Pattern(
                    Blended(
                        Pattern(Stripes(_solid(1.0, 1.0, 1.0), _solid(0.0, 0.7, 0.0)), rotation_y(math.pi / 4)),
                        Pattern(Stripes(_solid(1.0, 1.0, 1.0), _solid(0.0, 0.7, 0.0)), rotation_y(-math.pi / 4)),
                    ),
                    scaling(0.5, 0.5, 0.5),
                ),
                specular=0.0,
            ),
        )
    )
    world.add(
        Object(
            Sphere(),
            translation(-1.0, 1.0, 0.0),
            Material(
                pattern=Pattern(
                    Rings(_solid(0.0, 0.8, 0.0), _solid(0.0, 0.5, 0.0)),
                    chain(scaling(0.22, 0.22, 0.22), rotation_y(math.pi / 3), rotation_x(-math.pi / 4)),
                ),
                specular=0.0,
            ),
        )
    )
    world.add(
        Object(
            Sphere(),
            chain(scaling(0.5, 0.5, 0.5), translation(1.0, 0.5, -1.0)),
            Material(
                pattern=Pattern(
                    LinearGradient(Color(0.8, 0.0, 0.0), Color(0.0, 0.8, 0.0)),
                    chain(scaling(2.0, 2.0, 2.0), translation(1.0, 0.0, 0.0)),
                ),
                specular=0.0,
            ),
        )
    )
    world.add(
        Object(
            Sphere(),
            chain(scaling(0.4, 0.4, 0.4), translation(0.0, 0.4, -2.0)),
            Material(
                pattern=Pattern(
                    RadialGradient(Color(0.0, 0.8, 1.0), Color(0.0, 0.5, 0.7)),
                    chain(scaling(0.21, 0.21, 0.21), rotation_x(-math.pi / 2), rotation_y(math.pi / 4)),
                ),
                specular=0.0,
            ),
        )
    )

    world.add_light(PointLight(point(-10.0, 10.0, -10.0)))

    camera = Camera.look_at(width, height, 60.0, point(0.0, 1.5, -4.0), point(0.0, 0.5, 0.0), vector(0.0, 1.0, 0.0))
    return world, camera


@_register("reflections")
def reflections(width: int, height: int) -> tuple[World, Camera]:
    """A reflective checkered floor under a mirror-like sphere and two matte ones."""
    world = World()

    world.add(
        Object(
            Plane(),
            material=Material(
                pattern=Pattern(Checkers(_solid(0.35, 0.35, 0.35), _solid(0.65, 0.65, 0.65)), translation(0.0, 0.01, 0.0)),
                specular=0.0,
                reflective=0.4,
            ),
        )
    )
    world.add(
        Object(
            Plane(),
            chain(rotation_x(math.pi / 2), translation(0.0, 0.0, 5.0)),
            Material(
                pattern=Pattern(Stripes(_solid(0.45, 0.45, 0.45), _solid(0.55, 0.55, 0.55)), scaling(0.25, 0.25, 0.25)),
                ambient=0.0,
                diffuse=0.4,
                specular=0.0,
                reflective=0.3,
            ),
        )
    )
    world.add(
        Object(
            Sphere(),
            translation(-0.6, 1.0, 0.6),
            Material.from_color(Color(0.1, 0.1, 0.15), diffuse=0.2, specular=1.0, shininess=300.0, reflective=0.9),
        )
    )
    world.add(
        Object(
            Sphere(),
            chain(scaling(0.4, 0.4, 0.4), translation(0.6, 0.4, -0.6)),
            Material.from_color(Color(1.0, 0.3, 0.2), specular=0.4, shininess=5.0),
        )
    )
    world.add(
        Object(
            Sphere(),
            chain(scaling(0.3, 0.3, 0.3), translation(-1.5, 0.3, -0.9)),
            Material.from_color(Color(0.2, 0.6, 1.0), specular=0.4, shininess=5.0),
        )
    )

    world.add_light(PointLight(point(-4.9, 4.9, -1.0)))

    camera = Camera.look_at(width, height, 66.0, point(-2.6, 1.5, -3.9), point(-0.6, 1.0, -0.8), vector(0.0, 1.0, 0.0))
    return world, camera


@_register("cube-room")
def cube_room(width: int, height: int) -> tuple[World, Camera]:
    """A table and two boxes inside a large cube seen from the inside."""
    world = World()

    # Room: the camera sits inside a big cube
    world.add(
        Object(
            Cube(),
            chain(scaling(10.0, 10.0, 10.0), translation(0.0, 10.0, 0.0)),
            Material(
                pattern=Pattern(Checkers(_solid(0.25, 0.25, 0.25), _solid(0.7, 0.7, 0.7)), scaling(0.05, 0.05, 0.05)),
                ambient=0.25,
                diffuse=0.7,
                specular=0.0,
            ),
        )
    )

    # Table top and legs
    wood = Material(
        pattern=Pattern(Stripes(_solid(0.55, 0.35, 0.2), _solid(0.45, 0.27, 0.15)), scaling(0.05, 0.05, 0.05)),
        specular=0.1,
        reflective=0.1,
    )
    world.add(Object(Cube(), chain(scaling(3.0, 0.1, 2.0), translation(0.0, 3.1, 0.0)), wood))
    for x, z in ((2.7, 1.7), (2.7, -1.7), (-2.7, 1.7), (-2.7, -1.7)):
        world.add(
            Object(
                Cube(),
                chain(scaling(0.1, 1.5, 0.1), translation(x, 1.5, z)),
                Material.from_color(Color(0.5, 0.3, 0.2), specular=0.1),
            )
        )

    # Boxes on the table
    world.add(
        Object(
            Cube(),
            chain(scaling(0.3, 0.3, 0.3), rotation_y(0.4), translation(1.0, 3.5, -0.9)),
            Material.from_color(Color(1.0, 0.5, 0.5), diffuse=0.4, reflective=0.6),
        )
    )
    world.add(
        Object(
            Cube(),
            chain(scaling(0.35, 0.35, 0.35), rotation_y(-0.5), translation(-1.2, 3.55, 0.3)),
            Material.from_color(Color(0.2, 0.6, 0.9), specular=0.4),
        )
    )

    world.add_light(PointLight(point(0.0, 6.9, -5.0), Color(1.0, 1.0, 0.9)))

    camera = Camera.look_at(width, height, 45.0, point(8.0, 6.0, -8.0), point(0.0, 3.0, 0.0), vector(0.0, 1.0, 0.0))
    return world, camera


@_register("cylinders")
def cylinders(width: int, height: int) -> tuple[World, Camera]:
    """Open and capped cylinders of various heights on a checkered floor."""
    world = World()

    world.add(
        Object(
            Plane(),
            material=Material(
                pattern=Pattern(Checkers(_solid(0.5, 0.5, 0.5), _solid(0.75, 0.75, 0.75)), chain(scaling(0.25, 0.25, 0.25), rotation_y(0.3))),
                ambient=0.2,
                diffuse=0.9,
                specular=0.0,
            ),
        )
    )

    # Capped pedestal
    world.add(
        Object(
            Cylinder(0.0, 0.75, closed=True),
            chain(scaling(0.5, 1.0, 0.5), translation(-1.0, 0.0, 1.0)),
            Material.from_color(Color(0.0, 0.0, 0.6), diffuse=0.1, specular=0.9, shininess=300.0, reflective=0.9),
        )
    )

    # Concentric open rings
    for radius, top, color in (
        (0.8, 0.2, Color(1.0, 1.0, 0.3)),
        (0.6, 0.3, Color(1.0, 0.9, 0.4)),
        (0.4, 0.4, Color(1.0, 0.8, 0.5)),
    ):
        world.add(
            Object(
                Cylinder(0.0, top),
                chain(scaling(radius, 1.0, radius), translation(1.0, 0.0, 0.0)),
                Material.from_color(color, ambient=0.1, diffuse=0.8, specular=0.9, shininess=300.0),
            )
        )

    # A rotated capped cylinder lying on its side
    world.add(
        Object(
            Cylinder(-0.5, 0.5, closed=True),
            chain(scaling(0.3, 1.0, 0.3), rotation_z(math.pi / 2), translation(0.0, 0.3, -1.0)),
            Material.from_color(Color(0.6, 0.2, 0.2), specular=0.5, reflective=0.2),
        )
    )

    world.add_light(PointLight(point(1.0, 6.9, -4.9)))

    camera = Camera.look_at(width, height, 18.0, point(8.0, 3.5, -9.0), point(0.0, 0.3, 0.0), vector(0.0, 1.0, 0.0))
    return world, camera
