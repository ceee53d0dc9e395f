"""YAML scene files.

A scene file describes a camera, its lights and its objects::

    camera:
      width: 400
      height: 200
      fov: 60                      # degrees
      from: [0, 1.5, -5]
      to: [0, 1, 0]
      up: [0, 1, 0]

    lights:
      - position: [-10, 10, -10]
        color: [1, 1, 1]           # optional
        intensity: 1               # optional

    objects:
      - shape: Sphere              # or {Plane:}, {Cube:}, {Cylinder: {bottom, top, closed}}
        transform:                 # applied in list order
          - [scale, 0.5, 0.5, 0.5]
          - [rotate-y, 45]         # degrees
          - [translate, 1, 0.5, 0]
        material:
          pattern:
            kind:
              stripes:
                - kind: {solid: [1, 1, 1]}
                - kind: {solid: [0, 0.7, 0]}
            transform:
              - [scale, 0.25, 0.25, 0.25]
          diffuse: 0.7
          reflective: 0.2

Pattern kinds are ``solid: [r, g, b]``, ``stripes``/``rings``/``checkers``/
``blended`` with two nested patterns, ``linear-gradient``/``radial-gradient``
with two colors, and ``test``. A top-level ``definitions`` key is ignored so
it can hold YAML anchors shared by several objects.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from tracy.camera.camera import Camera
from tracy.core.color import Color
from tracy.core.matrix import (
    Matrix,
    chain,
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    shearing,
    translation,
)
from tracy.core.tuples import Tuple4, point, vector
from tracy.geometry import Cube, Cylinder, Plane, Shape, Sphere
from tracy.materials.light import PointLight
from tracy.materials.material import Material
from tracy.materials.pattern import (
    Blended,
    Checkers,
    LinearGradient,
    Pattern,
    RadialGradient,
    Rings,
    Solid,
    Stripes,
    Test,
)
from tracy.scene.object import Object
from tracy.scene.world import World

logger = logging.getLogger(__name__)


class SceneError(ValueError):
    """Raised when a scene description is malformed."""


# =============================================================================
# Loading
# =============================================================================


def load_scene(path: str | Path) -> tuple[World, Camera]:
    """Read a YAML scene file.

    Args:
        path: Path to the scene file.

    Returns:
        The world and the camera it describes.

    Raises:
        SceneError: If the file is not valid YAML or not a valid scene.
    """
    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise SceneError(f"{path}: invalid YAML: {e}") from e

    world, camera = parse_scene(data)
    logger.info(
        "Loaded scene %s: %d objects, %d lights, %dx%d",
        path,
        len(world.objects),
        len(world.lights),
        camera.horizontal_size,
        camera.vertical_size,
    )
    return world, camera


def parse_scene(data: Any) -> tuple[World, Camera]:
    """Build a world and a camera from an already-parsed scene mapping.

    Raises:
        SceneError: If a key is missing or has the wrong shape.
    """
    if not isinstance(data, Mapping):
        raise SceneError("Scene must be a mapping with 'camera', 'lights' and 'objects'")

    if "camera" not in data:
        raise SceneError("Scene is missing 'camera'")
    camera = _parse_camera(data["camera"])

    world = World()
    for i, light in enumerate(data.get("lights") or []):
        world.add_light(_parse_light(light, f"lights[{i}]"))
    for i, obj in enumerate(data.get("objects") or []):
        world.add(_parse_object(obj, f"objects[{i}]"))

    if not world.lights:
        logger.warning("Scene has no lights; every object will render black")

    return world, camera


# =============================================================================
# Camera and lights
# =============================================================================


def _parse_camera(data: Any) -> Camera:
    _require_mapping(data, "camera")
    try:
        width = int(data["width"])
        height = int(data["height"])
        fov = float(data["fov"])
    except KeyError as e:
        raise SceneError(f"camera: missing key {e}") from e
    except (TypeError, ValueError) as e:
        raise SceneError(f"camera: {e}") from e

    from_ = _parse_point(data.get("from", [0, 0, 0]), "camera.from")
    to = _parse_point(data.get("to", [0, 0, -1]), "camera.to")
    up = _parse_vector(data.get("up", [0, 1, 0]), "camera.up")

    try:
        return Camera.look_at(width, height, fov, from_, to, up)
    except ValueError as e:
        raise SceneError(f"camera: {e}") from e


def _parse_light(data: Any, where: str) -> PointLight:
    _require_mapping(data, where)
    if "position" not in data:
        raise SceneError(f"{where}: missing 'position'")

    light = PointLight(_parse_point(data["position"], f"{where}.position"))
    if "color" in data:
        light.color = _parse_color(data["color"], f"{where}.color")
    if "intensity" in data:
        light.intensity = _parse_float(data["intensity"], f"{where}.intensity")
    return light


# =============================================================================
# Objects
# =============================================================================


def _parse_object(data: Any, where: str) -> Object:
    _require_mapping(data, where)
    if "shape" not in data:
        raise SceneError(f"{where}: missing 'shape'")

    shape = _parse_shape(data["shape"], f"{where}.shape")
    transform = _parse_transform(data.get("transform") or [], f"{where}.transform")
    material = _parse_material(data.get("material") or {}, f"{where}.material")
    return Object(shape, transform, material)


def _parse_shape(data: Any, where: str) -> Shape:
    # Either a bare name or a single-key mapping {Name: options}
    if isinstance(data, str):
        name, options = data, None
    elif isinstance(data, Mapping) and len(data) == 1:
        name, options = next(iter(data.items()))
    else:
        raise SceneError(f"{where}: expected a shape name or a single-key mapping")

    if name == "Sphere":
        return Sphere()
    if name == "Plane":
        return Plane()
    if name == "Cube":
        return Cube()
    if name == "Cylinder":
        options = options or {}
        _require_mapping(options, where)
        return Cylinder(
            bottom=_parse_float(options.get("bottom", -math.inf), f"{where}.bottom"),
            top=_parse_float(options.get("top", math.inf), f"{where}.top"),
            closed=bool(options.get("closed", False)),
        )
    raise SceneError(f"{where}: unknown shape {name!r}")


_TRANSFORMS: dict[str, tuple[int, Callable[..., Matrix]]] = {
    "translate": (3, translation),
    "scale": (3, scaling),
    "rotate-x": (1, lambda deg: rotation_x(math.radians(deg))),
    "rotate-y": (1, lambda deg: rotation_y(math.radians(deg))),
    "rotate-z": (1, lambda deg: rotation_z(math.radians(deg))),
    "shear": (6, shearing),
}


def _parse_transform(data: Any, where: str) -> Matrix:
    if not isinstance(data, Sequence) or isinstance(data, str):
        raise SceneError(f"{where}: expected a list of transforms")

    steps = []
    for i, step in enumerate(data):
        if not isinstance(step, Sequence) or isinstance(step, str) or not step:
            raise SceneError(f"{where}[{i}]: expected [operation, args...]")

        op, *args = step
        if op not in _TRANSFORMS:
            raise SceneError(f"{where}[{i}]: unknown transform {op!r}")

        arity, build = _TRANSFORMS[op]
        if len(args) != arity:
            raise SceneError(f"{where}[{i}]: {op} takes {arity} arguments, got {len(args)}")
        steps.append(build(*(_parse_float(a, f"{where}[{i}]") for a in args)))

    return chain(*steps) if steps else Matrix.identity()


# =============================================================================
# Materials and patterns
# =============================================================================

_MATERIAL_FIELDS = (
    "ambient",
    "diffuse",
    "specular",
    "shininess",
    "reflective",
    "transparency",
    "refractive_index",
)


def _parse_material(data: Any, where: str) -> Material:
    _require_mapping(data, where)

    material = Material()
    if "pattern" in data:
        material.pattern = _parse_pattern(data["pattern"], f"{where}.pattern")

    for name in _MATERIAL_FIELDS:
        if name in data:
            setattr(material, name, _parse_float(data[name], f"{where}.{name}"))

    unknown = set(data) - set(_MATERIAL_FIELDS) - {"pattern"}
    if unknown:
        raise SceneError(f"{where}: unknown keys {sorted(unknown)}")

    return material


def _parse_pattern(data: Any, where: str) -> Pattern:
    _require_mapping(data, where)
    if "kind" not in data:
        raise SceneError(f"{where}: missing 'kind'")

    kind = data["kind"]
    transform = _parse_transform(data.get("transform") or [], f"{where}.transform")

    if kind == "test":
        return Pattern(Test(), transform)
    if not isinstance(kind, Mapping) or len(kind) != 1:
        raise SceneError(f"{where}.kind: expected a single-key mapping")

    name, args = next(iter(kind.items()))
    at = f"{where}.kind.{name}"

    if name == "solid":
        return Pattern(Solid(_parse_color(args, at)), transform)

    if name in ("stripes", "rings", "checkers", "blended"):
        a, b = _pair(args, at)
        children = (_parse_pattern(a, f"{at}[0]"), _parse_pattern(b, f"{at}[1]"))
        cls = {"stripes": Stripes, "rings": Rings, "checkers": Checkers, "blended": Blended}[name]
        return Pattern(cls(*children), transform)

    if name in ("linear-gradient", "radial-gradient"):
        a, b = _pair(args, at)
        colors = (_parse_color(a, f"{at}[0]"), _parse_color(b, f"{at}[1]"))
        cls = LinearGradient if name == "linear-gradient" else RadialGradient
        return Pattern(cls(*colors), transform)

    raise SceneError(f"{where}: unknown pattern kind {name!r}")


# =============================================================================
# Scalars and tuples
# =============================================================================


def _require_mapping(data: Any, where: str) -> None:
    if not isinstance(data, Mapping):
        raise SceneError(f"{where}: expected a mapping, got {type(data).__name__}")


def _pair(data: Any, where: str) -> tuple[Any, Any]:
    if not isinstance(data, Sequence) or isinstance(data, str) or len(data) != 2:
        raise SceneError(f"{where}: expected a list of two entries")
    return data[0], data[1]


def _parse_float(value: Any, where: str) -> float:
    # bool is an int subclass but never a valid number here
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SceneError(f"{where}: expected a number, got {value!r}")
    return float(value)


def _parse_triple(data: Any, where: str) -> tuple[float, float, float]:
    if not isinstance(data, Sequence) or isinstance(data, str) or len(data) != 3:
        raise SceneError(f"{where}: expected a list of three numbers")
    x, y, z = (_parse_float(v, where) for v in data)
    return x, y, z


def _parse_point(data: Any, where: str) -> Tuple4:
    return point(*_parse_triple(data, where))


def _parse_vector(data: Any, where: str) -> Tuple4:
    return vector(*_parse_triple(data, where))


def _parse_color(data: Any, where: str) -> Color:
    return Color(*_parse_triple(data, where))
