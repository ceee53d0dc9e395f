"""Perspective camera mapping pixels to world-space rays.

The camera looks down ``-z`` in its own frame, with an image plane one unit in
front of the eye. ``field_of_view`` spans the longer image side; the derived
``half_width``, ``half_height`` and ``pixel_size`` are recomputed whenever the
size or the field of view changes.

The view transform maps world space to camera space (see
:func:`~tracy.core.matrix.view_transform`). Its inverse is computed when the
transform is assigned; a singular view transform is logged once and makes
:meth:`Camera.ray_to` return None.

Example:
    >>> import math
    >>> from tracy.camera import Camera
    >>> camera = Camera(201, 101, math.pi / 2)
    >>> ray = camera.ray_to(100, 50)
    >>> ray.direction
    Tuple4(x=0.0, y=0.0, z=-1.0, w=0.0)
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from tracy.core.matrix import Matrix, view_transform
from tracy.core.ray import Ray
from tracy.core.settings import DEFAULT_RECURSION_DEPTH
from tracy.core.tuples import Tuple4, point

if TYPE_CHECKING:
    from tracy.core.stream import Stream
    from tracy.preview.canvas import Canvas
    from tracy.scene.world import World

logger = logging.getLogger(__name__)


class Camera:
    """A pinhole camera.

    Args:
        hsize: Image width in pixels.
        vsize: Image height in pixels.
        field_of_view: Angle covered by the longer side, in radians.
        transform: World-to-camera view transform. Defaults to identity.

    Raises:
        ValueError: If either size is not positive.
    """

    def __init__(
        self,
        hsize: int,
        vsize: int,
        field_of_view: float,
        transform: Matrix | None = None,
    ) -> None:
        self._check_size(hsize, vsize)
        self._hsize = hsize
        self._vsize = vsize
        self._fov = field_of_view
        self.recursion_limit = DEFAULT_RECURSION_DEPTH
        self.view_transform = transform if transform is not None else Matrix.identity()
        self._update()

    @classmethod
    def look_at(
        cls,
        width: int,
        height: int,
        fov_degrees: float,
        from_: Tuple4,
        to: Tuple4,
        up: Tuple4,
    ) -> Camera:
        """Create a camera at ``from_`` looking toward ``to``.

        Args:
            width: Image width in pixels.
            height: Image height in pixels.
            fov_degrees: Field of view in degrees.
            from_: Eye position.
            to: Point the camera looks at.
            up: Approximate up direction.
        """
        return cls(width, height, math.radians(fov_degrees), view_transform(from_, to, up))

    # -------------------------------------------------------------------------
    # Parameters
    # -------------------------------------------------------------------------

    @property
    def horizontal_size(self) -> int:
        return self._hsize

    @property
    def vertical_size(self) -> int:
        return self._vsize

    def set_size(self, hsize: int, vsize: int) -> None:
        self._check_size(hsize, vsize)
        self._hsize = hsize
        self._vsize = vsize
        self._update()

    @property
    def field_of_view(self) -> float:
        return self._fov

    @field_of_view.setter
    def field_of_view(self, radians: float) -> None:
        self._fov = radians
        self._update()

    @property
    def view_transform(self) -> Matrix:
        return self._transform

    @view_transform.setter
    def view_transform(self, m: Matrix) -> None:
        self._transform = m
        self._inverse = m.inverse()
        if self._inverse is None:
            logger.warning("Camera view transform is not invertible; no rays will be cast")

    @property
    def pixel_size(self) -> float:
        return self._pixel_size

    @property
    def half_width(self) -> float:
        return self._half_width

    @property
    def half_height(self) -> float:
        return self._half_height

    # -------------------------------------------------------------------------
    # Rays and rendering
    # -------------------------------------------------------------------------

    def ray_to(self, x: int, y: int) -> Ray | None:
        """Return the ray from the eye through the center of pixel ``(x, y)``.

        Returns:
            A ray with a unit direction, or None if the view transform is not
            invertible.
        """
        if self._inverse is None:
            return None

        # Offset from the canvas edge to the pixel center
        xoffset = (x + 0.5) * self._pixel_size
        yoffset = (y + 0.5) * self._pixel_size

        # The camera looks toward -z, so +x is to the left
        world_x = self._half_width - xoffset
        world_y = self._half_height - yoffset

        pixel = self._inverse * point(world_x, world_y, -1.0)
        origin = self._inverse * point(0.0, 0.0, 0.0)
        return Ray(origin, (pixel - origin).normalize())

    def stream(self, world: World, workers: int | None = None) -> Stream:
        """Return a :class:`~tracy.core.stream.Stream` rendering ``world`` row batch by row batch."""
        from tracy.core.stream import Stream

        return Stream(self, world, workers)

    def render(self, world: World, workers: int | None = None) -> Canvas:
        """Render ``world`` completely and return the canvas."""
        return self.stream(world, workers).finalize()

    def _update(self) -> None:
        half_view = math.tan(self._fov / 2.0)
        aspect = self._hsize / self._vsize

        if aspect >= 1.0:
            self._half_width = half_view
            self._half_height = half_view / aspect
        else:
            self._half_width = half_view * aspect
            self._half_height = half_view

        self._pixel_size = self._half_width * 2.0 / self._hsize

    @staticmethod
    def _check_size(hsize: int, vsize: int) -> None:
        if hsize <= 0 or vsize <= 0:
            raise ValueError(f"Camera size must be positive, got {hsize}x{vsize}")

    def __repr__(self) -> str:
        return (
            f"Camera(hsize={self._hsize}, vsize={self._vsize}, "
            f"field_of_view={self._fov:.4f})"
        )
