"""Pixel buffer backed by a Taichi field.

The canvas stores linear float RGB values, unbounded above, in a
``ti.Vector.field(3, ti.f32, shape=(width, height))``. Pixel ``(0, 0)`` is the
top-left corner, matching the camera's pixel addressing; :meth:`Canvas.to_numpy`
returns the conventional ``(height, width, 3)`` image layout.

Whole rows are written with a Taichi kernel. Kernels must be launched from
the thread that owns the canvas, so render workers hand back NumPy rows and
the driving thread stores them.

Example:
    >>> from tracy.core.color import Color
    >>> from tracy.preview.canvas import Canvas
    >>> canvas = Canvas(10, 20)
    >>> canvas.put(2, 3, Color(1.0, 0.0, 0.0))
    >>> canvas.get(2, 3)
    Color(r=1.0, g=0.0, b=0.0)
"""

from collections.abc import Iterator

import numpy as np
import numpy.typing as npt
import taichi as ti

from tracy.core.backend import init_backend
from tracy.core.color import Color


@ti.kernel
def _store_scanline(
    pixels: ti.template(),
    y: ti.i32,
    row: ti.types.ndarray(dtype=ti.f32, ndim=2),
):
    """Copy an (width, 3) array into row ``y`` of the pixel field."""
    for x in range(row.shape[0]):
        pixels[x, y] = ti.Vector([row[x, 0], row[x, 1], row[x, 2]])


class Canvas:
    """A width x height grid of colors, black at creation.

    Args:
        width: Number of columns.
        height: Number of rows.

    Raises:
        ValueError: If either dimension is not positive.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas dimensions must be positive, got {width}x{height}")

        init_backend()
        self._width = width
        self._height = height
        self._pixels = ti.Vector.field(3, dtype=ti.f32, shape=(width, height))
        self._pixels.fill(0.0)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def field(self) -> "ti.MatrixField":
        """The underlying Taichi field, indexed ``[x, y]``."""
        return self._pixels

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def put(self, x: int, y: int, color: Color) -> None:
        """Set a pixel. Writes outside the canvas are ignored."""
        if not self.in_bounds(x, y):
            return
        self._pixels[x, y] = [color.r, color.g, color.b]

    def get(self, x: int, y: int) -> Color | None:
        """Return a pixel, or None outside the canvas."""
        if not self.in_bounds(x, y):
            return None
        value = self._pixels[x, y]
        return Color(float(value[0]), float(value[1]), float(value[2]))

    def put_scanline(self, y: int, row: npt.ArrayLike) -> None:
        """Store a whole row of pixels.

        Args:
            y: Row index. Rows outside the canvas are ignored.
            row: Array of shape ``(width, 3)``.

        Raises:
            ValueError: If ``row`` does not have shape ``(width, 3)``.
        """
        data = np.ascontiguousarray(row, dtype=np.float32)
        if data.shape != (self._width, 3):
            raise ValueError(f"Scanline must have shape ({self._width}, 3), got {data.shape}")
        if not 0 <= y < self._height:
            return
        _store_scanline(self._pixels, y, data)

    def scanline(self, y: int) -> npt.NDArray[np.float32]:
        """Return row ``y`` as a ``(width, 3)`` array."""
        return self.to_numpy()[y]

    def fill(self, color: Color) -> None:
        self._pixels.fill([color.r, color.g, color.b])

    def to_numpy(self) -> npt.NDArray[np.float32]:
        """Return the pixels as a ``(height, width, 3)`` float32 array."""
        # Field layout is (width, height, 3)
        return np.ascontiguousarray(np.transpose(self._pixels.to_numpy(), (1, 0, 2)))

    def __iter__(self) -> Iterator[Color]:
        """Yield colors row by row, top to bottom, left to right."""
        image = self.to_numpy()
        for row in image:
            for r, g, b in row:
                yield Color(float(r), float(g), float(b))

    def __repr__(self) -> str:
        return f"Canvas(width={self._width}, height={self._height})"
