"""Incremental, parallel scanline rendering.

A :class:`Stream` renders a camera's image a batch of scanlines at a time.
Each call to :meth:`Stream.advance` computes the next ``workers`` rows and
stores them in the canvas, so a caller such as a preview window can show the
picture filling in. :meth:`Stream.finalize` simply drains the stream.

Shading is pure Python, so rows are spread over worker processes rather than
threads. The camera and the world are pickled once per stream, when its
process pool starts; each worker returns its row as a NumPy array and the
driving thread stores it in the Taichi-backed canvas. With a single worker
rows are rendered in the calling process and no pool is started.

Example:
    >>> from tracy.core.stream import Stream
    >>> with Stream(camera, world, workers=4) as stream:
    ...     while stream.advance():
    ...         print(f"{stream.progress:.0%}")
    >>> canvas = stream.canvas
"""

from __future__ import annotations

import logging
import time
from collections.abc import Generator
from concurrent.futures import ProcessPoolExecutor
from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt

from tracy import config
from tracy.core.color import BLACK
from tracy.preview.canvas import Canvas

if TYPE_CHECKING:
    from tracy.camera.camera import Camera
    from tracy.scene.world import World

logger = logging.getLogger(__name__)


# =============================================================================
# Row rendering
# =============================================================================


def render_scanline(camera: Camera, world: World, y: int) -> npt.NDArray[np.float32]:
    """Render row ``y`` of the camera's image as a ``(width, 3)`` array.

    Pixels whose ray cannot be built (singular view transform) stay black.
    """
    depth = camera.recursion_limit
    row = np.zeros((camera.horizontal_size, 3), dtype=np.float32)

    for x in range(camera.horizontal_size):
        ray = camera.ray_to(x, y)
        color = world.color_at(ray, depth) if ray is not None else BLACK
        row[x] = (color.r, color.g, color.b)

    return row


# Scene of the current worker process, set once by the pool initializer
_worker_scene: tuple[Camera, World] | None = None


def _init_worker(camera: Camera, world: World) -> None:
    global _worker_scene
    _worker_scene = (camera, world)


def _render_worker_scanline(y: int) -> npt.NDArray[np.float32]:
    assert _worker_scene is not None
    camera, world = _worker_scene
    return render_scanline(camera, world, y)


# =============================================================================
# Stream
# =============================================================================


class Stream:
    """Scanline-batched renderer for one camera and world.

    The worker pool is started on the first batch and shut down once the
    last row is rendered, or by :meth:`close`. Streams are context managers;
    leaving the ``with`` block closes the pool.

    Args:
        camera: The camera; its size fixes the canvas size.
        world: The scene. Changes made after the first batch are not seen by
            the workers.
        workers: Rows rendered in parallel per batch. Defaults to
            ``TRACY_WORKERS`` (the CPU count unless overridden).

    Raises:
        ValueError: If ``workers`` is not positive.
    """

    def __init__(self, camera: Camera, world: World, workers: int | None = None) -> None:
        if workers is None:
            workers = config.WORKERS
        if workers <= 0:
            raise ValueError(f"workers must be positive, got {workers}")

        self._camera = camera
        self._world = world
        self._workers = workers
        self._canvas = Canvas(camera.horizontal_size, camera.vertical_size)
        self._next_row = 0
        self._started_at: float | None = None
        self._pool: ProcessPoolExecutor | None = None

    @property
    def canvas(self) -> Canvas:
        """The canvas being filled; rows not rendered yet are black."""
        return self._canvas

    @property
    def workers(self) -> int:
        return self._workers

    @property
    def rows_done(self) -> int:
        return self._next_row

    @property
    def total_rows(self) -> int:
        return self._canvas.height

    @property
    def progress(self) -> float:
        """Fraction of rows rendered, in [0, 1]."""
        return self._next_row / self._canvas.height

    @property
    def is_done(self) -> bool:
        return self._next_row >= self._canvas.height

    def advance(self) -> bool:
        """Render the next batch of rows.

        Returns:
            True if a batch was rendered, False if every row was already done.
        """
        if self.is_done:
            return False

        if self._started_at is None:
            self._started_at = time.perf_counter()
            logger.info(
                "Rendering %dx%d image with %d workers",
                self._canvas.width,
                self._canvas.height,
                self._workers,
            )

        start = self._next_row
        stop = min(start + self._workers, self._canvas.height)
        rows = range(start, stop)

        if self._workers == 1:
            scanlines = [render_scanline(self._camera, self._world, y) for y in rows]
        else:
            scanlines = list(self._get_pool().map(_render_worker_scanline, rows))

        for y, scanline in zip(rows, scanlines):
            self._canvas.put_scanline(y, scanline)

        self._next_row = stop
        logger.debug("Rendered rows %d-%d of %d", start, stop - 1, self._canvas.height)

        if self.is_done:
            self.close()
            elapsed = time.perf_counter() - self._started_at
            logger.info("Rendered %d rows in %.2fs", self._canvas.height, elapsed)

        return True

    def finalize(self) -> Canvas:
        """Render every remaining row and return the finished canvas."""
        try:
            while self.advance():
                pass
        finally:
            self.close()
        return self._canvas

    def render_progressive(self) -> Generator[tuple[int, int], None, None]:
        """Render batch by batch, yielding progress after each one.

        Yields:
            Tuple of (rows_done, total_rows).
        """
        try:
            while self.advance():
                yield (self._next_row, self._canvas.height)
        finally:
            self.close()

    def close(self) -> None:
        """Shut down the worker pool. Rows already rendered are kept."""
        if self._pool is not None:
            self._pool.shutdown(wait=True, cancel_futures=True)
            self._pool = None

    def _get_pool(self) -> ProcessPoolExecutor:
        if self._pool is None:
            self._pool = ProcessPoolExecutor(
                max_workers=min(self._workers, self._canvas.height),
                initializer=_init_worker,
                initargs=(self._camera, self._world),
            )
        return self._pool

    def __enter__(self) -> Stream:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"Stream(rows_done={self._next_row}, total_rows={self._canvas.height}, "
            f"workers={self._workers})"
        )
