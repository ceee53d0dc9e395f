"""Interactive preview window using Taichi GGUI.

The window shows a :class:`~tracy.core.stream.Stream` filling in: each frame
renders one more batch of scanlines, copies the canvas into the display field
and presents it. Once the stream is done the final image stays on screen until
the window is closed.

Example:
    >>> from tracy.preview.interactive import InteractivePreview
    >>> preview = InteractivePreview(camera.horizontal_size, camera.vertical_size)
    >>> preview.run_stream(camera.stream(world))
"""

import logging
import os
from datetime import datetime
from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt
import taichi as ti

from tracy.core.backend import init_backend

if TYPE_CHECKING:
    from tracy.core.stream import Stream
    from tracy.preview.canvas import Canvas

logger = logging.getLogger(__name__)


@ti.kernel
def _copy_canvas(src: ti.template(), dst: ti.template(), height: ti.i32, inv_gamma: ti.f32):
    """Copy a top-left-origin canvas into a bottom-left-origin display field."""
    for i, j in src:
        c = ti.math.clamp(src[i, j], 0.0, 1.0)
        dst[i, height - 1 - j] = c**inv_gamma


class InteractivePreview:
    """A Taichi GGUI window displaying a canvas.

    The window itself is created lazily, on the first frame, so the object can
    be built and fed images without a display.

    Args:
        width: Window width in pixels.
        height: Window height in pixels.
        title: Window title.
        gamma: Gamma applied to canvases shown in the window.

    Attributes:
        display_image: Taichi field holding the displayed RGB values,
            indexed ``[x, y]`` with ``y`` pointing up.
    """

    def __init__(
        self,
        width: int,
        height: int,
        *,
        title: str = "Tracy - Interactive Preview",
        gamma: float = 1.0,
    ) -> None:
        init_backend()
        self.width = width
        self.height = height
        self.gamma = gamma
        self._title = title
        self._window: "ti.ui.Window | None" = None
        self._canvas: "ti.ui.Canvas | None" = None

        self.display_image: "ti.MatrixField" = ti.Vector.field(3, dtype=ti.f32, shape=(width, height))

    def _initialize_window(self) -> None:
        if self._window is not None:
            return

        self._window = ti.ui.Window(name=self._title, res=(self.width, self.height), vsync=True)
        self._canvas = self._window.get_canvas()

    @property
    def window(self) -> "ti.ui.Window":
        self._initialize_window()
        assert self._window is not None
        return self._window

    def update_image(self, image: npt.NDArray[np.float32]) -> None:
        """Show a ``(height, width, 3)`` image with values in [0, 1].

        Raises:
            ValueError: If the shape does not match the window.
        """
        expected_shape = (self.height, self.width, 3)
        if image.shape != expected_shape:
            raise ValueError(f"Image shape {image.shape} doesn't match expected {expected_shape}")

        # NumPy rows go top-down, GGUI rows bottom-up
        flipped = np.ascontiguousarray(np.transpose(np.flipud(image), (1, 0, 2)), dtype=np.float32)
        self.display_image.from_numpy(flipped)

    def update_from_canvas(self, canvas: "Canvas") -> None:
        """Copy a canvas of the window's size into the display field.

        Raises:
            ValueError: If the canvas size does not match the window.
        """
        if (canvas.width, canvas.height) != (self.width, self.height):
            raise ValueError(
                f"Canvas size {canvas.width}x{canvas.height} doesn't match "
                f"window size {self.width}x{self.height}"
            )
        _copy_canvas(canvas.field, self.display_image, self.height, 1.0 / self.gamma)

    def is_running(self) -> bool:
        return self.window.running

    def show_frame(self) -> None:
        """Present the current display field."""
        self._initialize_window()
        assert self._canvas is not None
        self._canvas.set_image(self.display_image)
        self.window.show()

    def run(self) -> None:
        """Show the display field until the window is closed."""
        while self.is_running():
            self.show_frame()

    def run_stream(self, stream: "Stream") -> None:
        """Render a stream one batch per frame, then keep showing the result.

        Blocks until the window is closed. Closing the window early leaves the
        stream partially rendered and shuts down its worker processes.
        """
        while self.is_running():
            if stream.advance():
                self.update_from_canvas(stream.canvas)
            self._draw_gui_panel(stream)
            self.show_frame()

        if not stream.is_done:
            logger.info("Preview closed at %.0f%% of the image", stream.progress * 100.0)
            stream.close()

    def _draw_gui_panel(self, stream: "Stream") -> None:
        with self.window.GUI.sub_window("Render", 0.02, 0.02, 0.3, 0.12) as gui:
            gui.text(f"Rows: {stream.rows_done}/{stream.total_rows}")
            if gui.button("Export PNG"):
                self._export_png(stream.canvas)

    def _export_png(self, canvas: "Canvas") -> None:
        from tracy.preview.export import save_canvas

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        save_canvas(canvas, f"tracy_{timestamp}.png", gamma=self.gamma)

    def close(self) -> None:
        if self._window is not None:
            self._window.running = False

    @staticmethod
    def is_display_available() -> bool:
        """Check whether a GUI window can be opened.

        Returns:
            False in headless environments (no X11/Wayland on Linux, SSH
            without forwarding on macOS).
        """
        display = os.environ.get("DISPLAY")
        wayland = os.environ.get("WAYLAND_DISPLAY")

        if os.name == "nt":
            return True

        if os.uname().sysname == "Darwin":
            return not (os.environ.get("SSH_CONNECTION") and not display)

        return bool(display or wayland)
