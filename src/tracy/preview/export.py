"""Image export for rendered canvases.

Supported formats:
    - PPM (plain-text ``P3``), written directly
    - PNG and anything else Pillow can write, chosen by file suffix

Channels are encoded to 8 bits with :meth:`~tracy.core.color.Color.to_rgb888`:
scaled by 255, clamped to [0, 255] and rounded.

Example:
    >>> from tracy.preview.export import save_canvas
    >>> canvas = camera.render(world)
    >>> save_canvas(canvas, "render.ppm")
    >>> save_canvas(canvas, "render.png", gamma=2.2)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

from tracy.core.color import Color
from tracy.preview.display import apply_gamma

if TYPE_CHECKING:
    from tracy.preview.canvas import Canvas

logger = logging.getLogger(__name__)

# Longest line allowed in a plain PPM file
PPM_MAX_LINE_LENGTH = 70


def canvas_to_ppm(canvas: Canvas) -> str:
    """Encode a canvas as a plain ``P3`` PPM document.

    Each pixel row starts on a new line; rows are wrapped so that no line
    exceeds 70 characters. The document ends with a newline.
    """
    lines = ["P3", f"{canvas.width} {canvas.height}", "255"]

    image = canvas.to_numpy()
    for row in image:
        line = ""
        for r, g, b in row:
            for value in Color(float(r), float(g), float(b)).to_rgb888():
                token = str(value)
                if not line:
                    line = token
                elif len(line) + 1 + len(token) > PPM_MAX_LINE_LENGTH:
                    lines.append(line)
                    line = token
                else:
                    line = f"{line} {token}"
        lines.append(line)

    return "\n".join(lines) + "\n"


def save_ppm(canvas: Canvas, filepath: str | Path) -> None:
    """Write a canvas as a plain PPM file."""
    Path(filepath).write_text(canvas_to_ppm(canvas), encoding="ascii")


def canvas_to_uint8(canvas: Canvas, *, gamma: float = 1.0) -> npt.NDArray[np.uint8]:
    """Convert a canvas to an 8-bit ``(height, width, 3)`` array.

    Args:
        canvas: The rendered canvas.
        gamma: Gamma applied before quantization (1.0 keeps linear values).
    """
    image = np.clip(canvas.to_numpy(), 0.0, 1.0)
    image = apply_gamma(image, gamma)
    # Halves round up, matching Color.to_rgb888
    return np.floor(image * 255.0 + 0.5).astype(np.uint8)


def save_png(canvas: Canvas, filepath: str | Path, *, gamma: float = 1.0) -> None:
    """Save a canvas with Pillow; the format follows the file suffix.

    Args:
        canvas: The rendered canvas.
        filepath: Output path, e.g. ``"render.png"``.
        gamma: Gamma applied before quantization.
    """
    pil_image = PILImage.fromarray(canvas_to_uint8(canvas, gamma=gamma))
    pil_image.save(filepath)


def save_canvas(canvas: Canvas, filepath: str | Path, *, gamma: float = 1.0) -> Path:
    """Save a canvas, writing PPM for ``.ppm`` paths and using Pillow otherwise.

    Returns:
        The path written.
    """
    path = Path(filepath)
    if path.suffix.lower() == ".ppm":
        if gamma != 1.0:
            logger.warning("Gamma is ignored for PPM output")
        save_ppm(canvas, path)
    else:
        save_png(canvas, path, gamma=gamma)

    logger.info("Saved %dx%d image to %s", canvas.width, canvas.height, path)
    return path


def compute_rmse(
    image_a: npt.NDArray[np.floating[npt.NBitBase]],
    image_b: npt.NDArray[np.floating[npt.NBitBase]],
) -> float:
    """Compute the root mean squared error between two images.

    Raises:
        ValueError: If the shapes differ.
    """
    if image_a.shape != image_b.shape:
        raise ValueError(f"Image shapes must match: {image_a.shape} vs {image_b.shape}")

    diff = image_a.astype(np.float64) - image_b.astype(np.float64)
    return float(np.sqrt(np.mean(diff**2)))
