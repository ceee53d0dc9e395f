"""Matplotlib preview of rendered canvases.

Phong shading is additive, so canvases routinely hold channel values above 1.
Everything shown on screen goes through :func:`process_image_for_display`,
which clamps to [0, 1] and then applies gamma.

Example:
    >>> from tracy.preview.display import show_preview
    >>> canvas = camera.render(world)
    >>> show_preview(canvas, gamma=2.2)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt

if TYPE_CHECKING:
    from tracy.preview.canvas import Canvas


def apply_gamma(
    image: npt.NDArray[np.float32],
    gamma: float = 2.2,
) -> npt.NDArray[np.float32]:
    """Encode a linear image with ``out = in ** (1 / gamma)``.

    Args:
        image: Linear image array of shape (H, W, 3).
        gamma: Gamma value; 1.0 returns the image unchanged.

    Returns:
        Gamma-encoded image, clamped to [0, 1] unless gamma is 1.0.
    """
    if gamma == 1.0:
        return image

    # Negative values would produce NaN
    image = np.clip(image, 0.0, 1.0)
    return np.power(image, 1.0 / gamma).astype(np.float32)


def process_image_for_display(
    image: npt.NDArray[np.float32],
    gamma: float = 1.0,
) -> npt.NDArray[np.float32]:
    """Clamp a linear image to [0, 1] and gamma-encode it.

    Args:
        image: Linear image array of shape (H, W, 3).
        gamma: Gamma value (1.0 keeps linear values).

    Returns:
        A new float32 array in [0, 1].
    """
    result = np.clip(np.asarray(image, dtype=np.float32), 0.0, 1.0)
    result = apply_gamma(result, gamma)
    return result.astype(np.float32)


def show_preview(
    canvas: Canvas,
    *,
    gamma: float = 1.0,
    title: str | None = None,
    figsize: tuple[float, float] = (8, 8),
    block: bool = True,
) -> None:
    """Display a canvas in a Matplotlib figure.

    Args:
        canvas: The rendered canvas.
        gamma: Gamma applied for display.
        title: Figure title. Defaults to the image size.
        figsize: Figure size in inches.
        block: Whether to block until the figure is closed.
    """
    import matplotlib.pyplot as plt

    display_image = process_image_for_display(canvas.to_numpy(), gamma=gamma)

    fig, ax = plt.subplots(1, 1, figsize=figsize)
    ax.imshow(display_image)
    ax.axis("off")
    ax.set_title(title if title is not None else f"Render Preview - {canvas.width}x{canvas.height}")

    plt.tight_layout()
    plt.show(block=block)


def show_comparison(
    image_a: npt.NDArray[np.float32],
    image_b: npt.NDArray[np.float32],
    *,
    labels: tuple[str, str] = ("A", "B"),
    gamma: float = 1.0,
    diff_scale: float = 10.0,
    figsize: tuple[float, float] = (16, 6),
    block: bool = True,
) -> float:
    """Show two images side by side with their amplified difference.

    Args:
        image_a: First image (H, W, 3), linear.
        image_b: Second image, same shape.
        labels: Titles of the two images.
        gamma: Gamma applied for display.
        diff_scale: Multiplier applied to the absolute difference.
        figsize: Figure size in inches.
        block: Whether to block until the figure is closed.

    Returns:
        RMSE between the two images in display space.

    Raises:
        ValueError: If the shapes differ.
    """
    import matplotlib.pyplot as plt

    from tracy.preview.export import compute_rmse

    display_a = process_image_for_display(image_a, gamma=gamma)
    display_b = process_image_for_display(image_b, gamma=gamma)
    rmse = compute_rmse(display_a, display_b)

    diff = np.clip(np.abs(display_a - display_b) * diff_scale, 0.0, 1.0)

    fig, axes = plt.subplots(1, 3, figsize=figsize)
    panels = [(display_a, labels[0]), (display_b, labels[1]), (diff, f"Difference ({diff_scale}x) - RMSE: {rmse:.6f}")]
    for ax, (image, label) in zip(axes, panels):
        ax.imshow(image)
        ax.set_title(label)
        ax.axis("off")

    plt.tight_layout()
    plt.show(block=block)

    return rmse
