"""Preview module for pixel storage, output and visualization.

Components:
    canvas: Taichi-backed pixel buffer the camera renders into
    export: PPM and Pillow-based image export
    display: Matplotlib-based static preview
    interactive: Taichi GGUI window showing a stream as it renders

Canvases hold linear, unclamped colors. Export and display clamp to [0, 1]
and optionally apply gamma.
"""

from tracy.preview.canvas import Canvas
from tracy.preview.display import (
    apply_gamma,
    process_image_for_display,
    show_comparison,
    show_preview,
)
from tracy.preview.export import (
    canvas_to_ppm,
    canvas_to_uint8,
    compute_rmse,
    save_canvas,
    save_png,
    save_ppm,
)
from tracy.preview.interactive import InteractivePreview

__all__ = [
    # Pixel buffer
    "Canvas",
    # Interactive preview
    "InteractivePreview",
    # Display functions
    "show_preview",
    "show_comparison",
    "apply_gamma",
    "process_image_for_display",
    # Export functions
    "canvas_to_ppm",
    "canvas_to_uint8",
    "save_ppm",
    "save_png",
    "save_canvas",
    "compute_rmse",
]
