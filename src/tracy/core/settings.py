"""Rendering constants and per-run settings.

Constants:
    EPSILON: Tolerance for approximate equality and the offset used for
        over/under points. It must exceed floating-point round-off at world
        scale, otherwise surfaces shadow themselves ("acne").
    DEFAULT_RECURSION_DEPTH: Reflection bounces allowed per camera ray.
"""

from dataclasses import dataclass

from tracy import config

# Tolerance for comparisons and surface offsets
EPSILON = 1e-4

# Maximum reflection bounces per primary ray
DEFAULT_RECURSION_DEPTH = 5


@dataclass
class RenderSettings:
    """Per-run rendering options, usually filled from the command line.

    Attributes:
        width: Output width in pixels.
        height: Output height in pixels.
        workers: Scanlines rendered in parallel per stream batch.
        recursion_depth: Reflection bounces allowed per camera ray.
        gamma: Gamma applied when exporting 8-bit images (1.0 = linear).
        output: Output file path; the suffix selects PPM or PNG.
    """

    width: int = 400
    height: int = 200
    workers: int = config.WORKERS
    recursion_depth: int = DEFAULT_RECURSION_DEPTH
    gamma: float = 1.0
    output: str = "render.png"

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Image dimensions must be positive, got {self.width}x{self.height}"
            )
        if self.workers <= 0:
            raise ValueError(f"workers must be positive, got {self.workers}")
        if self.recursion_depth < 0:
            raise ValueError(
                f"recursion_depth must not be negative, got {self.recursion_depth}"
            )
        if self.gamma <= 0.0:
            raise ValueError(f"gamma must be positive, got {self.gamma}")
