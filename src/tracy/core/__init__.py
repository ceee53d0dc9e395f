"""Core module for ray tracing primitives.

This module provides the fundamental building blocks for the ray tracer:

Components:
    tuples: Homogeneous points and vectors
    matrix: Square matrices, inversion and transform constructors
    color: Float RGB colors and 8-bit encoding
    ray: Rays and their transformation
    settings: Rendering constants and per-run settings
    backend: Taichi runtime initialization
    stream: Parallel scanline rendering driver

Note: The stream module is not imported here because it depends on
preview.canvas, which itself imports from core. Import it directly:
    from tracy.core.stream import Stream
"""

from .color import BLACK, WHITE, Color
from .matrix import (
    Matrix,
    chain,
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    shearing,
    translation,
    view_transform,
)
from .ray import Ray
from .settings import DEFAULT_RECURSION_DEPTH, EPSILON, RenderSettings
from .tuples import ORIGIN, Tuple4, point, vector

__all__ = [
    # Tuples
    "Tuple4",
    "point",
    "vector",
    "ORIGIN",
    # Matrices and transforms
    "Matrix",
    "translation",
    "scaling",
    "rotation_x",
    "rotation_y",
    "rotation_z",
    "shearing",
    "view_transform",
    "chain",
    # Color
    "Color",
    "BLACK",
    "WHITE",
    # Ray
    "Ray",
    # Settings
    "EPSILON",
    "DEFAULT_RECURSION_DEPTH",
    "RenderSettings",
]
