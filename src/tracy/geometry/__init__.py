"""Geometry module for shape primitives.

This module provides the analytic primitives and their intersection routines:

Components:
    shape: The Shape protocol and the LocalIntersection record
    sphere: Unit sphere at the origin
    plane: The xz plane with a +y normal
    cube: Axis-aligned unit cube (slab method)
    cylinder: Unit cylinder around y, optionally truncated and capped

All routines work in the shape's local frame; objects transform rays into that
frame and normals back out of it. Roots are closed-form, never iterative.
"""

from .cube import Cube
from .cylinder import Cylinder
from .plane import Plane
from .shape import LocalIntersection, Shape
from .sphere import Sphere

__all__ = [
    "Shape",
    "LocalIntersection",
    "Sphere",
    "Plane",
    "Cube",
    "Cylinder",
]
