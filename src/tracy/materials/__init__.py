"""Materials module for surface appearance.

This module provides everything the Phong shader needs to know about a
surface and the lights that illuminate it:

Components:
    pattern: Procedural color patterns (solid, stripes, rings, checkers,
        blended, linear and radial gradients) with their own transforms
    material: Reflectance parameters and object-space color lookup
    light: Point lights and the Phong lighting function
"""

from .light import PointLight, phong_lighting
from .material import Material
from .pattern import (
    Blended,
    Checkers,
    LinearGradient,
    Pattern,
    PatternKind,
    RadialGradient,
    Rings,
    Solid,
    Stripes,
)

__all__ = [
    # Patterns
    "Pattern",
    "PatternKind",
    "Solid",
    "Stripes",
    "Rings",
    "Checkers",
    "Blended",
    "LinearGradient",
    "RadialGradient",
    # Material
    "Material",
    # Lighting
    "PointLight",
    "phong_lighting",
]
