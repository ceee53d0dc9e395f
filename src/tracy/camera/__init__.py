"""Camera module for primary ray generation.

Components:
    camera: Pinhole camera with pixel-to-ray mapping, render and stream entry points
"""

from .camera import Camera

__all__ = ["Camera"]
