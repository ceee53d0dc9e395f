"""Tracy: a CPU ray tracer with recursive local illumination.

This package renders scenes made of analytic shapes, procedural patterns and
point lights by casting one ray per pixel and resolving its color with the
Phong reflection model, hard shadows and recursive reflection.

Subpackages:
    core: Tuples, matrices, rays, colors and the parallel scanline stream
    geometry: Shape primitives and their local-space intersection routines
    materials: Patterns, materials, point lights and Phong lighting
    scene: Objects, the world container, scene files and named scenes
    camera: Perspective camera mapping pixels to world-space rays
    preview: Pixel canvas, image export and preview windows
"""

__version__ = "0.1.0"
