"""Scene module for assembling and querying what gets rendered.

Components:
    object: A shape placed in the world with a transform and a material
    world: Ordered objects plus lights; intersection, shadows and shading
    loader: YAML scene files
    library: Named example scenes used by the command-line scripts

Objects are identified by their insertion index in the world. Hits along a
ray are resolved in ascending time of impact, ties kept in insertion order.
"""

from tracy.scene.library import get_scene, list_scenes
from tracy.scene.loader import SceneError, load_scene, parse_scene
from tracy.scene.object import Object
from tracy.scene.world import Interference, Interferences, ObjectHandle, World

__all__ = [
    # Scene graph
    "Object",
    "World",
    "ObjectHandle",
    "Interference",
    "Interferences",
    # Scene files
    "load_scene",
    "parse_scene",
    "SceneError",
    # Named scenes
    "get_scene",
    "list_scenes",
]
