"""Pytest configuration for tracy tests.

This module provides shared fixtures for all test modules: Taichi
initialization, which must happen once per session, and the small default
world most shading tests are written against.
"""

import pytest


@pytest.fixture(scope="session", autouse=True)
def init_taichi_session():
    """Initialize Taichi once for the entire test session.

    Canvases allocate Taichi fields; re-initializing the runtime would
    invalidate every field created before.
    """
    from tracy.core.backend import init_backend

    init_backend("cpu", random_seed=42)
    yield


@pytest.fixture
def default_world():
    """Two concentric spheres lit by a white light at (-10, 10, -10).

    The outer sphere is a unit sphere with color (0.8, 1.0, 0.6), diffuse 0.7
    and specular 0.2; the inner one is scaled by 0.5 with the default material.
    """
    from tracy.core.color import Color
    from tracy.core.matrix import scaling
    from tracy.core.tuples import point
    from tracy.geometry import Sphere
    from tracy.materials import Material, PointLight
    from tracy.scene import Object, World

    world = World()
    world.add(
        Object(
            Sphere(),
            material=Material.from_color(Color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2),
        )
    )
    world.add(Object(Sphere(), scaling(0.5, 0.5, 0.5)))
    world.set_light(PointLight(point(-10.0, 10.0, -10.0), Color(1.0, 1.0, 1.0)))
    return world
