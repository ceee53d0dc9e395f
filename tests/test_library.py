"""Tests for the named scene registry."""

import numpy as np
import pytest

SCENE_NAMES = ["cube-room", "cylinders", "patterns", "reflections", "shaded-sphere", "shadows"]


class TestRegistry:
    """Tests for looking up scenes."""

    def test_list_scenes_is_sorted(self):
        """Test every built-in scene is listed in sorted order."""
        from tracy.scene import list_scenes

        assert list_scenes() == SCENE_NAMES

    def test_unknown_scene(self):
        """Test an unknown name raises KeyError listing the known ones."""
        from tracy.scene import get_scene

        with pytest.raises(KeyError, match="shaded-sphere"):
            get_scene("teapot")

    @pytest.mark.parametrize("name", SCENE_NAMES)
    def test_describe_scene(self, name):
        """Test every scene has a one-line description."""
        from tracy.scene.library import describe_scene

        description = describe_scene(name)

        assert description
        assert "\n" not in description


class TestBuilders:
    """Tests for the scene builders."""

    @pytest.mark.parametrize("name", SCENE_NAMES)
    def test_builds_world_and_camera(self, name):
        """Test each builder returns a lit world and a camera of the requested size."""
        from tracy.camera import Camera
        from tracy.scene import World, get_scene

        world, camera = get_scene(name)(32, 16)

        assert isinstance(world, World)
        assert isinstance(camera, Camera)
        assert len(world.objects) > 0
        assert len(world.lights) > 0
        assert (camera.horizontal_size, camera.vertical_size) == (32, 16)

    @pytest.mark.parametrize("name", SCENE_NAMES)
    def test_renders_something(self, name):
        """Test a tiny render of each scene is not completely black."""
        from tracy.scene import get_scene

        world, camera = get_scene(name)(12, 8)

        image = camera.render(world, workers=4).to_numpy()

        assert image.shape == (8, 12, 3)
        assert np.any(image > 0.0)
        assert np.all(np.isfinite(image))
