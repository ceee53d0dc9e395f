"""Tests for the Taichi-backed canvas.

Tests cover:
- Creation and size validation
- Writing and reading single pixels, inside and outside the canvas
- Storing whole scanlines
- Fill, NumPy conversion and iteration order
"""

import numpy as np
import pytest


class TestCanvasCreation:
    """Tests for Canvas construction."""

    def test_new_canvas_is_black(self):
        """Test every pixel of a new canvas is black."""
        from tracy.core.color import BLACK
        from tracy.preview.canvas import Canvas

        canvas = Canvas(10, 20)

        assert canvas.width == 10
        assert canvas.height == 20
        assert all(color == BLACK for color in canvas)

    @pytest.mark.parametrize("size", [(0, 5), (5, 0), (-2, 3)])
    def test_rejects_non_positive_size(self, size):
        """Test invalid dimensions raise ValueError."""
        from tracy.preview.canvas import Canvas

        with pytest.raises(ValueError, match="positive"):
            Canvas(*size)

    def test_field_shape(self):
        """Test the underlying field is indexed [x, y]."""
        from tracy.preview.canvas import Canvas

        canvas = Canvas(4, 3)

        assert canvas.field.shape == (4, 3)


class TestCanvasPixels:
    """Tests for put and get."""

    def test_put_and_get(self):
        """Test writing a pixel and reading it back."""
        from tracy.core.color import Color
        from tracy.preview.canvas import Canvas

        canvas = Canvas(10, 20)
        canvas.put(2, 3, Color(1, 0, 0))

        assert canvas.get(2, 3) == Color(1, 0, 0)

    def test_values_are_not_clamped(self):
        """Test the canvas keeps values outside [0, 1]."""
        from tracy.core.color import Color
        from tracy.preview.canvas import Canvas

        canvas = Canvas(2, 2)
        canvas.put(1, 1, Color(1.5, -0.5, 3.0))

        assert canvas.get(1, 1) == Color(1.5, -0.5, 3.0)

    @pytest.mark.parametrize("xy", [(-1, 0), (0, -1), (10, 0), (0, 20)])
    def test_out_of_bounds(self, xy):
        """Test writes outside the canvas are ignored and reads give None."""
        from tracy.core.color import Color
        from tracy.preview.canvas import Canvas

        canvas = Canvas(10, 20)
        canvas.put(*xy, Color(1, 1, 1))

        assert canvas.get(*xy) is None
        assert not canvas.in_bounds(*xy)
        assert np.all(canvas.to_numpy() == 0.0)


class TestCanvasScanlines:
    """Tests for whole-row access."""

    def test_put_scanline(self):
        """Test storing a row writes every pixel of that row only."""
        from tracy.core.color import Color
        from tracy.preview.canvas import Canvas

        canvas = Canvas(3, 2)
        row = np.array([[1, 0, 0], [0, 1, 0], [0, 0, 1]], dtype=np.float32)

        canvas.put_scanline(1, row)

        assert canvas.get(0, 1) == Color(1, 0, 0)
        assert canvas.get(1, 1) == Color(0, 1, 0)
        assert canvas.get(2, 1) == Color(0, 0, 1)
        np.testing.assert_array_equal(canvas.scanline(1), row)
        np.testing.assert_array_equal(canvas.scanline(0), np.zeros((3, 3)))

    def test_put_scanline_accepts_lists(self):
        """Test any array-like row is accepted."""
        from tracy.core.color import Color
        from tracy.preview.canvas import Canvas

        canvas = Canvas(2, 1)
        canvas.put_scanline(0, [[0.5, 0.5, 0.5], [0.25, 0.25, 0.25]])

        assert canvas.get(1, 0) == Color(0.25, 0.25, 0.25)

    def test_put_scanline_wrong_shape(self):
        """Test a row of the wrong width raises ValueError."""
        from tracy.preview.canvas import Canvas

        canvas = Canvas(3, 2)

        with pytest.raises(ValueError, match="shape"):
            canvas.put_scanline(0, np.zeros((2, 3), dtype=np.float32))

    def test_put_scanline_outside_is_ignored(self):
        """Test a row index outside the canvas is ignored."""
        from tracy.preview.canvas import Canvas

        canvas = Canvas(3, 2)
        canvas.put_scanline(5, np.ones((3, 3), dtype=np.float32))

        assert np.all(canvas.to_numpy() == 0.0)


class TestCanvasConversion:
    """Tests for fill, to_numpy and iteration."""

    def test_fill(self):
        """Test fill sets every pixel."""
        from tracy.core.color import Color
        from tracy.preview.canvas import Canvas

        canvas = Canvas(4, 3)
        canvas.fill(Color(1, 0.8, 0.6))

        assert all(color == Color(1, 0.8, 0.6) for color in canvas)

    def test_to_numpy_layout(self):
        """Test the array is (height, width, 3) with [y, x] indexing."""
        from tracy.core.color import Color
        from tracy.preview.canvas import Canvas

        canvas = Canvas(4, 3)
        canvas.put(3, 1, Color(0.2, 0.4, 0.6))

        image = canvas.to_numpy()

        assert image.shape == (3, 4, 3)
        assert image.dtype == np.float32
        np.testing.assert_allclose(image[1, 3], [0.2, 0.4, 0.6], atol=1e-6)

    def test_iteration_is_row_major(self):
        """Test iteration goes left to right, then top to bottom."""
        from tracy.core.color import BLACK, Color
        from tracy.preview.canvas import Canvas

        canvas = Canvas(3, 2)
        canvas.put(1, 0, Color(1, 0, 0))
        canvas.put(0, 1, Color(0, 1, 0))

        colors = list(canvas)

        assert len(colors) == 6
        assert colors[1] == Color(1, 0, 0)
        assert colors[3] == Color(0, 1, 0)
        assert colors[0] == BLACK
