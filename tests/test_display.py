"""Tests for the Matplotlib preview helpers.

Tests cover:
- Gamma encoding
- Clamping for display
- Showing a canvas and a comparison without opening a window

Figures are drawn with the Agg backend and ``plt.show`` is replaced, so no
window is opened.
"""

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest


@pytest.fixture
def no_show(monkeypatch):
    import matplotlib.pyplot as plt

    calls = []
    monkeypatch.setattr(plt, "show", lambda *args, **kwargs: calls.append(kwargs))
    yield calls
    plt.close("all")


class TestApplyGamma:
    """Tests for apply_gamma."""

    def test_gamma_one_is_identity(self):
        """Test gamma 1.0 returns the input unchanged."""
        from tracy.preview.display import apply_gamma

        image = np.full((2, 2, 3), 1.7, dtype=np.float32)

        assert apply_gamma(image, 1.0) is image

    def test_gamma_formula(self):
        """Test out = in ** (1 / gamma)."""
        from tracy.preview.display import apply_gamma

        image = np.full((2, 2, 3), 0.25, dtype=np.float32)

        result = apply_gamma(image, 2.0)

        assert np.allclose(result, 0.5, atol=1e-6)
        assert result.dtype == np.float32

    def test_gamma_clamps_negative(self):
        """Test negative values become zero rather than NaN."""
        from tracy.preview.display import apply_gamma

        image = np.full((2, 2, 3), -1.0, dtype=np.float32)

        result = apply_gamma(image, 2.2)

        assert not np.any(np.isnan(result))
        assert np.all(result == 0.0)


class TestProcessImage:
    """Tests for process_image_for_display."""

    def test_clamps_to_unit_range(self):
        """Test values are clamped to [0, 1]."""
        from tracy.preview.display import process_image_for_display

        image = np.array([[[-1.0, 0.5, 3.0]]], dtype=np.float32)

        result = process_image_for_display(image)

        np.testing.assert_allclose(result, [[[0.0, 0.5, 1.0]]])

    def test_does_not_modify_input(self):
        """Test the input array is left untouched."""
        from tracy.preview.display import process_image_for_display

        image = np.full((2, 2, 3), 2.0, dtype=np.float32)

        process_image_for_display(image, gamma=2.2)

        assert np.all(image == 2.0)


class TestShowPreview:
    """Tests for show_preview and show_comparison."""

    def test_show_preview(self, no_show):
        """Test a canvas is drawn and shown once."""
        import matplotlib.pyplot as plt

        from tracy.core.color import Color
        from tracy.preview.canvas import Canvas
        from tracy.preview.display import show_preview

        canvas = Canvas(4, 3)
        canvas.put(1, 1, Color(2.0, 0.5, 0.0))

        show_preview(canvas, block=False)

        assert no_show == [{"block": False}]
        ax = plt.gcf().axes[0]
        assert ax.get_title() == "Render Preview - 4x3"
        assert ax.images[0].get_array().shape == (3, 4, 3)

    def test_show_preview_title(self, no_show):
        """Test a custom title is used."""
        import matplotlib.pyplot as plt

        from tracy.preview.canvas import Canvas
        from tracy.preview.display import show_preview

        show_preview(Canvas(2, 2), title="spheres", block=False)

        assert plt.gcf().axes[0].get_title() == "spheres"

    def test_show_comparison_returns_rmse(self, no_show):
        """Test the comparison draws three panels and returns the RMSE."""
        import matplotlib.pyplot as plt

        from tracy.preview.display import show_comparison

        a = np.zeros((3, 3, 3), dtype=np.float32)
        b = np.full((3, 3, 3), 0.5, dtype=np.float32)

        rmse = show_comparison(a, b, labels=("black", "gray"), block=False)

        assert rmse == pytest.approx(0.5)
        titles = [ax.get_title() for ax in plt.gcf().axes]
        assert titles[:2] == ["black", "gray"]
        assert "RMSE" in titles[2]

    def test_show_comparison_shape_mismatch(self, no_show):
        """Test mismatched images raise before anything is drawn."""
        from tracy.preview.display import show_comparison

        with pytest.raises(ValueError):
            show_comparison(np.zeros((2, 2, 3)), np.zeros((2, 3, 3)), block=False)

        assert no_show == []
