"""Tests for RGB colors."""

import pytest


class TestColor:
    """Test color arithmetic and encoding."""

    def test_channels(self):
        """Test that a color exposes red, green and blue."""
        from tracy.core.color import Color

        c = Color(-0.5, 0.4, 1.7)

        assert (c.r, c.g, c.b) == (-0.5, 0.4, 1.7)
        assert list(c) == [-0.5, 0.4, 1.7]

    def test_add_and_subtract(self):
        """Test component-wise addition and subtraction."""
        from tracy.core.color import Color

        a = Color(0.9, 0.6, 0.75)
        b = Color(0.7, 0.1, 0.25)

        assert a + b == Color(1.6, 0.7, 1.0)
        assert a - b == Color(0.2, 0.5, 0.5)

    def test_scalar_multiply(self):
        """Test multiplying by a scalar from either side."""
        from tracy.core.color import Color

        assert Color(0.2, 0.3, 0.4) * 2 == Color(0.4, 0.6, 0.8)
        assert 2 * Color(0.2, 0.3, 0.4) == Color(0.4, 0.6, 0.8)
        assert Color(0.4, 0.6, 0.8) / 2 == Color(0.2, 0.3, 0.4)

    def test_hadamard_product(self):
        """Test that multiplying two colors multiplies each channel."""
        from tracy.core.color import Color

        assert Color(1, 0.2, 0.4) * Color(0.9, 1, 0.1) == Color(0.9, 0.2, 0.04)

    def test_constants(self):
        """Test the BLACK and WHITE constants."""
        from tracy.core.color import BLACK, WHITE, Color

        assert BLACK == Color(0, 0, 0)
        assert WHITE == Color(1, 1, 1)

    @pytest.mark.parametrize(
        "color,expected",
        [
            ((0.0, 0.0, 0.0), (0, 0, 0)),
            ((1.0, 1.0, 1.0), (255, 255, 255)),
            ((1.5, 0.5, -0.5), (255, 128, 0)),
            ((0.2, 0.4, 0.6), (51, 102, 153)),
        ],
    )
    def test_to_rgb888_clamps(self, color, expected):
        """Test 8-bit encoding clamps out-of-range channels."""
        from tracy.core.color import Color

        assert Color(*color).to_rgb888() == expected

    def test_to_rgb888_rounds_halves_up(self):
        """Test channels exactly halfway between two bytes round up."""
        from tracy.core.color import Color

        assert Color(0.3, 0.3, 0.3).to_rgb888() == (77, 77, 77)

    def test_from_sequence(self):
        """Test building a color from a list."""
        from tracy.core.color import Color

        assert Color.from_sequence([1, 0.5, 0]) == Color(1.0, 0.5, 0.0)

        with pytest.raises(ValueError):
            Color.from_sequence([1, 2])

    def test_unsupported_operands_raise(self):
        """Test that colors only combine with colors and real scalars."""
        from tracy.core.color import Color
        from tracy.core.tuples import vector

        with pytest.raises(TypeError):
            Color(1, 1, 1) + 1
        with pytest.raises(TypeError):
            Color(1, 1, 1) * vector(1, 0, 0)
