"""RGB colors with unbounded float channels.

Channels are usually in [0, 1] but additive lighting can push them above 1;
they are only clamped when encoded to 8 bits by :meth:`Color.to_rgb888`.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass

from tracy.core.settings import EPSILON


@dataclass(frozen=True, slots=True, eq=False)
class Color:
    """A color in linear RGB.

    Attributes:
        r: Red channel.
        g: Green channel.
        b: Blue channel.
    """

    r: float
    g: float
    b: float

    def __add__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def __sub__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.r - other.r, self.g - other.g, self.b - other.b)

    def __mul__(self, other: Color | float) -> Color:
        if isinstance(other, Color):
            return Color(self.r * other.r, self.g * other.g, self.b * other.b)
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return Color(self.r * other, self.g * other, self.b * other)

    def __rmul__(self, scalar: float) -> Color:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return Color(self.r * scalar, self.g * scalar, self.b * scalar)

    def __truediv__(self, scalar: float) -> Color:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return Color(self.r / scalar, self.g / scalar, self.b / scalar)

    def __iter__(self):
        yield self.r
        yield self.g
        yield self.b

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.abs_diff_eq(other, EPSILON)

    __hash__ = None  # type: ignore[assignment]

    def abs_diff_eq(self, other: Color, max_abs_diff: float = EPSILON) -> bool:
        return (
            abs(self.r - other.r) < max_abs_diff
            and abs(self.g - other.g) < max_abs_diff
            and abs(self.b - other.b) < max_abs_diff
        )

    def to_rgb888(self) -> tuple[int, int, int]:
        """Encode as three 8-bit integers, clamping each channel to [0, 255]."""
        return (
            _to_byte(self.r),
            _to_byte(self.g),
            _to_byte(self.b),
        )

    @classmethod
    def from_sequence(cls, values) -> Color:
        """Build a color from any three-item sequence such as ``[r, g, b]``."""
        r, g, b = values
        return cls(float(r), float(g), float(b))


def _to_byte(channel: float) -> int:
    # Halves round away from zero, not to even
    return math.floor(min(max(channel * 255.0, 0.0), 255.0) + 0.5)


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
