"""Procedural color patterns.

A :class:`Pattern` pairs a *kind* (the rule that maps a point to a color) with
its own transform. Lookups always map the query point through the inverse of
that transform first, so a pattern can be scaled, rotated or moved
independently of the object it is painted on.

Kinds that combine other patterns (stripes, rings, checkers, blended) hold two
child :class:`Pattern` instances and hand them the already-transformed point;
each child then applies its own transform on top.

Example:
    >>> from tracy.core.color import Color
    >>> from tracy.core.tuples import point
    >>> from tracy.materials.pattern import Pattern, Stripes
    >>> p = Pattern(Stripes(Pattern.solid(Color(1, 1, 1)), Pattern.solid(Color(0, 0, 0))))
    >>> p.color_at(point(1.0, 0.0, 0.0))
    Color(r=0, g=0, b=0)
"""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass

from tracy.core.color import Color
from tracy.core.matrix import Matrix
from tracy.core.tuples import Tuple4

logger = logging.getLogger(__name__)


# =============================================================================
# Pattern kinds
# =============================================================================


class PatternKind(ABC):
    """A rule mapping a pattern-space point to a color."""

    @abstractmethod
    def color_at(self, point: Tuple4) -> Color:
        """Evaluate the rule at a point already in pattern space."""


@dataclass
class Solid(PatternKind):
    """A single color everywhere."""

    color: Color

    def color_at(self, point: Tuple4) -> Color:
        return self.color


@dataclass
class Stripes(PatternKind):
    """Alternates ``a`` and ``b`` on each unit step of ``x``."""

    a: Pattern
    b: Pattern

    def color_at(self, point: Tuple4) -> Color:
        if math.floor(point.x) % 2 == 0:
            return self.a.color_at(point)
        return self.b.color_at(point)


@dataclass
class Rings(PatternKind):
    """Concentric rings around the ``y`` axis, alternating ``a`` and ``b``."""

    a: Pattern
    b: Pattern

    def color_at(self, point: Tuple4) -> Color:
        if math.floor(math.hypot(point.x, point.z)) % 2 == 0:
            return self.a.color_at(point)
        return self.b.color_at(point)


@dataclass
class Checkers(PatternKind):
    """Unit cubes alternating ``a`` and ``b`` in all three dimensions."""

    a: Pattern
    b: Pattern

    def color_at(self, point: Tuple4) -> Color:
        parity = math.floor(point.x) + math.floor(point.y) + math.floor(point.z)
        if parity % 2 == 0:
            return self.a.color_at(point)
        return self.b.color_at(point)


@dataclass
class Blended(PatternKind):
    """The average of two patterns."""

    a: Pattern
    b: Pattern

    def color_at(self, point: Tuple4) -> Color:
        return (self.a.color_at(point) + self.b.color_at(point)) * 0.5


@dataclass
class LinearGradient(PatternKind):
    """Interpolates from ``a`` to ``b`` over each unit of ``x``."""

    a: Color
    b: Color

    def color_at(self, point: Tuple4) -> Color:
        fraction = point.x - math.floor(point.x)
        return self.a + (self.b - self.a) * fraction


@dataclass
class RadialGradient(PatternKind):
    """Interpolates from ``a`` to ``b`` over each unit of distance from the ``y`` axis."""

    a: Color
    b: Color

    def color_at(self, point: Tuple4) -> Color:
        distance = math.hypot(point.x, point.z)
        fraction = distance - math.floor(distance)
        return self.a + (self.b - self.a) * fraction


class Test(PatternKind):
    """Returns the pattern-space point itself as a color. Used to check transforms."""

    __test__ = False

    def color_at(self, point: Tuple4) -> Color:
        return Color(point.x, point.y, point.z)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Test)

    def __repr__(self) -> str:
        return "Test()"


# =============================================================================
# Pattern
# =============================================================================


class Pattern:
    """A pattern kind placed by its own transform.

    Args:
        kind: The color rule.
        transform: Pattern-to-object transform. Defaults to identity.
    """

    def __init__(self, kind: PatternKind, transform: Matrix | None = None) -> None:
        self.kind = kind
        self.transform = transform if transform is not None else Matrix.identity()

    @classmethod
    def solid(cls, color: Color) -> Pattern:
        """Shorthand for ``Pattern(Solid(color))``."""
        return cls(Solid(color))

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, m: Matrix) -> None:
        inverse = m.inverse()
        if inverse is None:
            logger.warning("Pattern transform is not invertible; pattern falls back to identity")
            inverse = Matrix.identity()
        self._transform = m
        self._inverse = inverse

    @property
    def inverse_transform(self) -> Matrix:
        return self._inverse

    def color_at(self, point: Tuple4) -> Color:
        """Return the color at an object-space point."""
        return self.kind.color_at(self._inverse * point)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pattern):
            return NotImplemented
        return self.kind == other.kind and self._transform == other._transform

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Pattern(kind={self.kind!r})"
