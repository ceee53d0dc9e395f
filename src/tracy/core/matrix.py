"""Square matrices and affine transforms.

Matrices are stored as NumPy float64 arrays. The determinant and inverse are
computed by cofactor expansion so that a singular matrix has a determinant of
exactly zero; :meth:`Matrix.inverse` reports it by returning ``None`` instead of
producing garbage.

Transforms compose right to left: in ``a * b`` the transform ``b`` is applied
to a point first. :func:`chain` takes transforms in application order, which is
usually easier to read.

Example:
    >>> import math
    >>> from tracy.core.matrix import chain, rotation_x, scaling, translation
    >>> from tracy.core.tuples import point
    >>> m = chain(rotation_x(math.pi / 2), scaling(5, 5, 5), translation(10, 5, 7))
    >>> m * point(1, 0, 1)
    Tuple4(x=15.0, y=0.0, z=7.0, w=1.0)
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from typing import overload

import numpy as np
import numpy.typing as npt

from tracy.core.settings import EPSILON
from tracy.core.tuples import Tuple4


class Matrix:
    """A square matrix of floats.

    Args:
        rows: Row-major values. Every row must have as many entries as there
            are rows.

    Raises:
        ValueError: If ``rows`` is not square.
    """

    __slots__ = ("_data",)

    def __init__(self, rows: Iterable[Sequence[float]] | npt.ArrayLike) -> None:
        data = np.array(rows, dtype=np.float64)
        if data.ndim != 2 or data.shape[0] != data.shape[1]:
            raise ValueError(f"Matrix must be square, got shape {data.shape}")
        self._data = data

    @classmethod
    def identity(cls, order: int = 4) -> Matrix:
        """Return the multiplicative identity of the given order."""
        return cls(np.identity(order))

    @property
    def order(self) -> int:
        return self._data.shape[0]

    def to_numpy(self) -> npt.NDArray[np.float64]:
        """Return a copy of the underlying array."""
        return self._data.copy()

    def __getitem__(self, index: tuple[int, int]) -> float:
        return float(self._data[index])

    def __repr__(self) -> str:
        return f"Matrix({self._data.tolist()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.abs_diff_eq(other, EPSILON)

    __hash__ = None  # type: ignore[assignment]

    def abs_diff_eq(self, other: Matrix, max_abs_diff: float = EPSILON) -> bool:
        """Check that both matrices have the same order and close entries."""
        if self.order != other.order:
            return False
        return bool(np.all(np.abs(self._data - other._data) < max_abs_diff))

    @overload
    def __mul__(self, other: Matrix) -> Matrix: ...

    @overload
    def __mul__(self, other: Tuple4) -> Tuple4: ...

    def __mul__(self, other):
        if isinstance(other, Matrix):
            if self.order != other.order:
                raise ValueError(
                    f"Cannot multiply matrices of order {self.order} and {other.order}"
                )
            return Matrix(self._data @ other._data)
        if isinstance(other, Tuple4):
            if self.order != 4:
                raise ValueError(f"Cannot multiply a tuple by a matrix of order {self.order}")
            x, y, z, w = self._data @ (other.x, other.y, other.z, other.w)
            return Tuple4(float(x), float(y), float(z), float(w))
        return NotImplemented

    __matmul__ = __mul__

    def transpose(self) -> Matrix:
        return Matrix(self._data.T)

    def submatrix(self, row: int, col: int) -> Matrix:
        """Return a copy with the given row and column removed."""
        data = np.delete(np.delete(self._data, row, axis=0), col, axis=1)
        return Matrix(data)

    def minor(self, row: int, col: int) -> float:
        return self.submatrix(row, col).determinant()

    def cofactor(self, row: int, col: int) -> float:
        minor = self.minor(row, col)
        return -minor if (row + col) % 2 else minor

    def determinant(self) -> float:
        """Compute the determinant by cofactor expansion along the first row."""
        d = self._data
        if self.order == 1:
            return float(d[0, 0])
        if self.order == 2:
            return float(d[0, 0] * d[1, 1] - d[0, 1] * d[1, 0])
        return sum(float(d[0, col]) * self.cofactor(0, col) for col in range(self.order))

    @property
    def is_invertible(self) -> bool:
        return self.determinant() != 0.0

    def inverse(self) -> Matrix | None:
        """Return the inverse, or ``None`` when the determinant is zero."""
        det = self.determinant()
        if det == 0.0:
            return None

        n = self.order
        cofactors = np.empty((n, n), dtype=np.float64)
        for row in range(n):
            for col in range(n):
                cofactors[row, col] = self.cofactor(row, col)

        # inverse = adjugate / det, and the adjugate is the transposed cofactor matrix
        return Matrix(cofactors.T / det)


# =============================================================================
# Transform constructors
# =============================================================================


def translation(x: float, y: float, z: float) -> Matrix:
    return Matrix(
        [
            [1.0, 0.0, 0.0, x],
            [0.0, 1.0, 0.0, y],
            [0.0, 0.0, 1.0, z],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def scaling(x: float, y: float, z: float) -> Matrix:
    return Matrix(
        [
            [x, 0.0, 0.0, 0.0],
            [0.0, y, 0.0, 0.0],
            [0.0, 0.0, z, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_x(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    return Matrix(
        [
            [1.0, 0.0, 0.0, 0.0],
            [0.0, c, -s, 0.0],
            [0.0, s, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_y(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    return Matrix(
        [
            [c, 0.0, s, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [-s, 0.0, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_z(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    return Matrix(
        [
            [c, -s, 0.0, 0.0],
            [s, c, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
    """Shear each coordinate in proportion to the other two.

    ``xy`` moves x in proportion to y, ``xz`` moves x in proportion to z, and
    so on.
    """
    return Matrix(
        [
            [1.0, xy, xz, 0.0],
            [yx, 1.0, yz, 0.0],
            [zx, zy, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def view_transform(from_: Tuple4, to: Tuple4, up: Tuple4) -> Matrix:
    """Orient the world relative to an eye at ``from_`` looking at ``to``.

    Args:
        from_: Eye position.
        to: Point the eye looks at.
        up: Approximate up direction; it need not be orthogonal to the view.

    Returns:
        The world-to-camera transform.
    """
    forward = (to - from_).to_vector().normalize()
    left = forward.cross(up.to_vector().normalize())
    true_up = left.cross(forward)

    orientation = Matrix(
        [
            [left.x, left.y, left.z, 0.0],
            [true_up.x, true_up.y, true_up.z, 0.0],
            [-forward.x, -forward.y, -forward.z, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )
    return orientation * translation(-from_.x, -from_.y, -from_.z)


def chain(*transforms: Matrix) -> Matrix:
    """Compose transforms given in the order they should be applied.

    ``chain(a, b, c)`` equals ``c * b * a``. With no arguments the identity
    is returned.
    """
    result = Matrix.identity(4)
    for transform in transforms:
        result = transform * result
    return result
