"""Column-major numeric matrices with 2D and 3D rotation helpers."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Sequence
from numbers import Real
from typing import Union

from ke2tools.vector import Vector

Number = Union[int, float]

# For each rotation axis (X, Y, Z) the pair of local axes that span its plane.
ROTATION_STANDARD_3D = (2, 1, 0, 2, 0, 1)


def _determinant(nums: Sequence[Number], n: int) -> Number:
    if n == 1:
        return nums[0]
    det: Number = 0
    sign = 1
    for ai in range(n):
        minor = [nums[x * n + y] for x in range(n) if x != ai for y in range(1, n)]
        det += nums[ai * n] * sign * _determinant(minor, n - 1)
        sign = -sign
    return det


class Matrix:
    """A ``size_x`` by ``size_y`` matrix stored column by column.

    ``size_x`` is the number of columns and ``size_y`` the number of rows;
    the flat element ``x * size_y + y`` is row ``y`` of column ``x``.
    """

    __slots__ = ("size_x", "size_y", "_nums")

    def __init__(self, size_x: int, size_y: int,
                 nums: Iterable[Number] | None = None) -> None:
        if size_x <= 0 or size_y <= 0:
            raise ValueError("matrix dimensions must be positive")
        self.size_x = size_x
        self.size_y = size_y
        if nums is None:
            values: list[Number] = [0.0] * (size_x * size_y)
        else:
            values = list(nums)
            if len(values) != size_x * size_y:
                raise ValueError(
                    f"expected {size_x * size_y} numbers, got {len(values)}"
                )
        self._nums = values

    @classmethod
    def from_columns(cls, *args: Vector | Iterable[Number]) -> Matrix:
        """Build a matrix whose columns are the given vectors, all of one length."""
        columns = [list(col) for col in args]
        if not columns:
            raise ValueError("at least one column is required")
        size_y = len(columns[0])
        if any(len(col) != size_y for col in columns):
            raise ValueError("all columns must have the same length")
        return cls(len(columns), size_y, [v for col in columns for v in col])

    @classmethod
    def filled(cls, size_x: int, size_y: int, value: Number) -> Matrix:
        """Return a matrix with every element equal to ``value``."""
        return cls(size_x, size_y, [value] * (size_x * size_y))

    @classmethod
    def identity(cls, size: int) -> Matrix:
        """Return the ``size`` by ``size`` identity matrix."""
        return cls(size, size, [1.0 if x == y else 0.0
                                for x in range(size) for y in range(size)])

    # --- container protocol -------------------------------------------------

    def __len__(self) -> int:
        return len(self._nums)

    def __iter__(self) -> Iterator[Number]:
        return iter(self._nums)

    def __getitem__(self, index: int) -> Number:
        return self._nums[index]

    def __setitem__(self, index: int, value: Number) -> None:
        self._nums[index] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (self.size_x, self.size_y, self._nums) == (
            other.size_x, other.size_y, other._nums)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix({self.size_x}, {self.size_y}, {self._nums!r})"

    def column(self, x: int) -> Vector:
        """Return column ``x`` as a vector."""
        start = x * self.size_y
        return Vector(self._nums[start:start + self.size_y])

    def _set_column(self, x: int, vec: Iterable[Number]) -> None:
        start = x * self.size_y
        self._nums[start:start + self.size_y] = list(vec)

    def _require_square(self, what: str) -> None:
        if self.size_x != self.size_y:
            raise ValueError(f"{what} is only defined for a square matrix")

    def _require_3x3(self, what: str) -> None:
        if self.size_x != 3 or self.size_y != 3:
            raise ValueError(f"{what} is only defined for a 3x3 matrix")

    def _check_axis(self, axis: int) -> None:
        if not 0 <= axis < self.size_x:
            raise ValueError(f"invalid axis index {axis}")

    # --- arithmetic ---------------------------------------------------------

    def _scalar(self, other: object, op) -> Matrix:
        if isinstance(other, Real):
            return Matrix(self.size_x, self.size_y, [op(a, other) for a in self._nums])
        return NotImplemented

    def __add__(self, other):
        return self._scalar(other, lambda a, b: a + b)

    def __sub__(self, other):
        return self._scalar(other, lambda a, b: a - b)

    def __truediv__(self, other):
        return self._scalar(other, lambda a, b: a / b)

    def _product(self, other: Matrix) -> Matrix:
        if other.size_y != self.size_x:
            raise ValueError(
                f"cannot multiply {self.size_x}x{self.size_y} by "
                f"{other.size_x}x{other.size_y}"
            )
        rows = self.size_y
        inner = self.size_x
        nums = [
            sum(self._nums[rows * lo + y] * other._nums[inner * x + lo]
                for lo in range(inner))
            for x in range(other.size_x)
            for y in range(rows)
        ]
        return Matrix(other.size_x, rows, nums)

    def __matmul__(self, other):
        if isinstance(other, Matrix):
            return self._product(other)
        if isinstance(other, Vector):
            return Vector(self._product(Matrix(1, len(other), other))._nums)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, (Matrix, Vector)):
            return self.__matmul__(other)
        return self._scalar(other, lambda a, b: a * b)

    # --- linear algebra -----------------------------------------------------

    def determinant(self) -> Number:
        """Determinant, by cofactor expansion along the first row."""
        self._require_square("determinant")
        return _determinant(self._nums, self.size_x)

    def inverse(self, det: Number | None = None) -> Matrix:
        """Inverse matrix; ``det`` may pass an already known determinant."""
        self._require_square("inverse")
        n = self.size_x
        if det is None:
            det = self.determinant()
        if n == 1:
            return Matrix(1, 1, [1 / det])

        def cofactor(x: int, y: int) -> float:
            minor = [self._nums[lx * n + ly]
                     for lx in range(n) if lx != y
                     for ly in range(n) if ly != x]
            sign = 1 if (x + y) % 2 == 0 else -1
            return sign * _determinant(minor, n - 1) / det

        return Matrix(n, n, [cofactor(x, y) for x in range(n) for y in range(n)])

    def normalize(self) -> None:
        """Scale every column to length one, in place."""
        for x in range(self.size_x):
            self._set_column(x, self.column(x).normalize())

    def cross_fix_3d(self, axis1: int, axis2: int) -> None:
        """Make a 3x3 basis orthogonal again, in place.

        Column ``axis1`` is kept, the third axis becomes ``axis1 x axis2`` and
        ``axis2`` becomes ``axis3 x axis1``. Lengths are not changed.
        """
        self._require_3x3("cross fix")
        if axis1 == axis2:
            raise ValueError("axes must differ")
        self._check_axis(axis1)
        self._check_axis(axis2)
        v1 = self.column(axis1)
        v2 = self.column(axis2)
        v3 = v1.cross_fl(v2)
        v2 = v3.cross_fl(v1)
        axis3 = ROTATION_STANDARD_3D[axis1 * 2]
        if axis3 == axis2:
            axis3 = ROTATION_STANDARD_3D[axis1 * 2 + 1]
        self._set_column(axis2, v2)
        self._set_column(axis3, v3)

    def local_coord_c(self, axis: int, vec: Vector) -> Number:
        """Coordinate of ``vec`` along one axis of an orthonormal basis."""
        self._require_square("local coordinate")
        self._check_axis(axis)
        return self.column(axis).dot_fl(vec)

    def local_coords_u(self, vec: Vector) -> Vector:
        """Coordinates of ``vec`` in this basis, for any invertible basis."""
        self._require_square("local coordinates")
        return self.inverse() @ vec

    def rotate_vector_by_two_vectors_u(self, vec: Vector, angle: float,
                                       axis_x: int, axis_y: int,
                                       inverse: Matrix | Number | None = None) -> Vector:
        """Rotate ``vec`` by ``angle`` in the plane of two basis axes.

        Works in any invertible basis. ``inverse`` may be the inverse matrix,
        the determinant, or ``None`` to compute it.
        """
        self._require_square("rotation")
        if axis_x == axis_y:
            raise ValueError("axes must differ")
        self._check_axis(axis_x)
        self._check_axis(axis_y)
        if isinstance(inverse, Matrix):
            inv = inverse
        else:
            inv = self.inverse(inverse)
        n = self.size_x
        rot = Matrix(n, n)
        for x in range(n):
            if x not in (axis_x, axis_y):
                rot[x * n + x] = 1.0
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        rot[axis_x * n + axis_x] = cos_a
        rot[axis_x * n + axis_y] = sin_a
        rot[axis_y * n + axis_x] = -sin_a
        rot[axis_y * n + axis_y] = cos_a
        return self @ rot @ inv @ vec

    def rotate_vector_c(self, vec: Vector, angle: float,
                        axis_x: int, axis_y: int) -> Vector:
        """Rotate ``vec`` by ``angle`` in the plane of two orthonormal axes.

        The result lies in that plane and keeps the length of ``vec``.
        """
        if axis_x == axis_y:
            raise ValueError("axes must differ")
        vec_len = vec.length()
        local_x = self.local_coord_c(axis_x, vec) / vec_len
        local_x = min(1.0, max(-1.0, local_x))
        local_y = self.local_coord_c(axis_y, vec) / vec_len
        angle_to_x = math.acos(local_x)
        if local_y < 0:
            angle_to_x = -angle_to_x
        angle_to_x += angle
        xv = self.column(axis_x)
        yv = self.column(axis_y)
        return (xv * math.cos(angle_to_x) + yv * math.sin(angle_to_x)) * vec_len

    def rotate_3d_by_angles_c(self, angles: Iterable[float],
                              order: Sequence[int] = (0, 1, 2)) -> Matrix:
        """Return this 3x3 orthonormal basis rotated by X, Y, Z angles.

        ``order`` gives the axes in the order the rotations are applied.
        """
        self._require_3x3("3D rotation")
        rots = list(angles)
        if len(rots) != 3:
            raise ValueError("three angles are required")
        order = tuple(order)
        if len(order) != 3 or sorted(order) != [0, 1, 2]:
            raise ValueError("order must be a permutation of 0, 1, 2")
        result = Matrix(3, 3, self._nums)
        for axis in order:
            xvi = ROTATION_STANDARD_3D[axis * 2]
            yvi = ROTATION_STANDARD_3D[axis * 2 + 1]
            xv = result.column(xvi)
            yv = result.column(yvi)
            cos_r = math.cos(rots[axis])
            sin_r = math.sin(rots[axis])
            result._set_column(xvi, xv * cos_r + yv * sin_r)
            result._set_column(yvi, xv * -sin_r + yv * cos_r)
        return result

    def to_vector(self) -> Vector:
        """All elements, column by column, as one vector."""
        return Vector(self._nums)