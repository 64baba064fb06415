# core/matrix.py
import math
from typing import Sequence

import numpy as np

import config
from core.point import Point3
from core.vector import Vector3


class NotInvertibleError(ArithmeticError):
    """
    Raised when inverting a matrix whose determinant is (within EPSILON) zero.
    """


class Matrix:
    """
    Immutable square matrix stored as a float64 numpy array in [row][col]
    order. Scene transforms are 4x4; 3x3 and 2x2 matrices only appear as
    submatrices during determinant expansion.

    The @ operator composes transforms and applies them to points (w = 1)
    and vectors (w = 0). For T = C @ B @ A a point is transformed by A first,
    then B, then C.
    """
    __slots__ = ('_m',)

    def __init__(self, rows: Sequence[Sequence[float]]):
        m = np.array(rows, dtype=np.float64)
        if m.ndim != 2 or m.shape[0] != m.shape[1] or m.shape[0] == 0:
            raise ValueError(f"Matrix must be square, got shape {m.shape}")
        m.setflags(write=False)
        self._m = m

    @classmethod
    def _wrap(cls, array: np.ndarray) -> "Matrix":
        mat = cls.__new__(cls)
        array = np.array(array, dtype=np.float64)
        array.setflags(write=False)
        mat._m = array
        return mat

    @property
    def size(self) -> int:
        return self._m.shape[0]

    def __getitem__(self, index) -> float:
        row, col = index
        return float(self._m[row, col])

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.size != other.size:
            return False
        return bool(np.all(np.abs(self._m - other._m) < config.EPSILON))

    __hash__ = None

    def __matmul__(self, other):
        if isinstance(other, Matrix):
            if other.size != self.size:
                raise ValueError(f"Cannot multiply {self.size}x{self.size} by {other.size}x{other.size} matrix")
            return Matrix._wrap(self._m @ other._m)
        if isinstance(other, (Point3, Vector3)):
            if self.size != 4:
                raise ValueError("Only 4x4 matrices transform points and vectors")
            m = self._m
            x, y, z = other.x, other.y, other.z
            if isinstance(other, Point3):
                return Point3(
                    m[0, 0] * x + m[0, 1] * y + m[0, 2] * z + m[0, 3],
                    m[1, 0] * x + m[1, 1] * y + m[1, 2] * z + m[1, 3],
                    m[2, 0] * x + m[2, 1] * y + m[2, 2] * z + m[2, 3],
                )
            # Vectors ignore the translation column.
            return Vector3(
                m[0, 0] * x + m[0, 1] * y + m[0, 2] * z,
                m[1, 0] * x + m[1, 1] * y + m[1, 2] * z,
                m[2, 0] * x + m[2, 1] * y + m[2, 2] * z,
            )
        return NotImplemented

    def transpose(self) -> "Matrix":
        return Matrix._wrap(self._m.T)

    def submatrix(self, row: int, col: int) -> "Matrix":
        """
        Returns a copy with the given row and column removed.
        """
        if self.size < 2:
            raise ValueError("Cannot take a submatrix of a 1x1 matrix")
        reduced = np.delete(np.delete(self._m, row, axis=0), col, axis=1)
        return Matrix._wrap(reduced)

    def minor(self, row: int, col: int) -> float:
        return self.submatrix(row, col).determinant()

    def cofactor(self, row: int, col: int) -> float:
        minor = self.minor(row, col)
        return minor if (row + col) % 2 == 0 else -minor

    def determinant(self) -> float:
        """
        Determinant by cofactor expansion along the first row.
        """
        if self.size == 1:
            return float(self._m[0, 0])
        if self.size == 2:
            m = self._m
            return float(m[0, 0] * m[1, 1] - m[0, 1] * m[1, 0])
        return sum(float(self._m[0, col]) * self.cofactor(0, col) for col in range(self.size))

    def is_invertible(self) -> bool:
        return abs(self.determinant()) >= config.EPSILON

    def inverse(self) -> "Matrix":
        """
        Inverts the matrix with the adjugate method. The cofactor of (row, col)
        lands at (col, row), which transposes the cofactor matrix in place.

        Raises:
            NotInvertibleError: if the determinant is within EPSILON of zero
        """
        det = self.determinant()
        if abs(det) < config.EPSILON:
            raise NotInvertibleError("singular matrix - not invertible")
        n = self.size
        result = np.empty((n, n), dtype=np.float64)
        for row in range(n):
            for col in range(n):
                result[col, row] = self.cofactor(row, col) / det
        return Matrix._wrap(result)

    def tolist(self):
        return self._m.tolist()

    def __repr__(self) -> str:
        rows = ", ".join("[" + ", ".join(f"{v:.5f}" for v in row) + "]" for row in self._m)
        return f"Matrix([{rows}])"

    # Transform constructors

    @classmethod
    def identity(cls, size: int = 4) -> "Matrix":
        return cls._wrap(np.identity(size))

    @classmethod
    def translation(cls, x: float, y: float, z: float) -> "Matrix":
        return cls([
            [1.0, 0.0, 0.0, x],
            [0.0, 1.0, 0.0, y],
            [0.0, 0.0, 1.0, z],
            [0.0, 0.0, 0.0, 1.0],
        ])

    @classmethod
    def scaling(cls, x: float, y: float, z: float) -> "Matrix":
        return cls([
            [x, 0.0, 0.0, 0.0],
            [0.0, y, 0.0, 0.0],
            [0.0, 0.0, z, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ])

    @classmethod
    def rotation_x(cls, rad: float) -> "Matrix":
        c = math.cos(rad)
        s = math.sin(rad)
        return cls([
            [1.0, 0.0, 0.0, 0.0],
            [0.0, c, -s, 0.0],
            [0.0, s, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ])

    @classmethod
    def rotation_y(cls, rad: float) -> "Matrix":
        c = math.cos(rad)
        s = math.sin(rad)
        return cls([
            [c, 0.0, s, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [-s, 0.0, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ])

    @classmethod
    def rotation_z(cls, rad: float) -> "Matrix":
        c = math.cos(rad)
        s = math.sin(rad)
        return cls([
            [c, -s, 0.0, 0.0],
            [s, c, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ])

    @classmethod
    def shearing(cls, xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> "Matrix":
        return cls([
            [1.0, xy, xz, 0.0],
            [yx, 1.0, yz, 0.0],
            [zx, zy, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ])

    @classmethod
    def view_transform(cls, from_point: Point3, to: Point3, up: Vector3) -> "Matrix":
        """
        Builds the world-to-camera "look at" matrix for an eye at from_point
        looking towards `to`, with `up` roughly pointing upwards.
        """
        forward = (to - from_point).normalize()
        left = forward.cross(up.normalize())
        true_up = left.cross(forward)
        orientation = cls([
            [left.x, left.y, left.z, 0.0],
            [true_up.x, true_up.y, true_up.z, 0.0],
            [-forward.x, -forward.y, -forward.z, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ])
        return orientation @ cls.translation(-from_point.x, -from_point.y, -from_point.z)
