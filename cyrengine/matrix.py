"""Fixed-size square matrices and general dense matrices."""

from __future__ import annotations

import math
from numbers import Real
from typing import Iterable, Iterator, List, Union

from cyrengine.vector import Vec2, Vec3, Vec4, VecN


class _SquareMatrix:
    """Row-major square matrix built from fixed-size vector rows."""

    _SIZE = 0
    _ROW: type = Vec2

    __slots__ = ("rows",)

    def __init__(self, *rows: Iterable[float]) -> None:
        if rows and len(rows) != self._SIZE:
            raise ValueError(f"{type(self).__name__} needs {self._SIZE} rows, got {len(rows)}")
        if rows:
            self.rows = [self._ROW(*row) for row in rows]
        else:
            self.rows = [self._ROW() for _ in range(self._SIZE)]

    def __getitem__(self, idx: int):
        return self.rows[idx]

    def __iter__(self) -> Iterator:
        return iter(self.rows)

    def __len__(self) -> int:
        return self._SIZE

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.rows == other.rows

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        inner = ", ".join(repr(tuple(row)) for row in self.rows)
        return f"{type(self).__name__}({inner})"

    def _product(self, other: "_SquareMatrix") -> "_SquareMatrix":
        columns = list(zip(*other.rows))
        return type(self)(
            *(
                [sum(a * b for a, b in zip(row, col)) for col in columns]
                for row in self.rows
            )
        )

    def __mul__(self, other):
        if isinstance(other, Real):
            return type(self)(*(row * other for row in self.rows))
        if type(other) is self._ROW:
            return self._ROW(*(row.dot(other) for row in self.rows))
        if type(other) is type(self):
            return self._product(other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return self * other
        return NotImplemented

    def __add__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(*(a + b for a, b in zip(self.rows, other.rows)))

    def __imul__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        for row in self.rows:
            row *= scalar
        return self

    def __iadd__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        for row, extra in zip(self.rows, other.rows):
            row += extra
        return self

    def _clear(self) -> None:
        for row in self.rows:
            row.zero()

    def _set_identity(self) -> None:
        self.rows = [
            self._ROW(*(1.0 if col == r else 0.0 for col in range(self._SIZE)))
            for r in range(self._SIZE)
        ]

    def _transposed(self):
        return type(self)(*zip(*self.rows))

    def _squared_diagonal_sum(self) -> float:
        return sum(self.rows[k][k] * self.rows[k][k] for k in range(self._SIZE))


class _CofactorMatrix(_SquareMatrix):
    """Square matrix whose inverse is found through cofactors."""

    _MINOR: type = _SquareMatrix

    __slots__ = ()

    def _minor_of(self, i: int, j: int):
        if not (0 <= i < self._SIZE and 0 <= j < self._SIZE):
            raise IndexError(f"minor index out of range: ({i}, {j})")
        return self._MINOR(
            *(
                [value for col, value in enumerate(row) if col != j]
                for r, row in enumerate(self.rows)
                if r != i
            )
        )

    def _cofactor_of(self, i: int, j: int) -> float:
        sign = -1.0 if (i + j) % 2 else 1.0
        return sign * self._minor_of(i, j).determinant()

    def _inverted(self, det: float):
        adjugate = type(self)(
            *([self._cofactor_of(i, j) for i in range(self._SIZE)] for j in range(self._SIZE))
        )
        adjugate *= 1.0 / det
        return adjugate


class Mat2(_SquareMatrix):
    """A 2x2 matrix."""

    _SIZE = 2
    _ROW = Vec2

    __slots__ = ()

    def zero(self) -> None:
        """Set every element to zero."""
        self._clear()

    def identity(self) -> None:
        """Become the identity matrix."""
        self._set_identity()

    def transpose(self) -> "Mat2":
        """Return the transposed matrix."""
        return self._transposed()

    def trace(self) -> float:
        """Sum of the squares of the diagonal elements."""
        return self._squared_diagonal_sum()

    def determinant(self) -> float:
        """Determinant."""
        r0, r1 = self.rows
        return r0.x * r1.y - r0.y * r1.x


class Mat3(_CofactorMatrix):
    """A 3x3 matrix."""

    _SIZE = 3
    _ROW = Vec3
    _MINOR = Mat2

    __slots__ = ()

    def zero(self) -> None:
        """Set every element to zero."""
        self._clear()

    def identity(self) -> None:
        """Become the identity matrix."""
        self._set_identity()

    def trace(self) -> float:
        """Sum of the squares of the diagonal elements."""
        return self._squared_diagonal_sum()

    def determinant(self) -> float:
        """Determinant."""
        m = self.rows
        i = m[0][0] * (m[1][1] * m[2][2] - m[1][2] * m[2][1])
        j = m[0][1] * (m[1][0] * m[2][2] - m[1][2] * m[2][0])
        k = m[0][2] * (m[1][0] * m[2][1] - m[1][1] * m[2][0])
        return i - j + k

    def transpose(self) -> "Mat3":
        """Return the transposed matrix."""
        return self._transposed()

    def inverse(self) -> "Mat3":
        """Return the inverse; raises ZeroDivisionError for a singular matrix."""
        return self._inverted(self.determinant())

    def minor(self, i: int, j: int) -> Mat2:
        """The 2x2 matrix left after removing row ``i`` and column ``j``."""
        return self._minor_of(i, j)

    def cofactor(self, i: int, j: int) -> float:
        """Signed determinant of the ``(i, j)`` minor."""
        return self._cofactor_of(i, j)


def _vulkan_correction() -> "Mat4":
    """Maps OpenGL clip space to Vulkan's: y flipped, z moved into [0, 1]."""
    return Mat4(
        (1.0, 0.0, 0.0, 0.0),
        (0.0, -1.0, 0.0, 0.0),
        (0.0, 0.0, 0.5, 0.5),
        (0.0, 0.0, 0.0, 1.0),
    )


class Mat4(_CofactorMatrix):
    """A 4x4 matrix with camera and projection builders."""

    _SIZE = 4
    _ROW = Vec4
    _MINOR = Mat3

    __slots__ = ()

    def zero(self) -> None:
        """Set every element to zero."""
        self._clear()

    def identity(self) -> None:
        """Become the identity matrix."""
        self._set_identity()

    def trace(self) -> float:
        """Sum of the squares of the diagonal elements."""
        return self._squared_diagonal_sum()

    def determinant(self) -> float:
        """Determinant by cofactor expansion along the first row."""
        det = 0.0
        sign = 1.0
        for j in range(4):
            det += self.rows[0][j] * self.minor(0, j).determinant() * sign
            sign = -sign
        return det

    def transpose(self) -> "Mat4":
        """Return the transposed matrix."""
        return self._transposed()

    def inverse(self) -> "Mat4":
        """Return the inverse; raises ZeroDivisionError for a singular matrix."""
        return self._inverted(self.determinant())

    def minor(self, i: int, j: int) -> Mat3:
        """The 3x3 matrix left after removing row ``i`` and column ``j``."""
        return self._minor_of(i, j)

    def cofactor(self, i: int, j: int) -> float:
        """Signed determinant of the ``(i, j)`` minor."""
        return self._cofactor_of(i, j)

    def orient(self, pos: Vec3, fwd: Vec3, up: Vec3) -> None:
        """Become a transform with +x forward, +y left, +z up, placed at ``pos``."""
        left = up.cross(fwd)
        self.rows = [
            Vec4(fwd.x, left.x, up.x, pos.x),
            Vec4(fwd.y, left.y, up.y, pos.y),
            Vec4(fwd.z, left.z, up.z, pos.z),
            Vec4(0.0, 0.0, 0.0, 1.0),
        ]

    def look_at(self, pos: Vec3, target: Vec3, up: Vec3) -> None:
        """Become a view matrix for a camera at ``pos`` looking at ``target``."""
        fwd = (pos - target).normalize()
        right = up.cross(fwd).normalize()
        up = fwd.cross(right).normalize()
        self.rows = [
            Vec4(right.x, right.y, right.z, -pos.dot(right)),
            Vec4(up.x, up.y, up.z, -pos.dot(up)),
            Vec4(fwd.x, fwd.y, fwd.z, -pos.dot(fwd)),
            Vec4(0.0, 0.0, 0.0, 1.0),
        ]

    def perspective_opengl(self, fovy: float, aspect_ratio: float, near: float, far: float) -> None:
        """Become an OpenGL perspective projection; ``fovy`` is in degrees."""
        fovy_radians = fovy * math.pi / 180.0
        f = 1.0 / math.tan(fovy_radians * 0.5)
        xscale = f
        yscale = f / aspect_ratio
        self.rows = [
            Vec4(xscale, 0.0, 0.0, 0.0),
            Vec4(0.0, yscale, 0.0, 0.0),
            Vec4(0.0, 0.0, (far + near) / (near - far), (2.0 * far * near) / (near - far)),
            Vec4(0.0, 0.0, -1.0, 0.0),
        ]

    def perspective_vulkan(self, fovy: float, aspect_ratio: float, near: float, far: float) -> None:
        """Become a perspective projection for Vulkan's clip space."""
        opengl = Mat4()
        opengl.perspective_opengl(fovy, aspect_ratio, near, far)
        self.rows = (_vulkan_correction() * opengl).rows

    def ortho_opengl(
        self, xmin: float, xmax: float, ymin: float, ymax: float, znear: float, zfar: float
    ) -> None:
        """Become an OpenGL orthographic projection."""
        width = xmax - xmin
        height = ymax - ymin
        depth = zfar - znear
        tx = -(xmax + xmin) / width
        ty = -(ymax + ymin) / height
        tz = -(zfar + znear) / depth
        self.rows = [
            Vec4(2.0 / width, 0.0, 0.0, tx),
            Vec4(0.0, 2.0 / height, 0.0, ty),
            Vec4(0.0, 0.0, -2.0 / depth, tz),
            Vec4(0.0, 0.0, 0.0, 1.0),
        ]

    def ortho_vulkan(
        self, xmin: float, xmax: float, ymin: float, ymax: float, znear: float, zfar: float
    ) -> None:
        """Become an orthographic projection for Vulkan's clip space."""
        opengl = Mat4()
        opengl.ortho_opengl(xmin, xmax, ymin, ymax, znear, zfar)
        self.rows = (_vulkan_correction() * opengl).rows

    def to_list(self) -> List[float]:
        """The sixteen elements in row-major order."""
        return [value for row in self.rows for value in row]


def _rows_from(values: Iterable[Iterable[float]]) -> List[VecN]:
    return [VecN(row) for row in values]


class MatMN:
    """A dense matrix with ``m`` rows and ``n`` columns."""

    __slots__ = ("rows", "_n")

    def __init__(self, m_or_rows: Union[int, Iterable[Iterable[float]]] = 0, n: int = 0) -> None:
        if isinstance(m_or_rows, int):
            if m_or_rows < 0 or n < 0:
                raise ValueError("matrix dimensions must not be negative")
            self.rows = [VecN(n) for _ in range(m_or_rows)]
            self._n = n
        else:
            self.rows = _rows_from(m_or_rows)
            self._n = len(self.rows[0]) if self.rows else n
            if any(len(row) != self._n for row in self.rows):
                raise ValueError("all rows must have the same length")

    @property
    def m(self) -> int:
        """Number of rows."""
        return len(self.rows)

    @property
    def n(self) -> int:
        """Number of columns."""
        return self._n

    def __getitem__(self, idx: int) -> VecN:
        return self.rows[idx]

    def __iter__(self) -> Iterator[VecN]:
        return iter(self.rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MatMN):
            return NotImplemented
        return (self.m, self.n) == (other.m, other.n) and self.rows == other.rows

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"MatMN({[row.data for row in self.rows]!r})"

    def __mul__(self, other):
        if isinstance(other, Real):
            return MatMN([row * other for row in self.rows], self.n)
        if isinstance(other, VecN):
            if len(other) != self.n:
                raise ValueError(f"vector of size {len(other)} does not fit {self.m}x{self.n} matrix")
            return VecN(other.dot(row) for row in self.rows)
        if isinstance(other, MatMN):
            if other.m != self.n:
                raise ValueError(
                    f"cannot multiply {self.m}x{self.n} by {other.m}x{other.n} matrix"
                )
            columns = other.transpose().rows
            return MatMN([[row.dot(col) for col in columns] for row in self.rows], other.n)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return self * other
        return NotImplemented

    def __imul__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        for row in self.rows:
            row *= scalar
        return self

    def zero(self) -> None:
        """Set every element to zero."""
        for row in self.rows:
            row.zero()

    def transpose(self) -> "MatMN":
        """Return the ``n`` by ``m`` transposed matrix."""
        return MatMN(zip(*self.rows), self.m) if self.n else MatMN(0, self.m)


class MatN:
    """A dense square matrix of any size."""

    __slots__ = ("rows",)

    def __init__(self, size_or_rows: Union[int, MatMN, "MatN", Iterable[Iterable[float]]] = 0) -> None:
        if isinstance(size_or_rows, int):
            if size_or_rows < 0:
                raise ValueError("matrix size must not be negative")
            self.rows = [VecN(size_or_rows) for _ in range(size_or_rows)]
            return
        if isinstance(size_or_rows, MatMN) and size_or_rows.m != size_or_rows.n:
            raise ValueError(
                f"a {size_or_rows.m}x{size_or_rows.n} matrix is not square"
            )
        rows = _rows_from(size_or_rows)
        if any(len(row) != len(rows) for row in rows):
            raise ValueError("rows do not form a square matrix")
        self.rows = rows

    @property
    def n(self) -> int:
        """Number of rows, equal to the number of columns."""
        return len(self.rows)

    def __len__(self) -> int:
        return len(self.rows)

    def __getitem__(self, idx: int) -> VecN:
        return self.rows[idx]

    def __iter__(self) -> Iterator[VecN]:
        return iter(self.rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MatN):
            return NotImplemented
        return self.rows == other.rows

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"MatN({[row.data for row in self.rows]!r})"

    def identity(self) -> None:
        """Become the identity matrix."""
        for i, row in enumerate(self.rows):
            row.zero()
            row[i] = 1.0

    def zero(self) -> None:
        """Set every element to zero."""
        for row in self.rows:
            row.zero()

    def transpose(self) -> None:
        """Transpose in place."""
        self.rows = _rows_from(zip(*self.rows))

    def __imul__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        for row in self.rows:
            row *= scalar
        return self

    def __mul__(self, other):
        if isinstance(other, VecN):
            return VecN(row.dot(other) for row in self.rows)
        if isinstance(other, MatN):
            if other.n != self.n:
                raise ValueError(f"size mismatch: {self.n} and {other.n}")
            # Element (i, j) is self[i][j] * other[j][i].
            return MatN(
                [
                    [value * other.rows[j][i] for j, value in enumerate(row)]
                    for i, row in enumerate(self.rows)
                ]
            )
        return NotImplemented