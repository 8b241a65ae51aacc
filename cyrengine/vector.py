"""Two-, three-, four- and N-component float vectors."""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass
from numbers import Real
from typing import Iterable, Iterator, Optional, Tuple, Union


def _inverse_magnitude(mag: float) -> Optional[float]:
    """Return ``1 / mag`` when that is a finite number, otherwise ``None``."""
    if mag == 0.0 or math.isnan(mag):
        return None
    inv = 1.0 / mag
    return inv if math.isfinite(inv) else None


class _FixedVector:
    """Operators and helpers shared by the fixed-size vectors."""

    _AXES: Tuple[str, ...] = ()

    def __iter__(self) -> Iterator[float]:
        return (getattr(self, axis) for axis in self._AXES)

    def __len__(self) -> int:
        return len(self._AXES)

    def _axis(self, idx: int) -> str:
        idx = operator.index(idx)
        if not 0 <= idx < len(self._AXES):
            raise IndexError(f"{type(self).__name__} index out of range: {idx}")
        return self._AXES[idx]

    def __getitem__(self, idx: int) -> float:
        return getattr(self, self._axis(idx))

    def __setitem__(self, idx: int, value: float) -> None:
        setattr(self, self._axis(idx), value)

    def _same_kind(self, other: object) -> bool:
        return type(other) is type(self)

    def __add__(self, other):
        if not self._same_kind(other):
            return NotImplemented
        return type(self)(*(a + b for a, b in zip(self, other)))

    def __sub__(self, other):
        if not self._same_kind(other):
            return NotImplemented
        return type(self)(*(a - b for a, b in zip(self, other)))

    def __mul__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        return type(self)(*(c * scalar for c in self))

    __rmul__ = __mul__

    def __iadd__(self, other):
        if not self._same_kind(other):
            return NotImplemented
        for axis, value in zip(self._AXES, other):
            setattr(self, axis, getattr(self, axis) + value)
        return self

    def __isub__(self, other):
        if not self._same_kind(other):
            return NotImplemented
        for axis, value in zip(self._AXES, other):
            setattr(self, axis, getattr(self, axis) - value)
        return self

    def __imul__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        for axis in self._AXES:
            setattr(self, axis, getattr(self, axis) * scalar)
        return self

    def __itruediv__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        for axis in self._AXES:
            setattr(self, axis, getattr(self, axis) / scalar)
        return self

    def _clear(self) -> None:
        for axis in self._AXES:
            setattr(self, axis, 0.0)

    def _dot(self, other) -> float:
        return sum(a * b for a, b in zip(self, other))

    def _length(self) -> float:
        return math.sqrt(sum(c * c for c in self))

    def _scale_to_unit(self):
        inv = _inverse_magnitude(self._length())
        if inv is not None:
            for axis in self._AXES:
                setattr(self, axis, getattr(self, axis) * inv)
        return self

    def _all_finite(self) -> bool:
        return all(math.isfinite(c) for c in self)


@dataclass
class Vec2(_FixedVector):
    """A two-component vector."""

    x: float = 0.0
    y: float = 0.0

    _AXES = ("x", "y")

    def zero(self) -> None:
        """Set every component to zero."""
        self._clear()

    def dot(self, other: "Vec2") -> float:
        """Dot product."""
        return self._dot(other)

    def normalize(self) -> "Vec2":
        """Scale to unit length in place; a zero or non-finite length is left alone."""
        return self._scale_to_unit()

    def magnitude(self) -> float:
        """Euclidean length."""
        return self._length()

    def is_valid(self) -> bool:
        """True when no component is NaN or infinite."""
        return self._all_finite()


@dataclass
class Vec3(_FixedVector):
    """A three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    _AXES = ("x", "y", "z")

    def __truediv__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def zero(self) -> None:
        """Set every component to zero."""
        self._clear()

    def cross(self, other: "Vec3") -> "Vec3":
        """Cross product ``self x other``."""
        return Vec3(
            self.y * other.z - other.y * self.z,
            other.x * self.z - self.x * other.z,
            self.x * other.y - other.x * self.y,
        )

    def dot(self, other: "Vec3") -> float:
        """Dot product."""
        return self._dot(other)

    def normalize(self) -> "Vec3":
        """Scale to unit length in place; a zero or non-finite length is left alone."""
        return self._scale_to_unit()

    def magnitude(self) -> float:
        """Euclidean length."""
        return self._length()

    def length_sqr(self) -> float:
        """Squared length."""
        return self.dot(self)

    def is_valid(self) -> bool:
        """True when no component is NaN or infinite."""
        return self._all_finite()

    def ortho(self) -> Tuple["Vec3", "Vec3"]:
        """Return two unit vectors ``(u, v)`` orthogonal to this vector and to each other."""
        n = Vec3(self.x, self.y, self.z).normalize()
        w = Vec3(1.0, 0.0, 0.0) if n.z * n.z > 0.9 * 0.9 else Vec3(0.0, 0.0, 1.0)
        u = w.cross(n).normalize()
        v = n.cross(u).normalize()
        u = v.cross(n).normalize()
        return u, v


@dataclass
class Vec4(_FixedVector):
    """A four-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    _AXES = ("x", "y", "z", "w")

    def _factors(self, other) -> Optional[Tuple[float, ...]]:
        if isinstance(other, Vec4):
            return tuple(other)
        if isinstance(other, Real):
            return (other,) * 4
        return None

    def __imul__(self, other):
        """Multiply component-wise by another Vec4, or by a scalar."""
        factors = self._factors(other)
        if factors is None:
            return NotImplemented
        for axis, f in zip(self._AXES, factors):
            setattr(self, axis, getattr(self, axis) * f)
        return self

    def __itruediv__(self, other):
        """Divide component-wise by another Vec4, or by a scalar."""
        factors = self._factors(other)
        if factors is None:
            return NotImplemented
        for axis, f in zip(self._AXES, factors):
            setattr(self, axis, getattr(self, axis) / f)
        return self

    def zero(self) -> None:
        """Set every component to zero."""
        self._clear()

    def dot(self, other: "Vec4") -> float:
        """Dot product."""
        return self._dot(other)

    def normalize(self) -> "Vec4":
        """Scale to unit length in place; a zero or non-finite length is left alone."""
        return self._scale_to_unit()

    def magnitude(self) -> float:
        """Euclidean length."""
        return self._length()

    def is_valid(self) -> bool:
        """True when no component is NaN or infinite."""
        return self._all_finite()


class VecN:
    """A vector with any number of components."""

    __slots__ = ("data",)

    def __init__(self, size_or_values: Union[int, Iterable[float]] = 0) -> None:
        if isinstance(size_or_values, int):
            if size_or_values < 0:
                raise ValueError("vector size must not be negative")
            self.data = [0.0] * size_or_values
        else:
            self.data = [float(v) for v in size_or_values]

    @property
    def n(self) -> int:
        """Number of components."""
        return len(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[float]:
        return iter(self.data)

    def __getitem__(self, idx: int) -> float:
        return self.data[idx]

    def __setitem__(self, idx: int, value: float) -> None:
        self.data[idx] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VecN):
            return NotImplemented
        return self.data == other.data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"VecN({self.data!r})"

    def _check(self, other: "VecN") -> None:
        if len(other) != len(self):
            raise ValueError(f"size mismatch: {len(self)} and {len(other)}")

    def __mul__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        return VecN(c * scalar for c in self.data)

    __rmul__ = __mul__

    def __imul__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        self.data = [c * scalar for c in self.data]
        return self

    def __add__(self, other):
        if not isinstance(other, VecN):
            return NotImplemented
        self._check(other)
        return VecN(a + b for a, b in zip(self.data, other.data))

    def __sub__(self, other):
        if not isinstance(other, VecN):
            return NotImplemented
        self._check(other)
        return VecN(a - b for a, b in zip(self.data, other.data))

    def __iadd__(self, other):
        if not isinstance(other, VecN):
            return NotImplemented
        self._check(other)
        self.data = [a + b for a, b in zip(self.data, other.data)]
        return self

    def __isub__(self, other):
        if not isinstance(other, VecN):
            return NotImplemented
        self._check(other)
        self.data = [a - b for a, b in zip(self.data, other.data)]
        return self

    def dot(self, other: "VecN") -> float:
        """Dot product with a vector of the same size."""
        self._check(other)
        return sum(a * b for a, b in zip(self.data, other.data))

    def zero(self) -> None:
        """Set every component to zero."""
        self.data = [0.0] * len(self.data)