"""Quaternions for representing rotations."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real

from cyrengine.matrix import Mat3
from cyrengine.vector import Vec3, Vec4


@dataclass
class Quat:
    """A quaternion ``w + xi + yj + zk``; the default is the identity rotation."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    @classmethod
    def from_axis_angle(cls, axis: Vec3, angle: float) -> "Quat":
        """Rotation by ``angle`` radians about ``axis``; the axis need not be unit length."""
        half = 0.5 * angle
        half_sine = math.sin(half)
        n = Vec3(*axis).normalize()
        return cls(n.x * half_sine, n.y * half_sine, n.z * half_sine, math.cos(half))

    def __iter__(self):
        return iter((self.x, self.y, self.z, self.w))

    def __mul__(self, other):
        if not isinstance(other, Quat):
            return NotImplemented
        return Quat(
            self.x * other.w + self.w * other.x + self.y * other.z - self.z * other.y,
            self.y * other.w + self.w * other.y + self.z * other.x - self.x * other.z,
            self.z * other.w + self.w * other.z + self.x * other.y - self.y * other.x,
            self.w * other.w - self.x * other.x - self.y * other.y - self.z * other.z,
        )

    def __imul__(self, other):
        if isinstance(other, Quat):
            product = self * other
        elif isinstance(other, Real):
            product = Quat(self.x * other, self.y * other, self.z * other, self.w * other)
        else:
            return NotImplemented
        self.x, self.y, self.z, self.w = product
        return self

    def normalize(self) -> "Quat":
        """Scale to unit length in place; a zero or non-finite length is left alone."""
        mag = self.magnitude()
        if mag != 0.0 and math.isfinite(mag):
            inv = 1.0 / mag
            if math.isfinite(inv):
                self.x *= inv
                self.y *= inv
                self.z *= inv
                self.w *= inv
        return self

    def invert(self) -> "Quat":
        """Invert in place; raises ZeroDivisionError for the zero quaternion."""
        self *= 1.0 / self.magnitude_squared()
        self.x = -self.x
        self.y = -self.y
        self.z = -self.z
        return self

    def inverse(self) -> "Quat":
        """Return the inverse, leaving this quaternion unchanged."""
        return Quat(self.x, self.y, self.z, self.w).invert()

    def magnitude_squared(self) -> float:
        """Squared length."""
        return self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w

    def magnitude(self) -> float:
        """Length."""
        return math.sqrt(self.magnitude_squared())

    def rotate_point(self, point: Vec3) -> Vec3:
        """Rotate a point by this quaternion."""
        rotated = self * Quat(point.x, point.y, point.z, 0.0) * self.inverse()
        return Vec3(rotated.x, rotated.y, rotated.z)

    def rotate_matrix(self, mat: Mat3) -> Mat3:
        """Rotate each row of ``mat``."""
        return Mat3(*(self.rotate_point(row) for row in mat.rows))

    def xyz(self) -> Vec3:
        """The vector part."""
        return Vec3(self.x, self.y, self.z)

    def is_valid(self) -> bool:
        """True when no component is NaN or infinite."""
        return all(math.isfinite(c) for c in self)

    def to_mat3(self) -> Mat3:
        """A matrix whose rows are the rotated unit axes."""
        identity = Mat3()
        identity.identity()
        return self.rotate_matrix(identity)

    def to_vec4(self) -> Vec4:
        """The components as ``(w, x, y, z)``."""
        return Vec4(self.w, self.x, self.y, self.z)