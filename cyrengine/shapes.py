"""Collision shapes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum

from cyrengine.bounds import Bounds
from cyrengine.matrix import Mat3
from cyrengine.quat import Quat
from cyrengine.vector import Vec3


class ShapeType(Enum):
    """The kinds of shape a body can have."""

    SPHERE = 0
    BOX = 1
    CONVEX = 2


class Shape(ABC):
    """Base class for the geometry of a rigid body."""

    def __init__(self) -> None:
        self._center_of_mass = Vec3()

    @abstractmethod
    def inertia_tensor(self) -> Mat3:
        """Inertia tensor per unit mass, in model space."""

    @abstractmethod
    def bounds(self, pos: Vec3, orient: Quat) -> Bounds:
        """World-space bounds for the shape placed at ``pos`` with ``orient``."""

    @abstractmethod
    def local_bounds(self) -> Bounds:
        """Bounds in model space."""

    def center_of_mass(self) -> Vec3:
        """Centre of mass in model space."""
        return Vec3(*self._center_of_mass)

    @abstractmethod
    def shape_type(self) -> ShapeType:
        """The kind of shape."""

    @abstractmethod
    def support(self, direction: Vec3, pos: Vec3, orient: Quat, bias: float) -> Vec3:
        """The furthest point of the shape in ``direction``, grown by ``bias``."""

    def fastest_linear_speed(self, angular_velocity: Vec3, direction: Vec3) -> float:
        """Fastest speed of any surface point along ``direction`` due to rotation."""
        return 0.0


class ShapeSphere(Shape):
    """A solid sphere centred on its model origin."""

    def __init__(self, radius: float) -> None:
        super().__init__()
        self.radius = radius

    def __repr__(self) -> str:
        return f"ShapeSphere(radius={self.radius!r})"

    def inertia_tensor(self) -> Mat3:
        """Inertia tensor of a solid sphere per unit mass."""
        value = 2.0 * self.radius * self.radius / 5.0
        return Mat3((value, 0.0, 0.0), (0.0, value, 0.0), (0.0, 0.0, value))

    def bounds(self, pos: Vec3, orient: Quat) -> Bounds:
        """World-space bounds; a sphere's do not depend on orientation."""
        r = self.radius
        return Bounds(Vec3(-r, -r, -r) + pos, Vec3(r, r, r) + pos)

    def local_bounds(self) -> Bounds:
        """Bounds in model space."""
        r = self.radius
        return Bounds(Vec3(-r, -r, -r), Vec3(r, r, r))

    def shape_type(self) -> ShapeType:
        return ShapeType.SPHERE

    def support(self, direction: Vec3, pos: Vec3, orient: Quat, bias: float) -> Vec3:
        """The surface point furthest along ``direction``, pushed out by ``bias``."""
        unit = Vec3(*direction).normalize()
        return pos + unit * (self.radius + bias)