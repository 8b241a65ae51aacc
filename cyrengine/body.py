"""Rigid bodies."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from cyrengine.matrix import Mat3
from cyrengine.quat import Quat
from cyrengine.shapes import Shape
from cyrengine.vector import Vec3

MAX_ANGULAR_SPEED = 30.0


@dataclass
class Body:
    """A rigid body: a shape with a pose, velocities and material properties.

    An ``inv_mass`` of zero makes the body immovable by impulses.
    """

    shape: Optional[Shape] = None
    position: Vec3 = field(default_factory=Vec3)
    orientation: Quat = field(default_factory=Quat)
    linear_velocity: Vec3 = field(default_factory=Vec3)
    angular_velocity: Vec3 = field(default_factory=Vec3)
    inv_mass: float = 1.0
    elasticity: float = 1.0
    friction: float = 0.0

    def _shape(self) -> Shape:
        if self.shape is None:
            raise ValueError("body has no shape")
        return self.shape

    def center_of_mass_world(self) -> Vec3:
        """Centre of mass in world space."""
        com = self._shape().center_of_mass()
        return self.position + self.orientation.rotate_point(com)

    def center_of_mass_model(self) -> Vec3:
        """Centre of mass in model space."""
        return self._shape().center_of_mass()

    def world_to_body(self, point: Vec3) -> Vec3:
        """Express a world-space point relative to the centre of mass, in body axes."""
        offset = point - self.center_of_mass_world()
        return self.orientation.inverse().rotate_point(offset)

    def body_to_world(self, point: Vec3) -> Vec3:
        """Inverse of :meth:`world_to_body`."""
        return self.center_of_mass_world() + self.orientation.rotate_point(point)

    def inverse_inertia_tensor_body(self) -> Mat3:
        """Inverse inertia tensor in body space."""
        return self._shape().inertia_tensor().inverse() * self.inv_mass

    def inverse_inertia_tensor_world(self) -> Mat3:
        """Inverse inertia tensor in world space."""
        inv_inertia = self._shape().inertia_tensor().inverse() * self.inv_mass
        orient = self.orientation.to_mat3()
        return orient * inv_inertia * orient.transpose()

    def apply_impulse(self, point: Vec3, impulse: Vec3) -> None:
        """Apply a world-space impulse at a world-space point."""
        if self.inv_mass == 0.0:
            return
        self.apply_impulse_linear(impulse)
        r = point - self.center_of_mass_world()
        self.apply_impulse_angular(r.cross(impulse))

    def apply_impulse_linear(self, impulse: Vec3) -> None:
        """Change the linear velocity by ``impulse / mass``."""
        if self.inv_mass == 0.0:
            return
        self.linear_velocity = self.linear_velocity + impulse * self.inv_mass

    def apply_impulse_angular(self, impulse: Vec3) -> None:
        """Apply an angular impulse; the angular speed is capped."""
        if self.inv_mass == 0.0:
            return
        velocity = self.angular_velocity + self.inverse_inertia_tensor_world() * impulse
        if velocity.length_sqr() > MAX_ANGULAR_SPEED * MAX_ANGULAR_SPEED:
            velocity = velocity.normalize() * MAX_ANGULAR_SPEED
        self.angular_velocity = velocity

    def update(self, dt: float) -> None:
        """Advance position and orientation by ``dt`` seconds."""
        self.position = self.position + self.linear_velocity * dt

        position_cm = self.center_of_mass_world()
        cm_to_pos = self.position - position_cm

        # Internal torque from precession: alpha = I^-1 (w x I w).
        orient = self.orientation.to_mat3()
        inertia = orient * self._shape().inertia_tensor() * orient.transpose()
        w = self.angular_velocity
        alpha = inertia.inverse() * w.cross(inertia * w)
        self.angular_velocity = w + alpha * dt

        d_angle = self.angular_velocity * dt
        dq = Quat.from_axis_angle(d_angle, d_angle.magnitude())
        self.orientation = (dq * self.orientation).normalize()

        self.position = position_cm + dq.rotate_point(cm_to_pos)