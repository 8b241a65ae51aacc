"""Contact points between bodies and impulse-based collision response."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from cyrengine.body import Body
from cyrengine.vector import Vec3


@dataclass
class Contact:
    """A contact between two bodies.

    ``normal`` is in world space; ``separation_distance`` is positive when the
    bodies do not overlap and negative when they penetrate.
    """

    body_a: Optional[Body] = None
    body_b: Optional[Body] = None
    pt_on_a_world: Vec3 = field(default_factory=Vec3)
    pt_on_b_world: Vec3 = field(default_factory=Vec3)
    pt_on_a_local: Vec3 = field(default_factory=Vec3)
    pt_on_b_local: Vec3 = field(default_factory=Vec3)
    normal: Vec3 = field(default_factory=Vec3)
    separation_distance: float = 0.0
    time_of_impact: float = 0.0


def resolve_contact(contact: Contact) -> None:
    """Apply collision and friction impulses, and push penetrating bodies apart.

    Two immovable bodies (both with zero inverse mass) are left untouched.
    """
    body_a, body_b = contact.body_a, contact.body_b
    if body_a is None or body_b is None:
        raise ValueError("contact needs two bodies")

    pt_on_a = body_a.body_to_world(contact.pt_on_a_local)
    pt_on_b = body_b.body_to_world(contact.pt_on_b_local)

    inv_mass_a = body_a.inv_mass
    inv_mass_b = body_b.inv_mass
    total_inv_mass = inv_mass_a + inv_mass_b
    if total_inv_mass == 0.0:
        return

    elasticity = body_a.elasticity * body_b.elasticity
    inv_inertia_a = body_a.inverse_inertia_tensor_world()
    inv_inertia_b = body_b.inverse_inertia_tensor_world()

    n = Vec3(*contact.normal)
    ra = pt_on_a - body_a.center_of_mass_world()
    rb = pt_on_b - body_b.center_of_mass_world()

    angular_ja = (inv_inertia_a * ra.cross(n)).cross(ra)
    angular_jb = (inv_inertia_b * rb.cross(n)).cross(rb)
    angular_factor = (angular_ja + angular_jb).dot(n)

    vel_a = body_a.linear_velocity + body_a.angular_velocity.cross(ra)
    vel_b = body_b.linear_velocity + body_b.angular_velocity.cross(rb)
    vab = vel_a - vel_b

    impulse_j = (1.0 + elasticity) * vab.dot(n) / (total_inv_mass + angular_factor)
    vector_impulse_j = n * impulse_j
    body_a.apply_impulse(pt_on_a, vector_impulse_j * -1.0)
    body_b.apply_impulse(pt_on_b, vector_impulse_j * 1.0)

    # Kinetic friction along the tangential part of the relative velocity.
    friction = body_a.friction * body_b.friction
    vel_norm = n * n.dot(vab)
    vel_tang = vab - vel_norm
    tangent = Vec3(*vel_tang).normalize()

    inertia_a = (inv_inertia_a * ra.cross(tangent)).cross(ra)
    inertia_b = (inv_inertia_b * rb.cross(tangent)).cross(rb)
    inv_inertia = (inertia_a + inertia_b).dot(tangent)

    reduced_mass = 1.0 / (total_inv_mass + inv_inertia)
    impulse_friction = vel_tang * reduced_mass * friction
    body_a.apply_impulse(pt_on_a, impulse_friction * -1.0)
    body_b.apply_impulse(pt_on_b, impulse_friction * 1.0)

    # Project penetrating bodies to just outside each other.
    if contact.time_of_impact == 0.0:
        ds = pt_on_b - pt_on_a
        t_a = inv_mass_a / total_inv_mass
        t_b = inv_mass_b / total_inv_mass
        body_a.position = body_a.position + ds * t_a
        body_b.position = body_b.position - ds * t_b