"""Narrow-phase intersection tests between bodies."""

from __future__ import annotations

import math
from typing import Optional, Tuple

from cyrengine.body import Body
from cyrengine.contact import Contact
from cyrengine.shapes import ShapeSphere, ShapeType
from cyrengine.vector import Vec3

_MIN_RAY_LENGTH = 0.001


def ray_sphere(
    ray_start: Vec3, ray_dir: Vec3, sphere_center: Vec3, sphere_radius: float
) -> Optional[Tuple[float, float]]:
    """Parameters ``(t1, t2)`` where the ray meets the sphere, or ``None`` for a miss.

    The parameters are in units of ``ray_dir``; ``t1 <= t2``.
    """
    a = ray_dir.dot(ray_dir)
    if a == 0.0:
        raise ValueError("ray direction must not be zero")
    m = sphere_center - ray_start
    b = m.dot(ray_dir)
    c = m.dot(m) - sphere_radius * sphere_radius

    delta = b * b - a * c
    if delta < 0:
        return None

    root = math.sqrt(delta)
    inv_a = 1.0 / a
    return inv_a * (b - root), inv_a * (b + root)


def sphere_sphere_dynamic(
    shape_a: ShapeSphere,
    shape_b: ShapeSphere,
    pos_a: Vec3,
    pos_b: Vec3,
    vel_a: Vec3,
    vel_b: Vec3,
    dt: float,
) -> Optional[Tuple[Vec3, Vec3, float]]:
    """Earliest contact of two moving spheres within ``dt``.

    Returns ``(pt_on_a, pt_on_b, time_of_impact)`` in world space, or ``None``.
    """
    relative_velocity = vel_a - vel_b
    ray_dir = relative_velocity * dt
    radius_sum = shape_a.radius + shape_b.radius

    t0 = 0.0
    t1 = 0.0
    if ray_dir.length_sqr() < _MIN_RAY_LENGTH * _MIN_RAY_LENGTH:
        # Too little relative motion to sweep; just test for overlap now.
        radius = radius_sum + _MIN_RAY_LENGTH
        if (pos_b - pos_a).length_sqr() > radius * radius:
            return None
    else:
        hit = ray_sphere(pos_a, ray_dir, pos_b, radius_sum)
        if hit is None:
            return None
        t0, t1 = hit

    t0 *= dt
    t1 *= dt

    if t1 < 0.0:
        return None

    toi = 0.0 if t0 < 0.0 else t0
    if toi > dt:
        return None

    new_pos_a = pos_a + vel_a * toi
    new_pos_b = pos_b + vel_b * toi
    ab = (new_pos_b - new_pos_a).normalize()

    pt_on_a = new_pos_a + ab * shape_a.radius
    pt_on_b = new_pos_b - ab * shape_b.radius
    return pt_on_a, pt_on_b, toi


def intersect(body_a: Body, body_b: Body, dt: float) -> Optional[Contact]:
    """The contact between two bodies within ``dt``, or ``None`` if they do not meet.

    Only sphere pairs are tested; any other pair of shapes gives ``None``.
    """
    shape_a, shape_b = body_a.shape, body_b.shape
    if shape_a is None or shape_b is None:
        raise ValueError("both bodies need a shape")
    if shape_a.shape_type() != ShapeType.SPHERE or shape_b.shape_type() != ShapeType.SPHERE:
        return None

    hit = sphere_sphere_dynamic(
        shape_a,
        shape_b,
        body_a.position,
        body_b.position,
        body_a.linear_velocity,
        body_b.linear_velocity,
        dt,
    )
    if hit is None:
        return None
    pt_on_a, pt_on_b, toi = hit

    contact = Contact(
        body_a=body_a,
        body_b=body_b,
        pt_on_a_world=pt_on_a,
        pt_on_b_world=pt_on_b,
        time_of_impact=toi,
    )

    # Step to the moment of impact to find the contact points in body space.
    body_a.update(toi)
    body_b.update(toi)

    contact.pt_on_a_local = body_a.world_to_body(pt_on_a)
    contact.pt_on_b_local = body_b.world_to_body(pt_on_b)
    contact.normal = (body_a.position - body_b.position).normalize()

    body_a.update(-toi)
    body_b.update(-toi)

    ab = body_b.position - body_a.position
    contact.separation_distance = ab.magnitude() - (shape_a.radius + shape_b.radius)
    return contact