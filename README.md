# cyrengine

A small rigid-body physics core in pure Python, with no third-party
dependencies. It covers the math types, sphere shapes, rigid bodies,
broad-phase culling, continuous sphere–sphere collision detection and
impulse-based collision response.

## Modules

- `cyrengine.vector` – `Vec2`, `Vec3`, `Vec4` (dataclasses with `+`, `-`,
  scalar `*`, in-place operators, indexing, `dot`, `normalize`, `magnitude`,
  `is_valid`; `Vec3` adds `cross`, `length_sqr` and `ortho`, which returns two
  unit vectors orthogonal to it) and the variable-length `VecN`. `normalize`
  works in place and leaves a zero-length vector unchanged. Mixing `VecN`s of
  different sizes raises `ValueError`.
- `cyrengine.matrix` – `Mat2`, `Mat3`, `Mat4`, `MatMN` and `MatN`. `Mat3` and
  `Mat4` have `determinant`, `transpose`, `inverse` (cofactor method; a
  singular matrix raises `ZeroDivisionError`), `minor` and `cofactor`. `Mat4`
  also builds transforms in place: `orient`, `look_at`, `perspective_opengl`,
  `perspective_vulkan`, `ortho_opengl` and `ortho_vulkan`, and flattens with
  `to_list`. Note that `trace` returns the sum of the *squares* of the
  diagonal elements, and `MatN * MatN` gives the element-wise product
  `a[i][j] * b[j][i]`, not a matrix product.
- `cyrengine.quat` – `Quat` (`x, y, z, w`, identity by default), with
  `from_axis_angle`, multiplication, `normalize`, `invert`/`inverse`,
  `rotate_point`, `rotate_matrix`, `to_mat3` and `to_vec4` (as `w, x, y, z`).
- `cyrengine.bounds` – `Bounds`, an axis-aligned box that starts empty and
  grows with `expand` (a point, another box or an iterable of points); also
  `does_intersect`, `clear` and `width_x`/`width_y`/`width_z`.
- `cyrengine.lcp` – `lcp_gauss_seidel(a, b)`, which runs as many Gauss–Seidel
  sweeps over `a x = b` as there are unknowns, skipping any step that would
  be NaN or infinite.
- `cyrengine.shapes` – `ShapeType` (`SPHERE`, `BOX`, `CONVEX`), the abstract
  `Shape`, and `ShapeSphere`, with its inertia tensor, world and local bounds
  and support point.
- `cyrengine.body` – `Body`, a dataclass holding `shape`, `position`,
  `orientation`, `linear_velocity`, `angular_velocity`, `inv_mass`
  (default 1), `elasticity` (default 1) and `friction` (default 0). It
  converts points between world and body space, gives its inverse inertia
  tensor, applies impulses (angular speed is capped at 30 rad/s), and
  `update(dt)` integrates position and orientation, including gyroscopic
  precession. A body with `inv_mass == 0` is not moved by impulses.
- `cyrengine.broadphase` – `broad_phase(bodies, dt)` projects each body's
  bounds, swept by its velocity over `dt` and padded by 0.01, onto the
  (1, 1, 1) axis and returns overlapping `CollisionPair`s of body indices.
  Pairs compare equal regardless of the order of their two indices.
- `cyrengine.intersections` – `ray_sphere`, `sphere_sphere_dynamic` and
  `intersect(body_a, body_b, dt)`, which returns a `Contact` or `None`.
- `cyrengine.contact` – `Contact` and `resolve_contact`, which applies the
  collision impulse and a kinetic friction impulse, and, for a contact at
  time of impact 0, moves the bodies apart in proportion to their inverse
  masses. Two immovable bodies are left untouched.
- `cyrengine.paths` – `asset_path`, `asset_full_path`, `shader_path` and
  `shader_full_path` walk up to eight directories from the running script
  (or the interpreter, when there is no script) looking for a
  `CMakeLists.txt`, then return its `Assets` or `Engine/Shaders/spv`
  directory. `FileNotFoundError` is raised if either cannot be found.

## Installation

```
pip install .
```

## Example

```python
from cyrengine.body import Body
from cyrengine.broadphase import broad_phase
from cyrengine.contact import resolve_contact
from cyrengine.intersections import intersect
from cyrengine.shapes import ShapeSphere
from cyrengine.vector import Vec3

ball = Body(
    shape=ShapeSphere(1.0),
    position=Vec3(0.0, 0.0, 5.0),
    linear_velocity=Vec3(0.0, 0.0, -10.0),
    inv_mass=1.0,
    elasticity=0.5,
    friction=0.5,
)
ground = Body(
    shape=ShapeSphere(100.0),
    position=Vec3(0.0, 0.0, -100.0),
    inv_mass=0.0,  # immovable
    elasticity=1.0,
    friction=0.5,
)

bodies = [ball, ground]
dt = 1.0 / 60.0

for pair in broad_phase(bodies, dt):
    contact = intersect(bodies[pair.a], bodies[pair.b], dt)
    if contact is not None:
        resolve_contact(contact)

for body in bodies:
    body.update(dt)
```

## What it does not do

- There is no scene or world object and no simulation loop: stepping the
  bodies, as in the example above, is up to the caller. Gravity and other
  external forces are not applied.
- Only spheres exist as shapes. `ShapeType.BOX` and `ShapeType.CONVEX` are
  named but have no shape classes, and `intersect` returns `None` for any
  pair that is not two spheres.
- There is no rendering, windowing or input handling; the projection
  matrices are plain math.

## Running the tests

```
pip install .[test]
pytest
```