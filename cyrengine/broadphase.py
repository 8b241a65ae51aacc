"""Broad-phase collision culling by one-dimensional sweep and prune."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import islice
from typing import List, NamedTuple, Sequence

from cyrengine.body import Body
from cyrengine.vector import Vec3

_BOUNDS_MARGIN = 0.01


@dataclass(frozen=True, eq=False)
class CollisionPair:
    """Indices of two bodies that may collide; the order of the two does not matter."""

    a: int
    b: int

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CollisionPair):
            return NotImplemented
        return (self.a, self.b) in ((other.a, other.b), (other.b, other.a))

    def __hash__(self) -> int:
        return hash(frozenset((self.a, self.b)))


class _Endpoint(NamedTuple):
    body: int
    value: float
    is_min: bool


def _sorted_endpoints(bodies: Sequence[Body], dt: float) -> List[_Endpoint]:
    axis = Vec3(1.0, 1.0, 1.0).normalize()
    margin = Vec3(_BOUNDS_MARGIN, _BOUNDS_MARGIN, _BOUNDS_MARGIN)
    endpoints: List[_Endpoint] = []
    for index, body in enumerate(bodies):
        if body.shape is None:
            raise ValueError(f"body {index} has no shape")
        bounds = body.shape.bounds(body.position, body.orientation)

        # Grow the box to cover where the body moves this step.
        sweep = body.linear_velocity * dt
        bounds.expand(bounds.mins + sweep)
        bounds.expand(bounds.maxs + sweep)

        bounds.expand(bounds.mins - margin)
        bounds.expand(bounds.maxs + margin)

        endpoints.append(_Endpoint(index, axis.dot(bounds.mins), True))
        endpoints.append(_Endpoint(index, axis.dot(bounds.maxs), False))

    endpoints.sort(key=lambda endpoint: endpoint.value)
    return endpoints


def _build_pairs(endpoints: List[_Endpoint]) -> List[CollisionPair]:
    pairs: List[CollisionPair] = []
    for i, first in enumerate(endpoints):
        if not first.is_min:
            continue
        for other in islice(endpoints, i + 1, None):
            # Reaching the end of the first body's interval closes its pairs.
            if other.body == first.body:
                break
            if other.is_min:
                pairs.append(CollisionPair(first.body, other.body))
    return pairs


def broad_phase(bodies: Sequence[Body], dt: float) -> List[CollisionPair]:
    """Pairs of bodies whose swept bounds overlap when projected on the (1, 1, 1) axis."""
    return _build_pairs(_sorted_endpoints(bodies, dt))