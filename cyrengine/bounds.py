"""Axis-aligned bounding boxes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Union

from cyrengine.vector import Vec3

_EMPTY_EXTENT = 1e6


def _empty_mins() -> Vec3:
    return Vec3(_EMPTY_EXTENT, _EMPTY_EXTENT, _EMPTY_EXTENT)


def _empty_maxs() -> Vec3:
    return Vec3(-_EMPTY_EXTENT, -_EMPTY_EXTENT, -_EMPTY_EXTENT)


@dataclass
class Bounds:
    """An axis-aligned box given by its minimum and maximum corners.

    A new box is empty: its corners are inverted so that the first point
    it is expanded by becomes both corners.
    """

    mins: Vec3 = field(default_factory=_empty_mins)
    maxs: Vec3 = field(default_factory=_empty_maxs)

    def clear(self) -> None:
        """Reset to the empty box."""
        self.mins = _empty_mins()
        self.maxs = _empty_maxs()

    def does_intersect(self, other: "Bounds") -> bool:
        """True when the two boxes overlap or touch."""
        if (
            self.maxs.x < other.mins.x
            or self.maxs.y < other.mins.y
            or self.maxs.z < other.mins.z
        ):
            return False
        if (
            other.maxs.x < self.mins.x
            or other.maxs.y < self.mins.y
            or other.maxs.z < self.mins.z
        ):
            return False
        return True

    def expand(self, item: Union[Vec3, "Bounds", Iterable[Vec3]]) -> None:
        """Grow to contain a point, another box, or every point of an iterable."""
        if isinstance(item, Vec3):
            self._expand_point(item)
        elif isinstance(item, Bounds):
            self._expand_point(item.mins)
            self._expand_point(item.maxs)
        else:
            for point in item:
                self._expand_point(point)

    def _expand_point(self, p: Vec3) -> None:
        lo, hi = self.mins, self.maxs
        self.mins = Vec3(
            p.x if p.x < lo.x else lo.x,
            p.y if p.y < lo.y else lo.y,
            p.z if p.z < lo.z else lo.z,
        )
        self.maxs = Vec3(
            p.x if p.x > hi.x else hi.x,
            p.y if p.y > hi.y else hi.y,
            p.z if p.z > hi.z else hi.z,
        )

    def width_x(self) -> float:
        """Extent along x."""
        return self.maxs.x - self.mins.x

    def width_y(self) -> float:
        """Extent along y."""
        return self.maxs.y - self.mins.y

    def width_z(self) -> float:
        """Extent along z."""
        return self.maxs.z - self.mins.z