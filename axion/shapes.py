"""Collider shapes and the collider component that carries them."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Generic, TypeVar

Point = tuple[float, float]


class ColliderShape(ABC):
    """A 2D shape centred on the local origin of its entity."""

    @abstractmethod
    def vertices(self) -> tuple[Point, ...]:
        """Outline points in counter-clockwise order, in local space."""

    @abstractmethod
    def distance_to_point(self, point: Point) -> float:
        """Signed distance from the outline: negative inside, positive outside."""


def _ring(radius: float, count: int, start: float) -> tuple[Point, ...]:
    step = math.tau / count
    return tuple(
        (radius * math.cos(start + k * step), radius * math.sin(start + k * step))
        for k in range(count)
    )


@dataclass
class CircleShape(ColliderShape):
    radius: float

    resolution: ClassVar[int] = 32

    def vertices(self) -> tuple[Point, ...]:
        return _ring(self.radius, self.resolution, 0.0)

    def distance_to_point(self, point: Point) -> float:
        return math.hypot(*point) - self.radius


@dataclass
class RectangleShape(ColliderShape):
    width: float
    height: float

    def vertices(self) -> tuple[Point, ...]:
        hw, hh = self.width / 2, self.height / 2
        return ((hw, hh), (-hw, hh), (-hw, -hh), (hw, -hh))

    def distance_to_point(self, point: Point) -> float:
        qx = abs(point[0]) - self.width / 2
        qy = abs(point[1]) - self.height / 2
        return math.hypot(max(qx, 0.0), max(qy, 0.0)) + min(max(qx, qy), 0.0)


@dataclass
class ConvexPolygonShape(ColliderShape):
    """A regular polygon inscribed in a circle, first corner pointing up."""

    circum_radius: float
    sides: int

    def __post_init__(self) -> None:
        if self.sides < 3:
            raise ValueError(f"a polygon needs at least 3 sides, got {self.sides}")
        if self.circum_radius < 0:
            raise ValueError("polygon has a negative radius")

    def vertices(self) -> tuple[Point, ...]:
        return _ring(self.circum_radius, self.sides, math.pi / 2)

    def distance_to_point(self, point: Point) -> float:
        px, py = point
        corners = self.vertices()
        nearest, inside = math.inf, True
        for (ax, ay), (bx, by) in zip(corners, corners[1:] + corners[:1]):
            ex, ey, wx, wy = bx - ax, by - ay, px - ax, py - ay
            length_sq = ex * ex + ey * ey
            t = min(max((wx * ex + wy * ey) / length_sq, 0.0), 1.0) if length_sq else 0.0
            nearest = min(nearest, math.hypot(wx - ex * t, wy - ey * t))
            inside = inside and ex * wy - ey * wx >= 0
        return -nearest if inside else nearest


S = TypeVar("S", bound=ColliderShape)


@dataclass
class Collider(Generic[S]):
    """Component giving an entity a collision shape."""

    shape: S