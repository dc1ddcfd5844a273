"""Editable text held by the inspector for each entity's components."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from decimal import Decimal

from axion.events import Entity
from axion.scene import Transform
from axion.shapes import CircleShape, Collider, ConvexPolygonShape, RectangleShape


def _format_float(value: float) -> str:
    """Shortest text for a number, without exponent or trailing '.0'."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def _parse_float(text: str) -> float | None:
    """The number written in text, or None; surrounding spaces and '_' are refused."""
    if text != text.strip() or "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


@dataclass
class TransformBuffer:
    """Text fields of the transform editor."""

    pos_x: str
    pos_y: str
    rot_x: str
    rot_y: str
    scale_factor: str = "1"

    @classmethod
    def from_transform(cls, transform: Transform) -> TransformBuffer:
        x, y, _ = transform.translation
        rx, ry, _, _ = transform.rotation
        return cls(
            pos_x=_format_float(x),
            pos_y=_format_float(y),
            rot_x=_format_float(rx),
            rot_y=_format_float(ry),
        )

    def save(self, transform: Transform) -> None:
        """Write every field that parses as a number into the transform."""
        x, y, z = transform.translation
        if (value := _parse_float(self.pos_x)) is not None:
            x = value
        if (value := _parse_float(self.pos_y)) is not None:
            y = value
        transform.translation = (x, y, z)

        rx, ry, rz, rw = transform.rotation
        if (value := _parse_float(self.rot_x)) is not None:
            rx = value
        # The rotation's y component is taken from the position's y field.
        if (value := _parse_float(self.pos_y)) is not None:
            ry = value
        transform.rotation = (rx, ry, rz, rw)

        if (factor := _parse_float(self.scale_factor)) is not None:
            transform.scale = tuple(component * factor for component in transform.scale)


@dataclass
class CircleColliderBuffer:
    """Text field of the circle collider editor."""

    radius: str


@dataclass
class ConvexPolygonBuffer:
    """Text fields of the polygon collider editor."""

    circum_radius: str
    sides: str


@dataclass
class RectangleColliderBuffer:
    """Text fields of the rectangle collider editor."""

    width: str
    height: str


@dataclass
class ComponentTextBuffers:
    """Per-entity editor buffers, created from the component on first use."""

    transforms: dict[Entity, TransformBuffer] = field(default_factory=dict)
    circles: dict[Entity, CircleColliderBuffer] = field(default_factory=dict)
    polygons: dict[Entity, ConvexPolygonBuffer] = field(default_factory=dict)
    rectangles: dict[Entity, RectangleColliderBuffer] = field(default_factory=dict)

    def transform_buffer(self, entity: Entity, transform: Transform) -> TransformBuffer:
        if entity not in self.transforms:
            self.transforms[entity] = TransformBuffer.from_transform(transform)
        return self.transforms[entity]

    def circle_buffer(
        self, entity: Entity, collider: Collider[CircleShape]
    ) -> CircleColliderBuffer:
        if entity not in self.circles:
            self.circles[entity] = CircleColliderBuffer(
                radius=_format_float(collider.shape.radius)
            )
        return self.circles[entity]

    def polygon_buffer(
        self, entity: Entity, collider: Collider[ConvexPolygonShape]
    ) -> ConvexPolygonBuffer:
        if entity not in self.polygons:
            self.polygons[entity] = ConvexPolygonBuffer(
                circum_radius=_format_float(collider.shape.circum_radius),
                sides=str(collider.shape.sides),
            )
        return self.polygons[entity]

    def rectangle_buffer(
        self, entity: Entity, collider: Collider[RectangleShape]
    ) -> RectangleColliderBuffer:
        if entity not in self.rectangles:
            self.rectangles[entity] = RectangleColliderBuffer(
                width=_format_float(collider.shape.width),
                height=_format_float(collider.shape.height),
            )
        return self.rectangles[entity]