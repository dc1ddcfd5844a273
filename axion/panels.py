"""Content of the editor panels: hierarchy, inspector and camera mode bar."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from axion.camera import CameraControllerMode
from axion.events import CreateEntity, Entity, EventQueue
from axion.scene import Name, Transform, World
from axion.selection import SelectedEntity, SelectedEntityChanged
from axion.shapes import CircleShape, Collider, ConvexPolygonShape, RectangleShape

HIERARCHY_OBJECTS: tuple[tuple[str, CreateEntity], ...] = (
    ("Circle", CreateEntity.CIRCLE),
    ("Regular Poly", CreateEntity.CONVEX_POLYGON),
    ("Box", CreateEntity.RECTANGLE),
)

_COLLIDER_TITLES: dict[type, str] = {
    CircleShape: "Circle Collider",
    ConvexPolygonShape: "Polygon Collider",
    RectangleShape: "Rectangle Collider",
}


@dataclass(frozen=True)
class HierarchyEntry:
    """One row of the hierarchy panel."""

    entity: Entity
    label: str

    @property
    def detail(self) -> str:
        """Text shown when the row is expanded."""
        return f"Id: {self.entity}"


def hierarchy_entries(world: World) -> list[HierarchyEntry]:
    """Rows for every named entity with a transform, numbered in order."""
    return [
        HierarchyEntry(entity, f"{name} {index}")
        for index, (entity, name, _) in enumerate(world.query(Name, Transform))
    ]


def select_entity(
    selected: SelectedEntity,
    entity: Entity,
    events: EventQueue[SelectedEntityChanged],
) -> SelectedEntityChanged:
    """Select an entity from the hierarchy and announce the change."""
    change = SelectedEntityChanged(previous=selected.entity, current=entity)
    selected.select(entity)
    events.write(change)
    return change


def inspector_sections(world: World, entity: Entity | None) -> list[tuple[str, Any]]:
    """Titled components the inspector shows for an entity, in display order."""
    if entity is None or entity not in world:
        return []
    sections: list[tuple[str, Any]] = []
    transform = world.get(entity, Transform)
    if transform is not None:
        sections.append(("Transform", transform))
    collider = world.get(entity, Collider)
    if collider is not None:
        title = _COLLIDER_TITLES.get(type(collider.shape))
        if title is not None:
            sections.append((title, collider))
    return sections


def camera_hud_modes() -> tuple[tuple[str, CameraControllerMode], ...]:
    """Buttons of the camera mode bar, left to right, with the mode each picks."""
    return (
        ("▣", CameraControllerMode.GENERAL),
        ("✋", CameraControllerMode.PAN),
        ("🖊", CameraControllerMode.PICKER),
    )