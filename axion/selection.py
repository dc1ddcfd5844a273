"""Tracking which entity is selected in the editor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from axion.events import Entity, EventQueue

if TYPE_CHECKING:
    from axion.scene import World


@dataclass
class SelectedEntity:
    """The entity currently selected, if any."""

    entity: Entity | None = None

    def select(self, entity: Entity) -> None:
        self.entity = entity


@dataclass(frozen=True)
class SelectedEntityChanged:
    """Sent when the selection moves from one entity to another."""

    previous: Entity | None
    current: Entity | None


@dataclass(frozen=True)
class SelectedEntityMarker:
    """Component present only on the selected entity."""


def attach_selected_entity_marker(
    world: World, events: EventQueue[SelectedEntityChanged]
) -> None:
    """Move the selection marker according to pending selection changes."""
    for change in events.read():
        if change.previous is not None and change.previous in world:
            world.remove(change.previous, SelectedEntityMarker)
        if change.current is not None:
            world.insert(change.current, SelectedEntityMarker())