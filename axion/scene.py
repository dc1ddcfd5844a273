"""Entities, their components, and the systems that spawn and remove them."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from itertools import count
from typing import Any, TypeVar

from axion.events import CreateEntity, Entity, EventQueue, RemoveEntity
from axion.selection import SelectedEntity, SelectedEntityChanged
from axion.shapes import CircleShape, Collider, ConvexPolygonShape, RectangleShape

C = TypeVar("C")


@dataclass
class Transform:
    """Position, rotation quaternion (x, y, z, w) and scale of an entity."""

    translation: tuple[float, float, float] = (0.0, 0.0, 0.0)
    rotation: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 1.0)
    scale: tuple[float, float, float] = (1.0, 1.0, 1.0)


@dataclass(frozen=True)
class Name:
    """Display name of an entity."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Material:
    """Fill colour of an entity, as sRGB components in 0..1."""

    color: tuple[float, float, float]


class World:
    """Storage of entities, each holding at most one component of each type."""

    def __init__(self) -> None:
        self._entities: dict[Entity, dict[type, Any]] = {}
        self._ids = count()

    def spawn(self, *components: Any) -> Entity:
        """Create an entity from the given components and return its id."""
        store: dict[type, Any] = {}
        for component in components:
            kind = type(component)
            if kind in store:
                raise ValueError(f"duplicate component {kind.__name__} in bundle")
            store[kind] = component
        entity = Entity(next(self._ids))
        self._entities[entity] = store
        return entity

    def despawn(self, entity: Entity) -> None:
        """Remove an entity and all its components."""
        self._components(entity)
        del self._entities[entity]

    def insert(self, entity: Entity, component: Any) -> None:
        """Add a component, replacing one of the same type."""
        self._components(entity)[type(component)] = component

    def remove(self, entity: Entity, kind: type) -> None:
        """Drop the component of the given type, if the entity has one."""
        self._components(entity).pop(kind, None)

    def get(self, entity: Entity, kind: type[C]) -> C | None:
        """The entity's component of the given type, or None."""
        return self._components(entity).get(kind)

    def query(self, *kinds: type) -> Iterator[tuple[Any, ...]]:
        """Yield (entity, *components) for entities holding every given type."""
        for entity, store in list(self._entities.items()):
            if all(kind in store for kind in kinds):
                yield (entity, *(store[kind] for kind in kinds))

    def _components(self, entity: Entity) -> dict[type, Any]:
        try:
            return self._entities[entity]
        except KeyError:
            raise KeyError(f"entity {entity} does not exist") from None

    def __contains__(self, entity: object) -> bool:
        return entity in self._entities

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[Entity]:
        return iter(list(self._entities))


def _bundle(kind: CreateEntity) -> tuple[Any, ...]:
    match kind:
        case CreateEntity.CIRCLE:
            return (
                Material((0.2, 0.1, 0.0)),
                Transform(translation=(1.2, 0.0, 0.0)),
                Collider(CircleShape(radius=50.0)),
                Name("Circle"),
            )
        case CreateEntity.RECTANGLE:
            return (
                Material((0.5, 0.4, 0.3)),
                Transform(),
                Collider(RectangleShape(width=50.0, height=100.0)),
                Name("Rectangle"),
            )
        case CreateEntity.CONVEX_POLYGON:
            return (
                Material((0.8, 0.7, 0.6)),
                Transform(),
                Collider(ConvexPolygonShape(circum_radius=50.0, sides=6)),
                Name("Polygon"),
            )
    raise ValueError(f"unknown entity kind {kind!r}")


def handle_entity_spawning(
    world: World,
    create_events: EventQueue[CreateEntity],
    selection_events: EventQueue[SelectedEntityChanged],
    selected: SelectedEntity,
) -> list[Entity]:
    """Spawn requested objects and select each new one; return the new entities."""
    spawned = []
    for kind in create_events.read():
        entity = world.spawn(*_bundle(kind))
        if selected.entity != entity:
            selection_events.write(
                SelectedEntityChanged(previous=selected.entity, current=entity)
            )
        selected.select(entity)
        spawned.append(entity)
    return spawned


def handle_entity_despawning(world: World, remove_events: EventQueue[RemoveEntity]) -> None:
    """Despawn every entity named by a pending removal request."""
    for request in remove_events.read():
        if request.target in world:
            world.despawn(request.target)