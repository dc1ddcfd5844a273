"""Events sent from the interface to the scene."""

from __future__ import annotations

import enum
from collections import deque
from dataclasses import dataclass
from typing import Generic, NewType, TypeVar

Entity = NewType("Entity", int)

T = TypeVar("T")


class CreateEntity(enum.Enum):
    CIRCLE = enum.auto()
    RECTANGLE = enum.auto()
    CONVEX_POLYGON = enum.auto()


@dataclass(frozen=True)
class RemoveEntity:
    target: Entity


class EventQueue(Generic[T]):
    """A first-in first-out channel of events between systems."""

    def __init__(self) -> None:
        self._pending: deque[T] = deque()

    def write(self, event: T) -> None:
        self._pending.append(event)

    def read(self) -> list[T]:
        """Take every pending event, oldest first."""
        events = list(self._pending)
        self._pending.clear()
        return events

    def __len__(self) -> int:
        return len(self._pending)