"""The editor application: scene systems driven each frame, drawn with pygame."""

from __future__ import annotations

import argparse
import math
from functools import partial
from typing import Any, Callable

import pygame

from axion.buffers import ComponentTextBuffers
from axion.camera import Camera, CameraControllerState, CameraSettings, MouseInput, handle_camera
from axion.events import CreateEntity, Entity, EventQueue, RemoveEntity
from axion.grid import GRID_CELL_COUNT, GRID_COLOR, GRID_SPACING, default_gizmo_configs, grid_lines
from axion.panels import (
    HIERARCHY_OBJECTS,
    camera_hud_modes,
    hierarchy_entries,
    inspector_sections,
    select_entity,
)
from axion.scene import Material, Transform, World, handle_entity_despawning, handle_entity_spawning
from axion.selection import (
    SelectedEntity,
    SelectedEntityChanged,
    SelectedEntityMarker,
    attach_selected_entity_marker,
)
from axion.shapes import CircleShape, Collider, ConvexPolygonShape

CLEAR_COLOR = (0.25, 0.25, 0.25)

_ROW = 24
_PANEL, _EDGE, _TEXT = (38, 38, 42), (70, 70, 76), (220, 220, 220)
_BUTTON, _ACTIVE, _OVERLAY = (62, 62, 70), (90, 110, 160), (255, 200, 40)

# widget: (rect, left-click handler, right-click handler)
_Widget = tuple[pygame.Rect, "Callable[[], Any] | None", "Callable[[], Any] | None"]


def _rgb(color: tuple[float, ...]) -> tuple[int, ...]:
    return tuple(round(c * 255) for c in color)


class AxionApp:
    """Editor state plus the per-frame systems that update it."""

    def __init__(
        self,
        settings: CameraSettings | None = None,
        *,
        size: tuple[int, int] = (1280, 720),
        max_frames: int | None = None,
    ) -> None:
        if max_frames is not None and max_frames < 0:
            raise ValueError(f"frame limit must not be negative, got {max_frames}")
        self.settings = settings or CameraSettings()
        self.camera = Camera.from_settings(self.settings)
        self.controller = CameraControllerState()
        self.world = World()
        self.selected = SelectedEntity()
        self.buffers = ComponentTextBuffers()
        self.create_events: EventQueue[CreateEntity] = EventQueue()
        self.remove_events: EventQueue[RemoveEntity] = EventQueue()
        self.selection_events: EventQueue[SelectedEntityChanged] = EventQueue()
        self.gizmos = default_gizmo_configs()
        self.mouse = MouseInput()
        self.select_requested = False
        self.size = size
        self.max_frames = max_frames

        self._grid = grid_lines(GRID_CELL_COUNT, GRID_SPACING)
        self._widgets: list[_Widget] = []
        self._expanded: set[Entity] = set()
        self._menu_open = self._menu_was_open = False
        self._context: tuple[Entity, tuple[int, int]] | None = None
        self._focus: tuple[Any, str] | None = None

    def step(self, delta_secs: float) -> None:
        """Run one frame of the scene systems and consume the frame's mouse input."""
        if delta_secs < 0:
            raise ValueError(f"frame time must not be negative, got {delta_secs}")
        handle_entity_spawning(self.world, self.create_events, self.selection_events, self.selected)
        attach_selected_entity_marker(self.world, self.selection_events)
        handle_entity_despawning(self.world, self.remove_events)
        self.select_requested = handle_camera(
            self.camera, self.controller, self.settings, self.mouse, delta_secs
        )
        self.mouse = MouseInput()

    def run(self) -> None:
        """Open the editor window and loop until it is closed or the frame limit is hit."""
        pygame.display.init()
        pygame.font.init()
        try:
            screen = pygame.display.set_mode(self.size, pygame.RESIZABLE)
            pygame.display.set_caption("Axion")
            self._font = pygame.font.Font(None, 20)
            clock = pygame.time.Clock()
            frames = 0
            while self.max_frames is None or frames < self.max_frames:
                delta = clock.tick(60) / 1000.0
                if not self._handle_events(pygame.event.get()):
                    break
                self.step(delta)
                self._draw(screen)
                pygame.display.flip()
                frames += 1
        finally:
            pygame.quit()

    # input

    def _handle_events(self, events: list[pygame.event.Event]) -> bool:
        dx = dy = 0.0
        scroll: list[float] = []
        for event in events:
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.MOUSEMOTION:
                dx, dy = dx + event.rel[0], dy + event.rel[1]
            elif event.type == pygame.MOUSEWHEEL and not self._over_ui(pygame.mouse.get_pos()):
                scroll.append(float(event.y))
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button in (1, 3):
                self._click(event.pos, event.button)
            elif event.type == pygame.KEYDOWN:
                self._type(event)
        buttons = pygame.mouse.get_pressed()
        self.mouse = MouseInput(
            delta=(dx, dy),
            middle_pressed=bool(buttons[1]),
            left_pressed=bool(buttons[0]) and not self._over_ui(pygame.mouse.get_pos()),
            scroll=tuple(scroll),
        )
        return True

    def _over_ui(self, pos: tuple[int, int]) -> bool:
        return any(rect.collidepoint(pos) for rect, _, _ in self._widgets)

    def _click(self, pos: tuple[int, int], button: int) -> None:
        self._menu_was_open, self._menu_open = self._menu_open, False
        self._context = self._focus = None
        for rect, on_click, on_context in reversed(self._widgets):
            if rect.collidepoint(pos):
                handler = on_click if button == 1 else on_context
                if handler is not None:
                    handler()
                return

    def _type(self, event: pygame.event.Event) -> None:
        if self._focus is None:
            return
        buffer, attr = self._focus
        text = getattr(buffer, attr)
        if event.key == pygame.K_BACKSPACE:
            text = text[:-1]
        elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_ESCAPE):
            self._focus = None
            return
        elif event.unicode and event.unicode.isprintable():
            text += event.unicode
        setattr(buffer, attr, text)

    def _toggle_menu(self) -> None:
        self._menu_open = not self._menu_was_open

    def _on_entry_click(self, entity: Entity) -> None:
        self._expanded ^= {entity}
        select_entity(self.selected, entity, self.selection_events)

    def _set(self, name: str, value: Any) -> None:
        setattr(self, name, value)

    # drawing

    def _draw(self, screen: pygame.Surface) -> None:
        self._widgets = []
        self._expanded &= set(self.world)
        screen.fill(_rgb(CLEAR_COLOR))
        size = screen.get_size()
        grid_width = max(1, round(self.gizmos["grid"].line_width))
        for start, end in self._grid:
            pygame.draw.line(
                screen, _rgb(GRID_COLOR), self._to_screen(start, size),
                self._to_screen(end, size), grid_width,
            )
        self._draw_entities(screen)
        self._draw_hierarchy(screen)
        self._draw_inspector(screen)
        self._draw_hud(screen)
        self._draw_popups(screen)

    def _to_screen(self, point: tuple[float, float], size: tuple[int, int]) -> tuple[float, float]:
        ppu = size[1] / self.camera.visible_height
        return (
            size[0] / 2 + (point[0] - self.camera.x) * ppu,
            size[1] / 2 - (point[1] - self.camera.y) * ppu,
        )

    def _draw_entities(self, screen: pygame.Surface) -> None:
        size = screen.get_size()
        overlay_width = max(1, round(self.gizmos["overlay"].line_width)) + 1
        for entity, transform, collider, material in self.world.query(Transform, Collider, Material):
            tx, ty, _ = transform.translation
            _, _, rz, rw = transform.rotation
            sx, sy, _ = transform.scale
            angle = 2 * math.atan2(rz, rw)
            cos, sin = math.cos(angle), math.sin(angle)
            points = [
                self._to_screen(
                    (vx * sx * cos - vy * sy * sin + tx, vx * sx * sin + vy * sy * cos + ty), size
                )
                for vx, vy in collider.shape.vertices()
            ]
            if len(points) < 3:
                continue
            pygame.draw.polygon(screen, _rgb(material.color), points)
            if self.world.get(entity, SelectedEntityMarker) is not None:
                pygame.draw.polygon(screen, _OVERLAY, points, overlay_width)

    def _text(self, screen: pygame.Surface, text: str, pos: tuple[int, int]) -> None:
        screen.blit(self._font.render(text, True, _TEXT), pos)

    def _panel(self, screen: pygame.Surface, rect: pygame.Rect) -> None:
        pygame.draw.rect(screen, _PANEL, rect)
        pygame.draw.rect(screen, _EDGE, rect, 1)
        self._widgets.append((rect, None, None))

    def _button(self, screen: pygame.Surface, rect: pygame.Rect, text: str,
                on_click: Callable[[], Any], active: bool = False) -> None:
        pygame.draw.rect(screen, _ACTIVE if active else _BUTTON, rect, border_radius=3)
        self._text(screen, text, (rect.x + 6, rect.y + 4))
        self._widgets.append((rect, on_click, None))

    def _field(self, screen: pygame.Surface, rect: pygame.Rect, buffer: Any, attr: str) -> None:
        focused = self._focus is not None and self._focus[0] is buffer and self._focus[1] == attr
        pygame.draw.rect(screen, _ACTIVE if focused else _EDGE, rect, 1)
        self._text(screen, getattr(buffer, attr), (rect.x + 4, rect.y + 3))
        self._widgets.append((rect, partial(self._set, "_focus", (buffer, attr)), None))

    def _draw_hierarchy(self, screen: pygame.Surface) -> None:
        panel = pygame.Rect(0, 0, 220, screen.get_height())
        self._panel(screen, panel)
        self._text(screen, "Hierarchy", (10, 12))
        self._button(screen, pygame.Rect(panel.right - 80, 8, 70, 22), "Actions", self._toggle_menu)
        y = 46
        for entry in hierarchy_entries(self.world):
            expanded = entry.entity in self._expanded
            row = pygame.Rect(4, y, panel.w - 8, _ROW - 2)
            if entry.entity == self.selected.entity:
                pygame.draw.rect(screen, _ACTIVE, row, border_radius=3)
            self._text(screen, f"{'-' if expanded else '+'} {entry.label}", (row.x + 6, row.y + 4))
            context = (entry.entity, (row.x + 20, row.bottom))
            self._widgets.append(
                (row, partial(self._on_entry_click, entry.entity), partial(self._set, "_context", context))
            )
            y += _ROW
            if expanded:
                self._text(screen, entry.detail, (row.x + 24, y + 2))
                y += _ROW

    def _draw_inspector(self, screen: pygame.Surface) -> None:
        width, height = screen.get_size()
        panel = pygame.Rect(width - 280, 0, 280, height)
        self._panel(screen, panel)
        self._text(screen, "Inspector", (panel.x + 10, 12))
        entity, left, y = self.selected.entity, panel.x + 10, 46
        for title, component in inspector_sections(self.world, entity):
            self._text(screen, title, (left, y))
            y += _ROW
            if isinstance(component, Transform):
                buffer = self.buffers.transform_buffer(entity, component)
                rows = (("Position", ("pos_x", "pos_y")), ("Rotation", ("rot_x", "rot_y")),
                        ("ScaleFactor", ("scale_factor",)))
                for label, attrs in rows:
                    self._text(screen, label, (left, y + 3))
                    for index, attr in enumerate(attrs):
                        self._field(screen, pygame.Rect(left + 108 + index * 86, y, 60, 20), buffer, attr)
                    y += _ROW
                self._button(screen, pygame.Rect(left, y, 60, 22), "Save", partial(buffer.save, component))
                y += _ROW
            else:
                shape = component.shape
                if isinstance(shape, CircleShape):
                    buffer, fields = self.buffers.circle_buffer(entity, component), (("Radius", "radius"),)
                elif isinstance(shape, ConvexPolygonShape):
                    buffer = self.buffers.polygon_buffer(entity, component)
                    fields = (("Radius", "circum_radius"), ("Side Number", "sides"))
                else:
                    buffer = self.buffers.rectangle_buffer(entity, component)
                    fields = (("Width", "width"), ("Height", "height"))
                for label, attr in fields:
                    self._text(screen, label, (left, y + 3))
                    self._field(screen, pygame.Rect(left + 108, y, 60, 20), buffer, attr)
                    y += _ROW
            y += 12

    def _draw_hud(self, screen: pygame.Surface) -> None:
        modes = camera_hud_modes()
        frame = pygame.Rect((screen.get_width() - len(modes) * 74 - 4) // 2, 4, len(modes) * 74 + 4, 30)
        self._panel(screen, frame)
        for index, (_, mode) in enumerate(modes):
            self._button(
                screen, pygame.Rect(frame.x + 4 + index * 74, frame.y + 4, 70, 22), mode.name.title(),
                partial(setattr, self.controller, "mode", mode), self.controller.mode is mode,
            )

    def _draw_popups(self, screen: pygame.Surface) -> None:
        if self._menu_open:
            menu = pygame.Rect(100, 32, 118, len(HIERARCHY_OBJECTS) * _ROW + 4)
            self._panel(screen, menu)
            for index, (label, kind) in enumerate(HIERARCHY_OBJECTS):
                rect = pygame.Rect(menu.x + 4, menu.y + 2 + index * _ROW, menu.w - 8, 22)
                self._button(screen, rect, label, partial(self.create_events.write, kind))
        if self._context is not None:
            entity, (x, y) = self._context
            self._panel(screen, pygame.Rect(x, y, 90, 2 * _ROW + 4))
            self._button(screen, pygame.Rect(x + 4, y + 2, 82, 22), "delete",
                         partial(self.remove_events.write, RemoveEntity(entity)))
            self._button(screen, pygame.Rect(x + 4, y + 2 + _ROW, 82, 22), "Close", lambda: None)


def _frame_count(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"frame count must not be negative: {value}")
    return value


def main(argv: list[str] | None = None) -> int:
    """Start the editor."""
    parser = argparse.ArgumentParser(prog="axion", description="2D physics scene editor")
    parser.add_argument("--width", type=int, default=1280, help="window width in pixels")
    parser.add_argument("--height", type=int, default=720, help="window height in pixels")
    parser.add_argument("--frames", type=_frame_count, default=None, help="stop after this many frames")
    args = parser.parse_args(argv)
    AxionApp(size=(args.width, args.height), max_frames=args.frames).run()
    return 0