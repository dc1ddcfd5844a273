"""Editor camera: settings, controller modes and mouse-driven panning and zooming."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


@dataclass(frozen=True)
class CameraSettings:
    """Tuning of the orthographic editor camera."""

    orthographic_viewport_height: float = 1000.0
    zoom_range: tuple[float, float] = (0.1, 10.0)
    pan_speed: float = 70.0
    zoom_speed: float = 2.0

    def __post_init__(self) -> None:
        low, high = self.zoom_range
        if low > high:
            raise ValueError(f"zoom range {self.zoom_range} has its start above its end")


@dataclass
class Camera:
    """A 2D orthographic camera with a fixed vertical viewport height."""

    x: float = 0.0
    y: float = 0.0
    scale: float = 1.0
    viewport_height: float = 1000.0

    @classmethod
    def from_settings(cls, settings: CameraSettings) -> Camera:
        """A camera at the origin, unzoomed, sized by the settings."""
        return cls(viewport_height=settings.orthographic_viewport_height)

    @property
    def visible_height(self) -> float:
        """World units covered vertically at the current zoom."""
        return self.viewport_height * self.scale


class CameraControllerMode(enum.Enum):
    """What mouse input on the viewport does."""

    GENERAL = enum.auto()
    PICKER = enum.auto()
    PAN = enum.auto()


@dataclass
class CameraControllerState:
    """The controller mode currently chosen in the interface."""

    mode: CameraControllerMode = CameraControllerMode.GENERAL


@dataclass
class MouseInput:
    """Mouse activity accumulated over one frame."""

    delta: tuple[float, float] = (0.0, 0.0)
    middle_pressed: bool = False
    left_pressed: bool = False
    scroll: tuple[float, ...] = field(default_factory=tuple)


def handle_camera(
    camera: Camera,
    state: CameraControllerState,
    settings: CameraSettings,
    mouse: MouseInput,
    delta_secs: float,
) -> bool:
    """Apply one frame of mouse input to the camera.

    Returns True when the input asks for the entity under the cursor to be
    selected. Only the general mode acts on the camera.
    """
    if state.mode is not CameraControllerMode.GENERAL:
        return False

    dx, dy = mouse.delta
    if (dx, dy) != (0.0, 0.0) and mouse.middle_pressed:
        factor = -1.0 * settings.pan_speed * delta_secs
        camera.x += dx * factor
        camera.y -= dy * factor

    low, high = settings.zoom_range
    for scroll_y in mouse.scroll:
        zoom_factor = 1.0 + -scroll_y * settings.zoom_speed * delta_secs
        camera.scale = min(max(camera.scale * zoom_factor, low), high)

    return mouse.left_pressed