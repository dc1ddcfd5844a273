# axion

axion is a small 2D physics scene editor built on pygame. It opens a window
with a grid background, a hierarchy panel on the left, an inspector on the
right and a camera mode bar at the top.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running the editor

```
axion
```

Options:

- `--width`, `--height`: window size in pixels (default 1280 × 720);
- `--frames N`: close the window after N frames.

In the editor you can:

- add a circle, a regular hexagon or a box from the hierarchy's *Actions*
  menu; a new object becomes the selected one and is outlined;
- click an object's row in the hierarchy to select it and show its id, or
  right-click it for a menu with *delete* and *Close*;
- edit the selected object's transform in the inspector and apply it with
  *Save*; collider fields (radius, side count, width, height) are shown and
  editable as text, but there is no save for them;
- pan the view by dragging with the middle mouse button and zoom with the
  scroll wheel, between scale 0.1 and 10;
- switch the camera controller between its general, pan and picker modes
  from the bar at the top. Only the general mode pans and zooms.

## Using it as a library

The scene model works without a window:

```python
from axion.events import CreateEntity, EventQueue
from axion.scene import World, handle_entity_spawning
from axion.selection import SelectedEntity

world = World()
creates = EventQueue()
selections = EventQueue()
selected = SelectedEntity()

creates.write(CreateEntity.CIRCLE)
handle_entity_spawning(world, creates, selections, selected)
```

Modules:

- `axion.shapes`: `CircleShape`, `RectangleShape`, `ConvexPolygonShape`
  (with `vertices()` and a signed `distance_to_point()`) and the `Collider`
  wrapper;
- `axion.events`: `CreateEntity`, `RemoveEntity` and the `EventQueue` channel;
- `axion.selection`: `SelectedEntity`, `SelectedEntityChanged`,
  `SelectedEntityMarker` and `attach_selected_entity_marker`;
- `axion.scene`: the `World` entity store, the `Transform`, `Name` and
  `Material` components, `handle_entity_spawning` and
  `handle_entity_despawning`;
- `axion.camera`: `CameraSettings`, `Camera`, `CameraControllerMode`,
  `CameraControllerState`, `MouseInput` and `handle_camera`;
- `axion.buffers`: per-entity text buffers for the inspector
  (`ComponentTextBuffers`, `TransformBuffer.save`);
- `axion.grid`: `grid_lines` and the `GizmoConfig` line styles;
- `axion.panels`: panel contents (`hierarchy_entries`, `select_entity`,
  `inspector_sections`, `camera_hud_modes`);
- `axion.app`: `AxionApp`, which can be advanced one frame at a time with
  `step`, and `main`.

## What it does not do

There is no physics simulation: shapes provide geometry only, nothing moves
or collides. Scenes cannot be saved or loaded, and clicking in the viewport
does not pick objects; selection is made from the hierarchy.