"""Background grid of the viewport and the line styles of its gizmo groups."""

from __future__ import annotations

from dataclasses import dataclass

Segment = tuple[tuple[float, float], tuple[float, float]]

GRID_CELL_COUNT = (100, 100)
GRID_SPACING = (40.0, 40.0)
GRID_COLOR = (211 / 255, 211 / 255, 211 / 255)


@dataclass
class GizmoConfig:
    line_width: float = 2.0
    depth_bias: float = 0.0


def default_gizmo_configs() -> dict[str, GizmoConfig]:
    """Styles of the grid group, drawn behind, and the overlay group."""
    return {
        "grid": GizmoConfig(line_width=0.15, depth_bias=-0.01),
        "overlay": GizmoConfig(line_width=1.0),
    }


def grid_lines(cell_count: tuple[int, int], spacing: tuple[float, float]) -> list[Segment]:
    """Segments of a grid centred on the origin, outer edges included.

    Vertical lines come first, left to right, then horizontal lines, bottom to top.
    """
    columns, rows = cell_count
    if columns < 0 or rows < 0:
        raise ValueError(f"cell count must not be negative, got {cell_count}")
    sx, sy = spacing
    hw, hh = columns * sx / 2, rows * sy / 2
    return [((-hw + i * sx, -hh), (-hw + i * sx, hh)) for i in range(columns + 1)] + [
        ((-hw, -hh + j * sy), (hw, -hh + j * sy)) for j in range(rows + 1)
    ]