"""Tool application: mixes a tool's color into every cell of its footprint."""

from __future__ import annotations

from colour_print.core.colors import mix_colors
from colour_print.core.enums import Color, Tool
from colour_print.core.grid import Grid

_SPRAY_OFFSETS: tuple[tuple[int, int], ...] = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1)
)


def tool_footprint(tool: Tool, size: int, row: int, col: int) -> list[tuple[int, int]]:
    """Return the in-bounds cells *tool* touches when aimed at (row, col).

    Off-grid targets and off-grid parts of a spray are dropped, never wrapped.
    """
    if tool == Tool.STAMP:
        cells = [(row, col)]
    elif tool == Tool.ROLLER_H:
        cells = [(row, c) for c in range(size)]
    elif tool == Tool.ROLLER_V:
        cells = [(r, col) for r in range(size)]
    elif tool == Tool.SPRAY:
        cells = [(row + dr, col + dc) for dr, dc in _SPRAY_OFFSETS]
    else:
        raise ValueError(f"unknown tool: {tool!r}")
    return [(r, c) for r, c in cells if 0 <= r < size and 0 <= c < size]


def apply_tool(grid: Grid, tool: Tool, color: Color, row: int, col: int) -> Grid:
    """Return a new grid with *color* mixed into the footprint of *tool*.

    The input grid is left untouched.
    """
    if not isinstance(tool, Tool):
        raise ValueError(f"not a Tool: {tool!r}")
    if not isinstance(color, Color):
        raise ValueError(f"not a Color: {color!r}")

    new = grid.copy()
    for r, c in tool_footprint(tool, grid.size, row, col):
        new.set(r, c, mix_colors(new.get(r, c), color))
    return new
