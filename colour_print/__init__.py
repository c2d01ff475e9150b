"""Colour Print: procedural color-layering puzzles."""

from colour_print.core import (
    Color,
    GameStatus,
    Grid,
    Level,
    Move,
    Tool,
    apply_tool,
    check_win,
    create_empty_grid,
    mix_colors,
)
from colour_print.systems.generator import InvalidLevelError, generate_level

__version__ = "0.1.0"

__all__ = [
    "Color",
    "GameStatus",
    "Grid",
    "InvalidLevelError",
    "Level",
    "Move",
    "Tool",
    "apply_tool",
    "check_win",
    "create_empty_grid",
    "generate_level",
    "mix_colors",
]
