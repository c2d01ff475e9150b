"""Core data models: colors, grids, tools and levels."""

from colour_print.core.enums import Color, GameStatus, Tool
from colour_print.core.colors import mix_colors
from colour_print.core.grid import Grid, check_win, create_empty_grid
from colour_print.core.tools import apply_tool
from colour_print.core.level import Level, Move

__all__ = [
    "Color",
    "GameStatus",
    "Grid",
    "Level",
    "Move",
    "Tool",
    "apply_tool",
    "check_win",
    "create_empty_grid",
    "mix_colors",
]
