"""Level descriptor and the moves that build its target."""

from __future__ import annotations

from dataclasses import dataclass

from colour_print.core.enums import Color, Tool
from colour_print.core.grid import Grid


@dataclass(frozen=True, slots=True)
class Move:
    """One tool application at a target cell."""

    tool: Tool
    color: Color
    row: int
    col: int


@dataclass(frozen=True, slots=True)
class Level:
    """Immutable description of one generated puzzle.

    ``available_colors[0]`` and ``available_tools[0]`` are the default
    selections when the level starts. The target is stored as a frozen
    grid, so a level is hashable and cannot be repainted after the fact.
    """

    id: int
    name: str
    grid_size: int
    target: Grid
    moves: int
    available_colors: tuple[Color, ...]
    available_tools: tuple[Tool, ...]
    undos: int
    hint: str
    solution: tuple[Move, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "target", self.target.freeze())

    def target_grid(self) -> Grid:
        """Independent copy of the target, safe for callers to mutate."""
        return self.target.copy()

    def fingerprint(self) -> str:
        from colour_print.utils.fingerprint import level_fingerprint

        return level_fingerprint(self)
