"""Pydantic models for JSON output of levels and sessions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from colour_print.core.enums import Color, Tool

if TYPE_CHECKING:
    from colour_print.core.grid import Grid
    from colour_print.core.level import Level, Move
    from colour_print.engine.session import GameSession


def _color_name(color: Color) -> str:
    return color.name.lower()


def _tool_name(tool: Tool) -> str:
    return tool.name.lower()


def _grid_rows(grid: Grid) -> list[list[str]]:
    return [[_color_name(c) for c in row] for row in grid.rows()]


class MoveSchema(BaseModel):
    tool: str
    color: str
    row: int
    col: int

    @classmethod
    def from_move(cls, move: Move) -> MoveSchema:
        return cls(tool=_tool_name(move.tool), color=_color_name(move.color), row=move.row, col=move.col)


class LevelSchema(BaseModel):
    id: int
    name: str
    grid_size: int
    target: list[list[str]]
    moves: int
    available_colors: list[str]
    available_tools: list[str]
    undos: int
    hint: str
    fingerprint: str = ""
    solution: list[MoveSchema] = Field(default_factory=list)

    @classmethod
    def from_level(cls, level: Level, include_solution: bool = False) -> LevelSchema:
        return cls(
            id=level.id,
            name=level.name,
            grid_size=level.grid_size,
            target=_grid_rows(level.target),
            moves=level.moves,
            available_colors=[_color_name(c) for c in level.available_colors],
            available_tools=[_tool_name(t) for t in level.available_tools],
            undos=level.undos,
            hint=level.hint,
            fingerprint=level.fingerprint(),
            solution=[MoveSchema.from_move(m) for m in level.solution] if include_solution else [],
        )


class SessionSchema(BaseModel):
    level_id: int
    status: str
    moves_left: int
    undos_left: int
    selected_color: str | None = None
    selected_tool: str | None = None
    history_depth: int = 0
    grid: list[list[str]] = Field(default_factory=list)

    @classmethod
    def from_session(cls, session: GameSession) -> SessionSchema:
        if session.level is None:
            raise ValueError("session has no level")
        return cls(
            level_id=session.level.id,
            status=session.status.name.lower(),
            moves_left=session.moves_left,
            undos_left=session.undos_left,
            selected_color=_color_name(session.selected_color) if session.selected_color is not None else None,
            selected_tool=_tool_name(session.selected_tool) if session.selected_tool is not None else None,
            history_depth=session.history_depth,
            grid=_grid_rows(session.grid),
        )
