"""Enumerations used throughout the engine."""

from __future__ import annotations

from enum import IntEnum, unique


@unique
class Color(IntEnum):
    """Closed set of ink colors a cell can hold."""

    EMPTY = 0
    RED = 1
    BLUE = 2
    YELLOW = 3
    ORANGE = 4
    GREEN = 5
    PURPLE = 6
    BROWN = 7
    BLACK = 8


@unique
class Tool(IntEnum):
    """Tool shapes, each with a fixed footprint around the target cell."""

    STAMP = 0       # 1x1
    ROLLER_H = 1    # whole row
    ROLLER_V = 2    # whole column
    SPRAY = 3       # 3x3, clipped at the border


@unique
class GameStatus(IntEnum):
    """Lifecycle states of a gameplay session."""

    PLAYING = 0
    WON = 1
    LOST = 2
    COMPLETED = 3
