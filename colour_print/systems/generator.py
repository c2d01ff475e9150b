"""Level generator: derives a whole puzzle from its numeric id.

The target is built by playing ``steps`` random moves forward with the
same tool engine the player uses, so every level is solvable by replaying
``Level.solution``.
"""

from __future__ import annotations

import logging
import math

from colour_print.core.enums import Color, Tool
from colour_print.core.grid import Grid, create_empty_grid
from colour_print.core.level import Level, Move
from colour_print.core.tools import apply_tool
from colour_print.systems.rng import SeededSequence

logger = logging.getLogger(__name__)

# (exclusive lower id bound, grid size), checked from the largest down
_GRID_SIZE_THRESHOLDS: tuple[tuple[int, int], ...] = (
    (20000, 8),
    (5000, 7),
    (1000, 6),
    (100, 5),
    (10, 4),
)
BASE_GRID_SIZE = 3

BASE_STEPS = 2
STEP_SCALE = 8
MAX_STEPS = 40

BASE_PALETTE: tuple[Color, ...] = (Color.RED, Color.BLUE, Color.YELLOW)
BLACK_UNLOCK_ID = 50

BASE_TOOLSET: tuple[Tool, ...] = (Tool.STAMP, Tool.ROLLER_H, Tool.ROLLER_V)
SPRAY_UNLOCK_ID = 5

TIGHT_BUFFER_ID = 1000

MAX_UNDOS = 10
MIN_UNDOS = 2
UNDO_DECAY_INTERVAL = 500

DIFFICULTY_NAMES: tuple[str, ...] = (
    "Beginner",
    "Apprentice",
    "Journeyman",
    "Artisan",
    "Expert",
    "Master",
    "Grandmaster",
    "Legend",
)
DIFFICULTY_SCALE = 1.5

TUTORIAL_LEVELS = 5
TUTORIAL_HINT = "Layer primary colors to create new ones!"


class InvalidLevelError(ValueError):
    """Raised for level ids the generator cannot derive a level from."""


def _check_id(level_id: int) -> None:
    if isinstance(level_id, bool) or not isinstance(level_id, int):
        raise InvalidLevelError(f"level id must be an integer, got {level_id!r}")
    if level_id < 1:
        raise InvalidLevelError(f"level id must be >= 1, got {level_id}")


# -- derivation tables --

def grid_size_for(level_id: int) -> int:
    for threshold, size in _GRID_SIZE_THRESHOLDS:
        if level_id > threshold:
            return size
    return BASE_GRID_SIZE


def steps_for(level_id: int) -> int:
    return min(BASE_STEPS + math.floor(math.log10(level_id) * STEP_SCALE), MAX_STEPS)


def palette_for(level_id: int) -> tuple[Color, ...]:
    if level_id > BLACK_UNLOCK_ID:
        return BASE_PALETTE + (Color.BLACK,)
    return BASE_PALETTE


def toolset_for(level_id: int) -> tuple[Tool, ...]:
    if level_id > SPRAY_UNLOCK_ID:
        return BASE_TOOLSET + (Tool.SPRAY,)
    return BASE_TOOLSET


def move_budget_for(level_id: int, steps: int) -> int:
    buffer = 1 if level_id > TIGHT_BUFFER_ID else 3
    return steps + buffer


def undos_for(level_id: int) -> int:
    return max(MAX_UNDOS - level_id // UNDO_DECAY_INTERVAL, MIN_UNDOS)


def difficulty_name(level_id: int) -> str:
    idx = min(math.floor(math.log10(level_id) * DIFFICULTY_SCALE), len(DIFFICULTY_NAMES) - 1)
    return DIFFICULTY_NAMES[idx]


def hint_for(level_id: int, grid_size: int, steps: int) -> str:
    if level_id <= TUTORIAL_LEVELS:
        return TUTORIAL_HINT
    return f"Level {level_id}: A {grid_size}x{grid_size} pattern requiring {steps} precise layers."


class LevelGenerator:
    """Builds :class:`Level` descriptors from ids.

    Holds no state between calls; each ``generate`` owns a fresh
    :class:`SeededSequence`, so concurrent calls need no locking.
    """

    __slots__ = ()

    def generate(self, level_id: int) -> Level:
        _check_id(level_id)

        grid_size = grid_size_for(level_id)
        steps = steps_for(level_id)
        colors = palette_for(level_id)
        tools = toolset_for(level_id)

        target, solution = self._build_target(level_id, grid_size, steps, colors, tools)

        level = Level(
            id=level_id,
            name=f"{difficulty_name(level_id)} #{level_id}",
            grid_size=grid_size,
            target=target,
            moves=move_budget_for(level_id, steps),
            available_colors=colors,
            available_tools=tools,
            undos=undos_for(level_id),
            hint=hint_for(level_id, grid_size, steps),
            solution=solution,
        )
        logger.debug(
            "Generated level %d: %dx%d, %d steps, %d moves, %d undos",
            level_id, grid_size, grid_size, steps, level.moves, level.undos,
        )
        return level

    @staticmethod
    def _build_target(
        level_id: int,
        grid_size: int,
        steps: int,
        colors: tuple[Color, ...],
        tools: tuple[Tool, ...],
    ) -> tuple[Grid, tuple[Move, ...]]:
        """Play ``steps`` random moves onto an empty grid.

        Draw order per step is fixed: color, tool, row, col.
        """
        seq = SeededSequence(level_id)
        target = create_empty_grid(grid_size)
        solution: list[Move] = []
        for _ in range(steps):
            color = seq.choice(colors)
            tool = seq.choice(tools)
            row = seq.next_index(grid_size)
            col = seq.next_index(grid_size)
            target = apply_tool(target, tool, color, row, col)
            solution.append(Move(tool=tool, color=color, row=row, col=col))
        return target, tuple(solution)


_DEFAULT_GENERATOR = LevelGenerator()


def generate_level(level_id: int) -> Level:
    """Return the level for *level_id*; identical ids give identical levels."""
    return _DEFAULT_GENERATOR.generate(level_id)
