"""GameSession: mutable play state layered over the pure core.

The session owns the player grid, the move and undo budgets and the
snapshot stack used for undo; each history entry is an independent copy.
"""

from __future__ import annotations

import logging

from colour_print.config import GameConfig
from colour_print.core.enums import Color, GameStatus, Tool
from colour_print.core.grid import Grid, check_win, create_empty_grid
from colour_print.core.level import Level
from colour_print.core.tools import apply_tool
from colour_print.systems.generator import InvalidLevelError, generate_level
from colour_print.utils.event_log import EventLog, SessionEvent

logger = logging.getLogger(__name__)


class SessionError(RuntimeError):
    """Raised for player actions that the current level does not allow."""


class GameSession:
    """One player working through levels one at a time."""

    def __init__(self, config: GameConfig | None = None) -> None:
        self.config = config or GameConfig()

        self.level: Level | None = None
        self.grid: Grid | None = None
        self.status: GameStatus | None = None
        self.moves_left: int = 0
        self.undos_left: int = 0
        self.selected_color: Color | None = None
        self.selected_tool: Tool | None = None

        self._history: list[Grid] = []
        self.events = EventLog()

    # -- properties --

    @property
    def history_depth(self) -> int:
        return len(self._history)

    @property
    def moves_used(self) -> int:
        if self.level is None:
            return 0
        return self.level.moves - self.moves_left

    # -- lifecycle --

    def start(self, level_id: int) -> Level:
        """Generate *level_id* and begin playing it from an empty grid."""
        if not self.config.is_playable(level_id):
            raise InvalidLevelError(
                f"level {level_id} outside "
                f"[{self.config.min_level_id}, {self.config.max_level_count}]"
            )
        level = generate_level(level_id)
        self.load(level)
        return level

    def load(self, level: Level) -> None:
        """Begin playing an already-built level."""
        self.level = level
        self.grid = create_empty_grid(level.grid_size)
        self.moves_left = level.moves
        self.undos_left = level.undos
        self.selected_color = level.available_colors[0]
        self.selected_tool = level.available_tools[0]
        self._history.clear()
        self.events.clear()
        self.status = GameStatus.PLAYING
        logger.info("Started %s (%d moves, %d undos)", level.name, level.moves, level.undos)

    def reset(self) -> None:
        """Restart the current level with fresh budgets."""
        level = self._require_level()
        self.load(level)
        self._log("reset", f"Restarted {level.name}")

    def next_level(self) -> Level | None:
        """Advance to the following level, or finish the game after the last one."""
        level = self._require_level()
        if level.id >= self.config.max_level_count:
            self.status = GameStatus.COMPLETED
            self._log("completed", f"Finished the final level #{level.id}")
            logger.info("All %d levels completed", self.config.max_level_count)
            return None
        return self.start(level.id + 1)

    # -- selection --

    def select_color(self, color: Color) -> None:
        level = self._require_level()
        if color not in level.available_colors:
            raise SessionError(f"{Color(color).name} is not available on {level.name}")
        self.selected_color = color

    def select_tool(self, tool: Tool) -> None:
        level = self._require_level()
        if tool not in level.available_tools:
            raise SessionError(f"{Tool(tool).name} is not available on {level.name}")
        self.selected_tool = tool

    # -- actions --

    def paint(self, row: int, col: int) -> bool:
        """Apply the selected tool and color at (row, col).

        Returns False without side effects when the level is not in play
        or the move budget is spent.
        """
        if self.status != GameStatus.PLAYING or self.moves_left <= 0:
            return False
        level = self._require_level()

        self._history.append(self.grid.copy())
        self.grid = apply_tool(self.grid, self.selected_tool, self.selected_color, row, col)
        self.moves_left -= 1
        self._log(
            "paint",
            f"{self.selected_tool.name} {self.selected_color.name} at ({row}, {col})",
        )

        if check_win(self.grid, level.target):
            self.status = GameStatus.WON
            self._log("won", f"Solved {level.name} with {self.moves_left} moves to spare")
            logger.info("Level %d solved in %d moves", level.id, self.moves_used)
        elif self.moves_left <= 0:
            self.status = GameStatus.LOST
            self._log("lost", f"Out of moves on {level.name}")
            logger.info("Level %d lost: out of moves", level.id)
        return True

    def undo(self) -> bool:
        """Restore the previous grid, refunding one move and spending one undo."""
        if not self._history or self.status != GameStatus.PLAYING or self.undos_left <= 0:
            return False
        self.grid = self._history.pop()
        self.moves_left += 1
        self.undos_left -= 1
        self._log("undo", f"Undo ({self.undos_left} left)")
        logger.debug("Undo on level %d, %d undos left", self.level.id, self.undos_left)
        return True

    # -- internals --

    def _require_level(self) -> Level:
        if self.level is None:
            raise SessionError("No level started.")
        return self.level

    def _log(self, category: str, message: str) -> None:
        self.events.append(SessionEvent(move=self.moves_used, category=category, message=message))
