"""Tests for GameSession gameplay rules: moves, undo, win/loss, progression."""

import pytest

from colour_print.config import GameConfig
from colour_print.core.enums import Color, GameStatus, Tool
from colour_print.core.grid import create_empty_grid
from colour_print.core.level import Level
from colour_print.core.tools import apply_tool
from colour_print.engine.session import GameSession, SessionError
from colour_print.systems.generator import InvalidLevelError


def _tiny_level(moves: int = 4, undos: int = 1) -> Level:
    target = apply_tool(create_empty_grid(3), Tool.STAMP, Color.RED, 0, 0)
    return Level(
        id=9999, name="Test #9999", grid_size=3, target=target,
        moves=moves, available_colors=(Color.RED, Color.BLUE),
        available_tools=(Tool.STAMP, Tool.ROLLER_H), undos=undos, hint="",
    )


def _play_solution(session: GameSession) -> None:
    for move in session.level.solution:
        session.select_tool(move.tool)
        session.select_color(move.color)
        session.paint(move.row, move.col)


class TestStart:
    def test_start_sets_budgets_and_defaults(self):
        s = GameSession()
        level = s.start(1)
        assert s.status == GameStatus.PLAYING
        assert s.grid == create_empty_grid(3)
        assert s.moves_left == level.moves == 5
        assert s.undos_left == level.undos == 10
        assert s.selected_color == Color.RED
        assert s.selected_tool == Tool.STAMP
        assert s.history_depth == 0

    @pytest.mark.parametrize("bad", [0, -3, 50001])
    def test_start_rejects_unplayable_ids(self, bad):
        with pytest.raises(InvalidLevelError):
            GameSession().start(bad)

    def test_config_bounds_are_honoured(self):
        s = GameSession(GameConfig(max_level_count=10))
        with pytest.raises(InvalidLevelError):
            s.start(11)

    def test_actions_before_start(self):
        s = GameSession()
        assert s.paint(0, 0) is False
        assert s.undo() is False
        with pytest.raises(SessionError):
            s.select_color(Color.RED)
        with pytest.raises(SessionError):
            s.reset()


class TestSelection:
    def test_colour_outside_palette(self):
        s = GameSession()
        s.start(1)
        with pytest.raises(SessionError):
            s.select_color(Color.BLACK)

    def test_tool_outside_toolset(self):
        s = GameSession()
        s.start(1)
        with pytest.raises(SessionError):
            s.select_tool(Tool.SPRAY)

    def test_unlocked_selection(self):
        s = GameSession()
        s.start(60)
        s.select_color(Color.BLACK)
        s.select_tool(Tool.SPRAY)
        assert (s.selected_color, s.selected_tool) == (Color.BLACK, Tool.SPRAY)


class TestWinLoss:
    @pytest.mark.parametrize("level_id", [1, 6, 51, 500, 1500, 30000])
    def test_replaying_solution_wins(self, level_id):
        s = GameSession()
        s.start(level_id)
        _play_solution(s)
        assert s.status == GameStatus.WON
        assert s.moves_left >= 0
        assert len(s.events.by_category("won")) == 1

    def test_paint_after_win_is_ignored(self):
        s = GameSession()
        s.load(_tiny_level())
        assert s.paint(0, 0) is True
        assert s.status == GameStatus.WON
        grid = s.grid
        assert s.paint(1, 1) is False
        assert s.grid is grid

    def test_running_out_of_moves_loses(self):
        s = GameSession()
        s.start(1)
        for _ in range(5):
            assert s.paint(2, 2) is True
        assert s.moves_left == 0
        assert s.status == GameStatus.LOST
        assert s.paint(2, 2) is False
        assert s.undo() is False

    def test_win_on_last_move_beats_loss(self):
        s = GameSession()
        s.load(_tiny_level(moves=1))
        s.paint(0, 0)
        assert s.status == GameStatus.WON


class TestUndo:
    def test_undo_restores_grid_and_refunds_move(self):
        s = GameSession()
        s.start(1)
        s.paint(0, 0)
        after_first = s.grid.copy()
        s.select_tool(Tool.ROLLER_H)
        s.paint(1, 0)
        assert s.undo() is True
        assert s.grid == after_first
        assert s.moves_left == 4
        assert s.undos_left == 9
        assert s.history_depth == 1

    def test_undo_back_to_empty(self):
        s = GameSession()
        s.start(1)
        s.paint(1, 1)
        s.undo()
        assert s.grid == create_empty_grid(3)
        assert s.moves_left == 5

    def test_undo_without_history(self):
        s = GameSession()
        s.start(1)
        assert s.undo() is False
        assert s.undos_left == 10

    def test_undo_budget_runs_out(self):
        s = GameSession()
        s.load(_tiny_level(undos=1))
        s.paint(2, 2)
        s.paint(2, 1)
        assert s.undo() is True
        assert s.undo() is False
        assert s.undos_left == 0
        assert s.history_depth == 1

    def test_history_snapshots_are_not_aliased(self):
        s = GameSession()
        s.start(1)
        s.paint(0, 0)
        s.grid.set(2, 2, Color.BLUE)
        s.undo()
        assert s.grid == create_empty_grid(3)


class TestProgression:
    def test_reset_restores_fresh_state(self):
        s = GameSession()
        s.start(1)
        s.paint(0, 0)
        s.select_color(Color.BLUE)
        s.undo()
        s.reset()
        assert s.grid == create_empty_grid(3)
        assert s.moves_left == 5
        assert s.undos_left == 10
        assert s.selected_color == Color.RED
        assert s.status == GameStatus.PLAYING
        assert [e.category for e in s.events.latest()] == ["reset"]

    def test_next_level(self):
        s = GameSession()
        s.start(1)
        level = s.next_level()
        assert level.id == 2
        assert s.level.id == 2
        assert s.status == GameStatus.PLAYING

    def test_next_after_final_level_completes(self):
        s = GameSession(GameConfig(max_level_count=3))
        s.start(3)
        assert s.next_level() is None
        assert s.status == GameStatus.COMPLETED
        assert s.paint(0, 0) is False

    def test_event_feed(self):
        s = GameSession()
        s.start(1)
        s.paint(0, 0)
        s.undo()
        assert [e.category for e in s.events.latest()] == ["paint", "undo"]
        assert s.events.latest()[0].move == 1
        assert len(s.events) == 2


class TestLevelTargetIsolation:
    def test_caller_grid_does_not_alias_level_target(self):
        source = apply_tool(create_empty_grid(3), Tool.STAMP, Color.RED, 0, 0)
        level = Level(
            id=9998, name="Test #9998", grid_size=3, target=source,
            moves=2, available_colors=(Color.RED,), available_tools=(Tool.STAMP,),
            undos=0, hint="",
        )
        source.set(2, 2, Color.BLUE)
        s = GameSession()
        s.load(level)
        s.paint(0, 0)
        assert s.status == GameStatus.WON

    def test_held_level_target_rejects_writes(self):
        s = GameSession()
        level = s.start(1)
        with pytest.raises(TypeError):
            level.target.set(1, 1, Color.YELLOW)
        for move in level.solution:
            s.select_tool(move.tool)
            s.select_color(move.color)
            s.paint(move.row, move.col)
        assert s.status == GameStatus.WON
