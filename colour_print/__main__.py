"""Entry point: ``python -m colour_print``.

Commands:
  - ``show ID``            → Print a level's header, hint and target
  - ``solve ID``           → Replay the generator's own solution through a session
  - ``play ID``            → Interactive text play over stdin
  - ``verify START END``   → Regenerate a range of levels and check reproducibility
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from colour_print.config import GameConfig
from colour_print.core.colors import COLOR_SYMBOLS
from colour_print.core.enums import Color, GameStatus, Tool
from colour_print.core.grid import Grid
from colour_print.core.level import Level
from colour_print.engine.session import GameSession, SessionError
from colour_print.systems.generator import InvalidLevelError, generate_level
from colour_print.utils.logging import setup_logging

logger = logging.getLogger(__name__)

_PLAY_HELP = "commands: R C | color NAME | tool NAME | undo | reset | next | quit"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Colour Print level engine")
    parser.add_argument("--log-level", type=str, default=GameConfig.log_level, choices=["DEBUG", "INFO", "WARNING"])
    sub = parser.add_subparsers(dest="command", required=True)

    show = sub.add_parser("show", help="Print a generated level")
    show.add_argument("level_id", type=int)
    show.add_argument("--json", action="store_true", help="Emit the level as JSON")

    solve = sub.add_parser("solve", help="Replay a level's known solution")
    solve.add_argument("level_id", type=int)
    solve.add_argument("--json", action="store_true", help="Emit the final session state as JSON")

    play = sub.add_parser("play", help="Play a level interactively on stdin")
    play.add_argument("level_id", type=int)

    verify = sub.add_parser("verify", help="Check that a range of levels reproduces and is solvable")
    verify.add_argument("start", type=int)
    verify.add_argument("end", type=int)

    return parser


# -- rendering --

def format_grid(grid: Grid) -> str:
    return "\n".join(" ".join(COLOR_SYMBOLS[c] for c in row) for row in grid.rows())


def format_level(level: Level) -> str:
    colors = ", ".join(c.name.lower() for c in level.available_colors)
    tools = ", ".join(t.name.lower() for t in level.available_tools)
    return "\n".join([
        f"{level.name}  ({level.grid_size}x{level.grid_size})",
        f"moves: {level.moves}  undos: {level.undos}",
        f"colors: {colors}",
        f"tools: {tools}",
        f"hint: {level.hint}",
        "target:",
        format_grid(level.target),
    ])


def _parse_enum(enum_cls, name: str):
    key = name.strip().upper().replace("-", "_")
    aliases = {"ROLLERH": "ROLLER_H", "ROLLERV": "ROLLER_V"}
    key = aliases.get(key, key)
    try:
        return enum_cls[key]
    except KeyError:
        raise SessionError(f"unknown {enum_cls.__name__.lower()}: {name!r}") from None


# -- commands --

def _run_show(args: argparse.Namespace, config: GameConfig, out: TextIO) -> int:
    _check_playable(args.level_id, config)
    level = generate_level(args.level_id)
    if args.json:
        from colour_print.schemas import LevelSchema

        out.write(LevelSchema.from_level(level, include_solution=True).model_dump_json(indent=2) + "\n")
    else:
        out.write(format_level(level) + "\n")
    return 0


def _run_solve(args: argparse.Namespace, config: GameConfig, out: TextIO) -> int:
    session = GameSession(config)
    level = session.start(args.level_id)
    for move in level.solution:
        session.select_tool(move.tool)
        session.select_color(move.color)
        session.paint(move.row, move.col)
        if session.status != GameStatus.PLAYING:
            break

    if args.json:
        from colour_print.schemas import SessionSchema

        out.write(SessionSchema.from_session(session).model_dump_json(indent=2) + "\n")
    else:
        out.write(format_grid(session.grid) + "\n")
        out.write(f"{level.name}: {session.status.name} after {session.moves_used} moves\n")
    return 0 if session.status == GameStatus.WON else 1


def _run_play(args: argparse.Namespace, config: GameConfig, inp: TextIO, out: TextIO) -> int:
    session = GameSession(config)
    session.start(args.level_id)
    out.write(format_level(session.level) + "\n" + _PLAY_HELP + "\n")

    for raw in inp:
        line = raw.strip()
        if not line:
            continue
        cmd, _, rest = line.partition(" ")
        try:
            if cmd == "quit":
                break
            elif cmd == "color":
                session.select_color(_parse_enum(Color, rest))
            elif cmd == "tool":
                session.select_tool(_parse_enum(Tool, rest))
            elif cmd == "undo":
                if not session.undo():
                    out.write("nothing to undo\n")
            elif cmd == "reset":
                session.reset()
            elif cmd == "next":
                if session.next_level() is not None:
                    out.write(format_level(session.level) + "\n")
            else:
                row, col = (int(p) for p in line.split())
                if not session.paint(row, col):
                    out.write("move ignored\n")
        except SessionError as exc:
            out.write(f"{exc}\n")
            continue
        except ValueError:
            out.write(_PLAY_HELP + "\n")
            continue

        out.write(format_grid(session.grid) + "\n")
        out.write(
            f"[{session.status.name}] moves left: {session.moves_left}  "
            f"undos left: {session.undos_left}  "
            f"{session.selected_tool.name.lower()} / {session.selected_color.name.lower()}\n"
        )
    return 0


def _run_verify(args: argparse.Namespace, config: GameConfig, out: TextIO) -> int:
    start = max(args.start, config.min_level_id)
    end = min(args.end, config.max_level_count)
    failures: list[int] = []

    for level_id in range(start, end + 1):
        first = generate_level(level_id)
        second = generate_level(level_id)
        if first.fingerprint() != second.fingerprint():
            logger.warning("Level %d does not reproduce", level_id)
            failures.append(level_id)
            continue

        session = GameSession(config)
        session.load(first)
        for move in first.solution:
            session.select_tool(move.tool)
            session.select_color(move.color)
            session.paint(move.row, move.col)
        if session.status != GameStatus.WON:
            logger.warning("Level %d: solution replay ended %s", level_id, session.status.name)
            failures.append(level_id)

    checked = max(end - start + 1, 0)
    logger.info("Verified %d levels, %d failures", checked, len(failures))
    out.write(f"checked {checked} levels, {len(failures)} failures\n")
    if failures:
        out.write("failed: " + ", ".join(str(i) for i in failures) + "\n")
        return 1
    return 0


def _check_playable(level_id: int, config: GameConfig) -> None:
    if not config.is_playable(level_id):
        raise InvalidLevelError(
            f"level {level_id} outside [{config.min_level_id}, {config.max_level_count}]"
        )


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    config = GameConfig(log_level=args.log_level)
    setup_logging(config.log_level)

    try:
        if args.command == "show":
            return _run_show(args, config, sys.stdout)
        if args.command == "solve":
            return _run_solve(args, config, sys.stdout)
        if args.command == "play":
            return _run_play(args, config, sys.stdin, sys.stdout)
        return _run_verify(args, config, sys.stdout)
    except (InvalidLevelError, SessionError) as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 2


if __name__ == "__main__":
    sys.exit(main())
