"""Gameplay session layered over the core."""

from colour_print.engine.session import GameSession, SessionError

__all__ = ["GameSession", "SessionError"]
