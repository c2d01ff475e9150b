"""Generation systems: seeded sequence and level generator."""

from colour_print.systems.rng import SeededSequence
from colour_print.systems.generator import InvalidLevelError, LevelGenerator, generate_level

__all__ = ["InvalidLevelError", "LevelGenerator", "SeededSequence", "generate_level"]
