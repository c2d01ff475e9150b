"""xxhash fingerprints for checking that levels reproduce across runs."""

from __future__ import annotations

import struct
from typing import TYPE_CHECKING

import xxhash

if TYPE_CHECKING:
    from colour_print.core.grid import Grid
    from colour_print.core.level import Level


def grid_fingerprint(grid: Grid) -> str:
    """Hex digest of the grid's size and cells in row-major order."""
    payload = struct.pack("<i", grid.size) + bytes(int(c) for c in grid)
    return xxhash.xxh64(payload).hexdigest()


def level_fingerprint(level: Level) -> str:
    """Hex digest covering every field of *level*, target cells included."""
    h = xxhash.xxh64()
    h.update(struct.pack("<qiii", level.id, level.grid_size, level.moves, level.undos))
    h.update(level.name.encode("utf-8"))
    h.update(level.hint.encode("utf-8"))
    h.update(bytes(int(c) for c in level.available_colors))
    h.update(bytes(int(t) for t in level.available_tools))
    h.update(bytes(int(c) for c in level.target))
    for move in level.solution:
        h.update(struct.pack("<BBii", int(move.tool), int(move.color), move.row, move.col))
    return h.hexdigest()
