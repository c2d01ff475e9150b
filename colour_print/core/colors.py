"""Color mixing algebra.

Mixing is commutative for the three primary pairs and otherwise
order-dependent: a secondary re-stamped with one of its own primaries
stays put, everything else muddies to brown.
"""

from __future__ import annotations

from colour_print.core.enums import Color

PRIMARY_MIXES: dict[frozenset[Color], Color] = {
    frozenset((Color.RED, Color.YELLOW)): Color.ORANGE,
    frozenset((Color.RED, Color.BLUE)): Color.PURPLE,
    frozenset((Color.YELLOW, Color.BLUE)): Color.GREEN,
}

# Secondary -> the primaries it is made of
SECONDARY_PARTS: dict[Color, frozenset[Color]] = {
    Color.ORANGE: frozenset((Color.RED, Color.YELLOW)),
    Color.PURPLE: frozenset((Color.RED, Color.BLUE)),
    Color.GREEN: frozenset((Color.YELLOW, Color.BLUE)),
}

COLOR_HEX: dict[Color, str] = {
    Color.EMPTY: "#FFFFFF",
    Color.RED: "#FF3B30",
    Color.BLUE: "#007AFF",
    Color.YELLOW: "#FFCC00",
    Color.ORANGE: "#FF9500",
    Color.GREEN: "#34C759",
    Color.PURPLE: "#AF52DE",
    Color.BROWN: "#A2845E",
    Color.BLACK: "#1C1C1E",
}

COLOR_SYMBOLS: dict[Color, str] = {
    Color.EMPTY: ".",
    Color.RED: "R",
    Color.BLUE: "B",
    Color.YELLOW: "Y",
    Color.ORANGE: "O",
    Color.GREEN: "G",
    Color.PURPLE: "P",
    Color.BROWN: "N",
    Color.BLACK: "K",
}


def mix_colors(base: Color, incoming: Color) -> Color:
    """Return the color of a cell holding *base* after *incoming* is applied."""
    if base == Color.EMPTY:
        return incoming
    if base == incoming:
        return base

    mixed = PRIMARY_MIXES.get(frozenset((base, incoming)))
    if mixed is not None:
        return mixed

    if incoming in SECONDARY_PARTS.get(base, ()):
        return base

    return Color.BROWN
