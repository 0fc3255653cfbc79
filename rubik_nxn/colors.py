"""Sticker colors and face tags shared by the cube model."""

from __future__ import annotations

from enum import IntEnum


class StickerColor(IntEnum):
    RED = 0
    WHITE = 1
    GREEN = 2
    ORANGE = 3
    YELLOW = 4
    BLUE = 5

    @property
    def code(self) -> str:
        return COLOR_CODES[self]


COLOR_CODES = {
    StickerColor.RED: "r",
    StickerColor.WHITE: "w",
    StickerColor.GREEN: "g",
    StickerColor.ORANGE: "o",
    StickerColor.YELLOW: "y",
    StickerColor.BLUE: "b",
}

N_COLORS = len(StickerColor)

FACE_POSITIONS = ("U", "D", "F", "B", "L", "R")
SLICE_LETTERS = ("M", "E", "S")

# Side order inside a cube and the color each side has when solved.
SOLVED_COLORS = {
    "U": StickerColor.RED,
    "F": StickerColor.WHITE,
    "D": StickerColor.ORANGE,
    "B": StickerColor.YELLOW,
    "R": StickerColor.GREEN,
    "L": StickerColor.BLUE,
}
SIDE_ORDER = tuple(SOLVED_COLORS)
