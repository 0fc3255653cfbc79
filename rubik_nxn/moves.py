"""Move table for N x N layer turns.

Every side stores its stickers in its own row/column basis, so the strips a
layer turn exchanges need per-adjacency index transforms: which line of the
side (row or column), at which depth, and whether indices run backwards.
Those transforms are data here; ``cycle_strips`` is the only code that moves
stickers between sides.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from .side import COL, ROW, Side

# Line depth kinds, resolved against the cube size and rotation layer.
NEAR = "near"  # layer - 1 from the low-index edge
FAR = "far"  # layer - 1 from the high-index edge
MIDDLE = "middle"  # exact center line, odd sizes only


@dataclass(frozen=True)
class Strip:
    side: str
    axis: str
    line: str
    reversed: bool = False

    def index(self, cube_size: int, layer_number: int) -> int:
        if self.line == MIDDLE:
            return cube_size // 2
        depth = layer_number - 1
        if self.line == NEAR:
            return depth
        return cube_size - 1 - depth


# For a clockwise turn, strip k receives the stickers of strip k + 1 and the
# last strip receives those of the first.
MOVE_TABLE: dict[str, tuple[Strip, Strip, Strip, Strip]] = {
    "R": (
        Strip("U", COL, FAR),
        Strip("F", COL, FAR),
        Strip("D", COL, FAR),
        Strip("B", COL, NEAR, reversed=True),
    ),
    "L": (
        Strip("U", COL, NEAR),
        Strip("B", COL, FAR, reversed=True),
        Strip("D", COL, NEAR),
        Strip("F", COL, NEAR),
    ),
    "U": (
        Strip("F", ROW, NEAR),
        Strip("R", ROW, NEAR),
        Strip("B", ROW, NEAR),
        Strip("L", ROW, NEAR),
    ),
    "D": (
        Strip("F", ROW, FAR),
        Strip("L", ROW, FAR),
        Strip("B", ROW, FAR),
        Strip("R", ROW, FAR),
    ),
    "F": (
        Strip("U", ROW, FAR),
        Strip("L", COL, FAR, reversed=True),
        Strip("D", ROW, NEAR, reversed=True),
        Strip("R", COL, NEAR),
    ),
    "B": (
        Strip("U", ROW, NEAR),
        Strip("R", COL, FAR),
        Strip("D", ROW, FAR, reversed=True),
        Strip("L", COL, NEAR, reversed=True),
    ),
    "M": (
        Strip("F", COL, MIDDLE),
        Strip("U", COL, MIDDLE),
        Strip("B", COL, MIDDLE, reversed=True),
        Strip("D", COL, MIDDLE),
    ),
    "E": (
        Strip("F", ROW, MIDDLE),
        Strip("R", ROW, MIDDLE),
        Strip("B", ROW, MIDDLE),
        Strip("L", ROW, MIDDLE),
    ),
    "S": (
        Strip("U", ROW, MIDDLE),
        Strip("L", COL, MIDDLE, reversed=True),
        Strip("D", ROW, MIDDLE, reversed=True),
        Strip("R", COL, MIDDLE),
    ),
}


def cycle_strips(
    side_at: Callable[[str], Side],
    strips: tuple[Strip, ...],
    cube_size: int,
    layer_number: int,
    clockwise: bool,
):
    """Move each strip's stickers one step around the ring.

    All strips are read before any is written, so the four lines never alias.
    """
    lines = [
        side_at(s.side).read_line(s.axis, s.index(cube_size, layer_number), s.reversed) for s in strips
    ]
    n = len(strips)
    shift = 1 if clockwise else -1
    for k, s in enumerate(strips):
        side_at(s.side).write_line(s.axis, s.index(cube_size, layer_number), lines[(k + shift) % n], s.reversed)
