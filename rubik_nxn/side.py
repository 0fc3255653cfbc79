"""Single N x N side of the cube."""

from __future__ import annotations

import logging

import numpy as np

from .colors import FACE_POSITIONS, N_COLORS, StickerColor

logger = logging.getLogger(__name__)

ROW = "row"
COL = "col"


class Side:
    """N x N grid of sticker colors at a fixed position tag.

    A side only knows its own stickers; adjacency between sides is handled by
    the cube's move table.
    """

    def __init__(self, size: int, color: StickerColor, position: str):
        if position not in FACE_POSITIONS:
            raise ValueError(f"Invalid side position: {position!r}")
        self.size = size
        self.position = position
        self._colors = np.full((size, size), int(color), dtype=np.int8)

    @classmethod
    def from_grid(cls, position: str, grid) -> "Side":
        raw = np.asarray(grid)
        if not np.issubdtype(raw.dtype, np.integer):
            raise ValueError(f"Side grid must hold integer color IDs, got dtype {raw.dtype}")
        arr = raw.astype(np.int16)
        if arr.ndim != 2 or arr.shape[0] != arr.shape[1] or arr.shape[0] < 2:
            raise ValueError(f"Side grid must be square with size >= 2, got shape {arr.shape}")
        if np.any(arr < 0) or np.any(arr >= N_COLORS):
            raise ValueError(f"Side grid contains invalid color IDs; allowed values are 0..{N_COLORS - 1}")
        side = cls(arr.shape[0], StickerColor.RED, position)
        side._colors = arr.astype(np.int8)
        return side

    @property
    def colors(self) -> list[list[StickerColor]]:
        return [[StickerColor(int(v)) for v in row] for row in self._colors]

    def as_array(self) -> np.ndarray:
        """Return a copy of the grid as color ids."""
        return self._colors.copy()

    def copy(self) -> "Side":
        return Side.from_grid(self.position, self._colors)

    def rotate_clockwise(self):
        # transpose, then reverse each row
        self._colors = self._colors.T[:, ::-1].copy()

    def rotate_counter_clockwise(self):
        # transpose, then reverse each column
        self._colors = self._colors.T[::-1, :].copy()

    def _in_range(self, i: int, j: int) -> bool:
        return 0 <= i < self.size and 0 <= j < self.size

    def get_color_at(self, i: int, j: int) -> StickerColor | None:
        if not self._in_range(i, j):
            logger.error("Invalid indices %s %s on side %s", i, j, self.position)
            return None
        return StickerColor(int(self._colors[i, j]))

    def set_color_at(self, i: int, j: int, color: StickerColor) -> bool:
        if not self._in_range(i, j):
            logger.error("Invalid indices %s %s on side %s", i, j, self.position)
            return False
        self._colors[i, j] = int(color)
        return True

    def read_line(self, axis: str, index: int, reverse: bool = False) -> np.ndarray:
        line = self._colors[index, :] if axis == ROW else self._colors[:, index]
        if reverse:
            line = line[::-1]
        return line.copy()

    def write_line(self, axis: str, index: int, values: np.ndarray, reverse: bool = False):
        if reverse:
            values = values[::-1]
        if axis == ROW:
            self._colors[index, :] = values
        else:
            self._colors[:, index] = values

    def is_monochrome(self) -> bool:
        return bool(np.all(self._colors == self._colors[0, 0]))

    def __eq__(self, other):
        if not isinstance(other, Side):
            return NotImplemented
        return self.position == other.position and np.array_equal(self._colors, other._colors)

    def __repr__(self):
        return f"Side(position={self.position!r}, size={self.size})"

    def __str__(self):
        return " ".join(StickerColor(int(v)).code for v in self._colors.reshape(-1))
