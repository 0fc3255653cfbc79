"""N x N x N Rubik's cube engine package."""

from .colors import StickerColor
from .cube import Cube
from .rotation import BASIC_ROTATIONS, Rotation
from .scrambler import Scrambler
from .side import Side

__all__ = ["BASIC_ROTATIONS", "Cube", "Rotation", "Scrambler", "Side", "StickerColor"]
