"""N x N x N cube: six sides plus the layer rotation engine."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable

from .colors import SIDE_ORDER, SOLVED_COLORS
from .moves import MOVE_TABLE, cycle_strips
from .rotation import Rotation
from .side import Side

if TYPE_CHECKING:
    from .scrambler import Scrambler

logger = logging.getLogger(__name__)

NUMBER_OF_SIDES = 6
DEFAULT_SIZE = 3


class Cube:
    """Rubik's cube of any size >= 2.

    Create a solved cube with ``Cube(3)``, turn layers with
    ``cube.rotate(Rotation(1, "R'"))`` and scramble with
    ``cube.scramble(Scrambler(3))``. The cube is not thread-safe; callers
    must serialize mutations.
    """

    def __init__(self, cube_size: int = DEFAULT_SIZE):
        if cube_size >= 2:
            self.cube_size = cube_size
            logger.info("Cube created with cube size %d", cube_size)
        else:
            logger.error("Invalid cube size %s, setting to default size %d", cube_size, DEFAULT_SIZE)
            self.cube_size = DEFAULT_SIZE
        self._sides: tuple[Side, ...] = ()
        self.reset_sides()

    @property
    def size(self) -> int:
        return self.cube_size

    @property
    def sides(self) -> tuple[Side, ...]:
        return self._sides

    def reset_sides(self):
        self._sides = tuple(Side(self.cube_size, SOLVED_COLORS[pos], pos) for pos in SIDE_ORDER)
        logger.info("Cube sides reset to solved state")

    def set_sides(self, sides: Iterable[Side]):
        """Replace the whole state with ``sides`` (one per position tag)."""
        by_position = {}
        for side in sides:
            if side.size != self.cube_size:
                raise ValueError(f"Side {side.position} has size {side.size}, expected {self.cube_size}")
            if side.position in by_position:
                raise ValueError(f"Duplicate side position {side.position}")
            by_position[side.position] = side
        missing = [pos for pos in SIDE_ORDER if pos not in by_position]
        if missing:
            raise ValueError(f"Missing side positions: {', '.join(missing)}")
        self._sides = tuple(by_position[pos] for pos in SIDE_ORDER)

    def get_side_at(self, position: str) -> Side | None:
        for side in self._sides:
            if side.position == position:
                return side
        logger.debug("Invalid side position %r", position)
        return None

    def _side(self, position: str) -> Side:
        side = self.get_side_at(position)
        if side is None:
            raise KeyError(position)
        return side

    def rotate(self, rotation: Rotation) -> bool:
        """Apply ``rotation``; returns False and changes nothing on an unknown token."""
        if not rotation.is_well_formed():
            logger.error("Invalid rotation type %r", rotation.rotation_type)
            return False

        letter = rotation.side_position
        strips = MOVE_TABLE[letter]
        clockwise = not rotation.is_counter_clockwise
        own_face = self.get_side_at(letter) if rotation.layer_number == 1 else None

        for _ in range(rotation.repeat_count):
            if own_face is not None:
                if clockwise:
                    own_face.rotate_clockwise()
                else:
                    own_face.rotate_counter_clockwise()
            cycle_strips(self._side, strips, self.cube_size, rotation.layer_number, clockwise)

        logger.debug("Cube rotated with %s", rotation)
        return True

    def apply_moves(self, rotations: Iterable[Rotation]):
        for rotation in rotations:
            self.rotate(rotation)

    def scramble(self, scrambler: "Scrambler"):
        """Apply the scrambler's moves to the current state (no reset first)."""
        if scrambler.target_cube_size != self.cube_size:
            raise ValueError(
                f"Scrambler targets cube size {scrambler.target_cube_size}, cube has size {self.cube_size}"
            )
        self.apply_moves(scrambler.moves)
        logger.info("Cube scrambled with %d moves", len(scrambler))

    def is_solved(self) -> bool:
        return all(side.is_monochrome() for side in self._sides)

    def copy(self) -> "Cube":
        other = Cube(self.cube_size)
        other.set_sides(side.copy() for side in self._sides)
        return other

    def __eq__(self, other):
        if not isinstance(other, Cube):
            return NotImplemented
        return self.cube_size == other.cube_size and all(
            self._side(pos) == other._side(pos) for pos in SIDE_ORDER
        )

    def __repr__(self):
        return f"Cube(size={self.cube_size})"

    def __str__(self):
        return "".join(f"{side}\n" for side in self._sides)
