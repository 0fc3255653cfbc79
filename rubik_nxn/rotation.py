"""Layer rotations and random rotation generation.

A rotation is a layer number plus a token. The token starts with a face
letter (U, D, F, B, L, R) or a middle slice letter (M, E, S) and may end in
``'`` for a counterclockwise quarter turn or ``2`` for a half turn.

Layer 1 is the outermost layer of the named face, layer 2 the next one
inward, and so on up to ``N // 2``. Layer 0 is the middle layer of an odd
sized cube and only goes with the slice letters.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

import numpy as np

from .colors import FACE_POSITIONS, SLICE_LETTERS

logger = logging.getLogger(__name__)

MOVE_LETTERS = FACE_POSITIONS + SLICE_LETTERS
MODIFIERS = ("", "'", "2")

_NAME_PATTERN = re.compile(r"^(\d+)([UDFBLRMES]['2]?)$")


@dataclass(frozen=True)
class Rotation:
    layer_number: int
    rotation_type: str

    @property
    def side_position(self) -> str:
        return self.rotation_type[:1]

    @property
    def modifier(self) -> str:
        return self.rotation_type[1:]

    @property
    def name(self) -> str:
        return f"{self.layer_number}{self.rotation_type}"

    @property
    def is_counter_clockwise(self) -> bool:
        return self.modifier == "'"

    @property
    def is_half_turn(self) -> bool:
        return self.modifier == "2"

    @property
    def is_clockwise(self) -> bool:
        return self.modifier == ""

    @property
    def repeat_count(self) -> int:
        return 2 if self.is_half_turn else 1

    def is_well_formed(self) -> bool:
        """True when the token names a known letter with a known modifier."""
        return self.side_position in MOVE_LETTERS and self.modifier in MODIFIERS and len(self.rotation_type) <= 2

    def is_slice(self) -> bool:
        return self.side_position in SLICE_LETTERS

    def inverse(self) -> "Rotation":
        if self.is_half_turn:
            return self
        suffix = "" if self.is_counter_clockwise else "'"
        return Rotation(self.layer_number, self.side_position + suffix)

    def is_valid_for(self, cube_size: int) -> bool:
        if not self.is_well_formed():
            return False
        max_layer = cube_size // 2
        if self.is_slice():
            return cube_size % 2 == 1 and self.layer_number == 0
        return 1 <= self.layer_number <= max_layer

    @classmethod
    def from_name(cls, name: str) -> "Rotation":
        m = _NAME_PATTERN.match(name.strip())
        if not m:
            raise ValueError(f"Invalid rotation name: {name!r}")
        return cls(int(m.group(1)), m.group(2))

    def __str__(self):
        return self.name


BASIC_ROTATIONS = tuple(
    Rotation(1, face + suffix) for face in ("R", "U", "F", "L", "D", "B") for suffix in MODIFIERS
)


def parse_moves(text: str) -> list[Rotation]:
    return [Rotation.from_name(tok) for tok in text.split()]


def _max_layer(target_cube_size: int) -> int:
    max_layer = target_cube_size // 2
    if max_layer < 1:
        raise ValueError(f"Cannot generate rotations for cube size {target_cube_size}")
    return max_layer


def generate_rotation_excluding(
    target_cube_size: int,
    rng: np.random.Generator | None,
    excluded: frozenset[str] = frozenset(),
) -> Rotation:
    """Uniform draw among basic tokens whose letter is not excluded.

    Drawing from the filtered candidates gives the same distribution as
    resampling until the letter is acceptable, and always terminates while
    at least one letter remains.
    """
    rng = rng if rng is not None else np.random.default_rng()
    candidates = [r for r in BASIC_ROTATIONS if r.side_position not in excluded]
    if not candidates:
        raise ValueError(f"No rotation letters left after excluding {sorted(excluded)}")
    token = candidates[int(rng.integers(len(candidates)))].rotation_type
    layer = int(rng.integers(1, _max_layer(target_cube_size) + 1))
    return Rotation(layer, token)


def generate_new_rotation(target_cube_size: int, rng: np.random.Generator | None = None) -> Rotation:
    rotation = generate_rotation_excluding(target_cube_size, rng)
    logger.debug("Generated rotation %s", rotation)
    return rotation


def generate_new_different_rotation(
    target_cube_size: int,
    previous_rotation: Rotation,
    rng: np.random.Generator | None = None,
) -> Rotation:
    """Generate a rotation whose face letter differs from ``previous_rotation``'s."""
    rotation = generate_rotation_excluding(target_cube_size, rng, frozenset({previous_rotation.side_position}))
    logger.debug("Generated rotation %s after %s", rotation, previous_rotation)
    return rotation
