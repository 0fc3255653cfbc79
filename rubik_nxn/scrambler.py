"""Scramble sequences sized to a target cube."""

from __future__ import annotations

import logging

import numpy as np

from .cube import DEFAULT_SIZE
from .rotation import (
    Rotation,
    generate_new_different_rotation,
    generate_new_rotation,
    generate_rotation_excluding,
)

logger = logging.getLogger(__name__)


def scramble_length(target_cube_size: int) -> int:
    if target_cube_size == 2:
        return 15
    if target_cube_size == 3:
        return 25
    return target_cube_size * 20 - 40


class Scrambler:
    """Random rotation sequence for cubes of ``target_cube_size``.

    No move shares its face/slice letter with either of the two moves before
    it, which rules out sequences such as ``R R'`` or ``R L R``.
    """

    def __init__(self, target_cube_size: int, seed: int | None = None):
        if target_cube_size < 2:
            logger.error("Invalid target cube size %s, setting to default size %d", target_cube_size, DEFAULT_SIZE)
            target_cube_size = DEFAULT_SIZE
        self.target_cube_size = target_cube_size
        self._rng = np.random.default_rng(seed)
        self._length = scramble_length(target_cube_size)
        self._moves: list[Rotation] = []
        self.regenerate()
        logger.info(
            "New scrambler created for cube size %d with a length of %d", target_cube_size, self._length
        )

    def regenerate(self):
        size = self.target_cube_size
        moves = [generate_new_rotation(size, self._rng)]
        moves.append(generate_new_different_rotation(size, moves[0], self._rng))
        for i in range(2, self._length):
            excluded = frozenset({moves[i - 1].side_position, moves[i - 2].side_position})
            moves.append(generate_rotation_excluding(size, self._rng, excluded))
        self._moves = moves
        logger.info("Generated new scramble %s", self)

    generate_new_scramble = regenerate

    @property
    def moves(self) -> tuple[Rotation, ...]:
        return tuple(self._moves)

    def __len__(self):
        return len(self._moves)

    def __iter__(self):
        return iter(self._moves)

    def __str__(self):
        return " ".join(r.name for r in self._moves)
