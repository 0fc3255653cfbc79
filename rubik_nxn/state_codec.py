"""Conversion between a cube and its persisted document form.

The document mirrors the save file layout of the desktop application:
``{"cubeSize": N, "sides": [{"sideSize": N, "position": "U", "colors": [[...]]}]}``
with colors spelled by name. Reading and writing files is left to the caller.
"""

from __future__ import annotations

import json
from typing import Any

from .colors import SIDE_ORDER, StickerColor
from .cube import Cube
from .side import Side


class StateValidationError(ValueError):
    """Raised when a persisted cube document is invalid."""


def side_to_dict(side: Side) -> dict[str, Any]:
    return {
        "sideSize": side.size,
        "colors": [[color.name for color in row] for row in side.colors],
        "position": side.position,
    }


def cube_to_dict(cube: Cube) -> dict[str, Any]:
    return {
        "cubeSize": cube.size,
        "sides": [side_to_dict(side) for side in cube.sides],
    }


def _color_id(name: Any) -> int:
    if not isinstance(name, str) or name not in StickerColor.__members__:
        raise StateValidationError(f"Unknown sticker color: {name!r}")
    return int(StickerColor[name])


def side_from_dict(payload: dict[str, Any], cube_size: int) -> Side:
    if not isinstance(payload, dict):
        raise StateValidationError("Side entry must be an object")
    position = payload.get("position")
    if position not in SIDE_ORDER:
        raise StateValidationError(f"Invalid side position: {position!r}")

    colors = payload.get("colors")
    if not isinstance(colors, list) or len(colors) != cube_size:
        raise StateValidationError(f"Side {position} must have {cube_size} rows")
    for row in colors:
        if not isinstance(row, list) or len(row) != cube_size:
            raise StateValidationError(f"Side {position} rows must have {cube_size} colors")

    side_size = payload.get("sideSize", cube_size)
    if side_size != cube_size:
        raise StateValidationError(f"Side {position} has size {side_size}, expected {cube_size}")

    return Side.from_grid(position, [[_color_id(name) for name in row] for row in colors])


def cube_from_dict(payload: dict[str, Any]) -> Cube:
    if not isinstance(payload, dict):
        raise StateValidationError("Cube document must be an object")

    cube_size = payload.get("cubeSize")
    if not isinstance(cube_size, int) or isinstance(cube_size, bool) or cube_size < 2:
        raise StateValidationError(f"cubeSize must be an integer >= 2, got {cube_size!r}")

    sides = payload.get("sides")
    if not isinstance(sides, list) or len(sides) != len(SIDE_ORDER):
        raise StateValidationError(f"Cube document must contain exactly {len(SIDE_ORDER)} sides")

    cube = Cube(cube_size)
    try:
        cube.set_sides(side_from_dict(entry, cube_size) for entry in sides)
    except StateValidationError:
        raise
    except ValueError as exc:
        raise StateValidationError(str(exc)) from exc
    return cube


def cube_to_json(cube: Cube) -> str:
    return json.dumps(cube_to_dict(cube))


def cube_from_json(text: str) -> Cube:
    try:
        obj = json.loads(text)
    except json.JSONDecodeError as exc:
        raise StateValidationError(f"Invalid JSON document: {exc}") from exc
    return cube_from_dict(obj)
