"""CLI entrypoint for the N x N cube engine."""

from __future__ import annotations

import argparse
import logging

import yaml

from .config import LOG_LEVELS, EngineConfig, engine_config_from_dict, load_config
from .cube import Cube
from .rotation import parse_moves
from .scrambler import Scrambler
from .state_codec import cube_to_json


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="N x N x N Rubik's cube engine")
    sub = parser.add_subparsers(dest="mode", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", type=str, default=None, help="YAML config file")
    common.add_argument("--size", type=int, default=None)
    common.add_argument("--seed", type=int, default=None)
    common.add_argument("--log-level", type=str.upper, default=None, choices=LOG_LEVELS)

    sub.add_parser("scramble", parents=[common], help="Print a scramble sequence")

    show = sub.add_parser("show", parents=[common], help="Apply moves and print the cube")
    show.add_argument("--moves", type=str, default="", help="Space separated rotation names, e.g. \"1R 2U' 0M2\"")
    show.add_argument("--scramble", action="store_true", help="Scramble before applying --moves")
    show.add_argument("--json", action="store_true", help="Print the persisted JSON form instead of text")

    return parser


def _resolve_config(args) -> EngineConfig:
    cfg = engine_config_from_dict(load_config(args.config)) if args.config else EngineConfig()
    if args.size is not None:
        cfg.cube_size = args.size
    if args.seed is not None:
        cfg.seed = args.seed
    if args.log_level is not None:
        cfg.log_level = args.log_level
    return cfg


def main(argv: list[str] | None = None):
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        cfg = _resolve_config(args)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        parser.error(str(exc))
    logging.basicConfig(level=cfg.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if args.mode == "scramble":
        print(Scrambler(cfg.cube_size, seed=cfg.seed))
        return

    if args.mode == "show":
        cube = Cube(cfg.cube_size)
        try:
            moves = parse_moves(args.moves)
        except ValueError as exc:
            parser.error(str(exc))
        invalid = [m.name for m in moves if not m.is_valid_for(cube.size)]
        if invalid:
            parser.error(f"Rotations not valid for cube size {cube.size}: {' '.join(invalid)}")

        if args.scramble:
            cube.scramble(Scrambler(cube.size, seed=cfg.seed))
        cube.apply_moves(moves)
        if args.json:
            print(cube_to_json(cube))
        else:
            print(cube, end="")
        return

    parser.error(f"Unsupported mode: {args.mode}")


if __name__ == "__main__":
    main()
