#!/usr/bin/env python3
"""
Build a hex board and print a summary of its topology.
With no arguments, builds a 10x10 rhombus with a single hexagon at vertex 22.
"""

from __future__ import annotations

import argparse
import logging
import pathlib
import sys

import yaml

from .board_builder import ConflictPolicy, carve_hexagons, make_board, make_hexagon
from .errors import BoardError
from .layout import build_board, load_layout
from .log import configure_logging
from .models.board import Board

logger = logging.getLogger(__name__)

_DEFAULT_SIZE = 10
_DEFAULT_FACE = 22


def parse_hex(value: str) -> tuple[int, int]:
    """Parse a ``ROW,COLUMN`` hexagon coordinate."""
    try:
        hex_row, hex_column = (int(part) for part in value.split(','))
    except ValueError as e:
        raise argparse.ArgumentTypeError(
            f'Expected ROW,COLUMN with non-negative integers, got {value!r}'
        ) from e
    if hex_row < 0 or hex_column < 0:
        raise argparse.ArgumentTypeError(
            f'Expected ROW,COLUMN with non-negative integers, got {value!r}'
        )
    return hex_row, hex_column


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Build a hex board and summarise it')
    parser.add_argument('--layout', type=pathlib.Path, help='YAML layout file')
    parser.add_argument('--height', type=int, default=_DEFAULT_SIZE)
    parser.add_argument('--width', type=int, default=_DEFAULT_SIZE)
    parser.add_argument(
        '--hex',
        dest='hexes',
        type=parse_hex,
        action='append',
        default=[],
        metavar='ROW,COLUMN',
        help='Hexagon to carve, in offset coordinates (repeatable)',
    )
    parser.add_argument(
        '--conflict-policy',
        type=ConflictPolicy,
        choices=list(ConflictPolicy),
        default=None,
    )
    parser.add_argument('--log-config', type=pathlib.Path, default=None)
    return parser


def summarize(board: Board) -> str:
    """Return a short human readable description of a board."""
    return (
        f'{board.height}x{board.width} board: '
        f'{len(board.face_indices())} faces, '
        f'{len(board.intersection_indices())} intersections, '
        f'{len(board.valid_edge_indices())} road edges'
    )


def main(argv: list[str] | None = None) -> int:
    """Entry point; returns the process exit status."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_config)
    logger.info('hexboard starting')

    try:
        if args.layout is not None:
            board = build_board(load_layout(args.layout))
        else:
            board = make_board(args.height, args.width)
            if args.hexes:
                carve_hexagons(board, args.hexes, args.conflict_policy)
            else:
                make_hexagon(_DEFAULT_FACE, board, args.conflict_policy)
    except (BoardError, OSError, ValueError, yaml.YAMLError) as e:
        logger.error('Could not build board: %s', e)
        return 1

    print(summarize(board))
    return 0


if __name__ == '__main__':
    sys.exit(main())
