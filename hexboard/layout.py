"""YAML board layouts.

A layout names the rhombus dimensions and the hexagons to carve into it::

    height: 10
    width: 10
    hexes:
      - {row: 0, column: 0}
      - {row: 1, column: 0}
"""

from __future__ import annotations

import pathlib

import pydantic
import yaml

from .board_builder import carve_hexagons, make_board
from .models.board import Board
from .settings import PACKAGE_DIR

EXAMPLE_LAYOUT_PATH = PACKAGE_DIR / 'layouts' / 'example.yaml'


class HexCoord(pydantic.BaseModel):
    """Offset coordinate of a hexagon."""

    model_config = pydantic.ConfigDict(frozen=True)

    row: pydantic.NonNegativeInt
    column: pydantic.NonNegativeInt


class BoardLayout(pydantic.BaseModel):
    """Represents a board layout file"""

    height: pydantic.PositiveInt
    width: pydantic.PositiveInt
    hexes: list[HexCoord] = pydantic.Field(default_factory=list)


def load_layout(path: pathlib.Path = EXAMPLE_LAYOUT_PATH) -> BoardLayout:
    """Load YAML into the layout schema"""
    with path.open() as f:
        config = yaml.safe_load(f)
    return BoardLayout.model_validate(config)


def build_board(layout: BoardLayout) -> Board:
    """Allocate the layout's board and carve all of its hexagons."""
    board = make_board(layout.height, layout.width)
    carve_hexagons(board, [(h.row, h.column) for h in layout.hexes])
    return board
