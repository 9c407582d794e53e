"""Board construction and hexagon carving.

A board starts as a rhombus of Invalid vertices and edges.  Each call to
:func:`make_hexagon` turns one vertex into a hexagon face: its six
neighbours become intersections, the six spokes from the face to those
corners stay unusable, and the six outline edges become road slots.

Hexagons are addressed from outside with odd-row offset coordinates
``(hex_row, hex_column)``; :func:`vertex_from_hex` turns those into the
vertex index of the face.

Boundary policy
---------------
No margin is reserved around the rhombus.  Only vertices with
``1 <= row <= height - 2`` and ``1 <= column <= width - 2`` can hold a face;
anything else raises :class:`~hexboard.errors.BoundaryError` before the
board is touched.

Conflict policy
---------------
Two hexagons conflict when one would turn the other's face into an
intersection or vice versa.  Under :attr:`ConflictPolicy.RAISE` this raises
:class:`~hexboard.errors.TopologyConflictError` before the board is touched;
under :attr:`ConflictPolicy.OVERWRITE` the last hexagon carved wins.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterable

from . import geometry, settings
from .errors import BoundaryError, TopologyConflictError
from .models.board import (
    Board,
    Edge,
    EdgeKind,
    Vertex,
    VertexKind,
    left_diagonal_edges_size,
    right_diagonal_edges_size,
    vertical_edges_size,
)

logger = logging.getLogger(__name__)


class ConflictPolicy(enum.StrEnum):
    """What to do when a hexagon overlaps another hexagon's classification."""

    RAISE = 'raise'
    OVERWRITE = 'overwrite'


def make_board(height: int, width: int) -> Board:
    """Allocate a ``height x width`` rhombus with every vertex and edge Invalid.

    Raises:
        ValueError: If either dimension is not positive.
    """
    if height <= 0 or width <= 0:
        raise ValueError(f'Board dimensions must be positive, got {height}x{width}')

    vertical = vertical_edges_size(height, width)
    right_diagonal = right_diagonal_edges_size(height, width)
    left_diagonal = left_diagonal_edges_size(height, width)

    return Board(
        height=height,
        width=width,
        vertices=[Vertex() for _ in range(height * width)],
        edges=[Edge() for _ in range(vertical + right_diagonal + left_diagonal)],
        vertical_edges_size=vertical,
        right_diagonal_edges_size=right_diagonal,
        left_diagonal_edges_size=left_diagonal,
    )


def hex_position(hex_row: int, hex_column: int) -> tuple[int, int]:
    """Return the ``(row, column)`` of a hexagon face in offset coordinates."""
    row_offset = (hex_row % 2) + 1
    row = 3 * (hex_row // 2) + row_offset - hex_column
    column_offset = (hex_row % 2) + 1
    column = hex_column * 2 + column_offset
    return row, column


def vertex_from_hex(hex_row: int, hex_column: int, board: Board) -> int:
    """Return the face vertex index for a hexagon in offset coordinates.

    The result is not bounds checked.  A column past the right edge wraps
    into the next row, so check :func:`hex_position` against the board
    rather than the flattened index.
    """
    row, column = hex_position(hex_row, hex_column)
    return row * board.width + column


def is_carvable(vertex_index: int, board: Board) -> bool:
    """Return True if a hexagon centred on this vertex fits inside the board."""
    if not 0 <= vertex_index < board.vertex_count:
        return False
    row, column = divmod(vertex_index, board.width)
    return 1 <= row <= board.height - 2 and 1 <= column <= board.width - 2


def find_conflicts(vertex_index: int, board: Board) -> list[int]:
    """Return the vertices whose kind a hexagon centred here would contradict.

    That is the centre itself if it is already an intersection, plus any
    neighbour that is already a face.  Checking vertices is enough: a spoke
    and an outline edge can only collide if their endpoints already do.
    """
    conflicts: list[int] = []
    if board.vertices[vertex_index].kind == VertexKind.INTERSECTION:
        conflicts.append(vertex_index)
    conflicts.extend(
        neighbor
        for neighbor in geometry.get_neighbor_vertices(vertex_index, board)
        if board.vertices[neighbor].kind == VertexKind.FACE
    )
    return conflicts


def make_hexagon(
    vertex_index: int,
    board: Board,
    policy: ConflictPolicy | None = None,
) -> None:
    """Carve a hexagon centred on ``vertex_index`` into ``board`` in place.

    Args:
        vertex_index: The vertex that becomes the hexagon face.
        board: The board to mutate.
        policy: Conflict handling; defaults to ``settings.CONFLICT_POLICY``.

    Raises:
        BoundaryError: If the hexagon would not fit inside the board.
        TopologyConflictError: If ``policy`` is RAISE and the hexagon
            overlaps another one.
    """
    if not is_carvable(vertex_index, board):
        raise BoundaryError(
            vertex_index,
            'face',
            f'Vertex {vertex_index} is too close to the edge of a '
            f'{board.height}x{board.width} board to hold a hexagon',
        )
    policy = ConflictPolicy(policy or settings.CONFLICT_POLICY)

    conflicts = find_conflicts(vertex_index, board)
    if conflicts:
        if policy == ConflictPolicy.RAISE:
            raise TopologyConflictError(vertex_index, conflicts)
        logger.warning(
            'Hexagon at vertex %d overwrites vertices %s', vertex_index, conflicts
        )

    board.vertices[vertex_index].kind = VertexKind.FACE
    for neighbor in geometry.get_neighbor_vertices(vertex_index, board):
        board.vertices[neighbor].kind = VertexKind.INTERSECTION
    # Spokes only exist because of the triangulation; never buildable.
    for edge_index in geometry.get_neighbor_edges(vertex_index, board):
        board.edges[edge_index].kind = EdgeKind.INVALID
    for edge_index in geometry.get_perimeter_edges(vertex_index, board):
        board.edges[edge_index].kind = EdgeKind.VALID

    logger.debug('Carved hexagon at vertex %d', vertex_index)


def carve_hexagons(
    board: Board,
    hexes: Iterable[tuple[int, int]],
    policy: ConflictPolicy | None = None,
) -> list[int]:
    """Carve every ``(hex_row, hex_column)`` in order.

    Raises:
        BoundaryError: If a hexagon does not fit inside the board.  Hexagons
            earlier in ``hexes`` stay carved.
        TopologyConflictError: As for :func:`make_hexagon`.

    Returns:
        The face vertex index of each hexagon, in input order.
    """
    faces: list[int] = []
    for hex_row, hex_column in hexes:
        row, column = hex_position(hex_row, hex_column)
        if not (1 <= row <= board.height - 2 and 1 <= column <= board.width - 2):
            raise BoundaryError(
                row * board.width + column,
                'face',
                f'Hex ({hex_row}, {hex_column}) maps to row {row}, column {column}, '
                f'which does not fit a {board.height}x{board.width} board',
            )
        vertex_index = vertex_from_hex(hex_row, hex_column, board)
        logger.debug(
            'Hex (%d, %d) maps to vertex %d', hex_row, hex_column, vertex_index
        )
        make_hexagon(vertex_index, board, policy)
        faces.append(vertex_index)
    logger.info(
        'Carved %d hexagons into a %dx%d board', len(faces), board.height, board.width
    )
    return faces
