"""Index arithmetic for the triangulated rhombus.

Vertex layout
-------------
Vertex ``v`` sits at ``row = v // width`` and ``column = v % width``.  Each
vertex touches six others, named after the hex directions of a pointy-topped
grid::

    north       v - width
    northeast   v - width + 1
    southeast   v + 1
    south       v + width
    southwest   v + width - 1
    northwest   v - 1

Edge layout
-----------
The edges form three dense rectangles stored back to back in ``Board.edges``:

=============== ======================== =====================================
space           shape                    edge ``row * cols + column`` joins
=============== ======================== =====================================
vertical        (height - 1) x width     (row, column) and (row + 1, column)
right-diagonal  height x (width - 1)     (row, column) and (row, column + 1)
left-diagonal   (height - 1) x (width-1) (row + 1, column) and (row, column + 1)
=============== ======================== =====================================

The right-diagonal space starts at ``vertical_edges_size`` and the
left-diagonal space at ``vertical_edges_size + right_diagonal_edges_size``.

Perimeter
---------
When ``v`` is the face of a hexagon, its six neighbour edges are the spokes
inside the hexagon and the six *perimeter* edges form its outline.  Each
perimeter edge is reached by stepping to a corner and taking one of that
corner's edges, e.g. the northeast perimeter edge is the southeast edge of
the north corner.

Every function here raises :class:`~hexboard.errors.BoundaryError` instead
of returning an index that falls outside the board.
"""

from __future__ import annotations

from .errors import BoundaryError
from .models.board import Board, EdgeOrientation

# (row delta, column delta) of the neighbouring vertex in each direction.
_STEPS: dict[str, tuple[int, int]] = {
    'north': (-1, 0),
    'northeast': (-1, 1),
    'southeast': (0, 1),
    'south': (1, 0),
    'southwest': (1, -1),
    'northwest': (0, -1),
}


def row(vertex_index: int, board: Board) -> int:
    return vertex_index // board.width


def column(vertex_index: int, board: Board) -> int:
    return vertex_index % board.width


def _checked_position(
    vertex_index: int, board: Board, direction: str
) -> tuple[int, int]:
    """Return ``(row, column)`` of a vertex that has a neighbour in ``direction``."""
    if not 0 <= vertex_index < board.vertex_count:
        raise BoundaryError(
            vertex_index,
            direction,
            f'Vertex index {vertex_index} is outside a board of '
            f'{board.vertex_count} vertices',
        )
    r, c = divmod(vertex_index, board.width)
    dr, dc = _STEPS[direction]
    if not (0 <= r + dr < board.height and 0 <= c + dc < board.width):
        raise BoundaryError(vertex_index, direction)
    return r, c


def _right_diagonal_base(board: Board) -> int:
    return board.vertical_edges_size


def _left_diagonal_base(board: Board) -> int:
    return board.vertical_edges_size + board.right_diagonal_edges_size


# ---------------------------------------------------------------------------
# Neighbour vertices
# ---------------------------------------------------------------------------


def north_vertex(vertex_index: int, board: Board) -> int:
    _checked_position(vertex_index, board, 'north')
    return vertex_index - board.width


def northeast_vertex(vertex_index: int, board: Board) -> int:
    _checked_position(vertex_index, board, 'northeast')
    return vertex_index - board.width + 1


def southeast_vertex(vertex_index: int, board: Board) -> int:
    _checked_position(vertex_index, board, 'southeast')
    return vertex_index + 1


def south_vertex(vertex_index: int, board: Board) -> int:
    _checked_position(vertex_index, board, 'south')
    return vertex_index + board.width


def southwest_vertex(vertex_index: int, board: Board) -> int:
    _checked_position(vertex_index, board, 'southwest')
    return vertex_index + board.width - 1


def northwest_vertex(vertex_index: int, board: Board) -> int:
    _checked_position(vertex_index, board, 'northwest')
    return vertex_index - 1


def get_neighbor_vertices(vertex_index: int, board: Board) -> list[int]:
    """Return the six neighbouring vertices in order N, NE, SE, S, SW, NW."""
    return [
        north_vertex(vertex_index, board),
        northeast_vertex(vertex_index, board),
        southeast_vertex(vertex_index, board),
        south_vertex(vertex_index, board),
        southwest_vertex(vertex_index, board),
        northwest_vertex(vertex_index, board),
    ]


# ---------------------------------------------------------------------------
# Neighbour edges
# ---------------------------------------------------------------------------


def north_edge(vertex_index: int, board: Board) -> int:
    r, c = _checked_position(vertex_index, board, 'north')
    return (r - 1) * board.width + c


def northeast_edge(vertex_index: int, board: Board) -> int:
    r, c = _checked_position(vertex_index, board, 'northeast')
    return _left_diagonal_base(board) + (r - 1) * (board.width - 1) + c


def southeast_edge(vertex_index: int, board: Board) -> int:
    r, c = _checked_position(vertex_index, board, 'southeast')
    return _right_diagonal_base(board) + r * (board.width - 1) + c


def south_edge(vertex_index: int, board: Board) -> int:
    r, c = _checked_position(vertex_index, board, 'south')
    return r * board.width + c


def southwest_edge(vertex_index: int, board: Board) -> int:
    r, c = _checked_position(vertex_index, board, 'southwest')
    return _left_diagonal_base(board) + r * (board.width - 1) + c - 1


def northwest_edge(vertex_index: int, board: Board) -> int:
    r, c = _checked_position(vertex_index, board, 'northwest')
    return _right_diagonal_base(board) + r * (board.width - 1) + c - 1


def get_neighbor_edges(vertex_index: int, board: Board) -> list[int]:
    """Return the six edges touching a vertex in order N, NE, SE, S, SW, NW."""
    return [
        north_edge(vertex_index, board),
        northeast_edge(vertex_index, board),
        southeast_edge(vertex_index, board),
        south_edge(vertex_index, board),
        southwest_edge(vertex_index, board),
        northwest_edge(vertex_index, board),
    ]


# ---------------------------------------------------------------------------
# Perimeter edges
# ---------------------------------------------------------------------------


def northeast_perimeter(vertex_index: int, board: Board) -> int:
    return southeast_edge(north_vertex(vertex_index, board), board)


def east_perimeter(vertex_index: int, board: Board) -> int:
    return south_edge(northeast_vertex(vertex_index, board), board)


def southeast_perimeter(vertex_index: int, board: Board) -> int:
    return southwest_edge(southeast_vertex(vertex_index, board), board)


def southwest_perimeter(vertex_index: int, board: Board) -> int:
    return northwest_edge(south_vertex(vertex_index, board), board)


def west_perimeter(vertex_index: int, board: Board) -> int:
    return north_edge(southwest_vertex(vertex_index, board), board)


def northwest_perimeter(vertex_index: int, board: Board) -> int:
    return northeast_edge(northwest_vertex(vertex_index, board), board)


def get_perimeter_edges(vertex_index: int, board: Board) -> list[int]:
    """Return the outline of the hexagon centred on a vertex.

    Order is NE, E, SE, SW, W, NW.
    """
    return [
        northeast_perimeter(vertex_index, board),
        east_perimeter(vertex_index, board),
        southeast_perimeter(vertex_index, board),
        southwest_perimeter(vertex_index, board),
        west_perimeter(vertex_index, board),
        northwest_perimeter(vertex_index, board),
    ]


# ---------------------------------------------------------------------------
# Neighbouring faces
# ---------------------------------------------------------------------------


def northeast_face(vertex_index: int, board: Board) -> int:
    """Return the face of the hexagon northeast of the one centred here."""
    return north_vertex(northeast_vertex(vertex_index, board), board)


def east_face(vertex_index: int, board: Board) -> int:
    """Return the face of the hexagon east of the one centred here."""
    return southeast_vertex(northeast_vertex(vertex_index, board), board)


# ---------------------------------------------------------------------------
# Edge decoding
# ---------------------------------------------------------------------------


def edge_orientation(edge_index: int, board: Board) -> EdgeOrientation:
    """Return which of the three edge spaces an edge index falls in."""
    if not 0 <= edge_index < board.edge_count:
        raise BoundaryError(
            edge_index,
            'edge',
            f'Edge index {edge_index} is outside a board of {board.edge_count} edges',
        )
    if edge_index < _right_diagonal_base(board):
        return EdgeOrientation.VERTICAL
    if edge_index < _left_diagonal_base(board):
        return EdgeOrientation.RIGHT_DIAGONAL
    return EdgeOrientation.LEFT_DIAGONAL


def edge_vertices(edge_index: int, board: Board) -> tuple[int, int]:
    """Return the two vertices joined by an edge, lowest index first."""
    orientation = edge_orientation(edge_index, board)
    width = board.width
    if orientation == EdgeOrientation.VERTICAL:
        return edge_index, edge_index + width

    if orientation == EdgeOrientation.RIGHT_DIAGONAL:
        r, c = divmod(edge_index - _right_diagonal_base(board), width - 1)
        start = r * width + c
        return start, start + 1

    r, c = divmod(edge_index - _left_diagonal_base(board), width - 1)
    return r * width + c + 1, (r + 1) * width + c
