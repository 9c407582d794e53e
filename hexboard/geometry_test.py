"""Unit tests for rhombus index arithmetic."""

from __future__ import annotations

import itertools
import unittest

from hexboard import geometry
from hexboard.board_builder import make_board
from hexboard.errors import BoundaryError
from hexboard.models.board import Board, EdgeOrientation

_VERTEX_FNS = {
    'north': geometry.north_vertex,
    'northeast': geometry.northeast_vertex,
    'southeast': geometry.southeast_vertex,
    'south': geometry.south_vertex,
    'southwest': geometry.southwest_vertex,
    'northwest': geometry.northwest_vertex,
}

_EDGE_FNS = {
    'north': geometry.north_edge,
    'northeast': geometry.northeast_edge,
    'southeast': geometry.southeast_edge,
    'south': geometry.south_edge,
    'southwest': geometry.southwest_edge,
    'northwest': geometry.northwest_edge,
}

# Sizes exercised by the exhaustive tests; includes non-square rhombuses.
_BOARD_SIZES = [(3, 3), (4, 4), (5, 7), (8, 3), (10, 10)]


def _interior_vertices(board: Board) -> list[int]:
    return [
        r * board.width + c
        for r in range(1, board.height - 1)
        for c in range(1, board.width - 1)
    ]


class TestRowColumn(unittest.TestCase):
    """Tests for row() and column()."""

    def test_decomposition(self) -> None:
        board = make_board(4, 5)
        self.assertEqual(geometry.row(13, board), 2)
        self.assertEqual(geometry.column(13, board), 3)

    def test_first_vertex(self) -> None:
        board = make_board(4, 5)
        self.assertEqual(geometry.row(0, board), 0)
        self.assertEqual(geometry.column(0, board), 0)


class TestNeighborVertices(unittest.TestCase):
    """Tests for the six neighbour-vertex lookups."""

    def setUp(self) -> None:
        self.board = make_board(4, 4)

    def test_north(self) -> None:
        self.assertEqual(geometry.north_vertex(11, make_board(10, 10)), 1)
        self.assertEqual(geometry.north_vertex(5, self.board), 1)

    def test_northeast(self) -> None:
        self.assertEqual(geometry.northeast_vertex(5, self.board), 2)

    def test_southeast(self) -> None:
        self.assertEqual(geometry.southeast_vertex(5, self.board), 6)

    def test_south(self) -> None:
        self.assertEqual(geometry.south_vertex(5, self.board), 9)

    def test_southwest(self) -> None:
        self.assertEqual(geometry.southwest_vertex(5, self.board), 8)

    def test_northwest(self) -> None:
        self.assertEqual(geometry.northwest_vertex(5, self.board), 4)

    def test_all_in_order(self) -> None:
        """get_neighbor_vertices returns N, NE, SE, S, SW, NW."""
        self.assertEqual(
            geometry.get_neighbor_vertices(5, self.board), [1, 2, 6, 9, 8, 4]
        )

    def test_direction_pairs_are_inverses(self) -> None:
        """Opposite steps cancel out on every interior vertex."""
        for height, width in _BOARD_SIZES:
            board = make_board(height, width)
            for v in _interior_vertices(board):
                with self.subTest(board=(height, width), vertex=v):
                    self.assertEqual(
                        geometry.north_vertex(geometry.south_vertex(v, board), board), v
                    )
                    self.assertEqual(
                        geometry.northeast_vertex(
                            geometry.southwest_vertex(v, board), board
                        ),
                        v,
                    )
                    self.assertEqual(
                        geometry.southeast_vertex(
                            geometry.northwest_vertex(v, board), board
                        ),
                        v,
                    )
                    self.assertEqual(
                        geometry.south_vertex(geometry.north_vertex(v, board), board), v
                    )


class TestNeighborEdges(unittest.TestCase):
    """Tests for the six neighbour-edge lookups on a 4x4 board."""

    def setUp(self) -> None:
        self.board = make_board(4, 4)

    def test_north(self) -> None:
        self.assertEqual(geometry.north_edge(5, self.board), 1)

    def test_northeast(self) -> None:
        self.assertEqual(geometry.northeast_edge(5, self.board), 25)

    def test_southeast(self) -> None:
        self.assertEqual(geometry.southeast_edge(5, self.board), 16)

    def test_south(self) -> None:
        self.assertEqual(geometry.south_edge(5, self.board), 5)

    def test_southwest(self) -> None:
        self.assertEqual(geometry.southwest_edge(5, self.board), 27)

    def test_northwest(self) -> None:
        self.assertEqual(geometry.northwest_edge(5, self.board), 15)

    def test_all_in_order(self) -> None:
        self.assertEqual(
            geometry.get_neighbor_edges(5, self.board), [1, 25, 16, 5, 27, 15]
        )

    def test_south_edge_equals_vertex_index(self) -> None:
        """The south edge of a vertex shares its index."""
        for v in range(self.board.vertex_count - self.board.width):
            self.assertEqual(geometry.south_edge(v, self.board), v)


class TestPerimeterEdges(unittest.TestCase):
    """Tests for the hexagon outline lookups on a 4x4 board."""

    def setUp(self) -> None:
        self.board = make_board(4, 4)

    def test_northeast(self) -> None:
        self.assertEqual(geometry.northeast_perimeter(5, self.board), 13)

    def test_east(self) -> None:
        self.assertEqual(geometry.east_perimeter(5, self.board), 2)

    def test_southeast(self) -> None:
        self.assertEqual(geometry.southeast_perimeter(5, self.board), 28)

    def test_southwest(self) -> None:
        self.assertEqual(geometry.southwest_perimeter(5, self.board), 18)

    def test_west(self) -> None:
        self.assertEqual(geometry.west_perimeter(5, self.board), 4)

    def test_northwest(self) -> None:
        self.assertEqual(geometry.northwest_perimeter(5, self.board), 24)

    def test_all_in_order(self) -> None:
        """get_perimeter_edges returns NE, E, SE, SW, W, NW."""
        self.assertEqual(
            geometry.get_perimeter_edges(5, self.board), [13, 2, 28, 18, 4, 24]
        )

    def test_spokes_and_outline_are_distinct(self) -> None:
        """Spokes are pairwise distinct and never part of the outline."""
        for height, width in _BOARD_SIZES:
            board = make_board(height, width)
            for v in _interior_vertices(board):
                with self.subTest(board=(height, width), vertex=v):
                    spokes = geometry.get_neighbor_edges(v, board)
                    outline = geometry.get_perimeter_edges(v, board)
                    self.assertEqual(len(set(spokes)), 6)
                    self.assertEqual(len(set(outline)), 6)
                    self.assertFalse(set(spokes) & set(outline))

    def test_outline_joins_consecutive_corners(self) -> None:
        """Each outline edge joins two corners of the hexagon."""
        board = make_board(6, 6)
        for v in _interior_vertices(board):
            corners = set(geometry.get_neighbor_vertices(v, board))
            for edge_index in geometry.get_perimeter_edges(v, board):
                with self.subTest(vertex=v, edge=edge_index):
                    self.assertLessEqual(
                        set(geometry.edge_vertices(edge_index, board)), corners
                    )


class TestFaces(unittest.TestCase):
    """Tests for neighbouring-face lookups."""

    def test_northeast_face(self) -> None:
        self.assertEqual(geometry.northeast_face(9, make_board(4, 4)), 2)

    def test_east_face(self) -> None:
        self.assertEqual(geometry.east_face(5, make_board(4, 4)), 3)

    def test_adjacent_faces_share_an_outline_edge(self) -> None:
        board = make_board(10, 10)
        face = 44
        for neighbor in (
            geometry.northeast_face(face, board),
            geometry.east_face(face, board),
        ):
            with self.subTest(neighbor=neighbor):
                shared = set(geometry.get_perimeter_edges(face, board)) & set(
                    geometry.get_perimeter_edges(neighbor, board)
                )
                self.assertEqual(len(shared), 1)


class TestBoundary(unittest.TestCase):
    """Lookups that would leave the rhombus raise BoundaryError."""

    def setUp(self) -> None:
        self.board = make_board(4, 4)

    def test_north_of_top_row(self) -> None:
        with self.assertRaises(BoundaryError):
            geometry.north_vertex(2, self.board)

    def test_northwest_of_left_column(self) -> None:
        with self.assertRaises(BoundaryError):
            geometry.northwest_edge(4, self.board)

    def test_southeast_of_right_column(self) -> None:
        with self.assertRaises(BoundaryError):
            geometry.southeast_vertex(7, self.board)

    def test_south_of_bottom_row(self) -> None:
        with self.assertRaises(BoundaryError):
            geometry.south_edge(13, self.board)

    def test_negative_index(self) -> None:
        with self.assertRaises(BoundaryError):
            geometry.southeast_vertex(-1, self.board)

    def test_index_past_end(self) -> None:
        with self.assertRaises(BoundaryError):
            geometry.north_vertex(16, self.board)

    def test_perimeter_on_edge_vertex(self) -> None:
        """The outline of a boundary vertex does not exist."""
        with self.assertRaises(BoundaryError):
            geometry.get_perimeter_edges(4, self.board)

    def test_is_index_error(self) -> None:
        with self.assertRaises(IndexError):
            geometry.north_vertex(0, self.board)

    def test_error_records_direction(self) -> None:
        with self.assertRaises(BoundaryError) as ctx:
            geometry.southwest_vertex(8, self.board)
        self.assertEqual(ctx.exception.direction, 'southwest')
        self.assertEqual(ctx.exception.vertex_index, 8)


class TestEdgeDecoding(unittest.TestCase):
    """Tests for edge_orientation() and edge_vertices()."""

    def test_orientation_ranges(self) -> None:
        board = make_board(4, 4)
        self.assertEqual(geometry.edge_orientation(0, board), EdgeOrientation.VERTICAL)
        self.assertEqual(geometry.edge_orientation(11, board), EdgeOrientation.VERTICAL)
        self.assertEqual(
            geometry.edge_orientation(12, board), EdgeOrientation.RIGHT_DIAGONAL
        )
        self.assertEqual(
            geometry.edge_orientation(23, board), EdgeOrientation.RIGHT_DIAGONAL
        )
        self.assertEqual(
            geometry.edge_orientation(24, board), EdgeOrientation.LEFT_DIAGONAL
        )
        self.assertEqual(
            geometry.edge_orientation(32, board), EdgeOrientation.LEFT_DIAGONAL
        )

    def test_out_of_range(self) -> None:
        board = make_board(4, 4)
        with self.assertRaises(BoundaryError):
            geometry.edge_vertices(33, board)
        with self.assertRaises(BoundaryError):
            geometry.edge_orientation(-1, board)

    def test_known_edges(self) -> None:
        board = make_board(4, 4)
        self.assertEqual(geometry.edge_vertices(1, board), (1, 5))
        self.assertEqual(geometry.edge_vertices(16, board), (5, 6))
        self.assertEqual(geometry.edge_vertices(25, board), (2, 5))

    def test_inverse_of_neighbor_edges(self) -> None:
        """Every edge lookup decodes back to the vertex and its neighbour."""
        for height, width in _BOARD_SIZES:
            board = make_board(height, width)
            for v, direction in itertools.product(
                range(board.vertex_count), _EDGE_FNS
            ):
                try:
                    edge_index = _EDGE_FNS[direction](v, board)
                except BoundaryError:
                    continue
                neighbor = _VERTEX_FNS[direction](v, board)
                with self.subTest(board=(height, width), vertex=v, direction=direction):
                    self.assertEqual(
                        geometry.edge_vertices(edge_index, board),
                        tuple(sorted((v, neighbor))),
                    )

    def test_every_edge_is_reachable(self) -> None:
        """The edge lookups cover each edge index exactly twice, once per end."""
        for height, width in _BOARD_SIZES + [(1, 5), (5, 1), (2, 2)]:
            board = make_board(height, width)
            seen: list[int] = []
            for v, fn in itertools.product(
                range(board.vertex_count), _EDGE_FNS.values()
            ):
                try:
                    seen.append(fn(v, board))
                except BoundaryError:
                    continue
            with self.subTest(board=(height, width)):
                self.assertEqual(sorted(seen), sorted([*range(board.edge_count)] * 2))


if __name__ == '__main__':
    unittest.main()
