"""Hex board data models.

The board is stored as a triangulated rhombus: a dense ``height x width``
array of vertices plus a dense array of edges split into three contiguous
spaces (vertical, right-diagonal, left-diagonal).  Hexagon faces,
intersections and roads are carved out of it by changing the ``kind`` of
vertices and edges.
"""

from __future__ import annotations

import enum

import pydantic


class VertexKind(enum.StrEnum):
    """What a rhombus vertex is used for."""

    INVALID = 'invalid'  # not part of any hexagon
    INTERSECTION = 'intersection'  # hex corner; settlements and cities go here
    FACE = 'face'  # hex centre; holds the resource and the robber


class EdgeKind(enum.StrEnum):
    """Whether a rhombus edge can hold a road."""

    INVALID = 'invalid'
    VALID = 'valid'


class EdgeOrientation(enum.StrEnum):
    """The three edge spaces, in the order they are stored."""

    VERTICAL = 'vertical'  # north to south
    RIGHT_DIAGONAL = 'right_diagonal'  # down from left to right
    LEFT_DIAGONAL = 'left_diagonal'  # down from right to left


class Harbor(pydantic.BaseModel):
    """Trade offered by a harbor on an edge."""

    input_resource: int = 0
    input_resource_count: int = 0
    output_resource: int = 0
    output_resource_count: int = 0


class Vertex(pydantic.BaseModel):
    """A point of the rhombus grid."""

    kind: VertexKind = VertexKind.INVALID
    resource: int | None = None
    resource_number: int | None = None
    building_color: int | None = None
    building_type: int | None = None
    robber: bool = False


class Edge(pydantic.BaseModel):
    """A connection between two adjacent rhombus vertices."""

    kind: EdgeKind = EdgeKind.INVALID
    road_color: int | None = None
    harbor: Harbor = pydantic.Field(default_factory=Harbor)


def vertical_edges_size(height: int, width: int) -> int:
    """Return the number of north-south edges in a ``height x width`` rhombus."""
    return (height - 1) * width


def right_diagonal_edges_size(height: int, width: int) -> int:
    """Return the number of left-to-right diagonal edges."""
    return height * (width - 1)


def left_diagonal_edges_size(height: int, width: int) -> int:
    """Return the number of right-to-left diagonal edges."""
    return (height - 1) * (width - 1)


class Board(pydantic.BaseModel):
    """The vertex and edge arrays of a board plus their cached sizes.

    Vertices are indexed by ``row * width + column``.  Edges are stored
    vertical first, then right-diagonal, then left-diagonal.
    """

    height: pydantic.PositiveInt
    width: pydantic.PositiveInt
    vertices: list[Vertex]
    edges: list[Edge]
    vertical_edges_size: int
    right_diagonal_edges_size: int
    left_diagonal_edges_size: int

    @pydantic.model_validator(mode='after')
    def check_layout(self) -> Board:
        if self.vertical_edges_size != vertical_edges_size(self.height, self.width):
            raise ValueError('vertical_edges_size does not match board dimensions')
        if self.right_diagonal_edges_size != right_diagonal_edges_size(
            self.height, self.width
        ):
            raise ValueError(
                'right_diagonal_edges_size does not match board dimensions'
            )
        if self.left_diagonal_edges_size != left_diagonal_edges_size(
            self.height, self.width
        ):
            raise ValueError('left_diagonal_edges_size does not match board dimensions')
        if len(self.vertices) != self.height * self.width:
            raise ValueError(
                f'Expected {self.height * self.width} vertices, '
                f'got {len(self.vertices)}'
            )
        expected_edges = (
            self.vertical_edges_size
            + self.right_diagonal_edges_size
            + self.left_diagonal_edges_size
        )
        if len(self.edges) != expected_edges:
            raise ValueError(
                f'Expected {expected_edges} edges, got {len(self.edges)}'
            )
        return self

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def face_indices(self) -> list[int]:
        """Return the indices of all hexagon face vertices, ascending."""
        return [i for i, v in enumerate(self.vertices) if v.kind == VertexKind.FACE]

    def intersection_indices(self) -> list[int]:
        """Return the indices of all intersection vertices, ascending."""
        return [
            i
            for i, v in enumerate(self.vertices)
            if v.kind == VertexKind.INTERSECTION
        ]

    def valid_edge_indices(self) -> list[int]:
        """Return the indices of all edges that can hold a road, ascending."""
        return [i for i, e in enumerate(self.edges) if e.kind == EdgeKind.VALID]
