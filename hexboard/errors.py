"""Exceptions raised while navigating or carving a hex board."""

from __future__ import annotations


class BoardError(Exception):
    """Base class for hex board errors."""


class BoundaryError(BoardError, IndexError):
    """A vertex or edge lookup stepped outside the rhombus."""

    def __init__(
        self, vertex_index: int, direction: str, message: str | None = None
    ) -> None:
        self.vertex_index = vertex_index
        self.direction = direction
        super().__init__(
            message
            or f'No {direction} neighbour for index {vertex_index}: outside the board'
        )


class TopologyConflictError(BoardError, ValueError):
    """Carving a hexagon would overwrite another hexagon's classification."""

    def __init__(self, vertex_index: int, conflicting: list[int]) -> None:
        self.vertex_index = vertex_index
        self.conflicting = conflicting
        super().__init__(
            f'Hexagon at vertex {vertex_index} conflicts with vertices {conflicting}'
        )
