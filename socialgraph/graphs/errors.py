"""Exceptions raised by the graph engines."""


class GraphError(ValueError):
    """Base class for graph precondition failures."""


class OutOfRangeVertex(GraphError):
    """A vertex index lies outside ``[0, vertex_count)``."""

    def __init__(self, vertex, vertex_count: int):
        self.vertex = vertex
        self.vertex_count = vertex_count
        super().__init__(
            f"Vertex {vertex!r} out of range for graph with {vertex_count} vertices"
        )


class InvalidWeight(GraphError):
    """An edge weight is not a non-negative integer, or exceeds the bound used to invert it."""

    def __init__(self, weight, message: str = ""):
        self.weight = weight
        super().__init__(message or f"Edge weight must be non-negative, got {weight!r}")
