"""Error taxonomy for the g6draw pipeline.

Every error raised by the core derives from ``G6DrawError`` so the CLI can
report it uniformly. Errors propagate to the caller; nothing in the core
logs or swallows them.
"""


class G6DrawError(Exception):
    """Base class for all g6draw errors."""
    pass


class DecodeError(G6DrawError):
    """Raised when a graph6 string is malformed."""

    def __init__(self, message: str, offset: int | None = None):
        self.offset = offset
        if offset is not None:
            message = f"{message} (at byte offset {offset})"
        super().__init__(message)


class InvalidVertex(G6DrawError):
    """Raised when a vertex index falls outside a graph's vertex range."""

    def __init__(self, vertex: int, order: int, message: str | None = None):
        self.vertex = vertex
        self.order = order
        super().__init__(message or f"Invalid vertex {vertex} for graph with {order} vertices")


class GraphTooLarge(G6DrawError):
    """Raised when a graph exceeds the configured layout limit."""

    def __init__(self, order: int, limit: int):
        self.order = order
        self.limit = limit
        super().__init__(f"Graph has {order} vertices, layout limit is {limit}")


class HighlightError(G6DrawError):
    """Raised when a highlight selector cannot be resolved."""
    pass


class UnknownVertex(HighlightError):
    """Raised when a vertex selector references a vertex not in the graph."""

    def __init__(self, vertex: int):
        self.vertex = vertex
        super().__init__(f"Unknown vertex: {vertex}")


class UnknownEdge(HighlightError):
    """Raised when an edge selector references a pair that is not an edge."""

    def __init__(self, u: int, v: int):
        self.u = u
        self.v = v
        super().__init__(f"Unknown edge: ({u}, {v})")


class SelectorSyntaxError(HighlightError):
    """Raised when selector text cannot be parsed."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Invalid highlight selector: {text!r}")
