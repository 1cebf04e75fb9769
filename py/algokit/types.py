"""Type definitions for the algokit library."""
from enum import IntEnum
from typing import Dict, Hashable, List, Optional, TypedDict


# Vertices are caller supplied keys (usually str or int)
Vertex = Hashable

# Distance recorded for vertices BFS never reaches
UNREACHED = -1


class Color(IntEnum):
    """Per-traversal vertex state."""
    WHITE = 0  # not visited
    GREY = 1   # discovered, neighbors not fully explored
    BLACK = 2  # fully explored


class BFSResult(TypedDict):
    """Result of a breadth-first search with distances."""
    distances: Dict[Vertex, int]
    predecessors: Dict[Vertex, Optional[Vertex]]


class DFSResult(TypedDict):
    """Result of a depth-first search with timestamps."""
    discovery: Dict[Vertex, int]
    finish: Dict[Vertex, int]
    predecessors: Dict[Vertex, Optional[Vertex]]


class GraphSpec(TypedDict, total=False):
    """JSON description of a graph accepted by the CLI."""
    directed: bool
    vertices: List[Vertex]
    edges: List[List[Vertex]]


# Errors
class GraphError(Exception):
    """Base error for graph operations."""
    pass


class UnknownVertexError(GraphError):
    """An operation referenced a vertex that is not in the graph."""

    def __init__(self, vertex: Vertex):
        super().__init__(f"Unknown vertex: {vertex!r}")
        self.vertex = vertex
