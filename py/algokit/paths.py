"""Path reconstruction from BFS predecessor maps."""
from typing import Dict, List, Optional

from .graph import Graph
from .traversal import bfs_with_paths
from .types import UnknownVertexError, Vertex


def build_path(predecessors: Dict[Vertex, Optional[Vertex]],
               source: Vertex, target: Vertex) -> List[Vertex]:
    """Walk the predecessor map back from ``target`` to ``source``.

    Returns an empty list when ``target`` was not reached from ``source``.
    """
    if target not in predecessors:
        raise UnknownVertexError(target)

    path = []
    current = target
    while current is not None:
        path.append(current)
        if current == source:
            path.reverse()
            return path
        current = predecessors[current]

    return []


def shortest_path(graph: Graph, source: Vertex, target: Vertex) -> List[Vertex]:
    """Find a fewest-hops path between two vertices."""
    if not graph.has_vertex(target):
        raise UnknownVertexError(target)
    result = bfs_with_paths(graph, source)
    return build_path(result["predecessors"], source, target)
