"""Graph traversal algorithms: BFS and DFS."""
import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from .graph import Graph
from .types import (
    BFSResult, Color, DFSResult, UNREACHED, UnknownVertexError, Vertex,
)

logger = logging.getLogger(__name__)

Visitor = Callable[[Vertex], None]


def _initialize_color(vertices: List[Vertex]) -> Dict[Vertex, Color]:
    return {v: Color.WHITE for v in vertices}


def _check_source(graph: Graph, source: Vertex) -> None:
    if not graph.has_vertex(source):
        raise UnknownVertexError(source)


def bfs(graph: Graph, source: Vertex, on_visit: Optional[Visitor] = None) -> List[Vertex]:
    """Breadth-first search from ``source``.

    ``on_visit`` is called with each vertex once its neighbors have been
    scanned. Returns the vertices in that same order; vertices that are not
    reachable from ``source`` are never visited.
    """
    _check_source(graph, source)
    logger.debug("bfs from %r over %d vertices", source, len(graph))

    color = _initialize_color(graph.get_vertices())
    order = []

    queue = deque([source])
    color[source] = Color.GREY

    while queue:
        u = queue.popleft()
        for w in graph.get_adj_list(u):
            if color[w] == Color.WHITE:
                color[w] = Color.GREY
                queue.append(w)
        color[u] = Color.BLACK
        order.append(u)
        if on_visit is not None:
            on_visit(u)

    logger.debug("bfs from %r visited %d vertices", source, len(order))
    return order


def bfs_with_paths(graph: Graph, source: Vertex) -> BFSResult:
    """Breadth-first search recording hop distances and predecessors.

    Both maps cover every vertex of the graph. Vertices that cannot be
    reached keep a distance of ``UNREACHED`` and a ``None`` predecessor.
    """
    _check_source(graph, source)

    vertices = graph.get_vertices()
    color = _initialize_color(vertices)
    distances = {v: UNREACHED for v in vertices}
    predecessors = {v: None for v in vertices}

    queue = deque([source])
    color[source] = Color.GREY
    distances[source] = 0

    while queue:
        u = queue.popleft()
        for w in graph.get_adj_list(u):
            if color[w] == Color.WHITE:
                color[w] = Color.GREY
                distances[w] = distances[u] + 1
                predecessors[w] = u
                queue.append(w)
        color[u] = Color.BLACK

    reached = sum(1 for d in distances.values() if d != UNREACHED)
    logger.debug("bfs_with_paths from %r reached %d of %d vertices",
                 source, reached, len(vertices))
    return {"distances": distances, "predecessors": predecessors}


@dataclass
class _DFSState:
    """Bookkeeping owned by a single depth-first traversal."""
    color: Dict[Vertex, Color]
    on_visit: Optional[Visitor] = None
    order: List[Vertex] = field(default_factory=list)
    discovery: Dict[Vertex, int] = field(default_factory=dict)
    finish: Dict[Vertex, int] = field(default_factory=dict)
    predecessors: Dict[Vertex, Optional[Vertex]] = field(default_factory=dict)
    time: int = 0

    def discover(self, u: Vertex) -> None:
        self.color[u] = Color.GREY
        self.time += 1
        self.discovery[u] = self.time
        self.order.append(u)
        if self.on_visit is not None:
            self.on_visit(u)

    def close(self, u: Vertex) -> None:
        self.color[u] = Color.BLACK
        self.time += 1
        self.finish[u] = self.time


def _visit_recursive(graph: Graph, u: Vertex, state: _DFSState) -> None:
    state.discover(u)
    for w in graph.get_adj_list(u):
        if state.color[w] == Color.WHITE:
            state.predecessors[w] = u
            _visit_recursive(graph, w, state)
    state.close(u)


def _visit_iterative(graph: Graph, root: Vertex, state: _DFSState) -> None:
    # Each frame keeps its own neighbor iterator so a vertex resumes its scan
    # exactly where the recursive walk would return to it.
    state.discover(root)
    stack = [(root, iter(graph.get_adj_list(root)))]

    while stack:
        u, neighbors = stack[-1]
        for w in neighbors:
            if state.color[w] == Color.WHITE:
                state.predecessors[w] = u
                state.discover(w)
                stack.append((w, iter(graph.get_adj_list(w))))
                break
        else:
            stack.pop()
            state.close(u)


def _run_dfs(graph: Graph, on_visit: Optional[Visitor], iterative: bool) -> _DFSState:
    vertices = graph.get_vertices()
    state = _DFSState(color=_initialize_color(vertices), on_visit=on_visit)
    state.predecessors = {v: None for v in vertices}
    visit = _visit_iterative if iterative else _visit_recursive

    for v in vertices:
        if state.color[v] == Color.WHITE:
            visit(graph, v, state)

    logger.debug("dfs (%s) finished %d vertices at time %d",
                 "iterative" if iterative else "recursive", len(state.finish), state.time)
    return state


def dfs(graph: Graph, on_visit: Optional[Visitor] = None, iterative: bool = False) -> List[Vertex]:
    """Depth-first search over every component of the graph.

    Roots are taken in vertex insertion order. ``on_visit`` fires when a
    vertex is discovered. Returns the discovery order.
    """
    return _run_dfs(graph, on_visit, iterative).order


def dfs_with_timestamps(graph: Graph, iterative: bool = False) -> DFSResult:
    """Depth-first search recording discovery and finish times.

    One counter runs across the whole forest, so for ``n`` vertices the
    timestamps are exactly ``1..2n``.
    """
    state = _run_dfs(graph, None, iterative)
    return {
        "discovery": state.discovery,
        "finish": state.finish,
        "predecessors": state.predecessors,
    }
