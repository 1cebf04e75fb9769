"""Adjacency-list graph with insertion-ordered vertices."""
from dataclasses import dataclass, field
from typing import Dict, List

from .types import Vertex, UnknownVertexError


@dataclass
class Graph:
    """Directed or undirected graph stored as adjacency lists.

    Vertices keep their insertion order and every vertex owns a neighbor
    list, so ``list(adj)`` always equals ``vertices``. Neighbor lists keep
    edge insertion order; parallel edges and self-loops are stored as given.
    """
    directed: bool = False
    vertices: List[Vertex] = field(default_factory=list)
    adj: Dict[Vertex, List[Vertex]] = field(default_factory=dict)

    def add_vertex(self, vertex: Vertex) -> None:
        """Add a vertex; does nothing if it already exists."""
        if vertex in self.adj:
            return
        self.vertices.append(vertex)
        self.adj[vertex] = []

    def add_edge(self, from_vertex: Vertex, to_vertex: Vertex) -> None:
        """Add an edge, creating missing endpoints."""
        self.add_vertex(from_vertex)
        self.add_vertex(to_vertex)

        self.adj[from_vertex].append(to_vertex)
        # For undirected graphs, add reverse edge
        if not self.directed:
            self.adj[to_vertex].append(from_vertex)

    def has_vertex(self, vertex: Vertex) -> bool:
        return vertex in self.adj

    def __contains__(self, vertex: Vertex) -> bool:
        return self.has_vertex(vertex)

    def __len__(self) -> int:
        return len(self.vertices)

    def get_vertices(self) -> List[Vertex]:
        """Get all vertices in insertion order."""
        return list(self.vertices)

    def get_adj_list(self, vertex: Vertex) -> List[Vertex]:
        """Get the neighbors of a vertex in edge insertion order."""
        if vertex not in self.adj:
            raise UnknownVertexError(vertex)
        return list(self.adj[vertex])

    def get_adjacency(self) -> Dict[Vertex, List[Vertex]]:
        """Get a copy of the whole adjacency mapping."""
        return {v: list(self.adj[v]) for v in self.vertices}

    def edge_count(self) -> int:
        """Count edges, listing each undirected edge once."""
        entries = sum(len(neighbors) for neighbors in self.adj.values())
        if self.directed:
            return entries

        # An undirected self-loop is stored twice under the same vertex
        return entries // 2

    def render(self) -> str:
        """Render one ``"<vertex> -> <neighbor> ... \\n"`` line per vertex."""
        lines = []
        for vertex in self.vertices:
            neighbors = "".join(f"{w} " for w in self.adj[vertex])
            lines.append(f"{vertex} -> {neighbors}\n")
        return "".join(lines)

    def __str__(self) -> str:
        return self.render()
