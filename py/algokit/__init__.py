"""Classic algorithms library - public API."""
from .types import (
    Vertex, Color, UNREACHED, BFSResult, DFSResult, GraphSpec,
    GraphError, UnknownVertexError,
)
from .graph import Graph
from .traversal import bfs, bfs_with_paths, dfs, dfs_with_timestamps
from .paths import build_path, shortest_path
from .stack import daily_temperatures

__all__ = [
    # Types
    'Vertex', 'Color', 'UNREACHED', 'BFSResult', 'DFSResult', 'GraphSpec',
    'GraphError', 'UnknownVertexError',
    # Graph
    'Graph',
    # Traversal
    'bfs', 'bfs_with_paths', 'dfs', 'dfs_with_timestamps',
    'build_path', 'shortest_path',
    # Stack
    'daily_temperatures',
]
