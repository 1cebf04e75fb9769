#!/usr/bin/env python3
"""CLI wrapper for the algokit library.

Usage: ``python -m algokit <command> [--iterative] [--log-level LEVEL]`` with
a JSON array of arguments on stdin. Graph arguments are objects of the form
``{"directed": false, "vertices": [...], "edges": [[v, w], ...]}``.
"""
import argparse
import json
import logging
import os
import sys
from typing import Any, Dict

from .graph import Graph
from .paths import shortest_path
from .stack import daily_temperatures
from .traversal import bfs, bfs_with_paths, dfs, dfs_with_timestamps
from .types import GraphError, GraphSpec, UnknownVertexError

logger = logging.getLogger(__name__)


def build_graph(spec: GraphSpec) -> Graph:
    """Build a graph from its JSON description, vertices first."""
    graph = Graph(directed=spec.get("directed", False))
    for vertex in spec.get("vertices", []):
        graph.add_vertex(vertex)
    for from_vertex, to_vertex in spec.get("edges", []):
        graph.add_edge(from_vertex, to_vertex)
    return graph


COMMANDS = {
    'render': lambda args, opts: {"text": build_graph(args[0]).render()},
    'vertices': lambda args, opts: {"vertices": build_graph(args[0]).get_vertices()},
    'neighbors': lambda args, opts: {"neighbors": build_graph(args[0]).get_adj_list(args[1])},
    'bfs': lambda args, opts: {"order": bfs(build_graph(args[0]), args[1])},
    'bfs_paths': lambda args, opts: bfs_with_paths(build_graph(args[0]), args[1]),
    'shortest_path': lambda args, opts: {"path": shortest_path(build_graph(args[0]), args[1], args[2])},
    'dfs': lambda args, opts: {"order": dfs(build_graph(args[0]), iterative=opts.iterative)},
    'dfs_timestamps': lambda args, opts: dfs_with_timestamps(build_graph(args[0]), iterative=opts.iterative),
    'daily_temperatures': lambda args, opts: {"result": daily_temperatures(args[0])},
}


def _error(payload: Dict[str, Any]) -> None:
    print(json.dumps(payload))
    sys.exit(1)


def main(argv=None):
    parser = argparse.ArgumentParser(description='algokit JSON command line')
    parser.add_argument('command', nargs='?', help='command to run')
    parser.add_argument('--iterative', action='store_true',
                        help='use the explicit-stack depth-first walk')
    parser.add_argument('--log-level', type=str, help='logging level (stderr)')
    opts = parser.parse_args(argv)

    # Get configuration from args or environment
    level = opts.log_level or os.environ.get('ALGOKIT_LOG_LEVEL', 'WARNING')
    logging.basicConfig(stream=sys.stderr, level=level.upper(),
                        format='%(asctime)s %(levelname)s %(name)s: %(message)s')

    if not opts.command:
        _error({"error": "No command provided"})
    if opts.command not in COMMANDS:
        _error({"error": f"Unknown command: {opts.command}"})

    args = json.loads(sys.stdin.read() or "[]")
    logger.debug("running %s with %d argument(s)", opts.command, len(args))
    try:
        result = COMMANDS[opts.command](args, opts)
    except UnknownVertexError as e:
        _error({"error": "unknown_vertex", "vertex": e.vertex})
    except GraphError as e:
        _error({"error": str(e)})

    print(json.dumps(result))


if __name__ == "__main__":
    main()
