"""
Pytest configuration for algokit tests.

The library is loaded straight from ``py/`` so the suite runs from a
checkout as well as from an installed package.
"""
import json
import os
import subprocess
import sys

import pytest

# Get implementation type from environment variable
IMPL = os.environ.get("IMPL", "py")

# Normalize implementation names
if IMPL in ("python", "py"):
    IMPL = "python"

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
PY_DIR = os.path.join(BASE_DIR, "py")

SAMPLE_VERTICES = ["A", "B", "C", "D", "E", "F", "G", "H", "I"]
SAMPLE_EDGES = [
    ("A", "B"), ("A", "C"), ("A", "D"), ("C", "D"), ("C", "G"),
    ("D", "G"), ("D", "H"), ("B", "E"), ("B", "F"), ("E", "I"),
]


def load_python_impl():
    """Load the Python implementation."""
    if PY_DIR not in sys.path:
        sys.path.insert(0, PY_DIR)
    import algokit
    return algokit


class CLIBridge:
    """Runs ``python -m algokit`` with JSON arguments on stdin."""

    def __init__(self, py_dir):
        self.py_dir = py_dir

    def run(self, cmd, *args, flags=()):
        input_data = json.dumps(list(args))
        return subprocess.run(
            [sys.executable, "-m", "algokit", cmd, *flags],
            cwd=self.py_dir,
            input=input_data,
            capture_output=True,
            text=True
        )

    def call(self, cmd, *args, flags=()):
        result = self.run(cmd, *args, flags=flags)
        if result.returncode != 0:
            raise RuntimeError(result.stdout + result.stderr)
        return json.loads(result.stdout)


@pytest.fixture
def lib():
    """Load the implementation selected by the IMPL env var."""
    if IMPL == "python":
        return load_python_impl()
    raise ValueError(f"Unknown implementation: {IMPL}")


@pytest.fixture
def cli():
    return CLIBridge(PY_DIR)


@pytest.fixture
def sample_graph(lib):
    """The undirected 9-vertex graph A..I."""
    g = lib.Graph()
    for v in SAMPLE_VERTICES:
        g.add_vertex(v)
    for v, w in SAMPLE_EDGES:
        g.add_edge(v, w)
    return g


@pytest.fixture
def sample_spec():
    """JSON description of the sample graph for the CLI."""
    return {
        "directed": False,
        "vertices": SAMPLE_VERTICES,
        "edges": [list(e) for e in SAMPLE_EDGES],
    }
