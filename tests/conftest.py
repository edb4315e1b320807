"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from tgf_api.model import Graph, Node

# Path to fixtures directory
FIXTURES_DIR = Path(__file__).parent / "fixtures"


def make_graph(*rows):
    """Build a graph from (id, data, edges) tuples."""
    graph = Graph()
    graph.add_nodes([Node(node_id, data, edges) for node_id, data, edges in rows])
    return graph


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def abc_graph():
    """Three nodes, 1 -> 2, 1 -> 3, 2 -> 3."""
    return make_graph((1, "a", [2, 3]), (2, "b", [3]), (3, "c", []))


@pytest.fixture
def tree_graph():
    """Binary tree of seven nodes rooted at 1."""
    return make_graph(
        (1, "Node", [2, 3]),
        (2, "Node", [4, 5]),
        (3, "Node", [6, 7]),
        (4, "Node", []),
        (5, "Node", []),
        (6, "Node", []),
        (7, "Node", []),
    )


@pytest.fixture
def cyclic_graph():
    """1 -> 2 -> 3 -> 1, plus a self loop on 3."""
    return make_graph((1, "a", [2]), (2, "b", [3]), (3, "c", [1, 3]))
