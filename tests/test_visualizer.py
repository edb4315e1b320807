"""Tests for the traversal listing visualizer."""

import pytest

from tgf_api.model import Graph, UnknownNodeError
from visualizer_listing_plugin.plugin import ListingVisualizer, traversal_nodes

from conftest import make_graph


class TestListingVisualizer:
    def setup_method(self):
        self.visualizer = ListingVisualizer()

    def test_identity(self):
        assert self.visualizer.plugin_id == "listing"
        assert self.visualizer.render_options_schema()["order"]["default"] == "bfs"

    def test_default_is_bfs_from_first_node(self, tree_graph):
        output = self.visualizer.render(tree_graph)
        assert output.splitlines() == [
            "1 Node [2, 3]",
            "2 Node [4, 5]",
            "3 Node [6, 7]",
            "4 Node []",
            "5 Node []",
            "6 Node []",
            "7 Node []",
        ]
        assert output.endswith("7 Node []\n")

    def test_dfs(self, abc_graph):
        output = self.visualizer.render(abc_graph, order="dfs")
        assert output == "1 a [2, 3]\n3 c []\n2 b [3]\n"

    def test_start_option(self, abc_graph):
        assert self.visualizer.render(abc_graph, start=2) == "2 b [3]\n3 c []\n"

    def test_include_unreachable(self, abc_graph):
        output = self.visualizer.render(abc_graph, start=3, include_unreachable=True)
        assert output == "3 c []\n1 a [2, 3]\n2 b [3]\n"

    def test_empty_graph(self):
        assert self.visualizer.render(Graph()) == ""

    def test_unknown_order(self, abc_graph):
        with pytest.raises(ValueError, match="Unsupported traversal order"):
            self.visualizer.render(abc_graph, order="random")

    def test_unknown_start(self, abc_graph):
        with pytest.raises(UnknownNodeError):
            self.visualizer.render(abc_graph, start=9)


class TestTraversalNodes:
    def test_cycle(self, cyclic_graph):
        assert [n.id for n in traversal_nodes(cyclic_graph, 3)] == [3, 1, 2]

    def test_unreachable_appended_in_graph_order(self):
        graph = make_graph((5, "e", []), (4, "d", []), (1, "a", [4]))
        nodes = traversal_nodes(graph, 1, include_unreachable=True)
        assert [n.id for n in nodes] == [1, 4, 5]
