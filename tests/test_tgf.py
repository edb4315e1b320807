"""Tests for the TGF text format."""

import pytest

from tgf_api.model import (
    DanglingEdgeError,
    DuplicateNodeIdError,
    Graph,
    MalformedLineError,
    Node,
    PayloadFormatError,
)
from tgf_api.model import tgf

from conftest import make_graph


class TestSerialize:
    def test_literal_example(self, abc_graph):
        assert abc_graph.serialize() == "1 a 2 3 \n2 b 3 \n3 c \n"

    def test_tree(self, tree_graph):
        assert tree_graph.serialize() == (
            "1 Node 2 3 \n2 Node 4 5 \n3 Node 6 7 \n4 Node \n5 Node \n6 Node \n7 Node \n"
        )

    def test_empty_graph(self):
        assert Graph().serialize() == ""

    def test_uses_node_order_not_id_order(self):
        graph = make_graph((3, "c", []), (1, "a", [3]))
        assert graph.serialize() == "3 c \n1 a 3 \n"

    def test_payload_uses_str(self):
        graph = make_graph((1, 3.5, []), (2, True, [1]))
        assert graph.serialize() == "1 3.5 \n2 True 1 \n"

    @pytest.mark.parametrize("payload", ["two words", "", "tab\there"])
    def test_rejects_payload_that_cannot_be_read_back(self, payload):
        graph = make_graph((1, payload, []))
        with pytest.raises(PayloadFormatError):
            graph.serialize()


class TestDeserialize:
    def test_literal_example(self):
        graph = Graph.deserialize("1 Node 2 3\n2 Node 4 5\n3 Node 6 7\n4 Node\n5 Node\n6 Node\n7 Node")
        assert len(graph.nodes) == 7
        assert graph.node(3).edges == [6, 7]
        assert graph.node(4).edges == []

    def test_indented_lines(self):
        serialized = """1 Node 2 3
                        2 Node 4 5
                        3 Node 6 7
                        4 Node 
                        5 Node 
                        6 Node 
                        7 Node """
        graph = Graph.deserialize(serialized)
        assert len(graph.nodes) == 7
        assert graph.node(1).edges == [2, 3]

    def test_mixed_line_endings_and_blank_lines(self):
        graph = Graph.deserialize("1 a 2\r\n\n2 b 1\r3 c\n")
        assert [(n.id, n.data, n.edges) for n in graph] == [(1, "a", [2]), (2, "b", [1]), (3, "c", [])]

    def test_round_trip(self, cyclic_graph):
        restored = Graph.deserialize(cyclic_graph.serialize())
        assert [(n.id, n.text, n.edges) for n in restored] == [
            (n.id, n.text, n.edges) for n in cyclic_graph
        ]

    def test_dangling_edge_fails(self):
        with pytest.raises(DanglingEdgeError):
            Graph.deserialize("1 a 2\n")

    def test_duplicate_id_fails(self):
        with pytest.raises(DuplicateNodeIdError):
            Graph.deserialize("1 a\n1 b\n")

    def test_missing_payload(self):
        with pytest.raises(MalformedLineError) as excinfo:
            Graph.deserialize("1 a\n2\n")
        assert excinfo.value.line_no == 2

    @pytest.mark.parametrize("text", [
        "x a\n",
        "1 a 2.5\n",
        "1 a b\n",
        "+1 a\n",
        "1 a +2\n",
        "1_000 a\n",
        "\u0663 a\n",
        "1 a 2\u0660\n",
    ])
    def test_non_integer_tokens(self, text):
        with pytest.raises(MalformedLineError):
            Graph.deserialize(text)

    def test_negative_ids_read_back(self):
        text = "-1 a 0 \n0 b -1 \n"
        assert Graph.deserialize(text).serialize() == text

    def test_empty_text(self):
        assert len(Graph.deserialize("")) == 0


class TestParseLine:
    def test_record(self):
        assert tgf.parse_line("  7 seven 1 2  ") == {"id": 7, "data": "seven", "edges": [1, 2]}

    def test_empty_line(self):
        with pytest.raises(MalformedLineError, match="missing node id"):
            tgf.parse_line("   ", 4)

    def test_format_node(self):
        assert tgf.format_node(Node(9, "n")) == "9 n \n"
