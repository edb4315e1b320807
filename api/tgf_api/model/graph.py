import logging
from collections import Counter, deque
from typing import Dict, Generic, Iterable, Iterator, List, Optional

from . import tgf
from .errors import DanglingEdgeError, DuplicateNodeIdError, UnknownNodeError
from .node import Node, T

LOGGER = logging.getLogger(__name__)


class Graph(Generic[T]):
    """
    Directed graph with integer node ids.

    Edges are stored on the nodes as lists of target ids and are resolved
    by id lookup. Node ids are used literally everywhere, they do not have
    to be contiguous or sorted.
    """

    def __init__(self):
        self.nodes: List[Node[T]] = []
        self._index: Dict[int, Node[T]] = {}

    # -----------------
    # NODE OPERATIONS
    # -----------------

    def add_nodes(self, nodes: Iterable[Node[T]]) -> None:
        """
        Append ``nodes`` and validate the whole resulting node set.

        Raises DanglingEdgeError or DuplicateNodeIdError. On failure the
        batch is dropped again and the graph keeps its previous nodes.
        """
        previous = len(self.nodes)
        self.nodes.extend(nodes)
        try:
            self._validate()
        except Exception:
            del self.nodes[previous:]
            raise

        self._index = {node.id: node for node in self.nodes}
        LOGGER.debug("Added %d nodes, graph has %d", len(self.nodes) - previous, len(self.nodes))

    def _validate(self) -> None:
        ids = [node.id for node in self.nodes]
        known = set(ids)

        for node in self.nodes:
            for edge in node.edges:
                if edge not in known:
                    LOGGER.warning("Rejecting nodes: %s -> %s is a dangling edge", node.id, edge)
                    raise DanglingEdgeError(node.id, edge)

        if len(known) < len(ids):
            duplicates = [node_id for node_id, count in Counter(ids).items() if count > 1]
            LOGGER.warning("Rejecting nodes: duplicate ids %s", duplicates)
            raise DuplicateNodeIdError(duplicates)

    def get_node(self, node_id: int) -> Optional[Node[T]]:
        return self._index.get(node_id)

    def node(self, node_id: int) -> Node[T]:
        try:
            return self._index[node_id]
        except KeyError:
            raise UnknownNodeError(node_id) from None

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Node[T]]:
        return iter(self.nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._index

    # -----------------
    # TRAVERSAL
    # -----------------

    def breadth_first_search(self, start: int) -> Dict[int, List[int]]:
        """
        Map every node reachable from ``start`` to its outbound edge list.

        Targets are queued even when already visited, the visited check
        happens when an id is taken off the queue. The mapping is filled
        in visit order.
        """
        visited: Dict[int, List[int]] = {}
        queue = deque([start])

        while queue:
            current = queue.popleft()
            if current in visited:
                continue
            edges = self.node(current).edges
            visited[current] = list(edges)
            queue.extend(edges)

        LOGGER.debug("BFS from %s reached %d nodes", start, len(visited))
        return visited

    def breadth_first_order(self, start: int) -> List[Node[T]]:
        return [self._index[node_id] for node_id in self.breadth_first_search(start)]

    def depth_first_order(self, start: int) -> List[Node[T]]:
        """Nodes reachable from ``start``, visited with an explicit stack."""
        visited = set()
        order: List[Node[T]] = []
        stack = [start]

        while stack:
            current = stack.pop()
            if current in visited:
                continue
            node = self.node(current)
            visited.add(current)
            order.append(node)
            stack.extend(node.edges)

        return order

    # -----------------
    # SERIALIZATION
    # -----------------

    def serialize(self) -> str:
        return tgf.serialize(self.nodes)

    @classmethod
    def deserialize(cls, text: str) -> "Graph[str]":
        """Build a graph from TGF text, validating it with one add_nodes call."""
        nodes = [Node(r["id"], r["data"], r["edges"]) for r in tgf.parse_records(text)]
        graph: Graph[str] = cls()
        graph.add_nodes(nodes)
        return graph

    def to_dict(self) -> dict:
        return {
            "nodes": [node.to_dict() for node in self.nodes],
        }
