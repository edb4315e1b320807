from typing import Callable, Dict, List, Optional, Tuple
from tgf_api.model import Graph, Node, UnknownNodeError


class Workspace:
    """
    Central application state container.

    Responsibilities:
    - Manage current graph state
    - Maintain history (undo support)
    - Provide search/filter and traversal over the current graph
    """

    def __init__(self):
        self._current_graph: Optional[Graph] = None
        self._history: List[Graph] = []

    # ==========================================================
    # GRAPH STATE MANAGEMENT
    # ==========================================================

    def set_graph(self, graph: Graph) -> None:
        if self._current_graph is not None:
            self._history.append(self._current_graph)
        self._current_graph = graph

    def get_graph(self) -> Optional[Graph]:
        return self._current_graph

    def has_graph(self) -> bool:
        return self._current_graph is not None

    def clear(self) -> None:
        self._current_graph = None
        self._history.clear()

    def undo(self) -> Optional[Graph]:
        if not self._history:
            return None
        self._current_graph = self._history.pop()
        return self._current_graph

    def history_size(self) -> int:
        return len(self._history)

    # ==========================================================
    # NODE OPERATIONS
    # ==========================================================

    def list_nodes(self) -> List[Node]:
        if self._current_graph is None:
            return []
        return self._current_graph.nodes

    def find_node_by_id(self, node_id: int) -> Optional[Node]:
        if self._current_graph is None:
            return None
        return self._current_graph.get_node(node_id)

    def filter_nodes(self, predicate: Callable[[Node], bool]) -> List[Node]:
        return [node for node in self.list_nodes() if predicate(node)]

    def find_nodes_by_data(self, substr: str) -> List[Node]:
        """Return nodes whose payload text contains the given substring."""
        return self.filter_nodes(lambda n: substr.lower() in n.text.lower())

    # ==========================================================
    # EDGE OPERATIONS
    # ==========================================================

    def list_edges(self) -> List[Tuple[int, int]]:
        return [(node.id, target) for node in self.list_nodes() for target in node.edges]

    def filter_edges(self, predicate: Callable[[int, int], bool]) -> List[Tuple[int, int]]:
        return [(source, target) for source, target in self.list_edges() if predicate(source, target)]

    # ==========================================================
    # TRAVERSAL
    # ==========================================================

    def reachable_from(self, start: int) -> Dict[int, List[int]]:
        if self._current_graph is None:
            raise UnknownNodeError(start)
        return self._current_graph.breadth_first_search(start)
