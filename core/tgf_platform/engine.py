import logging
from typing import Optional

from .registry import PluginRegistry
from .workspace import Workspace
from tgf_api.services import DataSourcePlugin, VisualizerPlugin

LOGGER = logging.getLogger(__name__)


class GraphEngine:
    """
    High-level orchestration layer.

    Responsibilities:
    - Plugin execution
    - Graph lifecycle management
    - Delegation to Workspace
    """

    def __init__(self, registry: Optional[PluginRegistry] = None):
        self.registry = registry or PluginRegistry()
        self.workspace = Workspace()

    # ==========================================================
    # MAIN ORCHESTRATION
    # ==========================================================

    def load(self, datasource_name: str, source, **options):
        datasource_cls = self.registry.get_datasource(datasource_name)
        if not datasource_cls:
            raise ValueError(f"Datasource '{datasource_name}' not found.")

        datasource: DataSourcePlugin = datasource_cls()
        graph = datasource.load_graph(source, **options)

        # Store graph inside workspace
        self.workspace.set_graph(graph)
        return graph

    def render(self, visualizer_name: str, **options) -> str:
        visualizer_cls = self.registry.get_visualizer(visualizer_name)
        if not visualizer_cls:
            raise ValueError(f"Visualizer '{visualizer_name}' not found.")

        graph = self.workspace.get_graph()
        if graph is None:
            raise ValueError("No graph loaded.")

        visualizer: VisualizerPlugin = visualizer_cls()
        return visualizer.render(graph, **options)

    def process(
        self,
        datasource_name: str,
        visualizer_name: str,
        source,
        **options,
    ) -> str:
        # Resolve both plugins before touching the workspace
        if not self.registry.get_visualizer(visualizer_name):
            raise ValueError(f"Visualizer '{visualizer_name}' not found.")

        graph = self.load(datasource_name, source, **options)
        LOGGER.info(
            "Loaded %d nodes with '%s', rendering with '%s'",
            len(graph), datasource_name, visualizer_name,
        )
        return self.render(visualizer_name, **options)

    # ==========================================================
    # WORKSPACE DELEGATION API
    # ==========================================================

    def get_current_graph(self):
        return self.workspace.get_graph()

    def clear_workspace(self):
        self.workspace.clear()

    def undo(self):
        return self.workspace.undo()

    # Node helpers
    def list_nodes(self):
        return self.workspace.list_nodes()

    def find_node(self, node_id: int):
        return self.workspace.find_node_by_id(node_id)

    def filter_nodes(self, predicate):
        return self.workspace.filter_nodes(predicate)

    def search_nodes_by_data(self, substr: str):
        return self.workspace.find_nodes_by_data(substr)

    # Edge helpers
    def list_edges(self):
        return self.workspace.list_edges()

    def filter_edges(self, predicate):
        return self.workspace.filter_edges(predicate)

    # Traversal
    def reachable_from(self, start: int):
        return self.workspace.reachable_from(start)
