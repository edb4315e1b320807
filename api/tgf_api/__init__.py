"""Public API exports for the graph container and plugin contracts."""

from .model import Node, Graph
from .services import DataSourcePlugin, VisualizerPlugin

__all__ = [
    "Node",
    "Graph",
    "DataSourcePlugin",
    "VisualizerPlugin",
]
