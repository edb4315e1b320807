"""Contract for plugins that turn some external source into a Graph."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any
from tgf_api.model import Graph


class DataSourcePlugin(ABC):
    """
    Loads a graph from a file, a string or any other source.

    The returned graph has already been validated by ``Graph.add_nodes``:
    every edge points at an existing node id and ids are unique. Input
    that cannot be read raises a ``GraphError`` subclass, never a partial
    graph.
    """

    @property
    @abstractmethod
    def plugin_id(self) -> str:
        """Name the plugin is registered under, e.g. ``"tgf"``."""

    @property
    @abstractmethod
    def display_name(self) -> str:
        """Human-readable plugin name for listings and logs."""

    def parameters_schema(self) -> dict[str, Any] | None:
        """Describe the ``load_graph`` options, keyed by option name."""
        return None

    @abstractmethod
    def load_graph(self, source: Any, **options: Any) -> Graph:
        """Read ``source`` and return the validated graph."""
