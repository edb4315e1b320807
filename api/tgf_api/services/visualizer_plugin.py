"""Contract for plugins that render a Graph as text."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any
from ..model import Graph


class VisualizerPlugin(ABC):
    """
    Renders a graph, usually by walking it from a start node.

    Rendering never changes the graph. An unknown start id raises
    ``UnknownNodeError``.
    """

    @property
    @abstractmethod
    def plugin_id(self) -> str:
        """Name the plugin is registered under, e.g. ``"listing"``."""

    @property
    @abstractmethod
    def display_name(self) -> str:
        """Human-readable plugin name for listings and logs."""

    def render_options_schema(self) -> dict[str, Any] | None:
        """Describe the ``render`` options, keyed by option name."""
        return None

    @abstractmethod
    def render(self, graph: Graph, **options: Any) -> str:
        """Return the rendered text for ``graph``."""
