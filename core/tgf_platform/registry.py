import logging
from importlib.metadata import entry_points
from typing import Dict, Type

from tgf_api.services import DataSourcePlugin, VisualizerPlugin

LOGGER = logging.getLogger(__name__)

# Entry point groups declared in pyproject.toml
DATASOURCE_GROUP = "tgf_platform.datasource"
VISUALIZER_GROUP = "tgf_platform.visualizer"


class PluginRegistry:
    """
    Process-wide table of plugin classes by name.

    Installed plugins (the "tgf" and "json" loaders, the "listing"
    visualizer) are found through entry points the first time the
    registry is created. Others can be added with ``register_*``.
    """

    _instance = None
    _datasources: Dict[str, Type[DataSourcePlugin]]
    _visualizers: Dict[str, Type[VisualizerPlugin]]

    def __new__(cls):
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._datasources = {}
            instance._visualizers = {}
            instance._load_entry_points()
            cls._instance = instance
        return cls._instance

    def _load_entry_points(self) -> None:
        eps = entry_points()
        for ep in eps.select(group=DATASOURCE_GROUP):
            self._datasources[ep.name] = ep.load()
        for ep in eps.select(group=VISUALIZER_GROUP):
            self._visualizers[ep.name] = ep.load()

        LOGGER.info(
            "Loaded plugins: datasources=%s visualizers=%s",
            sorted(self._datasources), sorted(self._visualizers),
        )

    # Explicit registration overrides an entry point of the same name
    def register_datasource(self, name: str, plugin_cls: Type[DataSourcePlugin]) -> None:
        self._datasources[name] = plugin_cls

    def register_visualizer(self, name: str, plugin_cls: Type[VisualizerPlugin]) -> None:
        self._visualizers[name] = plugin_cls

    def get_datasource(self, name: str) -> Type[DataSourcePlugin] | None:
        return self._datasources.get(name)

    def get_visualizer(self, name: str) -> Type[VisualizerPlugin] | None:
        return self._visualizers.get(name)

    def list_datasources(self) -> list[str]:
        return sorted(self._datasources)

    def list_visualizers(self) -> list[str]:
        return sorted(self._visualizers)
