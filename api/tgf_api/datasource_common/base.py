# base.py
from __future__ import annotations

import logging
from abc import abstractmethod
from typing import Any, Iterable

from tgf_api.model import Graph, GraphFormatError, Node
from tgf_api.model.tgf import is_integer_token
from tgf_api.services.datasource_plugin import DataSourcePlugin

LOGGER = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"


def _is_integral(value: Any) -> bool:
    # bool is an int subclass
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, str) and is_integer_token(value)


class BaseDatasourcePlugin(DataSourcePlugin):
    # Base class for defining the flow of creating a Graph object
    # The flow is always to first parse the source (this is different based on plugin)
    # Secondly, we build the nodes and hand them to the graph in one batch

    def load_graph(self, source: Any, **options: Any) -> Graph:
        # Parse the data into node records
        # This step is different based on each plugin implementation
        records = self._parse_source(source, **options)

        graph = Graph()
        self._build_nodes(records, graph)
        LOGGER.info("%s loaded %d nodes", self.plugin_id, len(graph))
        return graph

    @staticmethod
    def _resolve_path(source: Any, options: dict[str, Any]) -> str:
        if isinstance(source, str) and source.strip():
            return source
        fp = options.get("file_path")
        if isinstance(fp, str) and fp.strip():
            return fp
        raise ValueError("Missing file path. Provide it as 'source' or as option 'file_path'.")

    @abstractmethod
    def _parse_source(self, source: Any, **options: Any) -> Iterable[dict]:
        # Returns {"id", "data", "edges"} records
        pass

    # Create Node objects
    def _build_nodes(self, records: Iterable[dict], graph: Graph) -> None:
        nodes = []
        for position, record in enumerate(records, start=1):
            if not isinstance(record, dict):
                raise GraphFormatError(f"Record {position} is not an object: {record!r}")

            if "id" not in record or "data" not in record:
                raise GraphFormatError(f"Record {position} needs both 'id' and 'data': {record!r}")

            edges = record.get("edges") or []
            if not isinstance(edges, list):
                raise GraphFormatError(f"Record {position} edges must be a list: {record!r}")

            values = [record["id"], *edges]
            if not all(_is_integral(value) for value in values):
                raise GraphFormatError(f"Record {position} has a non-integer id or edge: {record!r}")

            node_id = int(record["id"])
            edges = [int(edge) for edge in edges]

            nodes.append(Node(node_id, record["data"], edges))

        # Invariants are checked over the complete set, once
        graph.add_nodes(nodes)
