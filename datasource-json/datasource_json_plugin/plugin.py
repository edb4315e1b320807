import json
import os.path
from typing import Any, List

from tgf_api.datasource_common.base import DEFAULT_ENCODING, BaseDatasourcePlugin
from tgf_api.model import GraphFormatError


class JsonDatasourcePlugin(BaseDatasourcePlugin):
    # Adapter to read a JSON file and map it to a Graph object
    # Accepts the shape written by Graph.to_dict(), {"nodes": [...]},
    # or a bare list of node objects

    @property
    def plugin_id(self) -> str:
        # Platform finds this plugin with this id
        return "json"

    @property
    def display_name(self) -> str:
        return "JSON file"

    def parameters_schema(self) -> dict:
        return {
            "file_path": {
                "type": "str",
                "label": "Path to JSON file",
                "required": True
            },
            "encoding": {
                "type": "str",
                "label": "File encoding",
                "required": False,
                "default": DEFAULT_ENCODING
            }
        }

    def _parse_source(self, source: Any, **kwargs) -> List[dict]:
        path = self._resolve_path(source, kwargs)
        if not os.path.exists(path):
            raise FileNotFoundError(f"JSON file not found: {path}")

        with open(path, "r", encoding=kwargs.get("encoding") or DEFAULT_ENCODING) as f:
            try:
                raw_json = json.load(f)
            except json.JSONDecodeError as exc:
                raise GraphFormatError(f"Invalid JSON in {path}: {exc}") from exc

        if isinstance(raw_json, dict) and "nodes" in raw_json:
            raw_json = raw_json["nodes"]

        if not isinstance(raw_json, list):
            raise GraphFormatError(f"Expected a list of nodes in {path}.")

        return raw_json
