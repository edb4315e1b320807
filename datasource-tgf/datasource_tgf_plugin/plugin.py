import os.path
from typing import Any, List

from tgf_api.datasource_common.base import DEFAULT_ENCODING, BaseDatasourcePlugin
from tgf_api.model import tgf


class TgfDatasourcePlugin(BaseDatasourcePlugin):
    # Reads the line format written by Graph.serialize
    # Either from a file, or from a string passed as option 'text'

    @property
    def plugin_id(self) -> str:
        return "tgf"

    @property
    def display_name(self) -> str:
        return "TGF Text File"

    def parameters_schema(self) -> dict:
        return {
            "file_path": {
                "type": "str",
                "label": "Path to TGF file",
                "required": False
            },
            "text": {
                "type": "str",
                "label": "TGF text (used instead of a file)",
                "required": False
            },
            "encoding": {
                "type": "str",
                "label": "File encoding",
                "required": False,
                "default": DEFAULT_ENCODING
            }
        }

    def _parse_source(self, source: Any, **kwargs) -> List[dict]:
        text = kwargs.get("text")
        if text is None:
            text = self._read_file(source, kwargs)
        return tgf.parse_records(text)

    def _read_file(self, source: Any, options: dict) -> str:
        path = self._resolve_path(source, options)
        if not os.path.exists(path):
            raise FileNotFoundError(f"TGF file not found: {path}")

        # newline="" keeps \r so mixed line endings reach the parser untouched
        with open(path, "r", encoding=options.get("encoding") or DEFAULT_ENCODING, newline="") as f:
            return f.read()
