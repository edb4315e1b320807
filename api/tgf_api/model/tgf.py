"""
Line-oriented text format for graphs.

Every node is written on its own line, in the graph's node order:

    <id> <data> <edge> <edge> ... \n

Fields are separated by single spaces and every line ends with a space
before the newline, also when the node has no edges. The payload is
written as-is, there is no quoting or escaping.
"""

import logging
import re
from typing import Any, Dict, Iterable, List

from .errors import MalformedLineError, PayloadFormatError
from .node import Node

LOGGER = logging.getLogger(__name__)

NodeRecord = Dict[str, Any]

# ASCII digits with an optional minus, the only form format_node writes
INTEGER_TOKEN = re.compile(r"-?[0-9]+")


def format_node(node: Node) -> str:
    text = node.text
    if not text or any(ch.isspace() for ch in text):
        raise PayloadFormatError(node.id, text)

    fields = [str(node.id), text]
    fields.extend(str(edge) for edge in node.edges)
    return "".join(f"{field} " for field in fields) + "\n"


def serialize(nodes: Iterable[Node]) -> str:
    return "".join(format_node(node) for node in nodes)


def is_integer_token(token: str) -> bool:
    return INTEGER_TOKEN.fullmatch(token) is not None


def _parse_int(token: str, line_no: int, line: str, what: str) -> int:
    if not is_integer_token(token):
        raise MalformedLineError(line_no, line, f"{what} {token!r} is not an integer")
    return int(token)


def parse_line(line: str, line_no: int = 1) -> NodeRecord:
    """Parse one non-empty line into an ``{"id", "data", "edges"}`` record."""
    parts = line.split()
    if not parts:
        raise MalformedLineError(line_no, line, "missing node id")
    if len(parts) < 2:
        raise MalformedLineError(line_no, line, "missing node data")

    node_id = _parse_int(parts[0], line_no, line, "node id")
    edges = [_parse_int(token, line_no, line, "edge id") for token in parts[2:]]
    return {"id": node_id, "data": parts[1], "edges": edges}


def parse_records(text: str) -> List[NodeRecord]:
    """
    Parse a whole document.

    Any line ending is accepted and surrounding indentation is ignored.
    Blank lines are skipped, so line numbers in errors count them.
    """
    records = []
    for line_no, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue
        records.append(parse_line(line, line_no))

    LOGGER.debug("Parsed %d node records", len(records))
    return records
