"""Exceptions raised by the graph container and the TGF codec."""

from typing import Iterable


class GraphError(Exception):
    """Base class for every graph container failure."""


class GraphIntegrityError(GraphError, ValueError):
    """The node set violates a structural invariant."""


class DanglingEdgeError(GraphIntegrityError):
    def __init__(self, node_id: int, target_id: int):
        self.node_id = node_id
        self.target_id = target_id
        super().__init__(f"Node {node_id} has edge to non-existing node {target_id}.")


class DuplicateNodeIdError(GraphIntegrityError):
    def __init__(self, duplicate_ids: Iterable[int]):
        self.duplicate_ids = sorted(set(duplicate_ids))
        ids = ", ".join(str(i) for i in self.duplicate_ids)
        super().__init__(f"Graph has nodes with non-unique id: {ids}.")


class GraphFormatError(GraphError, ValueError):
    """Text or record input cannot be turned into nodes."""


class MalformedLineError(GraphFormatError):
    def __init__(self, line_no: int, line: str, reason: str):
        self.line_no = line_no
        self.line = line
        self.reason = reason
        super().__init__(f"Line {line_no}: {reason} ({line!r}).")


class PayloadFormatError(GraphFormatError):
    def __init__(self, node_id: int, text: str):
        self.node_id = node_id
        self.text = text
        super().__init__(
            f"Node {node_id} payload {text!r} cannot be serialized: "
            "it must be non-empty and contain no whitespace."
        )


class UnknownNodeError(GraphError, LookupError):
    def __init__(self, node_id: int):
        self.node_id = node_id
        super().__init__(f"Node '{node_id}' does not exist.")
