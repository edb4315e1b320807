"""
Core graph domain model (Node, Graph) and its text format.
"""

from .node import Node, SupportsText
from .graph import Graph
from .errors import (
    DanglingEdgeError,
    DuplicateNodeIdError,
    GraphError,
    GraphFormatError,
    GraphIntegrityError,
    MalformedLineError,
    PayloadFormatError,
    UnknownNodeError,
)

__all__ = [
    "Node",
    "SupportsText",
    "Graph",
    "GraphError",
    "GraphIntegrityError",
    "DanglingEdgeError",
    "DuplicateNodeIdError",
    "GraphFormatError",
    "MalformedLineError",
    "PayloadFormatError",
    "UnknownNodeError",
]
