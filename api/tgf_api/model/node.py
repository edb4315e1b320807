from typing import Generic, Iterable, List, Optional, Protocol, TypeVar


class SupportsText(Protocol):
    """Anything that produces a text representation of itself."""

    def __str__(self) -> str:
        ...


T = TypeVar("T", bound=SupportsText)


class Node(Generic[T]):
    def __init__(self, node_id: int, data: T, edges: Optional[Iterable[int]] = None):
        self.id = node_id
        self.data = data
        self.edges: List[int] = list(edges or [])

    @property
    def text(self) -> str:
        return str(self.data)

    def add_edge(self, target_id: int) -> None:
        # Targets are checked by the graph when the node is added to it
        self.edges.append(target_id)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "data": self.text,
            "edges": list(self.edges),
        }

    def __repr__(self) -> str:
        return f"Node(id={self.id!r}, data={self.data!r}, edges={self.edges!r})"
