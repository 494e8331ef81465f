"""Flat node storage for the block KD-tree, addressed by integer ids."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from .tree import Point

NodeId = int


@dataclass
class Leaf:
    """A bucket of points stored together."""

    points: list[Point] = field(default_factory=list)


@dataclass(frozen=True)
class Internal:
    """A split along one axis; children are referenced by id."""

    axis: int
    split_value: float
    left: NodeId
    right: NodeId


Node = Union[Leaf, Internal]


class Arena:
    """Owns every node of a tree; nodes refer to each other by index."""

    def __init__(self) -> None:
        self.nodes: list[Node] = []

    def alloc(self, node: Node) -> NodeId:
        """Store ``node`` and return its id."""
        self.nodes.append(node)
        return len(self.nodes) - 1

    def get(self, node_id: NodeId) -> Node:
        """Return the node with id ``node_id``."""
        return self.nodes[self._checked(node_id)]

    def replace(self, node_id: NodeId, node: Node) -> None:
        """Put ``node`` in place of the node with id ``node_id``."""
        self.nodes[self._checked(node_id)] = node

    def __len__(self) -> int:
        return len(self.nodes)

    def _checked(self, node_id: NodeId) -> NodeId:
        if not 0 <= node_id < len(self.nodes):
            raise IndexError(f"no node with id {node_id}")
        return node_id