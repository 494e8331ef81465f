"""Two-dimensional block KD-tree with leaf buckets that split on overflow."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .arena import Arena, Internal, Leaf, NodeId

BLOCK_SIZE = 4


@dataclass(frozen=True)
class Point:
    """A point in the plane."""

    x: float
    y: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))


def _key(point: Point, axis: int) -> float:
    return point.x if axis == 0 else point.y


class KDTree:
    """Points kept in leaf blocks; a leaf holding more than ``block_size``
    points is split at the median of the axis chosen by its depth."""

    def __init__(self, block_size: int = BLOCK_SIZE) -> None:
        if block_size < 1:
            raise ValueError("block_size must be at least 1")
        self.block_size = block_size
        self.root: NodeId | None = None
        self.arena = Arena()

    def insert(self, point: Point) -> None:
        """Add ``point`` to the tree, splitting its leaf if it overflows."""
        if self.root is None:
            self.root = self.arena.alloc(Leaf([point]))
            return

        node_id, depth = self.root, 0
        node = self.arena.get(node_id)
        while isinstance(node, Internal):
            if _key(point, node.axis) < node.split_value:
                node_id = node.left
            else:
                node_id = node.right
            depth += 1
            node = self.arena.get(node_id)

        if len(node.points) < self.block_size:
            node.points.append(point)
        else:
            self._split(node_id, [*node.points, point], depth % 2)

    def _split(self, node_id: NodeId, points: list[Point], axis: int) -> None:
        if any(math.isnan(_key(p, axis)) for p in points):
            raise ValueError("cannot split a block on a NaN coordinate")
        ordered = sorted(points, key=lambda p: _key(p, axis))
        split_value = _key(ordered[len(ordered) // 2], axis)
        left = [p for p in ordered if _key(p, axis) < split_value]
        right = [p for p in ordered if not _key(p, axis) < split_value]
        left_id = self.arena.alloc(Leaf(left))
        right_id = self.arena.alloc(Leaf(right))
        self.arena.replace(
            node_id,
            Internal(axis=axis, split_value=split_value, left=left_id, right=right_id),
        )

    def extend(self, points: Iterable[Point]) -> None:
        """Insert every point of ``points`` in order."""
        for point in points:
            self.insert(point)

    def leaves(self) -> Iterator[tuple[Point, ...]]:
        """Yield the contents of each leaf, left to right."""
        if self.root is None:
            return
        stack = [self.root]
        while stack:
            node = self.arena.get(stack.pop())
            if isinstance(node, Leaf):
                yield tuple(node.points)
            else:
                stack.append(node.right)
                stack.append(node.left)

    def __len__(self) -> int:
        return sum(len(leaf) for leaf in self.leaves())