"""Point-per-node KD-tree in the plane, alternating the split axis by depth."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass

from .tree import Point


def _key(point: Point, axis: int) -> float:
    return point.x if axis == 0 else point.y


def _fixed(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    return f"{value:.1f}"


@dataclass
class SimpleNode:
    """One stored point with its two subtrees."""

    point: Point
    left: SimpleNode | None = None
    right: SimpleNode | None = None


class SimpleKDTree:
    """Each node holds one point; x splits at even depths, y at odd ones."""

    def __init__(self) -> None:
        self.root: SimpleNode | None = None

    def insert(self, point: Point) -> None:
        """Add ``point`` as a new leaf below the existing nodes."""
        new = SimpleNode(point)
        if self.root is None:
            self.root = new
            return
        node, depth = self.root, 0
        while True:
            axis = depth % 2
            if _key(point, axis) < _key(node.point, axis):
                if node.left is None:
                    node.left = new
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new
                    return
                node = node.right
            depth += 1

    def _lines(self, node: SimpleNode | None, depth: int) -> Iterator[str]:
        if node is None:
            return
        indent = "  " * depth
        yield f"{indent}• ({_fixed(node.point.x)}, {_fixed(node.point.y)})"
        yield from self._lines(node.left, depth + 1)
        yield from self._lines(node.right, depth + 1)

    def render(self) -> str:
        """Return the tree in pre-order, one indented line per point."""
        return "\n".join(["KD-Tree:", *self._lines(self.root, 0)])