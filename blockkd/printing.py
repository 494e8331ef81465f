"""Text rendering of a block KD-tree."""

from __future__ import annotations

import math
import sys
from collections.abc import Iterator
from typing import TextIO

from .arena import Leaf, NodeId
from .tree import KDTree, Point


def _float_repr(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = repr(value)
    if "e" in text:
        mantissa, exponent = text.split("e")
        return f"{mantissa}e{int(exponent)}"
    return text


def _float_fixed(value: float, precision: int) -> str:
    if math.isnan(value):
        return "NaN"
    return f"{value:.{precision}f}"


def format_point(point: Point) -> str:
    """Render a point as ``Point { x: .., y: .. }``."""
    return f"Point {{ x: {_float_repr(point.x)}, y: {_float_repr(point.y)} }}"


def _node_lines(tree: KDTree, node_id: NodeId, depth: int, precision: int) -> Iterator[str]:
    indent = "  " * depth
    node = tree.arena.get(node_id)
    if isinstance(node, Leaf):
        points = ", ".join(format_point(p) for p in node.points)
        yield f"{indent}Leaf: [{points}]"
        return
    split = _float_fixed(node.split_value, precision)
    yield f"{indent}Internal: axis={node.axis}, split={split}"
    yield from _node_lines(tree, node.left, depth + 1, precision)
    yield from _node_lines(tree, node.right, depth + 1, precision)


def format_tree(tree: KDTree, precision: int = 2) -> str:
    """Render the tree as indented lines, split values to ``precision`` places."""
    if precision < 0:
        raise ValueError("precision must not be negative")
    if tree.root is None:
        return "Empty tree."
    return "\n".join(["Block KD-Tree:", *_node_lines(tree, tree.root, 0, precision)])


def print_tree(tree: KDTree, precision: int = 2, file: TextIO | None = None) -> None:
    """Write the rendering of ``tree`` to ``file`` (standard output by default)."""
    print(format_tree(tree, precision), file=file if file is not None else sys.stdout)