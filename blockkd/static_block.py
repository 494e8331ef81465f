"""Bulk-built k-dimensional block tree with a greedy nearest-neighbour descent."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

Coords = tuple[float, ...]


def distance_squared(a: Sequence[float], b: Sequence[float]) -> float:
    """Squared Euclidean distance between two points of equal dimension."""
    if len(a) != len(b):
        raise ValueError("points have different dimensions")
    return sum((p - q) ** 2 for p, q in zip(a, b))


@dataclass
class Block:
    """A node holding the points at and above its median, plus child blocks."""

    points: tuple[Coords, ...]
    split_dim: int
    split_val: float
    left: Block | None = None
    right: Block | None = None

    @property
    def dimension(self) -> int:
        return len(self.points[0])

    def nearest_neighbor(self, target: Sequence[float]) -> tuple[float, Coords]:
        """Return ``(squared distance, point)`` of the closest point met while
        descending one path from this block, without backtracking."""
        target = tuple(float(c) for c in target)
        if len(target) != self.dimension:
            raise ValueError("target has a different dimension from the tree")
        best: tuple[float, Coords] | None = None
        block: Block | None = self
        while block is not None:
            for point in block.points:
                dist = distance_squared(point, target)
                if best is None or dist < best[0]:
                    best = (dist, point)
            if target[block.split_dim] < block.split_val:
                block = block.left
            else:
                block = block.right
        assert best is not None
        return best


def _build(points: list[Coords], depth: int) -> Block:
    split_dim = depth % len(points[0])
    ordered = sorted(points, key=lambda p: p[split_dim])
    median = len(ordered) // 2
    split_val = ordered[median][split_dim]
    left_points, right_points = ordered[:median], ordered[median:]
    left = _build(left_points, depth + 1) if left_points else None
    right = _build(right_points[1:], depth + 1) if len(right_points) > 1 else None
    return Block(
        points=tuple(right_points),
        split_dim=split_dim,
        split_val=split_val,
        left=left,
        right=right,
    )


def build_block(points: Sequence[Sequence[float]], depth: int = 0) -> Block:
    """Build a block tree from ``points``, starting the split axis at ``depth``."""
    coords = [tuple(float(c) for c in p) for p in points]
    if not coords:
        raise ValueError("cannot create block with zero points")
    dimensions = {len(p) for p in coords}
    if len(dimensions) != 1:
        raise ValueError("points have different dimensions")
    if 0 in dimensions:
        raise ValueError("points must have at least one coordinate")
    if depth < 0:
        raise ValueError("depth must not be negative")
    return _build(coords, depth)