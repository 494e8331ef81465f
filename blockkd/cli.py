"""Command that fills a block KD-tree with sample points and prints it."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from .printing import print_tree
from .tree import KDTree, Point

_DEMO = [(2.0, 3.0), (5.0, 4.0), (9.0, 6.0), (4.0, 7.0), (8.0, 1.0), (7.0, 2.0)]

_EXTRA = [
    (1.0, 5.0), (3.0, 9.0), (6.0, 8.0), (0.0, 2.0), (5.5, 5.5), (2.5, 6.5),
    (3.5, 3.5), (7.5, 4.5), (1.5, 1.5), (9.5, 7.5), (6.5, 1.0), (4.5, 0.5),
    (8.5, 9.5), (0.5, 8.5), (3.3, 1.2), (2.2, 4.4), (5.1, 6.3), (7.8, 5.9),
    (6.7, 7.1), (4.4, 2.2), (9.9, 0.1), (0.9, 3.3), (1.1, 6.6), (2.9, 8.8),
    (3.7, 0.9), (5.9, 2.7), (6.2, 3.3), (7.3, 6.6), (8.4, 8.0), (9.1, 4.2),
    (4.1, 1.1), (3.9, 2.3), (6.8, 5.0), (2.6, 3.2), (1.4, 0.4), (8.9, 3.6),
    (7.1, 9.3), (0.7, 7.7),
]


def demo_points() -> list[Point]:
    """The six-point sample set."""
    return [Point(x, y) for x, y in _DEMO]


def extended_points() -> list[Point]:
    """The sample set followed by further points, 44 in all."""
    return [Point(x, y) for x, y in _DEMO + _EXTRA]


def _precision(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError("precision must not be negative")
    return value


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Build and print a block KD-tree.")
    parser.add_argument(
        "--extended", action="store_true", help="use the larger sample set"
    )
    parser.add_argument(
        "--trace", action="store_true", help="print the tree after every insertion"
    )
    parser.add_argument(
        "--precision", type=_precision, default=2, help="decimal places of split values"
    )
    args = parser.parse_args(argv)

    tree = KDTree()
    points = extended_points() if args.extended else demo_points()
    for point in points:
        tree.insert(point)
        if args.trace:
            print_tree(tree, args.precision)
    print_tree(tree, args.precision)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())