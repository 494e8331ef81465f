# blockkd

This package provides small KD-tree structures for points in the plane. It also has a
static block tree for points of any dimension.

- **Block KD-tree** (`blockkd.tree.KDTree`): points are stored in leaf blocks. A leaf
  holds up to `block_size` points, and the default is 4. When a leaf overflows, its
  points are sorted along the axis for its depth: x at even depths and y at odd depths.
  The leaf is then split at the median value into two leaves. Points strictly below the
  split go left and all other points go right. The nodes are kept in an
  `blockkd.arena.Arena`, which holds `Leaf` and `Internal` nodes addressed by integer
  ids.
- **Simple KD-tree** (`blockkd.simple.SimpleKDTree`): each node holds one point, and
  the splitting axis alternates at each level.
- **Static block tree** (`blockkd.static_block`): `build_block` builds the tree from a
  list of coordinate sequences in one step. `Block.nearest_neighbor` answers a greedy
  nearest-neighbour query.

## Installing

```
pip install .
```

## Using the block KD-tree

```python
from blockkd.tree import KDTree, Point
from blockkd.printing import format_point, format_tree, print_tree

tree = KDTree()            # KDTree(block_size=8) for larger leaves
tree.extend([Point(2.0, 3.0), Point(5.0, 4.0), Point(9.0, 6.0),
             Point(4.0, 7.0), Point(8.0, 1.0), Point(7.0, 2.0)])

print(len(tree))           # 6
for leaf in tree.leaves():  # tuples of points, left to right
    print(leaf)

print_tree(tree)           # writes the layout to standard output
text = format_tree(tree, precision=1)
print(format_point(Point(2.0, 3.0)))  # Point { x: 2.0, y: 3.0 }
```

An empty tree prints as `Empty tree.`. A non-empty tree starts with a `Block KD-Tree:`
line. Below it, each internal node is shown as `Internal: axis=…, split=…`, with the
split value given to `precision` decimal places (2 by default). Each leaf is shown as
`Leaf: [...]` with its points. Each level is indented by two more spaces. If a leaf has
to be split on a NaN coordinate, `ValueError` is raised.

## Simple KD-tree

```python
from blockkd.simple import SimpleKDTree
from blockkd.tree import Point

tree = SimpleKDTree()
for x, y in [(2, 3), (5, 4), (9, 6)]:
    tree.insert(Point(x, y))
print(tree.render())       # "KD-Tree:" then "• (x, y)" lines in pre-order
```

## Nearest neighbour on a static block tree

```python
from blockkd.static_block import build_block, distance_squared

root = build_block([(2, 3), (5, 4), (9, 6), (4, 7), (8, 1), (7, 2)], 0)
print(root.nearest_neighbor((6, 3)))   # (2.0, (7.0, 2.0))
print(distance_squared((0, 0), (3, 4)))  # 25
```

`nearest_neighbor` follows a single path down the tree and does not backtrack. The
result is the closest point seen along that path, which is not always the true nearest
point. The result is a tuple of the squared distance and the point.

`build_block` raises `ValueError` in these cases:

- there are no points;
- the points have different dimensions;
- the points have no coordinates;
- the depth is negative.

A target whose dimension differs from the tree's also raises `ValueError`.

## Command line

```
blockkd
blockkd --extended --trace --precision 1
```

The command inserts the six sample points into a block KD-tree and prints the tree. The
options are:

- `--extended` uses a 44-point sample set instead.
- `--trace` prints the tree after every insertion.
- `--precision N` sets how many decimal places the split values show.

The sample sets are also available as `blockkd.cli.demo_points()` and
`blockkd.cli.extended_points()`.

## Limitations

The block KD-tree and the simple KD-tree only support inserting points and printing the
tree. They offer no deletion, range search or nearest-neighbour search. Nearest-neighbour
queries exist only on the static block tree, and that search is greedy. Nothing is saved
to disk.