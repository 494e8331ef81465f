"""Planar KD-trees: a block KD-tree with text rendering, a simple KD-tree, and a
static block tree with greedy nearest-neighbour search."""

__version__ = "0.1.0"