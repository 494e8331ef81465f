import pytest

from blockkd.arena import Arena, Internal, Leaf
from blockkd.tree import Point


def test_empty_arena_has_no_nodes():
    arena = Arena()
    assert len(arena) == 0
    assert arena.nodes == []


def test_alloc_returns_sequential_ids():
    arena = Arena()
    first = arena.alloc(Leaf())
    second = arena.alloc(Leaf())
    third = arena.alloc(Internal(axis=0, split_value=1.0, left=first, right=second))
    assert (first, second, third) == (0, 1, 2)
    assert len(arena) == 3


def test_get_returns_stored_node():
    arena = Arena()
    leaf = Leaf([Point(1.0, 2.0)])
    node_id = arena.alloc(leaf)
    assert arena.get(node_id) is leaf
    assert arena.get(node_id).points == [Point(1.0, 2.0)]


def test_stored_leaf_is_mutable_through_get():
    arena = Arena()
    node_id = arena.alloc(Leaf())
    arena.get(node_id).points.append(Point(3.0, 4.0))
    assert arena.get(node_id).points == [Point(3.0, 4.0)]


def test_replace_swaps_node_in_place():
    arena = Arena()
    root = arena.alloc(Leaf([Point(1.0, 1.0)]))
    left = arena.alloc(Leaf())
    right = arena.alloc(Leaf())
    internal = Internal(axis=1, split_value=2.5, left=left, right=right)
    arena.replace(root, internal)
    assert arena.get(root) == internal
    assert len(arena) == 3


@pytest.mark.parametrize("bad_id", [0, -1, 5])
def test_get_unknown_id_raises(bad_id):
    arena = Arena()
    if bad_id == 5:
        arena.alloc(Leaf())
    with pytest.raises(IndexError):
        arena.get(bad_id)


def test_replace_unknown_id_raises():
    arena = Arena()
    arena.alloc(Leaf())
    with pytest.raises(IndexError):
        arena.replace(1, Leaf())
    assert len(arena) == 1