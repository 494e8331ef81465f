import pytest

from blockkd.static_block import Block, build_block, distance_squared

DEMO = [(2.0, 3.0), (5.0, 4.0), (9.0, 6.0), (4.0, 7.0), (8.0, 1.0), (7.0, 2.0)]


def _all_points(block):
    if block is None:
        return set()
    return set(block.points) | _all_points(block.left) | _all_points(block.right)


def test_distance_squared_zero_for_same_point():
    assert distance_squared((1.5, -2.0, 3.0), (1.5, -2.0, 3.0)) == 0


def test_distance_squared_is_symmetric():
    a, b = (1.0, 2.0), (4.0, -6.0)
    assert distance_squared(a, b) == distance_squared(b, a)


def test_distance_squared_pythagorean():
    assert distance_squared((0.0, 0.0), (3.0, 4.0)) == 25.0


def test_distance_squared_dimension_mismatch():
    with pytest.raises(ValueError):
        distance_squared((1.0,), (1.0, 2.0))


def test_build_empty_raises():
    with pytest.raises(ValueError):
        build_block([], 0)


def test_build_mixed_dimensions_raises():
    with pytest.raises(ValueError):
        build_block([(1.0, 2.0), (1.0, 2.0, 3.0)], 0)


def test_root_splits_on_first_axis_at_median():
    block = build_block(DEMO, 0)
    assert block.split_dim == 0
    assert block.split_val == 7.0
    assert block.points == ((7.0, 2.0), (8.0, 1.0), (9.0, 6.0))


def test_child_splits_on_next_axis():
    block = build_block(DEMO, 0)
    assert block.left.split_dim == 1
    assert block.right.split_dim == 1


def test_depth_offsets_split_axis():
    block = build_block([(1.0, 2.0, 3.0)], 2)
    assert block.split_dim == 2
    assert block.split_val == 3.0
    assert block.left is None and block.right is None


def test_every_input_point_is_stored():
    block = build_block(DEMO, 0)
    assert _all_points(block) == set(DEMO)


def test_nearest_neighbor_demo():
    block = build_block(DEMO, 0)
    dist, point = block.nearest_neighbor((6.0, 3.0))
    assert point == (7.0, 2.0)
    assert dist == distance_squared(point, (6.0, 3.0))


def test_nearest_neighbor_exact_root_point():
    block = build_block(DEMO, 0)
    assert block.nearest_neighbor((8.0, 1.0)) == (0.0, (8.0, 1.0))


def test_nearest_neighbor_result_is_stored_point():
    points = [(float(i), float((i * 7) % 11)) for i in range(20)]
    block = build_block(points, 0)
    for target in [(0.5, 3.0), (10.0, 10.0), (19.0, 0.0)]:
        dist, point = block.nearest_neighbor(target)
        assert point in points
        assert dist == distance_squared(point, target)


def test_nearest_neighbor_dimension_mismatch():
    block = build_block(DEMO, 0)
    with pytest.raises(ValueError):
        block.nearest_neighbor((1.0, 2.0, 3.0))


def test_single_point_block():
    block = build_block([(4.0,)], 0)
    assert block == Block(points=((4.0,),), split_dim=0, split_val=4.0)
    assert block.nearest_neighbor((1.0,)) == (9.0, (4.0,))