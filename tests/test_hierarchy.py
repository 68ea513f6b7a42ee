import pytest

from libdstruct.adt import StructureError
from libdstruct.hierarchy import (
    BinaryExplicitHierarchy,
    KWayExplicitHierarchy,
    MultiWayExplicitHierarchy,
)


def make_mweh():
    #        0
    #   /         \
    #   1         2
    # / | \       |
    # 3 4 5       6
    hierarchy = MultiWayExplicitHierarchy()
    root = hierarchy.emplace_root()
    root.data = 0
    one = hierarchy.emplace_son(root, 0)
    one.data = 1
    two = hierarchy.emplace_son(root, 1)
    two.data = 2
    for order, value in enumerate((3, 4, 5)):
        hierarchy.emplace_son(one, order).data = value
    hierarchy.emplace_son(two, 0).data = 6
    return hierarchy


def make_kweh():
    #         0
    #    /    |    \
    #    1    -    2
    #  / | \     / | \
    #  3 - 4     - 5 -
    hierarchy = KWayExplicitHierarchy(3)
    root = hierarchy.emplace_root()
    root.data = 0
    one = hierarchy.emplace_son(root, 0)
    one.data = 1
    two = hierarchy.emplace_son(root, 2)
    two.data = 2
    hierarchy.emplace_son(one, 0).data = 3
    hierarchy.emplace_son(one, 2).data = 4
    hierarchy.emplace_son(two, 1).data = 5
    return hierarchy


# ----- multiway explicit hierarchy


def test_mweh_insert():
    assert make_mweh().size() == 7


def test_mweh_access():
    assert MultiWayExplicitHierarchy().access_root() is None

    hierarchy = make_mweh()
    root = hierarchy.access_root()
    assert root.data == 0
    one = hierarchy.access_son(root, 0)
    assert one.data == 1
    two = hierarchy.access_son(root, 1)
    assert two.data == 2
    six = hierarchy.access_son(two, 0)
    assert six.data == 6
    assert hierarchy.access_son(two, 1) is None

    assert hierarchy.access_parent(six) is two
    assert hierarchy.access_parent(one) is root
    assert hierarchy.access_parent(root) is None


def test_mweh_levels_counts_degrees():
    hierarchy = make_mweh()
    root = hierarchy.access_root()
    one = hierarchy.access_son(root, 0)
    two = hierarchy.access_son(root, 1)
    six = hierarchy.access_son(two, 0)

    assert hierarchy.node_count() == 7
    assert hierarchy.node_count(one) == 4

    assert hierarchy.level(root) == 0
    assert hierarchy.level(one) == 1
    assert hierarchy.level(six) == 2

    assert hierarchy.degree(root) == 2
    assert hierarchy.degree(one) == 3
    assert hierarchy.degree(two) == 1
    assert hierarchy.degree(six) == 0

    other = MultiWayExplicitHierarchy()
    hierarchy.change_root(None)
    other.change_root(root)
    assert other.node_count() == 7
    assert hierarchy.is_empty()
    assert hierarchy.node_count() == 0


def test_mweh_remove():
    hierarchy = make_mweh()
    root = hierarchy.access_root()
    one = hierarchy.access_son(root, 0)

    hierarchy.remove_son(one, 1)
    hierarchy.remove_son(root, 1)

    assert hierarchy.degree(one) == 2
    assert hierarchy.access_son(one, 1).data == 5
    assert hierarchy.degree(root) == 1
    assert hierarchy.access_son(root, 1) is None


def test_mweh_remove_missing_son_raises():
    hierarchy = make_mweh()
    with pytest.raises(IndexError):
        hierarchy.remove_son(hierarchy.access_root(), 5)


def test_mweh_copy_assign_equals():
    hierarchy1 = make_mweh()
    root1 = hierarchy1.access_root()
    one1 = hierarchy1.access_son(root1, 0)

    hierarchy2 = MultiWayExplicitHierarchy().assign(hierarchy1)
    assert hierarchy1.equals(hierarchy2)
    hierarchy1.remove_son(root1, 1)
    assert not hierarchy1.equals(hierarchy2)

    hierarchy3 = MultiWayExplicitHierarchy()
    hierarchy3.assign(hierarchy1)
    assert hierarchy1.equals(hierarchy3)
    hierarchy1.remove_son(one1, 0)
    hierarchy1.remove_son(one1, 0)
    assert not hierarchy1.equals(hierarchy3)


def test_mweh_assign_is_deep():
    hierarchy1 = make_mweh()
    hierarchy2 = MultiWayExplicitHierarchy().assign(hierarchy1)
    hierarchy1.access_root().data = 100
    assert hierarchy2.access_root().data == 0
    assert hierarchy2.access_root() is not hierarchy1.access_root()


def test_mweh_clear():
    hierarchy = make_mweh()
    hierarchy.clear()
    assert hierarchy.size() == 0
    assert hierarchy.access_root() is None
    assert hierarchy.is_empty()


def test_mweh_traversals():
    hierarchy = make_mweh()
    assert list(hierarchy) == [0, 1, 3, 4, 5, 2, 6]
    assert [n.data for n in hierarchy.pre_order()] == [0, 1, 3, 4, 5, 2, 6]
    assert [n.data for n in hierarchy.post_order()] == [3, 4, 5, 1, 6, 2, 0]
    assert [n.data for n in hierarchy.level_order()] == [0, 1, 2, 3, 4, 5, 6]
    one = hierarchy.access_son(hierarchy.access_root(), 0)
    assert [n.data for n in hierarchy.post_order(one)] == [3, 4, 5, 1]


def test_traversals_of_empty_hierarchy():
    hierarchy = MultiWayExplicitHierarchy()
    assert list(hierarchy) == []
    assert list(hierarchy.post_order()) == []
    assert list(hierarchy.level_order()) == []


def test_mweh_predicates():
    hierarchy = make_mweh()
    root = hierarchy.access_root()
    two = hierarchy.access_son(root, 1)
    six = hierarchy.access_son(two, 0)
    assert hierarchy.is_root(root)
    assert not hierarchy.is_root(two)
    assert hierarchy.is_nth_son(two, 1)
    assert not hierarchy.is_nth_son(two, 0)
    assert not hierarchy.is_nth_son(root, 0)
    assert hierarchy.is_leaf(six)
    assert not hierarchy.is_leaf(two)
    assert hierarchy.has_nth_son(root, 1)
    assert not hierarchy.has_nth_son(root, 2)


def test_mweh_change_son_moves_subtree():
    hierarchy = make_mweh()
    root = hierarchy.access_root()
    one = hierarchy.access_son(root, 0)
    two = hierarchy.access_son(root, 1)
    hierarchy.change_son(one, 3, two)
    assert hierarchy.degree(root) == 1
    assert hierarchy.degree(one) == 4
    assert hierarchy.access_parent(two) is one
    assert hierarchy.node_count() == 7


# ----- k-way explicit hierarchy


def test_kweh_insert():
    assert make_kweh().size() == 6


def test_kweh_access():
    assert KWayExplicitHierarchy(3).access_root() is None

    hierarchy = make_kweh()
    root = hierarchy.access_root()
    assert root.data == 0
    one = hierarchy.access_son(root, 0)
    assert one.data == 1
    assert hierarchy.access_son(root, 1) is None
    two = hierarchy.access_son(root, 2)
    assert two.data == 2
    three = hierarchy.access_son(one, 0)
    assert three.data == 3
    four = hierarchy.access_son(one, 2)
    assert four.data == 4
    five = hierarchy.access_son(two, 1)
    assert five.data == 5
    assert hierarchy.access_son(one, 1) is None
    assert hierarchy.access_son(two, 10) is None

    assert hierarchy.access_parent(one) is root
    assert hierarchy.access_parent(two) is root
    assert hierarchy.access_parent(four) is one
    assert hierarchy.access_parent(five) is two
    assert hierarchy.access_parent(three) is not root
    assert hierarchy.access_parent(four) is not root
    assert hierarchy.access_parent(root) is None


def test_kweh_level_count_degree():
    hierarchy = make_kweh()
    root = hierarchy.access_root()
    one = hierarchy.access_son(root, 0)
    two = hierarchy.access_son(root, 2)
    three = hierarchy.access_son(one, 0)
    four = hierarchy.access_son(one, 2)
    five = hierarchy.access_son(two, 1)

    assert hierarchy.level(root) == 0
    assert hierarchy.level(one) == 1
    assert hierarchy.level(two) == 1
    assert hierarchy.level(three) == 2
    assert hierarchy.level(five) == 2

    assert hierarchy.degree(root) == 2
    assert hierarchy.degree(one) == 2
    assert hierarchy.degree(four) == 0
    assert hierarchy.degree(five) == 0
    assert hierarchy.degree(two) == 1

    assert hierarchy.node_count(root) == 6
    assert hierarchy.node_count(two) == 2
    assert hierarchy.node_count(one) == 3
    assert hierarchy.node_count(three) == 1
    assert hierarchy.node_count(four) == 1

    other = KWayExplicitHierarchy(3)
    hierarchy.change_root(None)
    other.change_root(root)
    assert other.node_count() == 6
    assert hierarchy.is_empty()
    assert hierarchy.node_count() == 0


def test_kweh_remove():
    hierarchy = make_kweh()
    root = hierarchy.access_root()
    one = hierarchy.access_son(root, 0)

    hierarchy.remove_son(root, 2)
    hierarchy.remove_son(one, 0)

    assert hierarchy.size() == 3
    assert hierarchy.degree(root) == 1
    assert hierarchy.degree(one) == 1
    assert hierarchy.access_son(root, 0) is one
    assert hierarchy.access_son(root, 1) is None
    assert hierarchy.access_son(root, 2) is None
    assert hierarchy.access_son(one, 0) is None
    assert hierarchy.access_son(one, 1) is None
    assert hierarchy.access_son(one, 2).data == 4


def test_kweh_copy_assign_equals():
    hierarchy1 = make_kweh()
    root1 = hierarchy1.access_root()
    one1 = hierarchy1.access_son(root1, 0)

    hierarchy2 = KWayExplicitHierarchy(3).assign(hierarchy1)
    assert hierarchy1.equals(hierarchy2)
    hierarchy1.remove_son(root1, 2)
    assert not hierarchy1.equals(hierarchy2)

    hierarchy3 = KWayExplicitHierarchy(3)
    hierarchy3.assign(hierarchy1)
    assert hierarchy1.equals(hierarchy3)
    hierarchy1.remove_son(one1, 0)
    hierarchy1.remove_son(one1, 0)
    assert not hierarchy1.equals(hierarchy3)


def test_kweh_clear():
    hierarchy = make_kweh()
    hierarchy.clear()
    assert hierarchy.size() == 0
    assert hierarchy.access_root() is None
    assert hierarchy.is_empty()


def test_kweh_emplace_into_occupied_slot_raises():
    hierarchy = make_kweh()
    with pytest.raises(StructureError):
        hierarchy.emplace_son(hierarchy.access_root(), 0)


def test_kweh_emplace_out_of_range_raises():
    hierarchy = make_kweh()
    with pytest.raises(IndexError):
        hierarchy.emplace_son(hierarchy.access_root(), 3)


def test_kweh_position_matters_for_equality():
    hierarchy1 = KWayExplicitHierarchy(3)
    hierarchy1.emplace_son(hierarchy1.emplace_root(), 0)
    hierarchy2 = KWayExplicitHierarchy(3)
    hierarchy2.emplace_son(hierarchy2.emplace_root(), 1)
    assert not hierarchy1.equals(hierarchy2)


def test_assign_between_different_arities_raises():
    with pytest.raises(TypeError):
        KWayExplicitHierarchy(2).assign(make_kweh())


def test_kweh_traversal_skips_empty_slots():
    hierarchy = make_kweh()
    assert list(hierarchy) == [0, 1, 3, 4, 2, 5]
    assert [n.data for n in hierarchy.level_order()] == [0, 1, 2, 3, 4, 5]


# ----- binary explicit hierarchy


def make_binary():
    #       4
    #     /   \
    #    2     6
    #   / \     \
    #  1   3     7
    hierarchy = BinaryExplicitHierarchy()
    root = hierarchy.emplace_root()
    root.data = 4
    left = hierarchy.insert_left_son(root)
    left.data = 2
    right = hierarchy.insert_right_son(root)
    right.data = 6
    hierarchy.insert_left_son(left).data = 1
    hierarchy.insert_right_son(left).data = 3
    hierarchy.insert_right_son(right).data = 7
    return hierarchy


def test_binary_in_order():
    hierarchy = make_binary()
    assert list(hierarchy) == [1, 2, 3, 4, 6, 7]
    assert [n.data for n in hierarchy.in_order()] == [1, 2, 3, 4, 6, 7]
    left = hierarchy.access_left_son(hierarchy.access_root())
    assert [n.data for n in hierarchy.in_order(left)] == [1, 2, 3]


def test_binary_son_helpers():
    hierarchy = make_binary()
    root = hierarchy.access_root()
    left = hierarchy.access_left_son(root)
    right = hierarchy.access_right_son(root)
    assert (left.data, right.data) == (2, 6)
    assert hierarchy.is_left_son(left)
    assert not hierarchy.is_right_son(left)
    assert hierarchy.is_right_son(right)
    assert not hierarchy.has_left_son(right)
    assert hierarchy.has_right_son(right)


def test_binary_change_and_remove_sons():
    hierarchy = make_binary()
    root = hierarchy.access_root()
    left = hierarchy.access_left_son(root)
    right = hierarchy.access_right_son(root)

    hierarchy.remove_left_son(root)
    assert hierarchy.access_left_son(root) is None
    assert hierarchy.node_count() == 3

    hierarchy.change_left_son(root, left)
    assert hierarchy.access_parent(left) is root
    assert hierarchy.node_count() == 6

    hierarchy.change_right_son(root, None)
    assert hierarchy.access_parent(right) is None
    assert hierarchy.node_count() == 4

    hierarchy.remove_right_son(left)
    assert list(hierarchy) == [1, 2, 4]


def test_binary_k_is_two():
    hierarchy = BinaryExplicitHierarchy()
    root = hierarchy.emplace_root()
    with pytest.raises(IndexError):
        hierarchy.emplace_son(root, 2)
    assert hierarchy.k == 2