"""Tests for the level-order tree factories."""

import pytest

from dazzledsa import (
    BinaryNode,
    NAryNode,
    binary_tree_from_level_order,
    nary_tree_from_level_order,
)
from dazzledsa.binary_tree import IterativeTraverser as BinaryTraverser
from dazzledsa.nary_tree import IterativeTraverser as NAryTraverser
from dazzledsa.testing import level_values, node_values


class TestBinaryFactory:

    @pytest.mark.parametrize("data,expected", [
        pytest.param(
            [1, 2, 3, 4, 5, None, 6, None, None, 7, 8, 9],
            [[1], [2, 3], [4, 5, 6], [7, 8, 9]],
            id='basic case 1',
        ),
        pytest.param(
            [1, 2, 3, 4, 5, 6, 7, 8, 9, None, None, None, 10, 11, 12],
            [[1], [2, 3], [4, 5, 6, 7], [8, 9, 10, 11, 12]],
            id='basic case 2',
        ),
        pytest.param(
            [1, 2, 3, 4, 5, 6, 7, 8, 9, None, None, None, 10, 11, 12, None, None, 13,
             None, None, None, 14, None, None, 15, 16, None, None, None, 17],
            [[1], [2, 3], [4, 5, 6, 7], [8, 9, 10, 11, 12], [13, 14, 15], [16, 17]],
            id='basic case 3',
        ),
    ])
    def test_from_level_order(self, data, expected):
        root = binary_tree_from_level_order(data)

        assert isinstance(root, BinaryNode)
        assert level_values(BinaryTraverser().level_order(root)) == expected

    @pytest.mark.parametrize("data", [[], [None]])
    def test_empty_input(self, data):
        assert binary_tree_from_level_order(data) is None

    def test_child_sides(self):
        root = binary_tree_from_level_order([1, None, 2, 3])

        assert root.left is None
        assert root.right.value == 2
        assert root.right.left.value == 3
        assert root.right.right is None

    def test_trailing_right_slot_may_be_omitted(self):
        root = binary_tree_from_level_order([1, 2])

        assert root.left.value == 2
        assert root.right is None

    def test_custom_node_factory(self):
        created = []

        def factory(value):
            node = BinaryNode(value * 10)
            created.append(node)
            return node

        root = binary_tree_from_level_order([1, 2, 3], node_factory=factory)

        assert node_values(BinaryTraverser().bfs(root)) == [10, 20, 30]
        assert created[0] is root

    def test_value_without_parent(self):
        with pytest.raises(ValueError, match="index 3"):
            binary_tree_from_level_order([1, None, None, 2])


class TestNAryFactory:

    @pytest.mark.parametrize("data,expected", [
        pytest.param(
            [1, None, 3, 2, 4, None, 5, 6],
            [[1], [3, 2, 4], [5, 6]],
            id='basic case 1',
        ),
        pytest.param(
            [1, None, 2, 3, 4, 5, None, None, 6, 7, None, 8, None, 9, 10, None, None,
             11, None, 12, None, 13, None, None, 14],
            [[1], [2, 3, 4, 5], [6, 7, 8, 9, 10], [11, 12, 13], [14]],
            id='basic case 2',
        ),
    ])
    def test_from_level_order(self, data, expected):
        root = nary_tree_from_level_order(data)

        assert isinstance(root, NAryNode)
        assert level_values(NAryTraverser().level_order(root)) == expected

    @pytest.mark.parametrize("data", [[], [None]])
    def test_empty_input(self, data):
        assert nary_tree_from_level_order(data) is None

    def test_children_groups(self):
        #   1
        #  / \
        # 2   3
        #     |
        #     4
        root = nary_tree_from_level_order([1, None, 2, 3, None, None, 4])

        assert node_values(root.children) == [2, 3]
        assert root.children[0].is_leaf()
        assert node_values(root.children[1].children) == [4]

    def test_root_only(self):
        root = nary_tree_from_level_order([7])

        assert root.value == 7
        assert root.children == []

    def test_custom_node_factory(self):
        root = nary_tree_from_level_order(
            [1, None, 2, 3],
            node_factory=lambda value: NAryNode(str(value)),
        )

        assert node_values(NAryTraverser().pre_order(root)) == ['1', '2', '3']

    @pytest.mark.parametrize("data", [[1, 5], [1, 5, None, 2]])
    def test_root_must_be_closed_by_none(self, data):
        # A value right after the root would otherwise be dropped
        with pytest.raises(ValueError, match="index 1"):
            nary_tree_from_level_order(data)

    def test_value_without_parent(self):
        with pytest.raises(ValueError, match="index 5"):
            nary_tree_from_level_order([1, None, 2, None, None, 3])
