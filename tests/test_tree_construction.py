import pytest

from algokit.nodes import build_tree, tree_values
from algokit.tree_construction import (
    build_from_inorder_postorder,
    build_from_preorder_inorder,
    sorted_array_to_bst,
)


def _inorder(node):
    if node is None:
        return []
    return _inorder(node.left) + [node.val] + _inorder(node.right)


def _preorder(node):
    if node is None:
        return []
    return [node.val] + _preorder(node.left) + _preorder(node.right)


def _postorder(node):
    if node is None:
        return []
    return _postorder(node.left) + _postorder(node.right) + [node.val]


def _height(node):
    if node is None:
        return 0
    return 1 + max(_height(node.left), _height(node.right))


def _balanced(node):
    if node is None:
        return True
    return abs(_height(node.left) - _height(node.right)) <= 1 and _balanced(node.left) and _balanced(node.right)


SHAPES = [
    [3, 9, 20, None, None, 15, 7],
    [1, 2, 3, 4, 5, 6, 7],
    [1, None, 2, None, 3],
    [4, 2, None, 1],
    [-1],
]


@pytest.mark.parametrize("values", SHAPES)
def test_preorder_inorder_rebuilds_same_shape(values):
    original = build_tree(values)
    rebuilt = build_from_preorder_inorder(_preorder(original), _inorder(original))
    assert tree_values(rebuilt) == values


@pytest.mark.parametrize("values", SHAPES)
def test_inorder_postorder_rebuilds_same_shape(values):
    original = build_tree(values)
    rebuilt = build_from_inorder_postorder(_inorder(original), _postorder(original))
    assert tree_values(rebuilt) == values


def test_worked_example_preorder_inorder():
    root = build_from_preorder_inorder([3, 9, 20, 15, 7], [9, 3, 15, 20, 7])
    assert tree_values(root) == [3, 9, 20, None, None, 15, 7]


def test_worked_example_inorder_postorder():
    root = build_from_inorder_postorder([9, 3, 15, 20, 7], [9, 15, 7, 20, 3])
    assert tree_values(root) == [3, 9, 20, None, None, 15, 7]


def test_empty_inputs():
    assert build_from_preorder_inorder([], []) is None
    assert build_from_inorder_postorder([], []) is None
    assert sorted_array_to_bst([]) is None


@pytest.mark.parametrize("nums", [[0], [1, 3], [-10, -3, 0, 5, 9], list(range(20))])
def test_sorted_array_to_bst(nums):
    root = sorted_array_to_bst(nums)
    assert _inorder(root) == nums
    assert _balanced(root)
    assert root.val == nums[(len(nums) - 1) // 2]