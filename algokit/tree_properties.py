"""Queries on binary trees: shape checks, path sums, ancestors and search-tree facts."""

from __future__ import annotations

import math
from dataclasses import dataclass
from itertools import islice
from typing import Iterator, Optional, Sequence

from algokit.nodes import ListNode, TreeNode


def is_symmetric(root: Optional[TreeNode]) -> bool:
    """Return whether the tree is a mirror image of itself."""

    def mirrored(a: Optional[TreeNode], b: Optional[TreeNode]) -> bool:
        if a is None or b is None:
            return a is b
        return a.val == b.val and mirrored(a.left, b.right) and mirrored(a.right, b.left)

    return root is None or mirrored(root.left, root.right)


def max_depth(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(max_depth(root.left), max_depth(root.right))


def _balanced_height(node: Optional[TreeNode]) -> Optional[int]:
    """Height of the subtree, or None if it is not height-balanced."""
    if node is None:
        return 0
    left = _balanced_height(node.left)
    if left is None:
        return None
    right = _balanced_height(node.right)
    if right is None or abs(left - right) > 1:
        return None
    return max(left, right) + 1


def is_balanced(root: Optional[TreeNode]) -> bool:
    """Return whether every node's subtrees differ in height by at most one."""
    return _balanced_height(root) is not None


def max_path_sum(root: Optional[TreeNode]) -> int:
    """Return the largest sum over any non-empty path between two nodes."""
    if root is None:
        raise ValueError("an empty tree has no paths")
    best = -math.inf

    def gain(node: Optional[TreeNode]) -> int:
        nonlocal best
        if node is None:
            return 0
        left = max(0, gain(node.left))
        right = max(0, gain(node.right))
        best = max(best, left + right + node.val)
        return node.val + max(left, right)

    gain(root)
    return int(best)


def is_sub_path(head: Optional[ListNode], root: Optional[TreeNode]) -> bool:
    """Return whether the list's values appear along some downward path of the tree."""

    def matches(item: Optional[ListNode], node: Optional[TreeNode]) -> bool:
        if item is None:
            return True
        if node is None or item.val != node.val:
            return False
        return matches(item.next, node.left) or matches(item.next, node.right)

    if root is None:
        return False
    return matches(head, root) or is_sub_path(head, root.left) or is_sub_path(head, root.right)


@dataclass(frozen=True)
class _SubtreeInfo:
    low: float
    high: float
    total: int
    is_bst: bool


def max_sum_bst(root: Optional[TreeNode]) -> int:
    """Return the largest key sum of any subtree that is a search tree, at least 0."""
    best = 0

    def visit(node: Optional[TreeNode]) -> _SubtreeInfo:
        nonlocal best
        if node is None:
            return _SubtreeInfo(math.inf, -math.inf, 0, True)
        left = visit(node.left)
        right = visit(node.right)
        if left.is_bst and right.is_bst and left.high < node.val < right.low:
            total = node.val + left.total + right.total
            best = max(best, total)
            return _SubtreeInfo(min(node.val, left.low), max(node.val, right.high), total, True)
        return _SubtreeInfo(-math.inf, math.inf, 0, False)

    visit(root)
    return best


def count_nodes(root: Optional[TreeNode]) -> int:
    """Count the nodes of a complete binary tree in less than linear time."""
    if root is None:
        return 0
    left_height = 0
    node = root
    while node is not None:
        left_height += 1
        node = node.left
    right_height = 0
    node = root
    while node is not None:
        right_height += 1
        node = node.right
    if left_height == right_height:
        return (1 << left_height) - 1
    return 1 + count_nodes(root.left) + count_nodes(root.right)


def _inorder(root: Optional[TreeNode]) -> Iterator[int]:
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.val
        node = node.right


def kth_smallest(root: Optional[TreeNode], k: int) -> int:
    """Return the k-th smallest value (1-based) of a search tree."""
    if k < 1:
        raise IndexError("k must be at least 1")
    for value in islice(_inorder(root), k - 1, k):
        return value
    raise IndexError("k exceeds the number of nodes")


def lowest_common_ancestor_bst(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """Return the lowest common ancestor of p and q in a search tree."""
    while root is not None:
        if root.val < p.val and root.val < q.val:
            root = root.right
        elif root.val > p.val and root.val > q.val:
            root = root.left
        else:
            return root
    return None


def lowest_common_ancestor(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """Return the lowest common ancestor of nodes p and q in any binary tree."""
    if root is None or root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is None:
        return right
    if right is None:
        return left
    return root


def evaluate_boolean_tree(root: TreeNode) -> bool:
    """Evaluate a tree whose leaves are 0/1 and whose inner nodes are 2 (OR) or 3 (AND)."""
    if root.val in (0, 1):
        return root.val == 1
    if root.val == 2:
        return evaluate_boolean_tree(root.left) or evaluate_boolean_tree(root.right)
    if root.val == 3:
        return evaluate_boolean_tree(root.left) and evaluate_boolean_tree(root.right)
    return False


def tree_queries(root: Optional[TreeNode], queries: Sequence[int]) -> list[int]:
    """For each queried value, return the tree height after removing that node's subtree.

    Height counts edges; node values must be distinct.
    """
    height_without: dict[int, int] = {}
    current = 0

    def left_to_right(node: Optional[TreeNode], depth: int) -> None:
        nonlocal current
        if node is None:
            return
        height_without[node.val] = current
        current = max(current, depth)
        left_to_right(node.left, depth + 1)
        left_to_right(node.right, depth + 1)

    def right_to_left(node: Optional[TreeNode], depth: int) -> None:
        nonlocal current
        if node is None:
            return
        height_without[node.val] = max(height_without[node.val], current)
        current = max(current, depth)
        right_to_left(node.right, depth + 1)
        right_to_left(node.left, depth + 1)

    left_to_right(root, 0)
    current = 0
    right_to_left(root, 0)
    return [height_without[q] for q in queries]