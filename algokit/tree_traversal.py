"""Binary tree traversals and an in-order iterator for search trees."""

from __future__ import annotations

from collections import deque
from typing import Iterator, Optional

from algokit.nodes import NextNode, TreeNode


def level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Return node values level by level, left to right."""
    result: list[list[int]] = []
    if root is None:
        return result
    pending = deque([root])
    while pending:
        level = []
        for _ in range(len(pending)):
            node = pending.popleft()
            if node.left is not None:
                pending.append(node.left)
            if node.right is not None:
                pending.append(node.right)
            level.append(node.val)
        result.append(level)
    return result


def zigzag_level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Return node values level by level, alternating direction starting left to right."""
    result: list[list[int]] = []
    if root is None:
        return result
    pending = deque([root])
    left_to_right = True
    while pending:
        row: deque[int] = deque()
        for _ in range(len(pending)):
            node = pending.popleft()
            if left_to_right:
                row.append(node.val)
            else:
                row.appendleft(node.val)
            if node.left is not None:
                pending.append(node.left)
            if node.right is not None:
                pending.append(node.right)
        left_to_right = not left_to_right
        result.append(list(row))
    return result


def _preorder(node: Optional[TreeNode]) -> Iterator[int]:
    if node is None:
        return
    yield node.val
    yield from _preorder(node.left)
    yield from _preorder(node.right)


def _postorder(node: Optional[TreeNode]) -> Iterator[int]:
    if node is None:
        return
    yield from _postorder(node.left)
    yield from _postorder(node.right)
    yield node.val


def preorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return values in node, left, right order."""
    return list(_preorder(root))


def postorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return values in left, right, node order."""
    return list(_postorder(root))


def right_side_view(root: Optional[TreeNode]) -> list[int]:
    """Return the rightmost value seen on each level, top to bottom."""
    view: list[int] = []

    def visit(node: Optional[TreeNode], level: int) -> None:
        if node is None:
            return
        if level == len(view):
            view.append(node.val)
        visit(node.right, level + 1)
        visit(node.left, level + 1)

    visit(root, 0)
    return view


def connect(root: Optional[NextNode]) -> Optional[NextNode]:
    """Link every node of a perfect binary tree to its right neighbour and return the root."""
    if root is None:
        return None
    if root.left is not None:
        root.left.next = root.right
        if root.next is not None:
            root.right.next = root.next.left
    connect(root.left)
    connect(root.right)
    return root


class BSTIterator:
    """Iterates over a binary search tree in ascending order."""

    def __init__(self, root: Optional[TreeNode]) -> None:
        self._stack: list[TreeNode] = []
        self._push_left(root)

    def _push_left(self, node: Optional[TreeNode]) -> None:
        while node is not None:
            self._stack.append(node)
            node = node.left

    def next(self) -> int:
        """Return the next smallest value; raise IndexError when exhausted."""
        if not self._stack:
            raise IndexError("no more elements")
        node = self._stack.pop()
        self._push_left(node.right)
        return node.val

    def has_next(self) -> bool:
        """Return whether another value remains."""
        return bool(self._stack)

    def __iter__(self) -> "BSTIterator":
        return self

    def __next__(self) -> int:
        if not self._stack:
            raise StopIteration
        return self.next()