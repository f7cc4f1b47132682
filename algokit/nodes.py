"""Node types for binary trees and linked lists, with list-based builders."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(eq=False)
class TreeNode:
    """A binary tree node. Nodes compare by identity."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


@dataclass(eq=False)
class ListNode:
    """A singly linked list node."""

    val: int = 0
    next: Optional["ListNode"] = None


@dataclass(eq=False)
class NextNode:
    """A binary tree node that also points to its right neighbour on the same level."""

    val: int = 0
    left: Optional["NextNode"] = None
    right: Optional["NextNode"] = None
    next: Optional["NextNode"] = None


def build_tree(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from level-order values, where None marks a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    pending = deque([root])
    while pending:
        parent = pending.popleft()
        for side in ("left", "right"):
            try:
                value = next(items)
            except StopIteration:
                return root
            if value is not None:
                child = TreeNode(value)
                setattr(parent, side, child)
                pending.append(child)
    return root


def tree_values(root: Optional[TreeNode]) -> list[Optional[int]]:
    """Return the level-order values of a tree, None for gaps, trailing gaps removed."""
    result: list[Optional[int]] = []
    pending: deque[Optional[TreeNode]] = deque([root])
    while pending:
        node = pending.popleft()
        if node is None:
            result.append(None)
            continue
        result.append(node.val)
        pending.append(node.left)
        pending.append(node.right)
    while result and result[-1] is None:
        result.pop()
    return result


def build_linked_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding the given values in order."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def linked_list_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of a linked list in order."""
    result = []
    while head is not None:
        result.append(head.val)
        head = head.next
    return result