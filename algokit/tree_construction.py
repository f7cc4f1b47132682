"""Building binary trees from traversals and sorted arrays."""

from __future__ import annotations

from typing import Optional, Sequence

from algokit.nodes import TreeNode


def build_from_preorder_inorder(preorder: Sequence[int], inorder: Sequence[int]) -> Optional[TreeNode]:
    """Rebuild a tree of distinct values from its preorder and inorder traversals."""
    positions = {value: index for index, value in enumerate(inorder)}

    def build(pre_start: int, pre_end: int, in_start: int, in_end: int) -> Optional[TreeNode]:
        if pre_start > pre_end or in_start > in_end:
            return None
        root = TreeNode(preorder[pre_start])
        in_root = positions[root.val]
        nums_left = in_root - in_start
        root.left = build(pre_start + 1, pre_start + nums_left, in_start, in_root - 1)
        root.right = build(pre_start + nums_left + 1, pre_end, in_root + 1, in_end)
        return root

    return build(0, len(preorder) - 1, 0, len(inorder) - 1)


def build_from_inorder_postorder(inorder: Sequence[int], postorder: Sequence[int]) -> Optional[TreeNode]:
    """Rebuild a tree of distinct values from its inorder and postorder traversals."""
    positions = {value: index for index, value in enumerate(inorder)}

    def build(lo: int, hi: int, last: int) -> Optional[TreeNode]:
        if lo > hi:
            return None
        if lo == hi:
            return TreeNode(inorder[lo])
        for t in range(last, -1, -1):
            where = positions[postorder[t]]
            if lo <= where <= hi:
                root = TreeNode(postorder[t])
                root.left = build(lo, where - 1, t - 1)
                root.right = build(where + 1, hi, t - 1)
                return root
        return None

    return build(0, len(inorder) - 1, len(inorder) - 1)


def sorted_array_to_bst(nums: Sequence[int]) -> Optional[TreeNode]:
    """Build a height-balanced search tree from ascending values."""

    def build(start: int, end: int) -> Optional[TreeNode]:
        if start > end:
            return None
        mid = (start + end) // 2
        root = TreeNode(nums[mid])
        root.left = build(start, mid - 1)
        root.right = build(mid + 1, end)
        return root

    return build(0, len(nums) - 1)