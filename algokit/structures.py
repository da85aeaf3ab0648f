"""Linked lists and binary trees, with a few walks over them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional[ListNode] = None

    @classmethod
    def from_values(cls, values: Iterable[int]) -> Optional[ListNode]:
        """Build a list holding ``values`` in order; an empty input gives ``None``."""
        head = None
        for value in reversed(list(values)):
            head = cls(value, head)
        return head

    def values(self) -> list[int]:
        """Return the values from this node to the end of the list."""
        result = []
        node: Optional[ListNode] = self
        while node is not None:
            result.append(node.val)
            node = node.next
        return result


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def middle_node(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the middle node of the list, the second one when there are two."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def preorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return the tree's values in root, left, right order."""
    result = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """Tell whether two trees have the same shape and values."""
    pending = [(p, q)]
    while pending:
        first, second = pending.pop()
        if first is None and second is None:
            continue
        if first is None or second is None or first.val != second.val:
            return False
        pending.append((first.left, second.left))
        pending.append((first.right, second.right))
    return True