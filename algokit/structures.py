"""Binary trees and singly linked lists."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

__all__ = [
    "TreeNode",
    "ListNode",
    "insert_level_order",
    "inorder",
    "preorder",
    "postorder",
    "add_one_row",
    "build_linked_list",
    "detect_loop",
    "reverse_list",
    "list_values",
]


@dataclass(eq=False)
class TreeNode:
    """A binary tree node."""

    value: int
    left: TreeNode | None = None
    right: TreeNode | None = None


@dataclass(eq=False)
class ListNode:
    """A singly linked list node."""

    value: int
    next: ListNode | None = field(default=None, repr=False)


def insert_level_order(root: TreeNode | None, data: int) -> TreeNode:
    """Insert ``data`` at the first free child position in level order; return the root."""
    if root is None:
        return TreeNode(data)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        if node.left is None:
            node.left = TreeNode(data)
            return root
        queue.append(node.left)
        if node.right is None:
            node.right = TreeNode(data)
            return root
        queue.append(node.right)
    return root


def _inorder(node: TreeNode | None) -> Iterator[int]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.value
        yield from _inorder(node.right)


def _preorder(node: TreeNode | None) -> Iterator[int]:
    if node is not None:
        yield node.value
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _postorder(node: TreeNode | None) -> Iterator[int]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.value


def inorder(root: TreeNode | None) -> list[int]:
    """Values in left, node, right order."""
    return list(_inorder(root))


def preorder(root: TreeNode | None) -> list[int]:
    """Values in node, left, right order."""
    return list(_preorder(root))


def postorder(root: TreeNode | None) -> list[int]:
    """Values in left, right, node order."""
    return list(_postorder(root))


def _add_row(node: TreeNode | None, value: int, depth: int) -> TreeNode | None:
    # depth 1 hangs the subtree on the new node's left, depth 0 on its right.
    if depth in (0, 1):
        fresh = TreeNode(value)
        if depth == 1:
            fresh.left = node
        else:
            fresh.right = node
        return fresh
    if node is not None:
        node.left = _add_row(node.left, value, depth - 1 if depth > 2 else 1)
        node.right = _add_row(node.right, value, depth - 1 if depth > 2 else 0)
    return node


def add_one_row(root: TreeNode | None, value: int, depth: int) -> TreeNode | None:
    """Insert a row of nodes holding ``value`` at ``depth`` (1 is the root level)."""
    if depth < 1:
        raise ValueError("depth must be at least 1")
    return _add_row(root, value, depth)


def build_linked_list(values: Iterable[int], loop_position: int = 0) -> ListNode:
    """Build a list; if ``loop_position`` is positive, link the tail to that 1-based node."""
    nodes = [ListNode(value) for value in values]
    if not nodes:
        raise ValueError("a linked list needs at least one value")
    if not 0 <= loop_position <= len(nodes):
        raise ValueError(f"loop position must be between 0 and {len(nodes)}")
    for node, following in zip(nodes, nodes[1:]):
        node.next = following
    if loop_position:
        nodes[-1].next = nodes[loop_position - 1]
    return nodes[0]


def detect_loop(head: ListNode | None) -> bool:
    """Whether the list starting at ``head`` contains a cycle (tortoise and hare)."""
    fast = slow = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        slow = slow.next
        if fast is slow:
            return True
    return False


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse the list in place and return the new head."""
    previous = None
    current = head
    while current is not None:
        current.next, previous, current = previous, current, current.next
    return previous


def list_values(head: ListNode | None) -> list[int]:
    """Values of the list in order; raises ValueError if the list loops."""
    seen: set[int] = set()
    values = []
    node = head
    while node is not None:
        if id(node) in seen:
            raise ValueError("linked list contains a loop")
        seen.add(id(node))
        values.append(node.value)
        node = node.next
    return values