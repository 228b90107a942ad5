"""Binary search trees built from linked nodes, with the usual queries and edits."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """A tree node; in a doubly linked list, ``left`` is the previous node and ``right`` the next."""

    data: Any
    left: Node | None = None
    right: Node | None = None


def insert(root: Node | None, value: Any) -> Node:
    """Insert ``value`` and return the root; equal values go to the right subtree."""
    node = Node(value)
    if root is None:
        return node
    current = root
    while True:
        if value < current.data:
            if current.left is None:
                current.left = node
                return root
            current = current.left
        else:
            if current.right is None:
                current.right = node
                return root
            current = current.right


def build(values: Iterable[Any]) -> Node | None:
    """Build a tree by inserting the values in order."""
    root = None
    for value in values:
        root = insert(root, value)
    return root


def contains(root: Node | None, key: Any) -> bool:
    """Return True if ``key`` is stored in the tree."""
    node = root
    while node is not None:
        if node.data == key:
            return True
        node = node.left if key < node.data else node.right
    return False


def _inorder_nodes(root: Node | None) -> Iterator[Node]:
    stack: list[Node] = []
    current = root
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        yield current
        current = current.right


def preorder(root: Node | None) -> list[Any]:
    """Return the values in node, left, right order."""
    result = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.data)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def inorder(root: Node | None) -> list[Any]:
    """Return the values in left, node, right order, which is ascending."""
    return [node.data for node in _inorder_nodes(root)]


def postorder(root: Node | None) -> list[Any]:
    """Return the values in left, right, node order."""
    result = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.data)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    result.reverse()
    return result


def level_order(root: Node | None) -> list[Any]:
    """Return the values level by level, left to right."""
    result = []
    queue = deque([root] if root is not None else [])
    while queue:
        node = queue.popleft()
        result.append(node.data)
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)
    return result


def minimum(root: Node | None) -> Node | None:
    """Return the node holding the smallest value, or None for an empty tree."""
    node = root
    while node is not None and node.left is not None:
        node = node.left
    return node


def maximum(root: Node | None) -> Node | None:
    """Return the node holding the largest value, or None for an empty tree."""
    node = root
    while node is not None and node.right is not None:
        node = node.right
    return node


def delete(root: Node | None, key: Any) -> Node | None:
    """Remove one occurrence of ``key`` and return the new root.

    A node with two children takes the largest value of its left subtree.
    """
    if root is None:
        return None
    if key < root.data:
        root.left = delete(root.left, key)
    elif key > root.data:
        root.right = delete(root.right, key)
    else:
        if root.left is None:
            return root.right
        if root.right is None:
            return root.left
        replacement = maximum(root.left)
        root.data = replacement.data
        root.left = delete(root.left, replacement.data)
    return root


def find_ceil(root: Node | None, x: Any) -> Any | None:
    """Return the smallest stored value not less than ``x``, or None if there is none."""
    best = None
    node = root
    while node is not None:
        if node.data == x:
            return x
        if node.data > x:
            best = node.data
            node = node.left
        else:
            node = node.right
    return best


def inorder_predecessor(root: Node | None, value: Any) -> Any | None:
    """Return the largest stored value less than ``value``, or None if there is none."""
    best = None
    node = root
    while node is not None:
        if node.data < value:
            best = node.data
            node = node.right
        else:
            node = node.left
    return best


def to_doubly_linked_list(root: Node | None) -> Node | None:
    """Relink the tree in place into a sorted doubly linked list and return its head."""
    head = previous = None
    for node in _inorder_nodes(root):
        node.left = previous
        if previous is None:
            head = node
        else:
            previous.right = node
        previous = node
    if previous is not None:
        previous.right = None
    return head


def sorted_list_to_bst(values: Iterable[Any]) -> Node | None:
    """Build a height-balanced tree from values in ascending order."""
    items: Sequence[Any] = list(values)
    if any(later < earlier for earlier, later in zip(items, items[1:])):
        raise ValueError("values must be in ascending order")

    def build_range(lo: int, hi: int) -> Node | None:
        if lo > hi:
            return None
        mid = (lo + hi) // 2
        return Node(items[mid], build_range(lo, mid - 1), build_range(mid + 1, hi))

    return build_range(0, len(items) - 1)