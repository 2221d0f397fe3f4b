"""Linked list and binary tree nodes."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class ListNode:
    """Node of a singly linked list; iterating yields data from here on."""

    data: Any
    next: ListNode | None = None

    def __iter__(self) -> Iterator[Any]:
        node: ListNode | None = self
        while node is not None:
            yield node.data
            node = node.next


@dataclass(eq=False)
class DListNode:
    """Node of a doubly linked list; iterating walks forward from here."""

    data: Any
    prev: DListNode | None = field(default=None, repr=False)
    next: DListNode | None = None

    def __iter__(self) -> Iterator[Any]:
        node: DListNode | None = self
        while node is not None:
            yield node.data
            node = node.next


@dataclass(eq=False)
class TreeNode:
    """Node of a binary tree."""

    val: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def level_order(root: TreeNode | None) -> Iterator[Any]:
    """Yield node values breadth first, left child before right."""
    if root is None:
        return
    queue = deque([root])
    while queue:
        node = queue.popleft()
        yield node.val
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)