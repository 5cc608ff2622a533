"""Unbalanced binary tree with duplicates, and a balance check."""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["TreeNode", "BinaryTree", "height", "is_balanced"]


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    key: Any
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


class BinaryTree:
    """Binary tree where larger keys go left and the rest go right."""

    def __init__(self) -> None:
        self.root: TreeNode | None = None
        self._size = 0

    def insert(self, key: Any) -> None:
        """Add ``key``; duplicates are kept."""
        node = TreeNode(key)
        self._size += 1
        if self.root is None:
            self.root = node
            return
        current = self.root
        while True:
            if current.key < key:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def __contains__(self, key: object) -> bool:
        return any(value == key for value in self.preorder())

    def __len__(self) -> int:
        return self._size

    def preorder(self) -> Iterator:
        """Keys visited node first, then the left subtree, then the right."""
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            yield node.key
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def clear(self) -> None:
        """Remove every node."""
        self.root = None
        self._size = 0


def height(node: TreeNode | None) -> int:
    """Number of nodes on the longest path down from ``node``."""
    if node is None:
        return 0
    return 1 + max(height(node.left), height(node.right))


def is_balanced(node: TreeNode | None) -> bool:
    """True when, at every node, subtree heights differ by at most one."""
    if node is None:
        return True
    if abs(height(node.left) - height(node.right)) > 1:
        return False
    return is_balanced(node.left) and is_balanced(node.right)