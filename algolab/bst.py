"""Unbalanced binary search tree of integer keys; duplicates go left."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator


@dataclass(eq=False)
class BSTNode:
    """A tree node linked to its parent and children."""

    key: int
    parent: BSTNode | None = field(default=None, repr=False)
    left: BSTNode | None = field(default=None, repr=False)
    right: BSTNode | None = field(default=None, repr=False)


def _minimum(node: BSTNode) -> BSTNode:
    while node.left is not None:
        node = node.left
    return node


class BST:
    """Binary search tree with keys in the left subtree <= node < right subtree."""

    def __init__(self) -> None:
        self.root: BSTNode | None = None
        self._size = 0

    def insert(self, key: int) -> BSTNode:
        """Insert ``key`` and return the new node."""
        parent: BSTNode | None = None
        node = self.root
        go_left = False
        while node is not None:
            parent = node
            go_left = key <= node.key
            node = node.left if go_left else node.right
        new = BSTNode(key, parent)
        if parent is None:
            self.root = new
        elif go_left:
            parent.left = new
        else:
            parent.right = new
        self._size += 1
        return new

    def search(self, key: int) -> BSTNode | None:
        """Node holding ``key``, or None."""
        node = self.root
        while node is not None and node.key != key:
            node = node.left if key < node.key else node.right
        return node

    def delete(self, node: BSTNode) -> None:
        """Remove ``node`` from the tree."""
        if node is None:
            raise ValueError("cannot delete a missing node")
        while node.left is not None and node.right is not None:
            successor = _minimum(node.right)
            node.key = successor.key
            node = successor
        child = node.left if node.left is not None else node.right
        parent = node.parent
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        if child is not None:
            child.parent = parent
        node.parent = node.left = node.right = None
        self._size -= 1

    def clear(self) -> None:
        self.root = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self.root is None

    def height(self) -> int:
        """Height of the tree; -1 when empty, 0 for a single node."""
        height = -1
        level = [self.root] if self.root is not None else []
        while level:
            height += 1
            level = [c for n in level for c in (n.left, n.right) if c is not None]
        return height

    def __iter__(self) -> Iterator[int]:
        """Keys in order."""
        stack: list[BSTNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def format(self) -> str:
        """Parenthesised form ``(key left right)``, empty subtrees as ``()``."""
        out: list[str] = []
        stack: list[BSTNode | str | None] = [self.root]
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                out.append(item)
            elif item is None:
                out.append("()")
            else:
                out.append(f"({item.key} ")
                stack.extend([")", item.right, " ", item.left])
        return "".join(out) + "\n"

    def pretty_format(self) -> str:
        """Sideways drawing: right subtree on top, three spaces per level."""
        lines: list[str] = []
        stack: list[tuple[BSTNode, int]] = []
        node = self.root
        depth = 0
        while stack or node is not None:
            while node is not None:
                stack.append((node, depth))
                node = node.right
                depth += 1
            node, depth = stack.pop()
            lines.append("   " * depth + f"{node.key}\n")
            node = node.left
            depth += 1
        return "".join(lines)