"""Hash table with string keys and collision chaining."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

_WORD = 2**64


def encode(key: str) -> int:
    """Sum of the character codes of ``key``, wrapping at 64 bits."""
    return sum(ord(ch) for ch in key) % _WORD


@dataclass
class _Node:
    key: str
    value: Any


class HashTable:
    """Fixed number of slots, each holding a chain of entries."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError(f"hash table size must be positive, got {size}")
        self.size = size
        self._slots: list[list[_Node]] = [[] for _ in range(size)]
        self._count = 0

    def slot(self, key: str) -> int:
        """Index of the slot that holds ``key``."""
        return encode(key) % self.size

    def _find(self, key: str) -> _Node | None:
        return next((node for node in self._slots[self.slot(key)] if node.key == key), None)

    def insert(self, key: str, value: Any) -> bool:
        """Store ``value`` under ``key``; return True if the key was new."""
        node = self._find(key)
        if node is not None:
            node.value = value
            return False
        self._slots[self.slot(key)].insert(0, _Node(key, value))
        self._count += 1
        return True

    def get(self, key: str) -> Any:
        """Value stored under ``key``, or None if absent."""
        node = self._find(key)
        return None if node is None else node.value

    def delete(self, key: str) -> bool:
        """Remove ``key``; return True if it was present."""
        chain = self._slots[self.slot(key)]
        for pos, node in enumerate(chain):
            if node.key == key:
                del chain[pos]
                self._count -= 1
                return True
        return False

    def clear(self) -> None:
        for chain in self._slots:
            chain.clear()
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._find(key) is not None

    def format(self) -> str:
        """One line per slot listing its chain."""
        lines = [
            f"[{i:3d}] " + "".join(f"->({node.key}, {node.value})" for node in chain)
            for i, chain in enumerate(self._slots)
        ]
        return "\n".join(lines) + "\n"