"""
clue_store.py
=============
The Clue Store: an unbalanced binary search tree of unique clue texts.

Clues compare with plain string ordering. Python compares str by code
point, which is the same order as comparing their UTF-8 bytes, so the
in-order walk lists clues exactly as a byte-wise sort would.

The tree never rebalances. Its depth is bounded by the number of rooms
in the mansion, which keeps the recursive helpers well inside Python's
recursion limit.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from models import FatalStructureError

logger = logging.getLogger("detective_quest.clue_store")


@dataclass(eq=False)
class ClueNode:
    clue:  str
    left:  Optional["ClueNode"] = field(default=None, repr=False)
    right: Optional["ClueNode"] = field(default=None, repr=False)


# ---------------------------------------------------------------------------
# Structural recursion over ClueNode trees
# ---------------------------------------------------------------------------

def insert(node: Optional[ClueNode], clue: str) -> Optional[ClueNode]:
    """
    Insert `clue` below `node` and return the (possibly new) subtree root.

    Empty clues and exact duplicates leave the tree unchanged.
    """
    if not clue:
        return node
    if node is None:
        try:
            return ClueNode(clue)
        except MemoryError as exc:
            raise FatalStructureError("could not allocate clue node") from exc

    if clue < node.clue:
        node.left = insert(node.left, clue)
    elif clue > node.clue:
        node.right = insert(node.right, clue)
    return node


def enumerate_in_order(node: Optional[ClueNode]) -> Iterator[str]:
    """Yield the clues of the subtree in ascending order."""
    if node is None:
        return
    yield from enumerate_in_order(node.left)
    yield node.clue
    yield from enumerate_in_order(node.right)


def contains(node: Optional[ClueNode], clue: str) -> bool:
    while node is not None:
        if clue == node.clue:
            return True
        node = node.left if clue < node.clue else node.right
    return False


def height(node: Optional[ClueNode]) -> int:
    if node is None:
        return 0
    return 1 + max(height(node.left), height(node.right))


# ---------------------------------------------------------------------------
# Owning wrapper
# ---------------------------------------------------------------------------

class ClueStore:
    """
    Ordered set of collected clues.

    Attributes:
        root: Root ClueNode, or None while the store is empty.
    """

    def __init__(self) -> None:
        self.root: Optional[ClueNode] = None
        self._size = 0

    def insert(self, clue: str) -> bool:
        """
        Add `clue` to the store.

        Returns:
            True if the clue was new, False for "" or a duplicate.
        """
        if not clue or contains(self.root, clue):
            return False
        self.root = insert(self.root, clue)
        self._size += 1
        logger.debug("Clue stored: %r (size=%d, height=%d)", clue, self._size, height(self.root))
        return True

    def in_order(self) -> List[str]:
        """Return every clue in ascending order."""
        return list(enumerate_in_order(self.root))

    def height(self) -> int:
        return height(self.root)

    def clear(self) -> None:
        self.root = None
        self._size = 0

    def __iter__(self) -> Iterator[str]:
        return enumerate_in_order(self.root)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, clue: object) -> bool:
        return isinstance(clue, str) and contains(self.root, clue)

    def __repr__(self) -> str:
        return f"ClueStore(size={self._size})"
