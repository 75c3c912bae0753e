"""Immutable leftist tree nodes.

A leftist tree keeps the rank of every right child no greater than the rank
of its sibling, where the rank of a node is the length of its right spine and
the rank of the empty tree is zero. The right spine of an n-node tree thus
has at most floor(log2(n + 1)) nodes, which bounds the cost of walking it.

Nodes never change after construction, so a subtree may belong to several
heaps at once. The empty tree is ``None``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, Tuple

__all__ = ["LeftistTree", "TreeShape", "rank"]


class TreeShape[T](Protocol):
    """Structure a tree renderer needs to walk a tree."""

    @property
    def data(self) -> T: ...

    def children(self) -> Tuple[Optional[TreeShape[T]], Optional[TreeShape[T]]]: ...

    def is_leaf(self) -> bool: ...


@dataclass(frozen=True, eq=False)
class LeftistTree[T]:
    """A node of a leftist tree.

    Build nodes with ``mk`` or ``singleton``; they arrange the children so the
    leftist property holds and cache the rank. Calling the constructor
    directly with misplaced children or a wrong rank raises ValueError.

    Attributes:
        data: The payload stored in this node.
        left: Left child, the one with the larger or equal rank.
        right: Right child, the one with the smaller or equal rank.
        rank: Length of the right spine starting at this node.
    """

    data: T
    left: Optional[LeftistTree[T]]
    right: Optional[LeftistTree[T]]
    rank: int

    def __post_init__(self) -> None:
        if rank(self.right) > rank(self.left):
            raise ValueError("Right child outranks left child")
        if self.rank != rank(self.right) + 1:
            raise ValueError(f"Rank {self.rank} does not match right spine")

    @staticmethod
    def mk(
        data: T,
        first: Optional[LeftistTree[T]],
        second: Optional[LeftistTree[T]],
    ) -> LeftistTree[T]:
        """Create a node over two leftist trees in either order.

        The subtree with the smaller rank becomes the right child. When the
        ranks are equal ``first`` goes on the right.

        Time Complexity: O(1)

        Args:
            data: The payload for the new node.
            first: A leftist tree or None.
            second: A leftist tree or None.

        Returns:
            A node satisfying the leftist property.
        """
        if rank(second) < rank(first):
            left, right = first, second
        else:
            left, right = second, first
        return LeftistTree(data, left, right, rank(right) + 1)

    @staticmethod
    def singleton(data: T) -> LeftistTree[T]:
        """Create a node with no children."""
        return LeftistTree(data, None, None, 1)

    @staticmethod
    def rank_of(tree: Optional[LeftistTree[T]]) -> int:
        """Alias for rank()."""
        return rank(tree)

    def children(self) -> Tuple[Optional[LeftistTree[T]], Optional[LeftistTree[T]]]:
        return (self.left, self.right)

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def rank[T](tree: Optional[LeftistTree[T]]) -> int:
    """Return the rank of a tree, zero for the empty tree."""
    if tree is None:
        return 0
    else:
        return tree.rank
