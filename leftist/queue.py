"""Mergeable min-priority queue on top of leftist trees.

Every update goes through ``merge``: adding merges in a one-node tree, and
removing the minimum merges the two children of the root. Trees are never
modified, so a heap taken from one queue stays valid after that queue
changes.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Tuple, Type, override

from leftist.common import EmptyQueueError, Entry, Impossible, Ordering, Sized, compare
from leftist.tree import LeftistTree

__all__ = ["MinPriorityQueue", "merge"]

_logger = logging.getLogger(__name__)


def merge[T](
    first: Optional[LeftistTree[T]], second: Optional[LeftistTree[T]]
) -> Optional[LeftistTree[T]]:
    """Merge two leftist heaps into one.

    Recurses down the right spine of whichever heap holds the smaller root,
    so the cost is bounded by the two right spines.

    Time Complexity: O(log m + log n) where m, n are sizes of the heaps
    Space Complexity: O(log m + log n) for path copying

    Args:
        first: A heap or None. Its root wins ties.
        second: A heap or None.

    Returns:
        A heap holding the elements of both, or None if both are empty.
    """
    match (first, second):
        case (None, _):
            return second
        case (_, None):
            return first
        case (LeftistTree(), LeftistTree()):
            if compare(first.data, second.data) == Ordering.Gt:
                small, large = second, first
            else:
                small, large = first, second
            return LeftistTree.mk(small.data, small.left, merge(small.right, large))
        case _:
            raise Impossible


class MinPriorityQueue[P, V](Sized):
    """A min-priority queue backed by a leftist heap.

    Elements are stored as ``Entry(priority, value)`` and ordered by
    priority alone. Equal priorities come out in no particular order.
    """

    def __init__(self) -> None:
        self._root: Optional[LeftistTree[Entry[P, V]]] = None
        self._count = 0

    @staticmethod
    def empty(
        _pty: Optional[Type[P]] = None, _vty: Optional[Type[V]] = None
    ) -> MinPriorityQueue[P, V]:
        """Create an empty queue.

        Args:
            _pty: Optional priority type hint (unused).
            _vty: Optional value type hint (unused).
        """
        return MinPriorityQueue()

    @staticmethod
    def mk(pairs: Iterable[Tuple[P, V]]) -> MinPriorityQueue[P, V]:
        """Create a queue from (priority, value) pairs.

        Args:
            pairs: Iterable of (priority, value) pairs to add.

        Returns:
            A queue holding all the given pairs.
        """
        queue: MinPriorityQueue[P, V] = MinPriorityQueue()
        for priority, value in pairs:
            queue.add(priority, value)
        return queue

    merge = staticmethod(merge)

    @property
    def root(self) -> Optional[LeftistTree[Entry[P, V]]]:
        """The current heap, None when the queue is empty."""
        return self._root

    @property
    def count(self) -> int:
        """Number of elements in the queue."""
        return self._count

    @override
    def size(self) -> int:
        return self._count

    def add(self, priority: P, value: V) -> None:
        """Add a value with the given priority.

        Time Complexity: O(log n)

        Args:
            priority: The priority; smaller priorities come out first.
            value: The value to store.
        """
        node = LeftistTree.singleton(Entry(priority, value))
        self._root = merge(self._root, node)
        self._count += 1

    @property
    def minimum_priority(self) -> P:
        """The smallest priority in the queue.

        Raises:
            EmptyQueueError: If the queue is empty.
        """
        return self._peek("minimum_priority").key

    @property
    def minimum_value(self) -> V:
        """The value stored with the smallest priority.

        Raises:
            EmptyQueueError: If the queue is empty.
        """
        return self._peek("minimum_value").value

    def remove_minimum(self) -> V:
        """Remove the element with the smallest priority and return its value.

        Time Complexity: O(log n)

        Returns:
            The value stored with the smallest priority.

        Raises:
            EmptyQueueError: If the queue is empty. The queue is unchanged.
        """
        top = self._top("remove_minimum")
        self._root = merge(top.left, top.right)
        self._count -= 1
        return top.data.value

    def meld(self, other: MinPriorityQueue[P, V]) -> None:
        """Move a copy of another queue's elements into this one.

        The other queue is left as it is and shares its nodes with this one.

        Time Complexity: O(log m + log n)

        Args:
            other: The queue whose elements to add.
        """
        _logger.debug("Melding queue of %d into queue of %d", other.count, self._count)
        self._root = merge(self._root, other._root)
        self._count += other._count

    def _top(self, operation: str) -> LeftistTree[Entry[P, V]]:
        if self._count == 0 or self._root is None:
            _logger.debug("%s on empty queue", operation)
            raise EmptyQueueError(operation)
        return self._root

    def _peek(self, operation: str) -> Entry[P, V]:
        return self._top(operation).data
