from leftist.common import EmptyQueueError, Entry, Flip, Ordering
from leftist.queue import MinPriorityQueue, merge
from leftist.tree import LeftistTree, TreeShape, rank

__all__ = [
    "EmptyQueueError",
    "Entry",
    "Flip",
    "LeftistTree",
    "MinPriorityQueue",
    "Ordering",
    "TreeShape",
    "merge",
    "rank",
]
