"""Shared types for the leftist heap package.

Holds the comparison helpers used to order priorities, the entry type the
priority queue stores in its nodes, and the errors raised by the queue.
"""

from __future__ import annotations

from abc import ABCMeta, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, cast, override

__all__ = [
    "Comparable",
    "EmptyQueueError",
    "Entry",
    "Flip",
    "Impossible",
    "Ordering",
    "Sized",
    "compare",
]


class Impossible(Exception):
    """Exception raised when encountering theoretically impossible states."""

    pass


class EmptyQueueError(LookupError):
    """Raised when reading or removing the minimum of an empty queue.

    The queue is left exactly as it was before the failing call.
    """

    def __init__(self, operation: str):
        super().__init__(f"{operation} called on an empty priority queue")
        self.operation = operation


class Sized(metaclass=ABCMeta):
    @abstractmethod
    def size(self) -> int: ...

    def null(self) -> bool:
        return self.size() == 0

    def __bool__(self) -> bool:
        return not self.null()

    def __len__(self) -> int:
        return self.size()


class Ordering(Enum):
    """Result of comparing two priorities."""

    Lt = -1
    Eq = 0
    Gt = 1


class Comparable[T](metaclass=ABCMeta):
    @abstractmethod
    def compare(self, other: T) -> Ordering: ...

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, type(self)):
            return self.compare(cast(T, other)) == Ordering.Eq
        else:
            return False

    def __ne__(self, other: Any) -> bool:
        return not self.__eq__(other)

    def __lt__(self, other: T) -> bool:
        return self.compare(other) == Ordering.Lt

    def __le__(self, other: T) -> bool:
        return not self.__gt__(other)

    def __gt__(self, other: T) -> bool:
        return self.compare(other) == Ordering.Gt

    def __ge__(self, other: T) -> bool:
        return not self.__lt__(other)


@dataclass(frozen=True, eq=False)
class Entry[K, V](Comparable["Entry[K, V]"]):
    """A priority/value pair that compares only on the priority.

    Two entries with equal keys compare equal even when their values differ,
    so values never need to be orderable.
    """

    key: K
    value: V

    @override
    def compare(self, other: Entry[K, V]) -> Ordering:
        return compare(self.key, other.key)


@dataclass(frozen=True, eq=False)
class Flip[T](Comparable["Flip[T]"]):
    """Wraps a priority and reverses its ordering.

    Adding ``Flip(p)`` priorities turns the min-queue into a max-queue.

    Example:
        >>> from leftist.common import Flip, compare
        >>> compare(1, 2)
        <Ordering.Lt: -1>
        >>> compare(Flip(1), Flip(2))
        <Ordering.Gt: 1>
    """

    value: T

    @override
    def compare(self, other: Flip[T]) -> Ordering:
        result = compare(self.value, other.value)
        if result == Ordering.Lt:
            return Ordering.Gt
        elif result == Ordering.Gt:
            return Ordering.Lt
        else:
            return Ordering.Eq


def compare[T](a: T, b: T) -> Ordering:
    """Compare two values and return their ordering relationship.

    Uses the == and < operators, so mixed types such as int and float
    fall back to their reflected comparisons.

    Args:
        a: First value to compare.
        b: Second value to compare.

    Returns:
        Ordering indicating the relationship between a and b.
    """
    if a == b:
        return Ordering.Eq
    elif cast(Any, a) < b:
        return Ordering.Lt
    else:
        return Ordering.Gt
