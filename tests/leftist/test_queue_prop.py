"""Property-based tests for MinPriorityQueue using Hypothesis."""

from fractions import Fraction
from math import floor, log2
from typing import Iterator, List, Optional, Tuple

import pytest
from hypothesis import given
from hypothesis import strategies as st

from leftist.common import EmptyQueueError, Entry
from leftist.queue import MinPriorityQueue, merge
from leftist.tree import LeftistTree, rank
from tests.leftist.hypo import configure_hypo

configure_hypo()

type Heap = Optional[LeftistTree[Entry[int, str]]]

entries_strategy = st.lists(
    st.tuples(st.integers(min_value=-100, max_value=100), st.text(max_size=3)),
    min_size=0,
    max_size=50,
)

numbers_strategy = st.one_of(
    st.integers(min_value=-100, max_value=100),
    st.floats(min_value=-100, max_value=100, allow_nan=False),
    st.fractions(min_value=-100, max_value=100, max_denominator=16),
)

# True means add, False means remove
ops_strategy = st.lists(
    st.one_of(st.tuples(st.just(True), st.integers()), st.just((False, 0))),
    max_size=60,
)


def nodes(heap: Heap) -> Iterator[LeftistTree[Entry[int, str]]]:
    stack = [] if heap is None else [heap]
    while stack:
        node = stack.pop()
        yield node
        for child in node.children():
            if child is not None:
                stack.append(child)


def assert_valid(heap: Heap) -> None:
    for node in nodes(heap):
        assert rank(node.right) <= rank(node.left)
        assert node.rank == rank(node.right) + 1
        for child in node.children():
            if child is not None:
                assert node.data.key <= child.data.key


def drain(queue: MinPriorityQueue[int, str]) -> List[int]:
    keys = []
    while queue:
        keys.append(queue.minimum_priority)
        queue.remove_minimum()
    return keys


@given(entries_strategy)
def test_mk_count_and_shape(entries: List[Tuple[int, str]]):
    """A queue built from entries has the right count and a valid heap."""
    queue = MinPriorityQueue.mk(entries)
    assert queue.count == len(entries)
    assert sum(1 for _ in nodes(queue.root)) == len(entries)
    assert_valid(queue.root)


@given(entries_strategy)
def test_spine_bound(entries: List[Tuple[int, str]]):
    """The root rank never exceeds floor(log2(n + 1))."""
    queue = MinPriorityQueue.mk(entries)
    assert rank(queue.root) <= floor(log2(len(entries) + 1))
    for node in nodes(queue.root):
        size = sum(1 for _ in nodes(node))
        assert node.rank <= floor(log2(size + 1))


@given(entries_strategy)
def test_sorted_extraction(entries: List[Tuple[int, str]]):
    """Draining the queue yields priorities in non-decreasing order."""
    queue = MinPriorityQueue.mk(entries)
    assert drain(queue) == sorted(key for key, _ in entries)
    assert queue.count == 0


@given(entries_strategy)
def test_extracted_values_match(entries: List[Tuple[int, str]]):
    """Every value comes out exactly once with its own priority."""
    queue = MinPriorityQueue.mk(entries)
    pairs = []
    while queue:
        key = queue.minimum_priority
        pairs.append((key, queue.remove_minimum()))
    assert sorted(pairs) == sorted(entries)


@given(ops_strategy)
def test_count_invariant(ops: List[Tuple[bool, int]]):
    """Count is adds minus successful removals, and failures change nothing."""
    queue: MinPriorityQueue[int, str] = MinPriorityQueue()
    adds = 0
    removes = 0
    for is_add, priority in ops:
        if is_add:
            queue.add(priority, str(priority))
            adds += 1
        elif queue.count == 0:
            with pytest.raises(EmptyQueueError):
                queue.remove_minimum()
            assert queue.count == 0
            assert queue.root is None
        else:
            queue.remove_minimum()
            removes += 1
        assert queue.count == adds - removes
        assert sum(1 for _ in nodes(queue.root)) == queue.count
        assert_valid(queue.root)


@given(entries_strategy, entries_strategy)
def test_merge_correctness(
    first: List[Tuple[int, str]], second: List[Tuple[int, str]]
):
    """Merged heaps hold both inputs, stay valid, and keep the overall minimum."""
    a = MinPriorityQueue.mk(first).root
    b = MinPriorityQueue.mk(second).root
    merged = merge(a, b)
    assert sum(1 for _ in nodes(merged)) == len(first) + len(second)
    assert_valid(merged)
    keys = [key for key, _ in first + second]
    if keys:
        assert merged is not None
        assert merged.data.key == min(keys)
    else:
        assert merged is None


@given(entries_strategy, entries_strategy)
def test_merge_leaves_inputs(
    first: List[Tuple[int, str]], second: List[Tuple[int, str]]
):
    """Merging does not change the nodes of either input heap."""
    a = MinPriorityQueue.mk(first).root
    b = MinPriorityQueue.mk(second).root
    before = [(n, n.left, n.right, n.rank) for n in nodes(a)] + [
        (n, n.left, n.right, n.rank) for n in nodes(b)
    ]
    _ = merge(a, b)
    _ = merge(b, a)
    after = [(n, n.left, n.right, n.rank) for n in nodes(a)] + [
        (n, n.left, n.right, n.rank) for n in nodes(b)
    ]
    assert before == after


@given(entries_strategy, entries_strategy)
def test_meld_matches_combined(
    first: List[Tuple[int, str]], second: List[Tuple[int, str]]
):
    """Melding two queues drains like one queue built from both inputs."""
    ours = MinPriorityQueue.mk(first)
    theirs = MinPriorityQueue.mk(second)
    ours.meld(theirs)
    assert ours.count == len(first) + len(second)
    assert theirs.count == len(second)
    assert drain(ours) == sorted(key for key, _ in first + second)
    assert drain(theirs) == sorted(key for key, _ in second)


@given(st.lists(numbers_strategy, max_size=50))
def test_sorted_extraction_mixed_numbers(priorities: List[int | float | Fraction]):
    """Mixed int, float and Fraction priorities drain in numeric order."""
    queue: MinPriorityQueue[int | float | Fraction, int] = MinPriorityQueue()
    for index, priority in enumerate(priorities):
        queue.add(priority, index)
    drained = []
    while queue:
        drained.append(queue.minimum_priority)
        queue.remove_minimum()
    assert drained == sorted(priorities)
    assert queue.count == 0


@given(
    st.lists(numbers_strategy, max_size=50), st.lists(numbers_strategy, max_size=50)
)
def test_merge_minimum_mixed_numbers(
    first: List[int | float | Fraction], second: List[int | float | Fraction]
):
    """The merged root holds the smallest priority of either heap."""
    a = MinPriorityQueue.mk((p, str(p)) for p in first)
    b = MinPriorityQueue.mk((p, str(p)) for p in second)
    merged = merge(a.root, b.root)
    if first or second:
        assert merged is not None
        assert merged.data.key == min(first + second)
        for node in nodes(merged):
            for child in node.children():
                if child is not None:
                    assert node.data.key <= child.data.key
    else:
        assert merged is None
