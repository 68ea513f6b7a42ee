"""Priority queues; a smaller priority value means a higher priority."""

from __future__ import annotations

import math
from abc import abstractmethod
from bisect import bisect_right
from dataclasses import dataclass
from operator import attrgetter
from typing import Any, Generic, TypeVar

from libdstruct.adt import AbstractDataType, SequenceDataStructure, StructureError

P = TypeVar("P")
T = TypeVar("T")

_priority_of = attrgetter("priority")


@dataclass
class PriorityQueueItem(Generic[P, T]):
    """Data stored together with its priority."""

    priority: P
    data: T


def _ensure_not_empty(queue: AbstractDataType) -> None:
    if queue.is_empty():
        raise IndexError("Queue is empty!")


def _insert_by_priority(items: list[PriorityQueueItem], item: PriorityQueueItem) -> None:
    """Insert keeping ``items`` ordered from the lowest priority to the highest."""
    position = next(
        (index for index, present in enumerate(items) if present.priority <= item.priority),
        len(items),
    )
    items.insert(position, item)


class PriorityQueue(AbstractDataType):
    """A queue that always hands out the element of the highest priority."""

    @abstractmethod
    def push(self, priority: Any, data: Any) -> None:
        """Add ``data`` with the given priority."""

    @abstractmethod
    def peek(self) -> Any:
        """Return the data of the highest priority without removing it."""

    @abstractmethod
    def pop(self) -> Any:
        """Remove and return the data of the highest priority."""

    def equals(self, other: AbstractDataType) -> bool:
        raise StructureError("Unsupported operation!")


class _SequencePriorityQueue(PriorityQueue, SequenceDataStructure):
    """A priority queue whose items live in one sequence."""

    @abstractmethod
    def _highest_priority_index(self) -> int:
        """Position of the item of the highest priority."""

    def _peek(self) -> Any:
        _ensure_not_empty(self)
        return self._items[self._highest_priority_index()].data


class _UnsortedSequencePriorityQueue(_SequencePriorityQueue):
    """Items kept in arrival order; the best one is searched for."""

    def _highest_priority_index(self) -> int:
        items = self._items
        return min(range(len(items)), key=lambda position: items[position].priority)

    def _push(self, priority: Any, data: Any) -> None:
        self._items.append(PriorityQueueItem(priority, data))

    def _pop(self) -> Any:
        _ensure_not_empty(self)
        items = self._items
        best = self._highest_priority_index()
        data = items[best].data
        items[best], items[-1] = items[-1], items[best]
        items.pop()
        return data


class UnsortedImplicitSequencePriorityQueue(_UnsortedSequencePriorityQueue):
    """Unsorted priority queue over an array."""

    def push(self, priority: Any, data: Any) -> None:
        self._push(priority, data)

    def peek(self) -> Any:
        return self._peek()

    def pop(self) -> Any:
        return self._pop()


class UnsortedExplicitSequencePriorityQueue(_UnsortedSequencePriorityQueue):
    """Unsorted priority queue over a linked sequence."""

    def push(self, priority: Any, data: Any) -> None:
        self._push(priority, data)

    def peek(self) -> Any:
        return self._peek()

    def pop(self) -> Any:
        return self._pop()


class _SortedSequencePriorityQueue(_SequencePriorityQueue):
    """Items kept sorted so the best one sits at a known end."""

    def _pop(self) -> Any:
        _ensure_not_empty(self)
        return self._items.pop(self._highest_priority_index()).data


class SortedImplicitSequencePriorityQueue(_SortedSequencePriorityQueue):
    """Sorted array, highest priority at the end so removal is cheap."""

    def push(self, priority: Any, data: Any) -> None:
        _insert_by_priority(self._items, PriorityQueueItem(priority, data))

    def peek(self) -> Any:
        return self._peek()

    def pop(self) -> Any:
        return self._pop()

    def _highest_priority_index(self) -> int:
        return len(self._items) - 1


class SortedExplicitSequencePriorityQueue(_SortedSequencePriorityQueue):
    """Sorted linked sequence, highest priority at the front."""

    def push(self, priority: Any, data: Any) -> None:
        position = bisect_right(self._items, priority, key=_priority_of)
        self._items.insert(position, PriorityQueueItem(priority, data))

    def peek(self) -> Any:
        return self._peek()

    def pop(self) -> Any:
        return self._pop()

    def _highest_priority_index(self) -> int:
        return 0


def _short_capacity(size: int) -> int:
    return max(1, math.ceil(math.sqrt(size)))


class TwoLists(PriorityQueue, family=True):
    """A short sorted list of the best items and a long unsorted list of the rest."""

    def __init__(self, expected_size: int = 0) -> None:
        self._capacity = _short_capacity(expected_size)
        # Sorted from the lowest priority to the highest; best item last.
        self._short: list[PriorityQueueItem] = []
        self._long: list[PriorityQueueItem] = []

    def assign(self, other: AbstractDataType) -> "TwoLists":
        """Make this queue a copy of another ``TwoLists`` and return it."""
        if other is not self:
            source = self._check_compatible(other)
            self._capacity = source._capacity
            self._short = list(source._short)
            self._long = list(source._long)
        return self

    def clear(self) -> None:
        self._short.clear()
        self._long.clear()

    def size(self) -> int:
        return len(self._short) + len(self._long)

    def is_empty(self) -> bool:
        return not self._short

    def push(self, priority: Any, data: Any) -> None:
        item = PriorityQueueItem(priority, data)
        short = self._short
        if not self._long and len(short) < self._capacity:
            _insert_by_priority(short, item)
        elif short and priority < short[0].priority:
            if len(short) >= self._capacity:
                self._long.append(short.pop(0))
            _insert_by_priority(short, item)
        else:
            self._long.append(item)

    def peek(self) -> Any:
        _ensure_not_empty(self)
        return self._short[-1].data

    def pop(self) -> Any:
        _ensure_not_empty(self)
        data = self._short.pop().data
        if not self._short and self._long:
            self._refill()
        return data

    def _refill(self) -> None:
        self._capacity = _short_capacity(len(self._long))
        ranked = sorted(range(len(self._long)), key=lambda i: self._long[i].priority)
        chosen = ranked[: self._capacity]
        self._short.extend(self._long[index] for index in reversed(chosen))
        chosen_set = set(chosen)
        self._long = [
            item for index, item in enumerate(self._long) if index not in chosen_set
        ]


class BinaryHeap(_SequencePriorityQueue):
    """A binary heap kept in an array; the best item is the root."""

    def _highest_priority_index(self) -> int:
        return 0

    def push(self, priority: Any, data: Any) -> None:
        items = self._items
        items.append(PriorityQueueItem(priority, data))
        current = len(items) - 1
        while current > 0:
            parent = (current - 1) // 2
            if not items[current].priority < items[parent].priority:
                break
            items[current], items[parent] = items[parent], items[current]
            current = parent

    def peek(self) -> Any:
        _ensure_not_empty(self)
        return self._items[0].data

    def pop(self) -> Any:
        _ensure_not_empty(self)
        items = self._items
        top = items[0]
        last = items.pop()
        if items:
            items[0] = last
            self._sift_down(0)
        return top.data

    def _sift_down(self, current: int) -> None:
        items = self._items
        count = len(items)
        while True:
            left = 2 * current + 1
            if left >= count:
                return
            best = left
            right = left + 1
            if right < count and items[right].priority < items[left].priority:
                best = right
            if not items[best].priority < items[current].priority:
                return
            items[current], items[best] = items[best], items[current]
            current = best