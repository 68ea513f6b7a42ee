"""Complexity analyzers of insertion and removal at the front of a list."""

from __future__ import annotations

import random
from collections import deque
from typing import Any, Callable, MutableSequence

from libdstruct.analyzer import ComplexityAnalyzer, CompositeAnalyzer

_SEED = 144


class ListAnalyzer(ComplexityAnalyzer):
    """Common base of list analyzers; grows lists with random data."""

    def __init__(self, name: str, factory: Callable[[], MutableSequence[Any]]) -> None:
        super().__init__(name)
        self._factory = factory
        self._rng_data = random.Random(_SEED)
        self._rng_index = random.Random(_SEED)
        self._index = 0
        self._data = 0
        self.register_before_operation(self._pick_random)

    def _next_data(self) -> int:
        return self._rng_data.getrandbits(31)

    def _pick_random(self, structure: MutableSequence[Any]) -> None:
        self._index = self._rng_index.randrange(len(structure)) if structure else 0
        self._data = self._next_data()

    def create_prototype(self) -> MutableSequence[Any]:
        return self._factory()

    def grow_to_size(self, structure: MutableSequence[Any], size: int) -> None:
        for _ in range(size - len(structure)):
            structure.append(self._next_data())

    @property
    def random_index(self) -> int:
        return self._index

    @property
    def random_data(self) -> int:
        return self._data


class ListInsertAnalyzer(ListAnalyzer):
    """Measures insertion at the beginning of a list."""

    def execute_operation(self, structure: MutableSequence[Any]) -> None:
        structure.insert(0, self.random_data)


class ListRemoveAnalyzer(ListAnalyzer):
    """Measures removal at the beginning of a list."""

    def execute_operation(self, structure: MutableSequence[Any]) -> None:
        del structure[0]


class ListsAnalyzer(CompositeAnalyzer):
    """All list analyzers: array-backed lists against linked deques."""

    def __init__(self) -> None:
        super().__init__("Lists")
        self.add_analyzer(ListInsertAnalyzer("vector-insert", list))
        self.add_analyzer(ListInsertAnalyzer("list-insert", deque))
        self.add_analyzer(ListRemoveAnalyzer("vector-remove", list))
        self.add_analyzer(ListRemoveAnalyzer("list-remove", deque))