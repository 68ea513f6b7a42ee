"""Measurement of how long an operation takes as a structure grows."""

from __future__ import annotations

import copy
import time
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Callable, Iterator, Optional

_SEPARATOR = ";"

Hook = Optional[Callable[[Any], None]]


def _call_hook(hook: Hook, structure: Any) -> None:
    if hook is not None:
        hook(structure)


class Analyzer(ABC):
    """An analyzer with a name."""

    def __init__(self, name: str) -> None:
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @abstractmethod
    def analyze(self) -> None:
        """Run the analysis."""

    @abstractmethod
    def set_output_directory(self, path: str | Path) -> None:
        """Set the directory the results are written to."""

    @abstractmethod
    def set_replication_count(self, count: int) -> None:
        """Set how many times the whole measurement is repeated."""

    @abstractmethod
    def set_step_size(self, size: int) -> None:
        """Set by how much the structure grows between measurements."""

    @abstractmethod
    def set_step_count(self, count: int) -> None:
        """Set how many measurements are taken in one replication."""


class CompositeAnalyzer(Analyzer):
    """A container of analyzers that forwards every call to them."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self._analyzers: list[Analyzer] = []

    def _broadcast(self, method: str, *args: Any) -> None:
        for analyzer in self._analyzers:
            getattr(analyzer, method)(*args)

    def analyze(self) -> None:
        self._broadcast("analyze")

    def set_output_directory(self, path: str | Path) -> None:
        self._broadcast("set_output_directory", path)

    def set_replication_count(self, count: int) -> None:
        self._broadcast("set_replication_count", count)

    def set_step_size(self, size: int) -> None:
        self._broadcast("set_step_size", size)

    def set_step_count(self, count: int) -> None:
        self._broadcast("set_step_count", count)

    def add_analyzer(self, analyzer: Analyzer) -> None:
        self._analyzers.append(analyzer)

    def __iter__(self) -> Iterator[Analyzer]:
        return iter(self._analyzers)

    def __len__(self) -> int:
        return len(self._analyzers)


class LeafAnalyzer(Analyzer):
    """An analyzer that measures one thing and writes one CSV file."""

    DEFAULT_REPLICATION_COUNT = 100
    DEFAULT_STEP_SIZE = 10_000
    DEFAULT_STEP_COUNT = 10

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self._output_dir = Path(".")
        self._replication_count = self.DEFAULT_REPLICATION_COUNT
        self._step_size = self.DEFAULT_STEP_SIZE
        self._step_count = self.DEFAULT_STEP_COUNT
        self._was_successful = False

    def set_output_directory(self, path: str | Path) -> None:
        self._output_dir = Path(path)

    def set_replication_count(self, count: int) -> None:
        self._replication_count = count

    def set_step_size(self, size: int) -> None:
        self._step_size = size

    def set_step_count(self, count: int) -> None:
        self._step_count = count

    def output_path(self) -> Path:
        """Absolute path of the CSV file this analyzer writes."""
        return (self._output_dir / f"{self.name}.csv").absolute()

    @property
    def replication_count(self) -> int:
        return self._replication_count

    @property
    def step_size(self) -> int:
        return self._step_size

    @property
    def step_count(self) -> int:
        return self._step_count

    @property
    def was_successful(self) -> bool:
        return self._was_successful

    def _reset_success(self) -> None:
        self._was_successful = False

    def _set_success(self) -> None:
        self._was_successful = True


class ComplexityAnalyzer(LeafAnalyzer):
    """Times one operation on a structure at a series of growing sizes."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self._before_operation: Hook = None
        self._after_operation: Hook = None

    def analyze(self) -> None:
        self._reset_success()
        self.run_replications(self.create_prototype())
        self._set_success()

    @abstractmethod
    def create_prototype(self) -> Any:
        """Return the empty structure every replication starts from."""

    @abstractmethod
    def grow_to_size(self, structure: Any, size: int) -> None:
        """Make ``structure`` hold ``size`` elements."""

    @abstractmethod
    def execute_operation(self, structure: Any) -> None:
        """Execute the measured operation, and nothing else."""

    def run_replications(self, prototype: Any) -> None:
        """Measure every replication and write the results to the CSV file."""
        sizes = [(step + 1) * self.step_size for step in range(self.step_count)]
        results: list[list[int]] = []
        for _ in range(self.replication_count):
            structure = copy.deepcopy(prototype)
            durations: list[int] = []
            for expected_size in sizes:
                self.grow_to_size(structure, expected_size)
                _call_hook(self._before_operation, structure)
                start = time.perf_counter_ns()
                self.execute_operation(structure)
                end = time.perf_counter_ns()
                _call_hook(self._after_operation, structure)
                durations.append(end - start)
            results.append(durations)
        self._save_to_csv(sizes, results)

    def register_before_operation(self, op: Callable[[Any], None]) -> None:
        self._before_operation = op

    def register_after_operation(self, op: Callable[[Any], None]) -> None:
        self._after_operation = op

    def _save_to_csv(self, sizes: list[int], results: list[list[int]]) -> None:
        rows = [sizes, *results]
        lines = [_SEPARATOR.join(map(str, row)) for row in rows if row]
        with self.output_path().open("w", encoding="ascii", newline="") as out:
            out.writelines(f"{line}\n" for line in lines)