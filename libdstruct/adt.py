"""Abstract data types and a sequence-backed data structure."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterable


class StructureError(RuntimeError):
    """Raised when a data structure is used in a way it does not allow."""


class AbstractDataType(ABC):
    """Common interface of every abstract data type.

    A subclass declared with ``family=True`` only accepts instances of itself
    (or of its subclasses) in :meth:`assign` and :meth:`equals`.
    """

    _family: type | None = None

    def __init_subclass__(cls, family: bool = False, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if family:
            cls._family = cls

    def _check_compatible(self, other: "AbstractDataType") -> Any:
        family = self._family or AbstractDataType
        if not isinstance(other, family):
            raise TypeError(
                f"cannot combine {type(self).__name__} with {type(other).__name__}"
            )
        return other

    def assign(self, other: "AbstractDataType") -> "AbstractDataType":
        """Make this structure a copy of ``other`` and return it."""
        if other is not self:
            self._assign_from(self._check_compatible(other))
        return self

    def _assign_from(self, other: Any) -> None:
        raise StructureError("Unsupported operation!")

    @abstractmethod
    def clear(self) -> None:
        """Remove every element."""

    @abstractmethod
    def size(self) -> int:
        """Return the number of elements."""

    def is_empty(self) -> bool:
        return self.size() == 0

    def equals(self, other: "AbstractDataType") -> bool:
        """Return whether ``other`` holds the same elements."""
        if other is self:
            return True
        return self._equals(self._check_compatible(other))

    def _equals(self, other: Any) -> bool:
        raise StructureError("Unsupported operation!")

    def __len__(self) -> int:
        return self.size()


class SequenceDataStructure(AbstractDataType, family=True):
    """A data structure whose elements are kept in an ordered sequence."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: list[Any] = list(items)

    def assign(self, other: AbstractDataType) -> "SequenceDataStructure":
        """Copy the elements of ``other`` into this structure and return it."""
        super().assign(other)
        return self

    def _assign_from(self, other: "SequenceDataStructure") -> None:
        self._items = list(other._items)

    def clear(self) -> None:
        self._items.clear()

    def size(self) -> int:
        return len(self._items)

    def equals(self, other: AbstractDataType) -> bool:
        """Return whether ``other`` holds the same elements in the same order."""
        return super().equals(other)

    def _equals(self, other: "SequenceDataStructure") -> bool:
        return self._items == other._items