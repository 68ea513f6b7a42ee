"""Trees: abstract data types backed by explicit hierarchies."""

from __future__ import annotations

from abc import abstractmethod
from typing import Any, Iterator

from libdstruct.adt import AbstractDataType
from libdstruct.hierarchy import (
    BinaryExplicitHierarchy,
    Hierarchy,
    HierarchyNode,
    KWayExplicitHierarchy,
    MultiWayExplicitHierarchy,
)


class GeneralTree(AbstractDataType, family=True):
    """A tree whose nodes are kept in a hierarchy."""

    def __init__(self) -> None:
        self._hierarchy: Hierarchy = self._make_hierarchy()

    @abstractmethod
    def _make_hierarchy(self) -> Hierarchy:
        """Create the empty hierarchy that holds the nodes."""

    def _empty_like(self) -> "GeneralTree":
        return type(self)()

    def _assign_from(self, other: "GeneralTree") -> None:
        self._hierarchy.assign(other._hierarchy)

    def _equals(self, other: "GeneralTree") -> bool:
        return self._hierarchy.equals(other._hierarchy)

    def clear(self) -> None:
        self._hierarchy.clear()

    def size(self) -> int:
        return self._hierarchy.size()

    def degree(self, node: HierarchyNode) -> int:
        return self._hierarchy.degree(node)

    def node_count(self, node: HierarchyNode | None = None) -> int:
        """Number of nodes below ``node``, or in the whole tree when it is None."""
        return self._hierarchy.node_count(node)

    def access_root(self) -> HierarchyNode | None:
        return self._hierarchy.access_root()

    def access_parent(self, node: HierarchyNode) -> HierarchyNode | None:
        return self._hierarchy.access_parent(node)

    def access_son(self, node: HierarchyNode, son_order: int) -> HierarchyNode:
        son = self._hierarchy.access_son(node, son_order)
        if son is None:
            raise IndexError("No such son!")
        return son

    def insert_root(self) -> HierarchyNode:
        return self._hierarchy.emplace_root()

    def change_root(self, new_root: HierarchyNode | None) -> None:
        self._hierarchy.change_root(new_root)

    def emplace_son(self, parent: HierarchyNode, son_order: int) -> HierarchyNode:
        return self._hierarchy.emplace_son(parent, son_order)

    def change_son(
        self, parent: HierarchyNode, son_order: int, new_son: HierarchyNode | None
    ) -> None:
        self._hierarchy.change_son(parent, son_order, new_son)

    def remove_son(self, parent: HierarchyNode, son_order: int) -> None:
        self._hierarchy.remove_son(parent, son_order)

    def is_root(self, node: HierarchyNode) -> bool:
        return self._hierarchy.is_root(node)

    def is_nth_son(self, node: HierarchyNode, son_order: int) -> bool:
        return self._hierarchy.is_nth_son(node, son_order)

    def is_leaf(self, node: HierarchyNode) -> bool:
        return self._hierarchy.is_leaf(node)

    def has_nth_son(self, node: HierarchyNode, son_order: int) -> bool:
        return self._hierarchy.has_nth_son(node, son_order)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._hierarchy)

    def copy(self) -> "GeneralTree":
        """Return a new tree of the same kind with a deep copy of the nodes."""
        return self._empty_like().assign(self)


class MultiwayTree(GeneralTree):
    """A tree whose nodes may have any number of sons."""

    def _make_hierarchy(self) -> Hierarchy:
        return MultiWayExplicitHierarchy()


class ExplicitKWayTree(GeneralTree):
    """A tree whose nodes have ``k`` son slots."""

    def __init__(self, k: int) -> None:
        self._k = k
        super().__init__()

    @property
    def k(self) -> int:
        return self._k

    def _make_hierarchy(self) -> Hierarchy:
        return KWayExplicitHierarchy(self._k)

    def _empty_like(self) -> "ExplicitKWayTree":
        return type(self)(self._k)


class ExplicitBinaryTree(GeneralTree):
    """A tree whose nodes have a left and a right son slot."""

    def _make_hierarchy(self) -> Hierarchy:
        return BinaryExplicitHierarchy()