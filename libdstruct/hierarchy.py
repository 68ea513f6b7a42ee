"""Explicit hierarchies: rooted trees whose nodes know their parent and sons."""

from __future__ import annotations

from abc import abstractmethod
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Iterator

from libdstruct.adt import AbstractDataType, StructureError


@dataclass(eq=False)
class HierarchyNode:
    """A node of a hierarchy holding its data, its parent and its sons."""

    data: Any = None
    parent: HierarchyNode | None = field(default=None, repr=False)
    sons: list[HierarchyNode | None] = field(default_factory=list, repr=False)


class Hierarchy(AbstractDataType):
    """A rooted tree of nodes addressed by the order of the son in its parent."""

    def __init__(self) -> None:
        self._root: HierarchyNode | None = None

    # ----- structure-specific parts

    @property
    def _arity(self) -> int | None:
        """Fixed number of son slots, or None when it is unbounded."""
        return None

    @abstractmethod
    def _new_node(self, parent: HierarchyNode | None) -> HierarchyNode:
        """Create an empty node attached to ``parent``."""

    @abstractmethod
    def _unlink_son(self, parent: HierarchyNode, son: HierarchyNode) -> None:
        """Remove ``son`` from the son slots of ``parent``."""

    @abstractmethod
    def degree(self, node: HierarchyNode) -> int:
        """Return the number of sons ``node`` has."""

    @abstractmethod
    def access_son(self, node: HierarchyNode, son_order: int) -> HierarchyNode | None:
        """Return the son at ``son_order``, or None if there is none."""

    @abstractmethod
    def emplace_son(self, parent: HierarchyNode, son_order: int) -> HierarchyNode:
        """Create a new son of ``parent`` at ``son_order`` and return it."""

    @abstractmethod
    def change_son(
        self, parent: HierarchyNode, son_order: int, new_son: HierarchyNode | None
    ) -> None:
        """Put ``new_son`` at ``son_order`` of ``parent``."""

    @abstractmethod
    def remove_son(self, parent: HierarchyNode, son_order: int) -> None:
        """Remove the son at ``son_order`` together with its descendants."""

    # ----- common behaviour

    def _detach(self, node: HierarchyNode) -> None:
        if node.parent is not None:
            self._unlink_son(node.parent, node)
            node.parent = None

    @staticmethod
    def _sons_of(node: HierarchyNode) -> Iterator[HierarchyNode]:
        return (son for son in node.sons if son is not None)

    def level(self, node: HierarchyNode) -> int:
        """Return the distance of ``node`` from the root."""
        result = 0
        parent = self.access_parent(node)
        while parent is not None:
            result += 1
            parent = self.access_parent(parent)
        return result

    def node_count(self, node: HierarchyNode | None = None) -> int:
        """Return the number of nodes in the sub-hierarchy of ``node`` (root by default)."""
        return sum(1 for _ in self.pre_order(node))

    def access_root(self) -> HierarchyNode | None:
        return self._root

    def access_parent(self, node: HierarchyNode) -> HierarchyNode | None:
        return node.parent

    def is_root(self, node: HierarchyNode) -> bool:
        return self.access_parent(node) is None

    def is_nth_son(self, node: HierarchyNode, son_order: int) -> bool:
        parent = self.access_parent(node)
        return parent is not None and self.access_son(parent, son_order) is node

    def is_leaf(self, node: HierarchyNode) -> bool:
        return self.degree(node) == 0

    def has_nth_son(self, node: HierarchyNode, son_order: int) -> bool:
        return self.access_son(node, son_order) is not None

    def emplace_root(self) -> HierarchyNode:
        """Replace the whole hierarchy by a single new root and return it."""
        self._root = self._new_node(None)
        return self._root

    def change_root(self, new_root: HierarchyNode | None) -> None:
        """Make ``new_root`` (with its descendants) the root; None empties the hierarchy."""
        if new_root is not None:
            self._detach(new_root)
        self._root = new_root

    def _start(self, node: HierarchyNode | None) -> HierarchyNode | None:
        return self._root if node is None else node

    def pre_order(self, node: HierarchyNode | None = None) -> Iterator[HierarchyNode]:
        """Yield the nodes below ``node`` (root by default), parents before sons."""
        start = self._start(node)
        stack = [start] if start is not None else []
        while stack:
            current = stack.pop()
            yield current
            stack.extend(reversed(list(self._sons_of(current))))

    def post_order(self, node: HierarchyNode | None = None) -> Iterator[HierarchyNode]:
        """Yield the nodes below ``node`` (root by default), sons before parents."""
        start = self._start(node)
        stack: list[tuple[HierarchyNode, bool]] = (
            [(start, False)] if start is not None else []
        )
        while stack:
            current, expanded = stack.pop()
            if expanded:
                yield current
                continue
            stack.append((current, True))
            stack.extend((son, False) for son in reversed(list(self._sons_of(current))))

    def level_order(self, node: HierarchyNode | None = None) -> Iterator[HierarchyNode]:
        """Yield the nodes below ``node`` (root by default) level by level."""
        start = self._start(node)
        queue = deque([start] if start is not None else [])
        while queue:
            current = queue.popleft()
            yield current
            queue.extend(self._sons_of(current))

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self.pre_order())

    def size(self) -> int:
        return self.node_count()

    def clear(self) -> None:
        self._root = None

    def _check_compatible(self, other: AbstractDataType) -> Hierarchy:
        if not isinstance(other, Hierarchy) or other._arity != self._arity:
            raise TypeError(
                f"cannot combine {type(self).__name__} with {type(other).__name__}"
            )
        return other

    def _copy_node(self, source: HierarchyNode, parent: HierarchyNode | None) -> HierarchyNode:
        node = self._new_node(parent)
        node.data = source.data
        node.sons = [
            None if son is None else self._copy_node(son, node) for son in source.sons
        ]
        return node

    def assign(self, other: AbstractDataType) -> Hierarchy:
        if other is not self:
            source = self._check_compatible(other)
            root = source.access_root()
            self._root = None if root is None else self._copy_node(root, None)
        return self

    def equals(self, other: AbstractDataType) -> bool:
        if other is self:
            return True
        source = self._check_compatible(other)
        pairs = [(self._root, source.access_root())]
        while pairs:
            mine, theirs = pairs.pop()
            if mine is None or theirs is None:
                if mine is not theirs:
                    return False
                continue
            if mine.data != theirs.data or len(mine.sons) != len(theirs.sons):
                return False
            pairs.extend(zip(mine.sons, theirs.sons))
        return True


class MultiWayExplicitHierarchy(Hierarchy):
    """A hierarchy whose nodes may have any number of sons, kept contiguous."""

    def _new_node(self, parent: HierarchyNode | None) -> HierarchyNode:
        return HierarchyNode(parent=parent)

    def _unlink_son(self, parent: HierarchyNode, son: HierarchyNode) -> None:
        parent.sons.remove(son)

    def degree(self, node: HierarchyNode) -> int:
        return len(node.sons)

    def access_son(self, node: HierarchyNode, son_order: int) -> HierarchyNode | None:
        if 0 <= son_order < len(node.sons):
            return node.sons[son_order]
        return None

    def emplace_son(self, parent: HierarchyNode, son_order: int) -> HierarchyNode:
        if not 0 <= son_order <= len(parent.sons):
            raise IndexError("Invalid son order!")
        son = self._new_node(parent)
        parent.sons.insert(son_order, son)
        return son

    def change_son(
        self, parent: HierarchyNode, son_order: int, new_son: HierarchyNode | None
    ) -> None:
        if not 0 <= son_order <= len(parent.sons):
            raise IndexError("Invalid son order!")
        if new_son is not None:
            self._detach(new_son)
        if son_order < len(parent.sons):
            parent.sons[son_order].parent = None
            if new_son is None:
                del parent.sons[son_order]
            else:
                parent.sons[son_order] = new_son
        elif new_son is not None:
            parent.sons.append(new_son)
        if new_son is not None:
            new_son.parent = parent

    def remove_son(self, parent: HierarchyNode, son_order: int) -> None:
        if not 0 <= son_order < len(parent.sons):
            raise IndexError("Invalid son order!")
        son = parent.sons.pop(son_order)
        son.parent = None


class KWayExplicitHierarchy(Hierarchy):
    """A hierarchy whose nodes have ``k`` son slots, each possibly empty."""

    def __init__(self, k: int) -> None:
        if k < 1:
            raise StructureError("A k-way hierarchy needs at least one son slot.")
        super().__init__()
        self._k = k

    @property
    def k(self) -> int:
        return self._k

    @property
    def _arity(self) -> int | None:
        return self._k

    def _new_node(self, parent: HierarchyNode | None) -> HierarchyNode:
        return HierarchyNode(parent=parent, sons=[None] * self._k)

    def _unlink_son(self, parent: HierarchyNode, son: HierarchyNode) -> None:
        parent.sons = [None if present is son else present for present in parent.sons]

    def _check_order(self, son_order: int) -> None:
        if not 0 <= son_order < self._k:
            raise IndexError("Invalid son order!")

    def degree(self, node: HierarchyNode) -> int:
        return sum(1 for _ in self._sons_of(node))

    def access_son(self, node: HierarchyNode, son_order: int) -> HierarchyNode | None:
        if 0 <= son_order < self._k:
            return node.sons[son_order]
        return None

    def emplace_son(self, parent: HierarchyNode, son_order: int) -> HierarchyNode:
        self._check_order(son_order)
        if parent.sons[son_order] is not None:
            raise StructureError("Son already exists!")
        son = self._new_node(parent)
        parent.sons[son_order] = son
        return son

    def change_son(
        self, parent: HierarchyNode, son_order: int, new_son: HierarchyNode | None
    ) -> None:
        self._check_order(son_order)
        if new_son is not None:
            self._detach(new_son)
            new_son.parent = parent
        old = parent.sons[son_order]
        if old is not None and old is not new_son:
            old.parent = None
        parent.sons[son_order] = new_son

    def remove_son(self, parent: HierarchyNode, son_order: int) -> None:
        self._check_order(son_order)
        son = parent.sons[son_order]
        if son is not None:
            son.parent = None
            parent.sons[son_order] = None


class BinaryExplicitHierarchy(KWayExplicitHierarchy):
    """A k-way hierarchy with two son slots: left and right."""

    LEFT_SON_INDEX = 0
    RIGHT_SON_INDEX = 1

    def __init__(self) -> None:
        super().__init__(2)

    def access_left_son(self, node: HierarchyNode) -> HierarchyNode | None:
        return self.access_son(node, self.LEFT_SON_INDEX)

    def access_right_son(self, node: HierarchyNode) -> HierarchyNode | None:
        return self.access_son(node, self.RIGHT_SON_INDEX)

    def is_left_son(self, node: HierarchyNode) -> bool:
        return self.is_nth_son(node, self.LEFT_SON_INDEX)

    def is_right_son(self, node: HierarchyNode) -> bool:
        return self.is_nth_son(node, self.RIGHT_SON_INDEX)

    def has_left_son(self, node: HierarchyNode) -> bool:
        return self.has_nth_son(node, self.LEFT_SON_INDEX)

    def has_right_son(self, node: HierarchyNode) -> bool:
        return self.has_nth_son(node, self.RIGHT_SON_INDEX)

    def insert_left_son(self, parent: HierarchyNode) -> HierarchyNode:
        return self.emplace_son(parent, self.LEFT_SON_INDEX)

    def insert_right_son(self, parent: HierarchyNode) -> HierarchyNode:
        return self.emplace_son(parent, self.RIGHT_SON_INDEX)

    def change_left_son(self, parent: HierarchyNode, new_son: HierarchyNode | None) -> None:
        self.change_son(parent, self.LEFT_SON_INDEX, new_son)

    def change_right_son(self, parent: HierarchyNode, new_son: HierarchyNode | None) -> None:
        self.change_son(parent, self.RIGHT_SON_INDEX, new_son)

    def remove_left_son(self, parent: HierarchyNode) -> None:
        self.remove_son(parent, self.LEFT_SON_INDEX)

    def remove_right_son(self, parent: HierarchyNode) -> None:
        self.remove_son(parent, self.RIGHT_SON_INDEX)

    def in_order(self, node: HierarchyNode | None = None) -> Iterator[HierarchyNode]:
        """Yield the nodes below ``node`` (root by default): left, node, right."""
        stack: list[HierarchyNode] = []
        current = self._start(node)
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = self.access_left_son(current)
            current = stack.pop()
            yield current
            current = self.access_right_son(current)

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self.in_order())