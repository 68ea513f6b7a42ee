"""Explicit networks: nodes listed in a gate, each holding its relations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator

from libdstruct.adt import AbstractDataType, StructureError


@dataclass(eq=False)
class NetworkNode:
    """A node of a network with its data and the nodes it is related to."""

    data: Any = None
    relations: list[NetworkNode] = field(default_factory=list, repr=False)


class ExplicitNetwork(AbstractDataType):
    """An undirected network; every relation is recorded at both of its ends."""

    def __init__(self) -> None:
        self._gate: list[NetworkNode] = []

    def _check_compatible(self, other: AbstractDataType) -> "ExplicitNetwork":
        if not isinstance(other, ExplicitNetwork):
            raise TypeError(
                f"cannot combine {type(self).__name__} with {type(other).__name__}"
            )
        return other

    def _positions(self) -> dict[NetworkNode, int]:
        return {node: position for position, node in enumerate(self._gate)}

    def assign(self, other: AbstractDataType) -> "ExplicitNetwork":
        if other is not self:
            source = self._check_compatible(other)
            copies = {node: NetworkNode(node.data) for node in source._gate}
            for original, duplicate in copies.items():
                duplicate.relations = [copies[related] for related in original.relations]
            self._gate = list(copies.values())
        return self

    def clear(self) -> None:
        for node in self._gate:
            node.relations.clear()
        self._gate.clear()

    def size(self) -> int:
        return len(self._gate)

    def equals(self, other: AbstractDataType) -> bool:
        if other is self:
            return True
        source = self._check_compatible(other)
        if self.size() != source.size():
            return False
        mine = self._positions()
        theirs = source._positions()
        for my_node, their_node in zip(self._gate, source._gate):
            if my_node.data != their_node.data:
                return False
            my_relations = [mine[related] for related in my_node.relations]
            their_relations = [theirs[related] for related in their_node.relations]
            if my_relations != their_relations:
                return False
        return True

    def relation_count(self) -> int:
        """Sum of the relation lists of all nodes; each relation counts at both ends."""
        return sum(len(node.relations) for node in self._gate)

    def degree(self, node: NetworkNode) -> int:
        return len(node.relations)

    def access_node_from_gate(self, order: int) -> NetworkNode:
        if not 0 <= order < len(self._gate):
            raise IndexError("Invalid index!")
        return self._gate[order]

    def access_node_from_node(self, node: NetworkNode, order: int) -> NetworkNode:
        if not 0 <= order < len(node.relations):
            raise IndexError("Invalid index!")
        return node.relations[order]

    def relation_exists(self, node_a: NetworkNode, node_b: NetworkNode) -> bool:
        if self.degree(node_a) <= self.degree(node_b):
            start, target = node_a, node_b
        else:
            start, target = node_b, node_a
        return any(related is target for related in start.relations)

    def insert(self) -> NetworkNode:
        """Add a new unrelated node at the end of the gate and return it."""
        node = NetworkNode()
        self._gate.append(node)
        return node

    def remove(self, node: NetworkNode) -> None:
        """Remove ``node`` and every relation it takes part in."""
        position = next(
            (index for index, present in enumerate(self._gate) if present is node),
            None,
        )
        if position is None:
            raise StructureError("Node is not in the network!")
        while node.relations:
            self.disconnect(node, node.relations[-1])
        del self._gate[position]

    def connect(self, node_a: NetworkNode, node_b: NetworkNode) -> None:
        node_a.relations.append(node_b)
        node_b.relations.append(node_a)

    @staticmethod
    def _unlink(node_from: NetworkNode, node_to: NetworkNode) -> None:
        position = next(
            (
                index
                for index, related in enumerate(node_from.relations)
                if related is node_to
            ),
            None,
        )
        if position is None:
            raise StructureError("Nodes are not connected!")
        del node_from.relations[position]

    def disconnect(self, node_a: NetworkNode, node_b: NetworkNode) -> None:
        if not self.relation_exists(node_a, node_b):
            raise StructureError("Nodes are not connected!")
        self._unlink(node_a, node_b)
        self._unlink(node_b, node_a)

    def __iter__(self) -> Iterator[NetworkNode]:
        return iter(self._gate)