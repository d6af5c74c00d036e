"""The network of warehouses and their directed connections."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from hanoilog.warehouse import Warehouse


@dataclass
class _Node:
    warehouse: Warehouse
    edges: list[int] = field(default_factory=list)


class Graph:
    """Directed graph of warehouses, numbered from 0 in insertion order."""

    def __init__(self) -> None:
        self._nodes: dict[int, _Node] = {}

    def add_node(self) -> Warehouse:
        """Add a warehouse with the next free id and return it."""
        w_id = len(self._nodes)
        warehouse = Warehouse(w_id)
        self._nodes[w_id] = _Node(warehouse)
        return warehouse

    def add_nodes(self, count: int) -> None:
        """Add ``count`` warehouses."""
        for _ in range(count):
            self.add_node()

    def add_edge(self, node: int, edge: int) -> None:
        """Connect ``node`` to ``edge`` and give ``node`` a section for it."""
        try:
            entry = self._nodes[node]
        except KeyError:
            raise KeyError("warehouse %d does not exist" % node) from None
        entry.edges.insert(0, edge)
        entry.warehouse.add_section(edge)

    def load_adjacency(self, values: Iterable[int]) -> None:
        """Read an n-by-n adjacency matrix in row order, n being the node count.

        Exactly n*n values are consumed; a value of 1 marks a connection.
        """
        it = iter(values)
        count = len(self._nodes)
        for row in range(count):
            for column in range(count):
                try:
                    value = next(it)
                except StopIteration:
                    raise ValueError("adjacency matrix is incomplete") from None
                if int(value) == 1:
                    self.add_edge(row, column)

    def find(self, w_id: int) -> Warehouse:
        """Return the warehouse with this id."""
        try:
            return self._nodes[w_id].warehouse
        except KeyError:
            raise KeyError("warehouse %d does not exist" % w_id) from None

    def edges(self, w_id: int) -> list[int]:
        """Return the neighbours of a warehouse, most recently added first."""
        try:
            return list(self._nodes[w_id].edges)
        except KeyError:
            raise KeyError("warehouse %d does not exist" % w_id) from None

    def __iter__(self) -> Iterator[Warehouse]:
        return (node.warehouse for node in self._nodes.values())

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, w_id: object) -> bool:
        return w_id in self._nodes