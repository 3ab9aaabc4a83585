"""Directed graphs whose nodes each hold a value."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Generic, Iterator, Optional, TextIO, TypeVar

T = TypeVar("T")
R = TypeVar("R")

ENTRY_ID = 0


class InvalidNodeError(LookupError):
    """Raised when a node id does not refer to a node of the graph."""

    def __init__(self, node_id: int) -> None:
        super().__init__(f"invalid node id: {node_id}")
        self.node_id = node_id


@dataclass
class Node(Generic[T]):
    """A node of a graph: its value plus the ids on its incoming and outgoing edges."""

    val: T
    entry: list[int] = field(default_factory=list)
    exit: list[int] = field(default_factory=list)


class Graph(Generic[T]):
    """Directed graph where each node holds a value; node 0 is the entry node."""

    def __init__(self, entry: T) -> None:
        self._nodes: list[Node[T]] = [Node(entry)]

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node[T]]:
        return iter(self._nodes)

    def _valid(self, node_id: int) -> bool:
        return 0 <= node_id < len(self._nodes)

    def entry_id(self) -> int:
        """Id of the entry node, valid for every graph."""
        return ENTRY_ID

    def entry(self) -> Node[T]:
        """The entry node of the graph."""
        return self._nodes[ENTRY_ID]

    def get(self, node_id: int) -> Optional[Node[T]]:
        """The node with the given id, or None if there is none."""
        if not self._valid(node_id):
            return None
        return self._nodes[node_id]

    def update(self, changes: Callable[[SafeGraph[T]], R]) -> R:
        """Apply ``changes`` to a checked view of this graph and return its result."""
        return changes(SafeGraph(self))

    def add(self, val: T) -> int:
        """Add a node holding ``val`` and return its id."""
        self._nodes.append(Node(val))
        return len(self._nodes) - 1

    def create_edge(self, start: int, end: int) -> None:
        """Add an edge from ``start`` to ``end``.

        Raises InvalidNodeError naming ``start`` if it is invalid, else ``end``.
        """
        if not self._valid(start):
            raise InvalidNodeError(start)
        if not self._valid(end):
            raise InvalidNodeError(end)
        self._nodes[start].exit.append(end)
        self._nodes[end].entry.append(start)

    def postorder(self) -> list[int]:
        """Ids of the nodes reachable from the entry, in depth-first postorder."""
        order: list[int] = []
        visited = {ENTRY_ID}
        stack: list[tuple[int, Iterator[int]]] = [
            (ENTRY_ID, iter(self._nodes[ENTRY_ID].exit))
        ]
        while stack:
            current, successors = stack[-1]
            for succ in successors:
                if succ not in visited:
                    visited.add(succ)
                    stack.append((succ, iter(self._nodes[succ].exit)))
                    break
            else:
                stack.pop()
                order.append(current)
        return order

    def find(self, value: T) -> Optional[int]:
        """Id of the first node holding ``value``, or None."""
        return next(
            (i for i, node in enumerate(self._nodes) if node.val == value), None
        )

    def find_or_insert(self, value: T) -> int:
        """Id of the first node holding ``value``, adding one if there is none."""
        found = self.find(value)
        return self.add(value) if found is None else found

    def breadth_first(self) -> Iterator[Node[T]]:
        """Yield the nodes reachable from the entry in breadth-first order."""
        visited = {ENTRY_ID}
        queue = deque([ENTRY_ID])
        while queue:
            node = self._nodes[queue.popleft()]
            for succ in node.exit:
                if succ not in visited:
                    visited.add(succ)
                    queue.append(succ)
            yield node

    def depth_first(self) -> Iterator[Node[T]]:
        """Yield the nodes reachable from the entry in depth-first order."""
        visited = {ENTRY_ID}
        stack = [ENTRY_ID]
        while stack:
            node = self._nodes[stack.pop()]
            for succ in node.exit:
                if succ not in visited:
                    visited.add(succ)
                    stack.append(succ)
            yield node

    def dot_viz(self, file: TextIO, name: str) -> None:
        """Write the graph to ``file`` in graphviz dot format under ``name``."""
        file.write(f"digraph {name} {{\n")
        for node in self._nodes:
            for succ in node.exit:
                file.write(f"\t{node.val} -> {self._nodes[succ].val};\n")
        file.write("}\n")


class SafeGraph(Generic[T]):
    """Checked editing view over a graph, handed out by :meth:`Graph.update`."""

    def __init__(self, graph: Graph[T]) -> None:
        self._graph = graph

    def _node(self, node_id: int) -> Node[T]:
        node = self._graph.get(node_id)
        if node is None:
            raise InvalidNodeError(node_id)
        return node

    def entry(self) -> int:
        """Id of the entry node."""
        return ENTRY_ID

    def get(self, node_id: int) -> Node[T]:
        """The node with the given id; raises InvalidNodeError if there is none."""
        return self._node(node_id)

    def add(self, val: T) -> int:
        """Add a node holding ``val`` and return its id."""
        return self._graph.add(val)

    def create_edge(self, start: int, end: int) -> None:
        """Add an edge from ``start`` to ``end``."""
        self._graph.create_edge(start, end)

    def safe_index(self, node_id: int) -> Optional[int]:
        """``node_id`` if it names a node of this graph, otherwise None."""
        return node_id if self._graph.get(node_id) is not None else None

    def predecessors(self, node_id: int) -> tuple[int, ...]:
        """Ids of the nodes with an edge into the node."""
        return tuple(self._node(node_id).entry)

    def successors(self, node_id: int) -> tuple[int, ...]:
        """Ids of the nodes the node has an edge to."""
        return tuple(self._node(node_id).exit)