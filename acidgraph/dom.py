"""Dominator trees built with the iterative Cooper–Harvey–Kennedy algorithm."""

from __future__ import annotations

from typing import Generic, Optional, TypeVar

from acidgraph.graph import ENTRY_ID, Graph, InvalidNodeError, Node

T = TypeVar("T")


def _intersect(
    node1: int, node2: int, idoms: list[Optional[int]], rpo_index: list[int]
) -> int:
    """Walk two nodes up the dominator tree until they meet."""
    while node1 != node2:
        if rpo_index[node1] > rpo_index[node2]:
            node1 = idoms[node1]
        else:
            node2 = idoms[node2]
    return node1


class DomTree(Generic[T]):
    """Immediate dominators of every node of a graph reachable from its entry."""

    def __init__(self, graph: Graph[T]) -> None:
        self._nodes: list[Node[T]] = list(graph)
        idoms: list[Optional[int]] = [None] * len(self._nodes)
        # The entry of the graph is its own dominator.
        idoms[ENTRY_ID] = ENTRY_ID

        rpo = graph.postorder()
        rpo.reverse()
        rpo_index = [0] * len(self._nodes)
        for position, node_id in enumerate(rpo):
            rpo_index[node_id] = position

        changed = True
        while changed:
            changed = False
            for node_id in rpo[1:]:
                # Every reachable node other than the entry has a predecessor.
                preds = self._nodes[node_id].entry
                new_idom = preds[0]
                for pred in preds[1:]:
                    if idoms[pred] is not None:
                        new_idom = _intersect(pred, new_idom, idoms, rpo_index)
                if idoms[node_id] != new_idom:
                    idoms[node_id] = new_idom
                    changed = True

        self._idoms = idoms

    def _valid(self, node_id: int) -> bool:
        return 0 <= node_id < len(self._nodes)

    def doms(self, node_id: int) -> Optional[list[int]]:
        """The node's dominators, from the node itself up to the entry.

        Returns None if the id names no node. Raises InvalidNodeError if the
        node is not reachable from the entry.
        """
        if not self._valid(node_id):
            return None
        dominators: list[int] = []
        current = node_id
        while True:
            dominators.append(current)
            if current == ENTRY_ID:
                return dominators
            parent = self._idoms[current]
            if parent is None:
                raise InvalidNodeError(current)
            current = parent

    def get(self, node_id: int) -> Optional[Node[T]]:
        """The node with the given id, or None if there is none."""
        if not self._valid(node_id):
            return None
        return self._nodes[node_id]

    def idom(self, node_id: int) -> Optional[int]:
        """Immediate dominator of the node, or None if unknown or the id is invalid."""
        if not self._valid(node_id):
            return None
        return self._idoms[node_id]