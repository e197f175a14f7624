"""Per-vertex ordered edge collection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List

from pathgraph.lib.algorithms.base import VertexID, is_connection


@dataclass(frozen=True)
class Edge:
    """A directed edge as stored by its origin vertex.

    Attributes:
        target: Id of the destination vertex.
        weight: Edge weight. Zero or ``UNSET_WEIGHT`` marks a record that is
            not a real connection.
    """

    target: VertexID
    weight: int

    @property
    def is_connection(self) -> bool:
        return is_connection(self.weight)


class AdjacencyList:
    """
    Ordered sequence of outgoing edges owned by a single vertex.

    Edges are never merged: appending an edge to an already connected target
    adds a parallel edge. Removal by target only drops the first match.
    """

    __slots__ = ("_edges",)

    def __init__(self) -> None:
        self._edges: List[Edge] = []

    def __len__(self) -> int:
        return len(self._edges)

    def __iter__(self) -> Iterator[Edge]:
        return iter(self._edges)

    def __repr__(self) -> str:
        return f"AdjacencyList({self._edges!r})"

    def append(self, target: VertexID, weight: int) -> Edge:
        """Append a new edge at the tail and return it."""
        edge = Edge(target, weight)
        self._edges.append(edge)
        return edge

    def remove_first_match(self, target: VertexID) -> bool:
        """
        Remove the first edge pointing at ``target``.

        Returns:
            True if an edge was removed, False if no edge matched.
        """
        for idx, edge in enumerate(self._edges):
            if edge.target == target:
                del self._edges[idx]
                return True
        return False

    def remove_all_matches(self, target: VertexID) -> int:
        """Remove every edge pointing at ``target``; return how many were removed."""
        kept = [edge for edge in self._edges if edge.target != target]
        removed = len(self._edges) - len(kept)
        self._edges = kept
        return removed

    def remove_all(self) -> int:
        """Release every edge; return how many were removed."""
        removed = len(self._edges)
        self._edges = []
        return removed

    def targets(self) -> List[VertexID]:
        """Targets of all edges in insertion order, duplicates included."""
        return [edge.target for edge in self._edges]

    def has_connection_to(self, target: VertexID) -> bool:
        """True if any edge to ``target`` is a real connection."""
        return any(e.target == target and e.is_connection for e in self._edges)
