"""Ascending, unique-key collection of vertices."""

from __future__ import annotations

from bisect import bisect_left
from typing import Iterator, List, Optional

from pathgraph.lib.adjacency import AdjacencyList
from pathgraph.lib.algorithms.base import VertexID
from pathgraph.lib.result import OpResult


class Vertex:
    """A graph vertex exclusively owning its outgoing edges."""

    __slots__ = ("id", "adjacency")

    def __init__(self, vertex_id: VertexID) -> None:
        self.id = vertex_id
        self.adjacency = AdjacencyList()

    def __repr__(self) -> str:
        return f"Vertex(id={self.id}, edges={len(self.adjacency)})"


class VertexStore:
    """
    Vertices kept in strictly ascending id order.

    The order is maintained on every insertion rather than inherited from the
    insertion sequence, so iteration always yields ascending ids. The store is
    the only owner of its vertices; removing a vertex also removes every edge
    that points at it.
    """

    def __init__(self) -> None:
        # Parallel lists: _ids[i] == _vertices[i].id
        self._ids: List[VertexID] = []
        self._vertices: List[Vertex] = []

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._vertices)

    def __contains__(self, vertex_id: object) -> bool:
        return isinstance(vertex_id, int) and self.find(vertex_id) is not None

    def _position(self, vertex_id: VertexID) -> int:
        return bisect_left(self._ids, vertex_id)

    def ids(self) -> List[VertexID]:
        """Vertex ids in ascending order."""
        return list(self._ids)

    def insert(self, vertex_id: VertexID) -> OpResult:
        """
        Insert a vertex, keeping ascending order.

        Returns:
            ``OK`` when created, ``UNCHANGED`` if the id was already present.
        """
        pos = self._position(vertex_id)
        if pos < len(self._ids) and self._ids[pos] == vertex_id:
            return OpResult.unchanged(f"Vertex {vertex_id} already exists.")
        self._ids.insert(pos, vertex_id)
        self._vertices.insert(pos, Vertex(vertex_id))
        return OpResult.ok()

    def find(self, vertex_id: VertexID) -> Optional[Vertex]:
        """Return the vertex with this id, or None."""
        pos = self._position(vertex_id)
        if pos < len(self._ids) and self._ids[pos] == vertex_id:
            return self._vertices[pos]
        return None

    def remove(self, vertex_id: VertexID) -> OpResult:
        """
        Remove a vertex and every edge that references it.

        Incoming edges are dropped from every vertex (the removed one
        included), then the vertex's own edges, then the vertex itself.

        Returns:
            ``OK`` with ``count`` set to the number of edges removed, or
            ``NOT_FOUND`` if the id is absent.
        """
        pos = self._position(vertex_id)
        if pos >= len(self._ids) or self._ids[pos] != vertex_id:
            return OpResult.not_found(f"Vertex {vertex_id} does not exist.")

        removed = 0
        for vertex in self._vertices:
            removed += vertex.adjacency.remove_all_matches(vertex_id)

        vertex = self._vertices[pos]
        removed += vertex.adjacency.remove_all()
        del self._ids[pos]
        del self._vertices[pos]
        return OpResult.ok(count=removed)

    def clear(self) -> int:
        """Release every vertex and edge; return the number of edges released."""
        removed = 0
        for vertex in self._vertices:
            removed += vertex.adjacency.remove_all()
        self._ids = []
        self._vertices = []
        return removed
