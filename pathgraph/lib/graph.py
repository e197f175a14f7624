from __future__ import annotations

from pickle import dumps, loads
from typing import Iterator, List, Optional, Tuple

from pathgraph.config import DEFAULT_CONFIG, GraphConfig
from pathgraph.lib.algorithms.base import UNSET_WEIGHT, VertexID
from pathgraph.lib.result import OpResult
from pathgraph.lib.vertex_store import Vertex, VertexStore
from pathgraph.logging import get_logger

logger = get_logger(__name__)

#: (origin, target, weight)
EdgeTuple = Tuple[VertexID, VertexID, int]


class Graph:
    """
    A directed, weighted multigraph over integer vertex ids.

    The graph enforces:
      - Vertex ids within the configured domain ``[0, config.capacity)``.
      - Idempotent vertex insertion (inserting an existing id is a no-op).
      - No automatic creation of missing vertices when adding an edge.
      - Non-negative edge weights.
      - Cascading vertex removal: every edge that references a removed vertex
        goes with it.

    Parallel edges are allowed and preserved in insertion order. Mutations
    never raise for expected failures; they return an ``OpResult`` describing
    the outcome instead.
    """

    def __init__(self, config: Optional[GraphConfig] = None) -> None:
        """
        Initialize an empty graph.

        Args:
            config: Limits for this graph. Defaults to ``DEFAULT_CONFIG``.
        """
        self.config: GraphConfig = config if config is not None else DEFAULT_CONFIG
        self._store = VertexStore()

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, vertex_id: object) -> bool:
        return vertex_id in self._store

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._store)

    def __repr__(self) -> str:
        return (
            f"Graph(vertices={len(self)}, edges={self.edge_count()}, "
            f"capacity={self.config.capacity})"
        )

    def copy(self) -> Graph:
        """
        Create an independent deep copy of this graph.

        Returns:
            Graph: A new graph with the same config, vertices and edges that
                shares no mutable state with this one.
        """
        return loads(dumps(self))

    #
    # Vertex management
    #
    def insert_vertex(self, vertex_id: VertexID) -> OpResult:
        """
        Add a vertex, keeping ascending id order.

        Args:
            vertex_id: Id of the new vertex.

        Returns:
            OpResult: ``OK`` if created, ``UNCHANGED`` if it already existed,
                ``CAPACITY_EXCEEDED`` if the id is outside the id domain.
        """
        if not self.config.in_domain(vertex_id):
            logger.debug("Rejected vertex %s: outside capacity", vertex_id)
            return OpResult.capacity_exceeded(
                f"Vertex id {vertex_id} is outside the supported domain "
                f"[0, {self.config.capacity})."
            )
        result = self._store.insert(vertex_id)
        if result.changed:
            logger.debug("Inserted vertex %s", vertex_id)
        return result

    def remove_vertex(self, vertex_id: VertexID) -> OpResult:
        """
        Remove a vertex together with its outgoing and incoming edges.

        Args:
            vertex_id: Id of the vertex to remove.

        Returns:
            OpResult: ``OK`` with ``count`` equal to the number of edges
                removed, or ``NOT_FOUND``.
        """
        result = self._store.remove(vertex_id)
        if result.changed:
            logger.debug(
                "Removed vertex %s and %d referencing edges", vertex_id, result.count
            )
        return result

    def find_vertex(self, vertex_id: VertexID) -> Optional[Vertex]:
        """Return the vertex with this id, or None if it does not exist."""
        return self._store.find(vertex_id)

    def vertex_ids(self) -> List[VertexID]:
        """Vertex ids in ascending order."""
        return self._store.ids()

    #
    # Edge management
    #
    def insert_edge(
        self, origin: VertexID, destination: VertexID, weight: int
    ) -> OpResult:
        """
        Append a directed edge from ``origin`` to ``destination``.

        Both vertices must already exist. An existing edge between the same
        pair is not replaced; a parallel edge is added.

        Args:
            origin: Source vertex id.
            destination: Target vertex id.
            weight: Integer weight in ``[0, UNSET_WEIGHT]``.

        Returns:
            OpResult: ``OK`` on success, ``INVALID`` for a weight that is not
                an integer or lies outside ``[0, UNSET_WEIGHT]``,
                ``NOT_FOUND`` if either endpoint is missing.
        """
        if isinstance(weight, bool) or not isinstance(weight, int):
            return OpResult.invalid(f"Weight {weight!r} is not an integer.")
        if weight < 0:
            return OpResult.invalid(f"Negative weight {weight} is not supported.")
        if weight > UNSET_WEIGHT:
            return OpResult.invalid(
                f"Weight {weight} exceeds the 32-bit limit {UNSET_WEIGHT}."
            )

        origin_vertex = self._store.find(origin)
        if origin_vertex is None:
            return OpResult.not_found(f"Origin vertex {origin} does not exist.")
        if self._store.find(destination) is None:
            return OpResult.not_found(
                f"Destination vertex {destination} does not exist."
            )

        origin_vertex.adjacency.append(destination, weight)
        logger.debug("Inserted edge %s -> %s (%s)", origin, destination, weight)
        return OpResult.ok()

    def remove_edge(self, origin: VertexID, destination: VertexID) -> OpResult:
        """
        Remove the first edge from ``origin`` to ``destination``.

        Parallel edges beyond the first are left in place.

        Returns:
            OpResult: ``OK`` with ``count=1``, or ``NOT_FOUND`` if the origin
                or a matching edge is absent.
        """
        origin_vertex = self._store.find(origin)
        if origin_vertex is None:
            return OpResult.not_found(f"Origin vertex {origin} does not exist.")
        if not origin_vertex.adjacency.remove_first_match(destination):
            return OpResult.not_found(f"No edge from {origin} to {destination}.")
        logger.debug("Removed edge %s -> %s", origin, destination)
        return OpResult.ok(count=1)

    def edge_exists(self, origin: VertexID, destination: VertexID) -> bool:
        """
        Check for a real connection from ``origin`` to ``destination``.

        Edge records with a zero or unset weight do not count.

        Returns:
            bool: True if the origin exists and has such an edge.
        """
        origin_vertex = self._store.find(origin)
        if origin_vertex is None:
            return False
        return origin_vertex.adjacency.has_connection_to(destination)

    def edges(self) -> Iterator[EdgeTuple]:
        """Yield every edge record as ``(origin, target, weight)``.

        Origins come in ascending id order, and each origin's edges in
        insertion order.
        """
        for vertex in self._store:
            for edge in vertex.adjacency:
                yield vertex.id, edge.target, edge.weight

    def edge_count(self) -> int:
        """Total number of edge records, parallel and non-real edges included."""
        return sum(len(vertex.adjacency) for vertex in self._store)

    def clear(self) -> None:
        """Release every vertex and edge."""
        released = self._store.clear()
        logger.debug("Cleared graph, released %d edges", released)
