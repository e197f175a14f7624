from __future__ import annotations

from typing import List, Optional, Tuple

from pathgraph.lib.algorithms.base import (
    INFINITY,
    NO_PREDECESSOR,
    Cost,
    DistanceTable,
    PredecessorTable,
    VertexID,
)
from pathgraph.lib.algorithms.path_utils import reconstruct_path
from pathgraph.lib.graph import Graph
from pathgraph.lib.result import CapacityExceededError
from pathgraph.lib.vertex_store import Vertex


def _check_domain(graph: Graph, vertex_id: VertexID) -> None:
    if not graph.config.in_domain(vertex_id):
        raise CapacityExceededError(vertex_id, graph.config.capacity)


def _reached(pred: PredecessorTable, src_node: VertexID, dst_node: VertexID) -> bool:
    return dst_node == src_node or pred[dst_node] != NO_PREDECESSOR


def _select_min(
    vertices: List[Vertex],
    costs: DistanceTable,
    reached: List[bool],
    visited: List[bool],
) -> Optional[Vertex]:
    """
    Return the reached, unvisited vertex with the smallest tentative cost.

    Vertices are scanned in store (ascending id) order and only a strictly
    smaller cost replaces the current candidate, so ties go to the vertex
    seen first.
    """
    best: Optional[Vertex] = None
    best_cost: Cost = 0
    for vertex in vertices:
        if visited[vertex.id] or not reached[vertex.id]:
            continue
        cost = costs[vertex.id]
        if best is None or cost < best_cost:
            best = vertex
            best_cost = cost
    return best


def dijkstra(
    graph: Graph, src_node: VertexID
) -> Tuple[DistanceTable, PredecessorTable]:
    """
    Compute single-source shortest paths with Dijkstra's algorithm.

    Performs one selection round per vertex. Each round picks the unvisited
    vertex with the smallest tentative cost (ties broken by scan order, i.e.
    lowest id first), marks it visited and relaxes its outgoing edges. Edges
    whose weight is zero or unset are ignored, as are edges into visited
    vertices. Parallel edges are relaxed independently, so the cheapest one
    wins.

    Args:
        graph: The graph to search.
        src_node: Source vertex id. A source that is not a vertex of the
            graph reaches nothing but itself.

    Returns:
        A tuple of (costs, pred), both indexed by vertex id and sized to
        ``graph.config.capacity``:
          - costs: Minimal accumulated weight from ``src_node``, or
            ``INFINITY`` for unreached ids. Totals are exact, so a reached id
            may carry a cost at or above ``INFINITY``; use ``pred`` to tell
            reached ids apart.
          - pred: The vertex preceding each id on its shortest path, or
            ``NO_PREDECESSOR`` for the source and unreached ids.

    Raises:
        CapacityExceededError: If ``src_node`` is outside the id domain.
    """
    _check_domain(graph, src_node)

    capacity = graph.config.capacity
    costs: DistanceTable = [INFINITY] * capacity
    pred: PredecessorTable = [NO_PREDECESSOR] * capacity
    reached: List[bool] = [False] * capacity
    visited: List[bool] = [False] * capacity
    costs[src_node] = 0
    reached[src_node] = True

    vertices = list(graph)
    for _ in range(len(vertices)):
        current = _select_min(vertices, costs, reached, visited)
        if current is None:
            # Everything left is unreachable
            break
        visited[current.id] = True
        current_cost = costs[current.id]

        for edge in current.adjacency:
            neighbor_id = edge.target
            if visited[neighbor_id] or not edge.is_connection:
                continue
            new_cost = current_cost + edge.weight
            if not reached[neighbor_id] or new_cost < costs[neighbor_id]:
                costs[neighbor_id] = new_cost
                reached[neighbor_id] = True
                pred[neighbor_id] = current.id

    return costs, pred


def distance_between(graph: Graph, src_node: VertexID, dst_node: VertexID) -> Cost:
    """
    Return the shortest distance from ``src_node`` to ``dst_node``.

    Both "unreachable" and "reachable at zero cost" are reported as 0. Use
    ``shortest_distance`` to tell them apart.

    Raises:
        CapacityExceededError: If either id is outside the id domain.
    """
    _check_domain(graph, dst_node)
    costs, pred = dijkstra(graph, src_node)
    if _reached(pred, src_node, dst_node):
        return costs[dst_node]
    return 0


def shortest_distance(
    graph: Graph, src_node: VertexID, dst_node: VertexID
) -> Optional[Cost]:
    """
    Return the shortest distance, or None if ``dst_node`` is unreachable.

    A vertex reaches itself at distance 0. A source that is not in the graph
    reaches nothing.

    Raises:
        CapacityExceededError: If either id is outside the id domain.
    """
    _check_domain(graph, dst_node)
    if src_node not in graph:
        _check_domain(graph, src_node)
        return None
    costs, pred = dijkstra(graph, src_node)
    if not _reached(pred, src_node, dst_node):
        return None
    return costs[dst_node]


def path_exists(graph: Graph, src_node: VertexID, dst_node: VertexID) -> bool:
    """
    True if ``dst_node`` is reachable from ``src_node`` at a positive distance.

    A vertex is not considered to have a path to itself.
    """
    return distance_between(graph, src_node, dst_node) > 0


def shortest_path(
    graph: Graph, src_node: VertexID, dst_node: VertexID
) -> Tuple[List[VertexID], Optional[Cost]]:
    """
    Return the shortest path and its distance.

    Returns:
        ``(path, cost)`` where ``path`` runs from ``src_node`` to ``dst_node``
        inclusive, or ``([], None)`` if ``dst_node`` is unreachable.
    """
    _check_domain(graph, dst_node)
    if src_node not in graph:
        _check_domain(graph, src_node)
        return [], None
    costs, pred = dijkstra(graph, src_node)
    if not _reached(pred, src_node, dst_node):
        return [], None
    return reconstruct_path(pred, dst_node), costs[dst_node]
