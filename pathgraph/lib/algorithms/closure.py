from __future__ import annotations

from pathgraph.lib.algorithms.base import NO_PREDECESSOR, UNSET_WEIGHT
from pathgraph.lib.algorithms.spf import dijkstra
from pathgraph.lib.graph import Graph
from pathgraph.logging import get_logger

logger = get_logger(__name__)


def build_closure(graph: Graph) -> Graph:
    """
    Build the all-pairs shortest-distance closure of ``graph``.

    The result has the same vertex ids and config. For every ordered pair of
    distinct vertices ``(u, v)`` it holds exactly one edge whose weight is the
    shortest distance from ``u`` to ``v``, or 0 when ``v`` is unreachable
    from ``u``. A distance too large for a 32-bit weight is logged and its
    pair left without an edge.

    Args:
        graph: The input graph. It is not modified.

    Returns:
        A new, dense closure graph.
    """
    closure = Graph(graph.config)
    vertex_ids = graph.vertex_ids()
    for vertex_id in vertex_ids:
        closure.insert_vertex(vertex_id)

    for src_node in vertex_ids:
        costs, pred = dijkstra(graph, src_node)
        for dst_node in vertex_ids:
            if dst_node == src_node:
                continue
            cost = costs[dst_node] if pred[dst_node] != NO_PREDECESSOR else 0
            if cost >= UNSET_WEIGHT:
                logger.warning(
                    "Closure distance %d from %s to %s exceeds the weight range",
                    cost,
                    src_node,
                    dst_node,
                )
                continue
            closure.insert_edge(src_node, dst_node, cost)

    logger.debug(
        "Built closure over %d vertices with %d edges",
        len(closure),
        closure.edge_count(),
    )
    return closure
