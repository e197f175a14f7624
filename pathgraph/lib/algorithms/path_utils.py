from __future__ import annotations

from typing import List

from pathgraph.lib.algorithms.base import NO_PREDECESSOR, PredecessorTable, VertexID
from pathgraph.lib.result import CapacityExceededError


def reconstruct_path(pred: PredecessorTable, dst_node: VertexID) -> List[VertexID]:
    """
    Rebuild a source->destination path from a predecessor table.

    Walks predecessor links back from ``dst_node`` until ``NO_PREDECESSOR``
    and returns the visited ids in source-to-destination order.

    Args:
        pred: Predecessor table produced by ``dijkstra``.
        dst_node: Destination vertex id.

    Returns:
        The path as a list of vertex ids. A destination that is the source
        itself, or was never reached, yields ``[dst_node]``; callers decide
        reachability from the distance table. ``NO_PREDECESSOR`` yields ``[]``.

    Raises:
        CapacityExceededError: If ``dst_node`` is not a valid table index.
        ValueError: If the predecessor links form a cycle.
    """
    if dst_node == NO_PREDECESSOR:
        return []
    if not 0 <= dst_node < len(pred):
        raise CapacityExceededError(dst_node, len(pred))

    path: List[VertexID] = []
    current = dst_node
    while current != NO_PREDECESSOR:
        if len(path) >= len(pred):
            raise ValueError(f"Predecessor cycle detected while resolving {dst_node}.")
        path.append(current)
        current = pred[current]

    path.reverse()
    return path
