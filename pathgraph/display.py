"""Plain-text rendering of graphs and shortest paths."""

from __future__ import annotations

from typing import List

from pathgraph.lib.algorithms.base import VertexID
from pathgraph.lib.algorithms.spf import shortest_path
from pathgraph.lib.graph import Graph


def render_graph(graph: Graph) -> str:
    """Render every vertex followed by its real outgoing connections.

    Example output::

        Vertex: 1
            Adj: 2 - (1)
            Adj: 3 - (5)
        Vertex: 2
    """
    lines: List[str] = []
    for vertex in graph:
        lines.append(f"Vertex: {vertex.id}")
        for edge in vertex.adjacency:
            if edge.is_connection:
                lines.append(f"    Adj: {edge.target} - ({edge.weight})")
    return "\n".join(lines)


def render_path(graph: Graph, src_node: VertexID, dst_node: VertexID) -> str:
    """Render the shortest path from ``src_node`` to ``dst_node`` and its distance."""
    path, cost = shortest_path(graph, src_node, dst_node)
    if cost is None:
        return f"No path from {src_node} to {dst_node}"
    hops = " ".join(str(vertex_id) for vertex_id in path)
    return f"Path from {src_node} to {dst_node}: {hops}\nDistance: {cost}"
