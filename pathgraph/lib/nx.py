"""NetworkX graph conversion utilities.

Example:
    >>> import networkx as nx
    >>> from pathgraph.lib.nx import from_networkx, to_networkx
    >>>
    >>> G = nx.MultiDiGraph()
    >>> G.add_edge(1, 2, weight=4)
    >>> graph = from_networkx(G)
    >>> G_out = to_networkx(graph)
"""

from __future__ import annotations

from typing import Optional

import networkx as nx

from pathgraph.config import GraphConfig
from pathgraph.lib.graph import Graph
from pathgraph.logging import get_logger

logger = get_logger(__name__)


def to_networkx(graph: Graph, weight: str = "weight") -> nx.MultiDiGraph:
    """
    Convert a graph to a ``networkx.MultiDiGraph``.

    Every edge record becomes one NetworkX edge, so parallel edges and
    edges that are not real connections are kept. Edge keys are the
    position of the edge in its origin's adjacency among edges to the same
    target.

    Args:
        graph: Graph to convert.
        weight: Name of the edge attribute holding the weight.

    Returns:
        A new MultiDiGraph with integer nodes in ascending order.
    """
    G = nx.MultiDiGraph()
    G.add_nodes_from(graph.vertex_ids())
    for origin, target, w in graph.edges():
        G.add_edge(origin, target, **{weight: w})
    return G


def from_networkx(
    G: nx.Graph,
    config: Optional[GraphConfig] = None,
    weight: str = "weight",
    default_weight: int = 1,
) -> Graph:
    """
    Convert a NetworkX graph to a ``Graph``.

    Nodes must be integers. Undirected graphs are converted to directed ones
    first, producing one edge per direction. Edges missing the weight
    attribute get ``default_weight``.

    Args:
        G: Source NetworkX graph (any of Graph, DiGraph, MultiGraph,
            MultiDiGraph).
        config: Config of the new graph.
        weight: Name of the edge attribute holding the weight.
        default_weight: Weight used when the attribute is missing.

    Returns:
        The converted graph.

    Raises:
        TypeError: If a node is not an integer.
        ValueError: If a weight is not integral, or a node or edge is
            rejected by the graph.
    """
    if not G.is_directed():
        G = G.to_directed()

    graph = Graph(config)
    for node in sorted(G.nodes, key=_int_node):
        result = graph.insert_vertex(node)
        if not result:
            raise ValueError(result.message)

    for u, v, data in G.edges(data=True):
        edge_weight = _int_weight(data.get(weight, default_weight))
        result = graph.insert_edge(u, v, edge_weight)
        if not result:
            raise ValueError(result.message)

    logger.debug(
        "Converted NetworkX graph: %d vertices, %d edges",
        len(graph),
        graph.edge_count(),
    )
    return graph


def _int_node(node: object) -> int:
    if isinstance(node, bool) or not isinstance(node, int):
        raise TypeError(f"Node {node!r} is not an integer id.")
    return node


def _int_weight(value: object) -> int:
    # Integral floats such as 3.0 are accepted
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Edge weight {value!r} is not an integer.")
    return value
