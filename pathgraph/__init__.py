"""pathgraph: weighted directed graphs with shortest-path analysis.

pathgraph keeps a small directed multigraph over integer vertex ids in
memory and answers shortest-path questions over it.

Primary API:
    Graph - vertex/edge storage with cascading deletes
    dijkstra() - single-source distance and predecessor tables
    distance_between(), shortest_distance(), path_exists(), shortest_path()
    build_closure() - all-pairs shortest-distance graph
    load_data(), save_graph() - binary persistence with tabular fallback

Example:
    from pathgraph import Graph, shortest_path

    g = Graph()
    for v in (1, 2, 3):
        g.insert_vertex(v)
    g.insert_edge(1, 2, 1)
    g.insert_edge(2, 3, 2)

    path, cost = shortest_path(g, 1, 3)  # ([1, 2, 3], 3)
"""

from __future__ import annotations

from pathgraph import cli, logging
from pathgraph._version import __version__
from pathgraph.config import DEFAULT_CONFIG, GraphConfig, load_config
from pathgraph.display import render_graph, render_path
from pathgraph.lib.algorithms.base import INFINITY, NO_PREDECESSOR, UNSET_WEIGHT
from pathgraph.lib.algorithms.closure import build_closure
from pathgraph.lib.algorithms.path_utils import reconstruct_path
from pathgraph.lib.algorithms.spf import (
    dijkstra,
    distance_between,
    path_exists,
    shortest_distance,
    shortest_path,
)
from pathgraph.lib.graph import Graph
from pathgraph.lib.io import (
    graph_from_table,
    load_data,
    load_graph,
    load_table,
    save_graph,
)
from pathgraph.lib.nx import from_networkx, to_networkx
from pathgraph.lib.result import CapacityExceededError, OpResult, Status

__all__ = [
    # Version
    "__version__",
    # Model
    "Graph",
    "OpResult",
    "Status",
    "CapacityExceededError",
    # Config
    "GraphConfig",
    "DEFAULT_CONFIG",
    "load_config",
    # Sentinels
    "INFINITY",
    "NO_PREDECESSOR",
    "UNSET_WEIGHT",
    # Paths
    "dijkstra",
    "distance_between",
    "shortest_distance",
    "path_exists",
    "shortest_path",
    "reconstruct_path",
    "build_closure",
    # I/O
    "graph_from_table",
    "load_data",
    "load_graph",
    "load_table",
    "save_graph",
    "render_graph",
    "render_path",
    # Library integrations (NetworkX)
    "from_networkx",
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]
