"""Shared graph fixtures.

Each fixture returns a freshly built ``Graph`` so tests may mutate it.
"""

from __future__ import annotations

import pytest

from pathgraph.config import GraphConfig
from pathgraph.lib.algorithms.base import UNSET_WEIGHT
from pathgraph.lib.graph import Graph


def build_graph(vertices, edges, config=None) -> Graph:
    g = Graph(config)
    for v in vertices:
        assert g.insert_vertex(v)
    for origin, target, weight in edges:
        assert g.insert_edge(origin, target, weight)
    return g


@pytest.fixture
def chain4():
    # Weights:
    #      [1]      [2]
    #  1───────►2───────►3      4
    #  │                 ▲
    #  └────────[5]──────┘
    #
    # Vertex 4 is isolated.
    return build_graph(
        [1, 2, 3, 4],
        [(1, 2, 1), (2, 3, 2), (1, 3, 5)],
    )


@pytest.fixture
def parallel1():
    # Parallel edges between the same pair:
    #      [7, 3, 4]       [1]
    #  1══════════►2──────────►3
    #
    return build_graph(
        [1, 2, 3],
        [(1, 2, 7), (1, 2, 3), (1, 2, 4), (2, 3, 1)],
    )


@pytest.fixture
def square1():
    # Equal-cost alternatives from 1 to 3:
    #       [1]        [1]
    #   ┌────────►2─────────┐
    #   │                   │
    #   │                   ▼
    #   1                   3
    #   │                   ▲
    #   │   [1]        [1]  │
    #   └────────►4─────────┘
    #
    return build_graph(
        [1, 2, 3, 4],
        [(1, 2, 1), (2, 3, 1), (1, 4, 1), (4, 3, 1)],
    )


@pytest.fixture
def placeholders1():
    # Edges that exist as records but are not real connections:
    #   1 ──[0]──► 2 ──[1]──► 3
    #   1 ──[UNSET]──► 3
    #   1 ──[9]──► 3
    #
    return build_graph(
        [1, 2, 3],
        [(1, 2, 0), (2, 3, 1), (1, 3, UNSET_WEIGHT), (1, 3, 9)],
    )


@pytest.fixture
def mesh5():
    # Fully meshed 0..4 with weight |u - v| * 2 + 1, plus a shortcut 0->4 of 2.
    vertices = list(range(5))
    edges = [
        (u, v, abs(u - v) * 2 + 1) for u in vertices for v in vertices if u != v
    ]
    edges.append((0, 4, 2))
    return build_graph(vertices, edges)


@pytest.fixture
def big_config():
    return GraphConfig(capacity=64)


@pytest.fixture
def make_graph():
    """Factory fixture: ``make_graph(vertices, edges, config=None)``."""
    return build_graph
