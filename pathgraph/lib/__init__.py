"""Graph core: storage, results, shortest paths and adapters."""

from pathgraph.lib.graph import EdgeTuple, Graph
from pathgraph.lib.result import CapacityExceededError, OpResult, Status

__all__ = [
    "CapacityExceededError",
    "EdgeTuple",
    "Graph",
    "OpResult",
    "Status",
]
