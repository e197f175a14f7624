import pytest

from pathgraph.lib.algorithms.base import NO_PREDECESSOR
from pathgraph.lib.algorithms.path_utils import reconstruct_path
from pathgraph.lib.algorithms.spf import dijkstra
from pathgraph.lib.result import CapacityExceededError

N = NO_PREDECESSOR


def test_reconstruct_path_basic():
    #        0  1  2  3  4
    pred = [N, N, 1, 2, N]
    assert reconstruct_path(pred, 3) == [1, 2, 3]


def test_reconstruct_path_source_and_unreached():
    pred = [N, N, 1, N]
    assert reconstruct_path(pred, 1) == [1]
    assert reconstruct_path(pred, 3) == [3]


def test_reconstruct_path_no_predecessor():
    assert reconstruct_path([N, N], NO_PREDECESSOR) == []


def test_reconstruct_path_outside_table():
    with pytest.raises(CapacityExceededError):
        reconstruct_path([N, N], 5)


def test_reconstruct_path_cycle():
    pred = [N, 2, 1]
    with pytest.raises(ValueError, match="cycle"):
        reconstruct_path(pred, 1)


def test_reconstruct_from_dijkstra(square1, mesh5):
    _, pred = dijkstra(square1, 1)
    assert reconstruct_path(pred, 3) == [1, 2, 3]

    costs, pred = dijkstra(mesh5, 0)
    path = reconstruct_path(pred, 3)
    assert path[0] == 0 and path[-1] == 3
    # Sum of the cheapest edges along the path equals the reported cost
    total = 0
    for u, v in zip(path, path[1:]):
        total += min(w for o, t, w in mesh5.edges() if (o, t) == (u, v))
    assert total == costs[3]
