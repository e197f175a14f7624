import logging

from pathgraph.lib.algorithms.closure import build_closure
from pathgraph.lib.algorithms.spf import distance_between


def test_closure_chain(chain4):
    closure = build_closure(chain4)
    assert closure.vertex_ids() == [1, 2, 3, 4]
    edges = set(closure.edges())
    assert (1, 3, 3) in edges
    assert (1, 4, 0) in edges
    assert (1, 2, 1) in edges
    assert (2, 3, 2) in edges
    assert (3, 1, 0) in edges


def test_closure_is_dense_without_self_edges(chain4):
    closure = build_closure(chain4)
    n = len(chain4)
    assert closure.edge_count() == n * (n - 1)
    assert all(o != t for o, t, _ in closure.edges())


def test_closure_matches_pairwise_distances(mesh5):
    closure = build_closure(mesh5)
    for origin, target, weight in closure.edges():
        assert weight == distance_between(mesh5, origin, target)


def test_closure_sparse_ids_and_config(make_graph, big_config):
    g = make_graph([3, 40, 17], [(3, 17, 4), (17, 40, 6)], big_config)
    closure = build_closure(g)
    assert closure.config == big_config
    assert closure.vertex_ids() == [3, 17, 40]
    assert (3, 40, 10) in set(closure.edges())
    assert (40, 3, 0) in set(closure.edges())


def test_closure_leaves_input_untouched(chain4):
    before = list(chain4.edges())
    build_closure(chain4)
    assert list(chain4.edges()) == before


def test_closure_empty_graph(make_graph):
    closure = build_closure(make_graph([], []))
    assert len(closure) == 0
    assert closure.edge_count() == 0


def test_closure_skips_distance_beyond_weight_range(make_graph, caplog):
    g = make_graph([1, 2, 3], [(1, 2, 2**30), (2, 3, 2**30)])
    with caplog.at_level(logging.WARNING, logger="pathgraph"):
        closure = build_closure(g)
    assert (1, 2, 2**30) in set(closure.edges())
    assert not any(e[:2] == (1, 3) for e in closure.edges())
    assert closure.edge_count() == 5
    assert "exceeds the weight range" in caplog.text
