from pathgraph.lib.adjacency import AdjacencyList, Edge
from pathgraph.lib.algorithms.base import UNSET_WEIGHT


def test_append_keeps_order_and_duplicates():
    """Appending never merges edges to the same target."""
    adj = AdjacencyList()
    adj.append(2, 5)
    adj.append(3, 1)
    adj.append(2, 5)
    assert len(adj) == 3
    assert adj.targets() == [2, 3, 2]
    assert list(adj) == [Edge(2, 5), Edge(3, 1), Edge(2, 5)]


def test_remove_first_match_only_removes_one():
    adj = AdjacencyList()
    adj.append(2, 1)
    adj.append(3, 2)
    adj.append(2, 3)

    assert adj.remove_first_match(2) is True
    assert list(adj) == [Edge(3, 2), Edge(2, 3)]


def test_remove_first_match_missing():
    adj = AdjacencyList()
    adj.append(2, 1)
    assert adj.remove_first_match(9) is False
    assert len(adj) == 1


def test_remove_all_matches():
    adj = AdjacencyList()
    for target in (1, 2, 1, 3, 1):
        adj.append(target, 4)
    assert adj.remove_all_matches(1) == 3
    assert adj.targets() == [2, 3]
    assert adj.remove_all_matches(1) == 0


def test_remove_all_is_idempotent():
    adj = AdjacencyList()
    adj.append(1, 1)
    adj.append(2, 2)
    assert adj.remove_all() == 2
    assert len(adj) == 0
    assert adj.remove_all() == 0


def test_edge_is_connection():
    assert Edge(1, 3).is_connection
    assert not Edge(1, 0).is_connection
    assert not Edge(1, UNSET_WEIGHT).is_connection


def test_has_connection_to_ignores_placeholder_records():
    adj = AdjacencyList()
    adj.append(2, 0)
    assert not adj.has_connection_to(2)
    adj.append(2, 6)
    assert adj.has_connection_to(2)
    assert not adj.has_connection_to(3)
