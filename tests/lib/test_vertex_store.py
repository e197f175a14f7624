import random

from pathgraph.lib.result import Status
from pathgraph.lib.vertex_store import VertexStore


def test_insert_keeps_ascending_order():
    """Ids come out sorted regardless of insertion order."""
    store = VertexStore()
    for vertex_id in (5, 1, 3, 9, 0):
        assert store.insert(vertex_id).status == Status.OK
    assert store.ids() == [0, 1, 3, 5, 9]
    assert [v.id for v in store] == [0, 1, 3, 5, 9]


def test_insert_existing_is_unchanged():
    store = VertexStore()
    store.insert(2)
    store.find(2).adjacency.append(2, 4)

    result = store.insert(2)
    assert result.status == Status.UNCHANGED
    assert result  # no-op is not a failure
    assert len(store) == 1
    assert len(store.find(2).adjacency) == 1


def test_find_and_contains():
    store = VertexStore()
    store.insert(4)
    assert store.find(4).id == 4
    assert store.find(5) is None
    assert 4 in store
    assert 5 not in store
    assert "4" not in store


def test_remove_missing():
    store = VertexStore()
    store.insert(1)
    result = store.remove(2)
    assert result.status == Status.NOT_FOUND
    assert not result
    assert store.ids() == [1]


def test_remove_cascades_to_incoming_edges():
    store = VertexStore()
    for vertex_id in (1, 2, 3):
        store.insert(vertex_id)
    store.find(1).adjacency.append(2, 1)
    store.find(1).adjacency.append(3, 1)
    store.find(3).adjacency.append(2, 1)
    store.find(3).adjacency.append(2, 7)
    store.find(2).adjacency.append(1, 1)
    store.find(2).adjacency.append(2, 1)  # self loop

    result = store.remove(2)
    assert result.status == Status.OK
    # 3 incoming from others + self loop + 1 outgoing
    assert result.count == 5
    assert store.ids() == [1, 3]
    assert store.find(1).adjacency.targets() == [3]
    assert store.find(3).adjacency.targets() == []


def test_clear_releases_everything():
    store = VertexStore()
    for vertex_id in (1, 2):
        store.insert(vertex_id)
    store.find(1).adjacency.append(2, 1)
    assert store.clear() == 1
    assert len(store) == 0
    assert store.clear() == 0


def test_random_inserts_and_removes_keep_order():
    rng = random.Random(7)
    store = VertexStore()
    present = set()
    for _ in range(200):
        vertex_id = rng.randrange(20)
        if rng.random() < 0.6:
            store.insert(vertex_id)
            present.add(vertex_id)
        else:
            store.remove(vertex_id)
            present.discard(vertex_id)
        ids = store.ids()
        assert ids == sorted(present)
        assert all(a < b for a, b in zip(ids, ids[1:]))
