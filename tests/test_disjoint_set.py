import pytest

import dense_graph as dg


def test_singletons():
    ds = dg.DisjointSet(5)
    assert len(ds) == 5
    assert ds.sets() == 5
    for x in range(5):
        assert ds.find(x) == x
        assert ds.cardinality(x) == 1


def test_unite():
    ds = dg.DisjointSet(6)
    assert ds.unite(0, 1)
    assert ds.unite(2, 3)
    assert ds.unite(1, 3)
    assert not ds.unite(0, 2)

    assert ds.sets() == 3
    assert ds.same_set(0, 3)
    assert not ds.same_set(0, 4)
    assert ds.cardinality(2) == 4
    assert ds.cardinality(5) == 1
    assert len({ds.find(x) for x in range(4)}) == 1


def test_path_compression():
    ds = dg.DisjointSet(8)
    for x in range(7):
        ds.unite(x, x + 1)
    root = ds.find(7)
    # find is idempotent and flattens the path
    assert ds.find(7) == root
    for x in range(8):
        assert ds.find(x) == root
        assert ds._parent[x] == root
    assert ds.sets() == 1
    assert ds.cardinality(0) == 8


@pytest.mark.parametrize("seed", range(5))
def test_against_labels(seed):
    import random

    rng = random.Random(seed)
    n = 30
    ds = dg.DisjointSet(n)
    labels = list(range(n))
    for _ in range(20):
        x, y = rng.randrange(n), rng.randrange(n)
        merged = labels[x] != labels[y]
        assert ds.unite(x, y) == merged
        if merged:
            old = labels[y]
            labels = [labels[x] if label == old else label for label in labels]

    assert ds.sets() == len(set(labels))
    for x in range(n):
        for y in range(n):
            assert ds.same_set(x, y) == (labels[x] == labels[y])
        assert ds.cardinality(x) == labels.count(labels[x])
