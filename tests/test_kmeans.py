import random

import pytest

from kmeansr.kmeans import kmeans, kmeans_once
from kmeansr.vector import VectorR


def _two_blobs():
    left = [VectorR([0.0, 0.0]), VectorR([1.0, 0.5]), VectorR([0.5, 1.0])]
    right = [VectorR([100.0, 100.0]), VectorR([101.0, 99.5]), VectorR([99.5, 101.0])]
    return left, right


def test_kmeans_once_assigns_and_updates():
    data = [VectorR([0, 0]), VectorR([2, 0]), VectorR([10, 0]), VectorR([12, 0])]
    centroids = [VectorR([0, 0]), VectorR([10, 0])]
    kmeans_once(data, 2, centroids, random.Random(0))
    assert [p.centroid for p in data] == [0, 0, 1, 1]
    assert centroids[0].values == [1.0, 0.0]
    assert centroids[1].values == [11.0, 0.0]


def test_kmeans_once_empty_cluster_reinitialised_from_data():
    data = [VectorR([0, 0]), VectorR([1, 1]), VectorR([2, 0])]
    centroids = [VectorR([1, 0]), VectorR([1000, 1000])]
    kmeans_once(data, 2, centroids, random.Random(3))
    assert all(p.centroid == 0 for p in data)
    assert centroids[1].values in [p.values for p in data]


def test_kmeans_separates_blobs():
    left, right = _two_blobs()
    data = left + right
    centroids = kmeans(data, 2, iterations=50, rng=random.Random(7))
    assert len(centroids) == 2
    assert len({p.centroid for p in left}) == 1
    assert len({p.centroid for p in right}) == 1
    assert left[0].centroid != right[0].centroid


def test_kmeans_centroids_match_dimension():
    data = [VectorR([i, i * 2, -i]) for i in range(6)]
    centroids = kmeans(data, 3, iterations=5, rng=random.Random(1))
    assert [c.dimension for c in centroids] == [3, 3, 3]
    assert all(p.centroid in range(3) for p in data)


def test_kmeans_single_cluster_is_mean():
    data = [VectorR([1.0, 2.0]), VectorR([3.0, 2.0]), VectorR([2.0, 5.0])]
    (centroid,) = kmeans(data, 1, iterations=3, rng=random.Random(2))
    assert centroid.values == pytest.approx([2.0, 3.0])


def test_kmeans_empty_dataset_raises():
    with pytest.raises(ValueError):
        kmeans([], 2, iterations=1)


def test_kmeans_mixed_dimensions_raises():
    with pytest.raises(ValueError):
        kmeans([VectorR([1, 2]), VectorR([1, 2, 3])], 1, iterations=1)