import random

import pytest

from kmeansr.scalar import Point, format_points, kmeans_1d


def test_k_larger_than_data_raises():
    with pytest.raises(ValueError):
        kmeans_1d([Point(1.0)], 2, iterations=1)


def test_separates_two_groups():
    data = [Point(150), Point(200), Point(250), Point(-570), Point(-600)]
    centroids = kmeans_1d(data, 2, iterations=50, rng=random.Random(4))
    assert len(centroids) == 2
    assert data[0].centroid == data[1].centroid == data[2].centroid
    assert data[3].centroid == data[4].centroid
    assert data[0].centroid != data[3].centroid
    assert sorted(centroids) == pytest.approx([-585.0, 200.0])


def test_single_cluster_is_mean():
    data = [Point(1.0), Point(2.0), Point(6.0)]
    (centre,) = kmeans_1d(data, 1, iterations=2, rng=random.Random(0))
    assert centre == pytest.approx(3.0)
    assert all(p.centroid == 0 for p in data)


def test_format_points():
    assert format_points([Point(1.5, 0)]) == "(1.500000:0)\n"


def test_format_points_one_line_each():
    points = [Point(float(i), i % 2) for i in range(4)]
    text = format_points(points)
    assert text.count("\n") == 4
    assert text.splitlines()[3].endswith(":1)")