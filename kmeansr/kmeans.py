"""K-means clustering over datasets of :class:`VectorR`."""

from __future__ import annotations

import random
from collections.abc import Sequence

from kmeansr.vector import VectorR, dimension_of

ITERATIONS = 10000
_FLT_MAX = 3.4028234663852886e38


def kmeans_once(
    dataset: Sequence[VectorR],
    k: int,
    centroids: Sequence[VectorR],
    rng: random.Random | None = None,
) -> None:
    """Run one assignment and update step, modifying dataset and centroids."""
    rng = rng or random.Random()
    dim = dimension_of(dataset)

    for point in dataset:
        best_index = 0
        best_distance = _FLT_MAX
        for index, centroid in enumerate(centroids[:k]):
            d = centroid.distance(point)
            if d < best_distance:
                best_index = index
                best_distance = d
        point.centroid = best_index

    for index, centroid in enumerate(centroids[:k]):
        total = VectorR([0.0] * dim)
        members = [p for p in dataset if p.centroid == index]
        for point in members:
            total.add(point)
        if members:
            total.scale(1.0 / len(members))
            centroid.copy_from(total)
        else:
            centroid.copy_from(rng.choice(dataset))


def kmeans(
    dataset: Sequence[VectorR],
    k: int,
    iterations: int = ITERATIONS,
    rng: random.Random | None = None,
) -> list[VectorR]:
    """Cluster ``dataset`` into ``k`` groups and return the final centroids.

    Each point's ``centroid`` attribute is set to the index of its cluster.
    """
    rng = rng or random.Random()
    dimension_of(dataset)
    centroids = [VectorR(list(rng.choice(dataset).values)) for _ in range(k)]
    for _ in range(iterations):
        kmeans_once(dataset, k, centroids, rng)
    return centroids