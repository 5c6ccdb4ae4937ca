"""One-dimensional k-means over plain scalar points."""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from kmeansr.kmeans import ITERATIONS

_FLT_MAX = 3.4028234663852886e38


@dataclass
class Point:
    """A scalar value and the index of the cluster it belongs to."""

    value: float
    centroid: int | None = None


def kmeans_1d(
    data: Sequence[Point],
    k: int,
    iterations: int = ITERATIONS,
    rng: random.Random | None = None,
) -> list[float]:
    """Cluster scalar points into ``k`` groups and return the centroids."""
    if k > len(data):
        raise ValueError(f"k ({k}) exceeds the number of points ({len(data)})")
    rng = rng or random.Random()
    centroids = [rng.choice(data).value for _ in range(k)]

    for _ in range(iterations):
        for point in data:
            best_index = 0
            best_distance = _FLT_MAX
            for index, centre in enumerate(centroids):
                d = abs(centre - point.value)
                if d < best_distance:
                    best_index = index
                    best_distance = d
            point.centroid = best_index

        for index in range(k):
            members = [p.value for p in data if p.centroid == index]
            if members:
                centroids[index] = sum(members) / len(members)
            else:
                centroids[index] = rng.choice(data).value
    return centroids


def format_points(points: Iterable[Point]) -> str:
    """Render points one per line as ``(value:centroid)``."""
    lines = []
    for point in points:
        cen = "unsigned" if point.centroid is None else str(point.centroid)
        lines.append(f"({point.value:f}:{cen})\n")
    return "".join(lines)