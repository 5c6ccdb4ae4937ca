"""Drawing of two-dimensional datasets coloured by cluster."""

from __future__ import annotations

from collections.abc import Sequence

import pygame

from kmeansr.vector import VectorR, validate

DOT_RADIUS = 10

RED = (230, 41, 55, 255)
BLUE = (0, 121, 241, 255)
GREEN = (0, 228, 48, 255)
YELLOW = (253, 249, 0, 255)
BLACK = (0, 0, 0, 255)
WHITE = (255, 255, 255, 255)

COLOR_WHEEL = (RED, BLUE, GREEN, YELLOW)


def select_color(centroid: int | None) -> tuple[int, int, int, int]:
    """Colour for a cluster index; unassigned or out-of-range points are black."""
    if centroid is not None and 0 <= centroid < len(COLOR_WHEEL):
        return COLOR_WHEEL[centroid]
    return BLACK


def draw_dataset_2d(surface: pygame.Surface, dataset: Sequence[VectorR]) -> None:
    """Draw each 2-D point as a filled circle in its cluster's colour."""
    if not validate(dataset, 2):
        raise ValueError("dataset must be two-dimensional")
    for point in dataset:
        x, y = point.values
        pygame.draw.circle(
            surface, select_color(point.centroid), (int(x), int(y)), DOT_RADIUS
        )