"""Command that shows or clusters a sample 2-D dataset."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence

import pygame

from kmeansr.kmeans import ITERATIONS, kmeans
from kmeansr.vector import VectorR
from kmeansr.viz import WHITE, draw_dataset_2d

WINDOW_SIZE = (800, 600)
WINDOW_TITLE = "Kmeans"

_SAMPLE_POINTS = (
    (750.00, 316.66),
    (50.00, 50.00),
    (269.50, 263.54),
    (165.40, 550.00),
    (300.00, 253.13),
    (181.80, 536.98),
    (88.50, 60.41),
    (500.00, 320.31),
    (400.0, 100.0),
    (600.0, 500.0),
    (200.0, 400.0),
    (700.0, 100.0),
    (100.0, 300.0),
    (450.0, 200.0),
    (550.0, 580.0),
    (250.0, 150.0),
    (350.0, 450.0),
    (650.0, 300.0),
    (150.0, 200.0),
    (750.0, 550.0),
)


def sample_dataset() -> list[VectorR]:
    """A fresh copy of the twenty built-in sample points."""
    return [VectorR(list(p)) for p in _SAMPLE_POINTS]


def _show_window(dataset: Sequence[VectorR]) -> None:
    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption(WINDOW_TITLE)
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
            screen.fill(WHITE)
            draw_dataset_2d(screen, dataset)
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="kmeansr", description=__doc__)
    parser.add_argument(
        "--text",
        action="store_true",
        help="print the dataset before and after clustering instead of opening a window",
    )
    parser.add_argument("--clusters", type=int, default=3)
    parser.add_argument("--iterations", type=int, default=ITERATIONS)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    dataset = sample_dataset()
    if not args.text:
        _show_window(dataset)
        return 0

    for point in dataset:
        print(point)
    print("---------------------------")
    kmeans(dataset, args.clusters, args.iterations, random.Random(args.seed))
    for point in dataset:
        print(point)
    return 0