"""Real-valued vectors of arbitrary dimension used as data points and centroids."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field


@dataclass
class VectorR:
    """A point in R^n, optionally tagged with the index of its cluster."""

    values: list[float] = field(default_factory=list)
    centroid: int | None = None

    def __post_init__(self) -> None:
        self.values = [float(v) for v in self.values]

    @property
    def dimension(self) -> int:
        return len(self.values)

    def _require_nonempty(self) -> None:
        if not self.values:
            raise ValueError("vector has no components")

    def _require_same_dimension(self, other: VectorR) -> None:
        if self.dimension != other.dimension:
            raise ValueError(
                f"dimension mismatch: {self.dimension} != {other.dimension}"
            )

    def zero(self) -> None:
        """Set every component to zero."""
        self._require_nonempty()
        self.values = [0.0] * self.dimension

    def copy_from(self, other: VectorR) -> None:
        """Overwrite this vector's components with those of ``other``."""
        self._require_same_dimension(other)
        self.values = list(other.values)

    def distance(self, other: VectorR) -> float:
        """Euclidean distance to ``other``."""
        self._require_same_dimension(other)
        return math.sqrt(sum((a - b) ** 2 for a, b in zip(self.values, other.values)))

    def add(self, other: VectorR) -> None:
        """Add ``other`` to this vector in place."""
        self._require_nonempty()
        self._require_same_dimension(other)
        self.values = [a + b for a, b in zip(self.values, other.values)]

    def scale(self, factor: float) -> None:
        """Multiply every component by ``factor`` in place."""
        self._require_nonempty()
        self.values = [v * factor for v in self.values]

    def __str__(self) -> str:
        cen = "unsigned" if self.centroid is None else str(self.centroid)
        body = ",".join(f"{v:f}" for v in self.values)
        return f"dim ({self.dimension}) cen ({cen}) [{body}]"


def validate(dataset: Iterable[VectorR], dim: int) -> bool:
    """Return True if every vector in ``dataset`` has dimension ``dim``."""
    return all(v.dimension == dim for v in dataset)


def distance(a: VectorR, b: VectorR) -> float:
    """Euclidean distance between two vectors of equal dimension."""
    return a.distance(b)


def dimension_of(dataset: Sequence[VectorR]) -> int:
    """Common dimension of a non-empty, uniform dataset."""
    if not dataset:
        raise ValueError("dataset is empty")
    dim = dataset[0].dimension
    if not validate(dataset, dim):
        raise ValueError("dataset vectors differ in dimension")
    return dim