# kmeansr

K-means clustering for real-valued vectors of any dimension. The package
also has a small pygame window that draws two-dimensional datasets.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Command line

```
kmeansr
```

This opens an 800×600 window titled "Kmeans". The window shows the built-in
sample dataset of twenty 2D points on a white background. Close the window
to exit.

The points in the window are not clustered. None of them has a cluster, so
every point is drawn in black.

```
kmeansr --text [--clusters K] [--iterations N] [--seed S]
```

This mode does not open a window. It runs these steps:

1. It prints every sample point.
2. It prints a separator line.
3. It runs k-means on the points.
4. It prints every point again, each now showing its cluster index.

The options are:

- `--clusters K` sets the number of clusters. The default is 3.
- `--iterations N` sets the number of rounds. The default is 10000.
- `--seed S` seeds the random number generator, so that a run can be
  repeated.

Each point prints as `dim (2) cen (<index or unsigned>) [x,y]`.

## Library use

### Vectors (`kmeansr.vector`)

`VectorR(values, centroid=None)` holds a list of floats and, optionally,
the index of the cluster the vector belongs to. `dimension` is the number of
components. It has these methods:

- `zero()` sets every component to 0.
- `copy_from(other)` overwrites this vector's components with those of
  `other`.
- `add(other)` adds `other` to this vector in place.
- `scale(factor)` multiplies every component by `factor` in place.
- `distance(other)` returns the Euclidean distance to `other`.

A mismatch in dimension raises `ValueError`. So does calling `zero`, `add`
or `scale` on a vector with no components.

The module also has these free functions:

- `validate(dataset, dim)` returns whether every vector in the dataset has
  dimension `dim`.
- `distance(a, b)` returns the Euclidean distance between `a` and `b`.
- `dimension_of(dataset)` returns the common dimension of a dataset. It
  raises `ValueError` if the dataset is empty or its vectors differ in
  dimension.

### Clustering (`kmeansr.kmeans`)

`kmeans(dataset, k, iterations=10000, rng=None)` clusters the dataset:

1. It seeds `k` centroids by copying randomly chosen points.
2. It runs `iterations` rounds of assignment and update.
3. It returns the final centroids.

Each point's `centroid` attribute is left holding the index of its cluster.
`rng` is an optional `random.Random`.

`kmeans_once(dataset, k, centroids, rng=None)` runs a single round against
centroids you supply, changing them in place. This is useful when you want
to watch the clustering step by step.

In both functions, a centroid left with no points is reseeded from a random
data point.

### One-dimensional data (`kmeansr.scalar`)

- `Point(value, centroid=None)` is a single scalar value.
- `kmeans_1d(data, k, iterations=10000, rng=None)` clusters a sequence of
  points and returns the centroid values. It raises `ValueError` if `k`
  exceeds the number of points.
- `format_points(points)` renders points as one `(value:centroid)` line
  each.

### Drawing (`kmeansr.viz`)

- `draw_dataset_2d(surface, dataset)` draws each 2D point onto a pygame
  surface as a filled circle of radius 10. It raises `ValueError` if the
  dataset is not two-dimensional.
- `select_color(centroid)` returns the colour used for a cluster index.
  Indices 0 to 3 map to red, blue, green and yellow. Any other index, or
  `None`, gives black.

### Sample data (`kmeansr.app`)

`sample_dataset()` returns a fresh list of the twenty built-in sample
points.