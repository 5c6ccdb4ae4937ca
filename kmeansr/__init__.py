"""K-means clustering over real-valued vectors, with a 2D pygame viewer."""

__version__ = "0.1.0"
__all__ = ["vector", "kmeans", "scalar", "viz", "app"]