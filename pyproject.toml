[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kmeansr"
version = "0.1.0"
description = "K-means clustering over real-valued vectors of any dimension, with a 2D pygame viewer"
requires-python = ">=3.10"
keywords = ["kmeans", "clustering", "data-mining", "vectors", "visualization"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Information Analysis",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
kmeansr = "kmeansr.app:main"

[tool.hatch.build.targets.wheel]
packages = ["kmeansr"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
