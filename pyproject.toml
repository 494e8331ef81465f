[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blockkd"
version = "0.1.0"
description = "Two-dimensional block KD-trees with leaf blocks, median splits and tree printing"
requires-python = ">=3.10"
dependencies = []
keywords = ["kd-tree", "block kd-tree", "spatial index", "nearest neighbour", "geometry"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
blockkd = "blockkd.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["blockkd"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
