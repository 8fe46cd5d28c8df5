[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "daalab"
version = "0.1.0"
description = "Classic algorithm exercises: array statistics, sorting, searching, knapsack, shortest paths and LCS"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "sorting",
    "searching",
    "knapsack",
    "dynamic-programming",
    "floyd-warshall",
    "lcs",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
daalab = "daalab.cli:main"
daalab-benchmark = "daalab.benchmark:main"

[tool.hatch.build.targets.wheel]
packages = ["daalab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
