[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cpsolve"
version = "0.1.0"
description = "Competitive-programming data structures, graph algorithms and problem solvers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "competitive-programming",
    "graphs",
    "fenwick-tree",
    "segment-tree",
    "dynamic-programming",
]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cpsolve = "cpsolve.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cpsolve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
