[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lazydijkstra"
version = "0.1.0"
description = "Dijkstra's shortest paths over lazily generated graphs, returning a hashed parent-pointer tree"
requires-python = ">=3.10"
dependencies = []
keywords = ["dijkstra", "shortest-path", "graph", "priority-queue", "min-heap", "linked-list"]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lazydijkstra-demo = "lazydijkstra.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["lazydijkstra"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
