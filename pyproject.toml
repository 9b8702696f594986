[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "condraw"
version = "0.1.0"
description = "Character-cell drawing on an in-memory console screen: boxes, connectors, shapes, trees, a line editor and a weighted graph viewer."
requires-python = ">=3.10"
dependencies = []
keywords = ["console", "terminal", "ascii-art", "box-drawing", "dijkstra", "graph", "binary-tree"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
condraw-editor = "condraw.editor:main"
condraw-graph = "condraw.graph_view:main"

[tool.hatch.build.targets.wheel]
packages = ["condraw"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
