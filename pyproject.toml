[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "acidgraph"
version = "0.1.0"
description = "Small directed graph library with traversals, dominator trees and Graphviz output"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "directed graph", "dominator tree", "postorder", "graphviz", "control flow"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
acidgraph-cycle = "acidgraph.demos:cycle_main"
acidgraph-graph-viz = "acidgraph.demos:graph_viz_main"

[tool.hatch.build.targets.wheel]
packages = ["acidgraph"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
