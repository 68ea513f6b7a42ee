[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "libdstruct"
version = "0.1.0"
description = "Classic data structures (priority queues, hierarchies, trees, networks) with a complexity analyzer"
requires-python = ">=3.10"
dependencies = []
keywords = ["data structures", "priority queue", "heap", "tree", "hierarchy", "graph", "complexity"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["libdstruct"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
