[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tadlab"
version = "0.1.0"
description = "Classic abstract data types (chains, trees, AVL, sets, heaps, maps, graphs) with a command interpreter to exercise them"
requires-python = ">=3.10"
dependencies = []
keywords = ["data structures", "avl", "binary search tree", "priority queue", "graph", "linked list", "interpreter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tadlab = "tadlab.interprete:main"

[tool.hatch.build.targets.wheel]
packages = ["tadlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
