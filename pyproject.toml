[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arvores"
version = "0.1.0"
description = "Binary search trees, self-balancing AVL trees and radix trees with text rendering and Graphviz export"
requires-python = ">=3.10"
dependencies = []
keywords = ["tree", "binary search tree", "avl", "radix tree", "graphviz", "data structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
arvores-students = "arvores.students:main"
arvores-avl = "arvores.avl:main"
arvores-radix = "arvores.radix:main"
arvores-words = "arvores.wordtree:main"

[tool.hatch.build.targets.wheel]
packages = ["arvores"]

[tool.pytest.ini_options]
addopts = "-ra"
