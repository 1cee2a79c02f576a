[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algobook"
version = "0.1.0"
description = "Classic algorithms and data structures: string search, suffix arrays, number theory, geometry, graphs, segment trees, treaps and more."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "aho-corasick",
    "suffix-array",
    "graph",
    "dijkstra",
    "segment-tree",
    "treap",
    "convex-hull",
    "tsp",
]
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
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algobook-familytree = "algobook.rmq:main"

[tool.hatch.build.targets.wheel]
packages = ["algobook"]

[tool.hatch.build.targets.sdist]
include = ["algobook", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
