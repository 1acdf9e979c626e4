[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "porotree"
version = "0.1.0"
description = "Binary search trees of poros ordered by volume, with a one-based poro vector"
requires-python = ">=3.10"
dependencies = []
keywords = ["binary search tree", "data structures", "tree traversal", "vector"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
porotree-demo = "porotree.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["porotree"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
