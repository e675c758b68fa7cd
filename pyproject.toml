[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kyotools"
version = "0.1.0"
description = "Competitive programming helpers: N-dimensional prefix sums, interval sets, Dijkstra, debug printing and random test-case generation"
requires-python = ">=3.10"
dependencies = [
    "sortedcontainers",
]
keywords = ["competitive-programming", "algorithms", "data-structures", "prefix-sum", "dijkstra"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
kyotools-template = "kyotools.utils:main"
kyotools-sample = "kyotools.sample:main"
kyotools-gen = "kyotools.random_gen:main"

[tool.hatch.build.targets.wheel]
packages = ["kyotools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
