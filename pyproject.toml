[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "prioqueues"
version = "0.1.0"
description = "Two max-priority queues, an ordered list and a binary heap, with an interactive menu and a timing benchmark"
requires-python = ">=3.10"
dependencies = []
keywords = ["priority queue", "heap", "data structures", "benchmark"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
prioqueues = "prioqueues.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["prioqueues"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
