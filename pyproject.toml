[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aimdtools"
version = "0.1.0"
description = "Support utilities for ab initio molecular dynamics: physical constants, standard integration grids, vectors, a thread pool, timers and UTF-8 helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["molecular dynamics", "integration grid", "physical constants", "chemistry", "thread pool"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Chemistry",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["aimdtools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
