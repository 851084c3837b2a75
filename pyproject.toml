[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "evotsp"
version = "0.1.0"
description = "A small genetic algorithm that evolves a target string, and a nearest-neighbour travelling salesman solver"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "genetic-algorithm",
    "evolutionary-computation",
    "crossover",
    "mutation",
    "tournament-selection",
    "travelling-salesman",
    "nearest-neighbour",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
evotsp-evolve = "evotsp.evolve:main"
evotsp-tsp = "evotsp.tsp_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["evotsp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
