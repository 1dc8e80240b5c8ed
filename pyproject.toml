[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spacefactory"
version = "0.1.0"
description = "A small space factory simulation core with an interactive command line for managing recipes"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "factory", "game", "recipes", "inventory", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
spacefactory = "spacefactory.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["spacefactory"]

[tool.pytest.ini_options]
addopts = "-ra"
