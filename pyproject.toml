[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "radarsim"
version = "0.1.0"
description = "A small air-defence simulation: a spinning radar spots drones, filters out noise, and a launcher fires homing missiles."
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "radar", "drones", "missiles", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
radarsim = "radarsim.simulation:main"

[tool.hatch.build.targets.wheel]
packages = ["radarsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
