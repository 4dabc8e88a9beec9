[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tamapet"
version = "0.1.0"
description = "A virtual pet simulation with a tiny monochrome canvas UI toolkit"
requires-python = ">=3.10"
dependencies = []
keywords = ["tamagotchi", "virtual-pet", "simulation", "monochrome", "canvas", "ui"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tamapet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
