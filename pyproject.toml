[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sigmakit"
version = "0.1.0"
description = "Building blocks for 2.5D games: a named ARGB colour palette, box colliders, collision dispatch, a camera controller and buffered input."
requires-python = ">=3.10"
keywords = ["game", "engine", "collision", "colors", "input", "2.5d"]
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
    "Topic :: Games/Entertainment",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sigmakit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
