[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gravity"
version = "0.1.0"
description = "A small pygame game engine skeleton with input callbacks, named file roots and log value formatting"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "engine", "simulation", "callbacks", "input", "pygame"]
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
test = [
    "pytest",
]

[project.scripts]
gravity = "gravity.app:main"

[tool.hatch.build.targets.wheel]
packages = ["gravity"]

[tool.pytest.ini_options]
addopts = "-ra"
