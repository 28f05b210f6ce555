[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "entitykit"
version = "0.1.0"
description = "A small entity-component framework for games: entities, systems, health, lifetimes, movement, collisions, cameras, bullets and enemy spawners."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "entity-component", "ecs", "collision", "gamedev"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["entitykit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
