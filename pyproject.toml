[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rogueai"
version = "0.1.0"
description = "Game AI building blocks: procedural dungeon generation, steering behaviours and hierarchical pathfinding"
requires-python = ">=3.10"
dependencies = []
keywords = ["roguelike", "dungeon", "procedural-generation", "steering", "pathfinding", "a-star", "ecs"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rogueai = "rogueai.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rogueai"]

[tool.pytest.ini_options]
addopts = "-ra"
