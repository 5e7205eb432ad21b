[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "promethean"
version = "1.0.0"
description = "Minimal 2D game engine core: ECS, events, states, tile maps, collision, pathfinding and saves"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "engine", "2d", "ecs", "tilemap", "tmx", "pathfinding", "a-star"]
classifiers = [
    "Development Status :: 4 - Beta",
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["promethean"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
