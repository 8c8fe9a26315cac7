[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quadsandbox"
version = "0.1.0"
description = "Small simulation models: track networks, grid fluid, A* units, game of life, bouncing balls, game state and view state."
requires-python = ">=3.11"
dependencies = []
keywords = [
    "simulation",
    "game",
    "pathfinding",
    "a-star",
    "game-of-life",
    "cellular-automaton",
    "fluid",
    "sprites",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["quadsandbox"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
warn_redundant_casts = true
