[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mazesearch"
version = "0.1.0"
description = "Search and planning algorithms for small grid maze games: greedy, beam, Chokudai, hill climbing, simulated annealing, minimax, alpha-beta, Monte Carlo, MCTS, Thunder and DUCT."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "game ai",
    "search",
    "beam search",
    "minimax",
    "alpha-beta",
    "monte carlo tree search",
    "mcts",
    "duct",
    "simulated annealing",
    "maze",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mazesearch"]

[tool.hatch.build.targets.sdist]
include = ["mazesearch", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
