[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ultitactoe"
version = "0.1.0"
description = "Ultimate tic-tac-toe for two players at the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["tic-tac-toe", "ultimate", "game", "terminal", "board game"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ultitactoe = "ultitactoe.game:main"

[tool.hatch.build.targets.wheel]
packages = ["ultitactoe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
