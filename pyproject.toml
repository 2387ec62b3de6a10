[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tictoe"
version = "0.1.0"
description = "Console tic-tac-toe against a random computer opponent, driven by gamepad button names"
requires-python = ">=3.10"
dependencies = []
keywords = ["tic-tac-toe", "game", "console", "board game", "gamepad"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tictoe = "tictoe.game:main"

[tool.hatch.build.targets.wheel]
packages = ["tictoe"]

[tool.pytest.ini_options]
addopts = "-ra"
