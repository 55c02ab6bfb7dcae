[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ledtictactoe"
version = "1.0.0"
description = "Tic-tac-toe against a simple AI on a 5x5 RGB LED matrix, played by joystick or by claps"
requires-python = ">=3.10"
dependencies = []
keywords = ["tic-tac-toe", "game", "led", "ws2812", "matrix", "ai"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ledtictactoe = "ledtictactoe.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ledtictactoe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
