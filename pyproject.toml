[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "booster"
version = "0.1.0"
description = "A side-scrolling platform game: run, jump and boost across endless platforms while dodging fireballs."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "platformer", "arcade", "pygame", "side-scroller"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
booster = "booster.run:main"

[tool.hatch.build.targets.wheel]
packages = ["booster"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
