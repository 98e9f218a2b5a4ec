[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cobra"
version = "0.1.0"
description = "A grid-based snake arcade game with a grid cell size you can change while playing"
requires-python = ">=3.10"
keywords = ["snake", "game", "arcade", "pygame", "grid"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cobra = "cobra.game:main"

[tool.hatch.build.targets.wheel]
packages = ["cobra"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
