[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "batalla"
version = "0.1.0"
description = "A small turn-based console battle game between wizards and warriors armed with magic items and combat weapons"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "rpg", "battle", "wizards", "warriors", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
batalla-demo = "batalla.demo:main"
batalla-factory = "batalla.factory:main"
batalla = "batalla.juego:main"

[tool.hatch.build.targets.wheel]
packages = ["batalla"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
