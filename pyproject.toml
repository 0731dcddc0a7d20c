[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "wordlegame"
version = "0.1.0"
description = "A terminal word-guessing game in the style of Wordle"
requires-python = ">=3.10"
dependencies = []
keywords = ["wordle", "game", "terminal", "puzzle", "words"]
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
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wordlegame = "wordlegame.game:main"

[tool.setuptools.packages.find]
include = ["wordlegame*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
