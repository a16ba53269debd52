[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "codewarrior"
version = "0.1.0"
description = "Small solutions to classic programming exercises: sequences, tables, counting and word puzzles."
requires-python = ">=3.10"
dependencies = []
keywords = ["exercises", "kata", "puzzles", "sequences", "strings"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["codewarrior"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
