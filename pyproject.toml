[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "iro"
version = "0.1.0"
description = "Scoped, nestable ANSI terminal colours and text effects that restore themselves"
requires-python = ">=3.10"
dependencies = []
keywords = ["ansi", "terminal", "color", "colour", "escape codes", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
iro-demo = "iro.examples:main"

[tool.hatch.build.targets.wheel]
packages = ["iro"]

[tool.pytest.ini_options]
addopts = "-ra"
