[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gitcontrib"
version = "0.1.0"
description = "Terminal tool for analyzing contributions across git repositories"
requires-python = ">=3.10"
keywords = ["git", "tui", "statistics", "contribution"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Version Control :: Git",
]
dependencies = [
    "rich",
    "blessed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gitcontrib = "gitcontrib.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gitcontrib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
