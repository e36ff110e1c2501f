[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "prodcat"
version = "0.1.0"
description = "Interactive product catalogue with small search, sorting, matrix, sequence and statistics helpers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "catalogue",
    "inventory",
    "products",
    "sorting",
    "search",
    "matrices",
    "statistics",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
prodcat = "prodcat.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["prodcat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
