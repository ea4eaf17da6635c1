[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cses_toolkit"
version = "0.1.0"
description = "Classic competitive-programming problems solved as plain Python functions"
requires-python = ">=3.10"
keywords = ["algorithms", "competitive-programming", "dynamic-programming", "graphs", "sorting"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Education",
    "Topic :: Education",
]
dependencies = [
    "sortedcontainers",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["cses_toolkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
