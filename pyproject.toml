[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cmdbench"
version = "0.1.0"
description = "Building blocks for benchmarking commands: duration formatting, outlier detection, parameter scans, session options and result exports"
requires-python = ">=3.10"
dependencies = []
keywords = ["benchmark", "statistics", "outliers", "markdown", "asciidoc", "org-mode", "csv", "json"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Benchmark",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cmdbench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
