[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "robotkit"
version = "0.1.0"
description = "Millisecond stopwatch timer with ordering comparisons and randomised sleeps"
requires-python = ">=3.10"
dependencies = []
keywords = ["timer", "stopwatch", "sleep", "monotonic", "milliseconds"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["robotkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
