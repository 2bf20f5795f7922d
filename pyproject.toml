[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pypipex"
version = "0.1.0"
description = "C-style string, number, list and printf-formatting helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["printf", "formatting", "strings", "atoi", "linked list"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: System Shells",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Text Processing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pypipex"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
