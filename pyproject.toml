[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "alephlang"
version = "0.1.0"
description = "A tree-walking evaluator for Aleph, a small language built around sets, lists and atoms"
requires-python = ">=3.10"
dependencies = []
keywords = ["interpreter", "sets", "lists", "language", "ast"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["alephlang"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
