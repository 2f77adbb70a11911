[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "uniformarray"
version = "0.1.0"
description = "A class decorator that lets uniformly typed dataclasses be indexed like fixed-length sequences"
requires-python = ">=3.10"
dependencies = []
keywords = ["dataclass", "decorator", "sequence", "indexing", "uniform"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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
packages = ["uniformarray"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
