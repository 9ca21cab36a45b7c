[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "enumkeyed"
version = "0.5.0"
description = "Containers indexed by the values of finite enumerations: total maps, partial maps, bounded vectors and bitsets"
requires-python = ">=3.10"
dependencies = []
keywords = ["enum", "flags", "map", "vector", "bitset"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["enumkeyed"]

[tool.hatch.build.targets.sdist]
include = ["enumkeyed", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
