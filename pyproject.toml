[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lotools"
version = "0.1.0"
description = "Small helpers for tuples, zipping, unzipping, cross joins and value coalescing"
requires-python = ">=3.10"
dependencies = []
keywords = ["tuples", "zip", "unzip", "cartesian-product", "coalesce", "utilities"]
classifiers = [
    "Development Status :: 4 - Beta",
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
packages = ["lotools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
