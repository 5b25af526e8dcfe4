[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "meterdisplay"
version = "0.0.1"
description = "JSON-backed language tables, a tree model over them and language CSV files for a metering display front end"
requires-python = ">=3.10"
dependencies = []
keywords = ["hmi", "translation", "localization", "json", "csv", "tree model"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Manufacturing",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Human Machine Interfaces",
    "Topic :: Software Development :: Localization",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["meterdisplay"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
