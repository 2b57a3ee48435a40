[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "valueguard"
version = "0.1.0"
description = "Deserialize loosely typed values into Python objects with precise, location-aware error messages"
requires-python = ">=3.10"
dependencies = []
keywords = ["deserialization", "validation", "json", "query-parameters", "errors"]
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
packages = ["valueguard"]

[tool.pytest.ini_options]
addopts = "-ra"
