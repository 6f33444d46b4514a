[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "parkingres"
version = "0.1.0"
description = "Car and fine records for a car parking reservation system, stored in SQLite"
requires-python = ">=3.10"
dependencies = []
keywords = ["parking", "reservation", "fines", "sqlite"]
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
    "Topic :: Database",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["parkingres"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
