[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "corazones"
version = "0.1.0"
description = "Load a heart-disease CSV dataset, sort its attributes into categories and compute entropy measures"
requires-python = ">=3.10"
dependencies = []
keywords = ["entropy", "information gain", "csv", "heart disease", "dataset"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
corazones = "corazones.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["corazones"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
