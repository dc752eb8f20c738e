[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "studentroster"
version = "0.1.0"
description = "Read, list, search, filter, sort and save a class roster of students and their scores."
requires-python = ">=3.10"
dependencies = []
keywords = ["students", "roster", "grades", "average", "classroom"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
studentroster = "studentroster.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["studentroster"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
