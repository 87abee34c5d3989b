[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gradebook"
version = "0.1.0"
description = "Building blocks for a console system that keeps student, course and grade records"
requires-python = ">=3.10"
dependencies = []
keywords = ["grades", "gradebook", "students", "teachers", "courses", "console"]
classifiers = [
    "Development Status :: 3 - Alpha",
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

[tool.hatch.build.targets.wheel]
packages = ["gradebook"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
