[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "studentform"
version = "0.1.0"
description = "Student information form model that saves and loads student records as UTF-8 text files."
requires-python = ">=3.10"
dependencies = []
keywords = ["student", "record", "form", "text file", "utf-8"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Natural Language :: Chinese (Simplified)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["studentform"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
