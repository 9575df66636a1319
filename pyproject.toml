[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsapractice"
version = "0.1.0"
description = "Small data-structure and algorithm exercises: text patterns, array helpers, searches, linked lists and a bounded stack."
requires-python = ">=3.10"
dependencies = []
keywords = ["data structures", "algorithms", "linked list", "stack", "binary search", "patterns"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsapractice-patterns = "dsapractice.patterns:main"

[tool.hatch.build.targets.wheel]
packages = ["dsapractice"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
