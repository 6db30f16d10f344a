[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cursorlist"
version = "0.1.0"
description = "A doubly linked list with a movable cursor, plus a small demo and a scored check suite"
requires-python = ">=3.10"
dependencies = []
keywords = ["linked list", "doubly linked list", "cursor", "data structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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

[project.scripts]
cursorlist-demo = "cursorlist.demo:main"
cursorlist-grade = "cursorlist.grader:main"

[tool.hatch.build.targets.wheel]
packages = ["cursorlist"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
