[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sidediff"
version = "0.1.1"
description = "Terminal viewer that shows a side-by-side diff of two text files"
requires-python = ">=3.10"
keywords = ["diff", "terminal", "tui", "side-by-side", "curses"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console :: Curses",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Filters",
    "Topic :: Utilities",
]
dependencies = [
    "pygments",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sidediff = "sidediff.app:main"

[tool.hatch.build.targets.wheel]
packages = ["sidediff"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
