[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ferry"
version = "0.2.0"
description = "A ferry for your files: select them in one directory, then copy or move them into another."
requires-python = ">=3.10"
dependencies = [
    "platformdirs",
]
keywords = ["files", "copy", "move", "cli", "selection"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ferry = "ferry.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ferry"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
