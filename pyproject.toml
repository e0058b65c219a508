[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flagkit"
version = "0.1.0"
description = "Building blocks for command-line flag handling: multi-value flag types, short-option splitting, typo suggestions, help and completion helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["cli", "flags", "command-line", "completion", "suggestions"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Environment :: Console",
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
packages = ["flagkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
