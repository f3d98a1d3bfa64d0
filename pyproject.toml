[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "repofetch"
version = "0.1.0"
description = "Building blocks for summarising a Git repository: info fields, language shares, sizes, pending changes, versions and ANSI-styled terminal output."
requires-python = ">=3.10"
dependencies = []
keywords = ["git", "repository", "summary", "terminal", "ansi"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Version Control :: Git",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["repofetch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
