[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "loginacct"
version = "0.1.0"
description = "SQLite-backed user account store with a profile log and stored profile images"
requires-python = ">=3.10"
keywords = ["sqlite", "accounts", "profile", "images", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Front-Ends",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
loginacct = "loginacct.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["loginacct"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
