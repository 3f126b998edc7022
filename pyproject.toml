[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "utfkit"
version = "0.1.0"
description = "Validation, length calculation and conversion between ASCII, Latin-1, UTF-8, UTF-16LE and UTF-32, plus a mutable UTF-8 byte string."
requires-python = ">=3.10"
dependencies = []
keywords = ["unicode", "utf-8", "utf-16", "utf-32", "latin-1", "encoding", "validation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: General",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["utfkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
