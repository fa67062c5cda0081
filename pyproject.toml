[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "contestkit"
version = "0.1.0"
description = "Solutions to programming-contest problems as a small, tested Python library"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "competitive-programming", "contest", "puzzles", "education"]
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
    "Topic :: Education",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["contestkit*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
