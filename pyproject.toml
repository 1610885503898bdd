[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "refugio"
version = "0.1.0"
description = "Data structures for a dog shelter and interpreter commands that exercise them"
requires-python = ">=3.10"
dependencies = []
keywords = ["data structures", "binary search tree", "heap", "hash table", "shelter"]
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
    "Topic :: Software Development :: Libraries",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["refugio*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
