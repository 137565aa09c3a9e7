[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "travcore"
version = "0.1.0"
description = "Core data structures and text utilities: linked lists, incrementally rehashing hash tables, stacks, INI reading, hashing and string helpers."
requires-python = ">=3.10"
dependencies = []
keywords = ["hash table", "linked list", "stack", "ini", "murmurhash", "strings"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["travcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
