[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mysh"
version = "0.1.0"
description = "A small interactive POSIX-style shell with pipelines, redirection and trie-based command suggestions"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "posix", "pipeline", "redirection", "autocomplete", "trie"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mysh = "mysh.main:main"

[tool.hatch.build.targets.wheel]
packages = ["mysh"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
