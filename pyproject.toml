[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordreduce"
version = "0.1.0"
description = "Word counting over a directory of text files in map, sort and reduce stages"
requires-python = ">=3.10"
dependencies = []
keywords = ["mapreduce", "word count", "text processing", "map", "reduce"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wordreduce = "wordreduce.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["wordreduce"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
