[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chronolink"
version = "0.1.0"
description = "A terminal editor for writing and publishing dated history articles"
requires-python = ">=3.10"
dependencies = []
keywords = ["terminal", "text editor", "articles", "history", "console"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
chronolink = "chronolink.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["chronolink"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
