[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rcdom"
version = "0.1.0"
description = "A simple document tree for HTML and XML tree builders, with a serialization walker and tree printers"
requires-python = ">=3.10"
dependencies = []
keywords = ["html", "xml", "dom", "tree", "tree-sink", "serialization"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Text Processing :: Markup :: HTML",
    "Topic :: Text Processing :: Markup :: XML",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rcdom"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
