[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "matchjson"
version = "0.1.0"
description = "Structural pattern matching over parsed JSON values, with bindings, alternatives and rest captures"
requires-python = ">=3.10"
dependencies = []
keywords = ["json", "pattern matching", "destructuring", "match"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
matchjson-demo = "matchjson.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["matchjson"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
