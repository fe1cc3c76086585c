[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shotliner"
version = "0.1.0"
description = "Data model for lined screenplays: shot lines, production tags, tagged elements and a command history"
requires-python = ">=3.10"
dependencies = []
keywords = ["screenplay", "shot list", "lining script", "film production", "annotation"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Multimedia :: Video",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["shotliner"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
