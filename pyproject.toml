[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shootergame"
version = "0.1.0"
description = "Headless core of a moddable top-down shooter: vectors, colours, shapes, colliders, entities, scenes and a frame loop."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "shooter", "collision", "entities", "scenes", "geometry"]
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
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["shootergame"]

[tool.pytest.ini_options]
addopts = "-ra"
