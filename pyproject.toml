[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blew"
version = "1.0.0"
description = "A small layered 2D game engine built on pygame"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "engine", "pygame", "2d", "layers", "camera"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
blew = "blew.app:main"

[tool.hatch.build.targets.wheel]
packages = ["blew"]

[tool.pytest.ini_options]
addopts = "-ra"
