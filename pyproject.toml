[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zappygui"
version = "0.1.0"
description = "Client toolkit for the Zappy game: server message buffering and description, plus 2D/3D math, text and file helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["zappy", "game", "client", "protocol", "vector", "matrix", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
zappygui = "zappygui.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["zappygui"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
