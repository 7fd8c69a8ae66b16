[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bobtype"
version = "0.1.0"
description = "Game state, sound-chip model and monochrome raster drawing for a swimming typing game"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "typing", "raster", "psg", "font", "bitmap"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bobtype"]

[tool.pytest.ini_options]
addopts = "-ra"
