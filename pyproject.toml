[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "placar"
version = "0.1.0"
description = "Byte-frame model and command controller for a serial sports scoreboard"
requires-python = ">=3.10"
dependencies = []
keywords = ["scoreboard", "serial", "crc8", "sports", "timer", "frame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
placar = "placar.runner:main"

[tool.hatch.build.targets.wheel]
packages = ["placar"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
