[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xxrlcs"
version = "0.1.0"
description = "Building blocks for XCS and XCSR learning classifier systems, with an experiment runner"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "learning classifier system",
    "xcs",
    "xcsr",
    "reinforcement learning",
    "genetic algorithm",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["xxrlcs"]

[tool.pytest.ini_options]
addopts = "-ra"
