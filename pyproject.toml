[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blastwave"
version = "0.1.0"
description = "Steady oblique-shock flow solver using Lax-Friedrichs flux splitting and fifth-order compact WENO differencing"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["cfd", "euler equations", "weno", "compact scheme", "shock wave", "finite difference"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
blastwave = "blastwave.solver:main"

[tool.hatch.build.targets.wheel]
packages = ["blastwave"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
