[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hsdiff"
version = "0.1.0"
description = "Hard-sphere Helmholtz energy with forward and reverse automatic differentiation"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "automatic differentiation",
    "dual numbers",
    "thermodynamics",
    "helmholtz energy",
    "hard sphere",
    "equation of state",
]
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
    "Topic :: Scientific/Engineering :: Chemistry",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hsdiff = "hsdiff.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hsdiff"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
