[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bloxide"
version = "0.1.0"
description = "Compressible laminar boundary layer analysis using a self-similar solution."
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["boundary layer", "compressible flow", "aerodynamics", "heat transfer", "skin friction"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
bloxide = "bloxide.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bloxide"]

[tool.pytest.ini_options]
addopts = "-ra"
