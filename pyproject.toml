[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hwwval"
version = "0.1.0"
description = "Electron identification inputs, pile-up effective areas and particle-flow isolation for H->WW validation"
requires-python = ">=3.10"
dependencies = []
keywords = ["physics", "hep", "electron-id", "isolation", "effective-area", "mva"]
classifiers = [
    "Development Status :: 4 - Beta",
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
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hwwval"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
