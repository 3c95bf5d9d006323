[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "melodius"
version = "0.1.0"
description = "Fast approximate trigonometry, audio level helpers and elementary special functions"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["trigonometry", "approximation", "gamma", "quadrature", "decibel", "math"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["melodius"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
