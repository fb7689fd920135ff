[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "interpolab"
version = "0.1.0"
description = "Compare Lagrange, Newton and Hermite polynomial interpolation on uniform and Chebyshev nodes"
requires-python = ">=3.10"
dependencies = []
keywords = ["interpolation", "lagrange", "newton", "hermite", "chebyshev", "numerical-analysis", "gnuplot"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
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
test = ["pytest"]

[project.scripts]
interpolab = "interpolab.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["interpolab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
