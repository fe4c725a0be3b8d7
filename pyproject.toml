[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tenzing"
version = "0.1.0"
description = "Building blocks for benchmarking schedules of operations: statistics, randomness tests, stream/event equivalence and sparse matrices."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "scheduling",
    "benchmarking",
    "statistics",
    "runs test",
    "sparse matrix",
    "csr",
    "coo",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tenzing"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
