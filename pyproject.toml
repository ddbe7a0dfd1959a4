[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "matrixsearch"
version = "0.1.0"
description = "Binary-search algorithms over sorted sequences and matrices"
requires-python = ">=3.10"
dependencies = []
keywords = ["binary search", "matrix", "algorithms", "peak finding", "median"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
matrixsearch-journey = "matrixsearch.journey:main"

[tool.hatch.build.targets.wheel]
packages = ["matrixsearch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
