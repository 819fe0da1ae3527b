[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "probity"
version = "0.1.0"
description = "Unit-test assertions for integers, floats, strings and memory, a runner with plain-text reporting, and test-name filters"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "testing",
    "unit-testing",
    "assertions",
    "test-runner",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Testing :: Unit",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["probity"]

[tool.hatch.build.targets.sdist]
include = ["probity", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
