[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsabasics"
version = "0.1.0"
description = "Basic number routines, small sequence exercises and text patterns"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "gcd", "divisors", "primes", "patterns", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsabasics = "dsabasics.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dsabasics"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
