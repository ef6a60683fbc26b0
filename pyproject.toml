[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "warmups"
version = "0.1.0"
description = "Solutions to short competitive-programming warm-up problems as plain Python functions"
requires-python = ">=3.10"
dependencies = []
keywords = ["competitive-programming", "exercises", "puzzles", "algorithms", "practice"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
warmups = "warmups.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["warmups"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
