[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gosh"
version = "0.1.0"
description = "A small interactive shell with file, notes and math builtins"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "repl", "notes", "calculator", "command-line"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gosh = "gosh.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["gosh"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
