[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flexon"
version = "0.4.2"
description = "JSON parsing building blocks: parser settings, byte classification, comments and exact float conversion"
requires-python = ">=3.10"
dependencies = []
keywords = ["json", "jsonc", "parser", "float", "comment", "eisel-lemire"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: File Formats :: JSON",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["flexon"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
