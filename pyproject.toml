[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "justcore"
version = "0.1.0"
description = "Building blocks of a justfile command runner: justfile search, shebang parsing, tokens, scopes, settings and error messages"
requires-python = ">=3.10"
dependencies = ["wcwidth"]
keywords = ["command-runner", "justfile", "build", "tasks", "shebang"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["justcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
