[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "codemark"
version = "0.1.0"
description = "Lexer, parser and option registry for comment markers such as +domain:resource:option=value"
requires-python = ">=3.10"
dependencies = []
keywords = ["markers", "annotations", "code generation", "lexer", "parser", "registry"]
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
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["codemark"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
