[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "owllang"
version = "0.1.0"
description = "Lexer for the Owl programming language, with a command that prints the token stream of .ow files"
requires-python = ">=3.10"
dependencies = []
keywords = ["owl", "lexer", "tokenizer", "scanner", "programming-language"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
owl = "owllang.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["owllang"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
