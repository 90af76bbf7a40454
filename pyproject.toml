[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dreamlang"
version = "0.1.0"
description = "Lexer, parser and syntax-tree printer for the Dream expression language"
requires-python = ">=3.10"
dependencies = []
keywords = ["lexer", "parser", "ast", "compiler", "language"]
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
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dreamlang = "dreamlang.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dreamlang"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
