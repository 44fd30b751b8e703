[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bloch"
version = "0.1.0"
description = "Lexer, parser and semantic analyser for the Bloch quantum programming language"
requires-python = ">=3.10"
dependencies = []
keywords = ["quantum", "programming-language", "compiler", "lexer", "parser", "ast"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bloch = "bloch.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bloch"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
