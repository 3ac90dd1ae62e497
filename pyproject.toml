[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tddbook"
version = "0.1.0"
description = "A small expression calculator, a book-swapping WSGI service and a handful of concurrency and sorting utilities."
requires-python = ">=3.10"
keywords = ["calculator", "wsgi", "bookswap", "werkzeug", "sqlite", "stack", "sorting"]
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
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Application",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]
dependencies = [
    "werkzeug",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tddbook-calculator = "tddbook.calculator.cli:main"
tddbook-greetings = "tddbook.toolbox.greetings:main"
tddbook-bookswap = "tddbook.bookswap.server:main"

[tool.hatch.build.targets.wheel]
packages = ["tddbook"]

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
