[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "datetext"
version = "0.1.0"
description = "Calendar date arithmetic, word-oriented string helpers and simple person, address and period records"
requires-python = ">=3.10"
dependencies = []
keywords = ["date", "calendar", "leap year", "business days", "string", "words", "trim"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
datetext-date = "datetext.dates:main"
datetext-people = "datetext.people:main"

[tool.hatch.build.targets.wheel]
packages = ["datetext"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
