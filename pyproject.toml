[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "sportstracker"
version = "0.1.0"
description = "Desktop browser for sports results: tournaments, rounds, standings, match statistics, lineups and history from a SQLite database"
requires-python = ">=3.10"
dependencies = []
keywords = ["sports", "football", "standings", "sqlite", "tournament", "statistics", "tkinter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Front-Ends",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sportstracker = "sportstracker.gui:main"

[tool.setuptools.packages.find]
include = ["sportstracker*"]

[tool.pytest.ini_options]
addopts = "-ra"
