[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "datecraft"
version = "0.1.0"
description = "Calendar arithmetic, date shifting, periods, vacation days and printable month calendars"
requires-python = ">=3.10"
dependencies = []
keywords = ["date", "calendar", "leap year", "weekday", "period", "vacation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
datecraft = "datecraft.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["datecraft"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
