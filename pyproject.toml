[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "payroll"
version = "0.1.0"
description = "Interactive console payroll manager: register employees by grade and compute monthly pay with overtime"
requires-python = ">=3.10"
dependencies = []
keywords = ["payroll", "employees", "salary", "overtime", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Indonesian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
payroll = "payroll.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["payroll"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
