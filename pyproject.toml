[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "askflow"
version = "0.0.1"
description = "Interactive command-line questionnaires: text, yes/no and select questions with validators and conditional visibility"
requires-python = ">=3.10"
dependencies = []
keywords = ["prompt", "inquirer", "cli", "terminal", "questionnaire", "interactive"]
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
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Terminals",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
askflow-demo = "askflow.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["askflow"]

[tool.pytest.ini_options]
addopts = "-ra"
