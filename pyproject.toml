[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "impomo"
version = "0.1.0"
description = "Pomodoro timer with a to-do list, task-based work sessions and daily statistics"
requires-python = ">=3.10"
dependencies = []
keywords = ["pomodoro", "timer", "productivity", "todo", "time-tracking"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
impomo = "impomo.app:main"

[tool.hatch.build.targets.wheel]
packages = ["impomo"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
