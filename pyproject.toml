[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "towerdefense"
version = "1.0.0"
description = "A small tower defense game with a pygame window and a console simulation"
requires-python = ">=3.10"
keywords = ["game", "tower defense", "strategy", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Real Time Strategy",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tower-defense = "towerdefense.app:main"
tower-defense-console = "towerdefense.console:main"

[tool.hatch.build.targets.wheel]
packages = ["towerdefense"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
